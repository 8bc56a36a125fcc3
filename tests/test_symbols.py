"""Tests for the symbol-code table: injectivity and separator safety.

These run before anything else is trusted: if the table allowed a code to
contain the separator digit, two different code sequences could join to
the same digit string.
"""

import pytest

from godelnum.errors import SymbolTableError
from godelnum.symbols import (
    SEPARATOR,
    SYMBOL_CODES,
    Symbol,
    check_symbol_table,
    code,
    symbol_table_problems,
)


def test_no_code_contains_separator() -> None:
    for sym, c in SYMBOL_CODES.items():
        assert SEPARATOR not in str(c), f"{sym.name} code {c} contains separator"


def test_codes_are_injective() -> None:
    codes = list(SYMBOL_CODES.values())
    assert len(codes) == len(set(codes))


def test_every_symbol_has_positive_code() -> None:
    for sym in Symbol:
        assert SYMBOL_CODES[sym] > 0


def test_separator_is_single_digit() -> None:
    assert len(SEPARATOR) == 1 and SEPARATOR.isdigit()


def test_shipped_table_has_no_problems() -> None:
    assert symbol_table_problems(SYMBOL_CODES) == []
    check_symbol_table(SYMBOL_CODES)


def test_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        SYMBOL_CODES[Symbol.ZERO] = 99  # type: ignore[index]


def test_code_renders_decimal() -> None:
    assert code(Symbol.ZERO) == "1"
    assert code(Symbol.FORALL) == "11"
    assert code(Symbol.PROOF) == "17"


class TestBadTables:
    def _table(self, **overrides: int) -> dict[Symbol, int]:
        table = dict(SYMBOL_CODES)
        for name, value in overrides.items():
            table[Symbol[name]] = value
        return table

    def test_code_containing_separator_rejected(self) -> None:
        table = self._table(TIMES=10)
        problems = symbol_table_problems(table)
        assert any("separator" in p for p in problems)
        with pytest.raises(SymbolTableError, match="TIMES"):
            check_symbol_table(table)

    def test_duplicate_code_rejected(self) -> None:
        table = self._table(OR=13)
        with pytest.raises(SymbolTableError, match="share code 13"):
            check_symbol_table(table)

    def test_missing_symbol_rejected(self) -> None:
        table = dict(SYMBOL_CODES)
        del table[Symbol.PROOF]
        with pytest.raises(SymbolTableError, match="PROOF"):
            check_symbol_table(table)

    def test_non_positive_code_rejected(self) -> None:
        with pytest.raises(SymbolTableError):
            check_symbol_table(self._table(STAR=-9))

    def test_other_separator_checked_against_codes(self) -> None:
        # 11, 12, ... all contain the digit 1
        problems = symbol_table_problems(SYMBOL_CODES, separator="1")
        assert len(problems) >= 7

    def test_multi_digit_separator_rejected(self) -> None:
        assert symbol_table_problems(SYMBOL_CODES, separator="00")
