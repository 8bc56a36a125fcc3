"""The symbol-code table.

Every grammar symbol gets a fixed positive integer code. A Gödel number is
the decimal concatenation of a formula's codes, joined by SEPARATOR, so two
properties must hold for the number to determine the code sequence:

  - the table is injective (distinct symbols, distinct codes)
  - no code's decimal form contains the separator digit

Code 10 is skipped for the second reason. Both properties are checked when
this module is imported.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from .errors import SymbolTableError


class Symbol(Enum):
    ZERO = "0"
    SUCC = "S"
    PLUS = "+"
    EQUALS = "="
    LESS = "<"
    LPAREN = "("
    RPAREN = ")"
    VAR = "x"
    STAR = "*"
    FORALL = "∀"
    EXISTS = "∃"
    AND = "∧"
    OR = "∨"
    NOT = "¬"
    TIMES = "×"
    PROOF = "Proof"


SEPARATOR = "0"

SYMBOL_CODES: Mapping[Symbol, int] = MappingProxyType({
    Symbol.ZERO:   1,
    Symbol.SUCC:   2,
    Symbol.PLUS:   3,
    Symbol.EQUALS: 4,
    Symbol.LESS:   5,
    Symbol.LPAREN: 6,
    Symbol.RPAREN: 7,
    Symbol.VAR:    8,
    Symbol.STAR:   9,
    Symbol.FORALL: 11,
    Symbol.EXISTS: 12,
    Symbol.AND:    13,
    Symbol.OR:     14,
    Symbol.NOT:    15,
    Symbol.TIMES:  16,
    Symbol.PROOF:  17,
})


def symbol_table_problems(
    table: Mapping[Symbol, int], separator: str = SEPARATOR
) -> list[str]:
    """Return a description of every way *table* is unfit for encoding.

    An empty list means the table is total over Symbol, injective, uses
    positive codes only, and no code contains *separator*.
    """
    problems: list[str] = []

    if len(separator) != 1 or not separator.isdigit():
        problems.append(f"Separator must be a single digit, got {separator!r}")

    missing = [s.name for s in Symbol if s not in table]
    if missing:
        problems.append(f"Symbols without a code: {missing}")

    seen: dict[int, Symbol] = {}
    for sym, code in table.items():
        if isinstance(code, bool) or not isinstance(code, int) or code <= 0:
            problems.append(f"{sym.name} has non-positive or non-int code {code!r}")
            continue
        if separator in str(code):
            problems.append(
                f"{sym.name} code {code} contains separator digit {separator!r}"
            )
        if code in seen:
            problems.append(
                f"{sym.name} and {seen[code].name} share code {code}"
            )
        else:
            seen[code] = sym

    return problems


def check_symbol_table(
    table: Mapping[Symbol, int], separator: str = SEPARATOR
) -> None:
    """Raise SymbolTableError if *table* cannot be used for unambiguous encoding."""
    problems = symbol_table_problems(table, separator)
    if problems:
        raise SymbolTableError("; ".join(problems))


def code(symbol: Symbol) -> str:
    """Decimal code string for *symbol*."""
    return str(SYMBOL_CODES[symbol])


check_symbol_table(SYMBOL_CODES)
