"""Gödel encoding of terms and formulas.

Encoding runs in two stages:

  1. Tokenize: a pre-order, fully parenthesized walk of the syntax tree,
     emitting one code string per grammar symbol.
  2. Assemble: join the codes with SEPARATOR and read the digit string as
     an exact integer.

Because no code contains the separator digit, the integer determines the
code sequence, and because the parenthesized grammar is unambiguous the
code sequence determines the tree. Distinct trees therefore get distinct
numbers.
"""

from __future__ import annotations

from .symbols import SEPARATOR, Symbol, code
from .terms import (
    FORMULA_TYPES,
    TERM_TYPES,
    Add,
    And,
    Eq,
    Exists,
    Expr,
    ForAll,
    Formula,
    Lt,
    Mul,
    Not,
    Or,
    Proof,
    Succ,
    Term,
    Var,
    Zero,
)

_ZERO = code(Symbol.ZERO)
_SUCC = code(Symbol.SUCC)
_PLUS = code(Symbol.PLUS)
_EQUALS = code(Symbol.EQUALS)
_LESS = code(Symbol.LESS)
_LPAREN = code(Symbol.LPAREN)
_RPAREN = code(Symbol.RPAREN)
_VAR = code(Symbol.VAR)
_STAR = code(Symbol.STAR)
_FORALL = code(Symbol.FORALL)
_EXISTS = code(Symbol.EXISTS)
_AND = code(Symbol.AND)
_OR = code(Symbol.OR)
_NOT = code(Symbol.NOT)
_TIMES = code(Symbol.TIMES)
_PROOF = code(Symbol.PROOF)


# ---------------------------------------------------------------------------
# Tokenization
# ---------------------------------------------------------------------------


def tokenize_term(term: Term) -> list[str]:
    """Symbol codes of *term*, in order, as decimal strings."""
    out: list[str] = []
    _emit_term(term, out)
    return out


def tokenize_formula(formula: Formula) -> list[str]:
    """Symbol codes of *formula*, in order, as decimal strings."""
    out: list[str] = []
    _emit_formula(formula, out)
    return out


def tokenize(expr: Expr) -> list[str]:
    if isinstance(expr, TERM_TYPES):
        return tokenize_term(expr)
    if isinstance(expr, FORMULA_TYPES):
        return tokenize_formula(expr)
    raise TypeError(f"Expected Term or Formula, got {type(expr).__name__}")


def _emit_var(v: Var, out: list[str]) -> None:
    out.append(_VAR)
    out.extend([_STAR] * v.stars)


def _emit_infix(left: Term, op: str, right: Term, out: list[str]) -> None:
    out.append(_LPAREN)
    _emit_term(left, out)
    out.append(op)
    _emit_term(right, out)
    out.append(_RPAREN)


def _emit_term(term: Term, out: list[str]) -> None:
    # Succ chains (numerals) can be arbitrarily deep; unroll them iteratively.
    depth = 0
    while isinstance(term, Succ):
        out.append(_SUCC)
        out.append(_LPAREN)
        term = term.term
        depth += 1

    if isinstance(term, Zero):
        out.append(_ZERO)
    elif isinstance(term, Var):
        _emit_var(term, out)
    elif isinstance(term, Add):
        _emit_infix(term.left, _PLUS, term.right, out)
    elif isinstance(term, Mul):
        _emit_infix(term.left, _TIMES, term.right, out)
    else:
        raise TypeError(f"Unknown term type: {type(term).__name__}")

    out.extend([_RPAREN] * depth)


def _emit_connective(left: Formula, op: str, right: Formula, out: list[str]) -> None:
    out.append(_LPAREN)
    _emit_formula(left, out)
    out.append(op)
    _emit_formula(right, out)
    out.append(_RPAREN)


def _emit_quantifier(q: str, v: Var, body: Formula, out: list[str]) -> None:
    out.append(q)
    _emit_var(v, out)
    out.append(_LPAREN)
    _emit_formula(body, out)
    out.append(_RPAREN)


def _emit_formula(formula: Formula, out: list[str]) -> None:
    if isinstance(formula, Eq):
        _emit_infix(formula.left, _EQUALS, formula.right, out)
    elif isinstance(formula, Lt):
        _emit_infix(formula.left, _LESS, formula.right, out)
    elif isinstance(formula, Not):
        out.append(_NOT)
        _emit_formula(formula.formula, out)
    elif isinstance(formula, And):
        _emit_connective(formula.left, _AND, formula.right, out)
    elif isinstance(formula, Or):
        _emit_connective(formula.left, _OR, formula.right, out)
    elif isinstance(formula, ForAll):
        _emit_quantifier(_FORALL, formula.variable, formula.body, out)
    elif isinstance(formula, Exists):
        _emit_quantifier(_EXISTS, formula.variable, formula.body, out)
    elif isinstance(formula, Proof):
        _emit_infix(formula.proof, _PROOF, formula.formula, out)
    else:
        raise TypeError(f"Unknown formula type: {type(formula).__name__}")


# ---------------------------------------------------------------------------
# Integer assembly
# ---------------------------------------------------------------------------


def join_codes(codes: list[str]) -> str:
    """Concatenate code strings with the separator digit."""
    return SEPARATOR.join(codes)


def godel_string(expr: Expr) -> str:
    """Decimal digit string of the Gödel number of *expr*."""
    return join_codes(tokenize(expr))


def encode_to_integer(expr: Expr) -> int:
    """The Gödel number of a term or formula.

    Python ints are arbitrary precision, so the result is exact however
    large it grows. Use godel_string() to display it: str() of an int
    longer than sys.get_int_max_str_digits() digits raises ValueError.
    """
    return parse_digits(godel_string(expr))


# int(str) refuses strings longer than sys.get_int_max_str_digits() (4300 by
# default), so long digit strings are folded in chunks below that bound.
_CHUNK_DIGITS = 4000


def parse_digits(digits: str) -> int:
    """Read a nonnegative decimal digit string of any length as an int."""
    if not digits or not digits.isdigit():
        raise ValueError(f"Not a decimal digit string: {digits[:20]!r}")
    n = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start:start + _CHUNK_DIGITS]
        n = n * 10 ** len(chunk) + int(chunk)
    return n
