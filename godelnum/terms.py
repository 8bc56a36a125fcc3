"""Terms and formulas of first-order Peano arithmetic.

A term is an arithmetic expression built from:
  - Zero (the constant 0)
  - Variables x, x*, x**, ... (identified by their star count)
  - Successor S(t)
  - Addition (t₁ + t₂) and multiplication (t₁ × t₂)

A formula is built from atomic relations over terms (=, <, Proof), the
connectives ¬, ∧, ∨ and the quantifiers ∀, ∃.

All nodes are frozen dataclasses: immutable, hashable, and compared by
structure. Behaviour (encoding, rendering, substitution) lives in separate
modules that dispatch over every variant.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import InvalidVariable

# ---------------------------------------------------------------------------
# Term AST
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Zero:
    """The constant 0."""


@dataclass(frozen=True)
class Var:
    """The k-th variable in the sequence x, x*, x**, ...

    Example: x** — Var(2)
    """

    stars: int

    def __post_init__(self) -> None:
        if isinstance(self.stars, bool) or not isinstance(self.stars, int):
            raise InvalidVariable(
                f"Star count must be an int, got {type(self.stars).__name__}"
            )
        if self.stars < 0:
            raise InvalidVariable(f"Star count must be >= 0, got {self.stars}")

    @property
    def name(self) -> str:
        return "x" + "*" * self.stars


@dataclass(frozen=True)
class Succ:
    """Successor: S(t)."""

    term: Term


@dataclass(frozen=True)
class Add:
    """Addition: (t₁ + t₂)."""

    left: Term
    right: Term


@dataclass(frozen=True)
class Mul:
    """Multiplication: (t₁ × t₂)."""

    left: Term
    right: Term


# Union of all term forms
Term = Zero | Var | Succ | Add | Mul

TERM_TYPES = (Zero, Var, Succ, Add, Mul)


_VAR_NAME = re.compile(r"x(\**)")


def var_named(name: str) -> Var:
    """Parse a variable name of the form ``x`` followed by zero or more ``*``."""
    m = _VAR_NAME.fullmatch(name) if isinstance(name, str) else None
    if m is None:
        raise InvalidVariable(f"Variable name must be 'x' followed by stars, got {name!r}")
    return Var(len(m.group(1)))


# ---------------------------------------------------------------------------
# Formulas
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Eq:
    """Equality between two terms.

    Example: (x + 0) = x
    """

    left: Term
    right: Term


@dataclass(frozen=True)
class Lt:
    """Strict order between two terms.

    Example: 0 < S(x)
    """

    left: Term
    right: Term


@dataclass(frozen=True)
class Not:
    """Negation of a formula."""

    formula: Formula


@dataclass(frozen=True)
class And:
    """Conjunction of two formulas."""

    left: Formula
    right: Formula


@dataclass(frozen=True)
class Or:
    """Disjunction of two formulas."""

    left: Formula
    right: Formula


@dataclass(frozen=True)
class ForAll:
    """Universal quantification of one variable.

    Example: ∀x ¬(S(x) = 0)
    """

    variable: Var
    body: Formula

    def __post_init__(self) -> None:
        if not isinstance(self.variable, Var):
            raise InvalidVariable(
                f"Quantifier must bind a Var, got {type(self.variable).__name__}"
            )


@dataclass(frozen=True)
class Exists:
    """Existential quantification of one variable.

    Example: ∃x* (x < x*)
    """

    variable: Var
    body: Formula

    def __post_init__(self) -> None:
        if not isinstance(self.variable, Var):
            raise InvalidVariable(
                f"Quantifier must bind a Var, got {type(self.variable).__name__}"
            )


@dataclass(frozen=True)
class Proof:
    """The arithmetized proof relation: ``proof`` codes a proof of ``formula``.

    Both arguments are terms (normally numerals of Gödel numbers). The
    relation is atomic for coding purposes; nothing evaluates it.
    """

    proof: Term
    formula: Term


# Union of all formula forms
Formula = Eq | Lt | Not | And | Or | ForAll | Exists | Proof

FORMULA_TYPES = (Eq, Lt, Not, And, Or, ForAll, Exists, Proof)

Expr = Term | Formula
