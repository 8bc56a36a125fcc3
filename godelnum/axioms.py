"""Axioms of Peano arithmetic as Formula values.

Each axiom is universally closed over x (Var(0)) and x* (Var(1)). The
induction schema is not a single formula and is not included.

Usage:
    from godelnum.axioms import PEANO_AXIOMS
    for ax in PEANO_AXIOMS:
        print(ax.label, encode_to_integer(ax.formula))
"""

from __future__ import annotations

from dataclasses import dataclass

from godelnum.helpers import (
    ZERO,
    add,
    disj,
    eq,
    forall,
    implies,
    lt,
    mul,
    neg,
    s,
    var,
)
from godelnum.terms import Formula


@dataclass(frozen=True)
class Axiom:
    """A named axiom."""

    label: str
    formula: Formula


x = var("x")
y = var("x*")

# =====================================================================
# Successor
# =====================================================================

ZERO_NOT_SUCCESSOR = Axiom(
    "zero_not_successor",
    forall(x, neg(eq(s(x), ZERO))),
)

SUCCESSOR_INJECTIVE = Axiom(
    "successor_injective",
    forall(x, forall(y, implies(eq(s(x), s(y)), eq(x, y)))),
)

# =====================================================================
# Addition
# =====================================================================

ADD_ZERO = Axiom(
    "add_zero",
    forall(x, eq(add(x, ZERO), x)),
)

ADD_SUCC = Axiom(
    "add_succ",
    forall(x, forall(y, eq(add(x, s(y)), s(add(x, y))))),
)

# =====================================================================
# Multiplication
# =====================================================================

MUL_ZERO = Axiom(
    "mul_zero",
    forall(x, eq(mul(x, ZERO), ZERO)),
)

MUL_SUCC = Axiom(
    "mul_succ",
    forall(x, forall(y, eq(mul(x, s(y)), add(mul(x, y), x)))),
)

# =====================================================================
# Order
# =====================================================================

NOTHING_BELOW_ZERO = Axiom(
    "nothing_below_zero",
    forall(x, neg(lt(x, ZERO))),
)

LESS_THAN_SUCC = Axiom(
    "less_than_succ",
    forall(x, forall(y, implies(lt(x, s(y)), disj(lt(x, y), eq(x, y))))),
)

PEANO_AXIOMS: tuple[Axiom, ...] = (
    ZERO_NOT_SUCCESSOR,
    SUCCESSOR_INJECTIVE,
    ADD_ZERO,
    ADD_SUCC,
    MUL_ZERO,
    MUL_SUCC,
    NOTHING_BELOW_ZERO,
    LESS_THAN_SUCC,
)
