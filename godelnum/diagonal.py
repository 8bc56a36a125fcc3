"""Diagonalization: the self-reference step.

Given P(x) with one free variable x, the diagonal of P is the sentence

    P(⌜P⌝) = P[x := quote(g(P))]

obtained by substituting a term for P's own Gödel number. Taking

    P(x) = ∀y ¬Proof(y, x)

gives the Gödel sentence G, which says that the formula coded by g(P), the
formula G is built from, has no proof.

Substitution does not alpha-rename. diagonalize() refuses formulas where the
designated variable is also bound somewhere, rather than silently building a
different sentence; callers choose non-colliding variables.
"""

from __future__ import annotations

import logging

from .encode import encode_to_integer
from .errors import Unsubstitutable
from .numerals import NumeralStyle, quote
from .substitution import bound_variables, free_variables, substitute
from .terms import ForAll, Formula, Not, Proof, Var

logger = logging.getLogger(__name__)


def diagonalize(
    formula: Formula,
    variable: Var,
    *,
    style: NumeralStyle = NumeralStyle.UNARY,
    limit: int | None = None,
) -> Formula:
    """The closed sentence formula[variable := quote(g(formula))].

    Raises Unsubstitutable if *variable* is not free in *formula*, is also
    bound in it, or if any other variable is free (the result would not be
    a sentence). With the default UNARY style the numeral is Θ(g) in size,
    which is infeasible for any real formula; pass *limit* to fail fast with
    NumeralTooLarge, or use NumeralStyle.COMPACT.
    """
    free = free_variables(formula)
    if variable not in free:
        raise Unsubstitutable(f"Variable {variable.name} does not occur free")
    if variable in bound_variables(formula):
        raise Unsubstitutable(
            f"Variable {variable.name} is also bound in the formula"
        )
    others = sorted(v.name for v in free - {variable})
    if others:
        raise Unsubstitutable(
            f"Result would not be a sentence: other free variables {others}"
        )

    g = encode_to_integer(formula)
    logger.debug(
        "Diagonalizing on %s: Gödel number has %d bits, quoting as %s",
        variable.name,
        g.bit_length(),
        style.value,
    )
    return substitute(formula, variable, quote(g, style, limit=limit))


def provability_schema() -> Formula:
    """P(x) = ∀x* ¬Proof(x*, x): "nothing proves the formula coded by x"."""
    x = Var(0)
    y = Var(1)
    return ForAll(y, Not(Proof(y, x)))


def godel_sentence(
    style: NumeralStyle = NumeralStyle.COMPACT, *, limit: int | None = None
) -> Formula:
    """The diagonal of the provability schema on x."""
    return diagonalize(provability_schema(), Var(0), style=style, limit=limit)
