"""Numerals: the term representation of a concrete natural number.

The standard numeral for n is n nested successors over zero:

    numeral(3) = S(S(S(0)))

Its size is Θ(n), which is fine for small n but hopeless for Gödel
numbers: the Gödel number of even Eq(0, 0) is 601040107, and the numeral of a
realistic formula's number would need more nodes than there are atoms in
the universe. This is a property of the domain, not something numeral()
hides. Callers handling untrusted or large inputs pass ``limit``.

compact_numeral() is the alternative: a closed term of size O(log n) built
in binary Horner form, whose value (see evaluate()) is still n.
"""

from __future__ import annotations

import logging
from enum import Enum

from .errors import InvalidArgument, NumeralTooLarge, Unsubstitutable
from .terms import Add, Mul, Succ, Term, Var, Zero

logger = logging.getLogger(__name__)


class NumeralStyle(Enum):
    UNARY = "unary"
    COMPACT = "compact"


def _check_natural(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgument(f"Numeral target must be an int, got {type(n).__name__}")
    if n < 0:
        raise InvalidArgument(f"Numeral target must be >= 0, got {n}")


def numeral(n: int, *, limit: int | None = None) -> Term:
    """The unary numeral S(S(...S(0)...)) with exactly *n* successors.

    Raises InvalidArgument if n is negative, and NumeralTooLarge if *limit*
    is given and n exceeds it. Time and memory are linear in n.
    """
    _check_natural(n)
    if limit is not None and n > limit:
        logger.warning("Rejected unary numeral of size %d (limit %d)", n, limit)
        raise NumeralTooLarge(n, limit)

    result: Term = Zero()
    for _ in range(n):
        result = Succ(result)
    logger.debug("Built unary numeral with %d successors", n)
    return result


_TWO: Term = Succ(Succ(Zero()))


def compact_numeral(n: int) -> Term:
    """A closed term of size O(log n) whose value is *n*.

    0 ↦ 0,  1 ↦ S(0),  2q ↦ (S(S(0)) × q̄),  2q+1 ↦ S((S(S(0)) × q̄))
    """
    _check_natural(n)
    bits = bin(n)[2:] if n > 0 else ""

    # Horner's rule from the most significant bit down.
    result: Term = Zero()
    for i, bit in enumerate(bits):
        if i == 0:
            result = Succ(Zero())
            continue
        result = Mul(_TWO, result)
        if bit == "1":
            result = Succ(result)
    return result


def quote(n: int, style: NumeralStyle = NumeralStyle.UNARY, *, limit: int | None = None) -> Term:
    """The term denoting *n* in the requested style.

    *limit* bounds unary numerals only; compact numerals are always small.
    """
    match style:
        case NumeralStyle.UNARY:
            return numeral(n, limit=limit)
        case NumeralStyle.COMPACT:
            return compact_numeral(n)
        case _:
            raise ValueError(f"Unknown numeral style: {style!r}")


def numeral_value(term: Term) -> int | None:
    """n if *term* is exactly the unary numeral for n, otherwise None."""
    count = 0
    while isinstance(term, Succ):
        term = term.term
        count += 1
    return count if isinstance(term, Zero) else None


def evaluate(term: Term) -> int:
    """The natural number denoted by a closed term.

    Raises Unsubstitutable if the term contains a variable.
    """
    depth = 0
    while isinstance(term, Succ):
        term = term.term
        depth += 1

    if isinstance(term, Zero):
        value = 0
    elif isinstance(term, Var):
        raise Unsubstitutable(f"Cannot evaluate open term: contains variable {term.name}")
    elif isinstance(term, Add):
        value = evaluate(term.left) + evaluate(term.right)
    elif isinstance(term, Mul):
        value = evaluate(term.left) * evaluate(term.right)
    else:
        raise TypeError(f"Unknown term type: {type(term).__name__}")

    return value + depth
