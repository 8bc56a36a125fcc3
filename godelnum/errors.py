"""Errors raised by the encoding core.

Every error stems from an invalid caller-supplied argument; nothing here is
transient, so callers should fix the input rather than retry.
"""

from __future__ import annotations


class GodelError(ValueError):
    """Base class for all godelnum errors."""


class InvalidVariable(GodelError):
    """A variable's star count is negative, not an int, or its name is malformed."""


class InvalidArgument(GodelError):
    """A numeral was requested for a value that is not a nonnegative int."""


class NumeralTooLarge(InvalidArgument):
    """A unary numeral was requested above the caller-supplied size ceiling."""

    def __init__(self, n: int, limit: int) -> None:
        super().__init__(
            f"Numeral for {n} exceeds limit {limit} "
            f"(a unary numeral has one Succ node per unit)"
        )
        self.n = n
        self.limit = limit


class Unsubstitutable(GodelError):
    """Substitution would produce an incorrect or non-closed result."""


class SymbolTableError(GodelError):
    """The symbol-code table violates injectivity or separator safety."""
