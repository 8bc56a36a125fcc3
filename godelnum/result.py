"""Ok/Err result values for setup steps that report failure instead of raising.

Used where a failure is an expected outcome the caller should branch on
(e.g. loading settings from the environment); encoding errors raise instead.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    def __str__(self) -> str:
        return str(self.error)


type Result[T, E] = Ok[T] | Err[E]
