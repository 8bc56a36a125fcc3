"""Runtime settings, read from the environment (and a ``.env`` file if present).

    GODELNUM_NUMERAL_LIMIT   largest n for which a unary numeral is built
                             (default 256; "none" disables the ceiling)
    GODELNUM_NUMERAL_STYLE   "unary" or "compact" (default "compact")
    GODELNUM_LOG_LEVEL       logging level name (default "WARNING")
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import load_dotenv

from godelnum.numerals import NumeralStyle
from godelnum.result import Err, Ok, Result

# Comparing or hashing a unary numeral recurses once per Succ node, so values
# much deeper than this run into the interpreter's recursion limit.
DEFAULT_NUMERAL_LIMIT = 256


@dataclass(frozen=True)
class Settings:
    numeral_limit: int | None = DEFAULT_NUMERAL_LIMIT
    numeral_style: NumeralStyle = NumeralStyle.COMPACT
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Result["Settings", ValueError]:
        """Build settings from *environ* (default: ``os.environ`` after ``load_dotenv``)."""
        if environ is None:
            load_dotenv()
            environ = os.environ

        match environ.get("GODELNUM_NUMERAL_LIMIT", "").strip().lower():
            case "":
                limit: int | None = DEFAULT_NUMERAL_LIMIT
            case "none" | "off":
                limit = None
            case raw if raw.isdigit():
                limit = int(raw)
            case raw:
                return Err(ValueError(f"GODELNUM_NUMERAL_LIMIT must be a nonnegative integer or 'none', got {raw!r}"))

        raw_style = environ.get("GODELNUM_NUMERAL_STYLE", "").strip().lower()
        try:
            style = NumeralStyle(raw_style) if raw_style else NumeralStyle.COMPACT
        except ValueError:
            choices = ", ".join(s.value for s in NumeralStyle)
            return Err(ValueError(f"GODELNUM_NUMERAL_STYLE must be one of {choices}, got {raw_style!r}"))

        level = environ.get("GODELNUM_LOG_LEVEL", "").strip().upper() or "WARNING"
        if not isinstance(logging.getLevelName(level), int):
            return Err(ValueError(f"GODELNUM_LOG_LEVEL is not a logging level: {level!r}"))

        return Ok(cls(numeral_limit=limit, numeral_style=style, log_level=level))
