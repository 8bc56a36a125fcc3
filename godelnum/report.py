"""Text reports for the command line, rendered from Jinja2 templates."""

from __future__ import annotations

import logging
import os
from typing import Any

import jinja2

from godelnum.axioms import PEANO_AXIOMS
from godelnum.config import Settings
from godelnum.diagonal import godel_sentence, provability_schema
from godelnum.encode import join_codes, tokenize, tokenize_term
from godelnum.errors import NumeralTooLarge
from godelnum.helpers import ZERO, add, eq, s, var
from godelnum.numerals import NumeralStyle, quote
from godelnum.render import format_expr
from godelnum.symbols import SEPARATOR, SYMBOL_CODES
from godelnum.terms import Expr

logger = logging.getLogger(__name__)

_TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), "templates")
_ENV = jinja2.Environment(
    loader=jinja2.FileSystemLoader(_TEMPLATE_DIR),
    autoescape=False,
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template with the given keyword arguments."""
    template = _ENV.get_template(template_name)
    return template.render(**kwargs)


def _entry(expr: Expr, label: str = "") -> dict[str, Any]:
    codes = tokenize(expr)
    return {
        "label": label,
        "text": format_expr(expr),
        "codes": codes,
        "number": join_codes(codes),
    }


def table_report() -> str:
    rows = [
        {"symbol": sym.value, "name": sym.name, "code": c}
        for sym, c in sorted(SYMBOL_CODES.items(), key=lambda kv: kv[1])
    ]
    return render("table.txt.j2", rows=rows, separator=SEPARATOR)


def axioms_report() -> str:
    entries = [_entry(ax.formula, ax.label) for ax in PEANO_AXIOMS]
    return render("axioms.txt.j2", axioms=entries)


def numeral_report(n: int, style: NumeralStyle, limit: int | None) -> str:
    """Raises InvalidArgument / NumeralTooLarge for an unusable *n*."""
    term = quote(n, style, limit=limit)
    return render("numeral.txt.j2", n=n, style=style.value, numeral=_entry(term))


def demo_report(settings: Settings) -> str:
    """The full walk-through: example term, axioms, schema, Gödel sentence."""
    term = add(var("x"), s(ZERO))
    schema = provability_schema()

    note = None
    try:
        sentence = godel_sentence(settings.numeral_style, limit=settings.numeral_limit)
    except NumeralTooLarge as e:
        logger.info("Falling back to a compact numeral: %s", e)
        note = str(e)
        sentence = godel_sentence(NumeralStyle.COMPACT)

    return render(
        "demo.txt.j2",
        term={"text": format_expr(term), "codes": tokenize_term(term)},
        term_equation=_entry(eq(term, term)),
        axioms=[_entry(ax.formula, ax.label) for ax in PEANO_AXIOMS],
        schema=_entry(schema),
        sentence=_entry(sentence),
        note=note,
    )
