"""Human-readable rendering of terms and formulas.

For display only: the output is not part of the encoding and there is no
parser that reads it back.
"""

from __future__ import annotations

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


def format_term(term: Term) -> str:
    depth = 0
    while isinstance(term, Succ):
        term = term.term
        depth += 1

    match term:
        case Zero():
            inner = "0"
        case Var():
            inner = term.name
        case Add(left, right):
            inner = f"({format_term(left)} + {format_term(right)})"
        case Mul(left, right):
            inner = f"({format_term(left)} × {format_term(right)})"
        case _:
            raise TypeError(f"Unknown term type: {type(term).__name__}")

    return "S(" * depth + inner + ")" * depth


def format_formula(formula: Formula) -> str:
    match formula:
        case Eq(left, right):
            return f"({format_term(left)} = {format_term(right)})"
        case Lt(left, right):
            return f"({format_term(left)} < {format_term(right)})"
        case Not(inner):
            return f"¬({format_formula(inner)})"
        case And(left, right):
            return f"({format_formula(left)} ∧ {format_formula(right)})"
        case Or(left, right):
            return f"({format_formula(left)} ∨ {format_formula(right)})"
        case ForAll(variable, body):
            return f"∀{variable.name}({format_formula(body)})"
        case Exists(variable, body):
            return f"∃{variable.name}({format_formula(body)})"
        case Proof(proof, coded):
            return f"Proof({format_term(proof)}, {format_term(coded)})"
        case _:
            raise TypeError(f"Unknown formula type: {type(formula).__name__}")


def format_expr(expr: Expr) -> str:
    if isinstance(expr, TERM_TYPES):
        return format_term(expr)
    if isinstance(expr, FORMULA_TYPES):
        return format_formula(expr)
    raise TypeError(f"Expected Term or Formula, got {type(expr).__name__}")
