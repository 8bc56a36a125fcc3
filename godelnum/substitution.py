"""Free variables and substitution.

substitute() replaces the free occurrences of a variable by a term. It does
not rename bound variables: if the replacement mentions a variable that a
quantifier would capture, it raises Unsubstitutable instead of producing a
formula that means something else.
"""

from __future__ import annotations

import logging

from .errors import Unsubstitutable
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

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Variable analysis
# ---------------------------------------------------------------------------


def _term_vars(term: Term, acc: set[Var]) -> None:
    while isinstance(term, Succ):
        term = term.term
    if isinstance(term, Var):
        acc.add(term)
    elif isinstance(term, (Add, Mul)):
        _term_vars(term.left, acc)
        _term_vars(term.right, acc)
    elif not isinstance(term, Zero):
        raise TypeError(f"Unknown term type: {type(term).__name__}")


def _formula_free_vars(formula: Formula, acc: set[Var]) -> None:
    if isinstance(formula, (Eq, Lt)):
        _term_vars(formula.left, acc)
        _term_vars(formula.right, acc)
    elif isinstance(formula, Proof):
        _term_vars(formula.proof, acc)
        _term_vars(formula.formula, acc)
    elif isinstance(formula, Not):
        _formula_free_vars(formula.formula, acc)
    elif isinstance(formula, (And, Or)):
        _formula_free_vars(formula.left, acc)
        _formula_free_vars(formula.right, acc)
    elif isinstance(formula, (ForAll, Exists)):
        inner: set[Var] = set()
        _formula_free_vars(formula.body, inner)
        inner.discard(formula.variable)
        acc |= inner
    else:
        raise TypeError(f"Unknown formula type: {type(formula).__name__}")


def free_variables(expr: Expr) -> frozenset[Var]:
    """Variables with at least one occurrence not under a binding quantifier."""
    acc: set[Var] = set()
    if isinstance(expr, TERM_TYPES):
        _term_vars(expr, acc)
    elif isinstance(expr, FORMULA_TYPES):
        _formula_free_vars(expr, acc)
    else:
        raise TypeError(f"Expected Term or Formula, got {type(expr).__name__}")
    return frozenset(acc)


def bound_variables(formula: Formula) -> frozenset[Var]:
    """Variables bound by some quantifier in *formula*."""
    acc: set[Var] = set()
    stack: list[Formula] = [formula]
    while stack:
        f = stack.pop()
        if isinstance(f, (ForAll, Exists)):
            acc.add(f.variable)
            stack.append(f.body)
        elif isinstance(f, Not):
            stack.append(f.formula)
        elif isinstance(f, (And, Or)):
            stack.extend((f.left, f.right))
        elif not isinstance(f, (Eq, Lt, Proof)):
            raise TypeError(f"Unknown formula type: {type(f).__name__}")
    return frozenset(acc)


def is_sentence(formula: Formula) -> bool:
    """True when *formula* has no free variables."""
    return not free_variables(formula)


# ---------------------------------------------------------------------------
# Substitution
# ---------------------------------------------------------------------------


def substitute_term(term: Term, variable: Var, replacement: Term) -> Term:
    """*term* with every occurrence of *variable* replaced."""
    depth = 0
    while isinstance(term, Succ):
        term = term.term
        depth += 1

    result: Term
    if isinstance(term, Var):
        result = replacement if term == variable else term
    elif isinstance(term, Zero):
        result = term
    elif isinstance(term, Add):
        result = Add(
            substitute_term(term.left, variable, replacement),
            substitute_term(term.right, variable, replacement),
        )
    elif isinstance(term, Mul):
        result = Mul(
            substitute_term(term.left, variable, replacement),
            substitute_term(term.right, variable, replacement),
        )
    else:
        raise TypeError(f"Unknown term type: {type(term).__name__}")

    for _ in range(depth):
        result = Succ(result)
    return result


def substitute(formula: Formula, variable: Var, replacement: Term) -> Formula:
    """*formula* with the free occurrences of *variable* replaced.

    Raises Unsubstitutable when a free occurrence sits under a quantifier
    that binds a variable of *replacement*. No alpha-renaming is attempted.
    """
    captured = free_variables(replacement)
    logger.debug(
        "Substituting for %s (replacement has %d free variables)",
        variable.name,
        len(captured),
    )
    return _subst(formula, variable, replacement, captured)


def _subst(
    formula: Formula, variable: Var, replacement: Term, captured: frozenset[Var]
) -> Formula:
    if isinstance(formula, Eq):
        return Eq(
            substitute_term(formula.left, variable, replacement),
            substitute_term(formula.right, variable, replacement),
        )
    if isinstance(formula, Lt):
        return Lt(
            substitute_term(formula.left, variable, replacement),
            substitute_term(formula.right, variable, replacement),
        )
    if isinstance(formula, Proof):
        return Proof(
            substitute_term(formula.proof, variable, replacement),
            substitute_term(formula.formula, variable, replacement),
        )
    if isinstance(formula, Not):
        return Not(_subst(formula.formula, variable, replacement, captured))
    if isinstance(formula, And):
        return And(
            _subst(formula.left, variable, replacement, captured),
            _subst(formula.right, variable, replacement, captured),
        )
    if isinstance(formula, Or):
        return Or(
            _subst(formula.left, variable, replacement, captured),
            _subst(formula.right, variable, replacement, captured),
        )
    if isinstance(formula, (ForAll, Exists)):
        if formula.variable == variable:
            # Shadowed: nothing below is free.
            return formula
        if formula.variable in captured and variable in free_variables(formula.body):
            raise Unsubstitutable(
                f"Substituting for {variable.name} would capture "
                f"{formula.variable.name} under its quantifier"
            )
        body = _subst(formula.body, variable, replacement, captured)
        return type(formula)(formula.variable, body)
    raise TypeError(f"Unknown formula type: {type(formula).__name__}")
