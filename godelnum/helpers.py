"""Builder helpers for constructing terms and formulas.

Short names for writing axioms and test fixtures by hand:

    x, y = var("x"), var("x*")
    forall(x, neg(eq(s(x), ZERO)))
"""

from godelnum.terms import (
    Add,
    And,
    Eq,
    Exists,
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
    var_named,
)

ZERO = Zero()


def var(name: str | int) -> Var:
    """A variable by name (``"x**"``) or by star count (``2``)."""
    if isinstance(name, str):
        return var_named(name)
    return Var(name)


def s(t: Term) -> Succ:
    return Succ(t)


def add(left: Term, right: Term) -> Add:
    return Add(left, right)


def mul(left: Term, right: Term) -> Mul:
    return Mul(left, right)


def eq(left: Term, right: Term) -> Eq:
    return Eq(left, right)


def lt(left: Term, right: Term) -> Lt:
    return Lt(left, right)


def neg(f: Formula) -> Not:
    return Not(f)


def conj(left: Formula, right: Formula) -> And:
    return And(left, right)


def disj(left: Formula, right: Formula) -> Or:
    return Or(left, right)


def implies(antecedent: Formula, consequent: Formula) -> Or:
    """Material implication, written as ¬a ∨ c (there is no → symbol)."""
    return Or(Not(antecedent), consequent)


def forall(variable: Var, body: Formula) -> ForAll:
    return ForAll(variable, body)


def exists(variable: Var, body: Formula) -> Exists:
    return Exists(variable, body)


def proves(proof: Term, formula: Term) -> Proof:
    return Proof(proof, formula)
