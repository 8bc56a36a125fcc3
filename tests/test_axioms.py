from godelnum.axioms import ADD_ZERO, PEANO_AXIOMS, ZERO_NOT_SUCCESSOR
from godelnum.encode import encode_to_integer
from godelnum.render import format_formula
from godelnum.substitution import is_sentence
from godelnum.terms import Eq, ForAll, Not, Succ, Var, Zero


def test_axioms_are_sentences() -> None:
    for ax in PEANO_AXIOMS:
        assert is_sentence(ax.formula), ax.label


def test_labels_unique() -> None:
    labels = [ax.label for ax in PEANO_AXIOMS]
    assert len(labels) == len(set(labels))


def test_numbers_pairwise_distinct() -> None:
    numbers = [encode_to_integer(ax.formula) for ax in PEANO_AXIOMS]
    assert len(set(numbers)) == len(PEANO_AXIOMS)


def test_zero_not_successor_shape() -> None:
    x = Var(0)
    assert ZERO_NOT_SUCCESSOR.formula == ForAll(x, Not(Eq(Succ(x), Zero())))


def test_add_zero_renders() -> None:
    assert format_formula(ADD_ZERO.formula) == "∀x(((x + 0) = x))"
