import dataclasses

import pytest

from godelnum.errors import GodelError, InvalidVariable
from godelnum.terms import (
    Add,
    Eq,
    Exists,
    ForAll,
    Not,
    Succ,
    Var,
    Zero,
    var_named,
)


class TestVar:
    def test_star_count_and_name(self) -> None:
        assert Var(0).name == "x"
        assert Var(3).name == "x***"

    def test_equality_by_star_count(self) -> None:
        assert Var(2) == Var(2)
        assert Var(2) != Var(1)
        assert len({Var(1), Var(1), Var(0)}) == 2

    def test_negative_star_count_rejected(self) -> None:
        with pytest.raises(InvalidVariable, match=">= 0"):
            Var(-1)

    @pytest.mark.parametrize("bad", ["1", 1.0, True, None])
    def test_non_int_star_count_rejected(self, bad: object) -> None:
        with pytest.raises(InvalidVariable):
            Var(bad)  # type: ignore[arg-type]

    def test_invalid_variable_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Var(-5)
        assert issubclass(InvalidVariable, GodelError)


class TestVarNamed:
    @pytest.mark.parametrize("name,stars", [("x", 0), ("x*", 1), ("x****", 4)])
    def test_parses(self, name: str, stars: int) -> None:
        assert var_named(name) == Var(stars)

    @pytest.mark.parametrize("name", ["", "y", "x*y", "*x", "xx", " x"])
    def test_malformed_rejected(self, name: str) -> None:
        with pytest.raises(InvalidVariable):
            var_named(name)

    def test_round_trips_name(self) -> None:
        v = Var(5)
        assert var_named(v.name) == v


class TestStructure:
    def test_zero_instances_equal(self) -> None:
        assert Zero() == Zero()
        assert hash(Zero()) == hash(Zero())

    def test_structural_equality(self) -> None:
        a = Add(Var(0), Succ(Zero()))
        b = Add(Var(0), Succ(Zero()))
        assert a == b
        assert Eq(a, a) == Eq(b, b)
        assert Add(Zero(), Var(0)) != Add(Var(0), Zero())

    def test_nodes_are_frozen(self) -> None:
        t = Succ(Zero())
        with pytest.raises(dataclasses.FrozenInstanceError):
            t.term = Var(0)  # type: ignore[misc]

    def test_quantifier_requires_var(self) -> None:
        body = Eq(Zero(), Zero())
        with pytest.raises(InvalidVariable):
            ForAll(Zero(), body)  # type: ignore[arg-type]
        with pytest.raises(InvalidVariable):
            Exists(Succ(Var(0)), body)  # type: ignore[arg-type]

    def test_formulas_hashable(self) -> None:
        f = ForAll(Var(0), Not(Eq(Succ(Var(0)), Zero())))
        assert f in {f}
