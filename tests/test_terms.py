from dataclasses import FrozenInstanceError

import pytest

from precalc.dsl.terms import (
    Expression,
    Quantity,
    collapse,
    has_no_unit,
    have_same_unit,
    inverse,
    is_expression,
    opposite,
    zero,
)


def test_zero_quantity_drops_unit() -> None:
    q = Quantity(0, "px")
    assert q.unit == ""
    assert q == zero()
    neg = Quantity(-0.0, "vh")
    assert neg.value == 0.0
    assert str(neg.value) == "0.0"


def test_quantity_is_immutable() -> None:
    q = Quantity(5, "px")
    with pytest.raises(FrozenInstanceError):
        q.value = 6  # type: ignore[misc]
    assert q.value == 5.0
    assert isinstance(q.value, float)


def test_quantity_helpers() -> None:
    q = Quantity(4, "px")
    assert opposite(q) == Quantity(-4, "px")
    assert inverse(Quantity(4, "")) == Quantity(0.25, "")
    assert has_no_unit(Quantity(3, ""))
    assert not has_no_unit(q)
    assert have_same_unit(q, Quantity(1, "px"))
    assert not have_same_unit(q, Quantity(1, "vh"))


def test_expression_shape_is_checked() -> None:
    a = Quantity(1, "px")
    b = Quantity(2, "vh")
    with pytest.raises(ValueError):
        Expression(())
    with pytest.raises(ValueError):
        Expression((a, "+"))
    with pytest.raises(ValueError):
        Expression((a, "^", b))
    with pytest.raises(ValueError):
        Expression(("+", a, b))


def test_expression_signed_terms_and_units() -> None:
    a = Quantity(1, "px")
    b = Quantity(2, "vh")
    expr = Expression([a, "-", b])
    assert isinstance(expr.items, tuple)
    assert list(expr.signed_terms()) == [("+", a), ("-", b)]
    assert len(expr) == 3
    assert expr[2] == b
    assert is_expression(expr)
    assert not is_expression(a)


def test_collapse_unwraps_single_term() -> None:
    a = Quantity(1, "px")
    assert collapse([a]) is a
    expr = collapse([a, "+", Quantity(1, "vh")])
    assert isinstance(expr, Expression)
    assert expr == Expression((a, "+", Quantity(1, "vh")))
