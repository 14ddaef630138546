from __future__ import annotations

import math
from typing import Callable, Sequence, Union, cast

from precalc.dsl.codec import stringify
from precalc.dsl.terms import (
    Expression,
    Quantity,
    Term,
    collapse,
    has_no_unit,
    have_same_unit,
    inverse,
    is_expression,
    opposite,
    zero,
)
from precalc.errors import (
    DivisionByZeroError,
    DivisionError,
    MultiplicationError,
    NumberRangeError,
    UnitMismatchError,
)

# Expressions reaching these functions are already reduced, so they only hold
# "+" and "-" between terms of distinct units.

Item = Union[Term, str]

_UNIT_PRODUCT_MSG = "Unable to multiply by a number with units!"


def calculate(lhs: Term, op: str, rhs: Term) -> Term:
    fn = _OPERATIONS.get(op)
    if fn is None:
        raise ValueError(f"Unknown operator: {op!r}")
    return fn(lhs, rhs)


def _quantity(value: float, unit: str) -> Quantity:
    if not math.isfinite(value):
        raise NumberRangeError(f"Result is out of range: {value!r}")
    return Quantity(value, unit)


def _spread(term: Term) -> tuple[Item, ...]:
    if is_expression(term):
        return cast(Expression, term).items
    return (term,)


def add(lhs: Term, rhs: Term) -> Term:
    if isinstance(lhs, Expression) and isinstance(rhs, Expression):
        result: Term = lhs
        for op, term in rhs.signed_terms():
            result = calculate(result, op, term)
        return result
    if isinstance(rhs, Quantity) and not rhs.value:
        return lhs
    if isinstance(lhs, Quantity) and not lhs.value:
        return rhs
    if isinstance(lhs, Expression):
        return add_to_equation(lhs, cast(Quantity, rhs), eq_is_rhs=False)
    if isinstance(rhs, Expression):
        return add_to_equation(rhs, lhs, eq_is_rhs=True)
    if has_no_unit(lhs) != has_no_unit(rhs):
        raise UnitMismatchError(f'Unable to add "{stringify(lhs)}" with "{stringify(rhs)}"')
    if have_same_unit(lhs, rhs):
        return _quantity(lhs.value + rhs.value, lhs.unit)
    if rhs.value < 0:
        # 5px + -5vh => 5px - 5vh
        return Expression((lhs, "-", opposite(rhs)))
    return Expression((lhs, "+", rhs))


def subtract(lhs: Term, rhs: Term) -> Term:
    if isinstance(rhs, Expression):
        # 5 - (5 + 5) is 5 + -1 * (5 + 5)
        return add(lhs, calculate(rhs, "*", Quantity(-1.0, "")))
    return add(lhs, opposite(rhs))


def multiply(lhs: Term, rhs: Term) -> Term:
    if isinstance(lhs, Expression) and isinstance(rhs, Expression):
        raise MultiplicationError(f'Unable to multiply "{stringify(lhs)}" with "{stringify(rhs)}"')
    if isinstance(lhs, Expression):
        if rhs.unit:
            raise MultiplicationError(_UNIT_PRODUCT_MSG)
        return multiply_with_equation(lhs, rhs)
    if isinstance(rhs, Expression):
        if lhs.unit:
            raise MultiplicationError(_UNIT_PRODUCT_MSG)
        return multiply_with_equation(rhs, lhs)
    if lhs.unit and rhs.unit:
        raise MultiplicationError(_UNIT_PRODUCT_MSG)
    if not lhs.value or not rhs.value:
        return zero()
    return _quantity(lhs.value * rhs.value, lhs.unit or rhs.unit)


def divide(lhs: Term, rhs: Term) -> Term:
    if isinstance(rhs, Expression):
        raise DivisionError("Divisor is equation.")
    if rhs.unit:
        raise DivisionError("Divisor has unit.")
    if not rhs.value:
        raise DivisionByZeroError("Division by zero.")
    if isinstance(lhs, Expression):
        return calculate(lhs, "*", inverse(rhs))
    if not lhs.value:
        return zero()
    return _quantity(lhs.value / rhs.value, lhs.unit)


def multiply_with_equation(expr: Expression, factor: Quantity) -> Term:
    """Distribute factor over every term, re-folding the products as they appear.

    Re-folding goes through addition, so products that end up sharing a unit
    (or vanishing) collapse instead of staying side by side.
    """
    terms = expr.signed_terms()
    _, first = next(terms)
    result = calculate(first, "*", factor)
    for op, term in terms:
        result = calculate(result, op, calculate(term, "*", factor))
    return result


def add_to_equation(expr: Expression, item: Quantity, eq_is_rhs: bool) -> Term:
    """Add a quantity to a reduced expression.

    eq_is_rhs is True for ``item + expr`` and False for ``expr + item``.
    """
    items = expr.items
    for i in range(0, len(items), 2):
        term = items[i]
        if isinstance(term, Quantity) and have_same_unit(term, item):
            # a term behind "-" is subtracted: 5px - 5vh + 5vh is 5px - (5vh - 5vh)
            op = "-" if i and items[i - 1] == "-" else "+"
            return _replace_term(items, i, calculate(term, op, item))

    if has_no_unit(item):
        raise UnitMismatchError(f'Unable to add "{stringify(item)}" with "{stringify(expr)}"')

    if eq_is_rhs:
        head = calculate(item, "+", items[0])  # type: ignore[arg-type]
        return Expression(_spread(head) + items[1:])
    if item.value < 0:
        return Expression(items + ("-", opposite(item)))
    return Expression(items + ("+", item))


def _replace_term(items: Sequence[Item], index: int, combined: Term) -> Term:
    head = tuple(items[: max(0, index - 1)])
    tail = tuple(items[index + 1 :])
    if isinstance(combined, Quantity) and not combined.value:
        # 5px + 5vh - 5vh is 5px, not 5px + 0
        if index:
            return collapse(head + tail)
        if not tail:
            return zero()
        lead = calculate(zero(), tail[0], tail[1])  # type: ignore[arg-type]
        return collapse(_spread(lead) + tail[2:])
    if not index:
        return collapse(_spread(combined) + tail)
    op = items[index - 1]
    if isinstance(combined, Quantity) and combined.value < 0:
        op = "+" if op == "-" else "-"
        combined = opposite(combined)
    return collapse(head + (op,) + _spread(combined) + tail)


_OPERATIONS: dict[str, Callable[[Term, Term], Term]] = {
    "+": add,
    "-": subtract,
    "*": multiply,
    "/": divide,
}
