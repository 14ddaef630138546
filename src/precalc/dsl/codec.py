from __future__ import annotations

from decimal import Decimal
from typing import Any

from precalc.dsl.terms import Expression, Quantity
from precalc.dsl.tokens import is_parenthesis

# Decimal notation is used for exponents inside this range, as CSS authors write them.
_MIN_PLAIN_EXP = -7
_MAX_PLAIN_EXP = 21


def format_number(value: float) -> str:
    """Shortest round-trip text for a float; integral values drop the fraction."""
    if not value:
        return "0"
    if float(value).is_integer() and abs(value) < 10**_MAX_PLAIN_EXP:
        return str(int(value))
    text = repr(float(value))
    if "e" not in text:
        return text
    mantissa, exp_text = text.split("e")
    exp = int(exp_text)
    if _MIN_PLAIN_EXP < exp < _MAX_PLAIN_EXP:
        return format(Decimal(text), "f")
    sign = "+" if exp > 0 else "-"
    return f"{mantissa}e{sign}{abs(exp)}"


def stringify_item(item: Any) -> str:
    if item is None or item == "":
        return ""
    if isinstance(item, Quantity):
        return f"{format_number(item.value)}{item.unit}"
    if is_parenthesis(item):
        return item
    if isinstance(item, str):
        return f" {item} "
    raise TypeError(f"Unsupported item: {item!r}")


def stringify_expression(expr: Expression) -> str:
    parts: list[str] = []
    for item in expr:
        if isinstance(item, Expression):
            parts.append(f"({stringify_expression(item)})")
        else:
            parts.append(stringify_item(item))
    return "".join(parts)


def stringify(term: Any) -> str:
    if isinstance(term, Expression):
        return stringify_expression(term)
    return stringify_item(term)
