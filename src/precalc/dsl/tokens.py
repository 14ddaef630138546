from __future__ import annotations

import re
from typing import Iterable, Union

from precalc.dsl.terms import OPERATORS, Quantity

Token = Union[Quantity, str]

PRECEDENCE = {
    "*": 14,
    "/": 14,
    "+": 13,
    "-": 13,
}

PARENTHESES = ("(", ")")
RESERVED_CHARS = OPERATORS + PARENTHESES

OPERAND = "operand"
OPERATOR = "operator"

_IS_EQUATION_RE = re.compile(r"[()]|(?:[^\s+\-*/]\s*[+\-*/])")


def is_operator(token: object) -> bool:
    return isinstance(token, str) and token in OPERATORS


def is_operand(token: object) -> bool:
    return isinstance(token, Quantity)


def is_parenthesis(token: object) -> bool:
    return isinstance(token, str) and token in PARENTHESES


def char_is_reserved(char: str | None) -> bool:
    return char is not None and char in RESERVED_CHARS


def item_type(token: Token | None) -> str | None:
    """Kind of a token for sequence checks; None stands for start or end of input."""
    if token is None or token == "":
        return None
    if is_operand(token):
        return OPERAND
    if is_operator(token):
        return OPERATOR
    return str(token)


def is_valid_unit(units: Iterable[str], unit: str) -> bool:
    return unit == "" or unit in units


def has_more_than_one_period(text: str) -> bool:
    return text.count(".") > 1


def string_is_equation(text: str | None) -> bool:
    if not text:
        return False
    return _IS_EQUATION_RE.search(text) is not None
