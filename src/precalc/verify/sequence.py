from __future__ import annotations

from precalc.dsl.codec import stringify
from precalc.dsl.tokens import OPERAND, OPERATOR, Token, item_type
from precalc.errors import SequenceError

# kind of the previous token -> kinds allowed to follow it (None is start/end of input)
_ALLOWED_NEXT: dict[str | None, frozenset[str | None]] = {
    None: frozenset({OPERAND, "("}),
    OPERATOR: frozenset({OPERAND, "("}),
    "(": frozenset({OPERAND, "("}),
    OPERAND: frozenset({OPERATOR, ")", None}),
    ")": frozenset({OPERATOR, ")", None}),
}


def validate_type_sequence(prev_kind: str | None, next_kind: str | None) -> bool:
    allowed = _ALLOWED_NEXT.get(prev_kind)
    if allowed is None:
        return False
    return next_kind in allowed


def describe_invalid_sequence(prev_token: Token | None, next_token: Token | None) -> str:
    a = stringify(prev_token).strip()
    b = stringify(next_token).strip()
    if not a:
        return f'equation begins with "{b}"'
    if not b:
        return f'equation ends with "{a}"'
    if a == "(" and b == ")":
        return "empty parentheses"
    return f"{a} followed by {b}"


def check_sequence(prev_token: Token | None, next_token: Token | None) -> Token | None:
    """Return next_token if it may follow prev_token, raise SequenceError otherwise."""
    if validate_type_sequence(item_type(prev_token), item_type(next_token)):
        return next_token
    raise SequenceError(f"Invalid sequence: {describe_invalid_sequence(prev_token, next_token)}")
