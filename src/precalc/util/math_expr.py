from __future__ import annotations

import math
import re
from typing import Iterable, Sequence

from precalc.config import ReduceOptions
from precalc.dsl.codec import stringify
from precalc.dsl.terms import Quantity, Term
from precalc.dsl.tokens import (
    PRECEDENCE,
    Token,
    char_is_reserved,
    has_more_than_one_period,
    is_operator,
    is_valid_unit,
)
from precalc.errors import LexicalError, ParenthesesError, PrecalcError, StructuralError
from precalc.interp.algebra import calculate
from precalc.util.logging import get_logger
from precalc.verify.sequence import check_sequence

# Parsing follows precedence climbing:
# http://eli.thegreenplace.net/2012/08/02/parsing-expressions-by-precedence-climbing

# groups: 1 operand value, 2 operand unit, 3 unit with no number, 4 reserved char,
# 5 anything else (only there to report invalid input)
_TOKEN_RE = re.compile(
    r"\s*(?:([+-]?[\d.]+)(%|[a-z]*)|([a-z%]+)|([()+*/-]))\s*|(.)",
    flags=re.IGNORECASE | re.DOTALL,
)
# a: non-space char other than "(", w: optional spaces, s: sign, t: digit or "("
_SIGN_RE = re.compile(r"([^\s(])(\s*)([+-])([\d(])")

_LOG = get_logger(__name__)


def _normalize_sign(match: re.Match[str]) -> str:
    a, w, s, t = match.groups()
    if is_operator(a):
        w = w or " "
        if s == "+":
            # 2 ++2 -> 2 + 2
            return a + w + t
        if t == "(":
            # 2 +-(2) -> 2 + -1 * (2)
            return a + w + "-1 * " + t
        return a + w + s + t
    # 2 +2 -> 2 + 2, otherwise the sign is read as part of the number
    return a + w + s + " " + t


def normalize_input_equation(text: str) -> str:
    """Rewrite sign sequences the lexer cannot tell apart; never validates."""
    return _SIGN_RE.sub(_normalize_sign, text.lower())


def next_token(
    text: str, pos: int, units: Iterable[str] | None = None
) -> tuple[Token | None, int]:
    """Read one token starting at pos; returns (None, pos) at the end of input."""
    if pos >= len(text):
        return None, pos
    match = _TOKEN_RE.match(text, pos)
    if match is None:
        return None, pos
    end = match.end()
    if match.group(5) is not None:
        raise LexicalError(f"Invalid input: {text[pos:]}")
    if match.group(3):
        raise LexicalError("Letters and/or % with no preceding number!")
    reserved = match.group(4)
    if char_is_reserved(reserved):
        return reserved, end
    raw = match.group(1)
    try:
        value = float(raw)
    except ValueError:
        value = None
    if value is None or not math.isfinite(value) or has_more_than_one_period(raw):
        raise LexicalError(f'"{match.group(0).strip()}" is not a valid operand!')
    unit = match.group(2).lower()
    if units is not None and not is_valid_unit(units, unit):
        raise LexicalError(f'"{unit}" is not a supported unit type!')
    return Quantity(value, unit), end


def tokenize(text: str, units: Iterable[str] | None = None) -> list[Token]:
    allowed = None if units is None else frozenset(units)
    tokens: list[Token] = []
    parens = 0
    pos = 0
    prev: Token | None = None
    while True:
        token, pos = next_token(text, pos, allowed)
        check_sequence(prev, token)
        if token is None:
            break
        if token == "(":
            parens += 1
        elif token == ")":
            parens -= 1
            if parens < 0:
                break
        tokens.append(token)
        prev = token
    if parens != 0:
        raise ParenthesesError("Parentheses do not match!")
    return tokens


class TokenCursor:
    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = tuple(tokens)
        self.index = 0

    @property
    def current(self) -> Token | None:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def advance(self) -> "TokenCursor":
        self.index += 1
        return self


def compute_expr(cursor: TokenCursor, min_precedence: int = 1) -> Term:
    lhs = atomize(cursor)
    while True:
        op = cursor.current
        if not isinstance(op, str) or PRECEDENCE.get(op, 0) < min_precedence:
            break
        rhs = compute_expr(cursor.advance(), PRECEDENCE[op] + 1)
        lhs = calculate(lhs, op, rhs)
    return lhs


def atomize(cursor: TokenCursor) -> Term:
    token = cursor.current
    if token != "(":
        cursor.advance()
        if not isinstance(token, Quantity):
            raise PrecalcError(f"Unexpected token: {stringify(token).strip()!r}")
        return token
    term = compute_expr(cursor.advance(), 1)
    cursor.advance()  # skip the ")"
    return term


def parse_tokens(tokens: Sequence[Token]) -> Term:
    try:
        return compute_expr(TokenCursor(tokens), 1)
    except RecursionError:
        raise StructuralError("Expression is nested too deeply!") from None


def reduce_equation(options: ReduceOptions, text: str) -> str | None:
    if not text:
        return ""
    normalized = normalize_input_equation(text)
    units = None if options.units is False else options.units
    try:
        tokens = tokenize(normalized, units)
        _LOG.debug("reduce normalized=%r tokens=%d", normalized, len(tokens))
        result = parse_tokens(tokens)
    except PrecalcError as exc:
        if options.throws:
            raise
        _LOG.debug("reduce suppressed error for %r: %s", text, exc)
        return None
    return stringify(result)
