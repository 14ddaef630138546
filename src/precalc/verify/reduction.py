"""Unit-blind numeric cross-check of a reduction.

Reduction only ever adds, scales and regroups terms, so once units are stripped
the original text and its reduction must evaluate to the same number.
"""

from __future__ import annotations

import math
import re
from fractions import Fraction
from typing import Any

from pydantic import BaseModel, Field

_UNIT_RE = re.compile(r"[a-z%]+", flags=re.IGNORECASE)
_LEX_RE = re.compile(r"[\d.]+|[-+*/()]|\S")
_NUMBER_RE = re.compile(r"\d+\.?\d*|\.\d+")
_REL_TOL = 1e-9
_ABS_TOL = 1e-9


class VerifierResult(BaseModel):
    valid: bool
    violations: dict[str, float] = Field(default_factory=dict)
    meta: dict[str, Any] = Field(default_factory=dict)


class _ExactEvaluator:
    """Recursive descent over sum, product, signed factor and atom."""

    def __init__(self, text: str) -> None:
        self.tokens = _LEX_RE.findall(text)
        self.pos = 0

    def peek(self) -> str | None:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def take(self) -> str:
        tok = self.peek()
        if tok is None:
            raise ValueError("unexpected end of input")
        self.pos += 1
        return tok

    def run(self) -> Fraction:
        value = self.sum()
        if self.peek() is not None:
            raise ValueError(f"unexpected {self.peek()!r}")
        return value

    def sum(self) -> Fraction:
        value = self.product()
        while self.peek() in ("+", "-"):
            if self.take() == "+":
                value += self.product()
            else:
                value -= self.product()
        return value

    def product(self) -> Fraction:
        value = self.factor()
        while self.peek() in ("*", "/"):
            op = self.take()
            rhs = self.factor()
            if op == "*":
                value *= rhs
            elif rhs == 0:
                raise ZeroDivisionError("division by zero")
            else:
                value /= rhs
        return value

    def factor(self) -> Fraction:
        if self.peek() in ("+", "-"):
            sign = self.take()
            value = self.factor()
            return -value if sign == "-" else value
        return self.atom()

    def atom(self) -> Fraction:
        tok = self.take()
        if tok == "(":
            value = self.sum()
            if self.take() != ")":
                raise ValueError("missing )")
            return value
        if _NUMBER_RE.fullmatch(tok) is None:
            raise ValueError(f"bad number {tok!r}")
        return Fraction(tok)


def evaluate(text: str) -> Fraction | None:
    """Evaluate text with every unit dropped, or None if it cannot be evaluated."""
    expr = _UNIT_RE.sub("", text or "").strip()
    if not expr:
        return None
    try:
        return _ExactEvaluator(expr).run()
    except (ValueError, ZeroDivisionError):
        return None


def _as_number(value: Fraction) -> Any:
    if value.denominator == 1:
        return int(value.numerator)
    return float(value)


def verify_reduced_equation(original: str, reduction: str) -> VerifierResult:
    violations: dict[str, float] = {}
    meta: dict[str, Any] = {"original": original, "reduction": reduction}
    expected = evaluate(original)
    if expected is None:
        violations["original_parse"] = 1.0
        return VerifierResult(valid=False, violations=violations, meta=meta)
    meta["expected"] = _as_number(expected)
    got = evaluate(reduction)
    if got is None:
        violations["reduction_parse"] = 1.0
        return VerifierResult(valid=False, violations=violations, meta=meta)
    meta["got"] = _as_number(got)
    if not math.isclose(float(got), float(expected), rel_tol=_REL_TOL, abs_tol=_ABS_TOL):
        violations["mismatch"] = 1.0
    return VerifierResult(valid=not violations, violations=violations, meta=meta)
