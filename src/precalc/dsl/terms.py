from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Union

OPERATORS = ("+", "-", "*", "/")


@dataclass(frozen=True)
class Quantity:
    value: float = 0.0
    unit: str = ""

    def __post_init__(self) -> None:
        # 0px == 0vh == 0, so a zero never carries a unit
        if not self.value:
            object.__setattr__(self, "value", 0.0)
            object.__setattr__(self, "unit", "")
        else:
            object.__setattr__(self, "value", float(self.value))


@dataclass(frozen=True)
class Expression:
    """Alternating terms and operators, first and last items are terms."""

    items: tuple[Union["Term", str], ...]

    def __post_init__(self) -> None:
        items = tuple(self.items)
        if not items or len(items) % 2 == 0:
            raise ValueError(f"Malformed expression: {items!r}")
        for i, item in enumerate(items):
            if i % 2 == 0 and not isinstance(item, (Quantity, Expression)):
                raise ValueError(f"Expected a term at position {i}: {item!r}")
            if i % 2 == 1 and item not in OPERATORS:
                raise ValueError(f"Expected an operator at position {i}: {item!r}")
        object.__setattr__(self, "items", items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Union["Term", str]:
        return self.items[index]

    def __iter__(self) -> Iterator[Union["Term", str]]:
        return iter(self.items)

    def signed_terms(self) -> Iterator[tuple[str, "Term"]]:
        """Yield each term with the operator in front of it ("+" for the first)."""
        for i in range(0, len(self.items), 2):
            op = self.items[i - 1] if i else "+"
            yield op, self.items[i]  # type: ignore[misc]


Term = Union[Quantity, Expression]


def zero() -> Quantity:
    return Quantity(0.0, "")


def is_expression(term: object) -> bool:
    return isinstance(term, Expression)


def opposite(q: Quantity) -> Quantity:
    return Quantity(-q.value, q.unit)


def inverse(q: Quantity) -> Quantity:
    return Quantity(1 / q.value, q.unit)


def has_no_unit(q: Quantity) -> bool:
    return not q.unit


def have_same_unit(a: Quantity, b: Quantity) -> bool:
    return a.unit == b.unit


def collapse(items: Iterable[Union[Term, str]]) -> Term:
    """Build an expression from items, unwrapping a lone term."""
    items = tuple(items)
    if len(items) == 1:
        return items[0]  # type: ignore[return-value]
    return Expression(items)
