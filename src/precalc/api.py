from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Optional, Union, overload

from precalc.config import ReduceOptions, get_opts
from precalc.dsl.tokens import string_is_equation
from precalc.util.math_expr import reduce_equation

OptionsLike = Union[ReduceOptions, Mapping[str, Any]]
Reducer = Callable[[str], Optional[str]]


def wrap_in_calc(text: str | None) -> str | None:
    if text is None:
        return None
    return f"calc({text})" if string_is_equation(text) else text


@overload
def eq(a: str) -> str | None: ...


@overload
def eq(a: OptionsLike, b: str) -> str | None: ...


@overload
def eq(a: OptionsLike) -> Reducer: ...


def eq(a: Union[str, OptionsLike], b: str | None = None) -> Union[str, None, Reducer]:
    """Reduce an equation.

    ``eq(text)`` uses the default options, ``eq(options, text)`` the given ones and
    ``eq(options)`` returns a reducer bound to the options.
    """
    if isinstance(a, str):
        return reduce_equation(get_opts(), a)
    opts = get_opts(a)
    if isinstance(b, str):
        return reduce_equation(opts, b)

    def reducer(text: str) -> str | None:
        return reduce_equation(opts, text)

    return reducer


def calc(a: Union[str, OptionsLike], b: str | None = None) -> Union[str, None, Reducer]:
    """Same call shapes as :func:`eq`, wrapping unreduced results in ``calc()``."""
    result = eq(a, b)
    if callable(result):
        reduce_fn = result

        def wrapped(text: str) -> str | None:
            return wrap_in_calc(reduce_fn(text))

        return wrapped
    return wrap_in_calc(result)
