"""Reduce CSS-like arithmetic over dimensioned quantities to its simplest form."""

from precalc.api import calc, eq, wrap_in_calc
from precalc.config import DEFAULT_UNITS, ReduceOptions, get_default_opts, get_opts
from precalc.dsl.codec import stringify
from precalc.dsl.terms import Expression, Quantity
from precalc.dsl.tokens import string_is_equation
from precalc.errors import (
    AlgebraError,
    DivisionByZeroError,
    DivisionError,
    LexicalError,
    MultiplicationError,
    NumberRangeError,
    ParenthesesError,
    PrecalcError,
    SequenceError,
    StructuralError,
    UnitMismatchError,
)
from precalc.util.math_expr import reduce_equation

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # API
    "calc",
    "eq",
    "wrap_in_calc",
    "reduce_equation",
    "stringify",
    "string_is_equation",
    # Options
    "DEFAULT_UNITS",
    "ReduceOptions",
    "get_default_opts",
    "get_opts",
    # Terms
    "Expression",
    "Quantity",
    # Errors
    "PrecalcError",
    "LexicalError",
    "StructuralError",
    "ParenthesesError",
    "SequenceError",
    "AlgebraError",
    "UnitMismatchError",
    "MultiplicationError",
    "DivisionError",
    "DivisionByZeroError",
    "NumberRangeError",
]
