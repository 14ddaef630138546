from __future__ import annotations


class PrecalcError(ValueError):
    """Base class for every error raised while reducing an equation."""


class LexicalError(PrecalcError):
    pass


class StructuralError(PrecalcError):
    pass


class ParenthesesError(StructuralError):
    pass


class SequenceError(StructuralError):
    pass


class AlgebraError(PrecalcError):
    pass


class UnitMismatchError(AlgebraError):
    pass


class MultiplicationError(AlgebraError):
    pass


class DivisionError(AlgebraError):
    pass


class DivisionByZeroError(DivisionError, ZeroDivisionError):
    pass


class NumberRangeError(AlgebraError):
    pass
