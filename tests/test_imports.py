import precalc
from precalc.dsl import codec, terms, tokens
from precalc.interp import algebra
from precalc.util import math_expr
from precalc.verify import reduction, sequence


def test_imports_and_version() -> None:
    assert precalc.__version__
    assert codec is not None
    assert terms is not None
    assert tokens is not None
    assert algebra is not None
    assert math_expr is not None
    assert reduction is not None
    assert sequence is not None
