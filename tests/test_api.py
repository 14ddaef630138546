import pytest

import precalc
from precalc import ReduceOptions, calc, eq, string_is_equation, wrap_in_calc
from precalc.errors import LexicalError


def test_string_is_equation() -> None:
    assert not string_is_equation("")
    assert not string_is_equation(None)
    assert not string_is_equation("5px")
    assert not string_is_equation("-5px")
    assert not string_is_equation("  -5px")
    assert string_is_equation("5px + 5vh")
    assert string_is_equation("5px - 5vh")
    assert string_is_equation("5px*2")
    assert string_is_equation("(5px)")


def test_wrap_in_calc() -> None:
    assert wrap_in_calc(None) is None
    assert wrap_in_calc("") == ""
    assert wrap_in_calc("10px") == "10px"
    assert wrap_in_calc("-10px") == "-10px"
    assert wrap_in_calc("10px - 5vh") == "calc(10px - 5vh)"


def test_eq_call_shapes() -> None:
    assert eq("5px + 5px") == "10px"
    assert eq({"units": True}, "5px + 5vh") == "5px + 5vh"
    reducer = eq({"units": ["px"]})
    assert callable(reducer)
    assert reducer("1px + 2px") == "3px"
    with pytest.raises(LexicalError):
        reducer("1vh")


def test_calc_call_shapes() -> None:
    assert calc("5px + 5vh") == "calc(5px + 5vh)"
    assert calc("5px + 5px") == "10px"
    assert calc({"units": True}, "5px - 5vh") == "calc(5px - 5vh)"
    wrapped = calc({"units": False, "throws": False})
    assert wrapped("5foo + 5bar") == "calc(5foo + 5bar)"
    assert wrapped("5foo * 5bar") is None


def test_options_object_is_accepted() -> None:
    opts = ReduceOptions(units=("rem",), throws=False)
    assert eq(opts, "1rem + 1rem") == "2rem"
    assert eq(opts, "1px") is None


def test_package_exports() -> None:
    assert precalc.__version__
    for name in precalc.__all__:
        assert hasattr(precalc, name), name
