import math

import numpy as np
import pytest

from complexlib import (
    Complex,
    ComplexError,
    InvalidArgumentError,
    InvalidFormatError,
)


def parts(z):
    return z.real, z.imaginary, z.suffix


# === direct numeric form ===


def test_rectangular_defaults_to_i():
    assert parts(Complex(3, 4)) == (3.0, 4.0, "i")


def test_suffix_is_lowercased():
    assert parts(Complex(3, 4, "J")) == (3.0, 4.0, "j")


def test_real_value_drops_suffix():
    assert parts(Complex(3, 0, "j")) == (3.0, 0.0, "")
    assert parts(Complex(3, -0.0, "i")) == (3.0, -0.0, "")


@pytest.mark.parametrize("suffix", ["", None])
def test_missing_suffix_defaults_to_i(suffix):
    assert Complex(3, 4, suffix).suffix == "i"


def test_single_number_is_real():
    assert parts(Complex(5)) == (5.0, 0.0, "")
    assert parts(Complex(-2.5)) == (-2.5, 0.0, "")
    assert parts(Complex()) == (0.0, 0.0, "")


def test_numpy_scalars_are_numbers():
    assert parts(Complex(np.float64(2.5))) == (2.5, 0.0, "")
    assert parts(Complex(np.int64(3), np.float32(0.5))) == (3.0, 0.5, "i")


def test_builtin_complex():
    assert parts(Complex(3 + 4j)) == (3.0, 4.0, "i")
    assert parts(Complex(complex(2, 0))) == (2.0, 0.0, "")


def test_copy_of_complex():
    z = Complex(1, 2, "j")
    assert parts(Complex(z)) == (1.0, 2.0, "j")


def test_unknown_suffix_rejected():
    with pytest.raises(InvalidArgumentError):
        Complex(3, 4, "k")


@pytest.mark.parametrize("value", [None, object(), True, {1, 2}])
def test_unsupported_values_rejected(value):
    with pytest.raises(InvalidArgumentError):
        Complex(value)


def test_non_numeric_component_rejected():
    with pytest.raises(InvalidArgumentError):
        Complex("x", 1)


# === structures ===


@pytest.mark.parametrize(
    "value,expected",
    [
        ([3, 4], (3.0, 4.0, "i")),
        ((1, 2, "j"), (1.0, 2.0, "j")),
        ([3], (3.0, 0.0, "")),
        ([], (0.0, 0.0, "")),
        (["1.5", "-2"], (1.5, -2.0, "i")),
        ({"real": 1, "imaginary": -2, "suffix": "j"}, (1.0, -2.0, "j")),
        ({"imaginary": 2}, (0.0, 2.0, "i")),
        ({"real": 7}, (7.0, 0.0, "")),
    ],
)
def test_structures(value, expected):
    assert parts(Complex(value)) == expected


def test_structure_too_long():
    with pytest.raises(InvalidArgumentError):
        Complex([1, 2, "j", 4])


def test_structure_unknown_key():
    with pytest.raises(InvalidArgumentError):
        Complex({"real": 1, "imag": 2})


# === string grammar ===


@pytest.mark.parametrize(
    "text,expected",
    [
        ("2-3i", (2.0, -3.0, "i")),
        ("3+4j", (3.0, 4.0, "j")),
        ("3+4J", (3.0, 4.0, "j")),
        ("-2.5e-3i", (0.0, -0.0025, "i")),
        ("1e3-2E-2j", (1000.0, -0.02, "j")),
        (".5+.25i", (0.5, 0.25, "i")),
        ("12i", (0.0, 12.0, "i")),
        ("1.5", (1.5, 0.0, "")),
        ("-7", (-7.0, 0.0, "")),
        ("i", (0.0, 1.0, "i")),
        ("+i", (0.0, 1.0, "i")),
        ("-j", (0.0, -1.0, "j")),
        ("3+i", (3.0, 1.0, "i")),
        ("3-j", (3.0, -1.0, "j")),
        ("  3+4i ", (3.0, 4.0, "i")),
    ],
)
def test_parse(text, expected):
    assert parts(Complex(text)) == expected
    assert parts(Complex.parse(text)) == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("3+-4i", (3.0, -4.0, "i")),
        ("3-+4i", (3.0, -4.0, "i")),
        ("3++4i", (3.0, 4.0, "i")),
        ("3--4i", (3.0, 4.0, "i")),
        ("+-i", (0.0, -1.0, "i")),
    ],
)
def test_parse_fixes_doubled_signs(text, expected):
    assert parts(Complex(text)) == expected


def test_parse_two_numbers_without_suffix():
    assert parts(Complex("3+4")) == (3.0, 4.0, "i")


@pytest.mark.parametrize("text", ["", "abc", "3+4k", "i3", "--", "3 4i", "1.2.3.4i", "ij"])
def test_parse_invalid(text):
    with pytest.raises(InvalidFormatError):
        Complex(text)


def test_invalid_format_is_a_value_error():
    with pytest.raises(ValueError):
        Complex("nope")
    with pytest.raises(ComplexError):
        Complex("nope")


def test_parse_requires_text():
    with pytest.raises(InvalidArgumentError):
        Complex.parse(3)


def test_concrete_scenario():
    z = Complex("2-3i")
    assert parts(z) == (2.0, -3.0, "i")
    assert z.rho() == pytest.approx(3.605551275463989)
    assert z.theta() == pytest.approx(-0.982793723247329)


# === makers and gate ===


def test_from_polar():
    z = Complex.from_polar(2, math.pi / 2)
    assert z.real == pytest.approx(0.0, abs=1e-15)
    assert z.imaginary == pytest.approx(2.0)
    assert z.suffix == "i"
    assert Complex.from_polar(1, math.pi / 4, "j").suffix == "j"


def test_validate_passes_complex_through():
    z = Complex(1, 2)
    assert Complex.validate(z) is z


@pytest.mark.parametrize(
    "value,expected",
    [
        (4, (4.0, 0.0, "")),
        ("4-i", (4.0, -1.0, "i")),
        ([1, 1, "j"], (1.0, 1.0, "j")),
        (1j, (0.0, 1.0, "i")),
    ],
)
def test_validate_promotes(value, expected):
    assert parts(Complex.validate(value)) == expected


def test_classification():
    assert Complex(3).is_real()
    assert not Complex(3).is_complex()
    assert Complex("3+i").is_complex()
    assert not Complex("3+i").is_real()


def test_values_are_read_only():
    z = Complex(3, 4)
    with pytest.raises(AttributeError):
        z.real = 1.0
    with pytest.raises(AttributeError):
        z.extra = 1


@pytest.mark.parametrize("text", ["1e999", "-1e999", "2+1e999i", "1e999j"])
def test_parse_rejects_out_of_range_numbers(text):
    with pytest.raises(InvalidFormatError):
        Complex(text)
