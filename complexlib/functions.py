"""
Free-function forms of every Complex function and operation.

Each function promotes its operands through Complex.validate() first, so
numbers, strings such as ``"3+4i"``, (real, imaginary, suffix) structures and
builtin complex values are all accepted:

    >>> from complexlib import functions as cx
    >>> cx.multiply("1+2i", "3-i").format()
    '5+5i'

Several names (abs, pow) shadow builtins; import the module as a namespace.
"""
from .complex import Complex
from .errors import ArityError

FUNCTIONS = (
    "abs", "acos", "acosh", "acot", "acoth", "acsc", "acsch", "argument",
    "asec", "asech", "asin", "asinh", "atan", "atanh", "conjugate", "cos",
    "cosh", "cot", "coth", "csc", "csch", "exp", "inverse", "ln", "log2",
    "log10", "negative", "pow", "rho", "sec", "sech", "sin", "sinh", "sqrt",
    "tan", "tanh", "theta",
)

OPERATIONS = ("add", "subtract", "multiply", "divide_by", "divide_into")

__all__ = list(FUNCTIONS + OPERATIONS)


def _operands(values: tuple) -> tuple[Complex, tuple]:
    if len(values) < 2:
        raise ArityError("This function requires at least 2 arguments")
    return Complex.validate(values[0]), values[1:]


# ---------- reducing operations ----------
def add(*values) -> Complex:
    first, rest = _operands(values)
    return first.add(*rest)


def subtract(*values) -> Complex:
    first, rest = _operands(values)
    return first.subtract(*rest)


def multiply(*values) -> Complex:
    first, rest = _operands(values)
    return first.multiply(*rest)


def divide_by(*values) -> Complex:
    """values[0] / values[1] / values[2] ..."""
    first, rest = _operands(values)
    return first.divide_by(*rest)


def divide_into(*values) -> Complex:
    """values[1] / values[0], then values[2] / that result, and so on."""
    first, rest = _operands(values)
    return first.divide_into(*rest)


# ---------- real-valued ----------
def abs(value) -> float:
    return Complex.validate(value).abs()


def rho(value) -> float:
    return Complex.validate(value).rho()


def argument(value) -> float:
    return Complex.validate(value).argument()


def theta(value) -> float:
    return Complex.validate(value).theta()


# ---------- elementary ----------
def conjugate(value) -> Complex:
    return Complex.validate(value).conjugate()


def negative(value) -> Complex:
    return Complex.validate(value).negative()


def inverse(value) -> Complex:
    return Complex.validate(value).inverse()


def exp(value) -> Complex:
    return Complex.validate(value).exp()


def ln(value) -> Complex:
    return Complex.validate(value).ln()


def log2(value) -> Complex:
    return Complex.validate(value).log2()


def log10(value) -> Complex:
    return Complex.validate(value).log10()


def sqrt(value) -> Complex:
    return Complex.validate(value).sqrt()


def pow(value, power) -> Complex:
    return Complex.validate(value).pow(power)


# ---------- trigonometric ----------
def cos(value) -> Complex:
    return Complex.validate(value).cos()


def sin(value) -> Complex:
    return Complex.validate(value).sin()


def tan(value) -> Complex:
    return Complex.validate(value).tan()


def sec(value) -> Complex:
    return Complex.validate(value).sec()


def csc(value) -> Complex:
    return Complex.validate(value).csc()


def cot(value) -> Complex:
    return Complex.validate(value).cot()


# ---------- hyperbolic ----------
def cosh(value) -> Complex:
    return Complex.validate(value).cosh()


def sinh(value) -> Complex:
    return Complex.validate(value).sinh()


def tanh(value) -> Complex:
    return Complex.validate(value).tanh()


def sech(value) -> Complex:
    return Complex.validate(value).sech()


def csch(value) -> Complex:
    return Complex.validate(value).csch()


def coth(value) -> Complex:
    return Complex.validate(value).coth()


# ---------- inverse trigonometric ----------
def acos(value) -> Complex:
    return Complex.validate(value).acos()


def asin(value) -> Complex:
    return Complex.validate(value).asin()


def atan(value) -> Complex:
    return Complex.validate(value).atan()


def asec(value) -> Complex:
    return Complex.validate(value).asec()


def acsc(value) -> Complex:
    return Complex.validate(value).acsc()


def acot(value) -> Complex:
    return Complex.validate(value).acot()


# ---------- inverse hyperbolic ----------
def acosh(value) -> Complex:
    return Complex.validate(value).acosh()


def asinh(value) -> Complex:
    return Complex.validate(value).asinh()


def atanh(value) -> Complex:
    return Complex.validate(value).atanh()


def asech(value) -> Complex:
    return Complex.validate(value).asech()


def acsch(value) -> Complex:
    return Complex.validate(value).acsch()


def acoth(value) -> Complex:
    return Complex.validate(value).acoth()
