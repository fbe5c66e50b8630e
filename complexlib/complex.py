import math
import numbers
import re

from .errors import (
    ArityError,
    DivisionByZeroError,
    InvalidArgumentError,
    InvalidFormatError,
    SuffixMismatchError,
)

# ───────────────────────── CONFIGURATION ──────────────────────────────────── #
DEFAULT_SUFFIX = "i"                  # imaginary unit when none was given
SUFFIXES       = ("", "i", "j")       # "" marks a purely real value
EQ_REL_TOL     = 1e-9                 # tolerances used by ==
EQ_ABS_TOL     = 1e-12
TANH_SATURATION = 20.0               # |real| beyond which tanh rounds to ±1

_NUMBER_SPLIT = re.compile(
    r"""
    (                                   # real part
        [-+]?(\d+\.?\d*|\d*\.?\d+)          # integer or float
        ([Ee][-+]?[0-2]?\d{1,3})?           # optional exponent
    )
    (                                   # imaginary part
        [-+]?(\d+\.?\d*|\d*\.?\d+)
        ([Ee][-+]?[0-2]?\d{1,3})?
    )?
    (                                   # bare sign and suffix (implicit 1 or -1)
        ([-+]?)
        ([ij]?)
    )
    """,
    re.VERBOSE | re.IGNORECASE | re.ASCII,
)
_BARE_SUFFIX = re.compile(r"([-+]?)([ij])", re.IGNORECASE)

_TYPOS = (("+-", "-"), ("-+", "-"), ("++", "+"), ("--", "+"))


# ──────────────────────────── utilities ──────────────────────────────────── #
def _is_real_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _to_float(value) -> float:
    if _is_real_number(value):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            raise InvalidArgumentError(f"Not a number: {value!r}") from None
    raise InvalidArgumentError(f"Not a number: {value!r}")


def _normalize(real, imaginary, suffix) -> tuple[float, float, str]:
    """Single place where the (real, imaginary, suffix) invariant is enforced."""
    real = _to_float(real)
    imaginary = _to_float(imaginary)
    if suffix is None:
        suffix = ""
    if not isinstance(suffix, str) or suffix.lower() not in SUFFIXES:
        raise InvalidArgumentError(f"Suffix must be 'i' or 'j', got {suffix!r}")
    suffix = suffix.lower()

    if imaginary != 0.0 and not suffix:
        suffix = DEFAULT_SUFFIX
    elif imaginary == 0.0:
        suffix = ""
    return real, imaginary, suffix


def _parse_string(text: str) -> tuple:
    """Split a string such as ``"3-4.5e2j"`` into (real, imaginary, suffix)."""
    text = text.strip()
    for typo, fix in _TYPOS:
        text = text.replace(typo, fix)

    match = _NUMBER_SPLIT.fullmatch(text)
    if match is None:
        # no digits at all: maybe just a signed suffix like "-j"
        bare = _BARE_SUFFIX.fullmatch(text)
        if bare is None:
            raise InvalidFormatError(f"Invalid complex number: {text!r}")
        return 0.0, -1.0 if bare.group(1) == "-" else 1.0, bare.group(2)

    real, imaginary = match.group(1), match.group(4)
    tail, sign, suffix = match.group(7), match.group(8), match.group(9)

    if not imaginary and suffix:
        if tail != suffix:
            # "3+i": implicit unit imaginary part
            imaginary = "-1" if sign == "-" else "1"
        else:
            # "3i": the only number present is the imaginary part
            real, imaginary = "0", real

    real, imaginary = float(real), float(imaginary or 0.0)
    if not (math.isfinite(real) and math.isfinite(imaginary)):
        raise InvalidFormatError(f"Number out of range: {text!r}")
    return real, imaginary, suffix or DEFAULT_SUFFIX


def _from_structure(value) -> tuple:
    if isinstance(value, dict):
        unknown = set(value) - {"real", "imaginary", "suffix"}
        if unknown:
            raise InvalidArgumentError(f"Unknown complex fields: {sorted(unknown)}")
        return (value.get("real", 0.0),
                value.get("imaginary", 0.0),
                value.get("suffix", DEFAULT_SUFFIX))

    items = list(value)
    if len(items) > 3:
        raise InvalidArgumentError("Expected at most (real, imaginary, suffix)")
    return tuple(items + [0.0, 0.0, DEFAULT_SUFFIX][len(items):])


def _format_float(value: float) -> str:
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def _real_power(base: float, power: float) -> float:
    try:
        return base ** power
    except OverflowError:
        return math.inf


# ─────────────────────────── pairwise arithmetic ─────────────────────────── #
def _sum(a: "Complex", b: "Complex") -> tuple[float, float]:
    return a.real + b.real, a.imaginary + b.imaginary


def _difference(a: "Complex", b: "Complex") -> tuple[float, float]:
    return a.real - b.real, a.imaginary - b.imaginary


def _product(a: "Complex", b: "Complex") -> tuple[float, float]:
    return (a.real * b.real - a.imaginary * b.imaginary,
            a.real * b.imaginary + a.imaginary * b.real)


def _quotient(dividend: "Complex", divisor: "Complex") -> tuple[float, float]:
    """dividend / divisor by multiplying through with the conjugate."""
    if divisor.real == 0.0 and divisor.imaginary == 0.0:
        raise DivisionByZeroError("Division by zero")

    delta1 = dividend.real * divisor.real + dividend.imaginary * divisor.imaginary
    delta2 = dividend.imaginary * divisor.real - dividend.real * divisor.imaginary
    delta3 = divisor.real * divisor.real + divisor.imaginary * divisor.imaginary
    return delta1 / delta3, delta2 / delta3


class Complex:
    """
    An immutable complex number that remembers its imaginary-unit notation.

    Constructors
    ------------
    Complex(a, b)                 -> a + b i          (rectangular, suffix "i")
    Complex(a, b, "j")            -> a + b j          (engineering notation)
    Complex(a)                    -> a                (purely real)
    Complex("3-4.5j")             -> parsed from text
    Complex([a, b, "j"])          -> from a sequence of up to three fields
    Complex({"real": a, ...})     -> from a mapping of the same fields

    Use Complex.from_polar(r, theta) for an explicit polar constructor and
    Complex.validate(value) to promote anything above to a Complex.

    The suffix is "" exactly when the imaginary part is zero. Two non-real
    values may only be combined when their suffixes agree.
    """

    EULER = math.e

    __slots__ = ("_real", "_imaginary", "_suffix")

    # ---------- construction ----------
    def __init__(self, real=0.0, imaginary=None, suffix=DEFAULT_SUFFIX):
        if imaginary is None:
            if isinstance(real, Complex):
                real, imaginary, suffix = real.real, real.imaginary, real.suffix
            elif isinstance(real, (list, tuple, dict)):
                real, imaginary, suffix = _from_structure(real)
            elif isinstance(real, str):
                real, imaginary, suffix = _parse_string(real)
            elif isinstance(real, complex):
                real, imaginary, suffix = real.real, real.imag, DEFAULT_SUFFIX
            elif _is_real_number(real):
                imaginary, suffix = 0.0, None
            else:
                raise InvalidArgumentError(
                    f"Value is not a valid complex number: {real!r}")

        self._real, self._imaginary, self._suffix = _normalize(real, imaginary, suffix)

    # ---------- convenience makers ----------
    @classmethod
    def parse(cls, text: str) -> "Complex":
        """Parse the textual form, e.g. ``"3+4i"``, ``"-2.5e-3j"`` or ``"-i"``."""
        if not isinstance(text, str):
            raise InvalidArgumentError(f"Expected a string, got {text!r}")
        return cls(text)

    @classmethod
    def from_polar(cls, r: float, theta: float, suffix: str = DEFAULT_SUFFIX) -> "Complex":
        """Explicit polar constructor, r·e^{iθ}."""
        return cls(r * math.cos(theta), r * math.sin(theta), suffix)

    @classmethod
    def validate(cls, value) -> "Complex":
        """
        Promote a number, string, structure or builtin complex to a Complex.

        Complex instances pass through unchanged; anything else that cannot be
        converted raises InvalidArgumentError (InvalidFormatError for bad text).
        """
        if isinstance(value, Complex):
            return value
        return cls(value)

    # ---------- basic properties ----------
    @property
    def real(self) -> float:
        return self._real

    @property
    def imaginary(self) -> float:
        return self._imaginary

    @property
    def suffix(self) -> str:
        return self._suffix

    def is_real(self) -> bool:
        return self._imaginary == 0.0

    def is_complex(self) -> bool:
        return not self.is_real()

    def _is_origin(self) -> bool:
        return self._real == 0.0 and self._imaginary == 0.0

    def format(self) -> str:
        """
        Canonical text form: ``"3+4i"``, ``"-j"``, ``"2.5"``, ``"0.0"``.

        Finite values parse back to the same number. The ``inf`` pole
        sentinel prints as ``"inf"``, which the parser rejects.
        """
        text = ""
        if self._imaginary != 0.0:
            if abs(self._imaginary) != 1.0:
                text += _format_float(self._imaginary) + self._suffix
            else:
                text += ("-" if self._imaginary < 0.0 else "") + self._suffix
        if self._real != 0.0:
            if text and self._imaginary > 0.0:
                text = "+" + text
            text = _format_float(self._real) + text
        return text or "0.0"

    def rho(self) -> float:
        """Modulus, sqrt(real² + imaginary²)."""
        return math.sqrt(self._real * self._real + self._imaginary * self._imaginary)

    abs = rho

    def theta(self) -> float:
        """Principal argument in (-π, π]."""
        if self._real == 0.0:
            if self.is_real():
                return 0.0
            if self._imaginary < 0.0:
                return math.pi / -2
            return math.pi / 2
        if self._real > 0.0:
            return math.atan(self._imaginary / self._real)
        if self._imaginary < 0.0:
            return -(math.pi - math.atan(abs(self._imaginary) / abs(self._real)))
        return math.pi - math.atan(self._imaginary / abs(self._real))

    argument = theta

    # ---------- component helpers ----------
    def conjugate(self) -> "Complex":
        return Complex(self._real, -1 * self._imaginary, self._suffix)

    def negative(self) -> "Complex":
        return Complex(-1 * self._real, -1 * self._imaginary, self._suffix)

    def reverse(self) -> "Complex":
        """Swap the real and imaginary parts."""
        return Complex(self._imaginary, self._real,
                       None if self._real == 0.0 else self._suffix)

    def invert_real(self) -> "Complex":
        return Complex(-1 * self._real, self._imaginary,
                       None if self._imaginary == 0.0 else self._suffix)

    def invert_imaginary(self) -> "Complex":
        return Complex(self._real, -1 * self._imaginary,
                       None if self._imaginary == 0.0 else self._suffix)

    def _keep_suffix(self, value: "Complex") -> "Complex":
        # re-apply our notation after a chain that went through real intermediates
        return Complex(value.real, value.imaginary, self._suffix or None)

    # ---------- arithmetic (reducing operations) ----------
    def _reduce(self, values: tuple, combine) -> "Complex":
        if not values:
            raise ArityError("This function requires at least 2 arguments")

        result = self
        for value in values:
            value = Complex.validate(value)
            if (result.is_complex() and value.is_complex()
                    and result.suffix != value.suffix):
                raise SuffixMismatchError(
                    f"Suffix mismatch: {result.suffix!r} vs {value.suffix!r}")

            real, imaginary = combine(result, value)
            result = Complex(real, imaginary,
                             None if imaginary == 0.0 else max(result.suffix, value.suffix))
        return result

    def add(self, *values) -> "Complex":
        return self._reduce(values, _sum)

    def subtract(self, *values) -> "Complex":
        return self._reduce(values, _difference)

    def multiply(self, *values) -> "Complex":
        return self._reduce(values, _product)

    def divide_by(self, *values) -> "Complex":
        """Divide this value by each of ``values`` in turn."""
        return self._reduce(values, _quotient)

    def divide_into(self, *values) -> "Complex":
        """Divide each of ``values`` in turn by the running result."""
        return self._reduce(values, lambda result, value: _quotient(value, result))

    def inverse(self) -> "Complex":
        if self._is_origin():
            raise DivisionByZeroError("Division by zero")
        return self.divide_into(1.0)

    # ---------- exponential & logarithmic ----------
    def exp(self) -> "Complex":
        if self._real == 0.0 and abs(self._imaginary) == math.pi:
            return Complex(-1.0, 0.0)

        rho = math.exp(self._real)
        return Complex(rho * math.cos(self._imaginary),
                       rho * math.sin(self._imaginary),
                       self._suffix)

    def ln(self) -> "Complex":
        if self._is_origin():
            raise InvalidArgumentError("Logarithm of zero is undefined")
        return Complex(math.log(self.rho()), self.theta(), self._suffix)

    def log10(self) -> "Complex":
        if self._is_origin():
            raise InvalidArgumentError("Logarithm of zero is undefined")
        if self._real > 0.0 and self.is_real():
            return Complex(math.log10(self._real), 0.0, self._suffix)
        return self.ln().multiply(math.log10(self.EULER))

    def log2(self) -> "Complex":
        if self._is_origin():
            raise InvalidArgumentError("Logarithm of zero is undefined")
        if self._real > 0.0 and self.is_real():
            return Complex(math.log2(self._real), 0.0, self._suffix)
        return self.ln().multiply(math.log2(self.EULER))

    def sqrt(self) -> "Complex":
        """Principal square root."""
        theta = self.theta()
        rho = math.sqrt(self.rho())
        return Complex(math.cos(theta / 2) * rho, math.sin(theta / 2) * rho, self._suffix)

    def pow(self, power) -> "Complex":
        """Raise to a real power, using the principal branch for non-real results."""
        if not _is_real_number(power):
            raise InvalidArgumentError("Power argument must be a real number")

        if self.is_real() and self._real >= 0.0:
            if self._real == 0.0 and power < 0:
                raise DivisionByZeroError("Zero cannot be raised to a negative power")
            return Complex(_real_power(self._real, power))

        r_power = _real_power(self.rho(), power)
        theta = self.argument() * power
        if theta == 0:
            return Complex(1.0)
        return Complex(r_power * math.cos(theta), r_power * math.sin(theta), self._suffix)

    # ---------- trigonometric ----------
    def cos(self) -> "Complex":
        if self.is_real():
            return Complex(math.cos(self._real))

        return Complex(
            math.cos(self._real) * math.cosh(self._imaginary),
            math.sin(self._real) * math.sinh(self._imaginary),
            self._suffix,
        ).conjugate()

    def sin(self) -> "Complex":
        if self.is_real():
            return Complex(math.sin(self._real))

        return Complex(
            math.sin(self._real) * math.cosh(self._imaginary),
            math.cos(self._real) * math.sinh(self._imaginary),
            self._suffix,
        )

    def tan(self) -> "Complex":
        if self.is_real():
            return Complex(math.tan(self._real))

        real, imaginary = self._real, self._imaginary
        divisor = 1 + math.tan(real) ** 2 * math.tanh(imaginary) ** 2
        if divisor == 0.0:
            raise DivisionByZeroError("Division by zero")

        # sec() answers the origin with its sentinel, so take 1/cos directly
        sec_squared = Complex(real).cos().inverse().real ** 2
        try:
            sech_squared = Complex(imaginary).sech().real ** 2
        except OverflowError:
            # cosh(imaginary) is past float range, so sech underflows to 0
            sech_squared = 0.0
        return Complex(
            sech_squared * math.tan(real) / divisor,
            sec_squared * math.tanh(imaginary) / divisor,
            self._suffix,
        )

    def sec(self) -> "Complex":
        if self._is_origin():
            return Complex(math.inf)
        return self.cos().inverse()

    def csc(self) -> "Complex":
        if self._is_origin():
            return Complex(math.inf)
        return self.sin().inverse()

    def cot(self) -> "Complex":
        if self._is_origin():
            return Complex(math.inf)
        return self.tan().inverse()

    # ---------- hyperbolic ----------
    def cosh(self) -> "Complex":
        if self.is_real():
            return Complex(math.cosh(self._real))

        return Complex(
            math.cosh(self._real) * math.cos(self._imaginary),
            math.sinh(self._real) * math.sin(self._imaginary),
            self._suffix,
        )

    def sinh(self) -> "Complex":
        if self.is_real():
            return Complex(math.sinh(self._real))

        return Complex(
            math.sinh(self._real) * math.cos(self._imaginary),
            math.cosh(self._real) * math.sin(self._imaginary),
            self._suffix,
        )

    def tanh(self) -> "Complex":
        real, imaginary = self._real, self._imaginary
        if abs(real) > TANH_SATURATION:
            return Complex(math.copysign(1.0, real))

        divisor = math.cos(imaginary) * math.cos(imaginary) + math.sinh(real) * math.sinh(real)
        if divisor == 0.0:
            raise DivisionByZeroError("Division by zero")

        return Complex(
            math.sinh(real) * math.cosh(real) / divisor,
            0.5 * math.sin(2 * imaginary) / divisor,
            self._suffix,
        )

    def sech(self) -> "Complex":
        if self._is_origin():
            return Complex(math.inf)
        return self.cosh().inverse()

    def csch(self) -> "Complex":
        if self._is_origin():
            return Complex(math.inf)
        return self.sinh().inverse()

    def coth(self) -> "Complex":
        # no origin sentinel here: tanh(0) is 0, so inverse() raises
        return self.tanh().inverse()

    # ---------- inverse trigonometric ----------
    def acos(self) -> "Complex":
        """-i·ln(z + i·sqrt(1 - z²))"""
        root = Complex(1.0).subtract(self.multiply(self)).sqrt()
        adjust = Complex(self._real - root.imaginary,
                         self._imaginary + root.real,
                         self._suffix)
        log = adjust.ln()
        return Complex(log.imaginary, -1 * log.real, self._suffix)

    def asin(self) -> "Complex":
        """-i·ln(i·z + sqrt(1 - z²))"""
        root = Complex(1.0).subtract(self.multiply(self)).sqrt()
        adjust = Complex(root.real - self._imaginary,
                         root.imaginary + self._real,
                         self._suffix)
        log = adjust.ln()
        return Complex(log.imaginary, -1 * log.real, self._suffix)

    def atan(self) -> "Complex":
        """i/2·ln((1 - i·z) / (1 + i·z))"""
        if self.is_real():
            return Complex(math.atan(self._real))

        iz = Complex(-1 * self._imaginary, self._real, self._suffix)
        unit = Complex(1.0, 0.0)
        log = unit.subtract(iz).divide_by(iz.add(unit)).ln()

        # keep the seam on one side: an angle of exactly π is read as -π
        angle = -math.pi if log.imaginary == math.pi else log.imaginary
        return Complex(angle * -0.5, log.real * 0.5, self._suffix)

    def asec(self) -> "Complex":
        if self._is_origin():
            return Complex(math.inf)
        return self.inverse().acos()

    def acsc(self) -> "Complex":
        if self._is_origin():
            return Complex(math.inf)
        return self.inverse().asin()

    def acot(self) -> "Complex":
        return self.inverse().atan()

    # ---------- inverse hyperbolic ----------
    def acosh(self) -> "Complex":
        if self.is_real() and self._real > 1:
            return Complex(math.acosh(self._real))

        result = self.acos().reverse()
        if result.real < 0.0:
            result = result.invert_real()
        return self._keep_suffix(result)

    def asinh(self) -> "Complex":
        if self.is_real() and self._real > 1:
            return Complex(math.asinh(self._real))

        result = self.reverse().invert_real().asin().reverse().invert_imaginary()
        return self._keep_suffix(result)

    def atanh(self) -> "Complex":
        if self.is_real():
            real = self._real
            if abs(real) == 1.0:
                return Complex(math.copysign(math.inf, real))
            if -1.0 < real < 1.0:
                return Complex(math.atanh(real))
            # analytic continuation beyond the real cut
            return Complex(math.atanh(1 / real), math.pi / 2 if real < 0.0 else -math.pi / 2)

        result = self.invert_imaginary().reverse().atan().invert_real().reverse()
        return self._keep_suffix(result)

    def asech(self) -> "Complex":
        if self._is_origin():
            return Complex(math.inf)
        return self.inverse().acosh()

    def acsch(self) -> "Complex":
        if self._is_origin():
            return Complex(math.inf)
        return self.inverse().asinh()

    def acoth(self) -> "Complex":
        return self.inverse().atanh()

    # ---------- dunder sugar ----------
    @staticmethod
    def _coerce(value) -> "Complex | None":
        if isinstance(value, (Complex, complex)) or _is_real_number(value):
            return Complex.validate(value)
        return None

    def __add__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self.add(other)

    def __radd__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else other.add(self)

    def __sub__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self.subtract(other)

    def __rsub__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else other.subtract(self)

    def __mul__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self.multiply(other)

    def __rmul__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else other.multiply(self)

    def __truediv__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self.divide_by(other)

    def __rtruediv__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self.divide_into(other)

    def __pow__(self, power):
        if not _is_real_number(power):
            return NotImplemented
        return self.pow(power)

    __neg__   = negative
    __abs__   = rho

    def __pos__(self):
        return self

    def __complex__(self):
        return complex(self._real, self._imaginary)

    def __eq__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return (math.isclose(self._real, other.real, rel_tol=EQ_REL_TOL, abs_tol=EQ_ABS_TOL)
                and math.isclose(self._imaginary, other.imaginary,
                                 rel_tol=EQ_REL_TOL, abs_tol=EQ_ABS_TOL)
                and self._suffix == other.suffix)

    # readable REPL / print‑outs
    def __str__(self):
        return self.format()

    def __repr__(self):
        return f"Complex({self._real!r}, {self._imaginary!r}, {self._suffix!r})"


if __name__ == "__main__":
    z1 = Complex("3+4i")                   # 3 + 4i
    z2 = Complex.from_polar(2, math.pi/4)  # 2·e^{iπ/4}
    print(z1.rho())                        # 5.0
    print(z1.theta())                      # ≈ 0.9273
    print(z1.add(z2, "1-i"))               # chained addition
    print(z1 * z2)                         # operator sugar for multiply
    print(z1.inverse())                    # multiplicative inverse
    print(Complex("2j").sqrt())            # engineering notation survives
    print(Complex(0.5).asin())             # ≈ π/6
