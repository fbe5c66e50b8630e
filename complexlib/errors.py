"""
Exceptions raised by the complex-number value type and its function library.

Every error derives from :class:`ComplexError` and also from the builtin a
caller would catch anyway (``ValueError``, ``TypeError``,
``ZeroDivisionError``), so ``except ZeroDivisionError`` keeps working.
"""


class ComplexError(Exception):
    """Base class for every complexlib failure."""


class InvalidFormatError(ComplexError, ValueError):
    """A string does not match the complex-number grammar."""


class InvalidArgumentError(ComplexError, ValueError):
    """An operand cannot be turned into a Complex, or lies outside a function's domain."""


class ArityError(ComplexError, TypeError):
    """A reducing operation was given fewer than two operands."""


class SuffixMismatchError(ComplexError, ValueError):
    """Two non-real operands use different imaginary-unit suffixes (i vs j)."""


class DivisionByZeroError(ComplexError, ZeroDivisionError):
    """A divisor evaluated to exactly zero."""
