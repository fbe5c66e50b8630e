"""Complex numbers with i/j notation, parsing, and a full transcendental function library."""
from .complex import Complex
from .errors import (
    ArityError,
    ComplexError,
    DivisionByZeroError,
    InvalidArgumentError,
    InvalidFormatError,
    SuffixMismatchError,
)
from . import functions

__all__ = [
    "Complex",
    "functions",
    "ComplexError",
    "InvalidFormatError",
    "InvalidArgumentError",
    "ArityError",
    "SuffixMismatchError",
    "DivisionByZeroError",
]

__version__ = "1.0.0"
