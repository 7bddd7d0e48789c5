"""Rational numbers kept in lowest terms."""

from .arithmetic import gcd, simplify
from .arrays import as_rational_array, simplify_pairs, zeros, zeros_like
from .base import RationalBase
from .errors import InvalidArgument
from .rational import Rational, SimplifiedRational

__all__ = [
    "InvalidArgument",
    "RationalBase",
    "Rational",
    "SimplifiedRational",
    "gcd",
    "simplify",
    "as_rational_array",
    "simplify_pairs",
    "zeros",
    "zeros_like",
]
