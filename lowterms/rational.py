"""Concrete rational value types."""
from __future__ import annotations

import numbers
from typing import Any, Union

from .arithmetic import _ensure_int, simplify
from .base import RationalBase
from .errors import InvalidArgument

IntegerLike = Union[int, numbers.Integral]


class Rational(RationalBase):
    """Rational value stored exactly as given, without simplification."""

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: IntegerLike = 0, denominator: IntegerLike = 1) -> None:
        num = _ensure_int(numerator, name="numerator")
        den = _ensure_int(denominator, name="denominator")
        if den == 0:
            raise InvalidArgument("denominator must be non-zero")
        self._numerator = num
        self._denominator = den

    @classmethod
    def construct(cls, numerator: IntegerLike, denominator: IntegerLike) -> "Rational":
        return cls(numerator, denominator)

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Rational):
            return self.same_pair(other)
        return False

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._numerator, self._denominator))


class SimplifiedRational(RationalBase):
    """Rational value kept in lowest terms.

    The pair is reduced by :func:`~lowterms.arithmetic.simplify` on
    construction. The sign of the denominator is kept as given, so
    ``SimplifiedRational(1, -2)`` and ``SimplifiedRational(-1, 2)`` are not
    equal even though both print as ``-1/2``.
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: IntegerLike = 0, denominator: IntegerLike = 1) -> None:
        num, den = simplify(numerator, denominator)
        self._numerator = num
        self._denominator = den

    @classmethod
    def construct(
        cls, numerator: IntegerLike, denominator: IntegerLike
    ) -> "SimplifiedRational":
        """Return a new simplified value of this class."""
        return cls(numerator, denominator)

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, SimplifiedRational):
            return self.same_pair(other)
        return False

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._numerator, self._denominator))


__all__ = ["Rational", "SimplifiedRational"]
