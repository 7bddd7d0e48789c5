"""Shared behaviour for rational value types.

Concrete variants only supply storage (``numerator``/``denominator``) and the
``construct`` factory. Everything else here is written in terms of those three
members, so results keep the concrete type of the receiver.
"""
from __future__ import annotations

import abc
from fractions import Fraction
from typing import Any

from .errors import InvalidArgument


class RationalBase(abc.ABC):
    """Interface and default methods for ``numerator/denominator`` values."""

    __slots__ = ()

    # ------------------------------------------------------------------
    # Required members
    @property
    @abc.abstractmethod
    def numerator(self) -> int:
        ...

    @property
    @abc.abstractmethod
    def denominator(self) -> int:
        ...

    @classmethod
    @abc.abstractmethod
    def construct(cls, numerator: int, denominator: int) -> "RationalBase":
        """Return a new value of the concrete type.

        Raises :class:`~lowterms.errors.InvalidArgument` if *denominator* is 0.
        """

    # ------------------------------------------------------------------
    # Equality helpers
    def same_pair(self, other: "RationalBase") -> bool:
        """Compare stored numerator and denominator, not mathematical value."""
        return (
            self.numerator == other.numerator
            and self.denominator == other.denominator
        )

    # ------------------------------------------------------------------
    # Conversions
    def as_fraction(self) -> Fraction:
        """Return a :class:`Fraction` with the same value."""
        return Fraction(self.numerator, self.denominator)

    def __float__(self) -> float:
        return self.numerator / self.denominator

    def __bool__(self) -> bool:
        return self.numerator != 0

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.numerator}, {self.denominator})"

    def __str__(self) -> str:
        negative = (self.numerator < 0) != (self.denominator < 0)
        sign = "-" if negative else ""
        return f"{sign}{abs(self.numerator)}/{abs(self.denominator)}"

    def __format__(self, format_spec: str) -> str:
        if format_spec in ("", "r", "R"):
            return str(self)
        try:
            return format(float(self), format_spec)
        except (ValueError, TypeError):
            return format(str(self), format_spec)

    # ------------------------------------------------------------------
    # Arithmetic
    @staticmethod
    def _check_operand(that: Any) -> "RationalBase":
        if not isinstance(that, RationalBase):
            raise TypeError(f"expected a rational value, got {type(that)!r}")
        return that

    def negate(self) -> "RationalBase":
        return self.construct(-self.numerator, self.denominator)

    def invert(self) -> "RationalBase":
        if self.numerator == 0:
            raise InvalidArgument("cannot invert zero")
        return self.construct(self.denominator, self.numerator)

    def add(self, that: "RationalBase") -> "RationalBase":
        that = self._check_operand(that)
        return self.construct(
            self.numerator * that.denominator + that.numerator * self.denominator,
            self.denominator * that.denominator,
        )

    def sub(self, that: "RationalBase") -> "RationalBase":
        that = self._check_operand(that)
        return self.construct(
            self.numerator * that.denominator - that.numerator * self.denominator,
            self.denominator * that.denominator,
        )

    def mul(self, that: "RationalBase") -> "RationalBase":
        that = self._check_operand(that)
        return self.construct(
            self.numerator * that.numerator,
            self.denominator * that.denominator,
        )

    def div(self, that: "RationalBase") -> "RationalBase":
        that = self._check_operand(that)
        if that.numerator == 0:
            raise InvalidArgument("cannot divide by zero")
        return self.construct(
            self.numerator * that.denominator,
            self.denominator * that.numerator,
        )

    # ------------------------------------------------------------------
    # Operators
    def _lift(self, other: Any) -> Any:
        if isinstance(other, RationalBase):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return self.construct(other, 1)
        return None

    def __add__(self, other: Any) -> Any:
        that = self._lift(other)
        return NotImplemented if that is None else self.add(that)

    def __radd__(self, other: Any) -> Any:
        that = self._lift(other)
        return NotImplemented if that is None else that.add(self)

    def __sub__(self, other: Any) -> Any:
        that = self._lift(other)
        return NotImplemented if that is None else self.sub(that)

    def __rsub__(self, other: Any) -> Any:
        that = self._lift(other)
        return NotImplemented if that is None else that.sub(self)

    def __mul__(self, other: Any) -> Any:
        that = self._lift(other)
        return NotImplemented if that is None else self.mul(that)

    def __rmul__(self, other: Any) -> Any:
        that = self._lift(other)
        return NotImplemented if that is None else that.mul(self)

    def __truediv__(self, other: Any) -> Any:
        that = self._lift(other)
        return NotImplemented if that is None else self.div(that)

    def __rtruediv__(self, other: Any) -> Any:
        that = self._lift(other)
        return NotImplemented if that is None else that.div(self)

    def __neg__(self) -> "RationalBase":
        return self.negate()

    def __pos__(self) -> "RationalBase":
        return self


__all__ = ["RationalBase"]
