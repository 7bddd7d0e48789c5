"""Integer helpers used to keep rational values in lowest terms."""
from __future__ import annotations

import logging
import numbers
from typing import Tuple

from .errors import InvalidArgument

logger = logging.getLogger(__name__)


def _ensure_int(value: numbers.Real, *, name: str) -> int:
    """Convert *value* to ``int`` when it represents an integer."""
    if isinstance(value, numbers.Integral):
        return int(value)
    raise TypeError(f"{name} must be an integer, got {type(value)!r}")


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of *a* and *b*.

    Requires ``a > 0`` and ``b >= 0``; ``gcd(a, 0)`` is ``a``.
    """
    a = _ensure_int(a, name="a")
    b = _ensure_int(b, name="b")
    if a <= 0:
        raise InvalidArgument(f"a must be positive, got {a}")
    if b < 0:
        raise InvalidArgument(f"b must be non-negative, got {b}")

    while b != 0:
        a, b = b, a % b
    return a


def simplify(numerator: int, denominator: int) -> Tuple[int, int]:
    """Reduce ``numerator/denominator`` to lowest terms.

    Zero always maps to ``(0, 1)``. Otherwise both values are divided by their
    gcd and keep their own sign, so ``simplify(5, -10) == (1, -2)``.
    """
    numerator = _ensure_int(numerator, name="numerator")
    denominator = _ensure_int(denominator, name="denominator")
    if denominator == 0:
        raise InvalidArgument("denominator must be non-zero")

    if numerator == 0:
        return 0, 1

    divisor = gcd(abs(numerator), abs(denominator))
    # divisor divides both exactly, so floor division keeps each sign.
    num = numerator // divisor
    den = denominator // divisor
    logger.debug("simplify(%d, %d) -> (%d, %d)", numerator, denominator, num, den)
    return num, den


__all__ = ["gcd", "simplify"]
