"""NumPy helpers for working with arrays of rational values."""
from __future__ import annotations

from typing import Any, Tuple, Type

import numpy as np

from .arithmetic import simplify
from .base import RationalBase
from .errors import InvalidArgument
from .rational import SimplifiedRational


def _coerce_item(item: Any, cls: Type[RationalBase]) -> RationalBase:
    if isinstance(item, cls):
        return item
    if isinstance(item, RationalBase):
        return cls.construct(item.numerator, item.denominator)
    if isinstance(item, np.generic):
        return _coerce_item(item.item(), cls)
    if isinstance(item, tuple) and len(item) == 2:
        return cls.construct(*item)
    if isinstance(item, int) and not isinstance(item, bool):
        return cls.construct(item, 1)
    raise TypeError(f"Cannot interpret {type(item)!r} as a rational value")


def as_rational_array(
    values: Any,
    *,
    cls: Type[RationalBase] = SimplifiedRational,
    copy: bool = True,
) -> np.ndarray:
    """Return a ``numpy.ndarray`` of *cls* values.

    ``values`` can be any iterable containing rational values, integers or
    ``(numerator, denominator)`` pairs, a list of such lists (one row each),
    or an existing NumPy array. When ``copy`` is ``False`` and ``values`` is
    already an object array whose elements are all *cls* instances, that array
    is returned as is.
    """

    if isinstance(values, np.ndarray):
        array = values.copy() if copy else values
        if array.dtype == object and all(isinstance(item, cls) for item in array.flat):
            return array
        vectorised = np.vectorize(lambda item: _coerce_item(item, cls), otypes=[object])
        return vectorised(array)

    if isinstance(values, (list, tuple)):
        if values and all(isinstance(item, list) for item in values):
            rows = [as_rational_array(row, cls=cls) for row in values]
            if len({row.shape for row in rows}) != 1:
                raise ValueError("nested rows must all have the same shape")
            return np.stack(rows)
        # np.array would split (n, d) pairs into a second axis.
        array = np.empty(len(values), dtype=object)
        for index, item in enumerate(values):
            array[index] = _coerce_item(item, cls)
        return array

    return as_rational_array(list(values), cls=cls, copy=copy)


def zeros(length: int, *, cls: Type[RationalBase] = SimplifiedRational) -> np.ndarray:
    """Return a one-dimensional array of length ``length`` filled with zeros."""

    if length < 0:
        raise ValueError("length must be non-negative")
    return as_rational_array([cls.construct(0, 1) for _ in range(length)], cls=cls)


def zeros_like(
    values: Any,
    *,
    cls: Type[RationalBase] = SimplifiedRational,
) -> np.ndarray:
    """Return a zero-filled array that matches the shape of ``values``."""

    if isinstance(values, np.ndarray):
        shape = values.shape
    else:
        shape = as_rational_array(values, cls=cls).shape
    flat = np.empty(int(np.prod(shape, dtype=np.int64)), dtype=object)
    for index in range(flat.size):
        flat[index] = cls.construct(0, 1)
    return flat.reshape(shape)


def simplify_pairs(numerators: Any, denominators: Any) -> Tuple[np.ndarray, np.ndarray]:
    """Apply :func:`~lowterms.arithmetic.simplify` element-wise.

    Both inputs are broadcast against each other. A zero anywhere in
    ``denominators`` raises :class:`~lowterms.errors.InvalidArgument` before
    any element is reduced.
    """

    nums, dens = np.broadcast_arrays(np.asarray(numerators), np.asarray(denominators))
    if not np.issubdtype(nums.dtype, np.integer) and nums.dtype != object:
        raise TypeError(f"numerators must be integers, got dtype {nums.dtype}")
    if not np.issubdtype(dens.dtype, np.integer) and dens.dtype != object:
        raise TypeError(f"denominators must be integers, got dtype {dens.dtype}")
    if np.any(dens == 0):
        raise InvalidArgument("denominators must be non-zero")

    reduced = np.vectorize(simplify, otypes=[object, object])(nums, dens)
    out_dtype = np.result_type(nums.dtype, dens.dtype)
    # Mixed signed/unsigned pairs promote to float64; keep exact ints instead.
    if not np.issubdtype(out_dtype, np.integer):
        return reduced[0], reduced[1]
    return reduced[0].astype(out_dtype), reduced[1].astype(out_dtype)


__all__ = ["as_rational_array", "zeros", "zeros_like", "simplify_pairs"]
