"""Small numeric and iteration helpers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice
from typing import TypeVar

T = TypeVar("T")


def log2(x: int) -> int:
    """Return the ceiling of the base-2 logarithm of ``x``; ``log2(0)`` is 0."""
    if x < 0:
        raise ValueError("log2 is defined only for non-negative integers")
    if x == 0:
        return 0
    return (x - 1).bit_length()


def cfg_iter(items: Iterable[T], min_len: int | None = None) -> Iterator[T]:
    """Return an iterator over ``items``.

    ``min_len`` is a work-splitting hint for parallel iteration; iteration
    here is sequential, so it does not change the result.
    """
    if min_len is not None and min_len < 0:
        raise ValueError("min_len must be non-negative")
    return iter(items)


def cfg_chunks(items: Iterable[T], size: int) -> Iterator[list[T]]:
    """Yield successive lists of ``size`` elements; the last may be shorter."""
    if size <= 0:
        raise ValueError("chunk size must be non-zero")
    it = iter(items)
    while chunk := list(islice(it, size)):
        yield chunk