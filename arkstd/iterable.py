"""Re-iterable streams with a known length, and a reversing wrapper."""

from __future__ import annotations

import abc
from collections.abc import Iterator, Sized
from typing import Any


class Iterable(abc.ABC):
    """A streamable object that can produce any number of fresh iterators.

    ``len()`` is a hint of the stream length.
    """

    @abc.abstractmethod
    def iter(self) -> Iterator[Any]:
        """Return a new iterator over the stream."""

    def __iter__(self) -> Iterator[Any]:
        return self.iter()

    @abc.abstractmethod
    def __len__(self) -> int:
        """Return the length hint of the stream."""

    def is_empty(self) -> bool:
        """Return True if the stream is empty."""
        return len(self) == 0


class SequenceIterable(Iterable):
    """An :class:`Iterable` backed by a sized, re-iterable collection."""

    def __init__(self, items: Any) -> None:
        if isinstance(items, Iterator) or not isinstance(items, Sized):
            raise TypeError("items must be a sized collection that can be iterated repeatedly")
        self.items = items

    def iter(self) -> Iterator[Any]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self.items)


class Reverse(Iterable):
    """A stream that goes over another stream in reverse order."""

    def __init__(self, inner: Any) -> None:
        if not isinstance(inner, Iterable):
            inner = SequenceIterable(inner)
        self.inner = inner

    def iter(self) -> Iterator[Any]:
        if hasattr(self.inner, "__reversed__"):
            return reversed(self.inner)
        return reversed(list(self.inner.iter()))

    def __len__(self) -> int:
        return len(self.inner)

    def __reversed__(self) -> Iterator[Any]:
        return self.inner.iter()