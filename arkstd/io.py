"""Byte readers and writers over in-memory buffers.

All failures are raised as :class:`~arkstd.errors.IoError`. A read or
write that raises an error of kind ``INTERRUPTED`` is retried by
:meth:`Read.read_exact` and :meth:`Write.write_all`.
"""

from __future__ import annotations

import abc
from typing import Union

from arkstd.errors import ErrorKind, IoError

Buffer = Union[bytes, bytearray, memoryview]

_FILL_ERROR = "failed to fill whole buffer"
_WRITE_ERROR = "failed to write whole buffer"
_RELEASED_ERROR = "destination buffer has been released"


def _writable_view(buf: bytearray | memoryview) -> memoryview:
    view = memoryview(buf)
    if view.readonly:
        raise TypeError("destination buffer must be writable")
    return view.cast("B") if view.format != "B" or view.ndim != 1 else view


def _ensure_view_alive(view: memoryview) -> None:
    """Raise ``BROKEN_PIPE`` if the memory behind ``view`` has been released."""
    try:
        view.nbytes
    except ValueError as exc:
        raise IoError(ErrorKind.BROKEN_PIPE, _RELEASED_ERROR) from exc


class Read(abc.ABC):
    """A source of bytes."""

    @abc.abstractmethod
    def readinto(self, buf: bytearray | memoryview) -> int:
        """Read up to ``len(buf)`` bytes into ``buf`` and return how many were read."""

    def read_exact(self, size: int) -> bytes:
        """Read exactly ``size`` bytes.

        Raises an ``UNEXPECTED_EOF`` error if the source runs out first.
        """
        if size < 0:
            raise ValueError("size must be non-negative")
        buf = bytearray(size)
        view = memoryview(buf)
        filled = 0
        while filled < size:
            try:
                n = self.readinto(view[filled:])
            except IoError as err:
                if err.kind is ErrorKind.INTERRUPTED:
                    continue
                raise
            if n == 0:
                break
            filled += n
        if filled < size:
            raise IoError(ErrorKind.UNEXPECTED_EOF, _FILL_ERROR)
        return bytes(buf)


class Write(abc.ABC):
    """A sink for bytes."""

    @abc.abstractmethod
    def write(self, data: Buffer) -> int:
        """Write some of ``data`` and return how many bytes were written."""

    @abc.abstractmethod
    def flush(self) -> None:
        """Make sure all buffered bytes reach their destination."""

    def write_all(self, data: Buffer) -> None:
        """Write the whole of ``data``.

        Raises a ``WRITE_ZERO`` error if the sink stops accepting bytes.
        """
        view = memoryview(data).cast("B") if not isinstance(data, bytes) else memoryview(data)
        while len(view):
            try:
                n = self.write(view)
            except IoError as err:
                if err.kind is ErrorKind.INTERRUPTED:
                    continue
                raise
            if n == 0:
                raise IoError(ErrorKind.WRITE_ZERO, _WRITE_ERROR)
            view = view[n:]


class SliceReader(Read):
    """Reads from an immutable byte string, consuming it from the front."""

    def __init__(self, data: Buffer) -> None:
        self._data = bytes(data)
        self._offset = 0

    def remaining(self) -> bytes:
        """Return the bytes not yet read."""
        return self._data[self._offset:]

    def readinto(self, buf: bytearray | memoryview) -> int:
        view = _writable_view(buf)
        amount = min(len(view), len(self._data) - self._offset)
        view[:amount] = self._data[self._offset:self._offset + amount]
        self._offset += amount
        return amount

    def read_exact(self, size: int) -> bytes:
        if size < 0:
            raise ValueError("size must be non-negative")
        if size > len(self._data) - self._offset:
            raise IoError(ErrorKind.UNEXPECTED_EOF, _FILL_ERROR)
        chunk = self._data[self._offset:self._offset + size]
        self._offset += size
        return chunk


class SliceWriter(Write):
    """Writes into a fixed-size mutable buffer, never growing it."""

    def __init__(self, buffer: bytearray | memoryview) -> None:
        self._view = _writable_view(buffer)
        self._offset = 0

    def written(self) -> int:
        """Return how many bytes have been written so far."""
        return self._offset

    def write(self, data: Buffer) -> int:
        source = memoryview(data)
        amount = min(source.nbytes, len(self._view) - self._offset)
        self._view[self._offset:self._offset + amount] = source.cast("B")[:amount]
        self._offset += amount
        return amount

    def write_all(self, data: Buffer) -> None:
        if self.write(data) != memoryview(data).nbytes:
            raise IoError(ErrorKind.WRITE_ZERO, _WRITE_ERROR)

    def flush(self) -> None:
        """Writes land directly in the buffer; check that it is still usable."""
        _ensure_view_alive(self._view)


class VecWriter(Write):
    """Appends everything written to a growable byte array."""

    def __init__(self, data: bytearray | None = None) -> None:
        self.data = bytearray() if data is None else data

    def write(self, data: Buffer) -> int:
        source = memoryview(data)
        self.data += source
        return source.nbytes

    def write_all(self, data: Buffer) -> None:
        self.data += memoryview(data)

    def flush(self) -> None:
        """Writes land directly in ``data``; check that it is still a byte array."""
        if not isinstance(self.data, bytearray):
            raise TypeError("destination must be a bytearray")


class Cursor(Read, Write):
    """Wraps an in-memory buffer and tracks a position in it.

    The position starts at 0 even when the buffer is not empty, so writing
    overwrites existing content before appending. A ``bytearray`` grows as
    needed (zero-filling any gap before the position); a writable
    ``memoryview`` is never resized. ``bytes`` can only be read.
    """

    def __init__(self, inner: Buffer) -> None:
        self._inner = inner
        self._pos = 0

    @property
    def position(self) -> int:
        """The current position of the cursor."""
        return self._pos

    @position.setter
    def position(self, pos: int) -> None:
        if pos < 0:
            raise ValueError("cursor position must be non-negative")
        self._pos = pos

    def into_inner(self) -> Buffer:
        """Return the underlying buffer."""
        return self._inner

    def _remaining(self) -> SliceReader:
        data = memoryview(self._inner).cast("B")
        start = min(self._pos, len(data))
        return SliceReader(data[start:])

    def readinto(self, buf: bytearray | memoryview) -> int:
        n = self._remaining().readinto(buf)
        self._pos += n
        return n

    def read_exact(self, size: int) -> bytes:
        chunk = self._remaining().read_exact(size)
        self._pos += size
        return chunk

    def write(self, data: Buffer) -> int:
        if isinstance(self._inner, bytearray):
            return self._vec_write(data)
        if isinstance(self._inner, memoryview) and not self._inner.readonly:
            return self._slice_write(data)
        raise TypeError("cursor buffer is not writable")

    def flush(self) -> None:
        """Writes land directly in the buffer; check that it is still writable."""
        if isinstance(self._inner, bytearray):
            return
        if isinstance(self._inner, memoryview):
            _ensure_view_alive(self._inner)
            if not self._inner.readonly:
                return
        raise TypeError("cursor buffer is not writable")

    def _slice_write(self, data: Buffer) -> int:
        view = self._inner.cast("B")
        start = min(self._pos, len(view))
        amount = SliceWriter(view[start:]).write(data)
        self._pos += amount
        return amount

    def _vec_write(self, data: Buffer) -> int:
        vec = self._inner
        source = memoryview(data).cast("B")
        pos = self._pos
        if len(vec) < pos:
            vec.extend(bytes(pos - len(vec)))
        space = len(vec) - pos
        left = min(space, len(source))
        vec[pos:pos + left] = source[:left]
        vec.extend(source[left:])
        self._pos = pos + len(source)
        return len(source)