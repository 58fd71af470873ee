"""Error types: a plain string error and an I/O error tagged with a kind."""

from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    """General categories of I/O error."""

    NOT_FOUND = "NotFound"
    PERMISSION_DENIED = "PermissionDenied"
    CONNECTION_REFUSED = "ConnectionRefused"
    CONNECTION_RESET = "ConnectionReset"
    CONNECTION_ABORTED = "ConnectionAborted"
    NOT_CONNECTED = "NotConnected"
    ADDR_IN_USE = "AddrInUse"
    ADDR_NOT_AVAILABLE = "AddrNotAvailable"
    BROKEN_PIPE = "BrokenPipe"
    ALREADY_EXISTS = "AlreadyExists"
    WOULD_BLOCK = "WouldBlock"
    INVALID_INPUT = "InvalidInput"
    INVALID_DATA = "InvalidData"
    TIMED_OUT = "TimedOut"
    WRITE_ZERO = "WriteZero"
    INTERRUPTED = "Interrupted"
    OTHER = "Other"
    UNEXPECTED_EOF = "UnexpectedEof"

    def description(self) -> str:
        """Return the short human-readable text for this kind."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ErrorKind.NOT_FOUND: "entity not found",
    ErrorKind.PERMISSION_DENIED: "permission denied",
    ErrorKind.CONNECTION_REFUSED: "connection refused",
    ErrorKind.CONNECTION_RESET: "connection reset",
    ErrorKind.CONNECTION_ABORTED: "connection aborted",
    ErrorKind.NOT_CONNECTED: "not connected",
    ErrorKind.ADDR_IN_USE: "address in use",
    ErrorKind.ADDR_NOT_AVAILABLE: "address not available",
    ErrorKind.BROKEN_PIPE: "broken pipe",
    ErrorKind.ALREADY_EXISTS: "entity already exists",
    ErrorKind.WOULD_BLOCK: "operation would block",
    ErrorKind.INVALID_INPUT: "invalid input parameter",
    ErrorKind.INVALID_DATA: "invalid data",
    ErrorKind.TIMED_OUT: "timed out",
    ErrorKind.WRITE_ZERO: "write zero",
    ErrorKind.INTERRUPTED: "operation interrupted",
    ErrorKind.OTHER: "other os error",
    ErrorKind.UNEXPECTED_EOF: "unexpected end of file",
}


class StringError(Exception):
    """An error that carries nothing but a message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return repr(self.message)


class IoError(Exception):
    """An I/O error with a kind and, optionally, an inner error payload.

    A string payload is wrapped in a :class:`StringError`.
    """

    def __init__(self, kind: ErrorKind, error: BaseException | str | None = None) -> None:
        if not isinstance(kind, ErrorKind):
            raise TypeError(f"kind must be an ErrorKind, not {type(kind).__name__}")
        if isinstance(error, str):
            error = StringError(error)
        elif error is not None and not isinstance(error, BaseException):
            raise TypeError(
                f"error payload must be a string or an exception, not {type(error).__name__}"
            )
        super().__init__(kind, error)
        self.kind = kind
        self._error = error

    def __str__(self) -> str:
        if self._error is None:
            return self.kind.description()
        return str(self._error)

    def __repr__(self) -> str:
        if self._error is None:
            return f"Kind({self.kind.value})"
        return f"Custom {{ kind: {self.kind.value}, error: {self._error!r} }}"

    def get_ref(self) -> BaseException | None:
        """Return the inner error, or None if this error carries only a kind."""
        return self._error

    def into_inner(self) -> BaseException | None:
        """Return the inner error payload, if any."""
        return self._error