from __future__ import annotations

from enum import IntEnum
from typing import Optional


class ErrorCode(IntEnum):
    """Failure kinds surfaced by the framing layer."""

    STREAM_ERROR = 1
    MALFORMED_ESCAPE = 2
    LINE_TOO_LONG = 3
    INVALID_COMMAND = 4
    INVALID_PARAMETERS = 5


class ProtocolError(Exception):
    """Structured protocol exception carrying an error code + message."""

    code: ErrorCode = ErrorCode.STREAM_ERROR

    def __init__(self, message: str = "", code: Optional[ErrorCode] = None) -> None:
        if code is not None:
            self.code = code
        self.message = message
        super().__init__(f"{self.code.name} ({int(self.code)}): {message}")


class StreamError(ProtocolError):
    """The underlying stream failed or reached its end.

    The original exception, if any, is available as ``__cause__``.
    """

    code = ErrorCode.STREAM_ERROR


class MalformedEscape(ProtocolError):
    """A ``%`` was not followed by two hex digits."""

    code = ErrorCode.MALFORMED_ESCAPE

    def __init__(self, message: str = "", offset: Optional[int] = None) -> None:
        self.offset = offset
        super().__init__(message)


class LineTooLong(ProtocolError):
    code = ErrorCode.LINE_TOO_LONG

    def __init__(self, message: str = "", length: Optional[int] = None) -> None:
        self.length = length
        super().__init__(message)


__all__ = ["ErrorCode", "ProtocolError", "StreamError", "MalformedEscape", "LineTooLong"]
