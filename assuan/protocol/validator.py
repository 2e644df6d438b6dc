from __future__ import annotations

from typing import Union

from .commands import Command, normalize_command
from .constants import ENCODING, ENCODING_ERRORS, LINE_OVERHEAD, MAX_LINE_LEN
from .errors import ErrorCode, LineTooLong, ProtocolError


def _byte_len(value: Union[str, bytes]) -> int:
    if isinstance(value, str):
        return len(value.encode(ENCODING, ENCODING_ERRORS))
    return len(value)


def validate_command(command: Union[str, Command]) -> str:
    """Return the canonical token, rejecting empty tokens and embedded whitespace."""
    token = normalize_command(command)
    if not token:
        raise ProtocolError("Command token must not be empty", ErrorCode.INVALID_COMMAND)
    if any(ch.isspace() for ch in token):
        raise ProtocolError(f"Command token {token!r} contains whitespace", ErrorCode.INVALID_COMMAND)
    return token


def validate_line_length(command: Union[str, Command], parameters: Union[str, bytes] = "") -> int:
    """
    Ensure command + parameters fit in one line.
    The bound is checked against the unescaped parameters, before encoding.
    """
    length = _byte_len(normalize_command(command)) + _byte_len(parameters) + LINE_OVERHEAD
    if length > MAX_LINE_LEN:
        raise LineTooLong(f"Line of {length} bytes exceeds {MAX_LINE_LEN}", length=length)
    return length


__all__ = ["validate_command", "validate_line_length"]
