"""
Assuan protocol package: escaping codec, line model, validation,
and blocking/asyncio framing helpers.
"""

from .async_framing import (
    async_read_line,
    async_read_message,
    async_read_raw_line,
    async_write_comment,
    async_write_data,
    async_write_line,
)
from .commands import Command, is_command, is_skipped_line, normalize_command
from .constants import DATA_CHUNK_LEN, ENCODING, LINE_DELIMITER, MAX_LINE_LEN
from .errors import ErrorCode, LineTooLong, MalformedEscape, ProtocolError, StreamError
from .escaping import escape, escape_text, unescape, unescape_text
from .framing import (
    iter_data_chunks,
    iter_lines,
    join_data,
    read_line,
    read_message,
    read_raw_line,
    split_line,
    write_comment,
    write_data,
    write_line,
)
from .messages import Line
from .validator import validate_command, validate_line_length

__all__ = [
    "Command",
    "is_command",
    "is_skipped_line",
    "normalize_command",
    "DATA_CHUNK_LEN",
    "ENCODING",
    "LINE_DELIMITER",
    "MAX_LINE_LEN",
    "ErrorCode",
    "ProtocolError",
    "StreamError",
    "MalformedEscape",
    "LineTooLong",
    "escape",
    "unescape",
    "escape_text",
    "unescape_text",
    "Line",
    "iter_data_chunks",
    "iter_lines",
    "join_data",
    "read_line",
    "read_message",
    "read_raw_line",
    "split_line",
    "write_line",
    "write_data",
    "write_comment",
    "async_read_line",
    "async_read_message",
    "async_read_raw_line",
    "async_write_line",
    "async_write_data",
    "async_write_comment",
    "validate_command",
    "validate_line_length",
]
