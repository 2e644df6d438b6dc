from __future__ import annotations

import logging
from typing import BinaryIO, Iterable, Iterator, Tuple, Union

from ..settings import SETTINGS
from .commands import Command, is_skipped_line
from .constants import (
    DATA_CHUNK_LEN,
    DATA_PREFIX,
    ENCODING,
    ENCODING_ERRORS,
    LINE_DELIMITER,
    PARAM_SEPARATOR_TEXT,
)
from .errors import StreamError
from .escaping import escape, unescape
from .messages import Line
from .validator import validate_command

logger = logging.getLogger(__name__)


def decode_line(data: bytes) -> str:
    """Strip the LF (and a CR right before it) and decode to text."""
    if data.endswith(LINE_DELIMITER):
        data = data[:-1]
        if data.endswith(b"\r"):
            data = data[:-1]
    return data.decode(ENCODING, ENCODING_ERRORS)


def split_line(text: str) -> Tuple[str, str]:
    """Split wire text into the upper-case command and the still-escaped remainder."""
    command, _, remainder = text.partition(PARAM_SEPARATOR_TEXT)
    return validate_command(command), remainder


def accept_line(text: str) -> bool:
    """Return False for lines the reader silently discards."""
    if is_skipped_line(text):
        logger.debug("Skipping line %r", text)
        return False
    return True


def iter_data_chunks(payload: bytes) -> Iterator[bytes]:
    """Escape ``payload`` and yield slices of at most DATA_CHUNK_LEN bytes, in order."""
    encoded = escape(payload)
    for start in range(0, len(encoded), DATA_CHUNK_LEN):
        yield encoded[start : start + DATA_CHUNK_LEN]


def encode_data_lines(payload: bytes) -> Iterator[bytes]:
    for chunk in iter_data_chunks(payload):
        yield DATA_PREFIX + chunk + LINE_DELIMITER


def join_data(chunks: Iterable[Union[bytes, str]]) -> bytes:
    """Reassemble a payload from escaped ``D`` line bodies, in emission order."""
    buf = bytearray()
    for chunk in chunks:
        buf += chunk.encode(ENCODING, ENCODING_ERRORS) if isinstance(chunk, str) else chunk
    return unescape(bytes(buf))


def _read_raw(stream: BinaryIO) -> bytes:
    try:
        data = stream.readline()
    except OSError as exc:
        raise StreamError(f"Read failed: {exc}") from exc
    if data and SETTINGS.trace:
        logger.debug("<- %r", data)
    return data


def _readline(stream: BinaryIO) -> bytes:
    data = _read_raw(stream)
    if not data:
        raise StreamError("End of stream")
    return data


def _write_all(stream: BinaryIO, data: bytes) -> None:
    # raw streams (pipes, unbuffered sockets) may accept only part of the buffer
    view = memoryview(data)
    while view:
        written = stream.write(view)
        if written is None:
            raise StreamError("Write would block")
        if written == 0:
            raise StreamError("Stream accepted no bytes")
        if written >= len(view):
            return
        view = view[written:]


def _write(stream: BinaryIO, data: bytes) -> None:
    try:
        _write_all(stream, data)
        flush = getattr(stream, "flush", None)
        if flush is not None:
            flush()
    except OSError as exc:
        logger.warning("Write failed: %s", exc)
        raise StreamError(f"Write failed: {exc}") from exc
    if SETTINGS.trace:
        logger.debug("-> %r", data)


def _next_text(stream: BinaryIO) -> str:
    while True:
        text = decode_line(_readline(stream))
        if accept_line(text):
            return text


def read_message(stream: BinaryIO) -> Line:
    """Read lines until one is not blank/comment/status and parse it."""
    return Line.parse(_next_text(stream))


def read_raw_line(stream: BinaryIO) -> Tuple[str, str]:
    """
    Like read_line but leaves the parameters escaped.
    Use it to collect ``D`` lines for join_data: an escape token may span two of them.
    """
    return split_line(_next_text(stream))


def read_line(stream: BinaryIO) -> Tuple[str, str]:
    """
    Read the next protocol line as ``(COMMAND, parameters)``.
    Raises StreamError at end of stream and MalformedEscape on bad parameters.
    """
    return read_message(stream).as_tuple()


def iter_lines(stream: BinaryIO) -> Iterator[Line]:
    """Yield parsed lines until the stream ends."""
    while True:
        data = _read_raw(stream)
        if not data:
            return
        text = decode_line(data)
        if accept_line(text):
            yield Line.parse(text)


def write_line(stream: BinaryIO, command: Union[str, Command], parameters: Union[str, bytes] = "") -> None:
    """Write ``COMMAND SP escaped-parameters LF`` as a single write."""
    _write(stream, Line.create(command, parameters).to_wire())


def write_data(stream: BinaryIO, payload: bytes) -> None:
    """
    Send ``payload`` as one or more ``D`` lines.
    Lines already written stay written if a later write fails; cancel the transaction (CAN) after an error.
    """
    for line in encode_data_lines(payload):
        _write(stream, line)


def write_comment(stream: BinaryIO, text: str) -> None:
    write_line(stream, Command.COMMENT, text)


__all__ = [
    "decode_line",
    "accept_line",
    "iter_data_chunks",
    "encode_data_lines",
    "join_data",
    "split_line",
    "read_message",
    "read_raw_line",
    "read_line",
    "iter_lines",
    "write_line",
    "write_data",
    "write_comment",
]
