from __future__ import annotations

import asyncio
import logging
from typing import Tuple, Union

from ..settings import SETTINGS
from .commands import Command
from .constants import LINE_DELIMITER
from .errors import StreamError
from .framing import accept_line, decode_line, encode_data_lines, split_line
from .messages import Line

logger = logging.getLogger(__name__)


async def _readline(reader: asyncio.StreamReader) -> bytes:
    try:
        data = await reader.readuntil(LINE_DELIMITER)
    except asyncio.IncompleteReadError as exc:
        # a final line without LF still counts
        if not exc.partial:
            raise StreamError("End of stream") from exc
        data = exc.partial
    except asyncio.LimitOverrunError as exc:
        raise StreamError(f"Line exceeds reader buffer limit: {exc}") from exc
    except OSError as exc:
        raise StreamError(f"Read failed: {exc}") from exc
    if SETTINGS.trace:
        logger.debug("<- %r", data)
    return data


async def _write(writer: asyncio.StreamWriter, data: bytes) -> None:
    try:
        writer.write(data)
        await writer.drain()
    except OSError as exc:
        logger.warning("Write failed: %s", exc)
        raise StreamError(f"Write failed: {exc}") from exc
    if SETTINGS.trace:
        logger.debug("-> %r", data)


async def _next_text(reader: asyncio.StreamReader) -> str:
    while True:
        text = decode_line(await _readline(reader))
        if accept_line(text):
            return text


async def async_read_message(reader: asyncio.StreamReader) -> Line:
    return Line.parse(await _next_text(reader))


async def async_read_raw_line(reader: asyncio.StreamReader) -> Tuple[str, str]:
    return split_line(await _next_text(reader))


async def async_read_line(reader: asyncio.StreamReader) -> Tuple[str, str]:
    """Read the next non-skipped line from the stream and decode it."""
    return (await async_read_message(reader)).as_tuple()


async def async_write_line(
    writer: asyncio.StreamWriter, command: Union[str, Command], parameters: Union[str, bytes] = ""
) -> None:
    await _write(writer, Line.create(command, parameters).to_wire())


async def async_write_data(writer: asyncio.StreamWriter, payload: bytes) -> None:
    for line in encode_data_lines(payload):
        await _write(writer, line)


async def async_write_comment(writer: asyncio.StreamWriter, text: str) -> None:
    await async_write_line(writer, Command.COMMENT, text)


__all__ = [
    "async_read_message",
    "async_read_raw_line",
    "async_read_line",
    "async_write_line",
    "async_write_data",
    "async_write_comment",
]
