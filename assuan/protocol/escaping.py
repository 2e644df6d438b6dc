"""Percent escaping for parameter text and data lines.

Reserved bytes (LF, CR, ``%`` and space) are written as ``%`` followed by two
uppercase hex digits; every other byte goes through unchanged. Decoding
accepts either hex case. Escaped output never contains LF or CR, so one
escaped value always fits on exactly one protocol line.
"""

from __future__ import annotations

from typing import Union

from .constants import ENCODING, ENCODING_ERRORS, ESCAPE_CHAR, RESERVED_BYTES
from .errors import MalformedEscape

_PERCENT = ESCAPE_CHAR[0]
_HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")

# byte value -> its wire form
_ESCAPE_TABLE = [
    b"%%%02X" % value if value in RESERVED_BYTES else bytes([value]) for value in range(256)
]


def escape(raw: bytes) -> bytes:
    """Escape reserved bytes in ``raw``. Never fails."""
    if not RESERVED_BYTES.intersection(raw):
        return bytes(raw)
    return b"".join(_ESCAPE_TABLE[value] for value in raw)


def unescape(text: Union[bytes, str]) -> bytes:
    """Decode ``%XX`` tokens in ``text``.

    Raises:
        MalformedEscape: a ``%`` is not followed by exactly two hex digits,
            or the input ends in the middle of a token.
    """
    if isinstance(text, str):
        text = text.encode(ENCODING, ENCODING_ERRORS)
    if _PERCENT not in text:
        return bytes(text)

    out = bytearray()
    pos = 0
    end = len(text)
    while pos < end:
        value = text[pos]
        if value != _PERCENT:
            out.append(value)
            pos += 1
            continue
        token = text[pos + 1 : pos + 3]
        if len(token) < 2:
            raise MalformedEscape(f"truncated escape sequence at offset {pos}", offset=pos)
        if token[0] not in _HEX_DIGITS or token[1] not in _HEX_DIGITS:
            raise MalformedEscape(f"invalid escape sequence {text[pos:pos + 3]!r} at offset {pos}", offset=pos)
        out.append(int(token, 16))
        pos += 3
    return bytes(out)


def escape_text(text: str) -> str:
    """``escape`` for ``str`` values."""
    return escape(text.encode(ENCODING, ENCODING_ERRORS)).decode(ENCODING, ENCODING_ERRORS)


def unescape_text(text: str) -> str:
    """``unescape`` for ``str`` values; undecodable bytes become surrogates."""
    return unescape(text).decode(ENCODING, ENCODING_ERRORS)


__all__ = ["escape", "unescape", "escape_text", "unescape_text"]
