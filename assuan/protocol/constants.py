"""Wire-level constants of the Assuan line protocol."""

ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"  # lets arbitrary bytes survive str round trips
LINE_DELIMITER = b"\n"
PARAM_SEPARATOR = b" "
PARAM_SEPARATOR_TEXT = " "
ESCAPE_CHAR = b"%"

MAX_LINE_LEN = 1000  # command + space + parameters + LF
LINE_OVERHEAD = 2  # separator space and LF
DATA_PREFIX = b"D "
DATA_CHUNK_LEN = MAX_LINE_LEN - 3  # "D", space and LF

# LF, CR, percent sign, space
RESERVED_BYTES = frozenset(b"\n\r% ")

__all__ = [
    "ENCODING",
    "ENCODING_ERRORS",
    "LINE_DELIMITER",
    "PARAM_SEPARATOR",
    "PARAM_SEPARATOR_TEXT",
    "ESCAPE_CHAR",
    "MAX_LINE_LEN",
    "LINE_OVERHEAD",
    "DATA_PREFIX",
    "DATA_CHUNK_LEN",
    "RESERVED_BYTES",
]
