from __future__ import annotations

from enum import StrEnum
from typing import Union


class Command(StrEnum):
    """
    Well-known command tokens that appear on the wire.
    The framing layer does not interpret them; they exist so callers do not spell tokens by hand.
    """

    # Responses
    OK = "OK"
    ERR = "ERR"
    STATUS = "S"
    COMMENT = "#"
    DATA = "D"
    INQUIRE = "INQUIRE"

    # Requests
    END = "END"
    CAN = "CAN"
    BYE = "BYE"
    RESET = "RESET"
    OPTION = "OPTION"
    NOP = "NOP"
    CANCEL = "CANCEL"
    AUTH = "AUTH"
    HELP = "HELP"


# Lines starting with these are never handed to callers.
SKIPPED_PREFIXES = ("#", "S ")


def normalize_command(command: Union[str, Command]) -> str:
    """Convert enum/string into the canonical upper-case token."""
    return (command.value if isinstance(command, Command) else str(command)).upper()


def is_command(value: str) -> bool:
    """Check if `value` names a well-known command, in any case."""
    try:
        Command(normalize_command(value))
        return True
    except ValueError:
        return False


def is_skipped_line(line: str) -> bool:
    """Blank, comment and status lines carry nothing for the caller."""
    return not line.strip() or line.startswith(SKIPPED_PREFIXES)


__all__ = [
    "Command",
    "SKIPPED_PREFIXES",
    "normalize_command",
    "is_command",
    "is_skipped_line",
]
