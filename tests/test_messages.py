from __future__ import annotations

import pytest
from pydantic import ValidationError

from assuan.protocol import (
    Command,
    ErrorCode,
    Line,
    LineTooLong,
    ProtocolError,
    is_command,
    is_skipped_line,
    normalize_command,
    validate_command,
    validate_line_length,
)


def test_line_normalizes_command():
    line = Line.create("inquire", "PINENTRY_LAUNCHED")
    assert line.command == "INQUIRE"
    assert line.as_tuple() == ("INQUIRE", "PINENTRY_LAUNCHED")


def test_line_accepts_enum_and_bytes():
    line = Line.create(Command.DATA, b"\xff\x00")
    assert line.command == "D"
    assert line.raw_parameters == b"\xff\x00"


def test_line_is_frozen():
    line = Line.create("OK")
    with pytest.raises(ValidationError):
        line.command = "ERR"


def test_line_create_rejects_bad_tokens():
    for token in ("", "A B", "OK\t"):
        with pytest.raises(ProtocolError) as info:
            Line.create(token)
        assert info.value.code == ErrorCode.INVALID_COMMAND


def test_line_parse():
    assert Line.parse("ok").as_tuple() == ("OK", "")
    assert Line.parse("OK ").as_tuple() == ("OK", "")
    assert Line.parse("D 100%25%20sure").as_tuple() == ("D", "100% sure")


def test_line_to_wire():
    assert Line.create("option", "ttyname=/dev/pts/1").to_wire() == b"OPTION ttyname=/dev/pts/1\n"


def test_line_to_wire_too_long():
    with pytest.raises(LineTooLong):
        Line.create("D", "x" * 998).to_wire()


def test_validate_line_length_boundary():
    assert validate_line_length("OK", "x" * 996) == 1000
    with pytest.raises(LineTooLong):
        validate_line_length("OK", "x" * 997)


def test_validate_command_returns_canonical_token():
    assert validate_command("getinfo") == "GETINFO"


def test_command_helpers():
    assert normalize_command(Command.COMMENT) == "#"
    assert normalize_command("bye") == "BYE"
    assert is_command("end")
    assert not is_command("FROBNICATE")


def test_is_skipped_line():
    assert is_skipped_line("")
    assert is_skipped_line("   ")
    assert is_skipped_line("# comment")
    assert is_skipped_line("S PROGRESS")
    assert not is_skipped_line("S")
    assert not is_skipped_line("SETKEY 1")


def test_error_message_includes_code():
    exc = LineTooLong("too long", length=1001)
    assert exc.code == ErrorCode.LINE_TOO_LONG
    assert "LINE_TOO_LONG" in str(exc)
    assert exc.length == 1001


def test_line_create_reports_unencodable_parameters():
    with pytest.raises(ProtocolError) as info:
        Line.create("OK", "\ud800")
    assert info.value.code == ErrorCode.INVALID_PARAMETERS


def test_line_create_bad_command_wins_over_parameters():
    with pytest.raises(ProtocolError) as info:
        Line.create("", "\ud800")
    assert info.value.code == ErrorCode.INVALID_COMMAND
