import pytest

from assuan.protocol import MalformedEscape, escape, escape_text, unescape, unescape_text


def test_escape_reserved_bytes():
    assert escape(b"a b%\r\n") == b"a%20b%25%0D%0A"


def test_escape_passes_other_bytes_through():
    raw = bytes(value for value in range(256) if value not in b"\n\r% ")
    assert escape(raw) == raw


def test_escape_output_has_no_line_breaks():
    encoded = escape(bytes(range(256)) * 2)
    assert b"\n" not in encoded
    assert b"\r" not in encoded


def test_roundtrip_all_byte_values():
    raw = bytes(range(256))
    assert unescape(escape(raw)) == raw


def test_unescape_accepts_lower_case_hex():
    assert unescape(b"%0a%0D%25") == b"\n\r%"


def test_unescape_decodes_unreserved_tokens():
    assert unescape(b"%41%00") == b"A\x00"


def test_unescape_accepts_str():
    assert unescape("two%20words") == b"two words"


@pytest.mark.parametrize("text", [b"%", b"abc%4", b"%zz", b"%4g", b"% 1"])
def test_unescape_rejects_malformed_tokens(text):
    with pytest.raises(MalformedEscape):
        unescape(text)


def test_malformed_escape_reports_offset():
    with pytest.raises(MalformedEscape) as info:
        unescape(b"ok%2")
    assert info.value.offset == 2


def test_text_helpers_roundtrip_non_ascii():
    text = "grüße aus 100%\n"
    assert escape_text(text) == "grüße%20aus%20100%25%0A"
    assert unescape_text(escape_text(text)) == text


def test_unescape_text_keeps_invalid_utf8():
    decoded = unescape_text("%FF")
    assert decoded.encode("utf-8", "surrogateescape") == b"\xff"
