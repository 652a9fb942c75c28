import pytest

from fswatchkit import utf8

SAMPLES = ["", "plain ascii", "héllo wörld", "€ sign", "日本語テキスト", "emoji 😀 and 𝄞"]


@pytest.mark.parametrize("text", SAMPLES)
def test_encode_matches_standard_codec(text):
    assert b"".join(utf8.encode(ord(c)) for c in text) == text.encode("utf-8")


@pytest.mark.parametrize("text", SAMPLES)
def test_to_utf32_matches_code_points(text):
    assert utf8.to_utf32(text.encode("utf-8")) == [ord(c) for c in text]


@pytest.mark.parametrize("text", SAMPLES)
def test_count_matches_length(text):
    assert utf8.count(text.encode("utf-8")) == len(text)


@pytest.mark.parametrize("text", SAMPLES)
def test_wide_round_trip(text):
    encoded = utf8.from_wide(text)
    assert encoded == text.encode("utf-8")
    assert utf8.to_wide(encoded) == text


def test_decode_returns_code_point_and_next_position():
    data = "a€b".encode("utf-8")
    codepoint, pos = utf8.decode(data, 1)
    assert codepoint == ord("€")
    assert pos == 4
    assert utf8.next_index(data, pos) == 5


def test_decode_ascii_byte():
    assert utf8.decode(b"A") == (0x41, 1)


def test_decode_incomplete_sequence_uses_replacement():
    data = "€".encode("utf-8")[:2]
    assert utf8.decode(data, 0, 0xFFFD) == (0xFFFD, len(data))


def test_decode_incomplete_sequence_default_replacement_is_zero():
    assert utf8.to_utf32(b"ab\xe2\x82") == [ord("a"), ord("b"), 0]


def test_decode_position_out_of_range():
    with pytest.raises(IndexError):
        utf8.decode(b"abc", 3)


def test_encode_high_surrogate_is_skipped_or_replaced():
    assert utf8.encode(0xD800) == b""
    assert utf8.encode(0xDBFF, ord("?")) == b"?"


def test_encode_beyond_unicode_range():
    assert utf8.encode(0x110000) == b""
    assert utf8.encode(0x110000, ord("?")) == b"?"


def test_encode_largest_code_point_round_trips():
    encoded = utf8.encode(0x10FFFF)
    assert len(encoded) == 4
    assert utf8.decode(encoded) == (0x10FFFF, 4)


def test_encode_rejects_negative():
    with pytest.raises(ValueError):
        utf8.encode(-1)


def test_encode_rejects_wide_replacement():
    with pytest.raises(ValueError):
        utf8.encode(0x110000, 0x100)


def test_count_empty():
    assert utf8.count(b"") == 0


def test_from_latin1_matches_standard_codec():
    data = bytes(range(256))
    assert utf8.from_latin1(data) == data.decode("latin-1").encode("utf-8")


def test_latin1_round_trip():
    data = bytes(range(256))
    assert utf8.to_latin1(utf8.from_latin1(data)) == data


def test_to_latin1_replaces_wide_characters():
    assert utf8.to_latin1("é€".encode("utf-8"), ord("?")) == b"\xe9?"


def test_to_latin1_default_replacement_writes_zero():
    assert utf8.to_latin1("a€".encode("utf-8")) == b"a\x00"


def test_to_latin1_rejects_wide_replacement():
    with pytest.raises(ValueError):
        utf8.to_latin1(b"a", 300)


def test_accepts_bytearray_and_memoryview():
    data = "ĀB".encode("utf-8")
    assert utf8.to_utf32(bytearray(data)) == utf8.to_utf32(memoryview(data)) == [0x100, 0x42]