import struct

import pytest

from fswatchkit import utf16

SAMPLE = "Aé€😀z"


def _units(text):
    raw = text.encode("utf-16-le")
    return list(struct.unpack(f"<{len(raw) // 2}H", raw))


def test_encode_bmp_character():
    assert utf16.encode(ord("A")) == [ord("A")]
    assert utf16.encode(ord("€")) == _units("€")


def test_encode_supplementary_matches_codec():
    assert utf16.encode(ord("😀")) == _units("😀")
    assert utf16.encode(0x10000) == _units(chr(0x10000))
    assert len(utf16.encode(0x10FFFF)) == 2


def test_encode_surrogate_is_skipped_or_replaced():
    assert utf16.encode(0xD800) == []
    assert utf16.encode(0xDFFF, ord("?")) == [ord("?")]


def test_encode_above_max_is_skipped_or_replaced():
    assert utf16.encode(0x110000) == []
    assert utf16.encode(0x110000, ord("?")) == [ord("?")]


def test_encode_negative_raises():
    with pytest.raises(ValueError):
        utf16.encode(-1)


def test_decode_surrogate_pair():
    units = _units("😀")
    assert utf16.decode(units) == (ord("😀"), 2)


def test_decode_truncated_high_surrogate():
    assert utf16.decode([0xD800], 0, ord("?")) == (ord("?"), 1)


def test_decode_high_surrogate_followed_by_other_unit():
    assert utf16.decode([0xD800, ord("A")], 0, ord("?")) == (ord("?"), 2)


def test_decode_lone_low_surrogate_passes_through():
    assert utf16.decode([0xDC00]) == (0xDC00, 1)


def test_decode_out_of_range_position():
    with pytest.raises(IndexError):
        utf16.decode([ord("A")], 1)


def test_decode_rejects_invalid_unit():
    with pytest.raises(ValueError):
        utf16.decode([0x10000])


def test_next_index_steps_over_pairs():
    units = _units("A😀")
    assert utf16.next_index(units, 0) == 1
    assert utf16.next_index(units, 1) == 3


def test_count_characters():
    assert utf16.count(_units(SAMPLE)) == len(SAMPLE)
    assert utf16.count([]) == 0


def test_from_utf8_matches_codec():
    assert utf16.from_utf8(SAMPLE.encode("utf-8")) == _units(SAMPLE)


def test_to_utf8_matches_codec():
    assert utf16.to_utf8(_units(SAMPLE)) == SAMPLE.encode("utf-8")


def test_utf8_round_trip():
    data = SAMPLE.encode("utf-8")
    assert utf16.to_utf8(utf16.from_utf8(data)) == data


def test_from_latin1_copies_bytes():
    assert utf16.from_latin1(b"\xe9a") == [0xE9, ord("a")]


def test_to_latin1_replaces_wide_units():
    assert utf16.to_latin1(_units("Aé€"), ord("?")) == b"A\xe9?"


def test_wide_round_trip():
    assert utf16.from_wide(SAMPLE) == _units(SAMPLE)
    assert utf16.to_wide(utf16.from_wide(SAMPLE)) == SAMPLE


def test_from_wide_skips_lone_surrogate():
    assert utf16.from_wide("a\ud800b") == [ord("a"), ord("b")]


def test_to_utf32_gives_code_points():
    assert utf16.to_utf32(_units(SAMPLE)) == [ord(c) for c in SAMPLE]