"""UTF-16 decoding and encoding of single code points and of whole sequences.

A UTF-16 sequence is any sequence of integers in the range 0..0xFFFF.
A high surrogate that is not followed by a low surrogate decodes to the
replacement code point. A lone low surrogate is passed through unchanged.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from fswatchkit import utf8

_MAX_CODEPOINT = 0x10FFFF
_MAX_UNIT = 0xFFFF


def _as_units(units: Iterable[int]) -> tuple[int, ...]:
    result = tuple(int(unit) for unit in units)
    for unit in result:
        if not 0 <= unit <= _MAX_UNIT:
            raise ValueError(f"UTF-16 code unit out of range: {unit!r}")
    return result


def _decode_at(units: Sequence[int], pos: int, replacement: int) -> tuple[int, int]:
    first = units[pos]
    pos += 1
    if 0xD800 <= first <= 0xDBFF:
        if pos >= len(units):
            return replacement, len(units)
        second = units[pos]
        pos += 1
        if 0xDC00 <= second <= 0xDFFF:
            return ((first - 0xD800) << 10) + (second - 0xDC00) + 0x10000, pos
        return replacement, pos
    return first, pos


def _iter_codepoints(units: Sequence[int], replacement: int = 0) -> Iterator[int]:
    pos = 0
    while pos < len(units):
        codepoint, pos = _decode_at(units, pos, replacement)
        yield codepoint


def decode(units: Iterable[int], pos: int = 0, replacement: int = 0) -> tuple[int, int]:
    """Decode the character starting at ``pos``.

    Returns the code point and the index just past the units read.
    """
    seq = _as_units(units)
    if not 0 <= pos < len(seq):
        raise IndexError(f"position {pos} is outside the data")
    return _decode_at(seq, pos, replacement)


def encode(codepoint: int, replacement: int = 0) -> list[int]:
    """Encode one code point as UTF-16 code units.

    Surrogate code points and values above U+10FFFF are invalid; they are
    written as the ``replacement`` unit, or skipped when it is 0.
    """
    if codepoint < 0:
        raise ValueError("code point must not be negative")
    if not 0 <= replacement <= _MAX_UNIT:
        raise ValueError("replacement must be a single UTF-16 code unit")
    invalid = [replacement] if replacement else []
    if codepoint <= _MAX_UNIT:
        if 0xD800 <= codepoint <= 0xDFFF:
            return invalid
        return [codepoint]
    if codepoint > _MAX_CODEPOINT:
        return invalid
    value = codepoint - 0x10000
    return [(value >> 10) + 0xD800, (value & 0x3FF) + 0xDC00]


def next_index(units: Iterable[int], pos: int = 0) -> int:
    """Return the index of the character following the one at ``pos``."""
    return decode(units, pos)[1]


def count(units: Iterable[int]) -> int:
    """Return the number of characters in a UTF-16 sequence."""
    return sum(1 for _ in _iter_codepoints(_as_units(units)))


def from_utf8(data: bytes | bytearray | memoryview) -> list[int]:
    """Convert UTF-8 bytes to UTF-16 code units."""
    return [unit for codepoint in utf8.to_utf32(data) for unit in encode(codepoint)]


def to_utf8(units: Iterable[int]) -> bytes:
    """Convert UTF-16 code units to UTF-8 bytes."""
    return b"".join(utf8.encode(codepoint) for codepoint in _iter_codepoints(_as_units(units)))


def from_latin1(data: bytes | bytearray | memoryview) -> list[int]:
    """Convert Latin-1 bytes to UTF-16 code units."""
    return list(bytes(data))


def to_latin1(units: Iterable[int], replacement: int = 0) -> bytes:
    """Convert UTF-16 code units to Latin-1, unit by unit.

    Units above 0xFF are written as ``replacement``.
    """
    if not 0 <= replacement <= 0xFF:
        raise ValueError("replacement must be a single byte value")
    return bytes(unit if unit < 256 else replacement for unit in _as_units(units))


def from_wide(text: str) -> list[int]:
    """Convert a string to UTF-16 code units, skipping invalid characters."""
    return [unit for char in text for unit in encode(ord(char))]


def to_wide(units: Iterable[int], replacement: str = "") -> str:
    """Convert UTF-16 code units to a string.

    Code points a string cannot hold are written as ``replacement``,
    or skipped when it is empty.
    """
    return "".join(
        chr(codepoint) if codepoint <= _MAX_CODEPOINT else replacement
        for codepoint in _iter_codepoints(_as_units(units))
    )


def to_utf32(units: Iterable[int]) -> list[int]:
    """Decode UTF-16 code units into a list of code points."""
    return list(_iter_codepoints(_as_units(units)))