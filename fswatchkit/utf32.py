"""UTF-32 conversions: a UTF-32 sequence is simply a sequence of code points.

Every code point is an integer in the unsigned 32-bit range. Conversions to
other encodings skip code points those encodings cannot represent.
"""

from __future__ import annotations

from collections.abc import Iterable

from fswatchkit import utf8, utf16

_MAX_CODEPOINT = 0x10FFFF
_MAX_UINT32 = 0xFFFFFFFF
_WIDE_SIZES = (2, 4)


def _as_codepoints(codepoints: Iterable[int]) -> list[int]:
    result = [int(codepoint) for codepoint in codepoints]
    for codepoint in result:
        if not 0 <= codepoint <= _MAX_UINT32:
            raise ValueError(f"code point out of range: {codepoint!r}")
    return result


def decode_wide(char: str | int) -> int:
    """Return the code point of a single wide character."""
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError("expected exactly one character")
        return ord(char)
    value = int(char)
    if not 0 <= value <= _MAX_UINT32:
        raise ValueError(f"wide character out of range: {value!r}")
    return value


def encode_wide(codepoint: int, replacement: str = "", wide_size: int = 4) -> str:
    """Encode one code point as a wide character.

    With ``wide_size`` 2 only code points of the basic plane outside the
    surrogate range fit; with 4 every valid code point fits. Code points
    that do not fit are written as ``replacement``, or skipped when it is
    empty.
    """
    if wide_size not in _WIDE_SIZES:
        raise ValueError(f"wide character size must be 2 or 4, not {wide_size!r}")
    if not 0 <= codepoint <= _MAX_UINT32:
        raise ValueError(f"code point out of range: {codepoint!r}")
    if len(replacement) > 1:
        raise ValueError("replacement must be at most one character")
    if wide_size == 4:
        fits = codepoint <= _MAX_CODEPOINT
    else:
        fits = codepoint <= 0xFFFF and not 0xD800 <= codepoint <= 0xDFFF
    return chr(codepoint) if fits else replacement


def from_utf8(data: bytes | bytearray | memoryview) -> list[int]:
    """Decode UTF-8 bytes into code points."""
    return utf8.to_utf32(data)


def from_utf16(units: Iterable[int]) -> list[int]:
    """Decode UTF-16 code units into code points."""
    return utf16.to_utf32(units)


def to_utf8(codepoints: Iterable[int]) -> bytes:
    """Encode code points as UTF-8, skipping invalid ones."""
    return b"".join(utf8.encode(codepoint) for codepoint in _as_codepoints(codepoints))


def to_utf16(codepoints: Iterable[int]) -> list[int]:
    """Encode code points as UTF-16 code units, skipping invalid ones."""
    return [unit for codepoint in _as_codepoints(codepoints) for unit in utf16.encode(codepoint)]


def from_latin1(data: bytes | bytearray | memoryview) -> list[int]:
    """Convert Latin-1 bytes to code points."""
    return list(bytes(data))


def to_latin1(codepoints: Iterable[int], replacement: int = 0) -> bytes:
    """Convert code points to Latin-1, writing ``replacement`` for those above U+00FF."""
    if not 0 <= replacement <= 0xFF:
        raise ValueError("replacement must be a single byte value")
    return bytes(
        codepoint if codepoint < 256 else replacement
        for codepoint in _as_codepoints(codepoints)
    )


def from_wide(text: str) -> list[int]:
    """Convert a string of wide characters to code points."""
    return [decode_wide(char) for char in text]


def to_wide(codepoints: Iterable[int], replacement: str = "") -> str:
    """Convert code points to a string.

    Code points a string cannot hold are written as ``replacement``,
    or skipped when it is empty.
    """
    return "".join(
        encode_wide(codepoint, replacement) for codepoint in _as_codepoints(codepoints)
    )