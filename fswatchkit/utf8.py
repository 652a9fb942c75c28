"""UTF-8 decoding and encoding of single code points and of whole sequences.

Decoding is lenient: it trusts the length announced by the lead byte and
does not check continuation bytes. An incomplete trailing sequence decodes
to the replacement code point and consumes the rest of the input.
"""

from __future__ import annotations

from collections.abc import Iterator

_OFFSETS = (0x00000000, 0x00003080, 0x000E2080, 0x03C82080, 0xFA082080, 0x82082080)
_FIRST_BYTES = (0x00, 0x00, 0xC0, 0xE0, 0xF0, 0xF8, 0xFC)
_MAX_CODEPOINT = 0x10FFFF
_UINT32_MASK = 0xFFFFFFFF


def _trailing_bytes(lead: int) -> int:
    if lead < 0xC0:
        return 0
    if lead < 0xE0:
        return 1
    if lead < 0xF0:
        return 2
    if lead < 0xF8:
        return 3
    if lead < 0xFC:
        return 4
    return 5


def _as_bytes(data: bytes | bytearray | memoryview) -> bytes:
    return data if isinstance(data, bytes) else bytes(data)


def _decode_at(data: bytes, pos: int, replacement: int) -> tuple[int, int]:
    trailing = _trailing_bytes(data[pos])
    end = pos + trailing + 1
    if end > len(data):
        return replacement, len(data)
    value = 0
    for byte in data[pos:end]:
        value = (value << 6) + byte
    return (value - _OFFSETS[trailing]) & _UINT32_MASK, end


def _iter_codepoints(data: bytes, replacement: int = 0) -> Iterator[int]:
    pos = 0
    while pos < len(data):
        codepoint, pos = _decode_at(data, pos, replacement)
        yield codepoint


def decode(data: bytes | bytearray | memoryview, pos: int = 0, replacement: int = 0) -> tuple[int, int]:
    """Decode the character starting at ``pos``.

    Returns the code point and the index just past the bytes read.
    """
    buf = _as_bytes(data)
    if not 0 <= pos < len(buf):
        raise IndexError(f"position {pos} is outside the data")
    return _decode_at(buf, pos, replacement)


def encode(codepoint: int, replacement: int = 0) -> bytes:
    """Encode one code point as UTF-8.

    Code points above U+10FFFF and high surrogates are invalid; they are
    written as the ``replacement`` byte, or skipped when it is 0.
    """
    if codepoint < 0:
        raise ValueError("code point must not be negative")
    if not 0 <= replacement <= 0xFF:
        raise ValueError("replacement must be a single byte value")
    if codepoint > _MAX_CODEPOINT or 0xD800 <= codepoint <= 0xDBFF:
        return bytes([replacement]) if replacement else b""

    if codepoint < 0x80:
        length = 1
    elif codepoint < 0x800:
        length = 2
    elif codepoint < 0x10000:
        length = 3
    else:
        length = 4

    tail = []
    value = codepoint
    for _ in range(length - 1):
        tail.append((value | 0x80) & 0xBF)
        value >>= 6
    lead = (value | _FIRST_BYTES[length]) & 0xFF
    return bytes([lead, *reversed(tail)])


def next_index(data: bytes | bytearray | memoryview, pos: int = 0) -> int:
    """Return the index of the character following the one at ``pos``."""
    return decode(data, pos)[1]


def count(data: bytes | bytearray | memoryview) -> int:
    """Return the number of characters in a UTF-8 sequence."""
    return sum(1 for _ in _iter_codepoints(_as_bytes(data)))


def from_latin1(data: bytes | bytearray | memoryview) -> bytes:
    """Convert Latin-1 bytes to UTF-8."""
    return b"".join(encode(byte) for byte in _as_bytes(data))


def to_latin1(data: bytes | bytearray | memoryview, replacement: int = 0) -> bytes:
    """Convert UTF-8 to Latin-1, writing ``replacement`` for characters above U+00FF."""
    if not 0 <= replacement <= 0xFF:
        raise ValueError("replacement must be a single byte value")
    return bytes(
        codepoint if codepoint < 256 else replacement
        for codepoint in _iter_codepoints(_as_bytes(data))
    )


def from_wide(text: str) -> bytes:
    """Convert a string of wide characters to UTF-8, skipping invalid ones."""
    return b"".join(encode(ord(char)) for char in text)


def to_wide(data: bytes | bytearray | memoryview, replacement: str = "") -> str:
    """Convert UTF-8 to a string.

    Code points a string cannot hold are written as ``replacement``,
    or skipped when it is empty.
    """
    return "".join(
        chr(codepoint) if codepoint <= _MAX_CODEPOINT else replacement
        for codepoint in _iter_codepoints(_as_bytes(data))
    )


def to_utf32(data: bytes | bytearray | memoryview) -> list[int]:
    """Decode UTF-8 into a list of code points."""
    return list(_iter_codepoints(_as_bytes(data)))