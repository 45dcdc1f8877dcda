"""UTF-8 encoding and validation helpers working on raw bytes."""

from __future__ import annotations

MAX_CODEPOINT = 0x10FFFF


def utf8_encode(codepoint: int) -> bytes:
    """Encode a code point as UTF-8 bytes.

    Surrogate code points are encoded like any other value; negative values
    and values above U+10FFFF raise ValueError.
    """
    if codepoint < 0 or codepoint > MAX_CODEPOINT:
        raise ValueError(f"code point out of range: {codepoint}")
    if codepoint < 0x80:
        return bytes((codepoint,))
    if codepoint < 0x800:
        return bytes((
            0xC0 + ((codepoint & 0x7C0) >> 6),
            0x80 + (codepoint & 0x03F),
        ))
    if codepoint < 0x10000:
        return bytes((
            0xE0 + ((codepoint & 0xF000) >> 12),
            0x80 + ((codepoint & 0x0FC0) >> 6),
            0x80 + (codepoint & 0x003F),
        ))
    return bytes((
        0xF0 + ((codepoint & 0x1C0000) >> 18),
        0x80 + ((codepoint & 0x03F000) >> 12),
        0x80 + ((codepoint & 0x000FC0) >> 6),
        0x80 + (codepoint & 0x00003F),
    ))


def utf8_check_first(byte: int) -> int:
    """Return the sequence length announced by a lead byte, or 0 if invalid."""
    if byte < 0x80:
        return 1
    if byte <= 0xBF:
        # continuation byte
        return 0
    if byte in (0xC0, 0xC1):
        # overlong encoding of an ASCII byte
        return 0
    if byte <= 0xDF:
        return 2
    if byte <= 0xEF:
        return 3
    if byte <= 0xF4:
        return 4
    return 0


def utf8_check_full(buffer: bytes) -> int | None:
    """Decode one complete 2-4 byte sequence.

    Returns the code point, or None when the sequence is malformed,
    overlong, a surrogate or outside the Unicode range.
    """
    size = len(buffer)
    if size == 2:
        value = buffer[0] & 0x1F
    elif size == 3:
        value = buffer[0] & 0x0F
    elif size == 4:
        value = buffer[0] & 0x07
    else:
        return None

    for byte in buffer[1:]:
        if byte < 0x80 or byte > 0xBF:
            return None
        value = (value << 6) + (byte & 0x3F)

    if value > MAX_CODEPOINT:
        return None
    if 0xD800 <= value <= 0xDFFF:
        return None
    if (size == 2 and value < 0x80) or (size == 3 and value < 0x800) or (
        size == 4 and value < 0x10000
    ):
        return None
    return value


def utf8_iterate(buffer: bytes, noutf8: bool = False) -> tuple[int | None, bytes]:
    """Read the first character of ``buffer``.

    Returns ``(codepoint, rest)``. An empty buffer gives ``(None, b"")``.
    With ``noutf8`` each byte is taken as one character. Malformed input
    raises ValueError.
    """
    if not buffer:
        return None, b""

    count = 1
    if not noutf8:
        count = utf8_check_first(buffer[0])
        if count == 0:
            raise ValueError("invalid UTF-8 lead byte")

    if count == 1:
        return buffer[0], bytes(buffer[1:])

    if count > len(buffer):
        raise ValueError("truncated UTF-8 sequence")
    value = utf8_check_full(bytes(buffer[:count]))
    if value is None:
        raise ValueError("invalid UTF-8 sequence")
    return value, bytes(buffer[count:])


def utf8_check_string(data: bytes) -> bool:
    """Return True if ``data`` is entirely valid UTF-8."""
    length = len(data)
    pos = 0
    while pos < length:
        count = utf8_check_first(data[pos])
        if count == 0:
            return False
        if count > 1:
            if count > length - pos:
                return False
            if utf8_check_full(bytes(data[pos:pos + count])) is None:
                return False
        pos += count
    return True