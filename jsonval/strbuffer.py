"""A growable byte buffer used to assemble text."""

from __future__ import annotations


class StrBuffer:
    """Accumulates bytes; the contents can be taken out with ``steal``."""

    __slots__ = ("_data",)

    def __init__(self, initial: bytes = b"") -> None:
        self._data = bytearray(initial)

    @property
    def value(self) -> bytes:
        """The bytes held so far."""
        return bytes(self._data)

    def append(self, data: bytes) -> None:
        """Append a run of bytes."""
        self._data += data

    def append_byte(self, byte: int | bytes) -> None:
        """Append one byte, given as an int or a one-byte bytes object."""
        if isinstance(byte, (bytes, bytearray)):
            if len(byte) != 1:
                raise ValueError("expected exactly one byte")
            byte = byte[0]
        self._data.append(byte)

    def pop(self) -> int:
        """Remove and return the last byte, or 0 if the buffer is empty."""
        return self._data.pop() if self._data else 0

    def clear(self) -> None:
        """Discard the contents."""
        self._data.clear()

    def steal(self) -> bytes:
        """Return the contents and leave the buffer empty."""
        value = bytes(self._data)
        self._data = bytearray()
        return value

    def steal_with_newline(self) -> bytes:
        """Return the contents followed by a newline and leave the buffer empty."""
        return self.steal() + b"\n"

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __repr__(self) -> str:
        return f"StrBuffer({bytes(self._data)!r})"