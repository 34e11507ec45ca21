"""Growable output and bounded input byte streams."""

from __future__ import annotations

import struct

_UINT32 = struct.Struct("<I")
_INT32 = struct.Struct("<i")


class StreamOverflowError(EOFError):
    """Raised when a read asks for more bytes than remain in the stream."""


class OutputMemoryStream:
    """Byte sink that starts with 32 bytes of capacity and doubles as needed."""

    _INITIAL_CAPACITY = 32

    def __init__(self) -> None:
        self._buffer = bytearray(self._INITIAL_CAPACITY)
        self._head = 0

    @property
    def capacity(self) -> int:
        """Number of bytes currently reserved."""
        return len(self._buffer)

    def write(self, data: bytes | bytearray | memoryview) -> None:
        """Append raw bytes, growing to ``max(2 * capacity, needed)`` if full."""
        chunk = bytes(data)
        end = self._head + len(chunk)
        if end > self.capacity:
            new_capacity = max(self.capacity * 2, end)
            self._buffer.extend(bytes(new_capacity - self.capacity))
        self._buffer[self._head:end] = chunk
        self._head = end

    def write_uint32(self, value: int) -> None:
        try:
            self.write(_UINT32.pack(value))
        except struct.error as error:
            raise ValueError(str(error)) from error

    def write_int32(self, value: int) -> None:
        try:
            self.write(_INT32.pack(value))
        except struct.error as error:
            raise ValueError(str(error)) from error

    def getvalue(self) -> bytes:
        """The bytes written so far."""
        return bytes(self._buffer[: self._head])

    def __len__(self) -> int:
        return self._head


class InputMemoryStream:
    """Reads successive chunks from a fixed byte buffer."""

    def __init__(self, buffer: bytes | bytearray | memoryview) -> None:
        self._buffer = bytes(buffer)
        self._head = 0

    def read(self, count: int) -> bytes:
        """Return the next ``count`` bytes."""
        if count < 0:
            raise ValueError("count must not be negative")
        end = self._head + count
        if end > len(self._buffer):
            raise StreamOverflowError(
                f"requested {count} bytes but only {self.remaining} remain"
            )
        chunk = self._buffer[self._head:end]
        self._head = end
        return chunk

    def read_uint32(self) -> int:
        return _UINT32.unpack(self.read(_UINT32.size))[0]

    def read_int32(self) -> int:
        return _INT32.unpack(self.read(_INT32.size))[0]

    @property
    def remaining(self) -> int:
        """Bytes not yet read."""
        return len(self._buffer) - self._head