"""Byte-order reversal for 2, 4 and 8 byte values."""

from __future__ import annotations

import struct


def _swap_unsigned(value: int, size: int) -> int:
    if not 0 <= value < 1 << (size * 8):
        raise ValueError(f"value does not fit in {size} unsigned bytes")
    return int.from_bytes(value.to_bytes(size, "big"), "little")


def byte_swap2(value: int) -> int:
    """Reverse the byte order of an unsigned 16-bit integer."""
    return _swap_unsigned(value, 2)


def byte_swap4(value: int) -> int:
    """Reverse the byte order of an unsigned 32-bit integer."""
    return _swap_unsigned(value, 4)


def byte_swap8(value: int) -> int:
    """Reverse the byte order of an unsigned 64-bit integer."""
    return _swap_unsigned(value, 8)


def swap_value(value: int | float, fmt: str) -> int | float:
    """Reverse the bytes of ``value`` as laid out by the struct code ``fmt``.

    The value is packed with ``fmt``, its bytes are reversed, and the result is
    read back as the same type. Only 2, 4 and 8 byte types are supported.
    """
    layout = "<" + fmt
    try:
        size = struct.calcsize(layout)
        packed = struct.pack(layout, value)
    except struct.error as error:
        raise ValueError(str(error)) from error
    if size not in (2, 4, 8):
        raise ValueError(f"unsupported size {size} for byte swapping")
    return struct.unpack(layout, packed[::-1])[0]