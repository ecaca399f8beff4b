"""Byte-buffer helpers: fill, copy, move, search, compare and zeroed allocation."""

from __future__ import annotations

from typing import Optional

SIZE_MAX = 2**64 - 1

Bytes = bytes | bytearray | memoryview


def _check_count(count: int, *buffers: Bytes) -> None:
    if count < 0:
        raise ValueError("count must not be negative")
    for buffer in buffers:
        if count > len(buffer):
            raise ValueError(f"count {count} exceeds buffer length {len(buffer)}")


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to ``value`` (taken modulo 256)."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> None:
    """Zero the first ``count`` bytes of ``buffer``."""
    memset(buffer, 0, count)


def memcpy(dest: Optional[bytearray], src: Bytes, count: int) -> Optional[bytearray]:
    """Copy ``count`` bytes from ``src`` into ``dest``; a missing ``dest`` gives ``None``."""
    if dest is None:
        return None
    _check_count(count, dest, src)
    dest[:count] = src[:count]
    return dest


def memmove(buffer: bytearray, dest_offset: int, src_offset: int, count: int) -> bytearray:
    """Move ``count`` bytes inside ``buffer``; the regions may overlap."""
    if min(dest_offset, src_offset) < 0:
        raise ValueError("offsets must not be negative")
    _check_count(count, buffer[src_offset:], buffer[dest_offset:])
    buffer[dest_offset:dest_offset + count] = bytes(buffer[src_offset:src_offset + count])
    return buffer


def memchr(data: Bytes, value: int, count: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` among the first ``count``, or ``None``."""
    _check_count(count, data)
    target = value & 0xFF
    return next((index for index, byte in enumerate(data[:count]) if byte == target), None)


def memcmp(first: Bytes, second: Bytes, count: int) -> int:
    """Difference of the first unequal bytes within ``count``, or 0 if none differ."""
    _check_count(count, first, second)
    return next(
        (a - b for a, b in zip(first[:count], second[:count]) if a != b),
        0,
    )


def calloc(count: int, size: int) -> bytearray:
    """A zeroed buffer of ``count * size`` bytes; raises MemoryError on size overflow."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count != 0 and SIZE_MAX // count < size:
        raise MemoryError("requested size overflows")
    return bytearray(count * size)