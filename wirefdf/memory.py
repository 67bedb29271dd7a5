"""Byte-buffer helpers working on bytearrays in place."""

from __future__ import annotations

_CALLOC_LIMIT = 2048000


def _check_span(buf_len: int, start: int, n: int, what: str) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if start < 0 or start + n > buf_len:
        raise ValueError(f"{what} range [{start}, {start + n}) exceeds buffer of {buf_len} bytes")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Set the first n bytes of buf to the low byte of value."""
    _check_span(len(buf), 0, n, "memset")
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first n bytes of buf."""
    return memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of nmemb * size bytes.

    Requests larger than the allocator's limit raise MemoryError.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if size != 0 and nmemb > _CALLOC_LIMIT // size:
        raise MemoryError(f"allocation of {nmemb} x {size} bytes refused")
    return bytearray(nmemb * size)


def memchr(buf: bytes | bytearray, c: int, n: int) -> int | None:
    """Index of the first byte equal to c's low byte within buf[:n], or None."""
    _check_span(len(buf), 0, n, "memchr")
    index = buf.find(c & 0xFF, 0, n)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Difference of the first unequal bytes in the first n, or 0."""
    _check_span(len(a), 0, n, "memcmp")
    _check_span(len(b), 0, n, "memcmp")
    return next((x - y for x, y in zip(a[:n], b[:n]) if x != y), 0)


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first n bytes of src into the start of dest."""
    _check_span(len(dest), 0, n, "destination")
    _check_span(len(src), 0, n, "source")
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes within buf from offset src to offset dest; overlap is safe."""
    _check_span(len(buf), dest, n, "destination")
    _check_span(len(buf), src, n, "source")
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf