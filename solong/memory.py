"""Byte-buffer operations on bytearray and bytes-like objects."""


def _check_count(n, *buffers):
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buffer)}")


def memset(buffer, value, n):
    """Fill the first n bytes of buffer with value (taken modulo 256)."""
    _check_count(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer, n):
    """Zero the first n bytes of buffer."""
    return memset(buffer, 0, n)


def calloc(count, size):
    """Return a zero-filled buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dest, src, n):
    """Copy the first n bytes of src into the start of dest."""
    _check_count(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(dest, dest_offset, src_offset, n):
    """Move n bytes inside dest from src_offset to dest_offset; regions may overlap."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, dest[dest_offset:], dest[src_offset:])
    dest[dest_offset:dest_offset + n] = bytes(dest[src_offset:src_offset + n])
    return dest


def memchr(data, value, n):
    """Return the index of the first byte equal to value within the first n bytes, or None."""
    _check_count(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index == -1 else index


def memcmp(a, b, n):
    """Compare the first n bytes; return the difference of the first unequal pair, or 0."""
    _check_count(n, a, b)
    for left, right in zip(a[:n], b[:n]):
        if left != right:
            return left - right
    return 0