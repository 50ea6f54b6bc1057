"""Writing characters, strings and numbers to text streams."""

import sys


def _stream(stream):
    return sys.stdout if stream is None else stream


def put_char(c, stream=None):
    """Write one character, given as a str or an integer code, to stream."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    elif isinstance(c, int) and not isinstance(c, bool):
        ch = chr(c & 0xFF)
    else:
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    _stream(stream).write(ch)


def put_str(s, stream=None):
    """Write s to stream; None writes nothing."""
    if s is None:
        return
    _stream(stream).write(s)


def put_endl(s, stream=None):
    """Write s followed by a newline to stream."""
    put_str(s, stream)
    put_char("\n", stream)


def put_nbr(n, stream=None):
    """Write the decimal form of the integer n to stream."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    _stream(stream).write(str(n))