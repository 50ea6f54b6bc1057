"""String helpers with the bounded and length-reporting semantics of the
classic C string routines, expressed over Python ``str`` values.

Positions are returned as indexes rather than pointers. Where the C routine
would hand back the address of the terminating NUL, the index equal to the
string's length is returned.
"""

_NUL = "\0"


def _char(c):
    """Normalise a character given as a one-character str or an integer code.

    Integer codes are reduced to a byte, as the C routines cast to ``char``.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def strlen(s):
    """Return the number of characters in s."""
    return len(s)


def strchr(s, c):
    """Index of the first occurrence of c in s, or None.

    Searching for NUL yields the index just past the last character.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index == -1 else index


def strrchr(s, c):
    """Index of the last occurrence of c in s, or None.

    Searching for NUL yields the index just past the last character.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index == -1 else index


def strncmp(s1, s2, n):
    """Compare at most n characters of s1 and s2.

    Returns 0 when they agree over that span, otherwise the difference of
    the codes of the first differing characters, the end of a string
    counting as code 0.
    """
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for index in range(n):
        left = ord(s1[index]) if index < len(s1) else 0
        right = ord(s2[index]) if index < len(s2) else 0
        if left != right or left == 0:
            return left - right
    return 0


def strnstr(haystack, needle, n):
    """Index of the first occurrence of needle lying wholly within the first
    n characters of haystack, or None. An empty needle is found at 0."""
    if not needle:
        return 0
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    index = haystack.find(needle, 0, n)
    return None if index == -1 else index


def strlcpy(src, size):
    """Copy src into a destination of size characters, terminator included.

    Returns ``(copied, len(src))`` where copied holds at most size - 1
    characters of src. A length that is not smaller than size means the
    copy was truncated.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return src[:max(size - 1, 0)], len(src)


def strlcat(dest, src, size):
    """Append src to dest within a destination of size characters.

    Returns ``(result, wanted)`` where wanted is the length the full
    concatenation would have needed, measured as the C routine does: when
    dest already fills size, nothing is appended and size stands in for
    its length.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    used = min(len(dest), size)
    if used < size:
        dest = dest[:used] + src[:size - used - 1]
    return dest, used + len(src)


def strdup(s):
    """Return a copy of s."""
    return str(s)


def substr(s, start, length):
    """Return at most length characters of s starting at start; empty when
    start lies beyond the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1, s2):
    """Return s1 followed by s2."""
    return s1 + s2


def strtrim(s, charset):
    """Remove characters found in charset from both ends of s."""
    if not isinstance(s, str) or not isinstance(charset, str):
        raise TypeError("strtrim expects two strings")
    return s.strip(charset)


def split(s, sep):
    """Split s on the single character sep, dropping empty pieces."""
    sep = _char(sep)
    return [piece for piece in s.split(sep) if piece]


def strmapi(s, func):
    """Build a new string from func(index, char) applied to every character."""
    if func is None:
        raise TypeError("strmapi needs a function")
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(chars, func):
    """Call func(index, char) for every item of the mutable sequence chars.

    A value other than None returned by func replaces the character in
    place. The sequence is returned.
    """
    for index, ch in enumerate(chars):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement
    return chars