"""Character classification, case conversion and integer/text conversion.

Characters may be given either as one-character strings or as integer
codes; the classification functions answer with booleans and the case
conversions hand back a value of the same kind they were given.
"""

from itertools import takewhile

_SPACE = " \t\n\v\f\r"
_INT_BITS = 32


def _code(c):
    """Return the integer code of a character given as str or int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _wrap_int32(value):
    """Reduce an integer to the signed 32-bit range, wrapping around."""
    span = 1 << _INT_BITS
    value %= span
    return value - span if value >= span // 2 else value


def isalpha(c):
    """True for ASCII letters."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def isdigit(c):
    """True for the ASCII digits 0-9."""
    return 48 <= _code(c) <= 57


def isalnum(c):
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c):
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c):
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def _convert_case(c, low, high, shift):
    code = _code(c)
    if low <= code <= high:
        code += shift
    return chr(code) if isinstance(c, str) else code


def toupper(c):
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    return _convert_case(c, 97, 122, -32)


def tolower(c):
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    return _convert_case(c, 65, 90, 32)


def atoi(text):
    """Parse a leading decimal integer from text.

    Leading whitespace is skipped and a single sign is accepted; more than
    one sign yields 0. Parsing stops at the first non-digit. The result
    wraps to the signed 32-bit range.
    """
    rest = text.lstrip(_SPACE)
    signs = "".join(takewhile(lambda ch: ch in "+-", rest))
    if len(signs) > 1:
        return 0
    sign = -1 if signs == "-" else 1
    digits = "".join(takewhile(lambda ch: "0" <= ch <= "9", rest[len(signs):]))
    value = int(digits) if digits else 0
    return _wrap_int32(sign * value)


def itoa(n):
    """Render an integer as decimal text."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)