"""Formatted output supporting the conversions c, s, p, d, i, u, x, X and %."""

import sys

CONVERSIONS = "cspdiuxX%"
DECIMAL = "0123456789"
LOWER_HEX = "0123456789abcdef"
UPPER_HEX = "0123456789ABCDEF"

_UINT32_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(value):
    value &= _UINT32_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _digits(value, base_digits):
    """Render a non-negative integer with the given digit alphabet."""
    if value == 0:
        return base_digits[0]
    base = len(base_digits)
    out = []
    while value:
        value, remainder = divmod(value, base)
        out.append(base_digits[remainder])
    return "".join(reversed(out))


def format_number(value, base_digits, conversion):
    """Render value in the base given by base_digits, as for conversion.

    Negative values get a leading '-' for d, i and u. For p, zero is
    rendered as "(nil)" and anything else carries a "0x" prefix.
    """
    if len(base_digits) < 2:
        raise ValueError("a base needs at least two digits")
    prefix = ""
    if value < 0 and conversion in "diu":
        prefix = "-"
        value = -value
    elif conversion == "p":
        if value == 0:
            return "(nil)"
        prefix = "0x"
    if value < 0:
        raise ValueError(f"cannot render negative value {value} for %{conversion}")
    return prefix + _digits(value, base_digits)


def _convert(spec, values):
    if spec == "%":
        return "%"
    try:
        value = next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError(f"%c expects a single character, got {value!r}")
            return value
        return chr(value & 0xFF)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        address = 0 if value is None else int(value) & _POINTER_MASK
        return format_number(address, LOWER_HEX, "p")
    if spec in "di":
        return format_number(_to_int32(int(value)), DECIMAL, spec)
    unsigned = int(value) & _UINT32_MASK
    if spec == "u":
        return format_number(unsigned, DECIMAL, spec)
    if spec == "x":
        return format_number(unsigned, LOWER_HEX, spec)
    return format_number(unsigned, UPPER_HEX, spec)


def sprintf(fmt, *args):
    """Return fmt with its conversions replaced by the formatted args.

    A '%' followed by a character that is not a known conversion is kept
    literally; a lone '%' at the end produces nothing. Extra arguments are
    ignored.
    """
    values = iter(args)
    pieces = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec in CONVERSIONS:
            pieces.append(_convert(spec, values))
        else:
            pieces.append("%")
            pieces.append(spec)
    return "".join(pieces)


def printf(fmt, *args):
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)