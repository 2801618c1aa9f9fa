"""Arithmetic on fixed-width unsigned integers that reports overflow instead
of wrapping.

Python integers never overflow, so every helper here checks the result
against the range of a `bits`-bit unsigned integer and returns None when it
doesn't fit.  Callers turn that None into a proper error.
"""

U32_MAX = (1 << 32) - 1
U64_MAX = (1 << 64) - 1


def _fits(value, bits):
    return 0 <= value < (1 << bits)


def checked_add(a, b, bits=64):
    if not (_fits(a, bits) and _fits(b, bits)):
        return None
    result = a + b
    if not _fits(result, bits):
        return None
    return result


def checked_sub(a, b, bits=64):
    if not (_fits(a, bits) and _fits(b, bits)):
        return None
    result = a - b
    if result < 0:
        return None
    return result


def checked_shl(value, shift, bits=64):
    """Shift left, failing if any set bit would be pushed out of range."""
    if not _fits(value, bits) or shift < 0:
        return None
    result = value << shift
    if not _fits(result, bits):
        return None
    return result
