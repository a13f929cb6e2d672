# -----------------------------------------------------------------------------
#  Utility functions
# -----------------------------------------------------------------------------

from __future__ import annotations


def dec_digits(n: int) -> int:
    """Exact decimal digit count without str(); handles n >= 0."""
    n = abs(n)
    if n == 0:
        return 1
    # floor(log10(n)) ~= floor(bitlen*log10(2))
    bl = n.bit_length()
    est = int((bl * 30103) // 100000)
    p10 = 10 ** est
    while n < p10:
        est -= 1
        p10 //= 10
    while n >= p10 * 10:
        est += 1
        p10 *= 10
    return est + 1


def typename(v: object) -> str:
    return type(v).__name__
