# -----------------------------------------------------------------------------
#  divisors.py
#  Perfect-number test and proper-divisor listing
# -----------------------------------------------------------------------------

from __future__ import annotations

from math import isqrt


def is_perfect_number(n: int) -> bool:
    """
    Check if n is a perfect number (equal to the sum of its proper divisors).

    Odd n is rejected up front: no odd perfect number is known, and any that
    exists lies far beyond the reach of this scan. This is a shortcut, not a
    proof, and it is kept on purpose.

    Divisors come in pairs (d, n // d), so the scan stops at isqrt(n). The
    pair of d = 1 is n itself, which is subtracted again at the end.
    """
    if n < 2 or n % 2 == 1:
        return False

    total = 0
    for d in range(1, isqrt(n) + 1):
        if n % d == 0:
            pair = n // d
            total += d
            if pair != d:          # square root divisor counts once
                total += pair

    total -= n
    return total == n


def proper_divisors(n: int) -> list[int]:
    """
    Proper divisors of n in ascending order, starting with 1.

    Scans up to n // 2 rather than isqrt(n) so the output is ascending
    without a sort.
    """
    divs = [1]
    for d in range(2, n // 2 + 1):
        if n % d == 0:
            divs.append(d)
    return divs


def format_divisor_sum(n: int) -> str:
    """Example: 28 -> '1 + 2 + 4 + 7 + 14'."""
    return " + ".join(map(str, proper_divisors(n)))
