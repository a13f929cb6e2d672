# -----------------------------------------------------------------------------
#  roots.py
#  Square roots: reference value, rough estimate, Babylonian refinement
# -----------------------------------------------------------------------------

from __future__ import annotations

from decimal import Decimal, localcontext

from sympy import Rational, sqrt

from perfectroot.config import DEFAULT_CONFIG, SearchConfig
from perfectroot.context import SqrtResult
from perfectroot.utility import dec_digits

GUARD_DIGITS = 5  # extra significant digits requested from SymPy


def _check_radicand(radicand: int | Decimal) -> Decimal:
    r = Decimal(radicand)
    if r <= 0:
        raise ValueError(f"radicand must be positive, got {radicand}")
    return r


def digit_count(radicand: int | Decimal, base: int = 10) -> int:
    """
    ceil(log_base(radicand)), computed exactly: the smallest k with
    base**k >= radicand. 100 -> 2, 101 -> 3, 1 -> 0, 0.05 -> -1.
    """
    r = _check_radicand(radicand)
    b = Decimal(base)
    k = 0
    while b ** k < r:
        k += 1
    while b ** (k - 1) >= r:
        k -= 1
    return k


def initial_guess(radicand: int | Decimal, base: int = 10) -> Decimal:
    """
    Rough estimate of sqrt(radicand) to seed the Babylonian method.

    For S = a * 10^(2n) with 1 <= a < 10 the usual estimate is 2 * 10^n.
    The factor 2 is left out: with the overshoot gone the perfect numbers
    in range need fewer refinement steps. Tuned, not derived.
    """
    digits = digit_count(radicand, base)
    return Decimal(base) ** (Decimal(digits) / 2)


def babylonian_sqrt(radicand: int | Decimal, config: SearchConfig = DEFAULT_CONFIG) -> SqrtResult:
    """
    Babylonian method:  x[k+1] = (x[k] + S / x[k]) / 2

    Refines until two successive guesses differ by at most
    base^-precision. Execute-then-test: at least one refinement always
    runs, so the reported count is >= 2 (the estimate is iteration 1).
    """
    with localcontext() as ctx:
        ctx.prec = config.working_precision
        S = _check_radicand(radicand)
        limit = config.tolerance
        half = Decimal("0.5")

        guess = +initial_guess(S, config.base)
        iterations = 1

        while True:
            previous = guess
            guess = half * (previous + S / previous)
            iterations += 1
            if abs(previous - guess) <= limit:
                break

    return SqrtResult(radicand=radicand, value=guess, iterations=iterations)


def reference_sqrt(radicand: int | Decimal, config: SearchConfig = DEFAULT_CONFIG) -> Decimal:
    """Trusted sqrt(radicand) from SymPy's arbitrary-precision evaluation."""
    r = _check_radicand(radicand)
    exact = Rational(str(r))
    int_digits = dec_digits(int(r))
    n_digits = max(config.working_precision, int_digits + config.precision + GUARD_DIGITS)
    return Decimal(str(sqrt(exact).evalf(n_digits)))
