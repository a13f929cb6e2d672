# src/perfectroot/display.py
"""
Console blocks for one perfect number:

    Perfect number: 28 = 1 + 2 + 4 + 7 + 14;
    Expected sqrt() of 28\t\t= 5.291502622129181;
    Computed square root of 28\t= 5.291502622129181;
    \treached in 6 iterations.

Each printer writes through an OutputManager (screen only when om is None)
and returns what it computed.
"""

from __future__ import annotations

from decimal import Decimal

from colorama import Fore, Style

from perfectroot.config import DEFAULT_CONFIG, SearchConfig
from perfectroot.context import SqrtResult
from perfectroot.divisors import format_divisor_sum
from perfectroot.fmt import format_fixed, format_radicand
from perfectroot.output_manager import OutputManager
from perfectroot.roots import babylonian_sqrt, reference_sqrt


def _om(om: OutputManager | None) -> OutputManager:
    return om if om is not None else OutputManager()


def print_divisor_report(n: int, om: OutputManager | None = None) -> str:
    """Print n as the sum of its proper divisors; returns the sum expression."""
    expr = format_divisor_sum(n)
    _om(om).write(f"{Fore.YELLOW}{Style.BRIGHT}Perfect number:{Style.RESET_ALL} {n} = {expr};")
    return expr


def print_reference_sqrt(
    radicand: int | Decimal,
    config: SearchConfig = DEFAULT_CONFIG,
    om: OutputManager | None = None,
) -> Decimal:
    root = reference_sqrt(radicand, config)
    _om(om).write(
        f"Expected sqrt() of {format_radicand(radicand)}\t\t= "
        f"{Fore.GREEN}{format_fixed(root, config.precision)}{Style.RESET_ALL};"
    )
    return root


def print_computed_sqrt(
    radicand: int | Decimal,
    config: SearchConfig = DEFAULT_CONFIG,
    om: OutputManager | None = None,
) -> SqrtResult:
    res = babylonian_sqrt(radicand, config)
    out = _om(om)
    out.write(
        f"Computed square root of {format_radicand(radicand)}\t= "
        f"{Fore.CYAN}{format_fixed(res.value, config.precision)}{Style.RESET_ALL};"
    )
    out.write(f"\treached in {res.iterations} iterations.\n")
    return res
