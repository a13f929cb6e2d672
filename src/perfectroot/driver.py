# src/perfectroot/driver.py
from __future__ import annotations

import sys
from collections.abc import Iterator
from time import perf_counter

from perfectroot.config import DEFAULT_CONFIG, SearchConfig
from perfectroot.display import print_computed_sqrt, print_divisor_report, print_reference_sqrt
from perfectroot.divisors import is_perfect_number
from perfectroot.fmt import format_duration
from perfectroot.output_manager import OutputManager
from perfectroot.runtime import current as _rt_current


def find_perfect_numbers(config: SearchConfig = DEFAULT_CONFIG) -> Iterator[int]:
    """Yield the perfect numbers in [lower_bound, upper_bound], ascending."""
    for candidate in config.candidates:
        if is_perfect_number(candidate):
            yield candidate


def run(config: SearchConfig = DEFAULT_CONFIG, om: OutputManager | None = None) -> None:
    """
    Scan the configured range and print, for every perfect number, its
    divisor sum, the reference square root and the Babylonian square root.
    """
    debug = _rt_current().debug
    om = om if om is not None else OutputManager()

    t0 = perf_counter()
    found = 0
    for n in find_perfect_numbers(config):
        found += 1
        print_divisor_report(n, om)
        print_reference_sqrt(n, config, om)

        t1 = perf_counter()
        res = print_computed_sqrt(n, config, om)
        if debug:
            print(
                f"[debug] sqrt({n}): {res.iterations} iterations, "
                f"residual {res.residual():.3E}, {format_duration(perf_counter() - t1)}",
                file=sys.stderr,
            )

    if debug:
        print(
            f"[debug] scanned {len(config.candidates)} candidates "
            f"[{config.lower_bound}..{config.upper_bound}], found {found} perfect number(s) "
            f"in {format_duration(perf_counter() - t0)}",
            file=sys.stderr,
        )
