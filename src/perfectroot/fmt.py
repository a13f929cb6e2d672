# src/perfectroot/fmt.py
from __future__ import annotations

import re
from decimal import ROUND_HALF_EVEN, Decimal

# Single source of truth for ANSI stripping
ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(s: str | None) -> str:
    """Return s with ANSI escape sequences removed."""
    return "" if s is None else ANSI_RE.sub("", s)


def format_fixed(value: Decimal, places: int) -> str:
    """Round half-even to exactly `places` fractional digits: 2.4494897427831781 -> '2.449489742783178'."""
    quantum = Decimal(1).scaleb(-places)
    return f"{value.quantize(quantum, rounding=ROUND_HALF_EVEN):f}"


def format_radicand(radicand) -> str:
    """Integers print as-is; other radicands drop a trailing '.0'."""
    if isinstance(radicand, int):
        return str(radicand)
    d = Decimal(radicand)
    return str(int(d)) if d == d.to_integral_value() else f"{d.normalize():f}"


def format_duration(seconds: float) -> str:
    """ms if <1s; s with millis if <60s; else mm:ss.mmm (and hh:mm:ss.mmm if ≥1h)."""
    MAX_SECONDS = 60
    if seconds < 1:
        ms = round(seconds * 1000)
        return f"{ms} ms"
    if seconds < MAX_SECONDS:
        return f"{seconds:.3f} s"
    m, s = divmod(seconds, MAX_SECONDS)
    if m < MAX_SECONDS:
        return f"{int(m)}:{s:06.3f}"               # mm:ss.mmm
    h, m = divmod(int(m), MAX_SECONDS)
    return f"{h}:{m:02d}:{s:06.3f}"                # hh:mm:ss.mmm
