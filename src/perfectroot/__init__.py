from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version

# Version
try:
    __version__ = _pkg_version("perfectroot")
except PackageNotFoundError:
    __version__ = "0+unknown"

# Public API re-exports
from .config import DEFAULT_CONFIG, SearchConfig
from .context import SqrtResult
from .divisors import format_divisor_sum, is_perfect_number, proper_divisors
from .driver import find_perfect_numbers, run
from .roots import babylonian_sqrt, initial_guess, reference_sqrt

__all__ = [
    "DEFAULT_CONFIG",
    "SearchConfig",
    "SqrtResult",
    "__version__",
    "babylonian_sqrt",
    "find_perfect_numbers",
    "format_divisor_sum",
    "initial_guess",
    "is_perfect_number",
    "proper_divisors",
    "reference_sqrt",
    "run",
]
