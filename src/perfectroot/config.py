from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class SearchConfig:
    """
    Fixed parameters of a perfect-number scan.

      lower_bound / upper_bound: inclusive candidate range
      precision:                 fractional digits printed and targeted by the solver
      base:                      base of the digit estimate and of the tolerance base^-precision
      working_precision:         significant digits for Decimal arithmetic
                                 (34 = decimal128 / binary128 coverage)
    """
    lower_bound: int = 1
    upper_bound: int = 10_000
    precision: int = 15
    base: int = 10
    working_precision: int = 34

    @property
    def tolerance(self) -> Decimal:
        # exact: Decimal(10) ** -15 == Decimal("1E-15")
        return Decimal(self.base) ** -self.precision

    @property
    def candidates(self) -> range:
        return range(self.lower_bound, self.upper_bound + 1)

    def as_dict(self) -> dict[str, int]:
        return {
            "LOWER_BOUND": self.lower_bound,
            "UPPER_BOUND": self.upper_bound,
            "PRECISION": self.precision,
            "BASE": self.base,
            "WORKING_PRECISION": self.working_precision,
        }


DEFAULT_CONFIG = SearchConfig()
