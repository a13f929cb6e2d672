from __future__ import annotations

from dataclasses import dataclass
from decimal import MAX_PREC, Decimal, localcontext


@dataclass(frozen=True)
class SqrtResult:
    radicand: int | Decimal
    value: Decimal
    iterations: int                  # the initial estimate counts as iteration 1

    def residual(self) -> Decimal:
        """|value² − radicand|, evaluated exactly."""
        with localcontext() as ctx:
            # products and differences of finite decimals are exact at this precision
            ctx.prec = MAX_PREC
            return abs(self.value * self.value - Decimal(self.radicand))
