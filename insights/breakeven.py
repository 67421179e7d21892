"""
Break-even analysis — two answers to "when is the investment recovered?".

  payback period:   investment / constant monthly net profit (can be inf)
  break-even month: walk the actual profit series from -investment and report
                    the first month whose cumulative position is >= 0

The two agree only when profit is flat. Under non-zero growth the series walk
sees the growing profits while the payback ratio does not, and reports show
both side by side. Neither is derived from the other.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np
import pandas as pd

from core.utils import frozen_series


@dataclass(frozen=True, eq=False)
class BreakEvenResult:
    payback_period_months: float   # math.inf means "never pays back"
    break_even_month: Optional[int]  # 0-based index, None means "never"
    initial_investment: float
    cumulative: np.ndarray  # investment-offset running position; empty when no month is profitable

    @property
    def reached(self) -> bool:
        return self.break_even_month is not None


def payback_period_months(initial_investment: float, monthly_net_profit: float) -> float:
    if monthly_net_profit <= 0:
        return math.inf
    return initial_investment / monthly_net_profit


def cumulative_position(profit: Sequence[float], initial_investment: float) -> np.ndarray:
    """Running ``-initial_investment + sum(profit[:i+1])`` for every month."""
    values = np.asarray(profit, dtype=float)
    # seed the sum with -investment so each step adds exactly one month's profit
    walk = np.cumsum(np.concatenate(([-float(initial_investment)], values)))
    return frozen_series(walk[1:])


def find_break_even_month(profit: Sequence[float], initial_investment: float) -> Optional[int]:
    """
    Smallest month index where the cumulative position reaches zero.

    Returns None when no month is profitable, or when the series ends before
    the investment is recovered.
    """
    values = np.asarray(profit, dtype=float)
    if values.size == 0 or bool(np.all(values <= 0)):
        return None
    crossed = np.flatnonzero(cumulative_position(values, initial_investment) >= 0)
    if crossed.size == 0:
        return None
    return int(crossed[0])


def analyze_break_even(
    profit: Sequence[float],
    initial_investment: float,
    monthly_net_profit: float,
) -> BreakEvenResult:
    values = np.asarray(profit, dtype=float)
    if values.size == 0 or bool(np.all(values <= 0)):
        cumulative = frozen_series([])
    else:
        cumulative = cumulative_position(values, initial_investment)
    return BreakEvenResult(
        payback_period_months=payback_period_months(initial_investment, monthly_net_profit),
        break_even_month=find_break_even_month(values, initial_investment),
        initial_investment=float(initial_investment),
        cumulative=cumulative,
    )


def break_even_table(result: BreakEvenResult) -> pd.DataFrame:
    """Month (1-based) vs cumulative profit with a zero reference line."""
    n = len(result.cumulative)
    return pd.DataFrame(
        {
            "month": np.arange(1, n + 1),
            "cumulative_profit": result.cumulative,
            "break_even": np.zeros(n),
        }
    )
