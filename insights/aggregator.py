"""
Roll monthly series up into cumulative 1 / 3 / 5-year totals.

Truncation policy: a series shorter than a horizon is summed over whatever
months it has. A 24-month series therefore reports year3 == year5 == the
24-month total. This is deliberate and never raises.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Dict, Sequence, Tuple

import numpy as np
import pandas as pd

from core.config import DEFAULT_CONFIG

if TYPE_CHECKING:
    from engine.series import ProjectionSeries

HORIZON_LABELS: Dict[str, str] = {
    "year1": "1 Year",
    "year3": "3 Years",
    "year5": "5 Years",
}


@dataclass(frozen=True)
class YearlyAggregate:
    year1: float
    year3: float
    year5: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def aggregate_yearly(
    monthly_series: Sequence[float],
    *,
    horizons: Tuple[Tuple[str, int], ...] = DEFAULT_CONFIG.yearly_horizons,
) -> YearlyAggregate:
    """
    Sum months [0,12), [0,36), [0,60) of ``monthly_series``.

    Each horizon is an independent prefix sum, so year3 - year1 equals the sum
    of months [12,36) up to float rounding.
    """
    values = np.asarray(monthly_series, dtype=float)
    totals = {label: float(values[:months].sum()) for label, months in horizons}
    return YearlyAggregate(**totals)


def aggregate_projection(
    series: ProjectionSeries,
    *,
    horizons: Tuple[Tuple[str, int], ...] = DEFAULT_CONFIG.yearly_horizons,
) -> Dict[str, YearlyAggregate]:
    """Yearly totals for revenue, costs and profit of one projection."""
    return {
        "revenue": aggregate_yearly(series.revenue, horizons=horizons),
        "costs": aggregate_yearly(series.costs, horizons=horizons),
        "profit": aggregate_yearly(series.profit, horizons=horizons),
    }


def yearly_summary_table(yearly: Dict[str, YearlyAggregate]) -> pd.DataFrame:
    """One row per horizon with Revenue / Costs / Profit columns (chart-ready)."""
    rows = []
    for key, label in HORIZON_LABELS.items():
        rows.append({
            "Horizon": label,
            "Revenue": getattr(yearly["revenue"], key),
            "Costs": getattr(yearly["costs"], key),
            "Profit": getattr(yearly["profit"], key),
        })
    return pd.DataFrame(rows)
