"""
Monthly revenue / cost / profit series built from one input snapshot.

A single parameterized builder serves both views the reports need:
  - the 24-month growth view (customers, revenue, costs, profit, cumulative profit)
  - the 60-month long-run view (revenue, costs, profit feed the yearly roll-up)
Both use the same formulas; callers slice with ``head()`` when they need less.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pandas as pd

from core.schema import InputSnapshot
from core.utils import frozen_series

from .metrics import customer_count
from .projector import project_over_time


@dataclass(frozen=True, eq=False)
class ProjectionSeries:
    """
    Month-indexed projection arrays (month 0 is the first projected month).

    All arrays have length ``horizon`` and are read-only.
    """

    horizon: int
    customers: np.ndarray
    revenue: np.ndarray
    costs: np.ndarray
    profit: np.ndarray
    cumulative_profit: np.ndarray

    @property
    def months(self) -> np.ndarray:
        """1-based month numbers, for display."""
        return np.arange(1, self.horizon + 1)

    def head(self, n_months: int) -> "ProjectionSeries":
        n = max(min(int(n_months), self.horizon), 0)
        return ProjectionSeries(
            horizon=n,
            customers=frozen_series(self.customers[:n]),
            revenue=frozen_series(self.revenue[:n]),
            costs=frozen_series(self.costs[:n]),
            profit=frozen_series(self.profit[:n]),
            cumulative_profit=frozen_series(self.cumulative_profit[:n]),
        )

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "month": self.months,
                "customers": self.customers,
                "revenue": self.revenue,
                "costs": self.costs,
                "profit": self.profit,
                "cumulative_profit": self.cumulative_profit,
            }
        )


def build_projection_series(snapshot: InputSnapshot, horizon: int) -> ProjectionSeries:
    """
    Project customers forward under compound growth and derive the money series.

    revenue[i]  = customers[i] * revenue_per_user
    costs[i]    = fixed_costs + customers[i] * variable_costs_per_user
    profit[i]   = revenue[i] - costs[i]
    cumulative  = running sum of profit (starting from 0, no investment offset)
    """
    horizon = max(int(horizon), 0)
    base_customers = customer_count(snapshot.monthly_reach, snapshot.conversion_rate)
    customers = project_over_time(base_customers, snapshot.monthly_growth_rate, horizon)

    revenue = customers * snapshot.revenue_per_user
    costs = snapshot.fixed_costs + customers * snapshot.variable_costs_per_user
    profit = revenue - costs
    cumulative = np.cumsum(profit)

    return ProjectionSeries(
        horizon=horizon,
        customers=customers,
        revenue=frozen_series(revenue),
        costs=frozen_series(costs),
        profit=frozen_series(profit),
        cumulative_profit=frozen_series(cumulative),
    )
