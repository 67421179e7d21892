"""
Projection runner — one call, every derived number.

Takes a full input snapshot and recomputes everything from scratch:
  1. Base-month metrics:  revenue, costs, net profit, ROI, CAC, LTV, LTV/CAC
  2. Growth view:         24 months of customers / revenue / costs / profit
  3. Long-run view:       60 months feeding the yearly roll-up
  4. Break-even:          payback ratio AND series-walk month (both kept)

Nothing is cached between calls; the same snapshot always yields bit-identical
results, so callers may recompute on every input change.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Dict, Optional

import pandas as pd

from core.config import DEFAULT_CONFIG, ProjectionConfig
from core.schema import InputSnapshot
from core.utils import percent_to_fraction
from insights.aggregator import YearlyAggregate, aggregate_projection
from insights.breakeven import BreakEvenResult, analyze_break_even, payback_period_months

from . import metrics as m
from .series import ProjectionSeries, build_projection_series

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DerivedMetrics:
    """Scalar outputs for the base month. ``payback_period_months`` may be inf."""
    monthly_revenue: float
    monthly_costs: float
    monthly_net_profit: float
    roi: float
    cac: float
    ltv: float
    ltv_cac_ratio: float
    payback_period_months: float
    break_even_month: Optional[int]

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, eq=False)
class ProjectionResult:
    snapshot: InputSnapshot
    metrics: DerivedMetrics
    growth: ProjectionSeries
    long_run: ProjectionSeries
    yearly: Dict[str, YearlyAggregate]
    break_even: BreakEvenResult


def _base_month(snapshot: InputSnapshot) -> Dict[str, float]:
    customers = m.customer_count(snapshot.monthly_reach, snapshot.conversion_rate)
    revenue = m.monthly_revenue(snapshot.monthly_reach, snapshot.conversion_rate, snapshot.revenue_per_user)
    costs = m.monthly_costs(snapshot.fixed_costs, customers, snapshot.variable_costs_per_user)
    return {
        "customers": customers,
        "revenue": revenue,
        "costs": costs,
        "net_profit": m.net_profit(revenue, costs),
    }


def _unit_economics(snapshot: InputSnapshot, base: Dict[str, float], months_per_year: int) -> Dict[str, float]:
    cac = m.cac(snapshot.marketing_costs, snapshot.sales_costs, base["customers"])
    ltv = m.ltv(snapshot.revenue_per_user, percent_to_fraction(snapshot.gross_margin), snapshot.churn_rate)
    return {
        "roi": m.roi(base["net_profit"] * months_per_year, snapshot.initial_investment),
        "cac": cac,
        "ltv": ltv,
        "ltv_cac_ratio": m.ltv_cac_ratio(ltv, cac),
    }


def compute_metrics(
    snapshot: InputSnapshot,
    config: Optional[ProjectionConfig] = None,
) -> DerivedMetrics:
    """Scalar metrics only; still walks the long-run series for break-even."""
    return run_projection(snapshot, config).metrics


def run_projection(
    snapshot: InputSnapshot,
    config: Optional[ProjectionConfig] = None,
) -> ProjectionResult:
    """
    Run the full pipeline for one snapshot.

    Parameters
    ----------
    snapshot : InputSnapshot
        Complete, already-validated inputs. Out-of-range percentages are
        computed through, not rejected.
    config : ProjectionConfig, optional
        Horizons and display settings; ``DEFAULT_CONFIG`` when omitted.

    Returns
    -------
    ProjectionResult with scalar metrics, the growth and long-run series,
    yearly totals, and the break-even analysis.
    """
    cfg = config or DEFAULT_CONFIG

    base = _base_month(snapshot)
    unit = _unit_economics(snapshot, base, cfg.months_per_year)

    growth = build_projection_series(snapshot, cfg.growth_horizon_months)
    long_run = build_projection_series(snapshot, cfg.long_horizon_months)
    yearly = aggregate_projection(long_run, horizons=cfg.yearly_horizons)

    break_even = analyze_break_even(long_run.profit, snapshot.initial_investment, base["net_profit"])

    derived = DerivedMetrics(
        monthly_revenue=base["revenue"],
        monthly_costs=base["costs"],
        monthly_net_profit=base["net_profit"],
        roi=unit["roi"],
        cac=unit["cac"],
        ltv=unit["ltv"],
        ltv_cac_ratio=unit["ltv_cac_ratio"],
        payback_period_months=payback_period_months(snapshot.initial_investment, base["net_profit"]),
        break_even_month=break_even.break_even_month,
    )

    logger.debug(
        "Projection: net_profit=%.2f payback=%s break_even_month=%s horizons=(%d, %d)",
        derived.monthly_net_profit,
        derived.payback_period_months,
        derived.break_even_month,
        cfg.growth_horizon_months,
        cfg.long_horizon_months,
    )

    return ProjectionResult(
        snapshot=snapshot,
        metrics=derived,
        growth=growth,
        long_run=long_run,
        yearly=yearly,
        break_even=break_even,
    )


def key_metrics_table(derived: DerivedMetrics, months_per_year: int = 12) -> pd.DataFrame:
    """Monthly vs yearly revenue / costs / profit at base-month run rate."""
    return pd.DataFrame([
        {
            "Period": "Monthly",
            "Revenue": derived.monthly_revenue,
            "Costs": derived.monthly_costs,
            "Profit": derived.monthly_net_profit,
        },
        {
            "Period": "Yearly",
            "Revenue": derived.monthly_revenue * months_per_year,
            "Costs": derived.monthly_costs * months_per_year,
            "Profit": derived.monthly_net_profit * months_per_year,
        },
    ])
