"""
Founder decision support — ratings, flags, and a display-ready report.

Translates the projection into answers a founder can act on:
  Q1: "Do my unit economics work?"     -> LTV/CAC rating
  Q2: "How long is my money at risk?"  -> payback rating + break-even month
  Q3: "What should I double-check?"    -> flags
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

import pandas as pd

from core.config import DEFAULT_CONFIG
from core.utils import format_currency, format_percentage

if TYPE_CHECKING:
    from engine.runner import ProjectionResult


@dataclass(frozen=True)
class Rating:
    label: str
    description: str
    tone: str  # "good" | "warning" | "bad"


def rate_ltv_cac(ratio: float) -> Rating:
    if ratio < 1:
        return Rating(
            "Poor",
            "Your customer acquisition cost exceeds lifetime value. This is not sustainable.",
            "bad",
        )
    if ratio < 3:
        return Rating(
            "Marginal",
            "Your business may be sustainable, but growth will be challenging.",
            "warning",
        )
    return Rating(
        "Excellent",
        "Your business model is highly scalable with good unit economics.",
        "good",
    )


def rate_payback(months: float) -> Rating:
    if not math.isfinite(months):
        return Rating("Never", "At current rates, you will not recoup your investment.", "bad")
    if months <= 12:
        return Rating("Excellent", "You'll recoup your investment within a year.", "good")
    if months <= 24:
        return Rating("Good", "You'll recoup your investment within two years.", "warning")
    return Rating("Slow", "Long payback period may indicate a capital-intensive business.", "bad")


@dataclass
class DecisionReport:
    """Structured report output."""
    business_model: str
    currency_symbol: str

    monthly_revenue: float
    monthly_costs: float
    monthly_net_profit: float
    roi: float
    cac: float
    ltv: float
    ltv_cac_ratio: float
    payback_period_months: float
    break_even_month: Optional[int]

    ltv_cac_rating: Rating
    payback_rating: Rating

    flags: List[str] = field(default_factory=list)

    def _break_even_label(self) -> str:
        if self.break_even_month is None:
            return "Never"
        return f"Month {self.break_even_month + 1}"

    def _payback_label(self) -> str:
        if not math.isfinite(self.payback_period_months):
            return "Never"
        return f"{self.payback_period_months:.1f} months"

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly table."""
        cur = self.currency_symbol
        rows = [
            {"Metric": "Business Model", "Value": self.business_model},
            {"Metric": "Monthly Revenue", "Value": format_currency(self.monthly_revenue, cur)},
            {"Metric": "Monthly Costs", "Value": format_currency(self.monthly_costs, cur)},
            {"Metric": "Monthly Net Profit", "Value": format_currency(self.monthly_net_profit, cur)},
            {"Metric": "ROI (1 year)", "Value": format_percentage(self.roi)},
            {"Metric": "CAC", "Value": format_currency(self.cac, cur)},
            {"Metric": "LTV", "Value": format_currency(self.ltv, cur)},
            {"Metric": "LTV:CAC", "Value": f"{self.ltv_cac_ratio:.2f}x ({self.ltv_cac_rating.label})"},
            {"Metric": "Payback Period", "Value": f"{self._payback_label()} ({self.payback_rating.label})"},
            {"Metric": "Break-even", "Value": self._break_even_label()},
        ]
        if self.flags:
            rows.append({"Metric": "FLAGS", "Value": " | ".join(self.flags)})
        return pd.DataFrame(rows)


def _display_business_model(tag: str) -> str:
    return "Subscription" if tag == "subscription" else "One-time purchase"


def generate_decision_report(
    result: "ProjectionResult",
    *,
    currency_symbol: Optional[str] = None,
) -> DecisionReport:
    """
    Build a decision report from one projection result.

    Parameters
    ----------
    result : ProjectionResult
        Output of engine.runner.run_projection().
    currency_symbol : str, optional
        Display symbol; defaults to the configured one.
    """
    metrics = result.metrics
    snapshot = result.snapshot

    flags = []
    if metrics.monthly_net_profit <= 0:
        flags.append("NEGATIVE_MARGIN: base month does not cover its costs")
    if metrics.break_even_month is None:
        flags.append("NO_BREAK_EVEN: investment not recovered within the projection")
    if metrics.cac > 0 and metrics.ltv_cac_ratio < 1:
        flags.append("LTV_BELOW_CAC: each customer costs more to acquire than it returns")
    if snapshot.churn_rate == 0:
        flags.append("LTV_SATURATED_ZERO_CHURN: LTV reported as 0 because churn is 0")
    if (
        metrics.break_even_month is not None
        and math.isfinite(metrics.payback_period_months)
        and (metrics.break_even_month + 1) != max(1, math.ceil(metrics.payback_period_months))
    ):
        flags.append("PAYBACK_DIVERGES_FROM_BREAK_EVEN: growth moves the series walk away from the flat payback")

    return DecisionReport(
        business_model=_display_business_model(snapshot.business_model),
        currency_symbol=currency_symbol if currency_symbol is not None else DEFAULT_CONFIG.currency_symbol,
        monthly_revenue=metrics.monthly_revenue,
        monthly_costs=metrics.monthly_costs,
        monthly_net_profit=metrics.monthly_net_profit,
        roi=metrics.roi,
        cac=metrics.cac,
        ltv=metrics.ltv,
        ltv_cac_ratio=metrics.ltv_cac_ratio,
        payback_period_months=metrics.payback_period_months,
        break_even_month=metrics.break_even_month,
        ltv_cac_rating=rate_ltv_cac(metrics.ltv_cac_ratio),
        payback_rating=rate_payback(metrics.payback_period_months),
        flags=flags,
    )
