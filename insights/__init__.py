"""
Insights — yearly roll-ups, break-even analysis, and decision support.
"""

from .aggregator import YearlyAggregate, aggregate_projection, aggregate_yearly, yearly_summary_table
from .breakeven import (
    BreakEvenResult,
    analyze_break_even,
    break_even_table,
    find_break_even_month,
    payback_period_months,
)
from .decisions import DecisionReport, Rating, generate_decision_report, rate_ltv_cac, rate_payback

__all__ = [
    "YearlyAggregate",
    "aggregate_projection",
    "aggregate_yearly",
    "yearly_summary_table",
    "BreakEvenResult",
    "analyze_break_even",
    "break_even_table",
    "find_break_even_month",
    "payback_period_months",
    "DecisionReport",
    "Rating",
    "generate_decision_report",
    "rate_ltv_cac",
    "rate_payback",
]
