"""
Unit-economics formulas.

Every function here is total: zero denominators are guarded and return a
sentinel instead of raising. Percent arguments are on a 0-100 scale and are
divided by 100 internally, so callers must not pre-normalize them.
"""

from __future__ import annotations

from core.utils import percent_to_fraction, safe_divide


def customer_count(reach: float, conversion_rate_pct: float) -> float:
    """Customers converted from one month of reach."""
    return reach * percent_to_fraction(conversion_rate_pct)


def monthly_revenue(reach: float, conversion_rate_pct: float, revenue_per_user: float) -> float:
    return reach * percent_to_fraction(conversion_rate_pct) * revenue_per_user


def monthly_costs(fixed_costs: float, customers: float, variable_cost_per_user: float) -> float:
    return fixed_costs + customers * variable_cost_per_user


def net_profit(revenue: float, costs: float) -> float:
    return revenue - costs


def roi(annual_net_profit: float, initial_investment: float) -> float:
    """
    Return on investment in percent.

    Zero investment returns 0 rather than signalling an error.
    """
    if initial_investment == 0:
        return 0.0
    return (annual_net_profit / initial_investment) * 100


def cac(marketing_costs: float, sales_costs: float, new_customers: float) -> float:
    """Customer acquisition cost; 0 when no customers were acquired."""
    return safe_divide(marketing_costs + sales_costs, new_customers, 0.0)


def ltv(avg_monthly_revenue: float, gross_margin_fraction: float, churn_rate_pct: float) -> float:
    """
    Customer lifetime value = margin-weighted monthly revenue / monthly churn.

    Zero churn returns 0, not infinity. This saturating default is an
    approximation kept for compatibility with existing reports; payback uses
    the opposite sentinel (inf) for its own never-ending case.
    """
    if churn_rate_pct == 0:
        return 0.0
    return (avg_monthly_revenue * gross_margin_fraction) / percent_to_fraction(churn_rate_pct)


def ltv_cac_ratio(ltv_value: float, cac_value: float) -> float:
    return safe_divide(ltv_value, cac_value, 0.0)
