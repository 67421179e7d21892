"""
Tests for the unit-economics formulas.

Covers: worked scenarios, zero-denominator guards, and out-of-range inputs.
"""

import math

import pytest

from engine import metrics

# ---------------------------------------------------------------------------
# Revenue, costs, profit
# ---------------------------------------------------------------------------

def test_monthly_revenue_uses_percent_scale():
    """conversion_rate is a percent; 5 means 5%."""
    assert metrics.monthly_revenue(10_000, 5, 50) == pytest.approx(25_000)


def test_customer_count_and_costs():
    customers = metrics.customer_count(10_000, 5)
    assert customers == pytest.approx(500)
    assert metrics.monthly_costs(5_000, customers, 10) == pytest.approx(10_000)


def test_net_profit():
    assert metrics.net_profit(25_000, 10_000) == 15_000
    assert metrics.net_profit(1_000, 4_000) == -3_000


# ---------------------------------------------------------------------------
# ROI
# ---------------------------------------------------------------------------

def test_roi_percentage():
    assert metrics.roi(180_000, 100_000) == pytest.approx(180.0)


@pytest.mark.parametrize("profit", [0.0, 15_000.0, -5_000.0])
def test_roi_zero_investment_returns_zero(profit):
    assert metrics.roi(profit, 0) == 0


# ---------------------------------------------------------------------------
# CAC / LTV
# ---------------------------------------------------------------------------

def test_cac_scenario():
    assert metrics.cac(5_000, 3_000, 500) == pytest.approx(16.0)


def test_cac_zero_customers_returns_zero():
    assert metrics.cac(5_000, 3_000, 0) == 0


def test_ltv_scenario():
    assert metrics.ltv(50, 0.70, 5) == pytest.approx(700.0)


def test_ltv_zero_churn_saturates_to_zero():
    """Zero churn is a never-ending lifetime, but reports 0 by convention."""
    assert metrics.ltv(50, 0.70, 0) == 0


def test_ltv_cac_ratio():
    assert metrics.ltv_cac_ratio(700, 16) == pytest.approx(43.75)
    assert metrics.ltv_cac_ratio(700, 0) == 0


# ---------------------------------------------------------------------------
# Out-of-range inputs compute through
# ---------------------------------------------------------------------------

def test_out_of_range_percentages_do_not_raise():
    assert metrics.monthly_revenue(1_000, 150, 10) == pytest.approx(15_000)
    assert metrics.monthly_revenue(1_000, -10, 10) == pytest.approx(-1_000)
    assert metrics.ltv(50, 0.7, -5) == pytest.approx(-700.0)
    assert math.isfinite(metrics.cac(1, 1, -2))
