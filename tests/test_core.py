"""
Tests for the input schema, configuration, and formatting helpers.
"""

import math

import pytest
from pydantic import ValidationError

from core import DEFAULT_INPUTS, NUMERIC_FIELDS, InputSnapshot, ProjectionConfig, format_currency, format_percentage
from core.utils import safe_divide

# ---------------------------------------------------------------------------
# InputSnapshot
# ---------------------------------------------------------------------------

def test_defaults():
    assert DEFAULT_INPUTS.monthly_reach == 10_000
    assert DEFAULT_INPUTS.business_model == "subscription"
    assert len(NUMERIC_FIELDS) == 14


def test_snapshot_is_immutable():
    with pytest.raises(ValidationError):
        DEFAULT_INPUTS.monthly_reach = 1


def test_snapshot_coerces_form_strings():
    snapshot = InputSnapshot(monthly_reach="1234.5", churn_rate=None, fixed_costs="n/a")
    assert snapshot.monthly_reach == 1234.5
    assert snapshot.churn_rate == 0.0
    assert snapshot.fixed_costs == 0.0


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("12abc", 12.0),
        ("  3.5e2kg", 350.0),
        ("-.5", -0.5),
        ("1e", 1.0),
        ("inf", 0.0),
        ("Infinity", math.inf),
        ("$100", 0.0),
        (float("nan"), 0.0),
    ],
)
def test_snapshot_reads_leading_numeric_prefix(raw, expected):
    assert InputSnapshot(fixed_costs=raw).fixed_costs == expected


def test_replace_returns_new_snapshot():
    changed = DEFAULT_INPUTS.replace(conversion_rate="8")
    assert changed.conversion_rate == 8.0
    assert DEFAULT_INPUTS.conversion_rate == 5.0


def test_replace_rejects_unknown_fields():
    with pytest.raises(ValueError, match="Unknown input fields"):
        DEFAULT_INPUTS.replace(runway=12)


def test_business_model_is_restricted():
    with pytest.raises(ValidationError):
        InputSnapshot(business_model="marketplace")


# ---------------------------------------------------------------------------
# ProjectionConfig
# ---------------------------------------------------------------------------

def test_config_defaults():
    cfg = ProjectionConfig()
    assert (cfg.growth_horizon_months, cfg.long_horizon_months) == (24, 60)
    assert dict(cfg.yearly_horizons) == {"year1": 12, "year3": 36, "year5": 60}


@pytest.mark.parametrize(
    "kwargs",
    [
        {"growth_horizon_months": 0},
        {"long_horizon_months": -12},
        {"yearly_horizons": (("year1", 12), ("year3", 0), ("year5", 60))},
        {"yearly_horizons": (("y1", 12), ("y2", 24), ("y3", 36))},
    ],
)
def test_config_rejects_bad_horizons(kwargs):
    with pytest.raises(ValueError):
        ProjectionConfig(**kwargs)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def test_format_currency():
    assert format_currency(1234.5) == "€1,234.50"
    assert format_currency(-99.999, "$") == "$-100.00"
    assert format_currency(math.inf) == "€∞"


def test_format_percentage():
    assert format_percentage(12.5) == "12.50%"
    assert format_percentage(180) == "180.00%"
    assert format_percentage(math.inf) == "∞%"


def test_safe_divide():
    assert safe_divide(10, 4) == 2.5
    assert safe_divide(10, 0) == 0.0
    assert safe_divide(10, 0, math.inf) == math.inf
