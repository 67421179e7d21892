"""
Input record for the projection engine.

One flat, immutable snapshot of the business-model assumptions collected by the
calculator wizard. The engine reads it; it never writes to it.
"""

from __future__ import annotations

import re
from typing import Any, Literal, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

BusinessModel = Literal["subscription", "one-time"]

# Every field the engine treats as a number. Percent fields are on a 0-100 scale.
NUMERIC_FIELDS: Tuple[str, ...] = (
    "tam",
    "sam",
    "som",
    "monthly_reach",
    "conversion_rate",
    "revenue_per_user",
    "fixed_costs",
    "variable_costs_per_user",
    "initial_investment",
    "monthly_growth_rate",
    "churn_rate",
    "gross_margin",
    "marketing_costs",
    "sales_costs",
)

PERCENT_FIELDS: Tuple[str, ...] = (
    "conversion_rate",
    "monthly_growth_rate",
    "churn_rate",
    "gross_margin",
)

MONETARY_FIELDS: Tuple[str, ...] = tuple(f for f in NUMERIC_FIELDS if f not in PERCENT_FIELDS)

_NUMERIC_PREFIX = re.compile(r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))")


def coerce_number(value: Any) -> float:
    """
    Form-style number parsing, as a browser form does with ``parseFloat(x) || 0``.

    Strings are read up to the end of their leading numeric prefix (``"12abc"``
    is 12); ``"Infinity"`` is the only spelled-out value accepted. Blanks,
    None, junk and NaN become 0.0.
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        parsed = float(value)
    elif value is None:
        return 0.0
    else:
        match = _NUMERIC_PREFIX.match(str(value))
        if match is None:
            return 0.0
        parsed = float(match.group(1).replace("Infinity", "inf"))
    # NaN fails parsed == parsed
    return parsed if parsed == parsed else 0.0


class InputSnapshot(BaseModel):
    """
    Immutable set of calculator inputs.

    Validation of ranges is the caller's job (see intake.validators); the
    snapshot accepts out-of-range percentages and negative values as given.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Market & demand
    tam: float = 1_000_000.0
    sam: float = 500_000.0
    som: float = 100_000.0
    monthly_reach: float = 10_000.0
    conversion_rate: float = 5.0

    # Business model
    revenue_per_user: float = 50.0
    fixed_costs: float = 5_000.0
    variable_costs_per_user: float = 10.0
    initial_investment: float = 100_000.0
    business_model: BusinessModel = "subscription"

    # Growth & advanced
    monthly_growth_rate: float = 5.0
    churn_rate: float = 5.0
    gross_margin: float = 70.0
    marketing_costs: float = 5_000.0
    sales_costs: float = 3_000.0

    @field_validator(*NUMERIC_FIELDS, mode="before")
    @classmethod
    def _parse_number(cls, value: Any) -> float:
        return coerce_number(value)

    def replace(self, **changes: Any) -> "InputSnapshot":
        """Return a new snapshot with ``changes`` applied (re-validated)."""
        unknown = [k for k in changes if k not in type(self).model_fields]
        if unknown:
            raise ValueError(f"Unknown input fields: {unknown}")
        return type(self).model_validate({**self.model_dump(), **changes})


DEFAULT_INPUTS = InputSnapshot()
