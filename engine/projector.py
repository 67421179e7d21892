"""
Compound-growth projector.

value[0] = initial, value[i+1] = value[i] * (1 + g/100). Growth compounds by
repeated multiplication, step by step, so a given (initial, g, n) always
reproduces the same floats. Negative growth shrinks the series; nothing is
clamped, so downstream code sees fractional or negative counts as they come.
"""

from __future__ import annotations

from typing import Iterator

import numpy as np

from core.utils import frozen_series, percent_to_fraction


def iter_over_time(
    initial_value: float,
    monthly_growth_rate_pct: float,
    month_count: int,
) -> Iterator[float]:
    """Yield ``month_count`` compounded monthly values (nothing for n <= 0)."""
    factor = 1 + percent_to_fraction(monthly_growth_rate_pct)
    current = float(initial_value)
    for _ in range(month_count):
        yield current
        current = current * factor


def project_over_time(
    initial_value: float,
    monthly_growth_rate_pct: float,
    month_count: int,
) -> np.ndarray:
    """Materialized, read-only form of :func:`iter_over_time`."""
    return frozen_series(iter_over_time(initial_value, monthly_growth_rate_pct, month_count))
