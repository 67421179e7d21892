from __future__ import annotations

import math
from typing import Iterable

import numpy as np


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """numerator / denominator, or ``default`` when the denominator is exactly zero."""
    if denominator == 0:
        return default
    return numerator / denominator


def percent_to_fraction(pct: float) -> float:
    return pct / 100.0


def frozen_series(values: Iterable[float]) -> np.ndarray:
    """Materialize ``values`` as a read-only float64 month series."""
    if not isinstance(values, np.ndarray):
        values = list(values)
    arr = np.array(values, dtype=float)
    arr.flags.writeable = False
    return arr


def format_currency(value: float, currency: str = "€") -> str:
    """Currency string with thousands separators and two decimals, e.g. ``€1,234.50``."""
    if math.isinf(value):
        return f"{'-' if value < 0 else ''}{currency}∞"
    return f"{currency}{value:,.2f}"


def format_percentage(value: float) -> str:
    """Two-decimal percentage string, e.g. ``12.50%``."""
    if math.isinf(value):
        return f"{'-' if value < 0 else ''}∞%"
    return f"{value:.2f}%"
