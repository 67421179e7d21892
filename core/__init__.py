"""
Core package — input schema, configuration, and shared utilities.
No business logic lives here.
"""

from .schema import (
    DEFAULT_INPUTS,
    MONETARY_FIELDS,
    NUMERIC_FIELDS,
    PERCENT_FIELDS,
    BusinessModel,
    InputSnapshot,
)
from .config import DEFAULT_CONFIG, ProjectionConfig
from .utils import format_currency, format_percentage, safe_divide

__all__ = [
    "DEFAULT_INPUTS",
    "MONETARY_FIELDS",
    "NUMERIC_FIELDS",
    "PERCENT_FIELDS",
    "BusinessModel",
    "InputSnapshot",
    "DEFAULT_CONFIG",
    "ProjectionConfig",
    "format_currency",
    "format_percentage",
    "safe_divide",
]
