"""
Intake — form-side session state, input coercion, and snapshot validation.
"""

from .session import LAST_STEP, STEP_TITLES, CalculatorSession, coerce_form_values
from .validators import ValidationResult, validate_snapshot

__all__ = [
    "LAST_STEP",
    "STEP_TITLES",
    "CalculatorSession",
    "coerce_form_values",
    "ValidationResult",
    "validate_snapshot",
]
