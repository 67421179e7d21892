"""
Input quality checks for a snapshot before it is shown to the engine.

The engine itself computes through anything it is given. This is the gate the
form layer uses to catch:
- Negative money or counts
- Percentages outside 0-100
- Market sizes out of order (SOM <= SAM <= TAM)
- Zero churn, which makes LTV saturate to 0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from core.schema import MONETARY_FIELDS, PERCENT_FIELDS, InputSnapshot

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a snapshot."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def validate_snapshot(snapshot: InputSnapshot) -> ValidationResult:
    """
    Run all validation checks on a snapshot.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    result = ValidationResult()

    # --- Money and counts ---
    for name in MONETARY_FIELDS:
        value = getattr(snapshot, name)
        if value < 0:
            result.errors.append(f"{name} must be >= 0, got {value}.")

    # --- Percentages ---
    for name in PERCENT_FIELDS:
        value = getattr(snapshot, name)
        if name == "monthly_growth_rate":
            # shrinking businesses are legitimate; only > 100% is suspicious
            if value > 100:
                result.warnings.append(f"{name} is {value}% per month — check units.")
            continue
        if not 0 <= value <= 100:
            result.warnings.append(f"{name} is {value}, outside 0-100 — results will be nonsensical.")

    # --- Market funnel ---
    if snapshot.sam > snapshot.tam:
        result.warnings.append("Serviceable market (SAM) exceeds total market (TAM).")
    if snapshot.som > snapshot.sam:
        result.warnings.append("Obtainable market (SOM) exceeds serviceable market (SAM).")

    # --- Churn ---
    if snapshot.churn_rate == 0:
        result.warnings.append("Churn rate is 0 — LTV will be reported as 0, not unbounded.")

    if not result.is_valid:
        logger.debug("Snapshot failed validation with %d error(s)", len(result.errors))
    return result
