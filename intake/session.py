"""
Calculator session — the wizard's mutable state, owned by the form layer.

Holds the current input snapshot and step index. Every update produces a new
immutable snapshot; results are always recomputed from whichever snapshot is
current when asked (last write wins).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from core.config import ProjectionConfig
from core.schema import DEFAULT_INPUTS, NUMERIC_FIELDS, InputSnapshot, coerce_number
from engine.runner import ProjectionResult, run_projection

logger = logging.getLogger(__name__)

STEP_TITLES = ("Market & Demand", "Business Model", "Growth & Advanced", "Results")
LAST_STEP = len(STEP_TITLES) - 1


def coerce_form_values(values: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Normalize a partial form update.

    Numeric fields are parsed (blank or junk -> 0.0); the business model tag is
    passed through for the schema to check. Unknown keys raise ValueError.
    """
    known = set(InputSnapshot.model_fields)
    unknown = sorted(k for k in values if k not in known)
    if unknown:
        raise ValueError(f"Unknown input fields: {unknown}")
    return {k: coerce_number(v) if k in NUMERIC_FIELDS else v for k, v in values.items()}


class CalculatorSession:
    def __init__(
        self,
        data: Optional[InputSnapshot] = None,
        config: Optional[ProjectionConfig] = None,
    ):
        self.data = data if data is not None else DEFAULT_INPUTS
        self.config = config
        self.current_step = 0

    @property
    def step_title(self) -> str:
        return STEP_TITLES[self.current_step]

    def update(self, **changes: Any) -> InputSnapshot:
        """Merge a partial update into a fresh snapshot and make it current."""
        self.data = self.data.replace(**coerce_form_values(changes))
        logger.debug("Session updated fields: %s", sorted(changes))
        return self.data

    def reset(self) -> None:
        self.data = DEFAULT_INPUTS
        self.current_step = 0

    def go_to(self, step: int) -> int:
        self.current_step = min(max(int(step), 0), LAST_STEP)
        return self.current_step

    def next_step(self) -> int:
        return self.go_to(self.current_step + 1)

    def prev_step(self) -> int:
        return self.go_to(self.current_step - 1)

    def results(self) -> ProjectionResult:
        return run_projection(self.data, self.config)
