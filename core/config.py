"""
Projection configuration.
Horizons and display settings shared by the engine and the insight tables.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ProjectionConfig:
    # month-by-month growth view
    growth_horizon_months: int = 24
    # long-run view feeding the yearly roll-up and break-even walk
    long_horizon_months: int = 60

    months_per_year: int = 12
    yearly_horizons: Tuple[Tuple[str, int], ...] = (
        ("year1", 12),
        ("year3", 36),
        ("year5", 60),
    )

    # display only, never used in arithmetic
    currency_symbol: str = "€"

    def __post_init__(self) -> None:
        for name in ("growth_horizon_months", "long_horizon_months", "months_per_year"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be > 0, got {getattr(self, name)}")
        labels = tuple(label for label, _ in self.yearly_horizons)
        if labels != ("year1", "year3", "year5"):
            raise ValueError(f"yearly_horizons must be labelled year1, year3, year5; got {labels}")
        for label, months in self.yearly_horizons:
            if months <= 0:
                raise ValueError(f"Yearly horizon {label!r} must cover > 0 months")


DEFAULT_CONFIG = ProjectionConfig()
