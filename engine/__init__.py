"""
Projection engine — unit-economics formulas, compound-growth series, and the runner.
"""

from .projector import iter_over_time, project_over_time
from .series import ProjectionSeries, build_projection_series
from .runner import DerivedMetrics, ProjectionResult, compute_metrics, key_metrics_table, run_projection

__all__ = [
    "iter_over_time",
    "project_over_time",
    "ProjectionSeries",
    "build_projection_series",
    "DerivedMetrics",
    "ProjectionResult",
    "compute_metrics",
    "key_metrics_table",
    "run_projection",
]
