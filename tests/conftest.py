"""Shared fixtures for the engine test suite."""

import pytest

from core import InputSnapshot


@pytest.fixture
def default_snapshot():
    """The calculator's default inputs (5% monthly growth)."""
    return InputSnapshot()


@pytest.fixture
def flat_snapshot():
    """Default inputs with growth switched off, so every month looks the same."""
    return InputSnapshot(monthly_growth_rate=0)


@pytest.fixture
def loss_making_snapshot():
    """Costs exceed revenue in every month."""
    return InputSnapshot(
        revenue_per_user=5,
        fixed_costs=20_000,
        variable_costs_per_user=10,
        monthly_growth_rate=0,
    )
