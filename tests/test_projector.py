"""
Tests for the compound-growth projector.
"""

import numpy as np
import pytest

from engine.projector import iter_over_time, project_over_time


def test_zero_growth_repeats_initial_value():
    values = project_over_time(123.5, 0, 10)
    assert len(values) == 10
    assert np.all(values == 123.5)


@pytest.mark.parametrize("growth", [5.0, -3.0, 12.5])
def test_matches_closed_form(growth):
    values = project_over_time(500.0, growth, 60)
    expected = [500.0 * (1 + growth / 100) ** i for i in range(60)]
    assert values.tolist() == pytest.approx(expected, rel=1e-12)


def test_first_value_is_initial_and_steps_compound():
    values = project_over_time(100.0, 10, 3)
    assert values[0] == 100.0
    assert values[1] == pytest.approx(110.0)
    assert values[2] == pytest.approx(121.0)


def test_negative_growth_shrinks_without_reaching_zero():
    values = project_over_time(100.0, -50, 20)
    assert np.all(np.diff(values) < 0)
    assert values[-1] > 0


def test_repeat_calls_are_bit_identical():
    a = project_over_time(500.0, 5, 60)
    b = project_over_time(500.0, 5, 60)
    assert a.tobytes() == b.tobytes()


def test_generator_is_restartable_and_matches_array():
    gen_values = list(iter_over_time(42.0, 3, 24))
    assert gen_values == list(iter_over_time(42.0, 3, 24))
    assert gen_values == project_over_time(42.0, 3, 24).tolist()


@pytest.mark.parametrize("months", [0, -4])
def test_non_positive_month_count_is_empty(months):
    assert len(project_over_time(10.0, 5, months)) == 0


def test_result_is_read_only():
    values = project_over_time(10.0, 5, 5)
    with pytest.raises(ValueError):
        values[0] = 99.0
