"""
tests/test_health_index.py
───────────────────────────
Tests for the deductive health score.
"""

import pytest

from config.machine import HEALTH_REFERENCE
from src.analytics.health_index import (
    _range_penalty,
    _speed_deduction,
    _temp_delta_deduction,
    _tool_wear_deduction,
    _torque_deduction,
    compute_deductions,
    compute_health_score,
)
from src.data.models import Reading


def _reading(**overrides) -> Reading:
    base = {
        "air_temperature": 300.0,
        "process_temperature": 310.0,
        "rotational_speed": 2027.0,
        "torque": 40.2,
        "tool_wear": 0.0,
    }
    base.update(overrides)
    return Reading(**base)


class TestToolWearDeduction:
    def test_zero_wear_no_deduction(self):
        assert _tool_wear_deduction(0.0, HEALTH_REFERENCE) == 0.0

    def test_reference_max_deducts_full_weight(self):
        assert _tool_wear_deduction(253.0, HEALTH_REFERENCE) == pytest.approx(40.0)

    def test_not_clamped_above_reference(self):
        assert _tool_wear_deduction(506.0, HEALTH_REFERENCE) == pytest.approx(80.0)


class TestTempDeltaDeduction:
    @pytest.mark.parametrize("delta", [8.0, 10.0, 12.0])
    def test_nominal_band_no_deduction(self, delta):
        assert _temp_delta_deduction(delta, HEALTH_REFERENCE) == 0.0

    def test_low_delta_penalized(self):
        assert _temp_delta_deduction(5.0, HEALTH_REFERENCE) == pytest.approx(10.0)

    def test_high_delta_penalized(self):
        assert _temp_delta_deduction(13.0, HEALTH_REFERENCE) == pytest.approx(6.0)

    def test_capped_at_20(self):
        assert _temp_delta_deduction(30.0, HEALTH_REFERENCE) == 20.0
        assert _temp_delta_deduction(-5.0, HEALTH_REFERENCE) == 20.0


class TestDeviationDeductions:
    def test_midpoints_deduct_nothing(self):
        assert _speed_deduction(2027.0, HEALTH_REFERENCE) == 0.0
        assert _torque_deduction(40.2, HEALTH_REFERENCE) == 0.0

    def test_speed_deviation_symmetric(self):
        low = _speed_deduction(2027.0 - 500.0, HEALTH_REFERENCE)
        high = _speed_deduction(2027.0 + 500.0, HEALTH_REFERENCE)
        assert low == pytest.approx(high)
        assert low == pytest.approx(500.0 / 2027.0 * 15.0)

    def test_torque_double_midpoint_deducts_full_weight(self):
        assert _torque_deduction(80.4, HEALTH_REFERENCE) == pytest.approx(10.0)


class TestRangePenalty:
    def test_in_range_no_penalty(self):
        assert _range_penalty(_reading(), HEALTH_REFERENCE) == 0.0

    def test_band_edges_are_in_range(self):
        reading = _reading(air_temperature=293.0, process_temperature=303.0)
        assert _range_penalty(reading, HEALTH_REFERENCE) == 0.0

    def test_air_out_of_range(self):
        reading = _reading(air_temperature=307.0, process_temperature=316.0)
        assert _range_penalty(reading, HEALTH_REFERENCE) == 15.0

    def test_both_out_of_range_add_up(self):
        reading = _reading(air_temperature=290.0, process_temperature=300.0)
        assert _range_penalty(reading, HEALTH_REFERENCE) == 30.0


class TestComputeHealthScore:
    def test_nominal_reading_scores_80(self, nominal_reading):
        assert compute_health_score(nominal_reading) == 80

    def test_perfect_reading_scores_100(self):
        assert compute_health_score(_reading()) == 100

    def test_failure_overrides_everything(self, failed_reading):
        assert compute_health_score(failed_reading) == 0

    def test_failure_overrides_perfect_signals(self):
        assert compute_health_score(_reading(failure_status=True)) == 0

    def test_worn_tool_lowers_score(self, worn_reading):
        assert compute_health_score(worn_reading) == 57

    def test_clamped_at_zero_without_failure_flag(self):
        reading = _reading(tool_wear=400.0, air_temperature=280.0, process_temperature=320.0)
        assert compute_health_score(reading) == 0

    @pytest.mark.parametrize(
        "overrides",
        [
            {},
            {"tool_wear": 10_000.0},
            {"rotational_speed": 0.0, "torque": 0.0},
            {"rotational_speed": 50_000.0},
            {"air_temperature": 0.0, "process_temperature": 1000.0},
            {"tool_wear": -50.0},
        ],
    )
    def test_score_bounds(self, overrides):
        score = compute_health_score(_reading(**overrides))
        assert isinstance(score, int)
        assert 0 <= score <= 100

    def test_idempotent(self, nominal_reading):
        assert compute_health_score(nominal_reading) == compute_health_score(nominal_reading)

    def test_deduction_breakdown_matches_score(self, nominal_reading):
        deductions = compute_deductions(nominal_reading)
        assert set(deductions) == {"tool_wear", "temp_delta", "speed", "torque", "range_penalty"}
        assert deductions["temp_delta"] == 0.0
        assert deductions["range_penalty"] == 0.0
        assert round(100 - sum(deductions.values())) == compute_health_score(nominal_reading)
