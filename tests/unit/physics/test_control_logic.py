# tests/unit/physics/test_control_logic.py
"""Tests for occupancy and operating-mode selection.

Test Coverage:
- Occupancy probability buckets (weekday hours, lunch, off-hours, weekend)
- Occupancy draws
- Thermal mode thresholds and boundaries
- Unoccupied zones switch the unit off
- CO2 ventilation override
"""

from datetime import datetime, timezone

import pytest

from hvac_mock.physics.control_logic import (
    ControlLogic,
    ControlParameters,
    OccupancyParameters,
    OccupancySchedule,
    SystemStatus,
)


def _at(day: int, hour: int) -> datetime:
    """Timestamp in January 2024 (1st = Monday)."""
    return datetime(2024, 1, day, hour, tzinfo=timezone.utc)


# ================================================================
# OCCUPANCY TESTS
# ================================================================
class TestOccupancyProbability:
    """Test probability buckets of the occupancy schedule."""

    @pytest.mark.parametrize(
        "day, hour, expected",
        [
            (1, 8, 0.90),  # Monday, start of business
            (3, 11, 0.90),  # Wednesday morning
            (3, 12, 0.30),  # lunch
            (3, 13, 0.30),  # lunch
            (3, 14, 0.90),  # after lunch
            (5, 17, 0.90),  # Friday, last business hour
            (5, 18, 0.10),  # Friday evening
            (2, 7, 0.10),  # before opening
            (2, 3, 0.10),  # night
            (6, 10, 0.10),  # Saturday
            (7, 12, 0.10),  # Sunday lunch time
        ],
    )
    def test_probability_buckets(self, seeded_rng, day, hour, expected):
        """Test each weekday/hour bucket maps to its probability."""
        schedule = OccupancySchedule(seeded_rng)
        assert schedule.probability(_at(day, hour)) == expected

    def test_custom_hours(self, seeded_rng):
        """Test business window follows configured hours."""
        params = OccupancyParameters(business_start_hour=6, business_end_hour=14)
        schedule = OccupancySchedule(seeded_rng, params)

        assert schedule.probability(_at(2, 6)) == 0.90
        assert schedule.probability(_at(2, 15)) == 0.10

    def test_invalid_probability_raises(self):
        """Test probabilities outside [0, 1] are rejected."""
        with pytest.raises(ValueError, match="lunch_probability"):
            OccupancyParameters(lunch_probability=1.2)


class TestOccupancyDraw:
    """Test occupancy Bernoulli draws."""

    def test_low_draw_occupied(self, fixed_rng):
        """Test a draw below the probability means occupied."""
        schedule = OccupancySchedule(fixed_rng(0.05))
        assert schedule.is_occupied(_at(2, 3))

    def test_high_draw_unoccupied(self, fixed_rng):
        """Test a draw above the probability means unoccupied."""
        schedule = OccupancySchedule(fixed_rng(0.95))
        assert not schedule.is_occupied(_at(2, 10))


# ================================================================
# THERMAL MODE TESTS
# ================================================================
class TestThermalMode:
    """Test comfort-driven mode selection."""

    @pytest.fixture
    def control(self):
        return ControlLogic()

    @pytest.mark.parametrize(
        "delta, expected",
        [
            (3.0, SystemStatus.COOLING),
            (2.01, SystemStatus.COOLING),
            (2.0, SystemStatus.FAN_ONLY),
            (1.5, SystemStatus.FAN_ONLY),
            (1.0, SystemStatus.FAN_ONLY),
            (0.99, SystemStatus.IDLE),
            (0.0, SystemStatus.IDLE),
            (-0.5, SystemStatus.IDLE),
            (-1.0, SystemStatus.FAN_ONLY),
            (-2.0, SystemStatus.FAN_ONLY),
            (-2.01, SystemStatus.HEATING),
            (-4.0, SystemStatus.HEATING),
        ],
    )
    def test_occupied_modes(self, control, delta, expected):
        """Test thresholds with an occupied zone."""
        assert control.thermal_mode(delta, occupied=True) == expected

    @pytest.mark.parametrize("delta", [-5.0, -1.5, 0.0, 1.5, 5.0])
    def test_unoccupied_is_off(self, control, delta):
        """Test an unoccupied zone switches the unit off."""
        assert control.thermal_mode(delta, occupied=False) == SystemStatus.OFF

    def test_custom_thresholds(self):
        """Test thresholds come from ControlParameters."""
        params = ControlParameters(threshold_hi_c=1.0, threshold_lo_c=0.5)
        control = ControlLogic(params)
        assert control.thermal_mode(1.2, occupied=True) == SystemStatus.COOLING
        assert control.thermal_mode(0.7, occupied=True) == SystemStatus.FAN_ONLY

    def test_inverted_thresholds_raise(self):
        """Test lo threshold above hi threshold is rejected."""
        with pytest.raises(ValueError, match="thresholds"):
            ControlParameters(threshold_hi_c=1.0, threshold_lo_c=2.0)


# ================================================================
# VENTILATION OVERRIDE TESTS
# ================================================================
class TestDecide:
    """Test final mode with the CO2 override."""

    @pytest.fixture
    def control(self):
        return ControlLogic()

    def test_high_co2_forces_fan_when_idle(self, control):
        """Test high CO2 turns an idle unit into ventilation."""
        assert control.decide(0.2, True, 850.0) == SystemStatus.FAN_ONLY

    def test_high_co2_forces_fan_when_off(self, control):
        """Test high CO2 ventilates an unoccupied zone."""
        assert control.decide(0.2, False, 850.0) == SystemStatus.FAN_ONLY

    def test_co2_at_threshold_no_override(self, control):
        """Test the override needs CO2 strictly above the threshold."""
        assert control.decide(0.2, True, 800.0) == SystemStatus.IDLE

    @pytest.mark.parametrize(
        "delta, expected",
        [(3.0, SystemStatus.COOLING), (-3.0, SystemStatus.HEATING)],
    )
    def test_co2_does_not_override_conditioning(self, control, delta, expected):
        """Test cooling and heating are kept regardless of CO2."""
        assert control.decide(delta, True, 890.0) == expected

    def test_low_co2_keeps_mode(self, control):
        """Test normal CO2 leaves the thermal mode unchanged."""
        assert control.decide(0.0, False, 470.0) == SystemStatus.OFF

    def test_status_values(self):
        """Test status values are the published strings."""
        assert [s.value for s in SystemStatus] == [
            "OFF",
            "IDLE",
            "FAN_ONLY",
            "COOLING",
            "HEATING",
        ]
