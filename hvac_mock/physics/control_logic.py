# hvac_mock/physics/control_logic.py
"""
Zone occupancy and HVAC operating-mode selection.

Occupancy is a Bernoulli draw whose probability depends on the weekday and
hour bucket (busy business hours, a quieter lunch window, nearly empty
nights and weekends).

The operating mode is chosen fresh for every record, nothing persists
between records:

    unoccupied                      -> OFF
    occupied, delta >  threshold_hi -> COOLING
    occupied, delta < -threshold_hi -> HEATING
    occupied, |delta| < threshold_lo -> IDLE
    occupied, otherwise             -> FAN_ONLY

followed by the ventilation override: CO2 above the fan threshold lifts
IDLE/OFF to FAN_ONLY.
"""

import random
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from hvac_mock.physics.base_model import BaseModel

__all__ = [
    "SystemStatus",
    "OccupancyParameters",
    "OccupancySchedule",
    "ControlParameters",
    "ControlLogic",
]


class SystemStatus(Enum):
    """HVAC operating modes."""

    OFF = "OFF"
    IDLE = "IDLE"
    FAN_ONLY = "FAN_ONLY"
    COOLING = "COOLING"
    HEATING = "HEATING"


# ----------------------------------------------------------------
# Occupancy
# ----------------------------------------------------------------


@dataclass
class OccupancyParameters:
    """Occupancy probability schedule.

    Attributes:
        business_start_hour: First hour (inclusive) of the working day
        business_end_hour: Last hour (exclusive) of the working day
        lunch_start_hour: First hour (inclusive) of the lunch window
        lunch_end_hour: Last hour (exclusive) of the lunch window
        business_probability: Occupancy probability in working hours
        lunch_probability: Occupancy probability in the lunch window
        off_hours_probability: Occupancy probability at any other time
    """

    business_start_hour: int = 8
    business_end_hour: int = 18
    lunch_start_hour: int = 12
    lunch_end_hour: int = 14
    business_probability: float = 0.90
    lunch_probability: float = 0.30
    off_hours_probability: float = 0.10

    def __post_init__(self):
        for name in (
            "business_probability",
            "lunch_probability",
            "off_hours_probability",
        ):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be in [0, 1], got {value}")


class OccupancySchedule(BaseModel):
    """Draws whether the zone is occupied at a given timestamp."""

    def __init__(
        self,
        rng: random.Random,
        params: OccupancyParameters | None = None,
    ):
        super().__init__(rng, params or OccupancyParameters())

    def probability(self, timestamp: datetime) -> float:
        """Occupancy probability for the weekday/hour bucket of timestamp."""
        p = self.params
        hour = timestamp.hour

        is_weekday = timestamp.weekday() < 5  # Monday=0 .. Friday=4
        if is_weekday and p.business_start_hour <= hour < p.business_end_hour:
            if p.lunch_start_hour <= hour < p.lunch_end_hour:
                return p.lunch_probability
            return p.business_probability

        return p.off_hours_probability

    def is_occupied(self, timestamp: datetime) -> bool:
        return self._chance(self.probability(timestamp))


# ----------------------------------------------------------------
# Mode selection
# ----------------------------------------------------------------


@dataclass
class ControlParameters:
    """Thermostat control thresholds.

    Attributes:
        threshold_hi_c: Thermal delta beyond which cooling/heating starts
        threshold_lo_c: Thermal delta below which the unit idles
        co2_fan_threshold_ppm: CO2 level that forces ventilation
    """

    threshold_hi_c: float = 2.0
    threshold_lo_c: float = 1.0
    co2_fan_threshold_ppm: float = 800.0

    def __post_init__(self):
        if not 0.0 <= self.threshold_lo_c <= self.threshold_hi_c:
            raise ValueError(
                "thresholds must satisfy 0 <= threshold_lo_c <= threshold_hi_c, "
                f"got lo={self.threshold_lo_c}, hi={self.threshold_hi_c}"
            )


class ControlLogic:
    """
    Stateless operating-mode selector.

    Example:
        >>> control = ControlLogic()
        >>> control.decide(thermal_delta=3.1, occupied=True, co2_ppm=650.0)
        <SystemStatus.COOLING: 'COOLING'>
    """

    def __init__(self, params: ControlParameters | None = None):
        self.params = params or ControlParameters()

    def thermal_mode(self, thermal_delta: float, occupied: bool) -> SystemStatus:
        """Mode chosen from comfort alone, before the ventilation override."""
        if not occupied:
            return SystemStatus.OFF

        if thermal_delta > self.params.threshold_hi_c:
            return SystemStatus.COOLING
        if thermal_delta < -self.params.threshold_hi_c:
            return SystemStatus.HEATING
        if abs(thermal_delta) < self.params.threshold_lo_c:
            return SystemStatus.IDLE
        return SystemStatus.FAN_ONLY

    def decide(
        self, thermal_delta: float, occupied: bool, co2_ppm: float
    ) -> SystemStatus:
        """Final operating mode for one record."""
        status = self.thermal_mode(thermal_delta, occupied)

        if (
            status in (SystemStatus.IDLE, SystemStatus.OFF)
            and co2_ppm > self.params.co2_fan_threshold_ppm
        ):
            return SystemStatus.FAN_ONLY

        return status
