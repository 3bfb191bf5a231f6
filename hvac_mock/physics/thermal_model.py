# hvac_mock/physics/thermal_model.py
"""
Zone thermal response to outdoor conditions.

The zone is not integrated over time. Each record's "uncontrolled" indoor
temperature is the base indoor temperature pulled towards the outdoor
temperature by a fixed fraction (the inertia factor), plus sensor noise:

    uncontrolled = base + (outdoor - base) * inertia_factor + jitter

A lower inertia factor means a better insulated building that follows
outdoor swings less. The thermostat set-point wanders around the same base
temperature to represent occupant adjustments.
"""

import random
from dataclasses import dataclass

from hvac_mock.physics.base_model import BaseModel

__all__ = ["ThermalParameters", "ThermalReading", "ThermalModel"]


@dataclass
class ThermalParameters:
    """Zone thermal parameters.

    Attributes:
        base_internal_temp_c: Nominal indoor temperature in Celsius
        inertia_factor: Fraction of the outdoor/indoor difference that
            reaches the zone (0-1, exclusive)
        jitter_span_c: Width of the uniform noise band on indoor temperature
        setpoint_span_c: Width of the uniform band the set-point wanders in
    """

    base_internal_temp_c: float = 22.0
    inertia_factor: float = 0.25
    jitter_span_c: float = 1.5
    setpoint_span_c: float = 2.0

    def __post_init__(self):
        if not 0.0 < self.inertia_factor < 1.0:
            raise ValueError(
                f"inertia_factor must be in (0, 1), got {self.inertia_factor}"
            )


@dataclass(frozen=True)
class ThermalReading:
    """Thermal model output for one record."""

    uncontrolled_temp_c: float
    set_point_c: float

    @property
    def thermal_delta(self) -> float:
        """Positive when the zone is warmer than the set-point."""
        return self.uncontrolled_temp_c - self.set_point_c


class ThermalModel(BaseModel):
    """
    Computes uncontrolled zone temperature and the active set-point.

    Example:
        >>> model = ThermalModel(random.Random(1))
        >>> reading = model.evaluate(outdoor_temp_c=35.0)
        >>> reading.thermal_delta
    """

    def __init__(
        self,
        rng: random.Random,
        params: ThermalParameters | None = None,
    ):
        super().__init__(rng, params or ThermalParameters())

    def uncontrolled_temperature(self, outdoor_temp_c: float) -> float:
        base = self.params.base_internal_temp_c
        jitter = (self.rng.random() - 0.5) * self.params.jitter_span_c
        return base + (outdoor_temp_c - base) * self.params.inertia_factor + jitter

    def set_point(self) -> float:
        delta = (self.rng.random() - 0.5) * self.params.setpoint_span_c
        return self.params.base_internal_temp_c + delta

    def evaluate(self, outdoor_temp_c: float) -> ThermalReading:
        """Draw both thermal values for one record (indoor first)."""
        uncontrolled = self.uncontrolled_temperature(outdoor_temp_c)
        return ThermalReading(
            uncontrolled_temp_c=uncontrolled,
            set_point_c=self.set_point(),
        )
