# hvac_mock/physics/asset_state.py
"""
Wear and maintenance of the modelled HVAC unit.

Uses a cumulative-drift model:
- Equipment health drops by a small random amount every record
- Filter clog level rises by a small random amount every record
- Every record in the maintenance month services the unit: the filter is
  swapped (clog near zero) and health is restored to near-pristine

AssetState is the only memory carried from one record to the next, so
records must be fed in timestamp order.
"""

import random
from dataclasses import dataclass

from hvac_mock.physics.base_model import BaseModel, clamp

__all__ = ["AssetState", "DegradationParameters", "AssetDegradation"]


@dataclass
class AssetState:
    """Current condition of the modelled unit.

    Attributes:
        equipment_health: Compressor/mechanical condition (1.0 = pristine)
        filter_clog_level: Airflow restriction (0.0 = clean, 1.0 = blocked)
    """

    equipment_health: float = 1.0
    filter_clog_level: float = 0.0

    def clamp(self, health_floor: float) -> None:
        """Force both values back inside their bounds."""
        self.equipment_health = clamp(self.equipment_health, health_floor, 1.0)
        self.filter_clog_level = clamp(self.filter_clog_level, 0.0, 1.0)


@dataclass
class DegradationParameters:
    """Degradation and maintenance parameters.

    Attributes:
        health_drift_max: Largest health loss per record
        clog_drift_max: Largest clog gain per record
        health_floor: Health never drops below this
        maintenance_month: Calendar month (1-12) of preventive service
        clog_reset_max: Clog level after service is drawn from [0, this)
        serviced_health: Health after service is drawn from [this, 1.0)
    """

    health_drift_max: float = 0.0001
    clog_drift_max: float = 0.001
    health_floor: float = 0.2
    maintenance_month: int = 9  # September
    clog_reset_max: float = 0.05
    serviced_health: float = 0.95

    def __post_init__(self):
        if not 1 <= self.maintenance_month <= 12:
            raise ValueError(
                f"maintenance_month must be 1-12, got {self.maintenance_month}"
            )
        if not 0.0 <= self.health_floor <= 1.0:
            raise ValueError(f"health_floor must be in [0, 1], got {self.health_floor}")


class AssetDegradation(BaseModel):
    """
    Advances AssetState once per climate record.

    Example:
        >>> degradation = AssetDegradation(random.Random(42))
        >>> state = AssetState()
        >>> degradation.advance(state, month=8)
    """

    def __init__(
        self,
        rng: random.Random,
        params: DegradationParameters | None = None,
    ):
        super().__init__(rng, params or DegradationParameters())

    def initial_state(self) -> AssetState:
        """Pristine unit at the start of a run."""
        return AssetState(equipment_health=1.0, filter_clog_level=0.0)

    def advance(self, state: AssetState, month: int) -> AssetState:
        """Apply one record's worth of wear, and service if due.

        Args:
            state: Asset state to update in place
            month: Calendar month (1-12) of the current record

        Returns:
            The same, updated, state object
        """
        state.equipment_health -= self.rng.random() * self.params.health_drift_max
        state.filter_clog_level += self.rng.random() * self.params.clog_drift_max

        if month == self.params.maintenance_month:
            self._service(state)

        state.clamp(self.params.health_floor)
        return state

    def _service(self, state: AssetState) -> None:
        """Preventive maintenance: new filter, overhauled compressor."""
        state.filter_clog_level = self.rng.random() * self.params.clog_reset_max

        restored = self._uniform(self.params.serviced_health, 1.0)
        state.equipment_health = max(state.equipment_health, restored)
