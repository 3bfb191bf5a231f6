# hvac_mock/physics/fault_model.py
"""
Rule-based fault derivation.

Rules are evaluated in a fixed order and the last applicable rule wins:

1. OK by default
2. COOLING: high-pressure alarm with probability (1 - equipment_health)
3. HEATING: heating failure with probability (1 - equipment_health)
4. Clogged filter (above threshold) on a running unit: dirty-filter alarm
   with fixed probability
5. Duct static pressure above the ceiling: duct-pressure alarm, always

Duct static pressure itself is derived here too, because it is the reading
that couples filter clogging to the most severe alarm.
"""

import random
from dataclasses import dataclass
from enum import Enum

from hvac_mock.physics.asset_state import AssetState
from hvac_mock.physics.base_model import BaseModel
from hvac_mock.physics.control_logic import SystemStatus

__all__ = ["FaultCode", "FaultParameters", "FaultModel"]


class FaultCode(Enum):
    """Fault codes reported by the unit controller."""

    OK = "OK"
    HIGH_PRESSURE_ALARM = "HP-AL-01"
    HEATING_FAILURE = "HT-FL-02"
    DIRTY_FILTER_ALARM = "FP-AL-01"
    DUCT_PRESSURE_ALARM = "FP-AL-02"


@dataclass
class FaultParameters:
    """Duct pressure and fault rule parameters.

    Attributes:
        duct_base_pa: Static pressure with a clean filter
        duct_base_span_pa: Random spread on the base pressure
        fan_duct_base_pa: Base pressure while ventilating (FAN_ONLY)
        fan_duct_span_pa: Random spread on the ventilating base pressure
        duct_clog_gain_pa: Pressure added by a fully blocked filter
        duct_pressure_ceiling_pa: Pressure above which FP-AL-02 is raised
        clog_fault_threshold: Clog level above which FP-AL-01 may be raised
        clog_fault_probability: Chance of FP-AL-01 once over the threshold
    """

    duct_base_pa: float = 10.0
    duct_base_span_pa: float = 2.0
    fan_duct_base_pa: float = 12.0
    fan_duct_span_pa: float = 1.0
    duct_clog_gain_pa: float = 8.0
    duct_pressure_ceiling_pa: float = 20.0
    clog_fault_threshold: float = 0.6
    clog_fault_probability: float = 0.5


class FaultModel(BaseModel):
    """
    Derives duct pressure and the fault code for one record.

    Example:
        >>> faults = FaultModel(random.Random(3))
        >>> pressure = faults.duct_static_pressure(SystemStatus.COOLING, state)
        >>> faults.evaluate(SystemStatus.COOLING, state, pressure)
    """

    def __init__(
        self,
        rng: random.Random,
        params: FaultParameters | None = None,
    ):
        super().__init__(rng, params or FaultParameters())

    def duct_static_pressure(self, status: SystemStatus, asset: AssetState) -> float:
        """Static pressure (Pa); rises linearly with filter clog level."""
        p = self.params
        if status == SystemStatus.FAN_ONLY:
            base = self._uniform(
                p.fan_duct_base_pa, p.fan_duct_base_pa + p.fan_duct_span_pa
            )
        else:
            base = self._uniform(p.duct_base_pa, p.duct_base_pa + p.duct_base_span_pa)

        return base + asset.filter_clog_level * p.duct_clog_gain_pa

    def evaluate(
        self,
        status: SystemStatus,
        asset: AssetState,
        duct_pressure_pa: float,
    ) -> FaultCode:
        """Apply the fault rules in order; the last matching rule wins.

        Args:
            status: Operating mode for this record
            asset: Current asset condition
            duct_pressure_pa: Duct static pressure for this record

        Returns:
            Fault code to report
        """
        p = self.params
        fault = FaultCode.OK

        failure_probability = 1.0 - asset.equipment_health
        if status == SystemStatus.COOLING:
            if self._chance(failure_probability):
                fault = FaultCode.HIGH_PRESSURE_ALARM
        elif status == SystemStatus.HEATING:
            if self._chance(failure_probability):
                fault = FaultCode.HEATING_FAILURE

        # Filter differential is only sensed with the unit running
        if (
            status != SystemStatus.OFF
            and asset.filter_clog_level > p.clog_fault_threshold
        ):
            if self._chance(p.clog_fault_probability):
                fault = FaultCode.DIRTY_FILTER_ALARM

        if duct_pressure_pa > p.duct_pressure_ceiling_pa:
            fault = FaultCode.DUCT_PRESSURE_ALARM

        if fault != FaultCode.OK:
            self.logger.debug(
                f"Fault {fault.value}: status={status.value}, "
                f"health={asset.equipment_health:.3f}, "
                f"clog={asset.filter_clog_level:.3f}, duct={duct_pressure_pa:.1f}Pa"
            )

        return fault
