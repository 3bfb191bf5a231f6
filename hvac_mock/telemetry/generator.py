# hvac_mock/telemetry/generator.py
"""
Climate-to-telemetry generator.

Folds an ordered sequence of climate records into sensor records. For each
record the generator:

1. Advances the asset state (wear, maintenance)
2. Draws occupancy
3. Evaluates the thermal model
4. Draws the CO2 level
5. Chooses the operating mode
6. Computes power draw and air-side readings
7. Derives duct pressure and the fault code
8. Assigns the reporting device identifier

All randomness comes from a single generator owned by the run and seeded
once, so a given seed and input always produce the same output.
"""

import logging
import random
from collections.abc import Iterable
from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from typing import Any

from hvac_mock.climate.climate_record import ClimateRecord
from hvac_mock.physics.asset_state import (
    AssetDegradation,
    AssetState,
    DegradationParameters,
)
from hvac_mock.physics.control_logic import (
    ControlLogic,
    ControlParameters,
    OccupancyParameters,
    OccupancySchedule,
)
from hvac_mock.physics.energy_model import (
    AirSideParameters,
    EnergyModel,
    EnergyParameters,
)
from hvac_mock.physics.fault_model import FaultModel, FaultParameters
from hvac_mock.physics.thermal_model import ThermalModel, ThermalParameters
from hvac_mock.telemetry.sensor_record import SensorRecord

logger = logging.getLogger(__name__)

__all__ = ["GeneratorParameters", "TelemetryGenerator"]

# Keys accepted in the "simulation" config section besides "seed"
_IDENTITY_KEYS = {"device_prefix", "device_count", "asset_model", "location_zone"}

# Top-level config sections; "input" and "output" are read by the command line
_SECTIONS = {
    "simulation",
    "thermal",
    "occupancy",
    "control",
    "energy",
    "air_side",
    "faults",
    "asset",
    "input",
    "output",
}


@dataclass
class GeneratorParameters:
    """All parameters for one generator run.

    Attributes:
        device_prefix: Prefix of the per-record device identifier
        device_count: Identifiers are drawn from prefix-1 .. prefix-N
        asset_model: Asset model tag stamped on every record
        location_zone: Zone tag stamped on every record
    """

    device_prefix: str = "SALA"
    device_count: int = 10
    asset_model: str = "HVAC-Model-B"
    location_zone: str = "Zona-A"
    thermal: ThermalParameters = field(default_factory=ThermalParameters)
    occupancy: OccupancyParameters = field(default_factory=OccupancyParameters)
    control: ControlParameters = field(default_factory=ControlParameters)
    energy: EnergyParameters = field(default_factory=EnergyParameters)
    air_side: AirSideParameters = field(default_factory=AirSideParameters)
    faults: FaultParameters = field(default_factory=FaultParameters)
    degradation: DegradationParameters = field(default_factory=DegradationParameters)

    def __post_init__(self):
        if self.device_count < 1:
            raise ValueError(f"device_count must be >= 1, got {self.device_count}")

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "GeneratorParameters":
        """Build parameters from a loaded configuration dictionary.

        Reads the ``simulation``, ``thermal``, ``occupancy``, ``control``,
        ``energy``, ``air_side``, ``faults`` and ``asset`` sections; missing
        sections keep their defaults.

        Raises:
            ValueError: If a section is unknown, or contains an unknown key
                or invalid value
        """
        unknown_sections = set(config) - _SECTIONS
        if unknown_sections:
            raise ValueError(
                f"Unknown config sections: {sorted(str(s) for s in unknown_sections)}"
            )

        simulation = dict(config.get("simulation") or {})
        simulation.pop("seed", None)

        unknown = set(simulation) - _IDENTITY_KEYS
        if unknown:
            raise ValueError(f"Unknown keys in 'simulation' section: {sorted(unknown)}")

        return cls(
            **simulation,
            thermal=_build_section(ThermalParameters, config, "thermal"),
            occupancy=_build_section(OccupancyParameters, config, "occupancy"),
            control=_build_section(ControlParameters, config, "control"),
            energy=_build_section(EnergyParameters, config, "energy"),
            air_side=_build_section(AirSideParameters, config, "air_side"),
            faults=_build_section(FaultParameters, config, "faults"),
            degradation=_build_section(DegradationParameters, config, "asset"),
        )


def _build_section(param_class, config: dict[str, Any], section: str):
    """Instantiate a parameter dataclass from one config section."""
    values = config.get(section) or {}
    known = {f.name for f in fields(param_class)}
    unknown = set(values) - known
    if unknown:
        raise ValueError(f"Unknown keys in '{section}' section: {sorted(unknown)}")
    return param_class(**values)


class TelemetryGenerator:
    """
    Stateful, sequential climate-to-telemetry engine.

    Owns the run's random generator and the asset state. Records must be
    supplied in ascending timestamp order.

    Example:
        >>> generator = TelemetryGenerator(seed=42)
        >>> sensor_records = generator.generate(climate_records)
    """

    def __init__(
        self,
        params: GeneratorParameters | None = None,
        rng: random.Random | None = None,
        seed: int | None = None,
    ):
        """Initialise generator.

        Args:
            params: Run parameters (uses defaults if None)
            rng: Random generator to use; takes precedence over seed
            seed: Seed for a new random generator when rng is None
        """
        self.params = params or GeneratorParameters()
        self.rng = rng if rng is not None else random.Random(seed)

        self.degradation = AssetDegradation(self.rng, self.params.degradation)
        self.occupancy = OccupancySchedule(self.rng, self.params.occupancy)
        self.thermal = ThermalModel(self.rng, self.params.thermal)
        self.control = ControlLogic(self.params.control)
        self.energy = EnergyModel(self.rng, self.params.energy, self.params.air_side)
        self.faults = FaultModel(self.rng, self.params.faults)

        self.asset_state: AssetState = self.degradation.initial_state()
        self.records_generated = 0
        self._last_timestamp: datetime | None = None

        logger.info(
            f"Telemetry generator created: {self.params.asset_model} in "
            f"{self.params.location_zone}, maintenance month "
            f"{self.params.degradation.maintenance_month}"
        )

    # ----------------------------------------------------------------
    # Simulation
    # ----------------------------------------------------------------

    def simulate(
        self, climate: ClimateRecord, asset_state: AssetState
    ) -> tuple[SensorRecord, AssetState]:
        """Produce one sensor record from one climate record.

        The given asset state is left untouched; the advanced state is
        returned alongside the record.

        Args:
            climate: Outdoor observation for this timestamp
            asset_state: Asset condition before this record

        Returns:
            (sensor record, asset state after this record)
        """
        asset = self.degradation.advance(replace(asset_state), climate.timestamp.month)

        occupied = self.occupancy.is_occupied(climate.timestamp)
        thermal = self.thermal.evaluate(climate.outdoor_temperature_c)
        co2_ppm = self.energy.co2_level(occupied)

        status = self.control.decide(thermal.thermal_delta, occupied, co2_ppm)

        power = self.energy.power_consumption(
            status,
            climate.outdoor_temperature_c,
            climate.outdoor_relative_humidity_pct,
            thermal.set_point_c,
            asset,
        )
        air = self.energy.air_side(status, thermal.uncontrolled_temp_c)

        duct_pressure = self.faults.duct_static_pressure(status, asset)
        fault = self.faults.evaluate(status, asset, duct_pressure)

        device_number = self.rng.randint(1, self.params.device_count)

        record = SensorRecord(
            timestamp=climate.timestamp,
            internal_temperature_c=thermal.uncontrolled_temp_c,
            set_point_temperature_c=thermal.set_point_c,
            system_status=status,
            occupancy_status=occupied,
            power_consumption_kwh=power,
            outdoor_temperature_c=climate.outdoor_temperature_c,
            outdoor_humidity_pct=climate.outdoor_relative_humidity_pct,
            device_id=f"{self.params.device_prefix}-{device_number}",
            supply_air_temperature_c=air.supply_air_temp_c,
            return_air_temperature_c=thermal.uncontrolled_temp_c,
            duct_static_pressure_pa=duct_pressure,
            co2_level_ppm=co2_ppm,
            refrigerant_pressure_psi=air.refrigerant_pressure_psi,
            fault_code=fault,
            asset_model=self.params.asset_model,
            location_zone=self.params.location_zone,
        )
        return record, asset

    def step(self, climate: ClimateRecord) -> SensorRecord:
        """Simulate one record and carry the asset state forward."""
        previous = self._last_timestamp
        if previous is not None and climate.timestamp < previous:
            logger.warning(
                f"Climate record {climate.timestamp.isoformat()} is earlier than "
                f"the previous record {previous.isoformat()}"
            )

        record, self.asset_state = self.simulate(climate, self.asset_state)
        self._last_timestamp = climate.timestamp
        self.records_generated += 1

        logger.debug(
            f"{record.timestamp.isoformat()}: {record.system_status.value}, "
            f"P={record.power_consumption_kwh:.2f}, fault={record.fault_code.value}, "
            f"health={self.asset_state.equipment_health:.3f}, "
            f"clog={self.asset_state.filter_clog_level:.3f}"
        )
        return record

    def generate(self, climate_records: Iterable[ClimateRecord]) -> list[SensorRecord]:
        """Simulate a whole ordered sequence of climate records.

        Args:
            climate_records: Climate records in ascending timestamp order

        Returns:
            One sensor record per climate record, in the same order
        """
        sensor_records = [self.step(climate) for climate in climate_records]
        logger.info(f"Generated {len(sensor_records)} HVAC sensor records")
        return sensor_records
