# hvac_mock/telemetry/sensor_record.py
"""
Synthesised HVAC sensor record.

Field names in the JSON form are consumed by downstream dashboards, so
``JSON_FIELD_NAMES`` may only grow: never rename or remove an entry.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from hvac_mock.physics.control_logic import SystemStatus
from hvac_mock.physics.fault_model import FaultCode

__all__ = ["JSON_FIELD_NAMES", "SensorRecord", "format_timestamp"]

# Attribute name -> JSON key
JSON_FIELD_NAMES = {
    "timestamp": "timestamp",
    "internal_temperature_c": "internalTemperature",
    "set_point_temperature_c": "setPointTemperature",
    "system_status": "systemStatus",
    "occupancy_status": "occupancyStatus",
    "power_consumption_kwh": "powerConsumptionKwH",
    "outdoor_temperature_c": "outdoorTemperature",
    "outdoor_humidity_pct": "outdoorHumidity",
    "device_id": "deviceId",
    "supply_air_temperature_c": "supplyAirTemperature",
    "return_air_temperature_c": "returnAirTemperature",
    "duct_static_pressure_pa": "ductStaticPressurePa",
    "co2_level_ppm": "co2LevelPpm",
    "refrigerant_pressure_psi": "refrigerantPressurePsi",
    "fault_code": "faultCode",
    "asset_model": "assetModel",
    "location_zone": "locationZone",
}


def format_timestamp(timestamp: datetime) -> str:
    """ISO 8601 in UTC with a ``Z`` suffix; naive values are taken as UTC."""
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


@dataclass(frozen=True)
class SensorRecord:
    """HVAC telemetry for one timestamp.

    Attributes:
        timestamp: Instant the readings represent (UTC)
        internal_temperature_c: Zone temperature
        set_point_temperature_c: Active thermostat set-point
        system_status: Operating mode
        occupancy_status: Whether the zone is occupied
        power_consumption_kwh: Energy draw for the sampling period
        outdoor_temperature_c: Outdoor temperature (from the climate record)
        outdoor_humidity_pct: Outdoor relative humidity (from the climate record)
        device_id: Reporting sensor identifier
        supply_air_temperature_c: Air leaving the unit
        return_air_temperature_c: Air returning to the unit
        duct_static_pressure_pa: Duct static pressure
        co2_level_ppm: Zone CO2 concentration
        refrigerant_pressure_psi: Refrigerant line pressure
        fault_code: Active fault
        asset_model: Unit model tag
        location_zone: Zone tag
    """

    timestamp: datetime
    internal_temperature_c: float
    set_point_temperature_c: float
    system_status: SystemStatus
    occupancy_status: bool
    power_consumption_kwh: float
    outdoor_temperature_c: float
    outdoor_humidity_pct: float
    device_id: str
    supply_air_temperature_c: float
    return_air_temperature_c: float
    duct_static_pressure_pa: float
    co2_level_ppm: float
    refrigerant_pressure_psi: float
    fault_code: FaultCode
    asset_model: str
    location_zone: str

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready dictionary keyed by the published field names."""
        data: dict[str, Any] = {}
        for attribute, key in JSON_FIELD_NAMES.items():
            value = getattr(self, attribute)
            if isinstance(value, datetime):
                value = format_timestamp(value)
            elif isinstance(value, (SystemStatus, FaultCode)):
                value = value.value
            data[key] = value
        return data
