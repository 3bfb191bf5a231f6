# hvac_mock/climate/climate_record.py
"""Hourly outdoor climate observation."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ClimateRecord:
    """One hourly outdoor reading from a weather station.

    Attributes:
        timestamp: Observation instant (UTC, hourly resolution)
        outdoor_temperature_c: Dry-bulb air temperature in Celsius
        outdoor_relative_humidity_pct: Relative humidity (0-100%)
    """

    timestamp: datetime
    outdoor_temperature_c: float
    outdoor_relative_humidity_pct: float
