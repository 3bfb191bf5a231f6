# hvac_mock/telemetry/__init__.py
"""
Sensor telemetry synthesis.

- sensor_record: output record and its published JSON field names
- generator: sequential climate-to-telemetry engine
- summary: run statistics
"""

from hvac_mock.telemetry.generator import GeneratorParameters, TelemetryGenerator
from hvac_mock.telemetry.sensor_record import JSON_FIELD_NAMES, SensorRecord
from hvac_mock.telemetry.summary import RunSummary, summarize

__all__ = [
    "GeneratorParameters",
    "TelemetryGenerator",
    "JSON_FIELD_NAMES",
    "SensorRecord",
    "RunSummary",
    "summarize",
]
