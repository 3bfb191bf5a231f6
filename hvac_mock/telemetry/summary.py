# hvac_mock/telemetry/summary.py
"""Aggregate statistics over a generated run, for logging and reports."""

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from hvac_mock.telemetry.sensor_record import SensorRecord, format_timestamp

__all__ = ["RunSummary", "summarize"]


@dataclass
class RunSummary:
    """Counts and totals for one generated sequence."""

    record_count: int = 0
    first_timestamp: str | None = None
    last_timestamp: str | None = None
    status_counts: dict[str, int] = field(default_factory=dict)
    fault_counts: dict[str, int] = field(default_factory=dict)
    occupied_fraction: float = 0.0
    total_power_kwh: float = 0.0
    mean_power_kwh: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "record_count": self.record_count,
            "first_timestamp": self.first_timestamp,
            "last_timestamp": self.last_timestamp,
            "status_counts": dict(self.status_counts),
            "fault_counts": dict(self.fault_counts),
            "occupied_fraction": round(self.occupied_fraction, 4),
            "total_power_kwh": round(self.total_power_kwh, 2),
            "mean_power_kwh": round(self.mean_power_kwh, 4),
        }


def summarize(records: Sequence[SensorRecord]) -> RunSummary:
    """Summarise a sequence of sensor records.

    An empty sequence yields a zeroed summary.
    """
    if not records:
        return RunSummary()

    status_counts = Counter(record.system_status.value for record in records)
    fault_counts = Counter(record.fault_code.value for record in records)
    occupied = sum(1 for record in records if record.occupancy_status)
    total_power = sum(record.power_consumption_kwh for record in records)

    return RunSummary(
        record_count=len(records),
        first_timestamp=format_timestamp(records[0].timestamp),
        last_timestamp=format_timestamp(records[-1].timestamp),
        status_counts=dict(status_counts.most_common()),
        fault_counts=dict(fault_counts.most_common()),
        occupied_fraction=occupied / len(records),
        total_power_kwh=total_power,
        mean_power_kwh=total_power / len(records),
    )
