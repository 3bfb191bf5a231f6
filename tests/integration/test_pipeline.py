# tests/integration/test_pipeline.py
"""
Integration tests for the full generation pipeline.

INMET export on disk (CSV or ZIP) -> reader -> generator -> JSON sink,
using only real components. The last test drives the command line tool
end to end.
"""

import json
from datetime import datetime, timedelta, timezone

import pytest

from hvac_mock.climate import read_inmet_file
from hvac_mock.sinks import save_locally, to_json
from hvac_mock.telemetry import TelemetryGenerator, summarize
from tools.mock_generator import main

EXPECTED_KEYS = {
    "timestamp",
    "internalTemperature",
    "setPointTemperature",
    "systemStatus",
    "occupancyStatus",
    "powerConsumptionKwH",
    "outdoorTemperature",
    "outdoorHumidity",
    "deviceId",
    "supplyAirTemperature",
    "returnAirTemperature",
    "ductStaticPressurePa",
    "co2LevelPpm",
    "refrigerantPressurePsi",
    "faultCode",
    "assetModel",
    "locationZone",
}


@pytest.fixture
def week_of_rows():
    """One week of hourly INMET rows starting Monday 2024-01-01."""
    rows = []
    start = datetime(2024, 1, 1)
    for i in range(7 * 24):
        ts = start + timedelta(hours=i)
        temperature = 20.0 + (ts.hour % 24) * 0.6
        rows.append(
            (
                ts.strftime("%Y-%m-%d"),
                ts.strftime("%H%M"),
                f"{temperature:.1f}".replace(".", ","),
                str(60 + ts.hour),
            )
        )
    return rows


@pytest.mark.integration
class TestPipeline:
    """Reader, generator and sink working together."""

    def test_zip_to_json_file(self, write_inmet_zip, week_of_rows, tmp_path):
        """Test a ZIP export becomes a JSON file with one object per hour."""
        climate = read_inmet_file(write_inmet_zip(week_of_rows))
        records = TelemetryGenerator(seed=12).generate(climate)
        path = save_locally(to_json(records), tmp_path / "out" / "data.json")

        data = json.loads(path.read_bytes())

        assert len(data) == 7 * 24
        assert set(data[0]) == EXPECTED_KEYS
        assert data[0]["timestamp"] == "2024-01-01T00:00:00Z"
        assert data[-1]["timestamp"] == "2024-01-07T23:00:00Z"
        assert data[13]["outdoorTemperature"] == pytest.approx(27.8)

    def test_csv_and_zip_agree(self, write_inmet_csv, write_inmet_zip, week_of_rows):
        """Test the same export gives the same records either way."""
        from_csv = TelemetryGenerator(seed=4).generate(
            read_inmet_file(write_inmet_csv(week_of_rows))
        )
        from_zip = TelemetryGenerator(seed=4).generate(
            read_inmet_file(write_inmet_zip(week_of_rows))
        )
        assert from_csv == from_zip

    def test_malformed_rows_do_not_stop_run(self, write_inmet_csv, week_of_rows):
        """Test bad rows are skipped and the rest generated."""
        rows = list(week_of_rows)
        rows[5] = (rows[5][0], rows[5][1], "", rows[5][3])
        rows[9] = (rows[9][0], "xx", rows[9][2], rows[9][3])

        records = TelemetryGenerator(seed=4).generate(
            read_inmet_file(write_inmet_csv(rows))
        )

        assert len(records) == 7 * 24 - 2

    def test_summary_of_week(self, write_inmet_zip, week_of_rows):
        """Test the run summary covers the whole week."""
        records = TelemetryGenerator(seed=12).generate(
            read_inmet_file(write_inmet_zip(week_of_rows))
        )
        summary = summarize(records)

        assert summary.record_count == 168
        assert summary.first_timestamp == "2024-01-01T00:00:00Z"
        assert summary.status_counts.get("OFF", 0) > 0

    def test_command_line_run(
        self,
        write_inmet_zip,
        week_of_rows,
        tmp_path,
        clean_environment,
        restore_root_logging,
    ):
        """Test the command line tool reproduces a seeded library run."""
        archive = write_inmet_zip(week_of_rows)
        output_dir = tmp_path / "output"

        exit_code = main(
            [
                "--input",
                str(archive),
                "--seed",
                "12",
                "--config-dir",
                str(tmp_path / "config"),
                "--env-file",
                str(tmp_path / "absent.env"),
                "--output-dir",
                str(output_dir),
                "--log-dir",
                str(tmp_path / "logs"),
            ]
        )

        assert exit_code == 0
        (output_file,) = output_dir.glob("hvac_mock_data_*.json")
        cli_data = json.loads(output_file.read_bytes())

        library_records = TelemetryGenerator(seed=12).generate(
            read_inmet_file(archive)
        )
        assert cli_data == [r.to_dict() for r in library_records]
        assert (tmp_path / "config" / "generator.yml").exists()
        assert (tmp_path / "logs" / "generator.json.log").exists()
