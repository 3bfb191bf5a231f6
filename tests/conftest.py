# tests/conftest.py
"""Shared pytest fixtures for HVAC mock generator tests.

This file provides common fixtures used across all test modules,
following the bottom-up testing strategy where foundation components
are tested with real dependencies wherever possible.
"""

import logging
import random
import tempfile
import zipfile
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Generator

import pytest
import yaml

from hvac_mock.climate.climate_record import ClimateRecord

INMET_HEADER = (
    "Data Medicao;Hora Medicao;PRECIPITACAO TOTAL, HORARIO(mm);"
    "TEMPERATURA DO AR - BULBO SECO, HORARIA(°C);"
    "UMIDADE RELATIVA DO AR, HORARIA(%)"
)

INMET_METADATA = [
    "Nome: BRASILIA",
    "Codigo Estacao: A001",
    "Latitude: -15.78944444",
    "Longitude: -47.92583332",
    "Altitude: 1160.96",
    "Situacao: Operante",
    "Data Inicial: 2024-01-01",
    "Data Final: 2025-01-31",
    "Periodicidade da Medicao: Horaria",
]


# ----------------------------------------------------------------
# Configuration fixtures
# ----------------------------------------------------------------
@pytest.fixture
def temp_config_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test configuration files.

    Yields:
        Path to temporary configuration directory
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir)
        yield config_path


@pytest.fixture
def write_config_file(temp_config_dir):
    """Factory fixture for writing YAML configuration files.

    Args:
        temp_config_dir: Temporary directory for config files

    Returns:
        Function that writes config dict to YAML file
    """

    def _write_config(config: dict, filename: str = "generator.yml") -> Path:
        """Write configuration to YAML file.

        Args:
            config: Configuration dictionary
            filename: Name of the config file

        Returns:
            Path to written configuration file
        """
        config_file = temp_config_dir / filename
        with open(config_file, "w") as f:
            yaml.dump(config, f)
        return config_file

    return _write_config


@pytest.fixture
def clean_environment(monkeypatch):
    """Remove S3 settings from the process environment for the test.

    Variables are registered with monkeypatch first, so values a .env file
    loads during the test are removed again at teardown.
    """
    for variable in ("S3_BUCKET_NAME", "AWS_REGION", "ENDPOINT_URL"):
        monkeypatch.setenv(variable, "")
        monkeypatch.delenv(variable)
    return monkeypatch


# ----------------------------------------------------------------
# Random generator fixtures
# ----------------------------------------------------------------
@pytest.fixture
def seeded_rng() -> random.Random:
    """Provide a random generator with a fixed seed."""
    return random.Random(1234)


@pytest.fixture
def fixed_rng():
    """Factory for a random generator whose random() always returns one value.

    Returns:
        Function taking the value in [0, 1) and returning the generator
    """

    class _FixedRandom(random.Random):
        def __init__(self, value: float):
            super().__init__(0)
            self.value = value

        def random(self) -> float:
            return self.value

    def _create(value: float = 0.5) -> random.Random:
        return _FixedRandom(value)

    return _create


# ----------------------------------------------------------------
# Climate data fixtures
# ----------------------------------------------------------------
@pytest.fixture
def make_climate_record():
    """Factory for ClimateRecord instances.

    Returns:
        Function building a record from a timestamp and readings
    """

    def _create(
        timestamp: datetime | None = None,
        temperature_c: float = 25.0,
        humidity_pct: float = 60.0,
    ) -> ClimateRecord:
        return ClimateRecord(
            timestamp=timestamp or datetime(2024, 1, 15, 10, tzinfo=timezone.utc),
            outdoor_temperature_c=temperature_c,
            outdoor_relative_humidity_pct=humidity_pct,
        )

    return _create


@pytest.fixture
def make_inmet_csv():
    """Factory for INMET export text (metadata, header, data rows).

    Each data row is a tuple (date, hour, temperature, humidity) written
    verbatim, so tests can pass malformed values.

    Returns:
        Function returning the full file contents as a string
    """

    def _create(rows: list[tuple[str, str, str, str]], header: str = INMET_HEADER):
        lines = list(INMET_METADATA)
        lines.append(header)
        for date, hour, temperature, humidity in rows:
            lines.append(f"{date};{hour};0,0;{temperature};{humidity}")
        return "\n".join(lines) + "\n"

    return _create


@pytest.fixture
def sample_rows() -> list[tuple[str, str, str, str]]:
    """Three well-formed hourly observations."""
    return [
        ("2024-01-01", "0000", "21,4", "88"),
        ("2024-01-01", "0100", "20,9", "90"),
        ("2024-01-01", "0200", "20,5", "92"),
    ]


@pytest.fixture
def write_inmet_csv(tmp_path, make_inmet_csv):
    """Factory writing an INMET CSV export to disk.

    Returns:
        Function returning the path of the written file
    """

    def _write(rows, filename: str = "inmet.csv", encoding: str = "latin-1") -> Path:
        path = tmp_path / filename
        path.write_bytes(make_inmet_csv(rows).encode(encoding))
        return path

    return _write


@pytest.fixture
def write_inmet_zip(tmp_path, make_inmet_csv):
    """Factory writing an INMET export wrapped in a ZIP archive.

    Returns:
        Function returning the path of the written archive
    """

    def _write(
        rows, filename: str = "inmet.zip", member: str = "INMET_A001_BRASILIA.CSV"
    ) -> Path:
        path = tmp_path / filename
        with zipfile.ZipFile(path, "w") as archive:
            archive.writestr(member, make_inmet_csv(rows).encode("latin-1"))
        return path

    return _write


@pytest.fixture
def hourly_climate():
    """Factory for an hourly climate series with constant readings.

    Returns:
        Function building ``hours`` consecutive records from ``start``
    """

    def _create(
        start: datetime,
        hours: int,
        temperature_c: float = 25.0,
        humidity_pct: float = 60.0,
    ) -> list[ClimateRecord]:
        return [
            ClimateRecord(
                timestamp=start + timedelta(hours=i),
                outdoor_temperature_c=temperature_c,
                outdoor_relative_humidity_pct=humidity_pct,
            )
            for i in range(hours)
        ]

    return _create


# ----------------------------------------------------------------
# Logging fixtures
# ----------------------------------------------------------------
@pytest.fixture
def restore_root_logging():
    """Restore root logger handlers and level after a test reconfigures them."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level

    yield root

    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
