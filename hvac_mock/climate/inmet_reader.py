# hvac_mock/climate/inmet_reader.py
"""
Reader for INMET (Instituto Nacional de Meteorologia) hourly station exports.

INMET publishes one semicolon-delimited file per station, optionally inside
a ZIP archive. The first nine lines carry station metadata (name, code,
coordinates, period); the tenth line is the column header and every line
after it is one hourly observation:

    Data Medicao;Hora Medicao;...;TEMPERATURA DO AR - BULBO SECO, HORARIA(°C);...
    2024-01-01;0000;...;23,4;...

Only the timestamp, dry-bulb temperature and relative humidity are kept.
Rows that cannot be parsed are skipped with a warning; structural problems
(unsupported file type, missing columns, unreadable archive) abort the read.
"""

import csv
import io
import logging
import math
import zipfile
from datetime import datetime, timezone
from pathlib import Path

from hvac_mock.climate.climate_record import ClimateRecord

logger = logging.getLogger(__name__)

__all__ = [
    "HEADER_LINE_INDEX",
    "DATE_COLUMN",
    "TIME_COLUMN",
    "TEMPERATURE_COLUMN",
    "HUMIDITY_COLUMN",
    "read_inmet_file",
    "parse_inmet_csv",
    "normalise_column_name",
]

# Zero-based line index of the column header
HEADER_LINE_INDEX = 9

DATE_COLUMN = "data medicao"
TIME_COLUMN = "hora medicao"
TEMPERATURE_COLUMN = "temperatura do ar - bulbo seco, horaria"
HUMIDITY_COLUMN = "umidade relativa do ar, horaria"

REQUIRED_COLUMNS = (DATE_COLUMN, TIME_COLUMN, TEMPERATURE_COLUMN, HUMIDITY_COLUMN)

_DATE_FORMATS = ("%Y-%m-%d", "%Y/%m/%d")
_SUPPORTED_EXTENSIONS = ("csv", "zip")


def read_inmet_file(path: Path | str) -> list[ClimateRecord]:
    """Read climate records from an INMET ``.csv`` or ``.zip`` export.

    Args:
        path: Path to the export file

    Returns:
        Climate records in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file type is unsupported, the archive holds no
            CSV member, or the header lacks a required column
    """
    path = Path(path)
    extension = path.suffix.lower().lstrip(".")

    if extension not in _SUPPORTED_EXTENSIONS:
        raise ValueError(
            f"Unsupported file format: '{extension}'. Expected .csv or .zip"
        )

    if not path.exists():
        raise FileNotFoundError(f"Climate data file not found: {path}")

    if extension == "zip":
        text = _read_zip_member(path)
    else:
        text = _decode(path.read_bytes())

    records = parse_inmet_csv(text, source=str(path))
    logger.info(f"Read {len(records)} climate records from {path}")
    return records


def parse_inmet_csv(text: str, source: str = "<memory>") -> list[ClimateRecord]:
    """Parse the decoded contents of an INMET export.

    Args:
        text: Full file contents, metadata lines included
        source: Name used in log and error messages

    Returns:
        Climate records in file order

    Raises:
        ValueError: If the header lacks a required column
    """
    reader = csv.reader(io.StringIO(text), delimiter=";")

    records: list[ClimateRecord] = []
    header_map: dict[str, int] = {}

    for index, row in enumerate(reader):
        line_number = index + 1

        if index < HEADER_LINE_INDEX:
            continue

        if index == HEADER_LINE_INDEX:
            header_map = {
                normalise_column_name(name): position
                for position, name in enumerate(row)
            }
            missing = [col for col in REQUIRED_COLUMNS if col not in header_map]
            if missing:
                raise ValueError(
                    f"CSV header in {source} is missing expected columns "
                    f"{missing}. Found: {sorted(header_map)}"
                )
            continue

        if not any(cell.strip() for cell in row):
            continue

        record = _parse_row(row, header_map, line_number)
        if record is not None:
            records.append(record)

    if not header_map:
        logger.warning(f"No header line found in {source}; no records read")

    return records


def normalise_column_name(name: str) -> str:
    """Lower-case a header cell and drop any trailing unit in parentheses."""
    normalised = name.strip().lower()
    if "(" in normalised:
        normalised = normalised.split("(")[0].strip()
    return normalised


# ----------------------------------------------------------------
# Internals
# ----------------------------------------------------------------


def _read_zip_member(path: Path) -> str:
    """Return the decoded contents of the first CSV inside a ZIP archive."""
    try:
        with zipfile.ZipFile(path) as archive:
            csv_members = [
                name for name in archive.namelist() if name.lower().endswith(".csv")
            ]
            if not csv_members:
                raise ValueError(f"No CSV file found inside ZIP archive '{path}'")

            member = csv_members[0]
            logger.debug(f"Reading {member} from {path}")
            return _decode(archive.read(member))
    except zipfile.BadZipFile as e:
        raise ValueError(f"Cannot open ZIP archive '{path}': {e}") from e


def _decode(raw: bytes) -> str:
    """Decode file bytes; INMET exports are usually latin-1."""
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        return raw.decode("latin-1")


def _parse_row(
    row: list[str], header_map: dict[str, int], line_number: int
) -> ClimateRecord | None:
    """Convert one data row, or return None (with a warning) if malformed."""
    try:
        date_str = row[header_map[DATE_COLUMN]].strip()
        time_raw = row[header_map[TIME_COLUMN]].strip()
        temperature_raw = row[header_map[TEMPERATURE_COLUMN]]
        humidity_raw = row[header_map[HUMIDITY_COLUMN]]
    except IndexError:
        logger.warning(
            f"Row at line {line_number} has {len(row)} fields, fewer than the "
            "header requires. Skipping row."
        )
        return None

    time_str = _format_hour(time_raw)
    if time_str is None:
        logger.warning(
            f"Unexpected time format '{time_raw}' at line {line_number}. "
            "Skipping row."
        )
        return None

    timestamp = _parse_timestamp(date_str, time_str)
    if timestamp is None:
        logger.warning(
            f"Cannot parse timestamp '{date_str} {time_str}' at line "
            f"{line_number}. Skipping row."
        )
        return None

    temperature = _parse_decimal(temperature_raw)
    if temperature is None:
        logger.warning(
            f"Cannot parse air temperature '{temperature_raw}' at line "
            f"{line_number}. Skipping row."
        )
        return None

    humidity = _parse_decimal(humidity_raw)
    if humidity is None:
        logger.warning(
            f"Cannot parse relative humidity '{humidity_raw}' at line "
            f"{line_number}. Skipping row."
        )
        return None

    return ClimateRecord(
        timestamp=timestamp,
        outdoor_temperature_c=temperature,
        outdoor_relative_humidity_pct=humidity,
    )


def _format_hour(raw: str) -> str | None:
    """Turn ``HHMM``/``HMM`` (optionally suffixed ``UTC``) into ``HH:MM``."""
    value = raw.upper().removesuffix("UTC").strip()
    if not value.isdigit():
        return None
    if len(value) == 4:
        return f"{value[:2]}:{value[2:]}"
    if len(value) == 3:
        return f"0{value[:1]}:{value[1:]}"
    return None


def _parse_timestamp(date_str: str, time_str: str) -> datetime | None:
    for date_format in _DATE_FORMATS:
        try:
            parsed = datetime.strptime(f"{date_str} {time_str}", f"{date_format} %H:%M")
        except ValueError:
            continue
        return parsed.replace(tzinfo=timezone.utc)
    return None


def _parse_decimal(raw: str) -> float | None:
    """Parse a number written with a decimal comma; None if blank or invalid."""
    value = raw.strip().replace(",", ".")
    if not value:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    return number if math.isfinite(number) else None
