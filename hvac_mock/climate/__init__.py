# hvac_mock/climate/__init__.py
"""
Climate-record ingestion.

- climate_record: hourly outdoor observation carrier
- inmet_reader: INMET station export reader (.csv or .zip)
"""

from hvac_mock.climate.climate_record import ClimateRecord
from hvac_mock.climate.inmet_reader import parse_inmet_csv, read_inmet_file

__all__ = [
    "ClimateRecord",
    "parse_inmet_csv",
    "read_inmet_file",
]
