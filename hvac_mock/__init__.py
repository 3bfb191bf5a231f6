# hvac_mock/__init__.py
"""
Synthetic HVAC sensor telemetry from real hourly climate observations.

Packages:
- climate: INMET climate-record ingestion
- physics: asset, thermal, control, energy and fault models
- telemetry: sensor records and the sequential generator
- sinks: JSON serialisation, local files and S3 upload
"""

__version__ = "0.1.0"
