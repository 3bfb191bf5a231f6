# config/config_loader.py
"""
Config loader for the HVAC mock data generator.

Settings live in a single YAML file (``generator.yml``) whose sections are
merged over built-in defaults, so a file only needs the values it changes.
Deployment secrets (bucket, region, endpoint) come from the environment,
optionally seeded from a ``.env`` file.
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "generator.yml"

DEFAULT_CONFIG: dict[str, Any] = {
    "simulation": {
        "seed": None,
        "device_prefix": "SALA",
        "device_count": 10,
        "asset_model": "HVAC-Model-B",
        "location_zone": "Zona-A",
    },
    "thermal": {
        "base_internal_temp_c": 22.0,
        "inertia_factor": 0.25,
        "jitter_span_c": 1.5,
        "setpoint_span_c": 2.0,
    },
    "occupancy": {
        "business_start_hour": 8,
        "business_end_hour": 18,
        "lunch_start_hour": 12,
        "lunch_end_hour": 14,
        "business_probability": 0.90,
        "lunch_probability": 0.30,
        "off_hours_probability": 0.10,
    },
    "control": {
        "threshold_hi_c": 2.0,
        "threshold_lo_c": 1.0,
        "co2_fan_threshold_ppm": 800.0,
    },
    "energy": {
        "cooling_base_kw": 2.0,
        "cooling_delta_gain": 0.8,
        "humidity_threshold_pct": 75.0,
        "humidity_penalty_gain": 0.2,
        "cooling_health_penalty": 3.0,
        "cooling_clog_penalty": 1.5,
        "heating_base_kw": 1.5,
        "heating_delta_gain": 0.5,
        "heating_health_penalty": 1.5,
        "heating_clog_penalty": 0.75,
        "fan_base_kw": 0.3,
        "fan_variation_kw": 0.1,
        "idle_kw": 0.05,
        "off_kw": 0.02,
        "jitter_fraction": 0.05,
        "min_power_kw": 0.01,
    },
    "air_side": {
        "cooling_supply_drop_c": 8.0,
        "cooling_supply_drop_span_c": 4.0,
        "heating_supply_rise_c": 5.0,
        "heating_supply_rise_span_c": 3.0,
        "refrigerant_idle_psi": 80.0,
        "refrigerant_idle_span_psi": 5.0,
        "refrigerant_cooling_psi": 150.0,
        "refrigerant_cooling_span_psi": 20.0,
        "refrigerant_heating_psi": 100.0,
        "refrigerant_heating_span_psi": 5.0,
        "co2_unoccupied_ppm": 450.0,
        "co2_unoccupied_span_ppm": 50.0,
        "co2_occupied_ppm": 600.0,
        "co2_occupied_span_ppm": 300.0,
    },
    "faults": {
        "duct_base_pa": 10.0,
        "duct_base_span_pa": 2.0,
        "fan_duct_base_pa": 12.0,
        "fan_duct_span_pa": 1.0,
        "duct_clog_gain_pa": 8.0,
        "duct_pressure_ceiling_pa": 20.0,
        "clog_fault_threshold": 0.6,
        "clog_fault_probability": 0.5,
    },
    "asset": {
        "health_drift_max": 0.0001,
        "clog_drift_max": 0.001,
        "health_floor": 0.2,
        "maintenance_month": 9,
        "clog_reset_max": 0.05,
        "serviced_health": 0.95,
    },
    "input": {
        "climate_path": "data/inmet/dados-202401-202501.zip",
    },
    "output": {
        "directory": "output",
        "format": "json",
        "s3": {
            "bucket": None,
            "region": None,
            "endpoint_url": None,
        },
    },
}

# Environment variable -> key in the output.s3 section
ENVIRONMENT_OVERRIDES = {
    "S3_BUCKET_NAME": "bucket",
    "AWS_REGION": "region",
    "ENDPOINT_URL": "endpoint_url",
}


class ConfigLoader:
    """Loads the generator configuration and merges it over the defaults."""

    def __init__(self, config_dir="config", filename=CONFIG_FILENAME):
        self.config_dir = Path(config_dir)
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_path = self.config_dir / filename

    def load_all(self) -> dict[str, Any]:
        """Load the configuration file, creating it from defaults if absent.

        Raises:
            ValueError: If the file is not valid YAML, is not a mapping of
                sections, names an unknown section or holds a section that
                is not a mapping
        """
        config = copy.deepcopy(DEFAULT_CONFIG)

        if not self.config_path.exists():
            self._save_defaults()
            return config

        with open(self.config_path) as f:
            try:
                file_data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Cannot parse {self.config_path}: {e}") from e

        if file_data is None:
            return config
        if not isinstance(file_data, dict):
            raise ValueError(
                f"{self.config_path} must contain a mapping of sections, "
                f"got {type(file_data).__name__}"
            )

        unknown = set(file_data) - set(DEFAULT_CONFIG)
        if unknown:
            raise ValueError(
                f"Unknown sections in {self.config_path}: "
                f"{sorted(str(s) for s in unknown)} "
                f"(expected one of {list(DEFAULT_CONFIG)})"
            )

        for section, values in file_data.items():
            if values is None:
                continue
            if not isinstance(values, dict):
                raise ValueError(
                    f"Section '{section}' in {self.config_path} must be a mapping"
                )
            config[section] = _merge(config[section], values)

        logger.info(f"Loaded generator config from {self.config_path}")
        return config

    def _save_defaults(self):
        """Write the default configuration to the config file."""
        with open(self.config_path, "w") as f:
            yaml.dump(DEFAULT_CONFIG, f, default_flow_style=False, sort_keys=False)
        print(f"[INFO] Created default generator config at {self.config_path}")


def apply_environment(
    config: dict[str, Any], env_file: Path | str | None = ".env"
) -> dict[str, Any]:
    """Overlay S3 settings from the environment onto a loaded config.

    Variables already set in the process environment win over the .env
    file. A missing .env file is not an error.

    Args:
        config: Configuration as returned by ConfigLoader.load_all()
        env_file: Path of the .env file to read (None = skip)

    Returns:
        New configuration dictionary with the overrides applied
    """
    if env_file is not None:
        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path)
            logger.debug(f"Loaded environment from {env_path}")
        else:
            logger.warning(
                f"Environment file {env_path} not found, using process environment"
            )

    merged = copy.deepcopy(config)
    s3 = merged.setdefault("output", {}).setdefault("s3", {})
    for variable, key in ENVIRONMENT_OVERRIDES.items():
        value = os.getenv(variable)
        if value:
            s3[key] = value
    return merged


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into a copy of base.

    Raises:
        ValueError: If override replaces a nested mapping with a scalar
    """
    merged = dict(base)
    for key, value in override.items():
        if isinstance(merged.get(key), dict):
            if value is None:
                continue
            if not isinstance(value, dict):
                raise ValueError(f"'{key}' must be a mapping, got {value!r}")
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged
