# hvac_mock/physics/__init__.py
"""
Per-record simulation models for the HVAC telemetry generator.

This module provides the modelling logic that turns one outdoor climate
observation into plausible indoor HVAC readings:
- Asset degradation (equipment health, filter clogging, maintenance)
- Thermal model (uncontrolled zone temperature, set-point)
- Control logic (occupancy, operating mode)
- Energy model (power draw, supply air, refrigerant, CO2)
- Fault model (duct pressure, fault codes)
"""

from hvac_mock.physics.asset_state import (
    AssetDegradation,
    AssetState,
    DegradationParameters,
)
from hvac_mock.physics.control_logic import (
    ControlLogic,
    ControlParameters,
    OccupancyParameters,
    OccupancySchedule,
    SystemStatus,
)
from hvac_mock.physics.energy_model import (
    AirSideParameters,
    AirSideReading,
    EnergyModel,
    EnergyParameters,
)
from hvac_mock.physics.fault_model import FaultCode, FaultModel, FaultParameters
from hvac_mock.physics.thermal_model import (
    ThermalModel,
    ThermalParameters,
    ThermalReading,
)

__all__ = [
    # Asset
    "AssetState",
    "AssetDegradation",
    "DegradationParameters",
    # Thermal
    "ThermalModel",
    "ThermalParameters",
    "ThermalReading",
    # Control
    "SystemStatus",
    "ControlLogic",
    "ControlParameters",
    "OccupancySchedule",
    "OccupancyParameters",
    # Energy
    "EnergyModel",
    "EnergyParameters",
    "AirSideParameters",
    "AirSideReading",
    # Faults
    "FaultCode",
    "FaultModel",
    "FaultParameters",
]
