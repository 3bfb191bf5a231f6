# hvac_mock/physics/energy_model.py
"""
Energy draw, air-side readings and the CO2 air-quality proxy.

Power per operating mode:
- COOLING: base + proportional load above the set-point + dehumidification
  (latent heat) penalty above the humidity threshold + inefficiency
- HEATING: base + proportional load below the set-point + inefficiency,
  with smaller coefficients (resistive heat, not humidity sensitive)
- FAN_ONLY: small fan draw with minor variation
- IDLE / OFF: standby draw

Inefficiency grows with lost equipment health and filter clogging. Every
mode is then scaled by a +/- jitter and floored at a minimum standby draw,
so power is never exactly zero.
"""

import random
from dataclasses import dataclass

from hvac_mock.physics.asset_state import AssetState
from hvac_mock.physics.base_model import BaseModel
from hvac_mock.physics.control_logic import SystemStatus

__all__ = [
    "EnergyParameters",
    "AirSideParameters",
    "AirSideReading",
    "EnergyModel",
]


@dataclass
class EnergyParameters:
    """Energy model coefficients (kWh-equivalent per record).

    Attributes:
        cooling_base_kw: Compressor draw at zero load
        cooling_delta_gain: Extra draw per °C outdoor above set-point
        humidity_threshold_pct: Relative humidity where the latent penalty starts
        humidity_penalty_gain: Extra draw per % RH above the threshold
        cooling_health_penalty: Extra draw at zero equipment health
        cooling_clog_penalty: Extra draw with a fully blocked filter
        heating_base_kw: Heater draw at zero load
        heating_delta_gain: Extra draw per °C outdoor below set-point
        heating_health_penalty: Extra draw at zero equipment health
        heating_clog_penalty: Extra draw with a fully blocked filter
        fan_base_kw: Fan-only draw
        fan_variation_kw: Width of the fan-only random variation
        idle_kw: Controls and standby draw while idle
        off_kw: Standby draw while off
        jitter_fraction: Multiplicative jitter half-width (0.05 = ±5%)
        min_power_kw: Floor applied to every mode
    """

    cooling_base_kw: float = 2.0
    cooling_delta_gain: float = 0.8
    humidity_threshold_pct: float = 75.0
    humidity_penalty_gain: float = 0.2
    cooling_health_penalty: float = 3.0
    cooling_clog_penalty: float = 1.5
    heating_base_kw: float = 1.5
    heating_delta_gain: float = 0.5
    heating_health_penalty: float = 1.5
    heating_clog_penalty: float = 0.75
    fan_base_kw: float = 0.3
    fan_variation_kw: float = 0.1
    idle_kw: float = 0.05
    off_kw: float = 0.02
    jitter_fraction: float = 0.05
    min_power_kw: float = 0.01

    def __post_init__(self):
        if self.min_power_kw <= 0:
            raise ValueError(f"min_power_kw must be positive, got {self.min_power_kw}")
        if not 0.0 <= self.jitter_fraction < 1.0:
            raise ValueError(
                f"jitter_fraction must be in [0, 1), got {self.jitter_fraction}"
            )


@dataclass
class AirSideParameters:
    """Supply air, refrigerant and CO2 reading ranges.

    Each (base, span) pair is drawn as base + U(0, 1) * span.
    """

    cooling_supply_drop_c: float = 8.0
    cooling_supply_drop_span_c: float = 4.0
    heating_supply_rise_c: float = 5.0
    heating_supply_rise_span_c: float = 3.0
    refrigerant_idle_psi: float = 80.0
    refrigerant_idle_span_psi: float = 5.0
    refrigerant_cooling_psi: float = 150.0
    refrigerant_cooling_span_psi: float = 20.0
    refrigerant_heating_psi: float = 100.0
    refrigerant_heating_span_psi: float = 5.0
    co2_unoccupied_ppm: float = 450.0
    co2_unoccupied_span_ppm: float = 50.0
    co2_occupied_ppm: float = 600.0
    co2_occupied_span_ppm: float = 300.0


@dataclass(frozen=True)
class AirSideReading:
    """Per-mode air and refrigerant readings."""

    supply_air_temp_c: float
    refrigerant_pressure_psi: float


class EnergyModel(BaseModel):
    """
    Converts operating mode, climate and asset condition into energy draw.

    Example:
        >>> model = EnergyModel(random.Random(7))
        >>> model.power_consumption(
        ...     SystemStatus.COOLING, 35.0, 85.0, 22.0, AssetState()
        ... )
    """

    def __init__(
        self,
        rng: random.Random,
        params: EnergyParameters | None = None,
        air_params: AirSideParameters | None = None,
    ):
        super().__init__(rng, params or EnergyParameters())
        self.air_params = air_params or AirSideParameters()

    # ----------------------------------------------------------------
    # Air quality
    # ----------------------------------------------------------------

    def co2_level(self, occupied: bool) -> float:
        """CO2 concentration (ppm); people raise it well above outdoor levels."""
        a = self.air_params
        if occupied:
            return self._uniform(
                a.co2_occupied_ppm, a.co2_occupied_ppm + a.co2_occupied_span_ppm
            )
        return self._uniform(
            a.co2_unoccupied_ppm, a.co2_unoccupied_ppm + a.co2_unoccupied_span_ppm
        )

    # ----------------------------------------------------------------
    # Power
    # ----------------------------------------------------------------

    def humidity_penalty(self, relative_humidity_pct: float) -> float:
        """Latent-heat cost; zero up to the threshold, linear above it."""
        excess = relative_humidity_pct - self.params.humidity_threshold_pct
        return max(0.0, excess) * self.params.humidity_penalty_gain

    def inefficiency(
        self, asset: AssetState, health_penalty: float, clog_penalty: float
    ) -> float:
        health_loss = 1.0 - asset.equipment_health
        return health_loss * health_penalty + asset.filter_clog_level * clog_penalty

    def power_consumption(
        self,
        status: SystemStatus,
        outdoor_temp_c: float,
        outdoor_humidity_pct: float,
        set_point_c: float,
        asset: AssetState,
    ) -> float:
        """Energy draw for one record.

        Args:
            status: Operating mode chosen by ControlLogic
            outdoor_temp_c: Outdoor temperature
            outdoor_humidity_pct: Outdoor relative humidity (0-100%)
            set_point_c: Active thermostat set-point
            asset: Current asset condition

        Returns:
            Power draw, never below min_power_kw
        """
        p = self.params

        if status == SystemStatus.COOLING:
            power = (
                p.cooling_base_kw
                + p.cooling_delta_gain * max(0.0, outdoor_temp_c - set_point_c)
                + self.humidity_penalty(outdoor_humidity_pct)
                + self.inefficiency(
                    asset, p.cooling_health_penalty, p.cooling_clog_penalty
                )
            )
        elif status == SystemStatus.HEATING:
            power = (
                p.heating_base_kw
                + p.heating_delta_gain * max(0.0, set_point_c - outdoor_temp_c)
                + self.inefficiency(
                    asset, p.heating_health_penalty, p.heating_clog_penalty
                )
            )
        elif status == SystemStatus.FAN_ONLY:
            power = p.fan_base_kw + self.rng.random() * p.fan_variation_kw
        elif status == SystemStatus.IDLE:
            power = p.idle_kw
        else:
            power = p.off_kw

        jitter = self._uniform(1.0 - p.jitter_fraction, 1.0 + p.jitter_fraction)
        return max(p.min_power_kw, power * jitter)

    # ----------------------------------------------------------------
    # Air side
    # ----------------------------------------------------------------

    def air_side(
        self, status: SystemStatus, return_air_temp_c: float
    ) -> AirSideReading:
        """Supply air temperature and refrigerant pressure for a mode.

        Cooling delivers air well below return temperature at high
        refrigerant pressure; heating delivers warmer air at moderate
        pressure; otherwise supply tracks return air.
        """
        a = self.air_params

        if status == SystemStatus.COOLING:
            drop = self._uniform(
                a.cooling_supply_drop_c,
                a.cooling_supply_drop_c + a.cooling_supply_drop_span_c,
            )
            pressure = self._uniform(
                a.refrigerant_cooling_psi,
                a.refrigerant_cooling_psi + a.refrigerant_cooling_span_psi,
            )
            return AirSideReading(return_air_temp_c - drop, pressure)

        if status == SystemStatus.HEATING:
            rise = self._uniform(
                a.heating_supply_rise_c,
                a.heating_supply_rise_c + a.heating_supply_rise_span_c,
            )
            pressure = self._uniform(
                a.refrigerant_heating_psi,
                a.refrigerant_heating_psi + a.refrigerant_heating_span_psi,
            )
            return AirSideReading(return_air_temp_c + rise, pressure)

        pressure = self._uniform(
            a.refrigerant_idle_psi, a.refrigerant_idle_psi + a.refrigerant_idle_span_psi
        )
        return AirSideReading(return_air_temp_c, pressure)
