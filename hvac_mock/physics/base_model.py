# hvac_mock/physics/base_model.py
"""
Base class for the per-record simulation models.

Provides common infrastructure for:
- Parameter handling (typed dataclass per model)
- The run's random generator (one instance shared by every model)
- Logging

All models are evaluated once per climate record by the TelemetryGenerator,
in a fixed order, so every random draw happens in a deterministic sequence
for a given seed.
"""

import logging
import random
from typing import Any

__all__ = ["BaseModel", "clamp"]


def clamp(value: float, lower: float, upper: float) -> float:
    """Limit value to the closed interval [lower, upper]."""
    return max(lower, min(upper, value))


class BaseModel:
    """
    Shared base for ThermalModel, ControlLogic, EnergyModel and FaultModel.

    Models never create or re-seed their own random generator; the
    generator is owned by the run and injected here.
    """

    def __init__(self, rng: random.Random, params: Any):
        """Initialise base model.

        Args:
            rng: Run-wide random generator
            params: Model-specific parameters (typed in subclass)
        """
        if rng is None:
            raise ValueError("rng cannot be None")

        self.rng = rng
        self.params = params
        self.logger = logging.getLogger(f"{self.__module__}.{self.__class__.__name__}")

    # ----------------------------------------------------------------
    # Random draw helpers
    # ----------------------------------------------------------------

    def _uniform(self, low: float, high: float) -> float:
        """Draw uniformly from [low, high)."""
        return low + (high - low) * self.rng.random()

    def _chance(self, probability: float) -> bool:
        """Bernoulli draw; always consumes exactly one random number."""
        return self.rng.random() < probability
