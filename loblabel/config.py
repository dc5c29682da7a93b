"""Run configuration for the labeling pipeline."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class LabelingConfig:
    """Immutable parameters fixed for one labeling run.

    Attributes:
        horizon_sec: Forecast horizon in seconds.
        eps_min: Minimum deadband (3e-4 = 3 bp).
        alpha: Multiplier on the relative spread.
        cost_bp: Fixed transaction cost floor as a fraction (2e-4 = 2 bp).
    """

    horizon_sec: float = 1.0
    eps_min: float = 3e-4
    alpha: float = 0.5
    cost_bp: float = 2e-4

    def __post_init__(self) -> None:
        for name in ("horizon_sec", "eps_min", "alpha", "cost_bp"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value}")
        if self.horizon_sec < 0:
            raise ValueError(f"horizon_sec must be >= 0, got {self.horizon_sec}")

    @property
    def horizon_ms(self) -> float:
        """Forecast horizon in milliseconds."""
        return self.horizon_sec * 1000.0
