"""
Monitoring session: owns the operator's scenario and drives recomputation.

The risk engine is stateless; this class is the caller-side bookkeeping
that decides *when* to run it.  The snapshot is recomputed only when the
scenario or the active-sensor count changed, and the forecast only when
the snapshot's gas level or the scenario category changed.  ``assess``
always runs before ``forecast``.
"""

from datetime import datetime
from typing import Callable, List, Optional, Tuple

import numpy as np

from models.scenario import ForecastPoint, RiskSnapshot, ScenarioConfig
from models.risk import assess
from models.forecast import forecast


class MonitoringSession:
    """Holds the current scenario and its derived snapshot and forecast.

    Args:
        config: Initial scenario.  Defaults to normal operations.
        active_sensors: Initial count of sensors detecting gas.
        rng: Randomness source shared by the engine calls.
        clock: Zero-argument callable returning the current datetime.
    """

    def __init__(
        self,
        config: Optional[ScenarioConfig] = None,
        active_sensors: int = 0,
        rng: Optional[np.random.Generator] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.config = config if config is not None else ScenarioConfig()
        self.active_sensors = active_sensors
        self.rng = rng if rng is not None else np.random.default_rng()
        self.clock = clock if clock is not None else datetime.now

        self.snapshot: Optional[RiskSnapshot] = None
        self.forecast_points: List[ForecastPoint] = []
        self.recompute_count = 0
        self.forecast_count = 0

        self._assessed_inputs = None
        self._forecast_inputs = None

    def update(self, **changes) -> ScenarioConfig:
        """Replace scenario fields; unknown field names raise TypeError."""
        self.config = self.config.updated(**changes)
        return self.config

    def set_active_sensors(self, count: int) -> None:
        self.active_sensors = count

    def refresh(self) -> Tuple[RiskSnapshot, List[ForecastPoint]]:
        """Bring the snapshot and forecast up to date with the inputs."""
        inputs = (self.config, self.active_sensors)
        if self.snapshot is None or inputs != self._assessed_inputs:
            self.snapshot = assess(self.config, self.active_sensors, self.rng)
            self._assessed_inputs = inputs
            self.recompute_count += 1

        forecast_inputs = (self.snapshot.toxic_gas_level, self.config.category)
        if forecast_inputs != self._forecast_inputs:
            self.forecast_points = forecast(
                self.snapshot.toxic_gas_level,
                self.config.category,
                now=self.clock(),
                rng=self.rng,
            )
            self._forecast_inputs = forecast_inputs
            self.forecast_count += 1

        return self.snapshot, self.forecast_points
