"""
Fixed Gas Sensor Network.

Lays out a regular grid of gas sensors over the facility map and
estimates each sensor's reading for a scenario.  The number of sensors
reading at or above the Minimum Detection Limit is what the risk
engine reports as ``active_sensors``.

This is a display heuristic, not a dispersion model: the gas cloud is a
disc of radius ``risk_radius`` whose centre has drifted downwind from the
leak origin, and readings fall off linearly from the cloud's peak level
at the centre to zero at the edge.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from models.scenario import ScenarioConfig, SensorStatus
from models.risk import base_severity, toxic_gas_level, risk_radius
from data.facility_layout import Sector, leak_origin
from config import (
    MAP_WIDTH_M,
    MAP_HEIGHT_M,
    SENSOR_SPACING_M,
    SENSOR_MDL_PPM,
    PLUME_DRIFT_FRACTION,
    CRITICAL_GAS_PPM,
    WARNING_GAS_PPM,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Sensor:
    """A fixed gas sensor and its current reading."""

    id: str
    x: float
    y: float
    reading: float = 0.0        # ppm
    status: SensorStatus = SensorStatus.OK


def create_sensor_grid(
    spacing: float = SENSOR_SPACING_M,
    width: float = MAP_WIDTH_M,
    height: float = MAP_HEIGHT_M,
) -> List[Sensor]:
    """
    Place sensors on a regular grid, half a spacing in from the map edges.

    Returns:
        Sensors ordered row by row (north to south, west to east), with
        ids ``S-01``, ``S-02``, ...
    """
    xs = np.arange(spacing / 2.0, width, spacing)
    ys = np.arange(spacing / 2.0, height, spacing)
    sensors = []
    for y in ys:
        for x in xs:
            sensors.append(Sensor(id=f"S-{len(sensors) + 1:02d}", x=float(x), y=float(y)))
    return sensors


def sensor_status(reading: float) -> SensorStatus:
    """Classify a reading against the facility gas thresholds."""
    if reading > CRITICAL_GAS_PPM:
        return SensorStatus.CRIT
    if reading > WARNING_GAS_PPM:
        return SensorStatus.WARN
    return SensorStatus.OK


def plume_center(
    config: ScenarioConfig,
    radius: float,
    sectors: Optional[List[Sector]] = None,
) -> Tuple[float, float]:
    """
    Centre of the gas cloud on the map.

    The cloud drifts from the leak origin along the wind bearing
    (0 = North = -y, 90 = East = +x) by a fixed fraction of the radius.
    """
    ox, oy = leak_origin(config.leak_source_id, sectors)
    bearing = np.radians(config.wind_direction % 360.0)
    drift = PLUME_DRIFT_FRACTION * radius
    return (
        float(ox + drift * np.sin(bearing)),
        float(oy - drift * np.cos(bearing)),
    )


def survey_sensors(
    config: ScenarioConfig,
    sensors: Optional[List[Sensor]] = None,
    sectors: Optional[List[Sector]] = None,
) -> List[Sensor]:
    """
    Compute readings for every sensor under a scenario.

    Args:
        config: Scenario parameters.
        sensors: Sensor layout.  Defaults to the standard grid.
        sectors: Facility sectors used to locate the leak source.

    Returns:
        New Sensor list with ``reading`` and ``status`` filled in.
        Under normal operations every reading is zero.
    """
    if sensors is None:
        sensors = create_sensor_grid()

    radius = risk_radius(config)
    if base_severity(config.category) == 0 or radius <= 0:
        return [Sensor(s.id, s.x, s.y) for s in sensors]

    # Leak categories have a deterministic gas level; no rng needed
    peak = toxic_gas_level(config)
    cx, cy = plume_center(config, radius, sectors)

    surveyed = []
    for s in sensors:
        distance = float(np.hypot(s.x - cx, s.y - cy))
        reading = peak * max(0.0, 1.0 - distance / radius)
        surveyed.append(Sensor(s.id, s.x, s.y, reading, sensor_status(reading)))

    logger.debug(
        "Surveyed %d sensors around (%.0f, %.0f), radius %.0f m",
        len(surveyed), cx, cy, radius,
    )
    return surveyed


def count_active_sensors(
    sensors: List[Sensor],
    mdl_ppm: float = SENSOR_MDL_PPM,
) -> int:
    """Number of sensors reading at or above the detection limit."""
    return sum(1 for s in sensors if s.reading >= mdl_ppm)
