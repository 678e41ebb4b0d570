"""
Gas Concentration Forecast.

Projects the current toxic gas level over the next hour in 5-minute
steps.  During an incident the level follows a logistic ramp:

    g(t) = 1 / (1 + exp(-0.1 * (t - 20)))
    ppm(t) = current * (0.5 + g(t))

so the projection starts near half the current level, crosses it at
t = 20 min and saturates towards 1.5x.  Under normal operations there is
no trend and each point is independent sensor noise in [0, 5) ppm.
"""

import logging
import math
from datetime import datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional

import numpy as np

from models.scenario import ForecastPoint, LeakCategory
from config import (
    FORECAST_HORIZON_MIN,
    FORECAST_STEP_MIN,
    GROWTH_RATE,
    GROWTH_MIDPOINT_MIN,
    GROWTH_BASELINE,
    STEADY_STATE_NOISE_PPM,
    FORECAST_DECIMALS,
)

logger = logging.getLogger(__name__)


def logistic_growth(
    minutes: float,
    rate: float = GROWTH_RATE,
    midpoint: float = GROWTH_MIDPOINT_MIN,
) -> float:
    """Logistic growth factor in (0, 1); exactly 0.5 at the midpoint."""
    return 1.0 / (1.0 + math.exp(-rate * (minutes - midpoint)))


def round_half_up(value: float, decimals: int = FORECAST_DECIMALS) -> float:
    """Round exact ties away from zero (0.25 -> 0.3), unlike built-in round()."""
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_clock_label(moment: datetime) -> str:
    """Format as ``H:MM`` (24-hour, hour not zero-padded)."""
    return f"{moment.hour}:{moment.minute:02d}"


def forecast_offsets(
    horizon: int = FORECAST_HORIZON_MIN,
    step: int = FORECAST_STEP_MIN,
) -> List[int]:
    """Minute offsets 0, step, ..., horizon (inclusive)."""
    return list(range(0, horizon + 1, step))


def forecast(
    current_ppm: float,
    category: LeakCategory,
    now: Optional[datetime] = None,
    rng: Optional[np.random.Generator] = None,
) -> List[ForecastPoint]:
    """
    Build the gas-concentration projection for the next hour.

    The sequence is computed eagerly on every call; nothing is cached.

    Args:
        current_ppm: Current toxic gas level from the risk snapshot.
        category: Scenario category (Normal gives a trendless noise series).
        now: Reference instant for the time labels.  Defaults to now.
        rng: Randomness source for the steady-state noise.

    Returns:
        List of 13 ForecastPoint at offsets 0, 5, ..., 60 minutes.
    """
    if now is None:
        now = datetime.now()
    if rng is None:
        rng = np.random.default_rng()

    points = []
    for offset in forecast_offsets():
        if category is not LeakCategory.NORMAL:
            predicted = current_ppm * (GROWTH_BASELINE + logistic_growth(offset))
        else:
            low, high = STEADY_STATE_NOISE_PPM
            predicted = float(rng.uniform(low, high))

        points.append(ForecastPoint(
            timestamp_label=format_clock_label(now + timedelta(minutes=offset)),
            predicted_ppm=round_half_up(predicted),
        ))

    logger.debug(
        "Forecast for %s from %.2f ppm: %.1f -> %.1f ppm",
        category.name, current_ppm, points[0].predicted_ppm, points[-1].predicted_ppm,
    )
    return points
