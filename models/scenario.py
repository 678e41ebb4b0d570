"""
Scenario and risk data models.

ScenarioConfig is the operator's input; RiskSnapshot and ForecastPoint are
derived from it by the risk engine.  All three are immutable values: the
dashboard builds a new config on every control change and the engine
recomputes everything downstream from scratch.
"""

import dataclasses
from dataclasses import dataclass
from enum import Enum, IntEnum

from config import (
    DEFAULT_WIND_SPEED_KMH,
    DEFAULT_WIND_DIRECTION,
    DEFAULT_PRESSURE_BAR,
    DEFAULT_TEMPERATURE_C,
    DEFAULT_LEAK_RATE,
    MAIN_SOURCE_ID,
)


def _coerce(enum_cls, value):
    """Accept an enum member, its display label, or its member name.

    Member names match case-insensitively with or without underscores,
    so ``"FIRE_HAZARD"`` and ``"FireHazard"`` both resolve.
    """
    if isinstance(value, enum_cls):
        return value
    key = str(value).upper().replace("_", "")
    for member in enum_cls:
        if value == member.value or key == member.name.replace("_", ""):
            return member
    raise ValueError(f"Unknown {enum_cls.__name__}: {value!r}")


class LeakCategory(Enum):
    """Incident type driving base severity."""

    NORMAL = "Normal Operations"
    MINOR_LEAK = "Minor Valve Leak"
    CATASTROPHIC_BURST = "Catastrophic Pipe Burst"
    FIRE_HAZARD = "Chemical Fire Hazard"

    @classmethod
    def parse(cls, value) -> "LeakCategory":
        return _coerce(cls, value)


class WeatherCondition(Enum):
    """Weather state affecting gas dispersion."""

    CLEAR = "Clear Sky"
    RAIN = "Heavy Rain"
    FOG = "Dense Fog"
    STORM = "Thunderstorm"

    @classmethod
    def parse(cls, value) -> "WeatherCondition":
        return _coerce(cls, value)


class AlertStatus(IntEnum):
    """Ordered alert tier: SECURE < WARNING < CRITICAL < EVACUATE."""

    SECURE = 0
    WARNING = 1
    CRITICAL = 2
    EVACUATE = 3

    @property
    def label(self) -> str:
        return self.name


class SensorStatus(Enum):
    OK = "OK"
    WARN = "WARN"
    CRIT = "CRIT"


@dataclass(frozen=True)
class ScenarioConfig:
    """Operator-controlled scenario parameters.

    Numeric fields are taken as-is; out-of-range values are not clamped
    and simply flow through the risk arithmetic.

    Args:
        category: Incident type (enum member, display label, or member name).
        weather: Weather condition (enum member, display label, or member name).
        wind_speed: Wind speed (km/h).
        wind_direction: Bearing the wind carries gas toward (degrees, wraps at 360).
        pressure: Line pressure (bar).
        temperature: Ambient temperature (deg C).
        leak_source_id: ``"MAIN"`` or a facility sector id.
        leak_rate: Leak intensity percentage, 50 = calibration midpoint.
    """

    category: LeakCategory = LeakCategory.NORMAL
    weather: WeatherCondition = WeatherCondition.CLEAR
    wind_speed: float = DEFAULT_WIND_SPEED_KMH
    wind_direction: float = DEFAULT_WIND_DIRECTION
    pressure: float = DEFAULT_PRESSURE_BAR
    temperature: float = DEFAULT_TEMPERATURE_C
    leak_source_id: str = MAIN_SOURCE_ID
    leak_rate: float = DEFAULT_LEAK_RATE

    def __post_init__(self):
        # frozen dataclass: bypass __setattr__ for the enum coercion
        object.__setattr__(self, "category", LeakCategory.parse(self.category))
        object.__setattr__(self, "weather", WeatherCondition.parse(self.weather))

    def updated(self, **changes) -> "ScenarioConfig":
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)


@dataclass(frozen=True)
class RiskSnapshot:
    """Facility risk assessment derived from a ScenarioConfig."""

    status: AlertStatus
    toxic_gas_level: float      # ppm
    thermal_index: float        # heat-stress units
    risk_radius: float          # meters
    financial_risk: float       # currency units
    active_sensors: int


@dataclass(frozen=True)
class ForecastPoint:
    """One sample of the gas-concentration projection."""

    timestamp_label: str
    predicted_ppm: float
