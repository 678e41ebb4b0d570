"""
Risk Assessment Engine.

Maps a ScenarioConfig (plus the externally supplied count of sensors
currently detecting gas) to a RiskSnapshot.

Model:
    gas     = (base + pressure * 0.5) * dispersion * (leak_rate / 50)
    thermal = temperature [+ fire surge * (leak_rate / 80)]
    radius  = (wind * 12 + pressure * 8) * (leak_rate / 60)
    status  = highest tier whose threshold is met
    cost    = tier exposure * (leak_rate / 50)

Two terms are stochastic: the ambient sensor jitter reported under normal
operations and the thermal surge of a fire.  Both are drawn from an
injectable ``numpy.random.Generator`` so the rest of the model can be
tested deterministically.  Inputs are never validated; nonsensical
parameters give nonsensical but well-typed outputs.
"""

import logging
from typing import Optional

import numpy as np

from models.scenario import (
    AlertStatus,
    LeakCategory,
    RiskSnapshot,
    ScenarioConfig,
    WeatherCondition,
)
from config import (
    BASE_SEVERITY_PPM,
    DISPERSION_FACTORS,
    NEUTRAL_DISPERSION,
    LEAK_RATE_CALIBRATION,
    PRESSURE_GAS_COEFF,
    AMBIENT_NOISE_PPM,
    FIRE_SURGE_RANGE,
    FIRE_SURGE_CALIBRATION,
    RADIUS_WIND_COEFF,
    RADIUS_PRESSURE_COEFF,
    RADIUS_CALIBRATION,
    EVACUATE_GAS_PPM,
    CRITICAL_GAS_PPM,
    CRITICAL_THERMAL,
    WARNING_GAS_PPM,
    WARNING_THERMAL,
    WARNING_EXPOSURE,
    SEVERE_EXPOSURE,
)

logger = logging.getLogger(__name__)


def base_severity(category: LeakCategory) -> float:
    """Base gas severity (ppm) for an incident category."""
    return BASE_SEVERITY_PPM[category.name]


def dispersion_factor(weather: WeatherCondition) -> float:
    """Weather multiplier on gas concentration (rain suppresses, fog traps)."""
    return DISPERSION_FACTORS.get(weather.name, NEUTRAL_DISPERSION)


def intensity_multiplier(leak_rate: float) -> float:
    """Leak-rate scaling, calibrated so 50% = 1.0x and 100% = 2.0x."""
    return leak_rate / LEAK_RATE_CALIBRATION


def toxic_gas_level(
    config: ScenarioConfig,
    rng: Optional[np.random.Generator] = None,
) -> float:
    """
    Compute facility toxic gas concentration in ppm.

    For any leak category the level is deterministic.  Under normal
    operations it is a small baseline jitter in [0, 2) ppm, independent
    of pressure and weather.

    Args:
        config: Scenario parameters.
        rng: Randomness source for the ambient jitter.

    Returns:
        Gas level in ppm.
    """
    base = base_severity(config.category)
    if base > 0:
        return (
            (base + config.pressure * PRESSURE_GAS_COEFF)
            * dispersion_factor(config.weather)
            * intensity_multiplier(config.leak_rate)
        )
    if rng is None:
        rng = np.random.default_rng()
    low, high = AMBIENT_NOISE_PPM
    return float(rng.uniform(low, high))


def thermal_index(
    config: ScenarioConfig,
    rng: Optional[np.random.Generator] = None,
) -> float:
    """Ambient temperature, plus a scaled random surge during a fire."""
    index = config.temperature
    if config.category is LeakCategory.FIRE_HAZARD:
        if rng is None:
            rng = np.random.default_rng()
        low, high = FIRE_SURGE_RANGE
        surge = float(rng.uniform(low, high))
        index += surge * (config.leak_rate / FIRE_SURGE_CALIBRATION)
    return index


def classify_status(
    category: LeakCategory,
    gas_ppm: float,
    thermal: float,
) -> AlertStatus:
    """
    Determine the alert tier.

    Tiers are checked in escalating order and the last (highest) match
    wins, so a reading that meets several thresholds always reports the
    most severe one.
    """
    status = AlertStatus.SECURE
    if gas_ppm > WARNING_GAS_PPM or thermal > WARNING_THERMAL:
        status = AlertStatus.WARNING
    if gas_ppm > CRITICAL_GAS_PPM or thermal > CRITICAL_THERMAL:
        status = AlertStatus.CRITICAL
    if category is LeakCategory.FIRE_HAZARD or gas_ppm > EVACUATE_GAS_PPM:
        status = AlertStatus.EVACUATE
    return status


def risk_radius(config: ScenarioConfig) -> float:
    """Hazard radius in meters; zero when nothing is leaking."""
    if base_severity(config.category) == 0:
        return 0.0
    spread = config.wind_speed * RADIUS_WIND_COEFF + config.pressure * RADIUS_PRESSURE_COEFF
    return spread * (config.leak_rate / RADIUS_CALIBRATION)


def financial_risk(status: AlertStatus, leak_rate: float) -> float:
    """Financial exposure for an alert tier, scaled by leak intensity."""
    if status is AlertStatus.SECURE:
        return 0.0
    exposure = WARNING_EXPOSURE if status is AlertStatus.WARNING else SEVERE_EXPOSURE
    return exposure * intensity_multiplier(leak_rate)


def assess(
    config: ScenarioConfig,
    active_sensors: int,
    rng: Optional[np.random.Generator] = None,
) -> RiskSnapshot:
    """
    Derive a facility risk snapshot from scenario parameters.

    Args:
        config: Scenario parameters.
        active_sensors: Number of sensors currently detecting gas
                        (passed through unchanged).
        rng: Randomness source for the ambient jitter and fire surge.
             A fresh generator is used when omitted.

    Returns:
        RiskSnapshot for the scenario.
    """
    if rng is None:
        rng = np.random.default_rng()

    gas = toxic_gas_level(config, rng)
    thermal = thermal_index(config, rng)
    status = classify_status(config.category, gas, thermal)

    snapshot = RiskSnapshot(
        status=status,
        toxic_gas_level=gas,
        thermal_index=thermal,
        risk_radius=risk_radius(config),
        financial_risk=financial_risk(status, config.leak_rate),
        active_sensors=active_sensors,
    )
    logger.debug(
        "Assessed %s/%s: gas=%.2f ppm thermal=%.1f status=%s",
        config.category.name, config.weather.name, gas, thermal, status.name,
    )
    return snapshot
