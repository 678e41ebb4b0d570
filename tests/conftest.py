"""Shared fixtures for the ChemSentry test suite."""

import sys
import os
from datetime import datetime

import pytest
import numpy as np

# Ensure project root is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))


@pytest.fixture
def rng():
    """Seeded generator so stochastic terms are reproducible."""
    return np.random.default_rng(42)


@pytest.fixture
def fixed_now():
    """A fixed reference instant for forecast labels."""
    return datetime(2024, 3, 1, 9, 55)


@pytest.fixture
def normal_config():
    """Default scenario: normal operations, clear sky."""
    from models.scenario import ScenarioConfig
    return ScenarioConfig()


@pytest.fixture
def catastrophic_config():
    """Pipe burst at calibration intensity: 155 ppm, CRITICAL."""
    from models.scenario import ScenarioConfig, LeakCategory, WeatherCondition
    return ScenarioConfig(
        category=LeakCategory.CATASTROPHIC_BURST,
        weather=WeatherCondition.CLEAR,
        wind_speed=20.0,
        pressure=10.0,
        leak_rate=50.0,
    )


@pytest.fixture
def minor_rain_config():
    """Minor leak in heavy rain at full intensity: 45.5 ppm, WARNING."""
    from models.scenario import ScenarioConfig, LeakCategory, WeatherCondition
    return ScenarioConfig(
        category=LeakCategory.MINOR_LEAK,
        weather=WeatherCondition.RAIN,
        wind_speed=10.0,
        pressure=5.0,
        leak_rate=100.0,
    )


@pytest.fixture
def fire_config():
    """Chemical fire in Sector B."""
    from models.scenario import ScenarioConfig, LeakCategory
    return ScenarioConfig(
        category=LeakCategory.FIRE_HAZARD,
        leak_source_id="B",
        leak_rate=80.0,
    )


@pytest.fixture
def sectors():
    """The four static facility sectors."""
    from data.facility_layout import get_sectors
    return get_sectors()
