"""
Pre-defined operator scenarios.

Each preset is a dict with:
    - name: short display name
    - config: ScenarioConfig for the preset
    - description: human-readable summary

Used by the dashboard's preset selector and the leak-rate sweep experiment.
"""

from typing import List

from models.scenario import LeakCategory, ScenarioConfig, WeatherCondition


def scenario_normal() -> dict:
    """Normal operations: no leak, clear sky, default plant conditions."""
    return {
        "name": "Normal Operations",
        "config": ScenarioConfig(),
        "description": "No active leak, clear sky, 15 km/h easterly drift",
    }


def scenario_minor_rain() -> dict:
    """A valve leak at full intensity, partly washed out by heavy rain."""
    return {
        "name": "Minor Leak in Rain",
        "config": ScenarioConfig(
            category=LeakCategory.MINOR_LEAK,
            weather=WeatherCondition.RAIN,
            wind_speed=10.0,
            pressure=5.0,
            leak_source_id="A",
            leak_rate=100.0,
        ),
        "description": "Valve leak in Storage (A), heavy rain, full intensity",
    }


def scenario_catastrophic() -> dict:
    """A pipe burst at calibration intensity in clear weather."""
    return {
        "name": "Catastrophic Burst",
        "config": ScenarioConfig(
            category=LeakCategory.CATASTROPHIC_BURST,
            weather=WeatherCondition.CLEAR,
            wind_speed=20.0,
            wind_direction=180.0,
            pressure=10.0,
            leak_source_id="B",
            leak_rate=50.0,
        ),
        "description": "Pipe burst in Processing (B), clear sky, southerly drift",
    }


def scenario_fog_trapped() -> dict:
    """A minor leak that fog keeps concentrated near the ground."""
    return {
        "name": "Fog-Trapped Leak",
        "config": ScenarioConfig(
            category=LeakCategory.MINOR_LEAK,
            weather=WeatherCondition.FOG,
            wind_speed=5.0,
            wind_direction=270.0,
            pressure=20.0,
            leak_source_id="D",
            leak_rate=90.0,
        ),
        "description": "Valve leak in Logistics (D), dense fog, light westerly drift",
    }


def scenario_sector_fire() -> dict:
    """A chemical fire in the processing sector during a storm."""
    return {
        "name": "Sector B Fire",
        "config": ScenarioConfig(
            category=LeakCategory.FIRE_HAZARD,
            weather=WeatherCondition.STORM,
            wind_speed=35.0,
            wind_direction=45.0,
            pressure=15.0,
            temperature=32.0,
            leak_source_id="B",
            leak_rate=80.0,
        ),
        "description": "Chemical fire in Processing (B), thunderstorm, strong NE drift",
    }


def get_preset_scenarios() -> List[dict]:
    """Return all presets, mildest first."""
    return [
        scenario_normal(),
        scenario_minor_rain(),
        scenario_catastrophic(),
        scenario_fog_trapped(),
        scenario_sector_fire(),
    ]


def get_preset(name: str) -> dict:
    """Look up a preset by name; raises KeyError if it does not exist."""
    for preset in get_preset_scenarios():
        if preset["name"] == name:
            return preset
    raise KeyError(f"Unknown preset scenario: {name!r}")
