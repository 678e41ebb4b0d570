"""Tests for the preset operator scenarios."""

import numpy as np
import pytest

from models.scenario import AlertStatus, ScenarioConfig
from models.risk import assess
from validation.scenarios import get_preset, get_preset_scenarios


class TestPresetScenarios:
    def test_presets_have_required_keys(self):
        for preset in get_preset_scenarios():
            assert isinstance(preset["name"], str)
            assert isinstance(preset["description"], str)
            assert isinstance(preset["config"], ScenarioConfig)

    def test_names_unique(self):
        names = [p["name"] for p in get_preset_scenarios()]
        assert len(names) == len(set(names))

    def test_get_preset(self):
        preset = get_preset("Catastrophic Burst")
        assert preset["config"].leak_source_id == "B"

    def test_unknown_preset_raises(self):
        with pytest.raises(KeyError, match="Unknown preset"):
            get_preset("Alien Invasion")

    def test_presets_ordered_by_severity(self):
        """Each preset reaches at least the tier of the mild baseline."""
        rng = np.random.default_rng(0)
        tiers = {p["name"]: assess(p["config"], 0, rng).status for p in get_preset_scenarios()}
        assert tiers["Normal Operations"] is AlertStatus.SECURE
        assert tiers["Minor Leak in Rain"] is AlertStatus.WARNING
        assert tiers["Catastrophic Burst"] is AlertStatus.CRITICAL
        assert tiers["Sector B Fire"] is AlertStatus.EVACUATE

    def test_fog_trapped_is_critical(self):
        """(30 + 20*0.5) * 1.2 * 1.8 = 86.4 ppm."""
        snapshot = assess(get_preset("Fog-Trapped Leak")["config"], 0)
        assert snapshot.toxic_gas_level == pytest.approx(86.4)
        assert snapshot.status is AlertStatus.CRITICAL
