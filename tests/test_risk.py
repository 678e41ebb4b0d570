"""Tests for the risk assessment engine."""

import numpy as np
import pytest

from models.scenario import (
    AlertStatus,
    LeakCategory,
    RiskSnapshot,
    ScenarioConfig,
    WeatherCondition,
)
from models.risk import (
    assess,
    base_severity,
    classify_status,
    dispersion_factor,
    financial_risk,
    intensity_multiplier,
    risk_radius,
    thermal_index,
    toxic_gas_level,
)


class TestLookupTables:
    def test_base_severity_per_category(self):
        assert base_severity(LeakCategory.NORMAL) == 0.0
        assert base_severity(LeakCategory.MINOR_LEAK) == 30.0
        assert base_severity(LeakCategory.CATASTROPHIC_BURST) == 150.0
        assert base_severity(LeakCategory.FIRE_HAZARD) == 400.0

    def test_dispersion_factors(self):
        assert dispersion_factor(WeatherCondition.CLEAR) == 1.0
        assert dispersion_factor(WeatherCondition.RAIN) == 0.7
        assert dispersion_factor(WeatherCondition.STORM) == 0.7
        assert dispersion_factor(WeatherCondition.FOG) == 1.2

    def test_intensity_multiplier_calibration(self):
        """50% leak rate is the 1.0x calibration point; 100% doubles it."""
        assert intensity_multiplier(50.0) == 1.0
        assert intensity_multiplier(100.0) == 2.0
        assert intensity_multiplier(0.0) == 0.0


class TestToxicGasLevel:
    def test_catastrophic_reference_scenario(self, catastrophic_config):
        """(150 + 10*0.5) * 1.0 * 1.0 = 155 ppm."""
        assert toxic_gas_level(catastrophic_config) == pytest.approx(155.0)

    def test_minor_rain_reference_scenario(self, minor_rain_config):
        """(30 + 5*0.5) * 0.7 * 2.0 = 45.5 ppm."""
        assert toxic_gas_level(minor_rain_config) == pytest.approx(45.5)

    def test_fog_concentrates(self, catastrophic_config):
        clear = toxic_gas_level(catastrophic_config)
        fog = toxic_gas_level(catastrophic_config.updated(weather=WeatherCondition.FOG))
        assert fog == pytest.approx(clear * 1.2)

    def test_normal_is_bounded_noise(self, normal_config, rng):
        """Normal operations report baseline jitter in [0, 2) ppm."""
        levels = [toxic_gas_level(normal_config, rng) for _ in range(500)]
        assert min(levels) >= 0.0
        assert max(levels) < 2.0
        assert len(set(levels)) > 1, "Jitter should vary call to call"

    def test_normal_ignores_pressure_and_weather(self, normal_config):
        """Same seed gives the same jitter regardless of plant conditions."""
        a = toxic_gas_level(normal_config, np.random.default_rng(7))
        b = toxic_gas_level(
            normal_config.updated(pressure=40.0, weather=WeatherCondition.FOG),
            np.random.default_rng(7),
        )
        assert a == b

    def test_out_of_range_leak_rate_propagates(self, catastrophic_config):
        """No clamping: 200% leak rate simply quadruples the calibration output."""
        level = toxic_gas_level(catastrophic_config.updated(leak_rate=200.0))
        assert level == pytest.approx(155.0 * 4.0)


class TestThermalIndex:
    def test_non_fire_is_ambient(self, catastrophic_config, rng):
        config = catastrophic_config.updated(temperature=31.5)
        assert thermal_index(config, rng) == 31.5

    def test_fire_surge_bounds(self, fire_config, rng):
        """Surge in [300, 500) scaled by leak_rate/80 (= 1.0 at 80%)."""
        for _ in range(200):
            value = thermal_index(fire_config, rng)
            assert 25.0 + 300.0 <= value < 25.0 + 500.0

    def test_fire_surge_scales_with_leak_rate(self, fire_config):
        low = thermal_index(fire_config.updated(leak_rate=40.0), np.random.default_rng(3))
        high = thermal_index(fire_config.updated(leak_rate=80.0), np.random.default_rng(3))
        assert (high - 25.0) == pytest.approx(2.0 * (low - 25.0))


class TestClassifyStatus:
    def test_secure_below_all_thresholds(self):
        assert classify_status(LeakCategory.MINOR_LEAK, 20.0, 60.0) is AlertStatus.SECURE

    def test_warning_by_gas_or_heat(self):
        assert classify_status(LeakCategory.MINOR_LEAK, 20.1, 25.0) is AlertStatus.WARNING
        assert classify_status(LeakCategory.MINOR_LEAK, 0.0, 60.1) is AlertStatus.WARNING

    def test_critical_by_gas_or_heat(self):
        assert classify_status(LeakCategory.MINOR_LEAK, 50.1, 25.0) is AlertStatus.CRITICAL
        assert classify_status(LeakCategory.MINOR_LEAK, 0.0, 150.1) is AlertStatus.CRITICAL

    def test_evacuate_by_gas(self):
        assert classify_status(LeakCategory.CATASTROPHIC_BURST, 200.1, 25.0) is AlertStatus.EVACUATE

    def test_fire_always_evacuates(self):
        assert classify_status(LeakCategory.FIRE_HAZARD, 0.0, 0.0) is AlertStatus.EVACUATE

    def test_highest_tier_wins(self):
        """Gas at warning level but heat at critical level reports CRITICAL."""
        assert classify_status(LeakCategory.MINOR_LEAK, 30.0, 200.0) is AlertStatus.CRITICAL

    def test_monotonic_in_gas_level(self):
        """Raising the gas level never lowers the tier."""
        levels = np.linspace(0.0, 400.0, 801)
        tiers = [classify_status(LeakCategory.MINOR_LEAK, g, 25.0) for g in levels]
        assert all(b >= a for a, b in zip(tiers, tiers[1:]))
        assert tiers[0] is AlertStatus.SECURE
        assert tiers[-1] is AlertStatus.EVACUATE

    def test_tiers_are_ordered(self):
        assert AlertStatus.SECURE < AlertStatus.WARNING < AlertStatus.CRITICAL < AlertStatus.EVACUATE


class TestRiskRadius:
    def test_zero_under_normal(self, normal_config):
        assert risk_radius(normal_config) == 0.0

    def test_catastrophic_radius(self, catastrophic_config):
        """((20*12) + (10*8)) * (50/60) = 266.67 m."""
        assert risk_radius(catastrophic_config) == pytest.approx(320.0 * 50.0 / 60.0)

    def test_negative_pressure_can_go_negative(self, catastrophic_config):
        """Inputs are not clamped, so a nonsensical radius is reachable."""
        config = catastrophic_config.updated(wind_speed=0.0, pressure=-5.0)
        assert risk_radius(config) < 0.0


class TestFinancialRisk:
    def test_zero_when_secure(self):
        assert financial_risk(AlertStatus.SECURE, 100.0) == 0.0

    def test_warning_exposure(self):
        assert financial_risk(AlertStatus.WARNING, 50.0) == 500_000.0

    def test_severe_exposure(self):
        assert financial_risk(AlertStatus.CRITICAL, 100.0) == 100_000_000.0
        assert financial_risk(AlertStatus.EVACUATE, 50.0) == 50_000_000.0

    def test_strictly_increasing_in_leak_rate(self):
        rates = [10.0, 25.0, 50.0, 75.0, 100.0]
        for status in (AlertStatus.WARNING, AlertStatus.CRITICAL, AlertStatus.EVACUATE):
            values = [financial_risk(status, r) for r in rates]
            assert all(b > a for a, b in zip(values, values[1:]))


class TestAssess:
    def test_returns_snapshot(self, catastrophic_config, rng):
        snapshot = assess(catastrophic_config, 3, rng)
        assert isinstance(snapshot, RiskSnapshot)

    def test_catastrophic_reference_is_critical(self, catastrophic_config, rng):
        snapshot = assess(catastrophic_config, 0, rng)
        assert snapshot.toxic_gas_level == pytest.approx(155.0)
        assert snapshot.status is AlertStatus.CRITICAL
        assert snapshot.financial_risk == 50_000_000.0

    def test_minor_rain_reference_is_warning(self, minor_rain_config, rng):
        snapshot = assess(minor_rain_config, 0, rng)
        assert snapshot.toxic_gas_level == pytest.approx(45.5)
        assert snapshot.status is AlertStatus.WARNING
        assert snapshot.financial_risk == 1_000_000.0

    def test_active_sensors_pass_through(self, catastrophic_config, rng):
        assert assess(catastrophic_config, 17, rng).active_sensors == 17

    @pytest.mark.parametrize("temperature", [-10.0, 0.0, 25.0, 45.0, 59.0])
    def test_normal_is_always_secure(self, normal_config, temperature):
        for seed in range(20):
            snapshot = assess(
                normal_config.updated(temperature=temperature),
                0,
                np.random.default_rng(seed),
            )
            assert snapshot.status is AlertStatus.SECURE
            assert snapshot.risk_radius == 0.0
            assert snapshot.financial_risk == 0.0
            assert 0.0 <= snapshot.toxic_gas_level < 2.0
            assert snapshot.thermal_index == temperature

    @pytest.mark.parametrize("weather", list(WeatherCondition))
    def test_fire_is_always_evacuate(self, fire_config, weather):
        for rate in (0.0, 10.0, 50.0, 100.0):
            snapshot = assess(fire_config.updated(weather=weather, leak_rate=rate), 0)
            assert snapshot.status is AlertStatus.EVACUATE

    def test_financial_zero_iff_secure(self, rng):
        for category in LeakCategory:
            for rate in (10.0, 20.0, 50.0, 100.0):
                snapshot = assess(ScenarioConfig(category=category, leak_rate=rate), 0, rng)
                assert (snapshot.financial_risk == 0.0) == (snapshot.status is AlertStatus.SECURE)

    def test_repeatable_tier_despite_noise(self, fire_config):
        """Independent runs agree on the tier even though the surge varies."""
        tiers = {assess(fire_config, 0).status for _ in range(10)}
        assert tiers == {AlertStatus.EVACUATE}

    def test_snapshot_is_immutable(self, catastrophic_config, rng):
        snapshot = assess(catastrophic_config, 0, rng)
        with pytest.raises(AttributeError):
            snapshot.status = AlertStatus.SECURE
