"""End-to-end integration tests for the full pipeline."""

import numpy as np
import pytest

from models.scenario import AlertStatus, LeakCategory
from models.risk import assess
from models.forecast import forecast, round_half_up
from models.sensors import survey_sensors, count_active_sensors
from models.advisory import build_advisory
from models.session import MonitoringSession
from validation.scenarios import get_preset_scenarios
from experiments.run_scenario_sweep import run_sweep, sweep_preset


class TestFullPipeline:
    """Test the complete pipeline: scenario -> sensors -> snapshot -> forecast -> advisory."""

    @pytest.mark.parametrize("preset", get_preset_scenarios(), ids=lambda p: p["name"])
    def test_every_preset_runs(self, preset, fixed_now, rng):
        config = preset["config"]
        sensors = survey_sensors(config)
        snapshot = assess(config, count_active_sensors(sensors), rng)
        points = forecast(snapshot.toxic_gas_level, config.category, fixed_now, rng)
        advisory = build_advisory(snapshot, config, fixed_now)

        assert snapshot.active_sensors == count_active_sensors(sensors)
        assert len(points) == 13
        assert snapshot.status.label in advisory.text

    def test_forecast_midpoint_tracks_snapshot(self, catastrophic_config, fixed_now, rng):
        snapshot = assess(catastrophic_config, 0, rng)
        points = forecast(snapshot.toxic_gas_level, catastrophic_config.category, fixed_now, rng)
        assert points[4].predicted_ppm == pytest.approx(round_half_up(snapshot.toxic_gas_level))

    def test_escalating_leak_rate_escalates_status(self, catastrophic_config, rng):
        tiers = [
            assess(catastrophic_config.updated(leak_rate=r), 0, rng).status
            for r in (5.0, 10.0, 30.0, 100.0)
        ]
        assert tiers == [
            AlertStatus.SECURE,
            AlertStatus.WARNING,
            AlertStatus.CRITICAL,
            AlertStatus.EVACUATE,
        ]

    def test_session_with_sensor_feedback(self, catastrophic_config, fixed_now):
        session = MonitoringSession(catastrophic_config, rng=np.random.default_rng(1),
                                    clock=lambda: fixed_now)
        session.set_active_sensors(count_active_sensors(survey_sensors(session.config)))
        snapshot, points = session.refresh()
        assert snapshot.active_sensors > 0
        assert points[0].timestamp_label == "9:55"

        session.update(category=LeakCategory.NORMAL)
        session.set_active_sensors(count_active_sensors(survey_sensors(session.config)))
        snapshot, points = session.refresh()
        assert snapshot.status is AlertStatus.SECURE
        assert snapshot.active_sensors == 0
        assert all(0.0 <= p.predicted_ppm <= 5.0 for p in points)


class TestScenarioSweep:
    def test_sweep_row_count(self):
        rows = run_sweep(steps=3, seed=0, verbose=False)
        assert len(rows) == 3 * len(get_preset_scenarios())

    def test_sweep_is_reproducible(self):
        a = run_sweep(steps=4, seed=7, verbose=False)
        b = run_sweep(steps=4, seed=7, verbose=False)
        assert a == b

    def test_zero_leak_rate_has_no_exposure(self):
        preset = get_preset_scenarios()[2]  # Catastrophic Burst
        rows = sweep_preset(preset, np.array([0.0, 100.0]), np.random.default_rng(0))
        assert rows[0]["status"] == "SECURE"
        assert rows[0]["financial_risk"] == 0.0
        assert rows[1]["status"] == "EVACUATE"

    def test_verbose_prints_table(self, capsys):
        run_sweep(steps=2, seed=0, verbose=True)
        out = capsys.readouterr().out
        assert "Catastrophic Burst" in out
        assert "Exposure" in out
