"""
ChemSentry Industrial Hazard Monitor — Streamlit Interface.

Run with:  streamlit run main.py
"""

import sys
import os

# Ensure the project root is on the Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import logging

import streamlit as st

from models.scenario import AlertStatus, LeakCategory, ScenarioConfig, WeatherCondition
from models.sensors import create_sensor_grid, survey_sensors, count_active_sensors
from models.advisory import build_advisory
from models.session import MonitoringSession
from data.facility_layout import get_sectors, find_sector, resolve_leak_source_label
from validation.scenarios import get_preset_scenarios, get_preset
from visualization.plots import create_facility_map_figure, create_forecast_figure
from config import (
    LOG_LEVEL,
    LOG_FORMAT,
    MAIN_SOURCE_ID,
    CURRENCY_SYMBOL,
)

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger("chemsentry")

# ── Page Config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="ChemSentry Hazard Monitor",
    page_icon="☣️",
    layout="wide",
)

st.title("ChemSentry — Industrial Hazard Monitor")
st.markdown(
    "Simulates a chemical plant incident and derives the facility risk "
    "assessment and a 60-minute gas concentration forecast."
)

sectors = get_sectors()

# ── Session State ────────────────────────────────────────────────────────────

# Kept across reruns: clicks that leave the scenario and sensor count alone
# reuse the last snapshot and forecast instead of redrawing random terms.
if "session" not in st.session_state:
    st.session_state.session = MonitoringSession(ScenarioConfig())
session = st.session_state.session

# ── Sidebar Controls ─────────────────────────────────────────────────────────

st.sidebar.header("Scenario")

preset_names = ["Custom"] + [p["name"] for p in get_preset_scenarios()]
selected_preset = st.sidebar.selectbox("Preset Scenario", preset_names)
if selected_preset != "Custom":
    base = get_preset(selected_preset)["config"]
else:
    base = session.config

category = st.sidebar.selectbox(
    "Incident Type",
    list(LeakCategory),
    index=list(LeakCategory).index(base.category),
    format_func=lambda c: c.value,
)

source_ids = [MAIN_SOURCE_ID] + [s.id for s in sectors]
leak_source_id = st.sidebar.selectbox(
    "Leak Source",
    source_ids,
    index=source_ids.index(base.leak_source_id) if base.leak_source_id in source_ids else 0,
    format_func=lambda sid: resolve_leak_source_label(sid, sectors),
)

leak_rate = st.sidebar.slider(
    "Leak Intensity (%)",
    min_value=0.0,
    max_value=100.0,
    value=float(base.leak_rate),
    step=5.0,
    help="50% is the calibration point; 100% doubles gas output and exposure.",
)

st.sidebar.header("Environment")

weather = st.sidebar.selectbox(
    "Weather",
    list(WeatherCondition),
    index=list(WeatherCondition).index(base.weather),
    format_func=lambda w: w.value,
)

wind_speed = st.sidebar.slider(
    "Wind Speed (km/h)",
    min_value=0.0,
    max_value=100.0,
    value=float(base.wind_speed),
    step=1.0,
)

wind_direction = st.sidebar.slider(
    "Wind Direction (degrees, direction gas is carried TOWARD)",
    min_value=0.0,
    max_value=359.0,
    value=float(base.wind_direction % 360.0),
    step=5.0,
)

pressure = st.sidebar.slider(
    "Line Pressure (bar)",
    min_value=0.0,
    max_value=50.0,
    value=float(base.pressure),
    step=0.5,
)

temperature = st.sidebar.slider(
    "Ambient Temperature (°C)",
    min_value=-20.0,
    max_value=60.0,
    value=float(base.temperature),
    step=1.0,
)

previous = session.config
config = session.update(
    category=category,
    weather=weather,
    wind_speed=wind_speed,
    wind_direction=wind_direction,
    pressure=pressure,
    temperature=temperature,
    leak_source_id=leak_source_id,
    leak_rate=leak_rate,
)
if config != previous:
    logger.info(
        "Scenario changed: %s, %s, source=%s, rate=%.0f%%",
        config.category.name, config.weather.name, config.leak_source_id, config.leak_rate,
    )

# ── Recompute: sensors -> snapshot -> forecast ──────────────────────────────

sensors = survey_sensors(config, create_sensor_grid(), sectors)
session.set_active_sensors(count_active_sensors(sensors))
snapshot, forecast_points = session.refresh()
advisory = build_advisory(snapshot, config, sectors=sectors)

# ── Summary Metrics Banner ───────────────────────────────────────────────────

if snapshot.status is AlertStatus.SECURE:
    st.success(f"STATUS: {snapshot.status.label}")
elif snapshot.status is AlertStatus.WARNING:
    st.warning(f"STATUS: {snapshot.status.label}")
else:
    st.error(f"STATUS: {snapshot.status.label}")

m1, m2, m3, m4, m5 = st.columns(5)
m1.metric("Toxic Gas", f"{snapshot.toxic_gas_level:.1f} ppm")
m2.metric("Thermal Index", f"{snapshot.thermal_index:.0f}")
m3.metric("Risk Radius", f"{snapshot.risk_radius:.0f} m")
m4.metric("Financial Exposure", f"{CURRENCY_SYMBOL}{snapshot.financial_risk:,.0f}")
m5.metric("Active Sensors", f"{snapshot.active_sensors} / {len(sensors)}")

# ── Visualization ──────────────────────────────────────────────────────────

col_map, col_intel = st.columns([3, 2])

with col_map:
    selected_sector_id = st.radio(
        "Inspect Sector",
        ["None"] + [s.id for s in sectors],
        horizontal=True,
    )
    if selected_sector_id == "None":
        selected_sector_id = None

    fig_map = create_facility_map_figure(
        sectors=sectors,
        sensors=sensors,
        config=config,
        snapshot=snapshot,
        selected_sector_id=selected_sector_id,
    )
    st.plotly_chart(fig_map, use_container_width=True)

with col_intel:
    st.subheader("Response Advisory")
    st.caption(f"Issued {advisory.timestamp}")
    st.markdown(advisory.text)

    selected_sector = find_sector(selected_sector_id, sectors)
    if selected_sector is not None:
        st.subheader(selected_sector.name)
        in_sector = [s for s in sensors if selected_sector.contains(s.x, s.y)]
        if in_sector:
            peak = max(in_sector, key=lambda s: s.reading)
            st.metric("Sensors in Sector", len(in_sector))
            st.metric("Peak Reading", f"{peak.reading:.1f} ppm", delta=peak.id, delta_color="off")
        else:
            st.info("No fixed sensors inside this sector.")
        if selected_sector.id == config.leak_source_id:
            st.error("Leak source is inside this sector.")

fig_forecast = create_forecast_figure(forecast_points, snapshot.status)
st.plotly_chart(fig_forecast, use_container_width=True)

# ── Info Panel ───────────────────────────────────────────────────────────────

with st.expander("About the Model"):
    st.markdown(
        """
        **Toxic Gas** — `(base + 0.5 * pressure) * dispersion * (leak rate / 50)`,
        where base severity is 0 / 30 / 150 / 400 ppm for normal operations,
        minor leak, pipe burst and chemical fire.  Rain and storms suppress
        the cloud (x0.7); fog traps it (x1.2).  Under normal operations
        only baseline sensor jitter (0–2 ppm) is reported.

        **Thermal Index** — ambient temperature, plus a 300–500 surge
        scaled by `leak rate / 80` during a chemical fire.

        **Status** — the highest tier reached: *Warning* above 20 ppm or
        thermal 60, *Critical* above 50 ppm or thermal 150, *Evacuate*
        above 200 ppm or on any fire.

        **Risk Radius** — `(12 * wind + 8 * pressure) * (leak rate / 60)` m.

        **Forecast** — logistic ramp `current * (0.5 + 1 / (1 + e^(-0.1 (t - 20))))`
        during an incident; trendless 0–5 ppm noise otherwise.

        **Sensors** — a fixed grid of gas detectors; readings fall off
        linearly from the downwind-drifted cloud centre to the radius edge.
        A sensor is *active* at or above 1 ppm.

        ---
        *Illustrative model only — not an atmospheric dispersion simulation.*
        """
    )
