"""
Visualization module for the ChemSentry hazard monitoring dashboard.

Provides Plotly-based interactive plots for the Streamlit interface.
"""

import numpy as np
import plotly.graph_objects as go
from typing import List, Optional, Tuple

from models.scenario import AlertStatus, ForecastPoint, RiskSnapshot, ScenarioConfig, SensorStatus
from models.sensors import Sensor, plume_center
from data.facility_layout import Sector, leak_origin
from config import (
    MAP_WIDTH_M,
    MAP_HEIGHT_M,
    MAIN_SOURCE_ID,
    WARNING_GAS_PPM,
    CRITICAL_GAS_PPM,
    EVACUATE_GAS_PPM,
)

STATUS_COLORS = {
    AlertStatus.SECURE: "#10b981",
    AlertStatus.WARNING: "#f59e0b",
    AlertStatus.CRITICAL: "#f97316",
    AlertStatus.EVACUATE: "#ef4444",
}

SENSOR_COLORS = {
    SensorStatus.OK: "#10b981",
    SensorStatus.WARN: "#f59e0b",
    SensorStatus.CRIT: "#ef4444",
}


def _rect_coords(sector: Sector) -> Tuple[list, list]:
    """Return (xs, ys) for a closed rectangle from the sector's corner and size."""
    x0, y0 = sector.x, sector.y
    x1, y1 = sector.x + sector.width, sector.y + sector.height
    return [x0, x1, x1, x0, x0], [y0, y0, y1, y1, y0]


def _circle_coords(cx: float, cy: float, r: float, n: int = 72) -> Tuple[np.ndarray, np.ndarray]:
    theta = np.linspace(0.0, 2.0 * np.pi, n)
    return cx + r * np.cos(theta), cy + r * np.sin(theta)


def _add_sectors(
    fig: go.Figure,
    sectors: List[Sector],
    leak_source_id: str,
    selected_sector_id: Optional[str] = None,
) -> None:
    """Render sector rectangles; the leaking sector is outlined red, the selected one cyan."""
    for sector in sectors:
        xs, ys = _rect_coords(sector)
        if sector.id == leak_source_id:
            line_color, fill = "#ef4444", "rgba(239,68,68,0.12)"
        elif sector.id == selected_sector_id:
            line_color, fill = "#22d3ee", "rgba(34,211,238,0.12)"
        else:
            line_color, fill = "rgba(148,163,184,0.6)", "rgba(30,41,59,0.5)"

        fig.add_trace(
            go.Scatter(
                x=xs, y=ys,
                mode="lines",
                fill="toself",
                fillcolor=fill,
                line=dict(color=line_color, width=2),
                name=sector.name,
                showlegend=False,
                hoverinfo="name",
            )
        )
        cx, _ = sector.center
        fig.add_annotation(
            x=cx, y=sector.y + 12,
            text=sector.name,
            showarrow=False,
            font=dict(size=9, color="rgba(226,232,240,0.8)"),
        )


def _add_sensors(fig: go.Figure, sensors: List[Sensor]) -> None:
    """Plot sensors as markers coloured by status."""
    if not sensors:
        return
    fig.add_trace(
        go.Scatter(
            x=[s.x for s in sensors],
            y=[s.y for s in sensors],
            mode="markers",
            marker=dict(
                size=9,
                color=[SENSOR_COLORS[s.status] for s in sensors],
                line=dict(width=1, color="white"),
            ),
            customdata=[[s.id, s.reading, s.status.value] for s in sensors],
            name="Gas Sensors",
            hovertemplate=(
                "%{customdata[0]}<br>"
                "%{customdata[1]:.1f} ppm (%{customdata[2]})<extra></extra>"
            ),
        )
    )


def _add_wind_arrow(
    fig: go.Figure,
    wind_direction: float,
    wind_speed: float,
    anchor: Tuple[float, float] = (MAP_WIDTH_M - 45.0, MAP_HEIGHT_M - 45.0),
    length: float = 30.0,
) -> None:
    """Arrow pointing the way the wind carries gas (0 = North = -y)."""
    ax, ay = anchor
    rad = np.radians(wind_direction % 360.0)
    tip_x = ax + length * np.sin(rad)
    tip_y = ay - length * np.cos(rad)

    fig.add_annotation(
        x=tip_x, y=tip_y,
        ax=ax, ay=ay,
        xref="x", yref="y",
        axref="x", ayref="y",
        showarrow=True,
        arrowhead=3,
        arrowsize=1.5,
        arrowwidth=3,
        arrowcolor="deepskyblue",
    )
    fig.add_annotation(
        x=ax, y=ay + length + 8,
        text=f"{wind_speed:.0f} km/h | {wind_direction % 360.0:.0f}°",
        showarrow=False,
        font=dict(size=9, color="deepskyblue"),
    )


def create_facility_map_figure(
    sectors: List[Sector],
    sensors: List[Sensor],
    config: ScenarioConfig,
    snapshot: RiskSnapshot,
    selected_sector_id: Optional[str] = None,
) -> go.Figure:
    """
    Create the facility map: sectors, sensor readings, hazard zone and wind.

    Args:
        sectors: Facility sector rectangles.
        sensors: Surveyed sensors (with readings and statuses).
        config: Current scenario (leak source, wind).
        snapshot: Current risk snapshot (radius and status colour the hazard zone).
        selected_sector_id: Sector highlighted by the operator, if any.

    Returns:
        Plotly Figure with map coordinates (y axis reversed, north up).
    """
    fig = go.Figure()

    _add_sectors(fig, sectors, config.leak_source_id, selected_sector_id)

    if snapshot.risk_radius > 0:
        cx, cy = plume_center(config, snapshot.risk_radius, sectors)
        xs, ys = _circle_coords(cx, cy, snapshot.risk_radius)
        color = STATUS_COLORS[snapshot.status]
        fig.add_trace(
            go.Scatter(
                x=xs, y=ys,
                mode="lines",
                fill="toself",
                fillcolor="rgba(239,68,68,0.10)",
                line=dict(color=color, width=2, dash="dash"),
                name=f"Risk Radius ({snapshot.risk_radius:.0f} m)",
                hoverinfo="name",
            )
        )

        ox, oy = leak_origin(config.leak_source_id, sectors)
        fig.add_trace(
            go.Scatter(
                x=[ox], y=[oy],
                mode="markers",
                marker=dict(size=16, color=color, symbol="x", line=dict(width=2, color="white")),
                name="Leak Source",
                hovertemplate="Leak source<br>(%{x:.0f}, %{y:.0f})<extra></extra>",
            )
        )

    _add_sensors(fig, sensors)
    _add_wind_arrow(fig, config.wind_direction, config.wind_speed)

    title = "Main Facility // Live View"
    if config.leak_source_id != MAIN_SOURCE_ID:
        title += f"  //  SIMULATION ACTIVE: {config.leak_source_id}"

    fig.update_layout(
        title=title,
        template="plotly_dark",
        height=520,
        margin=dict(l=10, r=10, t=50, b=10),
        legend=dict(orientation="h", yanchor="bottom", y=-0.12),
    )
    fig.update_xaxes(range=[0, MAP_WIDTH_M], showgrid=False, zeroline=False, title="East (m)")
    fig.update_yaxes(
        range=[MAP_HEIGHT_M, 0],
        showgrid=False,
        zeroline=False,
        scaleanchor="x",
        scaleratio=1,
        title="South (m)",
    )
    return fig


def create_forecast_figure(
    points: List[ForecastPoint],
    status: AlertStatus = AlertStatus.SECURE,
) -> go.Figure:
    """Create the 60-minute gas-concentration forecast chart with tier thresholds."""
    if not points:
        fig = go.Figure()
        fig.add_annotation(text="No forecast available", showarrow=False)
        return fig

    labels = [p.timestamp_label for p in points]
    values = [p.predicted_ppm for p in points]

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=labels,
            y=values,
            mode="lines+markers",
            line=dict(color=STATUS_COLORS[status], width=3, shape="spline"),
            fill="tozeroy",
            name="Predicted PPM",
            hovertemplate="%{x}<br>%{y:.1f} ppm<extra></extra>",
        )
    )

    peak = max(values)
    for threshold, name, color in (
        (WARNING_GAS_PPM, "Warning", STATUS_COLORS[AlertStatus.WARNING]),
        (CRITICAL_GAS_PPM, "Critical", STATUS_COLORS[AlertStatus.CRITICAL]),
        (EVACUATE_GAS_PPM, "Evacuate", STATUS_COLORS[AlertStatus.EVACUATE]),
    ):
        # Only thresholds within reach of the series
        if threshold <= peak * 1.5:
            fig.add_hline(
                y=threshold,
                line=dict(color=color, width=1, dash="dot"),
                annotation_text=name,
                annotation_position="top left",
            )

    fig.update_layout(
        title="Predictive Analytics — Gas Concentration (next 60 min)",
        xaxis_title="Time",
        yaxis_title="PPM",
        template="plotly_dark",
        height=300,
        showlegend=False,
    )
    return fig
