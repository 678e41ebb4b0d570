"""
Operator response advisory.

Turns a risk snapshot into a short, rule-based instruction for the
control-room operator.  One fixed action per alert tier.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from models.scenario import AlertStatus, RiskSnapshot, ScenarioConfig
from models.forecast import format_clock_label
from data.facility_layout import Sector, resolve_leak_source_label

TIER_ACTIONS = {
    AlertStatus.SECURE: "All readings nominal. Continue routine monitoring.",
    AlertStatus.WARNING: (
        "Isolate the leak source and dispatch an inspection team "
        "with portable gas detectors."
    ),
    AlertStatus.CRITICAL: (
        "Initiate emergency shutdown of affected lines and restrict access "
        "within {radius:.0f} m."
    ),
    AlertStatus.EVACUATE: (
        "Evacuate all personnel within {radius:.0f} m and alert "
        "emergency services immediately."
    ),
}


@dataclass(frozen=True)
class Advisory:
    text: str
    timestamp: str


def build_advisory(
    snapshot: RiskSnapshot,
    config: ScenarioConfig,
    now: Optional[datetime] = None,
    sectors: Optional[List[Sector]] = None,
) -> Advisory:
    """
    Compose the operator advisory for the current snapshot.

    Args:
        snapshot: Current risk assessment.
        config: Scenario that produced the snapshot (for the source label).
        now: Timestamp of the advisory.  Defaults to now.
        sectors: Facility sectors for resolving the source label.

    Returns:
        Advisory with the message text and an ``H:MM`` timestamp.
    """
    if now is None:
        now = datetime.now()

    source = resolve_leak_source_label(config.leak_source_id, sectors)
    action = TIER_ACTIONS[snapshot.status].format(radius=snapshot.risk_radius)
    text = (
        f"[{snapshot.status.label}] {source}: "
        f"{snapshot.toxic_gas_level:.1f} ppm toxic gas, "
        f"thermal index {snapshot.thermal_index:.0f}. {action}"
    )
    return Advisory(text=text, timestamp=format_clock_label(now))
