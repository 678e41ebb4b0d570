"""
Facility Layout for the ChemSentry hazard monitoring dashboard.

Defines the four rectangular sectors of the chemical plant on a
600m x 400m map (x grows East, y grows South, origin at the north-west
corner).  Sectors are static reference data: the risk engine only uses
them to turn a leak source id into a human-readable label and a map
location.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from config import MAP_WIDTH_M, MAP_HEIGHT_M, MAIN_SOURCE_ID

MAIN_FACILITY_LABEL = "MAIN FACILITY"


@dataclass(frozen=True)
class Sector:
    """A rectangular facility zone.

    Args:
        id: Short sector identifier ("A", "B", ...).
        name: Display name.
        x: West edge (meters).
        y: North edge (meters).
        width: East-West extent (meters).
        height: North-South extent (meters).
    """

    id: str
    name: str
    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2.0, self.y + self.height / 2.0)

    def contains(self, x: float, y: float) -> bool:
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height


def get_sectors() -> List[Sector]:
    """
    Return the facility sectors.

    Returns:
        Fresh list of the four Sector rectangles (storage, processing,
        admin, logistics).
    """
    return [
        Sector("A", "SECTOR A [STORAGE]", 50.0, 50.0, 200.0, 120.0),
        Sector("B", "SECTOR B [PROCESSING]", 350.0, 50.0, 200.0, 120.0),
        Sector("C", "SECTOR C [ADMIN]", 50.0, 230.0, 200.0, 120.0),
        Sector("D", "SECTOR D [LOGISTICS]", 350.0, 230.0, 200.0, 120.0),
    ]


def find_sector(
    sector_id: Optional[str],
    sectors: Optional[List[Sector]] = None,
) -> Optional[Sector]:
    """Return the sector with the given id, or None."""
    if sectors is None:
        sectors = get_sectors()
    return next((s for s in sectors if s.id == sector_id), None)


def map_center() -> Tuple[float, float]:
    return (MAP_WIDTH_M / 2.0, MAP_HEIGHT_M / 2.0)


def resolve_leak_source_label(
    leak_source_id: str,
    sectors: Optional[List[Sector]] = None,
) -> str:
    """
    Human-readable name of the leak source.

    ``"MAIN"`` maps to the main facility label and a known sector id to
    the sector's name.  Unknown ids are returned unchanged.
    """
    if leak_source_id == MAIN_SOURCE_ID:
        return MAIN_FACILITY_LABEL
    sector = find_sector(leak_source_id, sectors)
    return sector.name if sector is not None else leak_source_id


def leak_origin(
    leak_source_id: str,
    sectors: Optional[List[Sector]] = None,
) -> Tuple[float, float]:
    """Map location of the leak: sector centre, or map centre for MAIN / unknown ids."""
    sector = find_sector(leak_source_id, sectors)
    if sector is None:
        return map_center()
    return sector.center
