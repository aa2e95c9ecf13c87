"""Vessel type enumeration and its display table.

The member set mirrors the host game's ``VesselType`` enum. Member values
are the exact tokens used in config files and saves.
"""
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple


class VesselType(str, Enum):
    """Host-defined vessel classes."""
    DEBRIS = "Debris"
    SPACE_OBJECT = "SpaceObject"
    UNKNOWN = "Unknown"
    PROBE = "Probe"
    RELAY = "Relay"
    ROVER = "Rover"
    LANDER = "Lander"
    SHIP = "Ship"
    PLANE = "Plane"
    STATION = "Station"
    BASE = "Base"
    EVA = "EVA"
    FLAG = "Flag"
    DEPLOYED_SCIENCE_CONTROLLER = "DeployedScienceController"
    DEPLOYED_SCIENCE_PART = "DeployedSciencePart"
    DROPPED_PART = "DroppedPart"
    DEPLOYED_GROUND_PART = "DeployedGroundPart"

    def __str__(self) -> str:
        return self.value


DISPLAY_NAMES: Dict[VesselType, str] = {
    VesselType.DEBRIS: "Debris",
    VesselType.SPACE_OBJECT: "Space Object",
    VesselType.UNKNOWN: "Unknown",
    VesselType.PROBE: "Probe",
    VesselType.RELAY: "Relay",
    VesselType.ROVER: "Rover",
    VesselType.LANDER: "Lander",
    VesselType.SHIP: "Ship",
    VesselType.PLANE: "Plane",
    VesselType.STATION: "Station",
    VesselType.BASE: "Base",
    VesselType.EVA: "EVA",
    VesselType.FLAG: "Flag",
    VesselType.DEPLOYED_SCIENCE_CONTROLLER: "Deployed Science Controller",
    VesselType.DEPLOYED_SCIENCE_PART: "Deployed Science Part",
    VesselType.DROPPED_PART: "Dropped Part",
    VesselType.DEPLOYED_GROUND_PART: "Deployed Ground Part",
}

# Types a player can never pick for a craft they build
NON_SELECTABLE_TYPES: FrozenSet[VesselType] = frozenset({
    VesselType.DEBRIS,
    VesselType.SPACE_OBJECT,
    VesselType.UNKNOWN,
    VesselType.EVA,
    VesselType.FLAG,
})

SELECTABLE_TYPES: Tuple[VesselType, ...] = tuple(
    vessel_type for vessel_type in VesselType
    if vessel_type not in NON_SELECTABLE_TYPES
)


def display_name(vessel_type: VesselType) -> str:
    """Return the user-facing label for a vessel type."""
    return DISPLAY_NAMES.get(vessel_type, vessel_type.value)


def parse_vessel_type(token: str) -> Optional[VesselType]:
    """Look up a vessel type by its exact (case-sensitive) token.

    Returns:
        Matching VesselType, or None if the token is not a known type
    """
    try:
        return VesselType(token)
    except ValueError:
        return None
