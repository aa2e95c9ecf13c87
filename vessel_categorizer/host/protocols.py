"""Protocol definitions for the host game objects the addon touches.

The host owns these objects and their lifetimes. The addon only reads
and mutates the attributes listed here, so any host binding (or a test
fake) that exposes them satisfies the protocols.
"""
from enum import Enum
from typing import Any, List, Optional, Protocol

from vessel_categorizer.models.vessel_type import VesselType


class VesselSituation(str, Enum):
    """Host vessel situations. Only PRELAUNCH matters to categorization."""
    LANDED = "LANDED"
    SPLASHED = "SPLASHED"
    PRELAUNCH = "PRELAUNCH"
    FLYING = "FLYING"
    SUB_ORBITAL = "SUB_ORBITAL"
    ORBITING = "ORBITING"
    ESCAPING = "ESCAPING"
    DOCKED = "DOCKED"


class Part(Protocol):
    """A part in the host's part tree."""

    modules: List[Any]
    children: List["Part"]
    symmetry_counterparts: Optional[List["Part"]]


class Vessel(Protocol):
    """A launched or loaded craft."""

    vessel_name: str
    vessel_type: VesselType
    situation: VesselSituation
    parts: Optional[List["Part"]]


class ShipConstruct(Protocol):
    """The craft currently being built in the editor."""

    parts: List["Part"]
