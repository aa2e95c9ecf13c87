"""Flight-side categorization of vessels at launch.

When a new vessel reaches the launch pad its type is chosen, in order:
    1. Manual selection made in the editor (VesselTypeSelector)
    2. Naming rules from config (NameCategorizer)
    3. Otherwise the host's own choice is left alone
"""
from enum import Enum
from typing import Optional

import structlog

from vessel_categorizer.host import selection
from vessel_categorizer.host.events import GameEvents
from vessel_categorizer.host.protocols import Vessel, VesselSituation
from vessel_categorizer.host.naming import NameCategorizer

logger = structlog.get_logger(__name__)


class CategorizationMethod(str, Enum):
    """How a launched vessel's type was determined."""
    MANUAL = "manual"
    NAME = "name"
    NONE = "none"


class FlightCategorizer:
    """Flight addon assigning vessel types on launch.

    Example:
        categorizer = NameCategorizer(rule_set)
        with FlightCategorizer(events, categorizer):
            ...  # flight scene
    """

    def __init__(self, events: GameEvents, name_categorizer: NameCategorizer):
        self.events = events
        self.name_categorizer = name_categorizer

    def attach(self) -> None:
        self.events.on_vessel_change.add(self.on_vessel_change)

    def detach(self) -> None:
        self.events.on_vessel_change.remove(self.on_vessel_change)

    def __enter__(self) -> "FlightCategorizer":
        self.attach()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.detach()

    def on_vessel_change(self, vessel: Optional[Vessel]) -> Optional[CategorizationMethod]:
        """Here when switching to a different vessel, loading, or launching.

        Only a vessel sitting in PRELAUNCH is a fresh launch; anything else
        is ignored and None is returned.
        """
        if vessel is None or vessel.situation != VesselSituation.PRELAUNCH:
            return None
        return self.on_vessel_launch(vessel)

    def on_vessel_launch(self, vessel: Vessel) -> CategorizationMethod:
        if selection.try_categorize(vessel):
            return CategorizationMethod.MANUAL

        if self.name_categorizer.try_categorize(vessel):
            return CategorizationMethod.NAME

        logger.info("vessel_type_unchanged", vessel=vessel.vessel_name)
        return CategorizationMethod.NONE
