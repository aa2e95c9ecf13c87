"""Editor-side synchronization of vessel type selectors.

When parts are added to a ship after the player has already chosen a
vessel type, the selectors on the new parts must pick up the ship's
existing choice. This only matters once a ship holds more than one part
with a selector (e.g. a second command pod).
"""
from typing import Callable, List, Optional

import structlog

from vessel_categorizer.host.events import GameEvents
from vessel_categorizer.host.protocols import Part, ShipConstruct
from vessel_categorizer.host.selection import VesselTypeSelector

logger = structlog.get_logger(__name__)

ShipProvider = Callable[[], Optional[ShipConstruct]]


def collect_selectors(root: Optional[Part], into: List[VesselTypeSelector]) -> None:
    """Append the first selector of ``root`` and of each descendant to ``into``."""
    if root is None:
        return
    module = VesselTypeSelector.find_first(root)
    if module is not None:
        into.append(module)
    for child in root.children or ():
        collect_selectors(child, into)


def find_first_not_in(
    ship: Optional[ShipConstruct],
    excluded: List[VesselTypeSelector],
) -> Optional[VesselTypeSelector]:
    """First selector on the ship that is not (by identity) in ``excluded``."""
    if ship is None:
        return None
    for part in ship.parts:
        module = VesselTypeSelector.find_first(part)
        if module is None:
            continue
        if any(module is other for other in excluded):
            continue
        return module
    return None


def initialize_selectors(
    new_selectors: List[VesselTypeSelector],
    ship: Optional[ShipConstruct],
) -> bool:
    """Copy the ship's existing selection into newly added selectors.

    Returns:
        True if an existing selector was found and its value copied
    """
    if not new_selectors:
        return False
    existing = find_first_not_in(ship, new_selectors)
    if existing is None:
        return False
    for module in new_selectors:
        module.selection = existing.selection
    logger.debug(
        "selectors_initialized",
        count=len(new_selectors),
        vessel_type=str(existing.selection) if existing.selection is not None else None,
    )
    return True


class EditorCategorization:
    """Editor addon keeping new parts' selectors in line with the ship.

    Example:
        with EditorCategorization(events, lambda: editor.ship):
            ...  # editor session
    """

    def __init__(self, events: GameEvents, ship_provider: ShipProvider):
        self.events = events
        self.ship_provider = ship_provider

    def attach(self) -> None:
        self.events.on_editor_pod_picked.add(self.on_editor_pod_picked)
        self.events.on_editor_part_placed.add(self.on_editor_part_placed)

    def detach(self) -> None:
        self.events.on_editor_pod_picked.remove(self.on_editor_pod_picked)
        self.events.on_editor_part_placed.remove(self.on_editor_part_placed)

    def __enter__(self) -> "EditorCategorization":
        self.attach()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.detach()

    def on_editor_pod_picked(self, part: Part) -> None:
        """Here when the root part of a new ship is picked."""
        to_initialize: List[VesselTypeSelector] = []
        collect_selectors(part, to_initialize)
        initialize_selectors(to_initialize, self.ship_provider())

    def on_editor_part_placed(self, part: Optional[Part]) -> None:
        """Here when a part is placed on the ship.

        Only the part the player placed fires this event, not its children
        or symmetry counterparts, so those are collected here. The host also
        fires it with None when an unattached part is deleted.
        """
        if part is None:
            return

        to_initialize: List[VesselTypeSelector] = []
        collect_selectors(part, to_initialize)
        for counterpart in part.symmetry_counterparts or ():
            if counterpart is not part:
                collect_selectors(counterpart, to_initialize)

        initialize_selectors(to_initialize, self.ship_provider())
