"""Part module letting the player pick a vessel type in the editor.

Every selector on a ship carries the same value: changing one copies the
new value to all others. At launch the value is read once, applied to the
vessel and the selectors are stripped from the vessel's parts.

``selection`` is None for "Default" (leave the type to other strategies).
The index encoding (0 = Default, n = n-th selectable type) exists only
for the editor's cycle control and for saved craft files.
"""
from typing import List, Optional

import structlog

from vessel_categorizer.host.protocols import Part, ShipConstruct, Vessel
from vessel_categorizer.models.vessel_type import (
    NON_SELECTABLE_TYPES,
    SELECTABLE_TYPES,
    VesselType,
    display_name,
)
from vessel_categorizer.parsers.config_node import ConfigNode

logger = structlog.get_logger(__name__)

PERSISTENT_FIELD = "vesselTypeSelection"
DEFAULT_OPTION_TEXT = "Default"


def option_texts() -> List[str]:
    """Labels for the editor cycle control, in index order."""
    return [DEFAULT_OPTION_TEXT] + [display_name(t) for t in SELECTABLE_TYPES]


def selection_to_index(selection: Optional[VesselType]) -> int:
    if selection is None:
        return 0
    return SELECTABLE_TYPES.index(selection) + 1


def index_to_selection(index: int) -> Optional[VesselType]:
    """Decode a cycle index.

    Raises:
        ValueError: If the index is outside the option list
    """
    if index < 0 or index > len(SELECTABLE_TYPES):
        raise ValueError(
            f"Selection index {index} out of range 0..{len(SELECTABLE_TYPES)}"
        )
    if index == 0:
        return None
    return SELECTABLE_TYPES[index - 1]


class VesselTypeSelector:
    """Vessel type selection stored on a part.

    Attributes:
        selection: Chosen vessel type, or None for "Default"
    """

    def __init__(self, selection: Optional[VesselType] = None):
        self.selection = self._validated(selection)
        self._trigger_suppressed = False

    @staticmethod
    def _validated(selection: Optional[VesselType]) -> Optional[VesselType]:
        if selection is not None and selection in NON_SELECTABLE_TYPES:
            raise ValueError(f"{selection} cannot be selected for a craft")
        return selection

    @property
    def selection_index(self) -> int:
        return selection_to_index(self.selection)

    def select(self, selection: Optional[VesselType], ship: Optional[ShipConstruct] = None) -> None:
        """Set the selection and propagate it to the other selectors on ``ship``."""
        self.selection = self._validated(selection)
        self.on_selection_changed(ship)

    def select_index(self, index: int, ship: Optional[ShipConstruct] = None) -> None:
        self.select(index_to_selection(index), ship)

    def on_selection_changed(self, ship: Optional[ShipConstruct]) -> None:
        """Copy this selector's value to every other selector on the ship.

        Copies are made with the receiving selector's trigger suppressed,
        so they do not propagate again.
        """
        if self._trigger_suppressed or ship is None:
            return
        for part in ship.parts:
            if part is None:
                continue
            for module in part.modules:
                if not isinstance(module, VesselTypeSelector) or module is self:
                    continue
                module._trigger_suppressed = True
                try:
                    module.select(self.selection, ship)
                finally:
                    module._trigger_suppressed = False

    def on_save(self, node: ConfigNode) -> None:
        node.add_value(PERSISTENT_FIELD, str(self.selection_index))

    def on_load(self, node: ConfigNode) -> None:
        """Restore the selection from a saved module node.

        Missing, non-numeric or out-of-range values fall back to Default.
        """
        raw = node.get_value(PERSISTENT_FIELD)
        if raw is None:
            self.selection = None
            return
        try:
            self.selection = index_to_selection(int(raw))
        except ValueError:
            logger.warning("invalid_saved_selection", value=raw)
            self.selection = None

    @staticmethod
    def find_first(part: Optional[Part]) -> Optional["VesselTypeSelector"]:
        """First selector module on a part, or None."""
        if part is None:
            return None
        for module in part.modules:
            if isinstance(module, VesselTypeSelector):
                return module
        return None


def try_categorize(vessel: Optional[Vessel]) -> bool:
    """Apply the player's editor selection to a vessel.

    The first selector found (parts order, then modules order) supplies the
    selection. All selectors are then removed from the vessel's parts since
    they have served their purpose.

    Returns:
        True if the vessel type was set, False if there was no selector or
        the selection was "Default"
    """
    if vessel is None or vessel.parts is None:
        return False

    found = False
    selection: Optional[VesselType] = None
    for part in vessel.parts:
        if part is None:
            continue
        selectors = [m for m in part.modules if isinstance(m, VesselTypeSelector)]
        if selectors and not found:
            found = True
            selection = selectors[0].selection
        if selectors:
            part.modules[:] = [m for m in part.modules if not isinstance(m, VesselTypeSelector)]

    if selection is None:
        return False

    logger.info(
        "vessel_type_set",
        vessel=vessel.vessel_name,
        vessel_type=str(selection),
        reason="manual_selection",
    )
    vessel.vessel_type = selection
    return True
