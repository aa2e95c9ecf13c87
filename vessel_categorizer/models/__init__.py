"""Domain models: vessel types and classification rules."""
from vessel_categorizer.models.vessel_type import (
    VesselType,
    DISPLAY_NAMES,
    NON_SELECTABLE_TYPES,
    SELECTABLE_TYPES,
    display_name,
    parse_vessel_type,
)
from vessel_categorizer.models.rules import (
    ClassificationRule,
    RuleSet,
)

__all__ = [
    "VesselType",
    "DISPLAY_NAMES",
    "NON_SELECTABLE_TYPES",
    "SELECTABLE_TYPES",
    "display_name",
    "parse_vessel_type",
    "ClassificationRule",
    "RuleSet",
]
