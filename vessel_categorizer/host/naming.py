"""Applies the name classifier to host vessels."""
from typing import Optional

import structlog

from vessel_categorizer.host.protocols import Vessel
from vessel_categorizer.models.rules import RuleSet
from vessel_categorizer.services.classification.classifier import match_rule

logger = structlog.get_logger(__name__)


class NameCategorizer:
    """Applies naming rules to host vessels.

    Owns the current RuleSet. ``reload`` swaps in a new one with a single
    assignment; rule sets themselves are never mutated.
    """

    def __init__(self, rule_set: Optional[RuleSet] = None):
        self.rule_set = rule_set if rule_set is not None else RuleSet.empty()

    def reload(self, rule_set: RuleSet) -> None:
        """Replace the active rule set."""
        self.rule_set = rule_set
        logger.info("naming_rules_replaced", count=len(rule_set))

    def try_categorize(self, vessel: Vessel) -> bool:
        """Set the vessel's type from its name.

        Returns:
            True if a rule matched and the type was set, False if the
            name was unrecognized and the type was left alone
        """
        rule = match_rule(self.rule_set, vessel.vessel_name)
        if rule is None:
            return False

        logger.info(
            "vessel_type_set",
            vessel=vessel.vessel_name,
            vessel_type=str(rule.category),
            reason="name_match",
            pattern=rule.pattern,
        )
        vessel.vessel_type = rule.category
        return True
