"""Name-based vessel classification.

Suggests a vessel type from the vessel's name using configured rules. With
a rule ``Probe = explorer``, any vessel with "explorer" anywhere in its
name (case-insensitive) is a Probe, whatever parts it contains.

More than one rule may match a name: with ``Station = foo`` and
``Base = bar``, "Foobar" matches both. Declaration order decides, first
rule wins.

Example:
    rule_set = load_rule_set([("Probe", "explorer")])
    classify(rule_set, "Explorer-1")
    # VesselType.PROBE
"""
from enum import Enum
from typing import Optional, Union

from vessel_categorizer.models.rules import ClassificationRule, RuleSet
from vessel_categorizer.models.vessel_type import VesselType


class NoMatch(Enum):
    """Outcome of classifying a name that no rule applies to."""
    NO_MATCH = "no_match"

    def __bool__(self) -> bool:
        return False


NO_MATCH = NoMatch.NO_MATCH


def canonicalize(name: str) -> str:
    """Fold a name the same way rule patterns are folded."""
    return name.lower()


def match_rule(rule_set: RuleSet, candidate_name: str) -> Optional[ClassificationRule]:
    """Return the first rule whose pattern occurs in the name, or None."""
    canonical_name = canonicalize(candidate_name)
    for rule in rule_set:
        if rule.pattern in canonical_name:
            return rule
    return None


def classify(rule_set: RuleSet, candidate_name: str) -> Union[VesselType, NoMatch]:
    """Classify a name against a rule set.

    Args:
        rule_set: Ordered naming rules
        candidate_name: Vessel name to classify

    Returns:
        Category of the first matching rule, or NO_MATCH
    """
    rule = match_rule(rule_set, candidate_name)
    if rule is None:
        return NO_MATCH
    return rule.category
