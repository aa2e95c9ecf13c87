"""Rule-set loading from ordered ``(vessel type, substring)`` entries.

Config example:
    NamingRules
    {
        Probe = explorer
        Station = foo
        Base = bar
    }

Entries are kept in declaration order. An entry naming an unknown vessel
type, or whose substring is empty, is skipped with a warning and the rest
of the entries still load.
"""
from typing import Any, Iterable, List

import structlog

from vessel_categorizer.errors.exceptions import ConfigError
from vessel_categorizer.models.rules import ClassificationRule, RuleSet
from vessel_categorizer.models.vessel_type import parse_vessel_type

logger = structlog.get_logger(__name__)


def _unpack_entry(index: int, entry: Any) -> tuple:
    # A two-character string would otherwise unpack as a pair
    if isinstance(entry, (str, bytes)):
        raise ConfigError(
            f"Naming rule #{index} is not a (name, value) pair: {entry!r}",
            details={"index": index},
        )
    try:
        name, value = entry
    except (TypeError, ValueError) as e:
        raise ConfigError(
            f"Naming rule #{index} is not a (name, value) pair: {entry!r}",
            details={"index": index},
        ) from e

    if not isinstance(name, str) or not isinstance(value, str):
        raise ConfigError(
            f"Naming rule #{index} must pair two strings, got "
            f"({type(name).__name__}, {type(value).__name__})",
            details={"index": index},
        )
    return name, value


def load_rule_set(entries: Iterable[Any]) -> RuleSet:
    """Build a RuleSet from ordered config entries.

    Args:
        entries: Ordered ``(name, value)`` pairs, e.g. tuples or the
            ConfigValue objects of a ``NamingRules`` node

    Returns:
        RuleSet whose rule order matches the entry order

    Raises:
        ConfigError: If an entry is not a pair of strings
    """
    logger.info("loading_naming_rules")
    rules: List[ClassificationRule] = []

    for index, entry in enumerate(entries):
        name, value = _unpack_entry(index, entry)

        vessel_type = parse_vessel_type(name)
        if vessel_type is None:
            logger.warning(
                "invalid_vessel_type",
                vessel_type=name,
                pattern=value,
                index=index,
            )
            continue

        pattern = value.lower()
        if not pattern:
            logger.warning("empty_naming_rule", vessel_type=name, index=index)
            continue

        rules.append(ClassificationRule(pattern=pattern, category=vessel_type))
        logger.info("naming_rule_loaded", vessel_type=name, pattern=pattern)

    logger.info("naming_rules_loaded", count=len(rules))
    return RuleSet(rules=tuple(rules))
