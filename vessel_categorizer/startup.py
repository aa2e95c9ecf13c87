"""One-time loading of addon config at game startup.

Config layout:
    VesselCategorizer          // master node
    {
        NamingRules            // handled by load_rule_set
        {
            Probe = explorer
        }
    }

A missing master node or ``NamingRules`` child degrades the addon to an
empty rule set instead of failing startup.
"""
from typing import Optional

import structlog

from vessel_categorizer.config import Settings, configure_logging, get_settings
from vessel_categorizer.models.rules import RuleSet
from vessel_categorizer.parsers.config_node import ConfigDatabase
from vessel_categorizer.host.naming import NameCategorizer
from vessel_categorizer.services.classification.loader import load_rule_set

logger = structlog.get_logger(__name__)


def load_naming_rules(
    database: ConfigDatabase,
    settings: Optional[Settings] = None,
) -> RuleSet:
    """Find the naming rules in the config database and load them.

    Args:
        database: Config nodes gathered from the game's config files
        settings: Node names to look for (defaults to get_settings())

    Returns:
        Loaded RuleSet, or an empty one if the config is absent

    Raises:
        ConfigError: If a naming rule entry is malformed
    """
    settings = settings or get_settings()
    logger.info("starting_up", master_node=settings.master_node_name)

    configs = database.get_configs(settings.master_node_name)
    if not configs:
        logger.error(
            "master_config_node_missing",
            master_node=settings.master_node_name,
            impact="naming rules disabled, vessels keep their default type",
        )
        return RuleSet.empty()

    if len(configs) > 1:
        logger.warning(
            "duplicate_master_config_nodes",
            master_node=settings.master_node_name,
            count=len(configs),
            using=configs[0].source,
        )

    master = configs[0].config
    child = master.get_node(settings.naming_rules_node_name)
    if child is None:
        logger.warning(
            "config_child_node_missing",
            master_node=settings.master_node_name,
            child_node=settings.naming_rules_node_name,
        )
        return RuleSet.empty()

    return load_rule_set(child.values)


def load_naming_rules_from_settings(settings: Optional[Settings] = None) -> RuleSet:
    """Scan the configured game data directory and load the naming rules."""
    settings = settings or get_settings()
    database = ConfigDatabase.from_directory(settings.game_data_dir, settings.config_pattern)
    return load_naming_rules(database, settings)


def bootstrap(settings: Optional[Settings] = None) -> NameCategorizer:
    """Configure logging and build the categorizer the flight addon uses.

    Called once when the game reaches its main menu.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.json_logs)
    return NameCategorizer(load_naming_rules_from_settings(settings))
