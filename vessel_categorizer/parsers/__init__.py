"""Parsers for host config text."""
from vessel_categorizer.parsers.config_node import (
    ConfigValue,
    ConfigNode,
    UrlConfig,
    ConfigDatabase,
    parse_config_text,
)

__all__ = [
    "ConfigValue",
    "ConfigNode",
    "UrlConfig",
    "ConfigDatabase",
    "parse_config_text",
]
