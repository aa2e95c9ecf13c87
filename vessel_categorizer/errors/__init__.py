"""Error handling module."""
from vessel_categorizer.errors.exceptions import (
    VesselCategorizerError,
    ConfigError,
    ConfigParseError,
)

__all__ = [
    "VesselCategorizerError",
    "ConfigError",
    "ConfigParseError",
]
