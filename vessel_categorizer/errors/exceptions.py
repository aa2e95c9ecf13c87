"""Custom exception hierarchy for vessel categorizer errors."""
from typing import Any, Dict, Optional


class VesselCategorizerError(Exception):
    """Base exception for all vessel categorizer errors."""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with message and optional structured details."""
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigError(VesselCategorizerError):
    """Raised when configuration input cannot be loaded at all."""
    pass


class ConfigParseError(ConfigError):
    """Raised when config text is malformed (e.g. unbalanced braces)."""
    
    def __init__(self, message: str, source: str = "<string>", line: Optional[int] = None):
        self.source = source
        self.line = line
        location = f"{source}:{line}" if line is not None else source
        super().__init__(
            f"{location}: {message}",
            details={"source": source, "line": line},
        )
