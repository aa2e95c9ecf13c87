"""Reader for the host game's nested key/value config format.

Example:
    VesselCategorizer
    {
        NamingRules
        {
            Probe = explorer    // any ship with "explorer" in its name
            Station = outpost
        }
    }

Grammar:
    - ``//`` starts a comment that runs to end of line
    - ``key = value`` adds a value to the enclosing node (split at the
      first ``=``; key and value are trimmed)
    - a bare word names the node opened by the next ``{``, which may sit
      on the same line or a later one
    - ``}`` closes the innermost open node
"""
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, NamedTuple, Optional, Tuple, Union

import structlog

from vessel_categorizer.errors.exceptions import ConfigParseError

logger = structlog.get_logger(__name__)

_BRACE_SPLIT = re.compile(r"([{}])")
_COMMENT = "//"


@dataclass
class ConfigValue:
    """A single ``name = value`` entry."""
    name: str
    value: str

    def __iter__(self) -> Iterator[str]:
        # Lets a value unpack like a (name, value) pair
        yield self.name
        yield self.value


@dataclass
class ConfigNode:
    """A named node holding ordered values and child nodes."""
    name: str = ""
    values: List[ConfigValue] = field(default_factory=list)
    nodes: List["ConfigNode"] = field(default_factory=list)

    def get_node(self, name: str) -> Optional["ConfigNode"]:
        """First child node with the given name, or None."""
        for node in self.nodes:
            if node.name == name:
                return node
        return None

    def get_nodes(self, name: str) -> List["ConfigNode"]:
        """All child nodes with the given name, in declaration order."""
        return [node for node in self.nodes if node.name == name]

    def has_node(self, name: str) -> bool:
        return self.get_node(name) is not None

    def get_value(self, name: str) -> Optional[str]:
        """First value with the given name, or None."""
        for value in self.values:
            if value.name == name:
                return value.value
        return None

    def get_values(self, name: str) -> List[str]:
        return [value.value for value in self.values if value.name == name]

    def has_value(self, name: str) -> bool:
        return self.get_value(name) is not None

    def add_value(self, name: str, value: str) -> ConfigValue:
        entry = ConfigValue(name=name, value=value)
        self.values.append(entry)
        return entry

    def add_node(self, node: Union[str, "ConfigNode"]) -> "ConfigNode":
        """Append a child node (or a new empty one with the given name)."""
        if isinstance(node, str):
            node = ConfigNode(name=node)
        self.nodes.append(node)
        return node


class UrlConfig(NamedTuple):
    """A top-level node together with the file it was read from."""
    source: str
    config: ConfigNode


def _strip_comment(line: str) -> str:
    index = line.find(_COMMENT)
    if index >= 0:
        return line[:index]
    return line


def parse_config_text(text: str, source: str = "<string>") -> ConfigNode:
    """Parse config text into an unnamed root node.

    Args:
        text: Raw config file contents
        source: Label used in error messages and logs (usually a file path)

    Returns:
        Root ConfigNode whose children are the top-level nodes of the text

    Raises:
        ConfigParseError: If braces are unbalanced
    """
    root = ConfigNode()
    # (node, line it was opened on)
    stack: List[Tuple[ConfigNode, int]] = [(root, 0)]
    pending_name: Optional[str] = None
    pending_line = 0

    def drop_pending() -> None:
        nonlocal pending_name
        if pending_name is not None:
            logger.warning(
                "stray_config_token",
                token=pending_name,
                source=source,
                line=pending_line,
            )
            pending_name = None

    for line_no, raw_line in enumerate(text.lstrip("\ufeff").splitlines(), start=1):
        for token in _BRACE_SPLIT.split(_strip_comment(raw_line)):
            token = token.strip()
            if not token:
                continue

            if token == "{":
                node = stack[-1][0].add_node(pending_name or "")
                stack.append((node, line_no))
                pending_name = None
            elif token == "}":
                drop_pending()
                if len(stack) == 1:
                    raise ConfigParseError("unexpected '}'", source=source, line=line_no)
                stack.pop()
            elif "=" in token:
                drop_pending()
                name, _, value = token.partition("=")
                stack[-1][0].add_value(name.strip(), value.strip())
            else:
                drop_pending()
                pending_name = token
                pending_line = line_no

    drop_pending()
    if len(stack) > 1:
        node, opened_on = stack[-1]
        raise ConfigParseError(
            f"node '{node.name}' is never closed",
            source=source,
            line=opened_on,
        )
    return root


class ConfigDatabase:
    """Collection of top-level config nodes gathered from config files.

    Example:
        database = ConfigDatabase.from_directory(Path("GameData"))
        for url_config in database.get_configs("VesselCategorizer"):
            print(url_config.source, url_config.config.name)
    """

    def __init__(self) -> None:
        self._configs: List[UrlConfig] = []

    @classmethod
    def from_directory(cls, root: Path, pattern: str = "**/*.cfg") -> "ConfigDatabase":
        database = cls()
        database.load_directory(root, pattern)
        return database

    def load_directory(self, root: Path, pattern: str = "**/*.cfg") -> int:
        """Load every config file under ``root`` matching ``pattern``.

        Files are read in sorted path order so that node order is stable.
        A file that cannot be read or parsed is logged and skipped.

        Returns:
            Number of files loaded successfully
        """
        root = Path(root)
        if not root.is_dir():
            logger.warning("config_directory_missing", path=str(root))
            return 0

        loaded = 0
        for path in sorted(p for p in root.glob(pattern) if p.is_file()):
            try:
                self.load_file(path)
            except (ConfigParseError, OSError, UnicodeDecodeError) as e:
                logger.error("config_file_skipped", path=str(path), error=str(e))
                continue
            loaded += 1

        logger.info(
            "config_directory_loaded",
            path=str(root),
            files=loaded,
            nodes=len(self._configs),
        )
        return loaded

    def load_file(self, path: Path) -> int:
        """Parse one file and register its top-level nodes.

        Raises:
            ConfigParseError: If the file is malformed
            OSError: If the file cannot be read
        """
        path = Path(path)
        return self.add_text(path.read_text(encoding="utf-8"), source=str(path))

    def add_text(self, text: str, source: str = "<string>") -> int:
        """Parse config text and register its top-level nodes.

        Returns:
            Number of top-level nodes added
        """
        root = parse_config_text(text, source=source)
        for node in root.nodes:
            self._configs.append(UrlConfig(source=source, config=node))
        return len(root.nodes)

    def get_configs(self, name: str) -> List[UrlConfig]:
        """All top-level nodes with the given name, in load order."""
        return [url for url in self._configs if url.config.name == name]

    def __len__(self) -> int:
        return len(self._configs)
