"""Pytest configuration and fixtures for test suite.

This is the root-level conftest.py that provides:
- Python path setup (so we can import vessel_categorizer and tests.fakes)
- Basic environment variable defaults
- Shared fixtures for all tests
"""
import os
import sys
from pathlib import Path

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from vessel_categorizer.config import Settings, get_settings
from vessel_categorizer.models.rules import RuleSet
from vessel_categorizer.services.classification.loader import load_rule_set


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Set up basic test environment variables before any tests run."""
    os.environ.setdefault("VESSEL_CATEGORIZER_LOG_LEVEL", "DEBUG")
    get_settings.cache_clear()
    
    yield
    
    get_settings.cache_clear()


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at an empty temporary GameData directory."""
    game_data = tmp_path / "GameData"
    game_data.mkdir()
    return Settings(game_data_dir=game_data)


@pytest.fixture
def sample_rule_set() -> RuleSet:
    """Rules mirroring a typical NamingRules node."""
    return load_rule_set([
        ("Probe", "explorer"),
        ("Station", "foo"),
        ("Base", "bar"),
        ("Relay", "comsat"),
    ])
