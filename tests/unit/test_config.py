"""Unit tests for settings and logging configuration."""
import pytest
import structlog
from pydantic import ValidationError

from vessel_categorizer.config import Settings, configure_logging, get_settings


@pytest.fixture
def restore_structlog():
    """Put structlog back to its defaults after reconfiguring it."""
    yield
    structlog.reset_defaults()


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("VESSEL_CATEGORIZER_LOG_LEVEL", raising=False)

        settings = Settings()

        assert settings.master_node_name == "VesselCategorizer"
        assert settings.naming_rules_node_name == "NamingRules"
        assert settings.config_pattern == "**/*.cfg"
        assert settings.log_level == "INFO"
        assert settings.json_logs is False

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("VESSEL_CATEGORIZER_GAME_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("VESSEL_CATEGORIZER_JSON_LOGS", "true")
        monkeypatch.setenv("VESSEL_CATEGORIZER_LOG_LEVEL", "WARNING")

        settings = Settings()

        assert settings.game_data_dir == tmp_path
        assert settings.json_logs is True
        assert settings.log_level == "WARNING"

    def test_rejects_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("VESSEL_CATEGORIZER_LOG_LEVEL", "CHATTY")

        with pytest.raises(ValidationError):
            Settings()

    @pytest.mark.parametrize(
        "pattern",
        ["/opt/ksp/GameData/*.cfg", "C:\\KSP\\GameData\\*.cfg", "GameData//*.cfg", "configs/"],
    )
    def test_rejects_unusable_config_pattern(self, monkeypatch, pattern):
        """Absolute or empty-segment globs fail at load, not during the scan."""
        monkeypatch.setenv("VESSEL_CATEGORIZER_CONFIG_PATTERN", pattern)

        with pytest.raises(ValidationError):
            Settings()

    def test_accepts_relative_config_pattern(self, monkeypatch):
        monkeypatch.setenv("VESSEL_CATEGORIZER_CONFIG_PATTERN", "VesselCategorizer/*.cfg")

        assert Settings().config_pattern == "VesselCategorizer/*.cfg"

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()

        assert get_settings() is get_settings()


class TestConfigureLogging:

    def test_console_rendering(self, restore_structlog):
        configure_logging("DEBUG")

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_json_rendering(self, restore_structlog):
        configure_logging("INFO", json_logs=True)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert structlog.get_config()["logger_factory"].__class__ is structlog.stdlib.LoggerFactory
