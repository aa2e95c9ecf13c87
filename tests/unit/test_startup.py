"""Unit tests for startup loading of naming rules."""
import pytest
from structlog.testing import capture_logs

from vessel_categorizer.errors.exceptions import ConfigError
from vessel_categorizer.models.vessel_type import VesselType
from vessel_categorizer.parsers.config_node import ConfigDatabase
from vessel_categorizer.services.classification import NO_MATCH, classify
from vessel_categorizer.startup import (
    bootstrap,
    load_naming_rules,
    load_naming_rules_from_settings,
)

MOD_CONFIG = """
VesselCategorizer
{
    NamingRules
    {
        Probe = explorer
        Bogus = nothing
        Station = foo
        Base = bar
    }
}
"""


def _database(text: str) -> ConfigDatabase:
    database = ConfigDatabase()
    database.add_text(text, source="VesselCategorizer.cfg")
    return database


class TestLoadNamingRules:
    """Test load_naming_rules() against a config database."""

    def test_loads_rules_from_master_node(self, settings):
        rule_set = load_naming_rules(_database(MOD_CONFIG), settings)

        assert [rule.category for rule in rule_set] == [
            VesselType.PROBE,
            VesselType.STATION,
            VesselType.BASE,
        ]
        assert classify(rule_set, "Foobar") == VesselType.STATION

    def test_missing_master_node_degrades_to_empty(self, settings):
        """No master node: error logged, classifier always returns NO_MATCH."""
        with capture_logs() as logs:
            rule_set = load_naming_rules(_database("Unrelated\n{\n}\n"), settings)

        assert len(rule_set) == 0
        assert classify(rule_set, "Explorer") is NO_MATCH
        errors = [log for log in logs if log["log_level"] == "error"]
        assert [log["event"] for log in errors] == ["master_config_node_missing"]

    def test_missing_naming_rules_child(self, settings):
        with capture_logs() as logs:
            rule_set = load_naming_rules(_database("VesselCategorizer\n{\n}\n"), settings)

        assert len(rule_set) == 0
        missing = [log for log in logs if log["event"] == "config_child_node_missing"]
        assert len(missing) == 1
        assert missing[0]["log_level"] == "warning"
        assert missing[0]["child_node"] == "NamingRules"

    def test_first_master_node_wins(self, settings):
        database = _database(MOD_CONFIG)
        database.add_text(
            "VesselCategorizer\n{\nNamingRules\n{\nRover = explorer\n}\n}\n",
            source="zz_override.cfg",
        )

        with capture_logs() as logs:
            rule_set = load_naming_rules(database, settings)

        assert rule_set[0].category == VesselType.PROBE
        assert any(log["event"] == "duplicate_master_config_nodes" for log in logs)

    def test_custom_node_names(self, settings):
        settings = settings.model_copy(update={
            "master_node_name": "MyAddon",
            "naming_rules_node_name": "Rules",
        })
        database = _database("MyAddon\n{\nRules\n{\nPlane = jet\n}\n}\n")

        rule_set = load_naming_rules(database, settings)

        assert classify(rule_set, "Jet Fighter") == VesselType.PLANE

    def test_malformed_entries_propagate(self, settings):
        """ConfigError from the rule loader is not swallowed."""
        database = _database(MOD_CONFIG)
        master = database.get_configs("VesselCategorizer")[0].config
        master.get_node("NamingRules").values.append(("Probe",))

        with pytest.raises(ConfigError):
            load_naming_rules(database, settings)


class TestLoadNamingRulesFromSettings:
    """Test loading straight from the game data directory."""

    def test_scans_game_data_dir(self, settings):
        mod_dir = settings.game_data_dir / "VesselCategorizer"
        mod_dir.mkdir()
        (mod_dir / "VesselCategorizer.cfg").write_text(MOD_CONFIG)

        rule_set = load_naming_rules_from_settings(settings)

        assert len(rule_set) == 3
        assert classify(rule_set, "EXPLORER-1") == VesselType.PROBE

    def test_empty_game_data_dir(self, settings):
        rule_set = load_naming_rules_from_settings(settings)

        assert len(rule_set) == 0


class TestBootstrap:

    def test_builds_categorizer_and_configures_logging(self, settings, monkeypatch):
        calls = []
        monkeypatch.setattr(
            "vessel_categorizer.startup.configure_logging",
            lambda level, json_logs: calls.append((level, json_logs)),
        )
        mod_dir = settings.game_data_dir / "VesselCategorizer"
        mod_dir.mkdir()
        (mod_dir / "VesselCategorizer.cfg").write_text(MOD_CONFIG)

        categorizer = bootstrap(settings)

        assert calls == [(settings.log_level, settings.json_logs)]
        assert len(categorizer.rule_set) == 3
