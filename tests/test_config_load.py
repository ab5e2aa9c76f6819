from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from serverconf.config import Settings, find_project_root, load_config


def test_load_defaults(tmp_path):
    """Test that default settings are loaded correctly."""
    p = tmp_path / "serverconf.yaml"
    p.write_text("{}")
    loaded = load_config(p)
    assert loaded.logging.level == "INFO"
    assert loaded.logging.file is None
    assert loaded.output.format == "table"
    assert loaded.output.convert_to_udp is False


def test_load_custom_values(tmp_path):
    """Test that custom values from a YAML file override defaults."""
    p = tmp_path / "serverconf.yaml"
    p.write_text(
        yaml.safe_dump(
            {
                "logging": {"level": "debug", "file": "logs/serverconf.log"},
                "output": {"format": "json", "convert_to_udp": True},
            }
        )
    )
    loaded = load_config(p)
    assert loaded.logging.level == "DEBUG"
    assert loaded.logging.file == Path("logs/serverconf.log")
    assert loaded.output.format == "json"
    assert loaded.output.convert_to_udp is True


def test_load_invalid_yaml_uses_defaults(tmp_path):
    """Test that an invalid YAML file results in default settings."""
    p = tmp_path / "bad.yaml"
    p.write_text(": { invalid }")
    settings = load_config(p)
    assert settings.output.format == "table"


def test_file_not_found_uses_defaults():
    """Test that a missing config file results in default settings."""
    settings = load_config(Path("non_existent_config.yaml"))
    assert settings.logging.level == "INFO"


def test_env_variable_override(tmp_path, monkeypatch):
    """Test that environment variables override YAML settings."""
    p = tmp_path / "serverconf.yaml"
    p.write_text(yaml.safe_dump({"output": {"format": "yaml"}}))
    monkeypatch.setenv("SERVERCONF_OUTPUT__FORMAT", "json")
    monkeypatch.setenv("SERVERCONF_LOGGING__LEVEL", "warning")

    loaded = load_config(p)
    assert loaded.output.format == "json"
    assert loaded.logging.level == "WARNING"


def test_invalid_values_are_rejected():
    with pytest.raises(ValidationError):
        Settings(output={"format": "xml"})
    with pytest.raises(ValidationError):
        Settings(logging={"level": "LOUD"})


def test_find_project_root_missing_marker():
    with pytest.raises(FileNotFoundError):
        find_project_root(marker="definitely-not-a-real-marker.file")
