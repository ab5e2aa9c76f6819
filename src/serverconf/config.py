"""Application settings for serverconf.

Settings are declared with Pydantic's ``BaseSettings`` and ``BaseModel`` and
grouped into ``LoggingSettings`` and ``OutputSettings``, nested within the
main ``Settings`` class. Values are read, in order of precedence, from
keyword arguments, ``SERVERCONF_``-prefixed environment variables, a dotenv
file and finally an optional YAML file.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal, Optional, Type

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from .constants import CONFIG_FILE_NAME, PROJECT_ROOT_MARKER


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """
    A Pydantic settings source that loads variables from a YAML file.
    """

    def __init__(self, settings_cls: Type[BaseSettings], yaml_file: Path | None):
        super().__init__(settings_cls)
        self.yaml_file = yaml_file
        self._data: dict[str, Any] = {}
        if self.yaml_file and self.yaml_file.exists():
            try:
                loaded = yaml.safe_load(self.yaml_file.read_text())
            except (yaml.YAMLError, OSError) as exc:
                logging.warning("Ignoring unreadable config file %s: %s", self.yaml_file, exc)
                loaded = None
            if isinstance(loaded, dict):
                self._data = loaded

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str] | None:
        if not self._data:
            return None
        return (self._data.get(field_name), field_name)

    def __call__(self) -> dict[str, Any]:
        return dict(self._data)


class LoggingSettings(BaseModel):
    """Settings for log verbosity and destination."""

    level: str = Field("INFO", description="Root log level, e.g. 'DEBUG' or 'WARNING'.")
    file: Optional[Path] = Field(
        None, description="Optional file to write logs to in addition to stderr."
    )

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        """Normalize the level name and reject unknown levels."""
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level


class OutputSettings(BaseModel):
    """Settings for how parsed configs are printed."""

    format: Literal["table", "json", "yaml"] = Field(
        "table", description="Output format for parsed configs."
    )
    convert_to_udp: bool = Field(
        False, description="Convert parsed request/tcp configs into udp configs before printing."
    )


class Settings(BaseSettings):
    """
    Main application configuration model.
    """

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)

    config_file: Optional[Path] = Field(default=None, exclude=True)

    model_config = SettingsConfigDict(
        env_prefix="SERVERCONF_", case_sensitive=False, env_nested_delimiter="__"
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        config_file = init_settings.init_kwargs.get("config_file")
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls, yaml_file=config_file),
            file_secret_settings,
        )


def find_project_root(marker: str = PROJECT_ROOT_MARKER) -> Path:
    """
    Find the project root by searching upwards for a marker file.
    """
    current_dir = Path(__file__).resolve().parent
    while True:
        if (current_dir / marker).exists():
            return current_dir
        if current_dir == current_dir.parent:
            break
        current_dir = current_dir.parent
    raise FileNotFoundError(f"Project root marker '{marker}' not found.")


def load_config(path: Path | None = None) -> Settings:
    """
    Load application settings from a YAML file and environment variables.
    """
    config_file = path
    if config_file is None:
        try:
            default_config_path = find_project_root() / CONFIG_FILE_NAME
            if default_config_path.exists():
                config_file = default_config_path
        except FileNotFoundError:
            logging.debug(
                "Could not find project root marker '%s'. Default '%s' will not be loaded.",
                PROJECT_ROOT_MARKER,
                CONFIG_FILE_NAME,
            )
    return Settings(config_file=config_file)
