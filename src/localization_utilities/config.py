"""
Configuration model for localization loading and merging.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigError

logger = logging.getLogger("localization-utilities")

ENV_MODS_DIR = "LOCALIZATION_MODS_DIR"
ENV_TABLE_FILENAME = "LOCALIZATION_TABLE_FILENAME"
ENV_CONFIG_FILE = "LOCALIZATION_CONFIG"


class LocalizationConfig(BaseModel):
    """Settings for where the translation table lives and how it is merged.

    The language names and sentinel default to the values the shared
    translation table has always used; changing them only makes sense for a
    table that was created with the same settings.
    """

    mods_dir: Path = Field(
        default=Path("Mods"),
        description="Mods/data directory holding the shared translation table"
    )
    table_filename: str = Field(
        default="Localization.json",
        description="File name of the shared translation table inside mods_dir"
    )
    source_language: str = Field(
        default="English",
        description="Language carried over into the table for first-seen keys"
    )
    preserved_language: str = Field(
        default="Simplified Chinese",
        description="Language whose curated table values win over payload values"
    )
    sentinel: str = Field(
        default="null",
        description="Placeholder marking an untranslated preserved_language slot"
    )
    indent: int = Field(
        default=4,
        ge=0,
        le=8,
        description="Indentation used when writing the table"
    )

    @field_validator("table_filename")
    @classmethod
    def validate_table_filename(cls, v: str) -> str:
        """Table filename must be a bare .json file name."""
        if not v or Path(v).name != v:
            raise ValueError("table_filename must be a file name without directories")
        if not v.lower().endswith(".json"):
            raise ValueError("table_filename must end with .json")
        return v

    @field_validator("source_language", "preserved_language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("language names must not be blank")
        return v

    @property
    def table_path(self) -> Path:
        """Full path of the shared translation table."""
        return self.mods_dir / self.table_filename

    @classmethod
    def from_yaml(cls, path: Path | str) -> "LocalizationConfig":
        """Load settings from a YAML file.

        The file may hold the settings at top level or under a
        ``localization:`` key.

        Raises:
            ConfigError: If the file cannot be read, parsed or validated
        """
        return cls._build(_read_yaml(Path(path)), source=str(path))

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "LocalizationConfig":
        """Load settings from the environment, optionally reading .env first.

        ``LOCALIZATION_CONFIG`` names an optional YAML file whose values are
        applied first; ``LOCALIZATION_MODS_DIR`` and
        ``LOCALIZATION_TABLE_FILENAME`` override them.
        """
        if dotenv and not load_dotenv(find_dotenv(usecwd=True)):
            logger.debug("No .env file found, using process environment only")

        data: dict[str, Any] = {}
        config_file = os.getenv(ENV_CONFIG_FILE)
        if config_file:
            data.update(_read_yaml(Path(config_file)))

        mods_dir = os.getenv(ENV_MODS_DIR)
        if mods_dir:
            data["mods_dir"] = mods_dir
        table_filename = os.getenv(ENV_TABLE_FILENAME)
        if table_filename:
            data["table_filename"] = table_filename

        return cls._build(data, source="environment")

    @classmethod
    def _build(cls, data: dict[str, Any], source: str) -> "LocalizationConfig":
        try:
            config = cls(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid localization settings from {source}: {e}") from e
        logger.debug(f"Localization table path: {config.table_path}")
        return config


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Malformed YAML in config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    if "localization" in data:
        data = data["localization"] or {}
        if not isinstance(data, dict):
            raise ConfigError(f"'localization' in {path} must be a mapping")
    return data
