"""Configuration management for requisite using Pydantic models."""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)


class LabelConfig(BaseModel):
    """Default labels used in messages when the caller gives none."""
    object: str = "Object"
    value: str = "Value"
    string: str = "String"
    collection: str = "Collection"
    map: str = "Map"
    array: str = "Array"
    iterable: str = "Iterable"
    path: str = "Path"
    file: str = "File"
    directory: str = "Directory"
    duration: str = "Duration"
    date: str = "Date"
    time: str = "Time"
    date_time: str = Field(alias="dateTime", default="Date Time")

    @field_validator("*")
    @classmethod
    def validate_not_blank(cls, v):
        if not v or not v.strip():
            raise ValueError("labels must not be blank")
        return v

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class MessageConfig(BaseModel):
    """Message rendering configuration section."""
    contents_limit: int | None = Field(alias="contentsLimit", default=None)

    @field_validator("contents_limit")
    @classmethod
    def validate_contents_limit(cls, v):
        if v is not None and v < 8:
            raise ValueError(f"contents_limit must be >= 8, got: {v}")
        return v

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class RequisiteConfig(BaseModel):
    """Complete requisite configuration model."""
    labels: LabelConfig = Field(default_factory=LabelConfig)
    messages: MessageConfig = Field(default_factory=MessageConfig)

    model_config = ConfigDict(extra="forbid")


_active_config = RequisiteConfig()


def get_config() -> RequisiteConfig:
    """Return the configuration currently used for messages."""
    return _active_config


def configure(config: RequisiteConfig | None = None) -> RequisiteConfig:
    """Replace the active configuration.

    Args:
        config: New configuration, or None to restore the defaults

    Returns:
        The configuration that was active before the call
    """
    global _active_config
    previous = _active_config
    _active_config = config if config is not None else RequisiteConfig()
    logger.debug(f"Active configuration replaced: {_active_config.model_dump()}")
    return previous


def load_config(config_path: str | Path) -> RequisiteConfig:
    """Load configuration from a JSON file with fallback to defaults.

    Args:
        config_path: Path to the configuration file

    Returns:
        RequisiteConfig: Loaded and validated configuration

    Raises:
        ValueError: If the file is not valid JSON or the configuration is invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        logger.debug(f"No configuration at {config_path}, using defaults")
        return RequisiteConfig()

    try:
        with open(config_path, encoding="utf-8") as f:
            config_data = json.load(f)
        config = RequisiteConfig(**config_data)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {config_path}: {e}")
    except Exception as e:
        raise ValueError(f"Failed to load config from {config_path}: {e}")

    logger.debug(f"Loaded configuration from {config_path}")
    return config
