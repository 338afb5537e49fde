"""
wsframe-inspector Configuration
===============================

This module handles configuration loading for the command-line tool.

Configuration Sources (in order of precedence):
    1. Command-line flags (applied by main.py)
    2. Environment variables
    3. wsframe.yaml file
    4. Default values (lowest priority)

Environment Variable Mapping:
    WSFRAME_INPUT_FORMAT -> input.format
    WSFRAME_THEME        -> render.theme
    WSFRAME_COLOR        -> render.color
    NO_COLOR             -> render.color = false (any value)
    WSFRAME_LOG_LEVEL    -> logging.level

Example:
    from wsframe_inspector.config import load_config

    settings = load_config()
    print(settings.render.theme)
"""

import os
import logging
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field

from wsframe_inspector.rendering.theme import StyleTheme


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Models
# =============================================================================

class InputConfig(BaseModel):
    """Input decoding configuration."""

    format: Literal["auto", "base64", "hex"] = Field(
        default="auto",
        description="Encoding of frame text: auto, base64 or hex",
    )


class RenderConfig(BaseModel):
    """Diagram rendering configuration."""

    theme: str = Field(default="default", description="Built-in theme name")
    color: bool = Field(default=True, description="Emit ANSI colours")
    summary: bool = Field(default=False, description="Print a one-line frame summary")
    raw: bool = Field(default=False, description="Print a qword dump of the input")
    custom_theme: Optional[StyleTheme] = Field(
        default=None,
        description="Inline theme definition, overrides the built-in theme",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="WARNING", description="Log level")
    format: str = Field(default="text", description="Log format: json or text")


class Settings(BaseModel):
    """
    Main settings class for wsframe-inspector.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    input: InputConfig = Field(default_factory=InputConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

_TRUE_VALUES = {"1", "true", "yes", "on"}


def default_search_paths() -> list:
    return [
        Path("wsframe.yaml"),
        Path("wsframe.yml"),
        Path.home() / ".config" / "wsframe" / "wsframe.yaml",
    ]


def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values

    Args:
        config_path: Path to wsframe.yaml. If None, searches common locations.

    Returns:
        Settings: Loaded configuration

    Raises:
        FileNotFoundError: If config_path is given but does not exist
        ValueError: If the file is not valid YAML or does not hold a mapping
    """
    if config_path is not None and not Path(config_path).exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    # Find config file
    if config_path is None:
        for path in default_search_paths():
            if path.exists():
                config_path = str(path)
                break

    # Load from YAML if exists
    config_data = {}
    if config_path:
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r") as f:
            try:
                config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid config file {config_path}: {e}") from e
        if not isinstance(config_data, dict):
            raise ValueError(
                f"Invalid config file {config_path}: expected a mapping at the top level"
            )
    else:
        logger.debug("No config file found, using defaults and environment variables")

    # Apply environment variable overrides
    _apply_env_overrides(config_data)

    return Settings.model_validate(config_data)


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    # Input settings
    if env_format := os.environ.get("WSFRAME_INPUT_FORMAT"):
        config_data.setdefault("input", {})["format"] = env_format.lower()

    # Render settings
    if env_theme := os.environ.get("WSFRAME_THEME"):
        config_data.setdefault("render", {})["theme"] = env_theme
    if env_color := os.environ.get("WSFRAME_COLOR"):
        config_data.setdefault("render", {})["color"] = env_color.lower() in _TRUE_VALUES
    if "NO_COLOR" in os.environ:
        config_data.setdefault("render", {})["color"] = False

    # Logging settings
    if env_log := os.environ.get("WSFRAME_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.WARNING)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
