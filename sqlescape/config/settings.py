"""
settings.py

This module provides application configuration management for sqlescape.

Features:
- Centralized application configuration using Pydantic settings
- Constants for application-wide use
- Loading of user-declared pass-through keywords from a JSON file

Usage:
Import appsettings for application configuration values.
"""

import json
from pathlib import Path
from typing import Final
from appdirs import user_config_dir
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.console import Console
from sqlescape.lib.log import LOG
from sqlescape.lib.parser.handlers import EscapeHandler, PassthruEscapeHandler
from sqlescape.models.dataModel import HandlerSpec

# Console instance for rich output
console: Final[Console] = Console()

# Set up the configuration directory and file using appdirs
CONFIG_DIR: Final[Path] = Path(user_config_dir("sqlescape", ""))
HANDLERS_FILE: Final[Path] = CONFIG_DIR / "handlers.json"


class App(BaseSettings):
    """
    Application settings model.

    Settings can be overridden through environment variables with ESQ_ prefix.

    Attributes:
        beQuiet: Suppress detailed logging output
        detailedOutput: Print a summary panel after each CLI run
        handlersFile: JSON file declaring extra pass-through keywords
    """

    beQuiet: bool = False
    detailedOutput: bool = False
    handlersFile: Path = HANDLERS_FILE

    model_config = SettingsConfigDict(
        env_prefix="ESQ_",  # Environment variables with this prefix override settings
        case_sensitive=False,  # Allow case-insensitive environment variables
    )


def handlers_load(path: Path) -> dict[str, EscapeHandler]:
    """
    Load pass-through handlers declared in a JSON file.

    The file maps keywords to handler specifications, e.g.
    ``{"top": {"include_keyword": true}, "call": {"include_keyword": false}}``.

    Args:
        path: Location of the handlers file

    Returns:
        dict: Keyword to handler map; empty if the file does not exist

    Raises:
        ValueError: If the file is not valid JSON or does not match the schema
    """
    if not path.is_file():
        LOG(f"No handlers file at {path}")
        return {}

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in handlers file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Handlers file {path} must contain a JSON object")

    handlers: dict[str, EscapeHandler] = {}
    for keyword, raw in data.items():
        try:
            spec: HandlerSpec = HandlerSpec.model_validate(raw)
        except ValidationError as e:
            raise ValueError(f"Invalid handler '{keyword}' in {path}: {e}") from e
        handlers[keyword] = PassthruEscapeHandler(spec.include_keyword)

    LOG(f"Loaded {len(handlers)} handler(s) from {path}")
    return handlers


# Create the application settings instance
appsettings: Final[App] = App()
