"""
Configuration loader — reads datagen.yml into GeneratorSettings.

The settings file is optional.  Without one, the generator uses the
built-in range [-1000, 1000] and 3-decimal floats.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from datagen.core.models.settings import GeneratorSettings

logger = logging.getLogger(__name__)

# Default config filename
SETTINGS_FILE = "datagen.yml"


class ConfigError(Exception):
    """Raised when the settings file is invalid or unreadable."""


def find_settings_file(start_dir: Path | None = None) -> Path | None:
    """Search for datagen.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to datagen.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / SETTINGS_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_settings(path: Path | None = None) -> GeneratorSettings:
    """Load and validate generator settings.

    Args:
        path: Explicit path to a settings file. If None, searches upward
            and falls back to defaults when nothing is found.

    Returns:
        Validated GeneratorSettings.

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    if path is None:
        path = find_settings_file()
        if path is None:
            logger.debug("No %s found, using defaults", SETTINGS_FILE)
            return GeneratorSettings()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading settings from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # Settings may sit at top level or under a "generator" key
    section = data.get("generator", data)
    if not isinstance(section, dict):
        raise ConfigError(f"Expected 'generator' to be a mapping in {path}")

    try:
        settings = GeneratorSettings.model_validate(section)
    except Exception as e:
        raise ConfigError(f"Invalid settings in {path}: {e}") from e

    logger.info(
        "Loaded settings: range [%d, %d], precision %d",
        settings.min_value,
        settings.max_value,
        settings.precision,
    )
    return settings
