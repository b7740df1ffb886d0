"""
Config check use case — validate datagen.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from datagen.core.config.loader import ConfigError, find_settings_file, load_settings
from datagen.core.models.settings import GeneratorSettings


@dataclass
class ConfigCheckResult:
    """Result of settings validation."""

    valid: bool = False
    settings: GeneratorSettings | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "settings": self.settings.model_dump() if self.settings else None,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate generator settings and report issues.

    A missing settings file is not an error: defaults apply and a
    warning says so.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_settings_file()
        if config_path is None:
            result.warnings.append("No datagen.yml found. Using built-in defaults.")

    result.config_path = config_path

    try:
        settings = load_settings(config_path)
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    result.settings = settings

    if settings.min_value == settings.max_value:
        result.warnings.append(
            f"min_value equals max_value ({settings.min_value}): every value will be the same."
        )

    result.valid = len(result.errors) == 0
    return result
