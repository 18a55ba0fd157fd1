#!/usr/bin/env python3
"""
Application Settings
====================
Typed view of namekit/configs/app.yaml.

The file holds front end defaults only (CLI word count, length bounds,
char depth, capitalization, the profiles file and logging). Values are
checked once on load; a bad value raises ConfigurationError naming the
offending key.

Usage:
    from namekit.settings import load_app_settings

    settings = load_app_settings()
    settings.generate.count        # 10
    settings.profiles_path         # absolute Path
"""

import logging
from dataclasses import dataclass, field, fields
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from namekit.errors import ConfigurationError
from namekit.generators.validation import is_positive_int

PACKAGE_DIR = Path(__file__).resolve().parent
CONFIG_DIR = PACKAGE_DIR / "configs"
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"


@dataclass(frozen=True)
class GenerateDefaults:
    """Defaults for `namekit generate` when no profile supplies a value."""
    count: int = 10
    min_length: int = 4
    max_length: int = 9
    depth: int = 2
    capitalize: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GenerateDefaults':
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown keys in `generate` section of app.yaml: {', '.join(unknown)}")

        for key in ('count', 'min_length', 'max_length', 'depth'):
            if key in data and not is_positive_int(data[key]):
                raise ConfigurationError(
                    f"`generate.{key}` in app.yaml must be an integer >= 1 (got {data[key]!r})"
                )
        if 'capitalize' in data and not isinstance(data['capitalize'], bool):
            raise ConfigurationError(
                f"`generate.capitalize` in app.yaml must be true or false (got {data['capitalize']!r})"
            )
        return cls(**data)


@dataclass(frozen=True)
class LoggingSettings:
    level: str = "WARNING"
    format: str = "%(levelname)s %(name)s: %(message)s"

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LoggingSettings':
        level = str(data.get('level', cls.level)).upper()
        # getLevelName maps known names to ints, anything else to a string
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigurationError(f"`logging.level` in app.yaml is not a log level: {level!r}")
        return cls(level=level, format=str(data.get('format', cls.format)))


@dataclass(frozen=True)
class AppSettings:
    """Everything app.yaml configures, validated."""
    generate: GenerateDefaults = field(default_factory=GenerateDefaults)
    profiles_path: Path = CONFIG_DIR / "profiles.yaml"
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]], base: Path = PACKAGE_DIR) -> 'AppSettings':
        """
        Build settings from parsed YAML.

        Args:
            data: Parsed app.yaml content (None for an empty file)
            base: Directory relative paths resolve against

        Raises:
            ConfigurationError: If a section or value is invalid
        """
        data = data or {}
        if not isinstance(data, dict):
            raise ConfigurationError("app.yaml must contain a mapping")

        sections = {}
        for name in ('generate', 'profiles', 'logging'):
            section = data.get(name) or {}
            if not isinstance(section, dict):
                raise ConfigurationError(f"`{name}` in app.yaml must be a mapping")
            sections[name] = section

        profiles_path = Path(sections['profiles'].get('path', 'configs/profiles.yaml')).expanduser()
        if not profiles_path.is_absolute():
            profiles_path = (base / profiles_path).resolve()

        return cls(
            generate=GenerateDefaults.from_dict(sections['generate']),
            profiles_path=profiles_path,
            logging=LoggingSettings.from_dict(sections['logging']),
        )


def read_app_settings(path: Path) -> AppSettings:
    """Parse and validate an app.yaml file. Relative paths resolve against the package."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Missing app config: {path}")
    with open(path, 'r', encoding='utf-8') as f:
        return AppSettings.from_dict(yaml.safe_load(f))


@lru_cache(maxsize=1)
def load_app_settings() -> AppSettings:
    """Bundled app.yaml, read once per process."""
    return read_app_settings(APP_CONFIG_PATH)


__all__ = [
    "AppSettings",
    "GenerateDefaults",
    "LoggingSettings",
    "load_app_settings",
    "read_app_settings",
    "PACKAGE_DIR",
    "CONFIG_DIR",
    "APP_CONFIG_PATH",
]
