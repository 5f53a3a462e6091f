"""YAML configuration loader with inheritance support.

Supports:
- Loading YAML config files
- Config inheritance via 'extends' key
- Deep merging of nested config
"""

from pathlib import Path
from typing import Any

import yaml

from . import AppConfig, LoggingConfig, ScheduleConfig, StorageConfig
from .profiles import DEFAULT_CONFIG_DIR, Profile, get_profile_path


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    Values from override take precedence. Nested dicts are merged recursively.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml_with_inheritance(path: Path) -> dict[str, Any]:
    """Load YAML file with inheritance support.

    If the file contains an 'extends' key, the base config is loaded first
    and merged with the current config.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    if "extends" in config:
        base_name = config.pop("extends")
        base_config = load_yaml_with_inheritance(path.parent / base_name)
        config = deep_merge(base_config, config)

    return config


def dict_to_config(data: dict[str, Any]) -> AppConfig:
    """Convert raw dict to typed AppConfig dataclass."""
    app_data = data.get("logcake", {}) or {}

    # YAML sections left empty load as None
    def safe_get(key: str) -> dict[str, Any]:
        value = app_data.get(key, {})
        return value if value is not None else {}

    return AppConfig(
        storage=StorageConfig(**safe_get("storage")),
        schedule=ScheduleConfig(**safe_get("schedule")),
        logging=LoggingConfig(**safe_get("logging")),
    )


class YAMLConfigLoader:
    """Loads AppConfig from YAML files in a profile directory."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize loader.

        Args:
            config_dir: Directory holding the profile files; defaults to
                the repository's config/ directory
        """
        self._config_dir = config_dir or DEFAULT_CONFIG_DIR

    @property
    def config_dir(self) -> Path:
        return self._config_dir

    def load(self, path: Path) -> AppConfig:
        return dict_to_config(load_yaml_with_inheritance(path))

    def load_profile(self, profile: Profile | str | None = None) -> AppConfig:
        """Load the configuration for ``profile``.

        Args:
            profile: Profile or its name; None detects it from LOGCAKE_PROFILE

        Raises:
            ValueError: If ``profile`` names no known profile
            FileNotFoundError: If the profile file is missing
        """
        if isinstance(profile, str):
            profile = Profile(profile.lower())
        return self.load(get_profile_path(profile, self._config_dir))


def load_config(path: str | Path | None = None, profile: str | None = None) -> AppConfig:
    """Load Log Cake configuration.

    Args:
        path: Direct path to config file (takes precedence)
        profile: Profile name ('dev', 'prod', 'test'); detected when omitted

    Returns:
        Parsed AppConfig

    Examples:
        >>> config = load_config(profile="dev")
        >>> config = load_config(path="/path/to/config.yaml")
    """
    loader = YAMLConfigLoader()

    if path is not None:
        return loader.load(Path(path))
    return loader.load_profile(profile)


__all__ = [
    "YAMLConfigLoader",
    "deep_merge",
    "dict_to_config",
    "load_config",
    "load_yaml_with_inheritance",
]
