"""Configuration profile management.

Provides utilities for detecting configuration profiles and the
platform-specific default storage location.
"""

import os
import platform
from enum import Enum
from pathlib import Path

# Profile YAML files at the repository root
DEFAULT_CONFIG_DIR = Path(__file__).parent.parent.parent.parent / "config"


class Profile(Enum):
    """Available configuration profiles."""

    DEV = "dev"
    PROD = "prod"
    TEST = "test"


class Platform(Enum):
    """Supported platforms."""

    MACOS = "macos"
    LINUX = "linux"
    WINDOWS = "windows"
    UNKNOWN = "unknown"


def detect_platform() -> Platform:
    """Detect the current platform.

    Returns:
        Platform enum value
    """
    system = platform.system().lower()

    if system == "darwin":
        return Platform.MACOS
    elif system == "linux":
        return Platform.LINUX
    elif system == "windows":
        return Platform.WINDOWS
    else:
        return Platform.UNKNOWN


def detect_profile() -> Profile:
    """Detect appropriate configuration profile.

    The LOGCAKE_PROFILE environment variable wins; otherwise the
    production profile is used.

    Returns:
        Profile enum value
    """
    env_profile = os.environ.get("LOGCAKE_PROFILE", "").lower()
    profile_map = {
        "prod": Profile.PROD,
        "dev": Profile.DEV,
        "test": Profile.TEST,
    }
    return profile_map.get(env_profile, Profile.PROD)


def default_data_dir() -> Path:
    """Return the user's documents folder for the current platform.

    Linux honours XDG_DOCUMENTS_DIR. Falls back to the home directory when
    no documents folder exists.
    """
    home = Path.home()
    plat = detect_platform()

    if plat == Platform.LINUX:
        xdg_documents = os.environ.get("XDG_DOCUMENTS_DIR")
        if xdg_documents:
            return Path(xdg_documents).expanduser()

    documents = home / "Documents"
    if documents.is_dir():
        return documents
    return home


def get_profile_path(profile: Profile | None = None, config_dir: Path | None = None) -> Path:
    """Get path to profile configuration file.

    Args:
        profile: Profile to use, or None to auto-detect
        config_dir: Configuration directory, or None for default

    Returns:
        Path to profile YAML file
    """
    if profile is None:
        profile = detect_profile()

    if config_dir is None:
        config_dir = DEFAULT_CONFIG_DIR

    return config_dir / f"{profile.value}.yaml"


__all__ = [
    "DEFAULT_CONFIG_DIR",
    "Platform",
    "Profile",
    "default_data_dir",
    "detect_platform",
    "detect_profile",
    "get_profile_path",
]
