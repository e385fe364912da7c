"""Resolution of the directory holding persisted defaults."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

CONFIG_ENV_VAR = "LINECAT_CONFIG_DIR"
CONFIG_FILE_NAME = "linecat.toml"


@dataclass(frozen=True)
class ConfigPaths:
    """Resolved config directory and defaults file."""

    config_dir: Path
    config_file: Path
    source: str


def _user_config_dir() -> Path:
    """Return the user global directory for linecat (~/.config/linecat)."""
    return Path.home() / ".config" / "linecat"


def _paths(config_dir: Path, source: str) -> ConfigPaths:
    return ConfigPaths(
        config_dir=config_dir,
        config_file=config_dir / CONFIG_FILE_NAME,
        source=source,
    )


def resolve_config_paths(config_dir_option: Optional[str] = None) -> ConfigPaths:
    """Resolve where ``linecat.toml`` lives.

    Resolution order:
    1. --config-dir CLI flag (explicit override)
    2. $LINECAT_CONFIG_DIR environment variable
    3. ~/.config/linecat (user global)

    Reads fresh from the environment each time; nothing is created on disk.

    Args:
        config_dir_option: Value of --config-dir if provided

    Returns:
        ConfigPaths naming the directory, the file and which rule matched
    """
    # 1. CLI --config-dir overrides all
    if config_dir_option:
        return _paths(Path(config_dir_option).expanduser(), "option")

    # 2. $LINECAT_CONFIG_DIR environment variable
    env_dir = os.environ.get(CONFIG_ENV_VAR)
    if env_dir:
        return _paths(Path(env_dir).expanduser(), "environment")

    # 3. User global directory
    return _paths(_user_config_dir(), "default")


__all__ = [
    "CONFIG_ENV_VAR",
    "CONFIG_FILE_NAME",
    "ConfigPaths",
    "resolve_config_paths",
]
