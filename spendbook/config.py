"""Configuration file management for spendbook."""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from spendbook.store.paths import get_data_path

DEFAULT_CONFIRM_COUNTDOWN = 15


@dataclass(frozen=True)
class Settings:
    """Resolved user settings."""

    data_file: Path | None = None
    confirm_countdown: int = DEFAULT_CONFIRM_COUNTDOWN


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "spendbook" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    default_config: dict[str, Any] = {
        "data_file": str(get_data_path()),
        "confirm_countdown": DEFAULT_CONFIRM_COUNTDOWN,
    }
    save_config(default_config, config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings, falling back to defaults when there is no config file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Settings built from the config file.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
        ValueError: If a setting has the wrong type.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        return Settings()

    data_file = config.get("data_file")
    if data_file is not None and not isinstance(data_file, str):
        raise ValueError("data_file must be a string path")

    countdown = config.get("confirm_countdown", DEFAULT_CONFIRM_COUNTDOWN)
    if not isinstance(countdown, int) or isinstance(countdown, bool) or countdown < 0:
        raise ValueError("confirm_countdown must be a non-negative integer")

    return Settings(
        data_file=Path(data_file).expanduser() if data_file else None,
        confirm_countdown=countdown,
    )


def resolve_data_path(option: Path | None, settings: Settings) -> Path:
    """Pick the ledger file: command-line option, then config, then default."""
    if option is not None:
        return option.expanduser()
    if settings.data_file is not None:
        return settings.data_file
    return get_data_path()
