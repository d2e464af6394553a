"""Global configuration storage for Burner.

Stores the burner home, templates directory, auto-clean threshold and
editor command in ~/.burner/config.json
"""

import json
import logging
from pathlib import Path

from .models import BurnerConfig

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get the Burner config directory."""
    config_dir = Path.home() / ".burner"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_path() -> Path:
    """Get the path of the config file."""
    return get_config_dir() / "config.json"


def load_config() -> BurnerConfig:
    """Load the configuration, writing the defaults on first use."""
    config_file = get_config_path()
    if not config_file.exists():
        config = BurnerConfig()
        save_config(config)
        return config

    try:
        data = json.loads(config_file.read_text(encoding="utf-8"))
        return BurnerConfig(**data)
    except (OSError, json.JSONDecodeError, TypeError, ValueError) as e:
        logger.warning(f"Ignoring unreadable config {config_file}: {e}")
    return BurnerConfig()  # defaults


def save_config(config: BurnerConfig) -> None:
    """Save the configuration."""
    config_file = get_config_path()
    config_file.write_text(
        json.dumps(config.model_dump(by_alias=True), indent=2),
        encoding="utf-8",
    )
