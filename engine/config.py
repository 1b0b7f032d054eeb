"""
Configuration system for enemy setup preferences.
"""

import json
from pathlib import Path
from typing import Optional, Dict, Any

from engine.error_handler import logger

# Config file location
CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"
CONFIG_FILE = CONFIG_DIR / "settings.json"


class GameConfig:
    """Manages enemy setup configuration."""

    def __init__(self) -> None:
        # Glow lights cast soft shadows when enabled
        self.dungeon_light_shadows: bool = True
        # Optional JSON file with custom career templates
        self.custom_templates_path: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for saving."""
        return {
            "dungeon_light_shadows": self.dungeon_light_shadows,
            "custom_templates_path": self.custom_templates_path,
        }

    def from_dict(self, data: Dict[str, Any]) -> None:
        """Load config from dictionary."""
        self.dungeon_light_shadows = bool(data.get("dungeon_light_shadows", True))
        self.custom_templates_path = data.get("custom_templates_path")

    def save(self, path: Optional[Path] = None) -> bool:
        """Save config to file."""
        target = path or CONFIG_FILE
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with target.open("w", encoding="utf-8") as f:
                json.dump(self.to_dict(), f, indent=2)
            return True
        except (OSError, TypeError) as e:
            logger.warning(f"Error saving config: {e}")
            return False

    def load(self, path: Optional[Path] = None) -> bool:
        """Load config from file."""
        source = path or CONFIG_FILE
        if not source.exists():
            return False

        try:
            with source.open("r", encoding="utf-8") as f:
                data = json.load(f)
            self.from_dict(data)
            return True
        except (OSError, ValueError, AttributeError) as e:
            logger.warning(f"Error loading config: {e}")
            return False


# Global config instance
_config = GameConfig()


def get_config() -> GameConfig:
    """Get the global config instance."""
    return _config


def load_config() -> GameConfig:
    """Load and return the config."""
    _config.load()
    return _config


def save_config() -> bool:
    """Save the global config."""
    return _config.save()
