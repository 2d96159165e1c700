"""Load and save operator settings between runs."""
import os
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from modprep.core.logger import get_logger
from modprep.models.settings import Settings

logger = get_logger(__name__)

APP_NAME = "modprep"
SETTINGS_ENV = "MODPREP_SETTINGS"
SETTINGS_FILE = "settings.yml"

TEMPLATE_DIR_NAME = "ModTemplate"
SOURCE_DIR_NAME = "Source"


def default_settings_path() -> Path:
    """Settings file location, overridable with MODPREP_SETTINGS."""
    if env_path := os.environ.get(SETTINGS_ENV):
        return Path(env_path).expanduser()
    return Path(typer.get_app_dir(APP_NAME)) / SETTINGS_FILE


def default_dest_base(template_root: Path) -> Path:
    """Where new mods go when nothing else is configured.

    A template living in ``.../ModTemplate`` next to a ``Source`` directory
    sends new mods into ``Source``; otherwise they land beside the template.
    """
    template_root = Path(template_root).resolve()
    parent = template_root.parent
    if template_root.name.lower() == TEMPLATE_DIR_NAME.lower():
        source = parent / SOURCE_DIR_NAME
        if source.is_dir():
            return source
    return parent


class SettingsStore:
    """YAML-backed persistence for Settings."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else default_settings_path()

    def load(self) -> Settings:
        """Load settings, falling back to defaults on any problem."""
        if not self.path.exists():
            return Settings()

        try:
            with open(self.path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise ValueError("settings file must contain a mapping")
            return Settings(**data)
        except (OSError, yaml.YAMLError, ValueError, ValidationError) as e:
            logger.warning(f"Failed to load settings from {self.path}: {e}, using defaults")
            return Settings()

    def save(self, settings: Settings) -> bool:
        """Save settings.

        Returns:
            True if saved successfully
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                yaml.safe_dump(settings.model_dump(), f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            logger.warning(f"Failed to save settings to {self.path}: {e}")
            return False
        logger.debug(f"Saved settings to {self.path}")
        return True

    def clear(self) -> bool:
        """Delete the settings file. Returns True if a file was removed."""
        if not self.path.exists():
            return False
        self.path.unlink()
        return True
