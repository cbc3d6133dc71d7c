# longspan/settings.py

from __future__ import annotations

import logging
import os

import yaml
from typing import Any, Dict

from longspan.errors import InvalidSettingValue
from longspan.models import (
    DEFAULT_HIGHLIGHT_COLOR,
    DEFAULT_MAX_WORDS,
    Settings,
    parse_max_words,
)

logger = logging.getLogger("longspan.settings")

DEFAULT_SETTINGS_PATH = "configs/settings.yaml"

__all__ = ["SettingsStore", "load_settings", "save_settings", "settings_from_dict", "parse_max_words"]


def settings_from_dict(data: Dict[str, Any] | None) -> Settings:
    """
    Merge a raw settings mapping over the defaults.

    Missing keys take the default; keys with invalid values are logged and
    replaced by the default rather than failing the load.
    """
    data = data or {}

    max_words = DEFAULT_MAX_WORDS
    if "max_words" in data:
        try:
            max_words = parse_max_words(data["max_words"])
        except InvalidSettingValue as e:
            logger.warning("Ignoring stored max_words: %s", e)

    highlight_color = DEFAULT_HIGHLIGHT_COLOR
    color = data.get("highlight_color")
    if isinstance(color, str) and color.strip():
        highlight_color = color.strip()
    elif color is not None:
        logger.warning("Ignoring stored highlight_color: %r", color)

    return Settings(max_words=max_words, highlight_color=highlight_color)


def load_settings(path: str = DEFAULT_SETTINGS_PATH) -> Settings:
    if not os.path.exists(path):
        logger.info("No settings file at %s, using defaults", path)
        return Settings()

    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)

    if cfg is not None and not isinstance(cfg, dict):
        logger.warning("Settings file %s is not a mapping, using defaults", path)
        cfg = None

    return settings_from_dict(cfg)


def save_settings(settings: Settings, path: str = DEFAULT_SETTINGS_PATH) -> None:
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(
            {
                "max_words": settings.max_words,
                "highlight_color": settings.highlight_color,
            },
            f,
            sort_keys=False,
        )


class SettingsStore:
    """Holds the single mutable copy of the settings and persists every change."""

    def __init__(self, path: str = DEFAULT_SETTINGS_PATH):
        self.path = path
        self.settings = Settings()

    def load(self) -> Settings:
        self.settings = load_settings(self.path)
        return self.settings

    def save(self, settings: Settings) -> None:
        self.settings = settings
        save_settings(settings, self.path)

    def snapshot(self) -> Settings:
        return self.settings

    def update_max_words(self, value) -> bool:
        """Apply user input for max_words. Returns False if it was invalid or unchanged."""
        try:
            max_words = parse_max_words(value)
        except InvalidSettingValue as e:
            logger.debug("Ignoring max_words input: %s", e)
            return False
        if max_words == self.settings.max_words:
            return False
        self.save(Settings(max_words=max_words, highlight_color=self.settings.highlight_color))
        return True

    def update_color(self, color: str) -> bool:
        updated = self.settings.with_color(color)
        if updated == self.settings:
            return False
        self.save(updated)
        return True
