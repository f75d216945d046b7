from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from hangul_composer.domain.enums import ComposerSettings, Era, InvalidJamoPolicy, SettingsKey
from hangul_composer.domain.keyboard_layout import clean_overrides, get_layout

logger = logging.getLogger(__name__)


class SettingsStore:
    """YAML-backed settings store.

    Responsibilities:
      - Load/save settings.yaml atomically
      - Provide typed helpers for the composer settings and layout overrides

    Notes:
      - A missing or unreadable file yields the defaults.
    """

    def __init__(self, settings_path: str | None = None) -> None:
        if settings_path is None:
            # Default to the current working directory: ./settings.yaml
            self._path = Path.cwd() / "settings.yaml"
        else:
            self._path = Path(settings_path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        p = self._path
        if not p.exists():
            return {}
        try:
            with p.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Could not read settings from %s: %s", p, e)
            return {}
        return data if isinstance(data, dict) else {}

    def save(self, data: dict[str, Any]) -> None:
        p = self._path
        p.parent.mkdir(parents=True, exist_ok=True)
        tmp = p.with_suffix(p.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            yaml.safe_dump(data or {}, f, allow_unicode=True, sort_keys=True)
        os.replace(str(tmp), str(p))

    def get_composer_settings(self) -> ComposerSettings:
        s = self.load()

        def _enum(key: SettingsKey, enum_type: Any, default: Any) -> Any:
            raw = s.get(key.value, default.value)
            try:
                return enum_type(str(raw).strip().lower())
            except ValueError:
                logger.warning("Ignoring invalid %s setting: %r", key.value, raw)
                return default

        return ComposerSettings(
            incomplete_era=_enum(SettingsKey.INCOMPLETE_ERA, Era, Era.COMPATIBILITY),
            invalid_jamo=_enum(SettingsKey.INVALID_JAMO, InvalidJamoPolicy, InvalidJamoPolicy.RAISE),
        )

    def set_incomplete_era(self, era: Era) -> None:
        s = self.load()
        s[SettingsKey.INCOMPLETE_ERA.value] = era.value
        self.save(s)

    def set_invalid_jamo_policy(self, policy: InvalidJamoPolicy) -> None:
        s = self.load()
        s[SettingsKey.INVALID_JAMO.value] = policy.value
        self.save(s)

    def get_layout_overrides(self) -> dict[str, str]:
        return clean_overrides(self.load().get(SettingsKey.LAYOUT.value))

    def get_layout(self) -> dict[str, str]:
        """The default 2-set layout with this file's overrides applied."""
        return get_layout(self.get_layout_overrides())

    def set_layout_override(self, key: str, jamo: str) -> None:
        s = self.load()
        layout = s.get(SettingsKey.LAYOUT.value) or {}
        if not isinstance(layout, dict):
            layout = {}
        layout[key] = jamo
        s[SettingsKey.LAYOUT.value] = layout
        self.save(s)
