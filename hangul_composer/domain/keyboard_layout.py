"""2-set (dubeolsik) keyboard mapping.

Maps Latin keys of a standard Korean keyboard to compatibility jamo, so a
stream of key presses can be fed to a composer. Keys without a mapping pass
through unchanged.

The default layout can be extended or overridden from the `layout` section
of settings.yaml (see `SettingsStore.get_layout`):

    layout:
      Y: "ㅛ"
      K: "ㅏ"
"""

from __future__ import annotations

import logging
from typing import Any, Final, Mapping, Optional

from hangul_composer.domain.enums import ComposerSettings
from hangul_composer.domain.jamo import jamo_from_compatibility
from hangul_composer.domain.text import StringComposer

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------

DUBEOLSIK: Final[dict[str, str]] = {
    # Consonants
    "r": "ㄱ", "R": "ㄲ",
    "s": "ㄴ",
    "e": "ㄷ", "E": "ㄸ",
    "f": "ㄹ",
    "a": "ㅁ",
    "q": "ㅂ", "Q": "ㅃ",
    "t": "ㅅ", "T": "ㅆ",
    "d": "ㅇ",
    "w": "ㅈ", "W": "ㅉ",
    "c": "ㅊ",
    "z": "ㅋ",
    "x": "ㅌ",
    "v": "ㅍ",
    "g": "ㅎ",
    # Vowels
    "k": "ㅏ",
    "o": "ㅐ", "O": "ㅒ",
    "i": "ㅑ",
    "j": "ㅓ",
    "p": "ㅔ", "P": "ㅖ",
    "u": "ㅕ",
    "h": "ㅗ",
    "y": "ㅛ",
    "n": "ㅜ",
    "b": "ㅠ",
    "m": "ㅡ",
    "l": "ㅣ",
}


# ---------------------------------------------------------------------
# Overrides
# ---------------------------------------------------------------------

def clean_overrides(raw: Any) -> dict[str, str]:
    """Keep only single-key entries that map to a compatibility jamo."""
    if not isinstance(raw, dict):
        return {}

    cleaned: dict[str, str] = {}
    for key, value in raw.items():
        if (
            isinstance(key, str)
            and len(key) == 1
            and isinstance(value, str)
            and jamo_from_compatibility(value.strip()) is not None
        ):
            cleaned[key] = value.strip()
        else:
            logger.warning("Ignoring keyboard layout entry %r: %r", key, value)
    return cleaned


# ---------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------

def get_layout(overrides: Optional[Mapping[str, str]] = None) -> dict[str, str]:
    layout = dict(DUBEOLSIK)
    if overrides:
        layout.update(overrides)
    return layout


def jamo_for_key(key: str, overrides: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return the compatibility jamo typed by `key`, or None if it types none.

    `overrides` are applied on top of the default layout.
    """
    return get_layout(overrides).get(key)


def transliterate_keys(
    keys: str,
    settings: Optional[ComposerSettings] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> str:
    """Type `keys` on a 2-set keyboard and return the composed text.

    >>> transliterate_keys("gksrmf")
    '한글'
    """
    layout = get_layout(overrides)
    composer = StringComposer(settings)
    for key in keys:
        composer.push_char(layout.get(key) or key)
    return composer.as_string()
