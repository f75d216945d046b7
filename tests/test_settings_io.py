from pathlib import Path

import pytest
import yaml

from hangul_composer.domain.enums import ComposerSettings, Era, InvalidJamoPolicy
from hangul_composer.domain.keyboard_layout import DUBEOLSIK, transliterate_keys
from hangul_composer.services.settings_store import SettingsStore


def test_defaults_when_file_missing(settings_store):
    assert settings_store.load() == {}
    assert settings_store.get_composer_settings() == ComposerSettings()
    assert settings_store.get_layout_overrides() == {}


def test_save_and_load_roundtrip(settings_store):
    """
    save should write a UTF-8 YAML file and load should reconstruct
    the same dictionary.
    """
    payload = {
        "incomplete_era": "modern",
        "invalid_jamo": "literal",
        "layout": {"K": "ㅏ"},
    }
    settings_store.save(payload)
    loaded = settings_store.load()

    assert loaded == payload
    raw = settings_store.path.read_text(encoding="utf-8")
    assert "ㅏ" in raw


def test_typed_setters(settings_store):
    settings_store.set_incomplete_era(Era.MODERN)
    settings_store.set_invalid_jamo_policy(InvalidJamoPolicy.LITERAL)
    settings_store.set_layout_override("K", "ㅏ")

    settings = settings_store.get_composer_settings()
    assert settings.incomplete_era is Era.MODERN
    assert settings.invalid_jamo is InvalidJamoPolicy.LITERAL
    assert settings_store.get_layout_overrides() == {"K": "ㅏ"}


def test_invalid_values_fall_back_to_defaults(settings_store, caplog):
    settings_store.save({"incomplete_era": "medieval", "invalid_jamo": 7, "layout": "qwerty"})
    with caplog.at_level("WARNING"):
        settings = settings_store.get_composer_settings()
    assert settings == ComposerSettings()
    assert "incomplete_era" in caplog.text
    assert settings_store.get_layout_overrides() == {}


def test_values_are_case_insensitive(settings_store):
    settings_store.save({"incomplete_era": "Modern ", "invalid_jamo": "RAISE"})
    settings = settings_store.get_composer_settings()
    assert settings.incomplete_era is Era.MODERN
    assert settings.invalid_jamo is InvalidJamoPolicy.RAISE


@pytest.mark.parametrize("content", ["just a string", "- a\n- list", "{unclosed: [", ""])
def test_malformed_file_is_non_fatal(tmp_path: Path, content):
    path = tmp_path / "settings.yaml"
    path.write_text(content, encoding="utf-8")
    store = SettingsStore(str(path))
    assert store.load() == {}
    assert store.get_composer_settings() == ComposerSettings()


def test_save_is_atomic(settings_store):
    settings_store.save({"invalid_jamo": "literal"})
    assert not (settings_store.path.parent / "settings.yaml.tmp").exists()
    assert yaml.safe_load(settings_store.path.read_text(encoding="utf-8")) == {"invalid_jamo": "literal"}


def test_layout_from_settings_file(settings_store):
    settings_store.save({"layout": {"K": "ㅏ", "bad key": "ㄱ"}})
    layout = settings_store.get_layout()
    assert layout["K"] == "ㅏ"
    assert layout["r"] == "ㄱ"
    assert "bad key" not in layout
    assert transliterate_keys("gK", overrides=settings_store.get_layout_overrides()) == "하"


def test_layout_defaults_when_file_missing(settings_store):
    assert settings_store.get_layout() == DUBEOLSIK
