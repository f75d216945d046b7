from __future__ import annotations

from hangul_composer.domain.keyboard_layout import (
    DUBEOLSIK,
    clean_overrides,
    get_layout,
    jamo_for_key,
    transliterate_keys,
)
from hangul_composer.domain.jamo import jamo_from_compatibility


def test_default_layout_maps_to_jamo() -> None:
    assert jamo_for_key("r") == "ㄱ"
    assert jamo_for_key("R") == "ㄲ"
    assert jamo_for_key("k") == "ㅏ"
    assert jamo_for_key("1") is None
    for value in DUBEOLSIK.values():
        assert jamo_from_compatibility(value) is not None


def test_transliterate_keys() -> None:
    assert transliterate_keys("gksrmf") == "한글"
    assert transliterate_keys("dkssudgktpdy") == "안녕하세요"


def test_transliterate_keeps_unmapped_keys() -> None:
    assert transliterate_keys("dkssud 123") == "안녕 123"


def test_overrides_extend_default_layout() -> None:
    overrides = {"K": "ㅏ"}
    assert jamo_for_key("K", overrides) == "ㅏ"
    assert jamo_for_key("r", overrides) == "ㄱ"
    assert jamo_for_key("K") is None
    assert get_layout(overrides)["k"] == "ㅏ"
    assert transliterate_keys("GK", overrides={"G": "ㅎ", "K": "ㅏ"}) == "하"


def test_overrides_replace_default_keys() -> None:
    assert jamo_for_key("r", {"r": "ㅋ"}) == "ㅋ"
    assert DUBEOLSIK["r"] == "ㄱ"


def test_clean_overrides_drops_bad_entries() -> None:
    cleaned = clean_overrides({"K": "ㅏ", "xx": "ㄱ", "Z": "A", "Y": 3})
    assert cleaned == {"K": "ㅏ"}
    assert clean_overrides(["not", "a", "mapping"]) == {}
