# tests/conftest.py
from pathlib import Path

import pytest

from hangul_composer.domain.block import BlockComposer
from hangul_composer.domain.jamo import jamo_from_compatibility
from hangul_composer.domain.text import StringComposer
from hangul_composer.domain.word import WordComposer
from hangul_composer.services.settings_store import SettingsStore


def jamo_seq(letters: str):
    """Compatibility letters -> Jamo values, e.g. jamo_seq("ㄱㅏㅇ")."""
    return [jamo_from_compatibility(c) for c in letters]


@pytest.fixture
def j():
    return jamo_from_compatibility


@pytest.fixture
def block():
    return BlockComposer()


@pytest.fixture
def word():
    return WordComposer()


@pytest.fixture
def composer():
    return StringComposer()


@pytest.fixture
def settings_store(tmp_path: Path):
    """Store backed by a temp file so tests never touch a real settings.yaml."""
    return SettingsStore(str(tmp_path / "settings.yaml"))
