from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class JamoKind(Enum):
    CONSONANT = "consonant"
    COMPOSITE_CONSONANT = "composite_consonant"
    VOWEL = "vowel"
    COMPOSITE_VOWEL = "composite_vowel"


class Position(Enum):
    INITIAL = "initial"
    VOWEL = "vowel"
    FINAL = "final"


class Era(Enum):
    """Which Unicode encoding a jamo is written in."""

    MODERN = "modern"  # U+1100 conjoining jamo
    COMPATIBILITY = "compatibility"  # U+3130 standalone jamo


class BlockState(Enum):
    EMPTY = "empty"
    HAS_INITIAL = "has_initial"
    HAS_INITIAL_VOWEL = "has_initial_vowel"
    COMPLETE = "complete"


class WordPushResult(Enum):
    CONTINUE = "continue"
    NEW_BLOCK = "new_block"


class InvalidJamoPolicy(Enum):
    """What the string composer does with a jamo the word composer rejects."""

    RAISE = "raise"
    LITERAL = "literal"


class SettingsKey(Enum):
    INCOMPLETE_ERA = "incomplete_era"
    INVALID_JAMO = "invalid_jamo"
    LAYOUT = "layout"


@dataclass(frozen=True)
class ComposerSettings:
    incomplete_era: Era = Era.COMPATIBILITY
    invalid_jamo: InvalidJamoPolicy = InvalidJamoPolicy.RAISE


DEFAULT_SETTINGS = ComposerSettings()
