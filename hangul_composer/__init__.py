"""
Hangul composition package exports.

Compose jamo into syllable blocks, blocks into words, and words into mixed
Hangul / non-Hangul text, with backspace-style undo at every level.
"""

from .domain.block import BlockComposer, Complete, HangulBlock, Incomplete  # noqa: F401
from .domain.enums import (  # noqa: F401
    BlockState,
    ComposerSettings,
    Era,
    InvalidJamoPolicy,
    JamoKind,
    Position,
    WordPushResult,
)
from .domain.errors import (  # noqa: F401
    EmptyComposerError,
    HangulError,
    InvalidSequenceError,
    NotHangulError,
    UnmappedEraError,
)
from .domain.jamo import (  # noqa: F401
    HangulJamo,
    HangulSyllable,
    Jamo,
    Other,
    classify,
    combine_for_final,
    combine_for_initial,
    combine_vowels,
    decompose,
    jamo_from_compatibility,
    jamo_from_modern,
    to_compatibility,
    to_modern,
)
from .domain.keyboard_layout import transliterate_keys  # noqa: F401
from .domain.text import StringComposer  # noqa: F401
from .domain.word import WordComposer  # noqa: F401
from .services.settings_store import SettingsStore  # noqa: F401

__all__ = [
    "BlockComposer",
    "BlockState",
    "Complete",
    "ComposerSettings",
    "EmptyComposerError",
    "Era",
    "HangulBlock",
    "HangulError",
    "HangulJamo",
    "HangulSyllable",
    "Incomplete",
    "InvalidJamoPolicy",
    "InvalidSequenceError",
    "Jamo",
    "JamoKind",
    "NotHangulError",
    "Other",
    "Position",
    "SettingsStore",
    "StringComposer",
    "UnmappedEraError",
    "WordComposer",
    "WordPushResult",
    "classify",
    "combine_for_final",
    "combine_for_initial",
    "combine_vowels",
    "decompose",
    "jamo_from_compatibility",
    "jamo_from_modern",
    "to_compatibility",
    "to_modern",
    "transliterate_keys",
]
