"""Jamo values, character classification and era conversion (domain layer).

Every code point calculation in the package lives here. The composers above
this module only ever see `Jamo` values.

Primary API:
- classify(char)
- jamo_from_compatibility(char) / jamo_from_modern(char)
- to_modern(jamo, position) / to_compatibility(jamo)
- combine_for_initial / combine_vowels / combine_for_final, decompose(jamo)
- compose_syllable(initial, vowel, final) / decompose_syllable(char)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Optional, Union

from hangul_composer.domain import hangul_unicode as hu
from hangul_composer.domain.enums import Era, JamoKind, Position
from hangul_composer.domain.errors import InvalidSequenceError, NotHangulError, UnmappedEraError


# -----------------------------------------------------------------------------
# Value types
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Jamo:
    """A single Hangul letter.

    `letter` is the compatibility glyph naming the letter; it does not depend
    on the position the letter ends up in. Use `to_modern()` for the
    positional conjoining code point.
    """

    letter: str
    kind: JamoKind

    def __str__(self) -> str:
        return self.letter

    @property
    def is_consonant(self) -> bool:
        return self.kind in (JamoKind.CONSONANT, JamoKind.COMPOSITE_CONSONANT)

    @property
    def is_vowel(self) -> bool:
        return self.kind in (JamoKind.VOWEL, JamoKind.COMPOSITE_VOWEL)

    @property
    def is_composite(self) -> bool:
        return self.kind in (JamoKind.COMPOSITE_CONSONANT, JamoKind.COMPOSITE_VOWEL)

    @property
    def positions(self) -> frozenset[Position]:
        found = set()
        if self.letter in hu.CHO_INDEX:
            found.add(Position.INITIAL)
        if self.letter in hu.JUNG_INDEX:
            found.add(Position.VOWEL)
        if self.letter in hu.JONG_INDEX:
            found.add(Position.FINAL)
        return frozenset(found)

    def can_be(self, position: Position) -> bool:
        return position in self.positions


@dataclass(frozen=True)
class HangulJamo:
    jamo: Jamo
    era: Era


@dataclass(frozen=True)
class HangulSyllable:
    char: str
    initial: Jamo
    vowel: Jamo
    final: Optional[Jamo] = None


@dataclass(frozen=True)
class Other:
    char: str


Character = Union[HangulJamo, HangulSyllable, Other]


# -----------------------------------------------------------------------------
# Registry
# -----------------------------------------------------------------------------

def _build_registry() -> dict[str, Jamo]:
    table: dict[str, Jamo] = {}
    groups = (
        (hu.SIMPLE_CONSONANTS, JamoKind.CONSONANT),
        (hu.DOUBLE_CONSONANTS, JamoKind.COMPOSITE_CONSONANT),
        (hu.CLUSTER_CONSONANTS, JamoKind.COMPOSITE_CONSONANT),
        (hu.SIMPLE_VOWELS, JamoKind.VOWEL),
        (hu.COMPOSITE_VOWELS, JamoKind.COMPOSITE_VOWEL),
    )
    for letters, kind in groups:
        for letter in letters:
            table[letter] = Jamo(letter, kind)
    return table


_JAMO: Final[dict[str, Jamo]] = _build_registry()

ALL_JAMO: Final[tuple[Jamo, ...]] = tuple(_JAMO.values())


# -----------------------------------------------------------------------------
# Composite tables
# -----------------------------------------------------------------------------

_INITIAL_PAIRS: Final[dict[tuple[str, str], str]] = {
    ("ㄱ", "ㄱ"): "ㄲ",
    ("ㄷ", "ㄷ"): "ㄸ",
    ("ㅂ", "ㅂ"): "ㅃ",
    ("ㅅ", "ㅅ"): "ㅆ",
    ("ㅈ", "ㅈ"): "ㅉ",
}

_VOWEL_PAIRS: Final[dict[tuple[str, str], str]] = {
    ("ㅗ", "ㅏ"): "ㅘ",
    ("ㅗ", "ㅐ"): "ㅙ",
    ("ㅗ", "ㅣ"): "ㅚ",
    ("ㅜ", "ㅓ"): "ㅝ",
    ("ㅜ", "ㅔ"): "ㅞ",
    ("ㅜ", "ㅣ"): "ㅟ",
    ("ㅡ", "ㅣ"): "ㅢ",
}

# Finals accept every cluster of the jongseong table, plus the two doublings
# that also exist as finals
_FINAL_PAIRS: Final[dict[tuple[str, str], str]] = {
    ("ㄱ", "ㄱ"): "ㄲ",
    ("ㄱ", "ㅅ"): "ㄳ",
    ("ㄴ", "ㅈ"): "ㄵ",
    ("ㄴ", "ㅎ"): "ㄶ",
    ("ㄹ", "ㄱ"): "ㄺ",
    ("ㄹ", "ㅁ"): "ㄻ",
    ("ㄹ", "ㅂ"): "ㄼ",
    ("ㄹ", "ㅅ"): "ㄽ",
    ("ㄹ", "ㅌ"): "ㄾ",
    ("ㄹ", "ㅍ"): "ㄿ",
    ("ㄹ", "ㅎ"): "ㅀ",
    ("ㅂ", "ㅅ"): "ㅄ",
    ("ㅅ", "ㅅ"): "ㅆ",
}

_SPLITS: Final[dict[str, tuple[str, str]]] = {
    composite: pair
    for table in (_INITIAL_PAIRS, _VOWEL_PAIRS, _FINAL_PAIRS)
    for pair, composite in table.items()
}


def _combine(table: dict[tuple[str, str], str], first: Jamo, second: Jamo) -> Optional[Jamo]:
    letter = table.get((first.letter, second.letter))
    return _JAMO[letter] if letter else None


def combine_for_initial(first: Jamo, second: Jamo) -> Optional[Jamo]:
    """Return the doubled initial consonant (e.g. ㄱ + ㄱ -> ㄲ), or None."""
    return _combine(_INITIAL_PAIRS, first, second)


def combine_vowels(first: Jamo, second: Jamo) -> Optional[Jamo]:
    """Return the diphthong (e.g. ㅗ + ㅏ -> ㅘ), or None."""
    return _combine(_VOWEL_PAIRS, first, second)


def combine_for_final(first: Jamo, second: Jamo) -> Optional[Jamo]:
    """Return the final cluster (e.g. ㄹ + ㄱ -> ㄺ), or None."""
    return _combine(_FINAL_PAIRS, first, second)


def decompose(jamo: Jamo) -> tuple[Jamo, Jamo]:
    """Split a composite jamo into the two simple jamo it was built from.

    Raises:
        ValueError: if `jamo` is not a composite.
    """
    pair = _SPLITS.get(jamo.letter)
    if pair is None:
        raise ValueError("Not a composite jamo: %r" % (jamo.letter,))
    return _JAMO[pair[0]], _JAMO[pair[1]]


def split(jamo: Jamo) -> tuple[Jamo, ...]:
    return decompose(jamo) if jamo.letter in _SPLITS else (jamo,)


# -----------------------------------------------------------------------------
# Era conversion
# -----------------------------------------------------------------------------

def jamo_from_compatibility(char: str) -> Optional[Jamo]:
    return _JAMO.get(char)


def jamo_from_modern(char: str) -> Optional[Jamo]:
    if len(char) != 1:
        return None
    cp = ord(char)
    if cp in hu.MODERN_INITIAL_RANGE:
        return _JAMO[hu.CHOSEONG[cp - hu.L_BASE]]
    if cp in hu.MODERN_VOWEL_RANGE:
        return _JAMO[hu.JUNGSEONG[cp - hu.V_BASE]]
    if cp in hu.MODERN_FINAL_RANGE:
        return _JAMO[hu.JONGSEONG[cp - hu.T_BASE]]
    return None


def jamo_from_char(char: str) -> Jamo:
    """Return the jamo for a compatibility or modern jamo character.

    Raises:
        NotHangulError: if `char` is not a recognised jamo.
    """
    jamo = jamo_from_compatibility(char) or jamo_from_modern(char)
    if jamo is None:
        raise NotHangulError("Not a Hangul jamo: %r" % (char,))
    return jamo


def natural_position(jamo: Jamo) -> Position:
    if jamo.is_vowel:
        return Position.VOWEL
    if jamo.can_be(Position.INITIAL):
        return Position.INITIAL
    return Position.FINAL


def to_modern(jamo: Jamo, position: Optional[Position] = None) -> str:
    """Return the conjoining (U+1100 block) code point of `jamo`.

    Raises:
        UnmappedEraError: if the letter has no modern code point in `position`
            (e.g. ㄸ as a final, ㄳ as an initial).
    """
    if position is None:
        position = natural_position(jamo)

    if position is Position.INITIAL:
        index, base = hu.CHO_INDEX.get(jamo.letter), hu.L_BASE
    elif position is Position.VOWEL:
        index, base = hu.JUNG_INDEX.get(jamo.letter), hu.V_BASE
    else:
        index, base = hu.JONG_INDEX.get(jamo.letter), hu.T_BASE

    if index is None:
        raise UnmappedEraError(
            "No modern %s code point for %r" % (position.value, jamo.letter)
        )
    return chr(base + index)


def to_compatibility(jamo: Jamo) -> Optional[str]:
    if len(jamo.letter) == 1 and ord(jamo.letter) in hu.COMPATIBILITY_RANGE:
        return jamo.letter
    return None


def to_era(jamo: Jamo, era: Era, position: Optional[Position] = None) -> str:
    if era is Era.MODERN:
        return to_modern(jamo, position)
    char = to_compatibility(jamo)
    if char is None:
        raise UnmappedEraError("No compatibility code point for %r" % (jamo.letter,))
    return char


# -----------------------------------------------------------------------------
# Syllables
# -----------------------------------------------------------------------------

def compose_syllable(initial: Jamo, vowel: Jamo, final: Optional[Jamo] = None) -> str:
    """Compose a precomposed syllable using the Unicode Hangul Syllables algorithm:

        SBase + (LIndex * VCount + VIndex) * TCount + TIndex

    Raises:
        InvalidSequenceError: if a jamo is not legal in its slot.
    """
    li = hu.CHO_INDEX.get(initial.letter)
    vi = hu.JUNG_INDEX.get(vowel.letter)
    ti = 0 if final is None else hu.JONG_INDEX.get(final.letter)

    if li is None or vi is None or ti is None:
        raise InvalidSequenceError(
            "Invalid jamo for a syllable: initial=%r vowel=%r final=%r"
            % (initial.letter, vowel.letter, final.letter if final else None)
        )
    return chr(hu.S_BASE + (li * hu.V_COUNT + vi) * hu.T_COUNT + ti)


def decompose_syllable(char: str) -> tuple[Jamo, Jamo, Optional[Jamo]]:
    """Return the (initial, vowel, final) jamo of a precomposed syllable.

    Raises:
        NotHangulError: if `char` is not a precomposed Hangul syllable.
    """
    if len(char) != 1 or ord(char) not in hu.SYLLABLE_RANGE:
        raise NotHangulError("Not a precomposed Hangul syllable: %r" % (char,))

    s_index = ord(char) - hu.S_BASE
    li, rest = divmod(s_index, hu.N_COUNT)
    vi, ti = divmod(rest, hu.T_COUNT)

    final = _JAMO[hu.JONGSEONG[ti]] if ti else None
    return _JAMO[hu.CHOSEONG[li]], _JAMO[hu.JUNGSEONG[vi]], final


# -----------------------------------------------------------------------------
# Classification
# -----------------------------------------------------------------------------

def classify(char: str) -> Character:
    """Classify a single character as a jamo, a syllable or anything else.

    Archaic jamo are classified as `Other`.
    """
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError("classify() expects a single character, got %r" % (char,))

    jamo = jamo_from_compatibility(char)
    if jamo is not None:
        return HangulJamo(jamo, Era.COMPATIBILITY)

    jamo = jamo_from_modern(char)
    if jamo is not None:
        return HangulJamo(jamo, Era.MODERN)

    if ord(char) in hu.SYLLABLE_RANGE:
        initial, vowel, final = decompose_syllable(char)
        return HangulSyllable(char, initial, vowel, final)

    return Other(char)


def is_hangul(char: str) -> bool:
    return not isinstance(classify(char), Other)
