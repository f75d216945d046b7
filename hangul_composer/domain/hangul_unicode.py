"""Hangul Unicode tables and constants (domain layer).

This module is *domain* data (no composer state).

It provides:
  - The canonical Unicode ordering for initial consonants (choseong), vowels
    (jungseong) and final consonants (jongseong), spelled with compatibility jamo
  - The code point bases used by the Hangul Syllables algorithm
  - The modern and compatibility jamo ranges recognised by the classifier

Notes:
  - Index i of CHOSEONG is modern jamo L_BASE + i, index i of JUNGSEONG is
    V_BASE + i and index i (> 0) of JONGSEONG is T_BASE + i.
"""

from __future__ import annotations

from typing import Final


# -----------------------------------------------------------------------------
# Syllable arithmetic
# -----------------------------------------------------------------------------

S_BASE: Final[int] = 0xAC00
L_BASE: Final[int] = 0x1100
V_BASE: Final[int] = 0x1161
T_BASE: Final[int] = 0x11A7

L_COUNT: Final[int] = 19
V_COUNT: Final[int] = 21
T_COUNT: Final[int] = 28
N_COUNT: Final[int] = V_COUNT * T_COUNT
S_COUNT: Final[int] = L_COUNT * N_COUNT

# Modern conjoining jamo used by syllable composition
MODERN_INITIAL_RANGE: Final[range] = range(L_BASE, L_BASE + L_COUNT)
MODERN_VOWEL_RANGE: Final[range] = range(V_BASE, V_BASE + V_COUNT)
MODERN_FINAL_RANGE: Final[range] = range(T_BASE + 1, T_BASE + T_COUNT)

# Compatibility jamo ㄱ..ㅣ (the archaic letters after U+3163 are not included)
COMPATIBILITY_RANGE: Final[range] = range(0x3131, 0x3164)

SYLLABLE_RANGE: Final[range] = range(S_BASE, S_BASE + S_COUNT)


# -----------------------------------------------------------------------------
# Ordered tables (compatibility jamo spelling)
# -----------------------------------------------------------------------------

# Leading consonants (Choseong) in standard Unicode Hangul order
CHOSEONG: Final[tuple[str, ...]] = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ",
    "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

# Vowels (Jungseong) in standard Unicode Hangul order
JUNGSEONG: Final[tuple[str, ...]] = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ",
    "ㅗ", "ㅘ", "ㅙ", "ㅚ", "ㅛ",
    "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ",
    "ㅡ", "ㅢ", "ㅣ",
)

# Trailing consonants (Jongseong) in standard Unicode Hangul order
# Index 0 is "no final"
JONGSEONG: Final[tuple[str, ...]] = (
    "",
    "ㄱ", "ㄲ", "ㄳ",
    "ㄴ", "ㄵ", "ㄶ",
    "ㄷ",
    "ㄹ", "ㄺ", "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ",
    "ㅁ",
    "ㅂ", "ㅄ",
    "ㅅ", "ㅆ",
    "ㅇ",
    "ㅈ", "ㅊ",
    "ㅋ",
    "ㅌ",
    "ㅍ",
    "ㅎ",
)


# -----------------------------------------------------------------------------
# Letter sets
# -----------------------------------------------------------------------------

SIMPLE_CONSONANTS: Final[str] = "ㄱㄴㄷㄹㅁㅂㅅㅇㅈㅊㅋㅌㅍㅎ"
DOUBLE_CONSONANTS: Final[str] = "ㄲㄸㅃㅆㅉ"
CLUSTER_CONSONANTS: Final[str] = "ㄳㄵㄶㄺㄻㄼㄽㄾㄿㅀㅄ"
SIMPLE_VOWELS: Final[str] = "ㅏㅐㅑㅒㅓㅔㅕㅖㅗㅛㅜㅠㅡㅣ"
COMPOSITE_VOWELS: Final[str] = "ㅘㅙㅚㅝㅞㅟㅢ"


# -----------------------------------------------------------------------------
# Lookup maps
# -----------------------------------------------------------------------------

CHO_INDEX: Final[dict[str, int]] = {j: i for i, j in enumerate(CHOSEONG)}
JUNG_INDEX: Final[dict[str, int]] = {j: i for i, j in enumerate(JUNGSEONG)}
JONG_INDEX: Final[dict[str, int]] = {j: i for i, j in enumerate(JONGSEONG) if j}
