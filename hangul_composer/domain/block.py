"""Syllable blocks and the single-block composer (domain layer).

`BlockComposer` fills the initial, vowel and final slots of one syllable in
that order. Each slot takes one jamo, or two when they combine into a
doubled initial, a diphthong or a final cluster (ㄱ + ㄱ -> ㄲ, ㅗ + ㅏ -> ㅘ,
ㄹ + ㄱ -> ㄺ). It never starts a second block: anything that does not fit is
rejected with InvalidSequenceError and left to the word composer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Union

from hangul_composer.domain.enums import BlockState, Era, Position
from hangul_composer.domain.errors import EmptyComposerError, InvalidSequenceError
from hangul_composer.domain.jamo import (
    Jamo,
    combine_for_final,
    combine_for_initial,
    combine_vowels,
    compose_syllable,
    decompose_syllable,
    split,
    to_era,
)


Combiner = Callable[[Jamo, Jamo], Optional[Jamo]]


@dataclass(frozen=True)
class HangulBlock:
    """A complete syllable: initial + vowel, with an optional final."""

    initial: Jamo
    vowel: Jamo
    final: Optional[Jamo] = None

    def __post_init__(self) -> None:
        if (
            not self.initial.can_be(Position.INITIAL)
            or not self.vowel.can_be(Position.VOWEL)
            or (self.final is not None and not self.final.can_be(Position.FINAL))
        ):
            raise InvalidSequenceError(
                "Invalid block: initial=%r vowel=%r final=%r"
                % (self.initial.letter, self.vowel.letter, self.final.letter if self.final else None)
            )

    @classmethod
    def from_char(cls, char: str) -> "HangulBlock":
        return cls(*decompose_syllable(char))

    def to_char(self) -> str:
        return compose_syllable(self.initial, self.vowel, self.final)

    def jamo(self) -> tuple[Jamo, ...]:
        if self.final is None:
            return (self.initial, self.vowel)
        return (self.initial, self.vowel, self.final)

    def decomposed(self, era: Era = Era.COMPATIBILITY, split_composites: bool = True) -> list[str]:
        """Return the block's jamo as characters of `era`.

        With `split_composites`, composite jamo are written as their two
        simple halves (닭 -> ㄷ ㅏ ㄹ ㄱ).

        Raises:
            UnmappedEraError: if a jamo has no code point in `era`.
        """
        slots = [(self.initial, Position.INITIAL), (self.vowel, Position.VOWEL)]
        if self.final is not None:
            slots.append((self.final, Position.FINAL))

        chars: list[str] = []
        for jamo, position in slots:
            parts = split(jamo) if split_composites else (jamo,)
            chars.extend(to_era(part, era, position) for part in parts)
        return chars

    def __str__(self) -> str:
        return self.to_char()


@dataclass(frozen=True)
class Complete:
    block: HangulBlock


@dataclass(frozen=True)
class Incomplete:
    # Composed slot contents, e.g. (ㄲ,) after ㄱ + ㄱ; empty for an empty composer
    jamo: tuple[Jamo, ...] = ()


BlockCompletionStatus = Union[Complete, Incomplete]


class BlockComposer:
    """Mutable accumulator for one syllable block."""

    def __init__(self) -> None:
        self._initial: list[Jamo] = []
        self._vowel: list[Jamo] = []
        self._final: list[Jamo] = []

    @classmethod
    def from_history(cls, history: Iterable[Jamo]) -> "BlockComposer":
        composer = cls()
        for jamo in history:
            composer.push(jamo)
        return composer

    def copy(self) -> "BlockComposer":
        clone = BlockComposer()
        clone._initial = list(self._initial)
        clone._vowel = list(self._vowel)
        clone._final = list(self._final)
        return clone

    # ---------------------------
    # Queries
    # ---------------------------

    @property
    def state(self) -> BlockState:
        if not self._initial:
            return BlockState.EMPTY
        if not self._vowel:
            return BlockState.HAS_INITIAL
        if not self._final:
            return BlockState.HAS_INITIAL_VOWEL
        return BlockState.COMPLETE

    @property
    def is_empty(self) -> bool:
        return not self._initial

    @property
    def has_final(self) -> bool:
        return bool(self._final)

    @property
    def history(self) -> tuple[Jamo, ...]:
        """Pushed jamo in push order."""
        return tuple(self._initial + self._vowel + self._final)

    def try_as_complete_block(self) -> BlockCompletionStatus:
        initial = _composed(self._initial, combine_for_initial)
        vowel = _composed(self._vowel, combine_vowels)
        if initial is None:
            return Incomplete()
        if vowel is None:
            return Incomplete((initial,))
        return Complete(HangulBlock(initial, vowel, _composed(self._final, combine_for_final)))

    def as_string(self, era: Era = Era.COMPATIBILITY) -> str:
        """Render the block: a syllable when complete, else its loose jamo in `era`."""
        status = self.try_as_complete_block()
        if isinstance(status, Complete):
            return status.block.to_char()
        return "".join(to_era(jamo, era, Position.INITIAL) for jamo in status.jamo)

    # ---------------------------
    # Mutation
    # ---------------------------

    def push(self, jamo: Jamo) -> None:
        """Place `jamo` in the next slot, or merge it into the current one.

        Raises:
            InvalidSequenceError: if no slot accepts `jamo`; state is unchanged.
        """
        state = self.state

        if state is BlockState.EMPTY:
            if jamo.can_be(Position.INITIAL):
                self._initial.append(jamo)
                return
        elif state is BlockState.HAS_INITIAL:
            if jamo.is_vowel:
                self._vowel.append(jamo)
                return
            if _merge(self._initial, jamo, combine_for_initial):
                return
        elif state is BlockState.HAS_INITIAL_VOWEL:
            if jamo.is_vowel and _merge(self._vowel, jamo, combine_vowels):
                return
            if jamo.can_be(Position.FINAL):
                self._final.append(jamo)
                return
        elif jamo.is_consonant and _merge(self._final, jamo, combine_for_final):
            return

        raise InvalidSequenceError(
            "Cannot push %r onto block in state %s" % (jamo.letter, state.value)
        )

    def pop(self) -> Jamo:
        """Remove and return the most recently pushed jamo.

        Raises:
            EmptyComposerError: if nothing has been pushed.
        """
        for slot in (self._final, self._vowel, self._initial):
            if slot:
                return slot.pop()
        raise EmptyComposerError("Nothing to pop from an empty block")

    def __repr__(self) -> str:
        letters = "".join(j.letter for j in self.history)
        return "BlockComposer(%r, state=%s)" % (letters, self.state.value)


def _composed(slot: list[Jamo], combine: Combiner) -> Optional[Jamo]:
    if not slot:
        return None
    if len(slot) == 1:
        return slot[0]
    merged = combine(slot[0], slot[1])
    if merged is None:
        raise InvalidSequenceError("Slot holds uncombinable jamo: %r" % ([j.letter for j in slot],))
    return merged


def _merge(slot: list[Jamo], jamo: Jamo, combine: Combiner) -> bool:
    if len(slot) != 1 or slot[0].is_composite:
        return False
    if combine(slot[0], jamo) is None:
        return False
    slot.append(jamo)
    return True
