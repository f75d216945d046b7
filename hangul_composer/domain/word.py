"""Multi-block word composition (domain layer).

A `WordComposer` owns the block in progress plus the blocks already
finished. When the active block rejects a jamo the composer finalizes the
block and retries on a fresh one; a vowel arriving after a final consonant
takes that consonant with it into the new block (안 + ㅕ -> 아녀).
"""

from __future__ import annotations

import logging
from typing import Optional

from hangul_composer.domain.block import BlockComposer, Complete, HangulBlock
from hangul_composer.domain.enums import DEFAULT_SETTINGS, ComposerSettings, Position, WordPushResult
from hangul_composer.domain.errors import EmptyComposerError, InvalidSequenceError, NotHangulError
from hangul_composer.domain.jamo import HangulJamo, HangulSyllable, Jamo, classify, decompose, split

logger = logging.getLogger(__name__)


class WordComposer:
    """Composes a run of Hangul jamo into syllable blocks."""

    def __init__(self, settings: Optional[ComposerSettings] = None) -> None:
        self._settings = settings or DEFAULT_SETTINGS
        self._blocks: list[HangulBlock] = []
        # Push history of each finished block, so that reopening it undoes
        # one pushed jamo per pop
        self._histories: list[tuple[Jamo, ...]] = []
        self._active = BlockComposer()

    @property
    def blocks(self) -> tuple[HangulBlock, ...]:
        return tuple(self._blocks)

    @property
    def active(self) -> BlockComposer:
        return self._active

    @property
    def is_empty(self) -> bool:
        return not self._blocks and self._active.is_empty

    # ---------------------------
    # Push
    # ---------------------------

    def push(self, jamo: Jamo) -> WordPushResult:
        """Push one jamo, starting a new block when the active one is full.

        Raises:
            InvalidSequenceError: if `jamo` fits neither the active block nor
                a fresh one. The composer is left unchanged.
        """
        try:
            self._active.push(jamo)
            return WordPushResult.CONTINUE
        except InvalidSequenceError:
            if not isinstance(self._active.try_as_complete_block(), Complete):
                raise

        finished = self._active.copy()
        fresh = BlockComposer()
        if jamo.is_vowel and finished.has_final:
            carried = finished.pop()
            if not carried.can_be(Position.INITIAL):
                # A cluster typed as one key (ㄳ): its first half stays behind
                head, carried = decompose(carried)
                finished.push(head)
            fresh.push(carried)
            logger.debug("Moving final %r into the next block", carried.letter)
        fresh.push(jamo)

        status = finished.try_as_complete_block()
        if not isinstance(status, Complete):
            raise InvalidSequenceError("Cannot finalize an incomplete block before %r" % (jamo.letter,))
        self._blocks.append(status.block)
        self._histories.append(finished.history)
        self._active = fresh
        logger.debug("Finalized block %r", status.block.to_char())
        return WordPushResult.NEW_BLOCK

    def push_char(self, char: str) -> WordPushResult:
        """Push a compatibility jamo, modern jamo or precomposed syllable.

        A syllable closes the active block and becomes a finished block of
        its own, all or nothing.

        Raises:
            NotHangulError: if `char` is not Hangul.
            InvalidSequenceError: if the jamo cannot be placed.
        """
        character = classify(char)
        if isinstance(character, HangulJamo):
            return self.push(character.jamo)
        if isinstance(character, HangulSyllable):
            return self._push_syllable(character)
        raise NotHangulError("Not a Hangul character: %r" % (char,))

    def _push_syllable(self, syllable: HangulSyllable) -> WordPushResult:
        jamo: list[Jamo] = [*split(syllable.initial), *split(syllable.vowel)]
        if syllable.final is not None:
            jamo.extend(split(syllable.final))

        # Kept as split jamo so that pops take the syllable apart one jamo at a time
        built = BlockComposer.from_history(jamo)

        if not self._active.is_empty:
            status = self._active.try_as_complete_block()
            if not isinstance(status, Complete):
                raise InvalidSequenceError(
                    "Cannot finalize an incomplete block before %r" % (syllable.char,)
                )
            self._blocks.append(status.block)
            self._histories.append(self._active.history)
            self._active = BlockComposer()
            logger.debug("Finalized block %r", status.block.to_char())

        self._blocks.append(HangulBlock(syllable.initial, syllable.vowel, syllable.final))
        self._histories.append(built.history)
        return WordPushResult.NEW_BLOCK

    # ---------------------------
    # Pop
    # ---------------------------

    def pop(self) -> Jamo:
        """Undo the most recent push, reopening the previous block if needed.

        Raises:
            EmptyComposerError: if the word holds nothing.
        """
        if self._active.is_empty:
            if not self._blocks:
                raise EmptyComposerError("Nothing to pop from an empty word")
            block = self._blocks.pop()
            self._active = BlockComposer.from_history(self._histories.pop())
            logger.debug("Reopened block %r", block.to_char())
        return self._active.pop()

    # ---------------------------
    # Rendering
    # ---------------------------

    def as_string(self) -> str:
        rendered = "".join(block.to_char() for block in self._blocks)
        return rendered + self._active.as_string(self._settings.incomplete_era)

    def __str__(self) -> str:
        return self.as_string()

    def __repr__(self) -> str:
        return "WordComposer(%r)" % (self.as_string(),)
