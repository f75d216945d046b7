"""Mixed Hangul / non-Hangul text composition (domain layer).

A `StringComposer` keeps its content as an ordered list of units. A unit is
either a live `WordComposer` for a run of Hangul, or one standalone
non-Hangul character. Popping works backwards through the units and reaches
into earlier words jamo by jamo.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

from hangul_composer.domain.enums import DEFAULT_SETTINGS, ComposerSettings, InvalidJamoPolicy
from hangul_composer.domain.errors import EmptyComposerError, InvalidSequenceError
from hangul_composer.domain.jamo import Jamo, Other, classify
from hangul_composer.domain.word import WordComposer

logger = logging.getLogger(__name__)

Unit = Union[WordComposer, str]


class StringComposer:
    """Composes arbitrary text, assembling the Hangul parts into syllables."""

    def __init__(self, settings: Optional[ComposerSettings] = None) -> None:
        self._settings = settings or DEFAULT_SETTINGS
        self._units: list[Unit] = []

    @property
    def units(self) -> tuple[Unit, ...]:
        return tuple(self._units)

    @property
    def is_empty(self) -> bool:
        return not self._units

    def __len__(self) -> int:
        return len(self._units)

    def _active_word(self) -> Optional[WordComposer]:
        if self._units and isinstance(self._units[-1], WordComposer):
            return self._units[-1]
        return None

    # ---------------------------
    # Push
    # ---------------------------

    def push_char(self, char: str) -> None:
        """Push one character.

        Hangul goes to the current word (a new word after a standalone
        character); anything else closes the word and is kept as is.

        Raises:
            InvalidSequenceError: if the word rejects a jamo and the policy
                is InvalidJamoPolicy.RAISE.
        """
        if isinstance(classify(char), Other):
            self._units.append(char)
            return

        word = self._active_word()
        if word is None:
            word = WordComposer(self._settings)
            started = True
        else:
            started = False

        try:
            word.push_char(char)
        except InvalidSequenceError:
            if self._settings.invalid_jamo is not InvalidJamoPolicy.LITERAL:
                raise
            logger.debug("Keeping rejected jamo %r as a standalone character", char)
            self._units.append(char)
            return

        if started:
            self._units.append(word)

    def push_str(self, text: Iterable[str]) -> None:
        for char in text:
            self.push_char(char)

    # ---------------------------
    # Pop
    # ---------------------------

    def pop(self) -> Union[Jamo, str]:
        """Undo the most recent push.

        Returns the popped standalone character, or the jamo popped from the
        last word.

        Raises:
            EmptyComposerError: if there is nothing to pop.
        """
        if not self._units:
            raise EmptyComposerError("Nothing to pop from an empty string")

        last = self._units[-1]
        if isinstance(last, str):
            return self._units.pop()

        popped = last.pop()
        if last.is_empty:
            self._units.pop()
        return popped

    # ---------------------------
    # Rendering
    # ---------------------------

    def as_string(self) -> str:
        return "".join(
            unit if isinstance(unit, str) else unit.as_string() for unit in self._units
        )

    def __str__(self) -> str:
        return self.as_string()

    def __repr__(self) -> str:
        return "StringComposer(%r)" % (self.as_string(),)
