"""Errors raised by the Hangul composers.

All of them are local and recoverable: a failed push or pop leaves the
composer exactly as it was before the call.
"""

from __future__ import annotations


class HangulError(Exception):
    """Base class for every composition error."""


class InvalidSequenceError(HangulError, ValueError):
    """A jamo cannot be placed at this point of the block or word."""


class NotHangulError(HangulError, ValueError):
    """A character is neither a Hangul jamo nor a precomposed syllable."""


class EmptyComposerError(HangulError, IndexError):
    """Pop attempted on a composer that holds nothing."""


class UnmappedEraError(HangulError, LookupError):
    """No code point exists for the jamo in the requested era or position."""
