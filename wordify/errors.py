"""Exception types raised by the wordify package.

WHY: Callers need typed exceptions to tell an inconsistent edit script
apart from a malformed input document or an ordinary bug.

RULES:
- Every package exception derives from WordifyError
- ChunkDocumentError is also a ValueError, like other bad-input errors
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wordify.core.ir import Word


class WordifyError(Exception):
    """Base class for wordify errors."""


class AlignmentError(WordifyError):
    """Raised when the two word lists cannot be aligned.

    WHY: The resequencer relies on shared equal words appearing in the same
    order on both sides. That holds for any consistent chunk sequence, so a
    violation means the input was malformed. Failing loudly beats emitting
    a word script that no longer reproduces the texts.

    HOW: Raised by resequence() when a B-side anchor finds a different
    word, or no word, under the A cursor.

    RULES:
    - word: the B-side word that could not be matched
    - cursor: the A-side position that was checked
    """

    def __init__(self, word: Word, cursor: int) -> None:
        self.word = word
        self.cursor = cursor
        super().__init__(
            "No matching equal word on the A side at position {} for {!r} "
            "(chunk {})".format(cursor, word.text, word.chunks[0])
        )


class ChunkDocumentError(WordifyError, ValueError):
    """Raised when a JSON chunk document cannot be loaded.

    Wraps JSON decode errors and jsonschema validation errors; the
    original exception is chained as __cause__.
    """
