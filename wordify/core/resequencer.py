"""Merge the A-side and B-side word lists into one word-level edit script.

WHY: After segmentation there are two independent word lists, one per
text. Runs that no edit touched exist on both sides and can be emitted
once as Equal. Everything between two such runs is, on the A side, what
was deleted and, on the B side, what was inserted — the two stretches do
not need to be matched against each other, only placed correctly.

HOW: Anchors are equal words whose Equal-chunk slice (chunk index, offset
in chunk, length) occurs on both sides. Both segmenters walked the chunks
in the same order, so anchors appear in the same relative order in both
lists. A single forward pass over the B side emits anchors as Equal and
everything else as Insert, while a cursor into the A side emits its
non-anchor words as Delete right after each B emission.

RULES:
- Leading A-side deletions are drained before the first B word
- After every B emission the A cursor is drained up to the next anchor
- An anchor on B consumes exactly one A word, which must carry the same
  anchor key — anything else raises AlignmentError
- A-side words left after B is exhausted are drained as Delete
- Output is not consolidated; adjacent runs may share a kind
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Set, Tuple

from wordify.core.ir import ChunkKind, OutputRun, Word
from wordify.errors import AlignmentError

logger = logging.getLogger(__name__)


def shared_anchor_keys(
    a_words: Sequence[Word],
    b_words: Sequence[Word],
) -> Set[Tuple[int, int, int]]:
    """Anchor keys of equal words present in both word lists.

    WHY: An equal word on one side is not always equal on the other. When a
    deletion sits right against an Equal chunk, the A side glues the deleted
    letters onto the word ("xy" from Delete "x" + Equal "y z") while the B
    side sees a clean "y". Only slices that are equal on both sides can
    anchor the alignment.
    """
    a_keys = {w.anchor_key for w in a_words if w.is_equal}
    b_keys = {w.anchor_key for w in b_words if w.is_equal}
    return a_keys & b_keys


def resequence(a_words: Sequence[Word], b_words: Sequence[Word]) -> list[OutputRun]:
    """Build the unconsolidated word-level edit script from two word lists.

    Args:
        a_words: Runs of the original text (A-view), in order.
        b_words: Runs of the revised text (B-view), in order.

    Returns:
        Equal/Delete/Insert runs whose Equal+Delete text is A and whose
        Equal+Insert text is B.

    Raises:
        AlignmentError: If a B-side anchor has no matching anchor under
            the A cursor (inconsistent input chunks).
    """
    anchors = shared_anchor_keys(a_words, b_words)
    runs: list[OutputRun] = []
    cursor = 0

    def _anchor(word: Word) -> Optional[Tuple[int, int, int]]:
        key = word.anchor_key
        return key if key in anchors else None

    def _drain() -> None:
        """Emit A-side words up to the next anchor as deletions."""
        nonlocal cursor
        while cursor < len(a_words) and _anchor(a_words[cursor]) is None:
            runs.append(OutputRun(ChunkKind.DELETE, a_words[cursor].text))
            cursor += 1

    _drain()

    for word in b_words:
        key = _anchor(word)
        if key is not None:
            if cursor >= len(a_words) or _anchor(a_words[cursor]) != key:
                raise AlignmentError(word, cursor)
            runs.append(OutputRun(ChunkKind.EQUAL, word.text))
            cursor += 1
        else:
            runs.append(OutputRun(ChunkKind.INSERT, word.text))
        _drain()

    logger.debug(
        "Resequenced %d A-side and %d B-side runs around %d anchors",
        len(a_words), len(b_words), len(anchors),
    )

    return runs
