"""Entry point of the word regrouping pipeline.

WHY: Callers hold a character-level edit script and want a word-level
one. They should not have to know about views, annotations, or anchors.

HOW: normalize the chunk sequence, reconstruct the A-view and B-view,
segment both into words, resequence the two word lists, consolidate the
result.

RULES:
- Zero-length chunks are dropped before reconstruction
- Adjacent chunks of the same kind are coalesced, so an unedited word split
  across two Equal chunks still counts as equal
- Neither normalization step changes the texts A and B
"""

from __future__ import annotations

import logging
from typing import Iterable, Tuple

from wordify.core.consolidator import consolidate
from wordify.core.ir import Chunk, OutputRun
from wordify.core.reconstructor import reconstruct
from wordify.core.resequencer import resequence
from wordify.core.segmenter import segment_words

logger = logging.getLogger(__name__)


def normalize_chunks(chunks: Iterable[Chunk]) -> Tuple[Chunk, ...]:
    """Drop empty chunks and coalesce runs of same-kind chunks."""
    normalized: list[Chunk] = []
    dropped = 0
    for chunk in chunks:
        if not chunk.text:
            dropped += 1
            continue
        if normalized and normalized[-1].kind is chunk.kind:
            normalized[-1] = Chunk(chunk.kind, normalized[-1].text + chunk.text)
        else:
            normalized.append(chunk)
    if dropped:
        logger.debug("Dropped %d zero-length chunks", dropped)
    return tuple(normalized)


def wordify(chunks: Iterable[Chunk]) -> list[OutputRun]:
    """Convert a character-level edit script into a word-level one.

    Args:
        chunks: Equal/Delete/Insert chunks such that Equal+Delete text is
            the original and Equal+Insert text is the revised text.

    Returns:
        Consolidated Equal/Delete/Insert runs aligned to whole words.

    Raises:
        AlignmentError: If the chunk sequence is internally inconsistent.
    """
    normalized = normalize_chunks(chunks)
    a_view, b_view = reconstruct(normalized)
    a_words = segment_words(a_view)
    b_words = segment_words(b_view)
    runs = consolidate(resequence(a_words, b_words))
    logger.debug(
        "Regrouped %d chunks into %d word-level runs (%d/%d chars)",
        len(normalized), len(runs), len(a_view.text), len(b_view.text),
    )
    return runs
