"""Adapter: google-diff-match-patch output to wordify chunks.

WHY: The regrouping core consumes a character-level edit script but does
not compute one. diff-match-patch is a well-tested character diff engine
whose output maps one-to-one onto Equal/Delete/Insert chunks.

HOW: diff_chars() runs diff_main on the two texts (optionally followed by
semantic cleanup) and converts the (op, text) tuples with
chunks_from_dmp(). diff_words() feeds the result straight into the core.

RULES:
- Op codes: -1 → Delete, 0 → Equal, 1 → Insert
- Unknown op codes raise ValueError
- checklines is always off — the line-mode speedup changes nothing for
  short texts and can produce coarser chunks for long ones
- timeout=None / semantic=None fall back to the configured defaults
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

import diff_match_patch as dmp_module

from wordify.config import load_diff_timeout, load_semantic_cleanup
from wordify.core.ir import Chunk, ChunkKind, OutputRun
from wordify.core.pipeline import wordify

logger = logging.getLogger(__name__)

_OP_KINDS = {
    dmp_module.diff_match_patch.DIFF_DELETE: ChunkKind.DELETE,
    dmp_module.diff_match_patch.DIFF_EQUAL: ChunkKind.EQUAL,
    dmp_module.diff_match_patch.DIFF_INSERT: ChunkKind.INSERT,
}


def chunks_from_dmp(diffs: Iterable[Tuple[int, str]]) -> List[Chunk]:
    """Convert diff-match-patch (op, text) tuples into chunks."""
    chunks: List[Chunk] = []
    for op, text in diffs:
        try:
            kind = _OP_KINDS[op]
        except KeyError:
            raise ValueError("Unknown diff-match-patch op: {!r}".format(op)) from None
        chunks.append(Chunk(kind, text))
    return chunks


def diff_chars(
    text_a: str,
    text_b: str,
    timeout: Optional[float] = None,
    semantic: Optional[bool] = None,
) -> List[Chunk]:
    """Compute a character-level edit script between two texts.

    Args:
        text_a: The original text.
        text_b: The revised text.
        timeout: diff-match-patch Diff_Timeout in seconds (0 = unlimited).
        semantic: Run diff_cleanupSemantic on the raw diff.

    Returns:
        Chunks whose Equal+Delete text is text_a and Equal+Insert text is
        text_b.
    """
    if timeout is None:
        timeout = load_diff_timeout()
    if semantic is None:
        semantic = load_semantic_cleanup()

    dmp = dmp_module.diff_match_patch()
    dmp.Diff_Timeout = timeout
    diffs = dmp.diff_main(text_a, text_b, False)
    if semantic:
        dmp.diff_cleanupSemantic(diffs)

    logger.debug(
        "diff-match-patch produced %d chunks (timeout=%s, semantic=%s)",
        len(diffs), timeout, semantic,
    )
    return chunks_from_dmp(diffs)


def diff_words(
    text_a: str,
    text_b: str,
    timeout: Optional[float] = None,
    semantic: Optional[bool] = None,
) -> List[OutputRun]:
    """Word-level edit script between two texts."""
    return wordify(diff_chars(text_a, text_b, timeout=timeout, semantic=semantic))
