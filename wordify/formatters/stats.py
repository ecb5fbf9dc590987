"""Word counts per edit kind for a word-level diff."""

from __future__ import annotations

from typing import Dict, Iterable

from wordify.core.ir import ChunkKind, OutputRun
from wordify.core.segmenter import is_separator


def count_words(text: str) -> int:
    """Number of maximal word-character runs in text."""
    count = 0
    in_word = False
    for ch in text:
        if is_separator(ch):
            in_word = False
        elif not in_word:
            in_word = True
            count += 1
    return count


def diff_stats(runs: Iterable[OutputRun]) -> Dict[str, int]:
    """Count equal, deleted and inserted words across the runs.

    Output runs always start and end on word boundaries, so counting inside
    each run never splits a word between two kinds.
    """
    stats = {kind.value: 0 for kind in ChunkKind}
    for run in runs:
        stats[run.kind.value] += count_words(run.text)
    return stats
