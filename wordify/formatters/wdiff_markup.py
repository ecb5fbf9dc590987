"""wdiff-style markup formatter.

WHY: The GNU wdiff notation — [-deleted-] and {+inserted+} inline in the
running text — is the quickest way to read a word diff in a terminal or
paste it into a review comment, and existing tooling already parses it.

HOW: Walks the runs in order. Equal text is written verbatim; deletions
are wrapped in "[-" / "-]" and insertions in "{+" / "+}". Because runs are
consolidated, a replaced word reads as "[-old-]{+new+}".

RULES:
- Equal text is never altered
- No escaping: text that itself contains the markers is written as-is
- A trailing newline is added when the content does not end with one
- Output suffix: "-wordiff.txt"
- Media type: "text/plain"
"""

from __future__ import annotations

from typing import List

from wordify.core.ir import ChunkKind, OutputRun, WordDiff
from wordify.formatters.base import BaseFormatter, FormatterOutput

_MARKERS = {
    ChunkKind.EQUAL: ("", ""),
    ChunkKind.DELETE: ("[-", "-]"),
    ChunkKind.INSERT: ("{+", "+}"),
}


def render_wdiff(runs: List[OutputRun]) -> str:
    """Render runs as wdiff markup without the trailing newline rule."""
    parts: List[str] = []
    for run in runs:
        opening, closing = _MARKERS[run.kind]
        parts.append(opening)
        parts.append(run.text)
        parts.append(closing)
    return "".join(parts)


class WdiffFormatter(BaseFormatter):
    """Formatter that produces wdiff-style inline markup."""

    @property
    def name(self) -> str:
        return "wdiff markup"

    def format(self, diff: WordDiff) -> List[FormatterOutput]:
        content = render_wdiff(diff.runs)
        if content and not content.endswith("\n"):
            content += "\n"

        return [
            FormatterOutput(
                suffix="-wordiff.txt",
                content=content,
                media_type="text/plain",
            )
        ]
