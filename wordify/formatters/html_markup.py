"""HTML inline-markup formatter.

WHY: Browsers already know how to show edits: <del> renders struck
through, <ins> underlined. A self-contained fragment drops straight into
a review page or an e-mail.

HOW: Each run's text is HTML-escaped; deletions go in <del>, insertions
in <ins>, equal text stays bare. The whole diff is wrapped in
<pre class="wordiff"> so whitespace and line breaks survive.

RULES:
- All run text is escaped with html.escape (quotes included)
- The <pre> carries data-old / data-new attributes with the labels
- Output suffix: "-wordiff.html"
- Media type: "text/html"
"""

from __future__ import annotations

import html
from typing import List

from wordify.core.ir import ChunkKind, WordDiff
from wordify.formatters.base import BaseFormatter, FormatterOutput

_TAGS = {
    ChunkKind.DELETE: "del",
    ChunkKind.INSERT: "ins",
}


class HTMLFormatter(BaseFormatter):
    """Formatter that produces an HTML fragment with <del>/<ins> markup."""

    @property
    def name(self) -> str:
        return "HTML"

    def format(self, diff: WordDiff) -> List[FormatterOutput]:
        parts: List[str] = [
            '<pre class="wordiff" data-old="{}" data-new="{}">'.format(
                html.escape(diff.old_label), html.escape(diff.new_label),
            )
        ]
        for run in diff.runs:
            text = html.escape(run.text)
            tag = _TAGS.get(run.kind)
            if tag is None:
                parts.append(text)
            else:
                parts.append("<{tag}>{text}</{tag}>".format(tag=tag, text=text))
        parts.append("</pre>\n")

        return [
            FormatterOutput(
                suffix="-wordiff.html",
                content="".join(parts),
                media_type="text/html",
            )
        ]
