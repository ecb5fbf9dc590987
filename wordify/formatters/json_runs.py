"""JSON word-diff formatter.

WHY: Programs that render or post-process diffs (review tools, editors,
web front-ends) need the word-level runs in a machine-readable form with
a stable, documented shape.

HOW: Builds a dict with the two source labels, per-kind word counts, and
the ordered runs, then validates it against word_diff_schema.json before
serializing.

RULES:
- Top-level keys: "old", "new", "stats", "runs"
- Each run is {"op": "equal"|"delete"|"insert", "text": str}
- Schema validation is mandatory — raises on invalid output
- Output suffix is "-wordiff.json"; non-ASCII text is kept as-is
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import jsonschema

from wordify.core.ir import WordDiff
from wordify.formatters.base import BaseFormatter, FormatterOutput
from wordify.formatters.stats import diff_stats

_SCHEMA_PATH = Path(__file__).resolve().parent / "word_diff_schema.json"

_CACHED_SCHEMA: Optional[dict] = None


def _get_schema() -> dict:
    """Load and cache the word-diff JSON schema."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def build_document(diff: WordDiff) -> dict[str, Any]:
    """Build the JSON-ready word-diff document (not yet validated)."""
    return {
        "old": diff.old_label,
        "new": diff.new_label,
        "stats": diff_stats(diff.runs),
        "runs": [{"op": run.kind.value, "text": run.text} for run in diff.runs],
    }


class JSONFormatter(BaseFormatter):
    """Formatter that produces a schema-validated JSON document."""

    @property
    def name(self) -> str:
        return "JSON"

    def format(self, diff: WordDiff) -> list[FormatterOutput]:
        """Convert the word diff into a JSON document.

        Raises:
            jsonschema.ValidationError: If the generated document does not
                conform to word_diff_schema.json.
        """
        document = build_document(diff)
        jsonschema.validate(instance=document, schema=_get_schema())

        content = json.dumps(document, indent=2, ensure_ascii=False)

        return [
            FormatterOutput(
                suffix="-wordiff.json",
                content=content + "\n",
                media_type="application/json",
            )
        ]
