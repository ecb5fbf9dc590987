"""Adapters that produce chunk sequences for the regrouping core.

WHY: The core only knows chunks. Where the chunks come from — a diff
engine run on two texts, or a JSON document written by another tool —
is the adapters' business, so each source can change independently.

RULES:
- Adapters return plain Chunk lists and never call formatters
- Each source lives in its own module under this package
"""

from wordify.adapters.chunk_document import (
    dump_chunk_document,
    load_chunk_document,
    parse_chunk_document,
)
from wordify.adapters.dmp_adapter import chunks_from_dmp, diff_chars, diff_words

__all__ = [
    "chunks_from_dmp",
    "diff_chars",
    "diff_words",
    "dump_chunk_document",
    "load_chunk_document",
    "parse_chunk_document",
]
