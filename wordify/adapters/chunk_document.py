"""Load and dump JSON chunk documents.

WHY: Character-level scripts do not always come from diff-match-patch.
Other engines (or other programs entirely) can hand over their script as
a small JSON document, and the CLI can regroup it without diffing again.

HOW: The document is validated with jsonschema against CHUNK_DOCUMENT_SCHEMA
before any chunk is built, so a bad op or a missing text field gives a
precise error instead of a KeyError deep in the pipeline.

RULES:
- Document shape: {"chunks": [{"op": "equal"|"delete"|"insert", "text": str}]}
- A bare top-level list of chunk objects is also accepted
- Extra keys on chunk objects are ignored
- JSON and schema errors are re-raised as ChunkDocumentError
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

import jsonschema

from wordify.core.ir import Chunk, ChunkKind
from wordify.errors import ChunkDocumentError

_CHUNK_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["op", "text"],
    "properties": {
        "op": {"enum": [kind.value for kind in ChunkKind]},
        "text": {"type": "string"},
    },
}

CHUNK_DOCUMENT_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Character-level edit script",
    "oneOf": [
        {
            "type": "object",
            "required": ["chunks"],
            "properties": {
                "chunks": {"type": "array", "items": _CHUNK_SCHEMA},
            },
        },
        {"type": "array", "items": _CHUNK_SCHEMA},
    ],
}


def parse_chunk_document(data: Union[Dict[str, Any], List[Any]]) -> List[Chunk]:
    """Validate a decoded chunk document and build its chunks.

    Raises:
        ChunkDocumentError: If the document does not match the schema.
    """
    try:
        jsonschema.validate(instance=data, schema=CHUNK_DOCUMENT_SCHEMA)
    except jsonschema.ValidationError as exc:
        raise ChunkDocumentError(
            "Invalid chunk document: {}".format(exc.message)
        ) from exc

    items = data["chunks"] if isinstance(data, dict) else data
    return [Chunk(ChunkKind(item["op"]), item["text"]) for item in items]


def load_chunk_document(path: Union[str, Path]) -> List[Chunk]:
    """Read a UTF-8 JSON chunk document from disk.

    Raises:
        ChunkDocumentError: If the file is not valid JSON or fails the schema.
        OSError: If the file cannot be read.
    """
    raw = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ChunkDocumentError(
            "{} is not valid JSON: {}".format(path, exc)
        ) from exc
    return parse_chunk_document(data)


def dump_chunk_document(chunks: Iterable[Chunk]) -> Dict[str, Any]:
    """Build a JSON-ready chunk document."""
    return {
        "chunks": [{"op": chunk.kind.value, "text": chunk.text} for chunk in chunks],
    }
