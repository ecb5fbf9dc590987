"""Rebuild the original and revised texts from a character-level script.

WHY: Words can only be found in whole texts, but the edit script carries
the two texts interleaved. Each side has to be replayed on its own before
it can be segmented, and each character has to remember which chunk it
came from so that word runs can later be attributed to edits.

HOW: One pass over the chunk tuple per side. Chunks belonging to that
side are appended to a text buffer, and an Annotation records the offset
where each kept chunk starts. Chunks of the other side are skipped.

RULES:
- A-view keeps Equal and Delete chunks; Insert chunks are skipped
- B-view keeps Equal and Insert chunks; Delete chunks are skipped
- Skipped chunks get no annotation and contribute no characters
- Chunk order is never changed
"""

from __future__ import annotations

from typing import Sequence, Tuple

from wordify.core.ir import AnnotatedText, Annotation, Chunk, ChunkKind

SIDE_A = "a"
SIDE_B = "b"

_KEPT_KINDS = {
    SIDE_A: frozenset({ChunkKind.EQUAL, ChunkKind.DELETE}),
    SIDE_B: frozenset({ChunkKind.EQUAL, ChunkKind.INSERT}),
}


def build_view(chunks: Sequence[Chunk], side: str) -> AnnotatedText:
    """Reconstruct one side of the edit script.

    Args:
        chunks: The ordered chunk sequence.
        side: SIDE_A for the original text, SIDE_B for the revised text.

    Returns:
        The reconstructed text with one annotation per kept chunk.
    """
    try:
        kept = _KEPT_KINDS[side]
    except KeyError:
        raise ValueError("Unknown side '{}', expected 'a' or 'b'".format(side)) from None

    chunk_tuple = tuple(chunks)
    parts: list[str] = []
    annotations: list[Annotation] = []
    offset = 0

    for index, chunk in enumerate(chunk_tuple):
        if chunk.kind not in kept:
            continue
        annotations.append(Annotation(start=offset, chunk=index))
        parts.append(chunk.text)
        offset += len(chunk.text)

    return AnnotatedText(
        text="".join(parts),
        annotations=tuple(annotations),
        chunks=chunk_tuple,
    )


def reconstruct(chunks: Sequence[Chunk]) -> Tuple[AnnotatedText, AnnotatedText]:
    """Return the (A-view, B-view) pair for a chunk sequence."""
    chunk_tuple = tuple(chunks)
    return build_view(chunk_tuple, SIDE_A), build_view(chunk_tuple, SIDE_B)
