"""Intermediate representation dataclasses for the word regrouping pipeline.

WHY: A character diff engine hands over a flat list of Equal/Delete/Insert
chunks. Regrouping them into words needs a few intermediate shapes — the
two reconstructed texts, their word runs, the output runs — and every
stage must agree on them. The IR gives each stage one well-typed form.

HOW: Six types form the pipeline's vocabulary:
  ChunkKind     — equal / delete / insert tag shared by input and output
  Chunk         — one unit of the character-level edit script
  Annotation    — where a kept chunk starts inside a reconstructed text
  AnnotatedText — one reconstructed text (A-view or B-view) with annotations
  Word          — one word or between run of a reconstructed text
  OutputRun     — one unit of the word-level edit script

RULES:
- Everything but WordDiff is frozen — nothing is mutated after construction
- old_side_text / new_side_text rebuild A and B from any chunk or run list
- Annotations and words refer to chunks by integer index into the shared
  chunk tuple, so two chunks with identical text stay distinguishable
- Word.kind is "word" or "between"
- WordDiff bundles output runs with their source labels for formatters
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple, Union

WORD = "word"
BETWEEN = "between"


class ChunkKind(str, enum.Enum):
    """Tag for edit-script units.

    Inherits from str so values serialize cleanly to JSON.
    """

    EQUAL = "equal"
    DELETE = "delete"
    INSERT = "insert"


@dataclass(frozen=True)
class Chunk:
    """One Equal/Delete/Insert unit of the character-level edit script.

    RULES:
    - Equal text is present in both A and B
    - Delete text is present only in A, Insert text only in B
    """

    kind: ChunkKind
    text: str

    @classmethod
    def equal(cls, text: str) -> Chunk:
        return cls(ChunkKind.EQUAL, text)

    @classmethod
    def delete(cls, text: str) -> Chunk:
        return cls(ChunkKind.DELETE, text)

    @classmethod
    def insert(cls, text: str) -> Chunk:
        return cls(ChunkKind.INSERT, text)


@dataclass(frozen=True)
class Annotation:
    """Start offset of a kept chunk inside a reconstructed text."""

    start: int
    chunk: int  # index into AnnotatedText.chunks


@dataclass(frozen=True)
class AnnotatedText:
    """A reconstructed text (A-view or B-view) plus its annotation list.

    RULES:
    - annotations are strictly ordered by start, contiguous, no overlaps
    - the kept chunks' text lengths sum to len(text)
    - chunks is the full (normalized) chunk tuple, including chunks this
      view skipped; annotation indices point into it
    """

    text: str
    annotations: Tuple[Annotation, ...]
    chunks: Tuple[Chunk, ...]

    def chunk_text(self, annotation: Annotation) -> str:
        return self.chunks[annotation.chunk].text


@dataclass(frozen=True)
class Word:
    """A maximal word run or between run of one reconstructed text.

    WHY: The resequencer needs to know, per run, which chunks touched it.
    A run that only one Equal chunk contributed to was left alone by the
    edit and can anchor the alignment between the two views.

    RULES:
    - kind: "word" (no separator characters) or "between" (only separators)
    - chunks: contributing chunk indices, in order, consecutive duplicates
      collapsed
    - start: offset of the run inside its reconstructed text
    - chunk_offset: offset of the run's first character inside chunks[0]
    - is_equal: exactly one contributing chunk and that chunk is Equal
    """

    text: str
    kind: str
    chunks: Tuple[int, ...]
    start: int
    chunk_offset: int
    is_equal: bool = False

    @property
    def anchor_key(self) -> Optional[Tuple[int, int, int]]:
        """Identity of the Equal-chunk slice this run covers, or None.

        The same slice of the same Equal chunk gets the same key in the
        A-view and the B-view.
        """
        if not self.is_equal:
            return None
        return (self.chunks[0], self.chunk_offset, len(self.text))


@dataclass(frozen=True)
class OutputRun:
    """One Equal/Delete/Insert unit of the word-level edit script."""

    kind: ChunkKind
    text: str

    @classmethod
    def equal(cls, text: str) -> OutputRun:
        return cls(ChunkKind.EQUAL, text)

    @classmethod
    def delete(cls, text: str) -> OutputRun:
        return cls(ChunkKind.DELETE, text)

    @classmethod
    def insert(cls, text: str) -> OutputRun:
        return cls(ChunkKind.INSERT, text)


def old_side_text(items: Iterable[Union[Chunk, OutputRun]]) -> str:
    """Text A of a chunk or run list: Equal and Delete text, in order."""
    return "".join(x.text for x in items if x.kind is not ChunkKind.INSERT)


def new_side_text(items: Iterable[Union[Chunk, OutputRun]]) -> str:
    """Text B of a chunk or run list: Equal and Insert text, in order."""
    return "".join(x.text for x in items if x.kind is not ChunkKind.DELETE)


@dataclass
class WordDiff:
    """Word-level runs plus the labels of the two compared texts.

    This is what formatters receive. Labels are free-form (usually file
    names) and only used for display.
    """

    runs: list[OutputRun] = field(default_factory=list)
    old_label: str = "a"
    new_label: str = "b"

    @property
    def old_text(self) -> str:
        return old_side_text(self.runs)

    @property
    def new_text(self) -> str:
        return new_side_text(self.runs)
