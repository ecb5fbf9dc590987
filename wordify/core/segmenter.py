"""Word segmentation of a reconstructed text, with chunk attribution.

WHY: The resequencer works on whole words, and it has to know for each
word whether any edit touched it. Splitting the reconstructed text while
walking its annotations gives both at once: the run boundaries and the
list of chunks that contributed characters to each run.

HOW: A two-state machine (between / word) walks every character of every
annotation in order. A transition between separator and word characters
closes the current run and opens a new one. Each run accumulates its text
and the chunk indices it drew from. After the walk the trailing run is
flushed.

RULES:
- Separator character: whitespace or ASCII punctuation; anything else is
  a word character; Unicode punctuation counts as a word character
- Initial state is between with an empty buffer; a leading word character
  switches to word without emitting an empty between run
- Chunk indices are appended only when they differ from the last entry
- Concatenating the emitted runs reproduces the text exactly
"""

from __future__ import annotations

import string

from wordify.core.ir import BETWEEN, WORD, AnnotatedText, ChunkKind, Word

_ASCII_PUNCTUATION = frozenset(string.punctuation)


def is_separator(ch: str) -> bool:
    """True for whitespace and ASCII punctuation characters."""
    return ch.isspace() or ch in _ASCII_PUNCTUATION


def segment_words(view: AnnotatedText) -> list[Word]:
    """Split a reconstructed text into alternating word and between runs.

    Args:
        view: An A-view or B-view built by the reconstructor.

    Returns:
        The ordered runs, each tagged with its contributing chunk indices.
    """
    words: list[Word] = []

    state = BETWEEN
    run_text: list[str] = []
    run_chunks: list[int] = []
    run_start = 0
    run_chunk_offset = 0

    def _flush_current() -> None:
        """Emit the current run, if it holds any characters."""
        nonlocal run_text, run_chunks
        if not run_text:
            return
        chunk_ids = tuple(run_chunks)
        is_equal = (
            len(chunk_ids) == 1
            and view.chunks[chunk_ids[0]].kind is ChunkKind.EQUAL
        )
        words.append(Word(
            text="".join(run_text),
            kind=state,
            chunks=chunk_ids,
            start=run_start,
            chunk_offset=run_chunk_offset,
            is_equal=is_equal,
        ))
        run_text = []
        run_chunks = []

    for annotation in view.annotations:
        chunk_text = view.chunk_text(annotation)
        for i, ch in enumerate(chunk_text):
            next_state = BETWEEN if is_separator(ch) else WORD
            if next_state != state:
                _flush_current()
                state = next_state

            if not run_text:
                run_start = annotation.start + i
                run_chunk_offset = i
            run_text.append(ch)
            if not run_chunks or run_chunks[-1] != annotation.chunk:
                run_chunks.append(annotation.chunk)

    _flush_current()

    return words
