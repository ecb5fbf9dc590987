"""Wordify — regroup a character-level edit script into whole-word runs.

WHY: Character diff engines report a one-letter edit ("world" -> "word")
as a splice buried inside an unchanged substring. Readers want to see the
whole old word deleted and the whole new word inserted. This package turns
the character script into a word script that reads that way.

HOW: Four-stage pipeline — reconstruct (both texts from the chunks),
segment (each text into word/between runs), resequence (merge the two
run lists around shared equal words), consolidate (join adjacent runs of
the same kind). Adapters feed chunks in, formatters render runs out.

RULES:
- The core pipeline is a pure function of the chunk sequence
- Equal+Delete output runs always concatenate to the original text
- Equal+Insert output runs always concatenate to the revised text
"""

__version__ = "0.1.0"
