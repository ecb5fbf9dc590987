"""Shared test fixtures for the wordify test suite.

WHY: Several test modules need the same small character-level scripts.
Centralizing them here keeps every module checking against the same cases.

RULES:
- Chunk scripts are hand-written, not produced by a diff engine, so the
  expected output does not depend on diff-match-patch internals.
"""

import pytest

from wordify.core.ir import Chunk


@pytest.fixture
def hello_world_chunks():
    """Character script for "Hello world" → "Hello word"."""
    return [Chunk.equal("Hello wor"), Chunk.delete("l"), Chunk.equal("d")]


@pytest.fixture
def glued_deletion_chunks():
    """A deletion glued onto the first word of an Equal chunk.

    On the A side "x" + "y" form one edited word "xy"; on the B side "y"
    stands alone and is untouched by any edit.
    """
    return [Chunk.delete("x"), Chunk.equal("y z")]
