"""Join adjacent output runs of the same kind.

The resequencer emits one run per word, so a deleted phrase arrives as
Delete("foo"), Delete(" "), Delete("bar"). Renderers want one run per
maximal span. A single left-to-right fold does it; runs of different
kinds are never merged, so order and content are preserved.
"""

from __future__ import annotations

from typing import Iterable

from wordify.core.ir import OutputRun


def consolidate(runs: Iterable[OutputRun]) -> list[OutputRun]:
    """Merge consecutive same-kind runs by concatenating their text."""
    merged: list[OutputRun] = []
    pending_kind = None
    pending_text: list[str] = []

    for run in runs:
        if run.kind is pending_kind:
            pending_text.append(run.text)
            continue
        if pending_kind is not None:
            merged.append(OutputRun(pending_kind, "".join(pending_text)))
        pending_kind = run.kind
        pending_text = [run.text]

    if pending_kind is not None:
        merged.append(OutputRun(pending_kind, "".join(pending_text)))

    return merged
