"""Formatter interface shared by every output format.

A formatter turns one WordDiff into file content. The CLI only talks to
this interface: it picks formatter classes from the registry, calls
format(), and writes each FormatterOutput to {stem}{suffix}.

RULES:
- name is shown in CLI status lines; format() does the rendering
- format() returns a list of outputs; today each format yields exactly one
- suffix begins with "-" and carries the extension ("-wordiff.html")
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from wordify.core.ir import WordDiff


@dataclass
class FormatterOutput:
    """Rendered content plus the suffix and MIME type to save it under."""

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Renders a WordDiff. Register subclasses in ``FORMATTERS``."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name, e.g. 'wdiff markup'."""

    @abstractmethod
    def format(self, diff: WordDiff) -> list[FormatterOutput]:
        """Render the consolidated runs of ``diff``."""
