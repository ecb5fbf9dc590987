"""Formatter registry keyed by the names accepted on --formats.

RULES:
- Values are formatter classes; callers instantiate them per run
- Registry order is the default output order when no formats are chosen
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from wordify.formatters.html_markup import HTMLFormatter
from wordify.formatters.json_runs import JSONFormatter
from wordify.formatters.wdiff_markup import WdiffFormatter

if TYPE_CHECKING:
    from wordify.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "json": JSONFormatter,
    "wdiff": WdiffFormatter,
    "html": HTMLFormatter,
}
