"""Formatters available to the CLI, keyed by their --format name.

``plain_text`` prints the translation the way the translator returns it.
``json_report`` adds a summary and per-word decode details.

RULES:
- A key is the exact string accepted by ``--format``
- A value is a BaseFormatter subclass; the CLI instantiates it per run
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from piglatin_translator.formatters.json_report import JSONReportFormatter
from piglatin_translator.formatters.plain_text import PlainTextFormatter

if TYPE_CHECKING:
    from piglatin_translator.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "plain_text": PlainTextFormatter,
    "json_report": JSONReportFormatter,
}
