"""Abstract base formatter and output container.

WHY: The CLI can emit a translation as plain text or as a structured
JSON report. A shared interface lets it treat every output format the
same way and makes adding a new one a single-module change.

HOW: BaseFormatter is an ABC with a ``name`` property and a ``format()``
method. FormatterOutput bundles a file suffix with its content and MIME
type.

RULES:
- Subclasses MUST implement ``name`` and ``format()``
- ``suffix`` starts with a hyphen, e.g. ``"-report.json"``
- The caller decides whether to print the content or save it
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from piglatin_translator.translator import TranslationResult


@dataclass
class FormatterOutput:
    """One output document produced by a formatter.

    Attributes:
        suffix: File suffix appended to the source stem when saving.
        content: The document text.
        media_type: MIME type for the content, e.g. ``"application/json"``.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Renders a TranslationResult into one output document.

    PlainTextFormatter emits only the translated text; JSONReportFormatter
    adds per-word status, rule and candidates. A formatter never changes
    the translation, it only chooses how much of the result to show.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Plain text'."""

    @abstractmethod
    def format(self, result: TranslationResult) -> FormatterOutput:
        """Render a finished translation."""
