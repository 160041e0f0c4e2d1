"""Plain text formatter: the translated text and nothing else.

RULES:
- Content is TranslationResult.text unchanged (braces included)
- Output suffix: "-translated.txt"
- Media type: "text/plain"
"""

from __future__ import annotations

from piglatin_translator.formatters.base import BaseFormatter, FormatterOutput
from piglatin_translator.translator import TranslationResult


class PlainTextFormatter(BaseFormatter):

    @property
    def name(self) -> str:
        return "Plain text"

    def format(self, result: TranslationResult) -> FormatterOutput:
        return FormatterOutput(
            suffix="-translated.txt",
            content=result.text,
            media_type="text/plain",
        )
