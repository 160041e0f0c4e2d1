"""JSON report formatter with per-word decoding details.

WHY: When a decoded text contains "{word}" markers, users want to know
which candidates were considered and why none was picked. The report
exposes the structured DecodedWord results instead of making anyone
parse braces back out of the text.

HOW: Builds a dict with the direction, source text, translation, a
status summary, and one entry per decoded word (with its candidates),
validates it against translation_report_schema.json, and serializes it.

RULES:
- Validate output against the schema before returning; raise on failure
- "words" is empty for the Pig Latin direction
- Candidates are listed in enumeration (split) order
- Output suffix: "-report.json"
- Media type: "application/json"
"""

from __future__ import annotations

import json
from collections import Counter
from dataclasses import asdict
from pathlib import Path
from typing import Any

import jsonschema

from piglatin_translator.core.ir import STATUS_DECODED, STATUS_UNCHANGED, STATUS_UNRESOLVED, DecodedWord
from piglatin_translator.formatters.base import BaseFormatter, FormatterOutput
from piglatin_translator.translator import TranslationResult

_SCHEMA_PATH = Path(__file__).resolve().parent / "translation_report_schema.json"

_CACHED_SCHEMA: dict[str, Any] | None = None


def _get_schema() -> dict[str, Any]:
    """Load the report schema from disk, cached after the first call."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def _word_entry(word: DecodedWord) -> dict[str, Any]:
    return {
        "source": word.source,
        "text": word.render(),
        "status": word.status,
        "rule": word.rule,
        "candidates": [asdict(c) for c in word.candidates],
    }


class JSONReportFormatter(BaseFormatter):
    """Structured translation report, validated with jsonschema."""

    @property
    def name(self) -> str:
        return "JSON report"

    def format(self, result: TranslationResult) -> FormatterOutput:
        """Build and validate the report.

        Raises:
            jsonschema.ValidationError: If the report does not conform
                to the translation report schema.
        """
        counts = Counter(w.status for w in result.words)
        report: dict[str, Any] = {
            "direction": result.direction,
            "source": result.source,
            "translation": result.text,
            "summary": {
                "words": len(result.words),
                "decoded": counts[STATUS_DECODED],
                "unchanged": counts[STATUS_UNCHANGED],
                "unresolved": counts[STATUS_UNRESOLVED],
            },
            "words": [_word_entry(w) for w in result.words],
        }

        jsonschema.validate(instance=report, schema=_get_schema())

        return FormatterOutput(
            suffix="-report.json",
            content=json.dumps(report, indent=2, ensure_ascii=False),
            media_type="application/json",
        )
