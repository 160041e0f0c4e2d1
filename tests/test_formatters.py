"""Unit tests for the output formatters.

WHY: The JSON report is the structured alternative to parsing braces
out of decoded text. It must always match its schema and describe each
word's outcome accurately.

HOW: Results come from a real translator on the paragraph word list.
The JSON report is parsed back and checked against the schema file with
jsonschema.
"""

import json
from pathlib import Path

import jsonschema
import pytest

from piglatin_translator.formatters import FORMATTERS
from piglatin_translator.formatters.base import BaseFormatter
from piglatin_translator.formatters.json_report import JSONReportFormatter
from piglatin_translator.formatters.plain_text import PlainTextFormatter
from piglatin_translator.translator import (
    DIRECTION_TO_ENGLISH,
    DIRECTION_TO_PIG_LATIN,
    TranslationResult,
)

SCHEMA_PATH = (
    Path(__file__).resolve().parent.parent
    / "piglatin_translator" / "formatters" / "translation_report_schema.json"
)


def _load_schema():
    with open(SCHEMA_PATH, encoding="utf-8") as f:
        return json.load(f)


class TestRegistry:

    def test_all_registered_formatters_are_formatters(self):
        for cls in FORMATTERS.values():
            assert issubclass(cls, BaseFormatter)
            assert cls().name

    def test_keys(self):
        assert set(FORMATTERS) == {"plain_text", "json_report"}


class TestPlainTextFormatter:

    def test_content_is_translation(self, translator):
        result = translator.translate("ethay igpay", DIRECTION_TO_ENGLISH)
        output = PlainTextFormatter().format(result)
        assert output.content == "the {igpay}"
        assert output.suffix == "-translated.txt"
        assert output.media_type == "text/plain"


class TestJSONReportFormatter:

    def test_report_matches_schema(self, translator, pig_latin_paragraph):
        result = translator.translate(pig_latin_paragraph, DIRECTION_TO_ENGLISH)
        output = JSONReportFormatter().format(result)
        report = json.loads(output.content)
        jsonschema.validate(instance=report, schema=_load_schema())
        assert output.suffix == "-report.json"
        assert output.media_type == "application/json"

    def test_summary_counts(self, translator):
        result = translator.translate("ethay, 42 igpay eatyay", DIRECTION_TO_ENGLISH)
        report = json.loads(JSONReportFormatter().format(result).content)
        assert report["summary"] == {
            "words": 4,
            "decoded": 2,
            "unchanged": 1,
            "unresolved": 1,
        }
        assert report["translation"] == "the, 42 {igpay} eat"

    def test_word_entries(self, translator):
        result = translator.translate("igpay", DIRECTION_TO_ENGLISH)
        report = json.loads(JSONReportFormatter().format(result).content)
        assert report["words"] == [{
            "source": "igpay",
            "text": "{igpay}",
            "status": "unresolved",
            "rule": "unresolved",
            "candidates": [
                {"text": "gpi", "split": 1, "in_dictionary": False, "capitalized": False},
                {"text": "pig", "split": 2, "in_dictionary": False, "capitalized": False},
            ],
        }]

    def test_pig_latin_direction_has_no_words(self, translator):
        result = translator.translate("pig", DIRECTION_TO_PIG_LATIN)
        report = json.loads(JSONReportFormatter().format(result).content)
        assert report["direction"] == "to_pig_latin"
        assert report["translation"] == "igpay"
        assert report["words"] == []

    def test_non_ascii_kept_readable(self, translator):
        result = translator.translate("über", DIRECTION_TO_PIG_LATIN)
        output = JSONReportFormatter().format(result)
        assert "erübay" in output.content

    def test_invalid_report_raises(self):
        result = TranslationResult(direction="sideways", source="x", text="x")
        with pytest.raises(jsonschema.ValidationError):
            JSONReportFormatter().format(result)
