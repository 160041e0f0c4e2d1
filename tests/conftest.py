"""Shared test fixtures for the piglatin_translator test suite.

WHY: Several test modules need the same reference paragraph (in both
English and Pig Latin) and a word list that contains exactly the words
needed to decode it. Centralizing them keeps the expectations in one
place.

HOW: Module-level constants hold the paragraph text. Fixtures provide an
in-memory WordList, a translator built on it, and a word list file on
disk for loader and CLI tests.

RULES:
- PARAGRAPH_WORDS holds lowercase words only, so capitalized originals
  ("The", "For", "Pig", "Latin") are recovered by the capitalization rule
- PARAGRAPH_WORDS deliberately omits "who" so "owhay" decodes to "how"
"""

from typing import List

import pytest

from piglatin_translator.dictionary import WordList
from piglatin_translator.translator import PigLatinTranslator

ENGLISH_PARAGRAPH = (
    "The text you are currently reading has been generated for the sole purpose of testing. "
    "For all intents and purposes, this text will provide metrics as to how well the translator "
    "to English and the translator to Pig Latin are performing."
)

PIG_LATIN_PARAGRAPH = (
    "eThay exttay youyay areyay urrentlycay eadingray ashay eenbay eneratedgay orfay ethay "
    "olesay urposepay ofyay estingtay. orFay allyay intentsyay andyay urposespay, isthay exttay "
    "illway ovidepray etricsmay asyay otay owhay ellway ethay anslatortray otay Englishyay andyay "
    "ethay anslatortray otay igPay atinLay areyay erformingpay."
)

PARAGRAPH_WORDS: List[str] = [
    "text", "currently", "reading", "has", "been", "generated", "for", "the",
    "sole", "purpose", "testing", "purposes", "this", "will", "provide",
    "metrics", "to", "how", "well", "translator", "performing",
]


@pytest.fixture
def paragraph_words():
    """In-memory word list able to decode the reference paragraph."""
    return WordList.from_words(PARAGRAPH_WORDS)


@pytest.fixture
def translator(paragraph_words):
    """Translator with default separators and the paragraph word list."""
    return PigLatinTranslator(dictionary=paragraph_words)


@pytest.fixture
def word_list_file(tmp_path):
    """A word list file on disk with comments and blank lines."""
    path = tmp_path / "words.txt"
    path.write_text(
        "# test words\n"
        "pig\n"
        "\n"
        "  latin  \n"
        "The\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def english_paragraph():
    return ENGLISH_PARAGRAPH


@pytest.fixture
def pig_latin_paragraph():
    return PIG_LATIN_PARAGRAPH
