"""The PigLatinTranslator facade used by library callers and the CLI.

WHY: Callers want one object configured once (separators, word list)
that translates whole texts in either direction. Holding the word list
on the instance means it is loaded once per translator, not per call.

HOW: The constructor normalizes separators and loads the word list
(eagerly, so a missing list fails immediately). to_pig_latin() and
to_english() map the core word transforms over the tokenizer's word
runs. decode_words() exposes the tagged per-word results for callers
that need more than text.

RULES:
- An empty or missing separator list means the default separators
- The separators property can be reassigned; the same rules apply
- A missing word list raises DictionaryNotFoundError at construction
- Undecodable words render as "{word}"; the rest of the text is unaffected
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Container, Iterable

from piglatin_translator.config import normalize_separators
from piglatin_translator.core.decoder import decode_word
from piglatin_translator.core.encoder import encode_word
from piglatin_translator.core.ir import DecodedWord
from piglatin_translator.core.tokenizer import map_words, split_segments
from piglatin_translator.dictionary import WordList

logger = logging.getLogger(__name__)

DIRECTION_TO_PIG_LATIN = "to_pig_latin"
DIRECTION_TO_ENGLISH = "to_english"


@dataclass
class TranslationResult:
    """A finished translation, as consumed by the output formatters.

    RULES:
    - direction: DIRECTION_TO_PIG_LATIN or DIRECTION_TO_ENGLISH
    - words: per-word decode results; empty for the Pig Latin direction
    """

    direction: str
    source: str
    text: str
    words: list[DecodedWord] = field(default_factory=list)

    @property
    def unresolved(self) -> list[DecodedWord]:
        return [w for w in self.words if not w.resolved]


class PigLatinTranslator:
    """Translate text between English and Pig Latin.

    Example:
        >>> translator = PigLatinTranslator(dictionary=WordList.from_words(["pig"]))
        >>> translator.to_pig_latin("pig latin")
        'igpay atinlay'
        >>> translator.to_english("igpay")
        'pig'
    """

    def __init__(
        self,
        separators: Iterable[str] | None = None,
        dictionary: Container[str] | None = None,
    ) -> None:
        self._separators = normalize_separators(separators)
        self.dictionary = dictionary if dictionary is not None else WordList.default()

    @property
    def separators(self) -> list[str]:
        return list(self._separators)

    @separators.setter
    def separators(self, separators: Iterable[str] | None) -> None:
        self._separators = normalize_separators(separators)

    def to_pig_latin(self, text: str) -> str:
        """Translate English text to Pig Latin."""
        return map_words(text, self._separators, encode_word)

    def decode_words(self, text: str) -> list[DecodedWord]:
        """Decode each word run of text, in order, without rendering."""
        return [
            decode_word(segment.text, self.dictionary)
            for segment in split_segments(text, self._separators)
            if not segment.is_separator
        ]

    def to_english(self, text: str) -> str:
        """Translate Pig Latin text to English.

        Words that look like Pig Latin but match no rule come back
        wrapped in curly braces.
        """
        return self.translate(text, DIRECTION_TO_ENGLISH).text

    def translate(self, text: str, direction: str) -> TranslationResult:
        """Translate text in the given direction and keep the details.

        Raises:
            ValueError: If direction is not a known direction.
        """
        if direction == DIRECTION_TO_PIG_LATIN:
            return TranslationResult(direction=direction, source=text, text=self.to_pig_latin(text))
        if direction != DIRECTION_TO_ENGLISH:
            raise ValueError(
                "Unknown direction '{}'. Available: {}, {}".format(
                    direction, DIRECTION_TO_PIG_LATIN, DIRECTION_TO_ENGLISH
                )
            )

        words: list[DecodedWord] = []

        def _decode(word: str) -> str:
            decoded = decode_word(word, self.dictionary)
            words.append(decoded)
            return decoded.render()

        translated = map_words(text, self._separators, _decode)
        unresolved = sum(1 for w in words if not w.resolved)
        logger.debug("Decoded %d words (%d unresolved)", len(words), unresolved)
        return TranslationResult(direction=direction, source=text, text=translated, words=words)


def translate_to_pig_latin(text: str, separators: Iterable[str] | None = None) -> str:
    """Translate English text to Pig Latin without building a translator.

    The forward direction needs no word list, so none is loaded.
    """
    return map_words(text, normalize_separators(separators), encode_word)


def translate_to_english(
    text: str,
    separators: Iterable[str] | None = None,
    dictionary: Container[str] | None = None,
) -> str:
    """Translate Pig Latin text to English with a one-off translator."""
    return PigLatinTranslator(separators=separators, dictionary=dictionary).to_english(text)
