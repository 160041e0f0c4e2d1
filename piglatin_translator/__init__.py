"""Pig Latin Translator: English to Pig Latin and back.

WHY: Encoding English into Pig Latin is mechanical, but decoding is
ambiguous: the encoder moves a consonant cluster of unknown length to
the end of the word. This package does both directions and resolves
the ambiguity with a small, explainable dictionary-and-capitalization
rule.

HOW: Three layers: tokenize (split text on separator characters),
transform (per-word encoder/decoder in core/), and present (translator
facade, formatters, CLI). The word list is loaded once per translator.

RULES:
- Every non-letter character outside a word's letters is preserved
- Separators are reproduced exactly, in place
- Undecodable words appear as "{word}" in decoded text
- The core engine has no global state and no I/O
"""

from piglatin_translator.core.decoder import decode_word
from piglatin_translator.core.encoder import encode_word
from piglatin_translator.core.ir import DecodedWord
from piglatin_translator.dictionary import DictionaryNotFoundError, WordList, load_word_list
from piglatin_translator.translator import (
    PigLatinTranslator,
    TranslationResult,
    translate_to_english,
    translate_to_pig_latin,
)

__all__ = [
    "PigLatinTranslator",
    "TranslationResult",
    "DecodedWord",
    "WordList",
    "DictionaryNotFoundError",
    "load_word_list",
    "encode_word",
    "decode_word",
    "translate_to_pig_latin",
    "translate_to_english",
]

__version__ = "0.1.0"
