"""English to Pig Latin word transform.

WHY: The forward direction is fully deterministic, so it lives in one
small pure function that the translator maps over every word.

HOW: Locate the letter span and the first vowel. Vowel-initial words get
"yay" appended to their letters. Otherwise the consonant cluster before
the first vowel moves behind the rest of the letters and "ay" is
appended. Words with no vowel keep their letters and just get "ay".

RULES:
- Tokens without letters are returned unchanged
- Non-letter content before the first letter and after the last letter
  is reproduced byte-for-byte
- Exactly two ("ay") or three ("yay") characters are added
- The moved cluster keeps its letter order and case
- "y" counts as a vowel (so "yellow" -> "yellowyay")
"""

from __future__ import annotations

from piglatin_translator.core.ir import LetterSpan

SUFFIX_CONSONANT = "ay"
SUFFIX_VOWEL = "yay"


def encode_word(word: str) -> str:
    """Translate a single word token to Pig Latin.

    Examples:
        >>> encode_word("pig")
        'igpay'
        >>> encode_word("eat")
        'eatyay'
        >>> encode_word('"Hello!')
        '"elloHay!'
    """
    span = LetterSpan.of(word)
    if not span.has_letters:
        return word

    prefix = span.prefix(word)
    suffix = span.suffix(word)

    if span.first_letter == span.first_vowel:
        return prefix + span.letters(word) + SUFFIX_VOWEL + suffix

    if span.first_vowel != -1:
        body = word[span.first_vowel:span.last_letter + 1] + word[span.first_letter:span.first_vowel]
    else:
        body = span.letters(word)
    return prefix + body + SUFFIX_CONSONANT + suffix
