"""Pig Latin to English word transform with candidate selection.

WHY: Encoding throws information away. "igpay" could come from "pig" or
"gpi", "ethay" from "the" or "het". The decoder has to guess how many
trailing consonants were originally at the front of the word, and it
uses the word list and capitalization to make that guess.

HOW: decode_word() checks whether a token looks encoded (ends its letter
span in a lowercase "ay"), strips the "ay", and then either:
  1. drops a trailing "y" (the word was vowel-initial and got "yay"),
  2. keeps the letters as they are when no vowel is left, or
  3. enumerates every rotation of the consonants after the last vowel
     and picks one with select_candidate().

RULES:
- Tokens that do not look encoded come back with status "unchanged"
- Only a lowercase "ay" marks an encoded word; "Ay", "aY", "AY" do not
- Only a lowercase "y" triggers the vowel-initial rule
- A token left with no letters once "ay" or the "y" is removed ("ay!",
  "yay", "!yay") comes back "unchanged" rather than as an empty word
- Rotations are enumerated for split j in (last_vowel, last_letter],
  increasing, as intermediate[j:last+1] + intermediate[first:j]
- Selection priority, first match wins in enumeration order:
  dictionary AND capitalized, then capitalized, then dictionary
- With no qualifying candidate the word is "unresolved" and renders as
  the original token wrapped in curly braces
- Prefix and suffix non-letter content is preserved
"""

from __future__ import annotations

import logging
from typing import Container, Sequence

from piglatin_translator.core.ir import (
    STATUS_DECODED,
    STATUS_UNCHANGED,
    STATUS_UNRESOLVED,
    Candidate,
    DecodedWord,
    LetterSpan,
)

logger = logging.getLogger(__name__)

ENCODED_MARKER = "ay"


def _unchanged(word: str) -> DecodedWord:
    return DecodedWord(source=word, text=word, status=STATUS_UNCHANGED, rule="not_encoded")


def looks_encoded(word: str) -> bool:
    """True if the token passes the "is this Pig Latin" precondition.

    The token must contain a letter, be longer than two characters, and
    its last two letter-span characters must be exactly "ay".
    """
    span = LetterSpan.of(word)
    last = span.last_letter
    if not span.has_letters or len(word) <= 2 or last < 1:
        return False
    return word[last - 1:last + 1] == ENCODED_MARKER


def enumerate_candidates(
    intermediate: str,
    span: LetterSpan,
    dictionary: Container[str],
) -> list[Candidate]:
    """Build every rotation of the trailing consonant cluster.

    Args:
        intermediate: The token with its "ay" removed.
        span: LetterSpan of the intermediate; last_vowel must not be -1.
        dictionary: Word list supporting exact ``in`` membership.

    Returns:
        Candidates in increasing split order.
    """
    first, last = span.first_letter, span.last_letter
    candidates: list[Candidate] = []
    for j in range(span.last_vowel + 1, last + 1):
        text = intermediate[j:last + 1] + intermediate[first:j]
        candidates.append(Candidate(
            text=text,
            split=j,
            in_dictionary=text in dictionary,
            capitalized=text[0].isupper(),
        ))
    return candidates


def select_candidate(candidates: Sequence[Candidate]) -> tuple[Candidate | None, str]:
    """Pick the most plausible candidate by priority tier.

    Returns:
        (candidate, rule) where rule names the tier that matched, or
        (None, "unresolved") when no tier matched.
    """
    tiers = (
        ("dictionary_capitalized", lambda c: c.in_dictionary and c.capitalized),
        ("capitalized", lambda c: c.capitalized),
        ("dictionary", lambda c: c.in_dictionary),
    )
    for rule, matches in tiers:
        for candidate in candidates:
            if matches(candidate):
                return candidate, rule
    return None, STATUS_UNRESOLVED


def decode_word(word: str, dictionary: Container[str]) -> DecodedWord:
    """Translate a single Pig Latin word token back to English.

    Args:
        word: One word token from the tokenizer.
        dictionary: Word list supporting exact, case-sensitive ``in``.

    Returns:
        A DecodedWord describing the outcome. Use render() for text.
    """
    if not looks_encoded(word):
        return _unchanged(word)

    last_with_marker = LetterSpan.of(word).last_letter
    intermediate = word[:last_with_marker - 1] + word[last_with_marker + 1:]
    span = LetterSpan.of(intermediate)
    if not span.has_letters:
        # The letters were only "ay" itself
        return _unchanged(word)

    first, last = span.first_letter, span.last_letter

    if intermediate[last] == "y":
        text = intermediate[:last] + intermediate[last + 1:]
        if not LetterSpan.of(text).has_letters:
            return _unchanged(word)
        return DecodedWord(source=word, text=text, status=STATUS_DECODED, rule="vowel_initial")

    if span.last_vowel == -1:
        return DecodedWord(source=word, text=intermediate, status=STATUS_DECODED, rule="no_vowel")

    candidates = enumerate_candidates(intermediate, span, dictionary)
    chosen, rule = select_candidate(candidates)
    if chosen is None:
        logger.debug("No candidate for %r among %d rotations", word, len(candidates))
        return DecodedWord(
            source=word,
            text=word,
            status=STATUS_UNRESOLVED,
            rule=rule,
            candidates=candidates,
        )

    text = intermediate[:first] + chosen.text + intermediate[last + 1:]
    return DecodedWord(
        source=word,
        text=text,
        status=STATUS_DECODED,
        rule=rule,
        candidates=candidates,
    )
