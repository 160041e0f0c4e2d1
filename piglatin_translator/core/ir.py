"""Intermediate representation dataclasses for word-level translation.

WHY: The forward transform is a plain string rewrite, but the reverse
transform has three possible outcomes per word (left alone, decoded, or
recognised as Pig Latin but undecodable). Callers that want structured
results should not have to parse curly braces back out of a string, so
the decoder returns tagged objects and only the final assembly step
renders them to text.

HOW: Four dataclasses:
  TextSegment — one run of separators or one word run from the tokenizer
  LetterSpan  — first/last letter and vowel indices inside a word token
  Candidate   — one hypothesised original word during decoding
  DecodedWord — the outcome of decoding one word token

RULES:
- DecodedWord.status is "unchanged", "decoded" or "unresolved"
- DecodedWord.rule records which decoding rule produced the text
- Only DecodedWord.render() produces the "{token}" form
- Indices are -1 when the searched character class is absent
"""

from __future__ import annotations

from dataclasses import dataclass, field

VOWELS = frozenset("aeiouyAEIOUY")

STATUS_UNCHANGED = "unchanged"
STATUS_DECODED = "decoded"
STATUS_UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class TextSegment:
    """A maximal run of separator characters or of word characters.

    Attributes:
        text: The exact characters of the run.
        is_separator: True for a separator run, False for a word run.
    """

    text: str
    is_separator: bool


@dataclass(frozen=True)
class LetterSpan:
    """Letter and vowel positions inside a single word token.

    WHY: Both transforms keep everything outside the first-to-last letter
    range untouched, and both need the position of a boundary vowel to
    decide where the consonant cluster starts or ends.

    RULES:
    - first_letter / last_letter: indices of the first and last alphabetic
      character, or -1 when the token holds no letters
    - first_vowel / last_vowel: indices of the first and last a/e/i/o/u/y
      (either case), or -1 when there is none
    """

    first_letter: int
    last_letter: int
    first_vowel: int
    last_vowel: int

    @classmethod
    def of(cls, word: str) -> LetterSpan:
        letters = [i for i, c in enumerate(word) if c.isalpha()]
        vowels = [i for i, c in enumerate(word) if c in VOWELS]
        return cls(
            first_letter=letters[0] if letters else -1,
            last_letter=letters[-1] if letters else -1,
            first_vowel=vowels[0] if vowels else -1,
            last_vowel=vowels[-1] if vowels else -1,
        )

    @property
    def has_letters(self) -> bool:
        return self.first_letter > -1

    def prefix(self, word: str) -> str:
        """Non-letter content before the first letter."""
        return word[:self.first_letter]

    def letters(self, word: str) -> str:
        """The inclusive first-to-last letter range."""
        return word[self.first_letter:self.last_letter + 1]

    def suffix(self, word: str) -> str:
        """Non-letter content after the last letter."""
        return word[self.last_letter + 1:]


@dataclass(frozen=True)
class Candidate:
    """A hypothesised original word produced during decoding.

    Attributes:
        text: The rotated letter content.
        split: The split index j the rotation was taken at.
        in_dictionary: True if the word list contains text exactly.
        capitalized: True if the first character is uppercase.
    """

    text: str
    split: int
    in_dictionary: bool
    capitalized: bool


@dataclass
class DecodedWord:
    """The outcome of running the reverse transform on one word token.

    WHY: Tagging the outcome keeps the "looked encoded but undecodable"
    signal structured until the caller asks for text.

    RULES:
    - source: the token exactly as it appeared in the input
    - text: the reconstructed token; equals source when not decoded
    - status: STATUS_UNCHANGED, STATUS_DECODED or STATUS_UNRESOLVED
    - rule: "not_encoded", "vowel_initial", "no_vowel",
      "dictionary_capitalized", "capitalized", "dictionary" or "unresolved"
    - candidates: every rotation considered, in increasing split order
    """

    source: str
    text: str
    status: str
    rule: str
    candidates: list[Candidate] = field(default_factory=list)

    @property
    def resolved(self) -> bool:
        return self.status != STATUS_UNRESOLVED

    def render(self) -> str:
        """Return the token as it should appear in translated text."""
        if self.status == STATUS_UNRESOLVED:
            return "{" + self.source + "}"
        return self.text
