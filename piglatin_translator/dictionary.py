"""English word list used to resolve ambiguous decodings.

WHY: Decoding "ethay" yields both "the" and "het" as syntactically valid
originals. The decoder prefers candidates that are real words, so it
needs a fast exact-match lookup against a list of known English words.

HOW: load_word_list() reads a UTF-8 text file with one word per line
into a frozenset held by a WordList. Lookups are hash probes, so a
translator can be shared between threads without any locking. The
package ships a default list in data/english_words.txt; the
PIG_LATIN_DICTIONARY environment variable points to a replacement.

RULES:
- Matching is exact and case-sensitive ("The" does not match "the")
- Leading/trailing whitespace on each line is stripped
- Blank lines and lines starting with '#' are ignored
- A missing or unreadable file raises DictionaryNotFoundError
- A WordList never changes after construction
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

from piglatin_translator.config import resolve_dictionary_path

logger = logging.getLogger(__name__)


class DictionaryNotFoundError(FileNotFoundError):
    """Raised when the word list file cannot be read.

    WHY: Every ambiguous decode depends on the word list, so a translator
    must not be constructed without one. A dedicated subclass lets
    callers tell this apart from other file errors.

    RULES:
    - Message includes the path that was tried
    - Raised at load time, before any translation happens
    """

    def __init__(self, path: Path, reason: str = "not found") -> None:
        self.path = path
        super().__init__("Dictionary file {}: {}".format(reason, path))


class WordList:
    """Immutable set of known words with exact membership tests."""

    def __init__(self, words: Iterable[str], source: str = "<memory>") -> None:
        self._words = frozenset(words)
        self.source = source

    @classmethod
    def from_words(cls, words: Iterable[str]) -> WordList:
        return cls(words)

    @classmethod
    def default(cls) -> WordList:
        """Load the configured word list (bundled unless overridden)."""
        return load_word_list(resolve_dictionary_path())

    def contains(self, candidate: str) -> bool:
        """True if candidate is exactly one of the words."""
        return candidate in self._words

    def __contains__(self, candidate: object) -> bool:
        return candidate in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __repr__(self) -> str:
        return "WordList({} words from {})".format(len(self._words), self.source)


def parse_word_lines(lines: Iterable[str]) -> list[str]:
    """Extract words from raw lines, skipping blanks and '#' comments."""
    words: list[str] = []
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        words.append(stripped)
    return words


def load_word_list(path: str | Path) -> WordList:
    """Load a word list file into a WordList.

    Args:
        path: Path to a UTF-8 text file with one word per line.

    Returns:
        The loaded WordList.

    Raises:
        DictionaryNotFoundError: If the file does not exist or cannot be read.
    """
    word_path = Path(path)
    if not word_path.is_file():
        raise DictionaryNotFoundError(word_path)
    try:
        text = word_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryNotFoundError(word_path, reason="unreadable ({})".format(exc)) from exc

    words = parse_word_lines(text.splitlines())
    logger.info("Loaded %d words from %s", len(words), word_path)
    return WordList(words, source=str(word_path))
