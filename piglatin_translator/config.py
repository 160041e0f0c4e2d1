"""Configuration constants, separator handling, and .env loading.

WHY: Centralizes the configurable values (separator set, word list
location, log level) so they are easy to find and override without
touching translation logic.

HOW: python-dotenv loads the .env file on import. Defaults are plain
module-level data. Environment variables override them:
  PIG_LATIN_SEPARATORS  — characters to split words on
  PIG_LATIN_DICTIONARY  — path to a replacement word list
  PIG_LATIN_LOG_LEVEL   — logging level name for the CLI

RULES:
- Separators are single characters; anything else is a ValueError
- An empty or missing separator set falls back to DEFAULT_SEPARATORS
- The bundled word list is used unless PIG_LATIN_DICTIONARY is set
- An unknown PIG_LATIN_LOG_LEVEL is a ValueError
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Separators
# ---------------------------------------------------------------------------

DEFAULT_SEPARATORS: tuple[str, ...] = (" ", "-", "—", ".", ",", '"')
"""Space, hyphen, em-dash, period, comma, and double quote."""


def normalize_separators(separators: Iterable[str] | None) -> list[str]:
    """Validate a separator collection and apply the default fallback.

    RULES:
    - None or an empty collection returns DEFAULT_SEPARATORS
    - Every entry must be a one-character string
    - Duplicates are dropped, first occurrence order is kept

    Raises:
        ValueError: If an entry is not exactly one character long.
    """
    result: list[str] = []
    for sep in separators or ():
        if not isinstance(sep, str) or len(sep) != 1:
            raise ValueError(
                "Separators must be single characters, got {!r}".format(sep)
            )
        if sep not in result:
            result.append(sep)
    if not result:
        return list(DEFAULT_SEPARATORS)
    return result


def load_separators() -> list[str]:
    """Return the separator set from PIG_LATIN_SEPARATORS or the defaults.

    Each character of the environment value is one separator.
    """
    return normalize_separators(os.getenv("PIG_LATIN_SEPARATORS", ""))


# ---------------------------------------------------------------------------
# Word list
# ---------------------------------------------------------------------------

BUNDLED_DICTIONARY_PATH = Path(__file__).resolve().parent / "data" / "english_words.txt"


def resolve_dictionary_path() -> Path:
    """Return the word list path, honouring PIG_LATIN_DICTIONARY."""
    override = os.getenv("PIG_LATIN_DICTIONARY", "").strip()
    if override:
        return Path(override).expanduser()
    return BUNDLED_DICTIONARY_PATH


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def load_log_level() -> str:
    """Return the level name from PIG_LATIN_LOG_LEVEL, default WARNING.

    Raises:
        ValueError: If the value is not one of LOG_LEVELS.
    """
    level = os.getenv("PIG_LATIN_LOG_LEVEL", "").strip().upper() or "WARNING"
    if level not in LOG_LEVELS:
        raise ValueError(
            "PIG_LATIN_LOG_LEVEL must be one of {}, got {!r}".format(", ".join(LOG_LEVELS), level)
        )
    return level
