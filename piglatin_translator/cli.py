"""Command-line interface for the Pig Latin translator.

WHY: Users want to translate text from the terminal or a shell pipeline
without writing Python. The CLI wires together input reading, the
translator, and the pluggable output formatters behind one command.

HOW: Uses argparse with an ``encode`` / ``decode`` direction argument.
Text comes from the positional argument, --file, or stdin. The chosen
formatter renders the TranslationResult, which is printed to stdout or
written to --output. Status and error messages go to stderr.

RULES:
- encode: English to Pig Latin; decode: Pig Latin to English
- --separators: string whose characters are the separators (empty = defaults);
  when omitted, PIG_LATIN_SEPARATORS or the defaults apply
- --dictionary: word list path (decode only); defaults to the configured list
- text and --file are mutually exclusive
- --format: a FORMATTERS key, default plain_text
- Exit codes: 0 = success, 1 = error
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from piglatin_translator.config import LOG_FORMAT, load_log_level, load_separators
from piglatin_translator.dictionary import DictionaryNotFoundError, WordList, load_word_list
from piglatin_translator.formatters import FORMATTERS
from piglatin_translator.translator import (
    DIRECTION_TO_ENGLISH,
    DIRECTION_TO_PIG_LATIN,
    PigLatinTranslator,
)

logger = logging.getLogger(__name__)

_DIRECTIONS = {
    "encode": DIRECTION_TO_PIG_LATIN,
    "decode": DIRECTION_TO_ENGLISH,
}


def _status(msg: str) -> None:
    """Print a status message to stderr so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def _read_input(args: argparse.Namespace) -> str:
    """Return the input text from the positional text, --file, or stdin.

    Raises:
        OSError: If --file cannot be read.
    """
    if args.text is not None:
        return args.text
    if args.file and args.file != "-":
        return Path(args.file).read_text(encoding="utf-8")
    return sys.stdin.read()


def _build_translator(args: argparse.Namespace) -> PigLatinTranslator:
    """Create the translator for the requested direction.

    Raises:
        DictionaryNotFoundError: If decoding and the word list is missing.
        ValueError: If the separators are invalid.
    """
    separators = list(args.separators) if args.separators is not None else load_separators()
    if args.direction != "decode":
        # Encoding never consults the word list
        return PigLatinTranslator(separators=separators, dictionary=WordList.from_words(()))
    if args.dictionary:
        return PigLatinTranslator(separators=separators, dictionary=load_word_list(args.dictionary))
    return PigLatinTranslator(separators=separators)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Kept separate from main() so tests can inspect the parser.
    """
    parser = argparse.ArgumentParser(
        prog="piglatin_translator",
        description="Translate text between English and Pig Latin.",
    )

    parser.add_argument(
        "direction",
        choices=sorted(_DIRECTIONS),
        help="encode: English to Pig Latin. decode: Pig Latin to English.",
    )

    source = parser.add_mutually_exclusive_group()

    source.add_argument(
        "text",
        nargs="?",
        default=None,
        help="Text to translate. Reads --file or stdin when omitted.",
    )

    source.add_argument(
        "--file",
        default=None,
        help="Path to a UTF-8 text file to translate ('-' for stdin).",
    )

    parser.add_argument(
        "--separators",
        default=None,
        help="Characters that separate words (default: space - — . , \").",
    )

    parser.add_argument(
        "--dictionary",
        default=None,
        help="Path to a word list file, one word per line (decode only).",
    )

    parser.add_argument(
        "--format",
        dest="output_format",
        default="plain_text",
        choices=sorted(FORMATTERS),
        help="Output format (default: %(default)s).",
    )

    parser.add_argument(
        "--output",
        default=None,
        help="Write output to this file instead of stdout.",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``python -m piglatin_translator``.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        level = load_log_level()
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else level,
            format=LOG_FORMAT,
        )
        translator = _build_translator(args)
        raw = _read_input(args)
    except (DictionaryNotFoundError, ValueError, OSError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)

    result = translator.translate(raw, _DIRECTIONS[args.direction])
    output = FORMATTERS[args.output_format]().format(result)

    if args.output:
        try:
            Path(args.output).write_text(output.content, encoding="utf-8")
        except OSError as e:
            print("Error: {}".format(e), file=sys.stderr)
            sys.exit(1)
        _status("Wrote {} to {}".format(output.media_type, args.output))
    else:
        sys.stdout.write(output.content)
        if not output.content.endswith("\n"):
            sys.stdout.write("\n")

    if result.unresolved:
        _status("{} word(s) could not be decoded".format(len(result.unresolved)))


if __name__ == "__main__":
    main()
