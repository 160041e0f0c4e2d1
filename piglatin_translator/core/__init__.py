"""Core tokenizer, word transforms, and intermediate representation.

WHY: The core package is the translation engine itself, pure string
logic with no file I/O or configuration. The translator, CLI, and
formatters are thin layers on top of it.

HOW: ir.py defines the data structures, tokenizer.py splits text into
separator and word runs, encoder.py and decoder.py transform single
words in each direction.

RULES:
- Core functions are pure: same input, same output, no global state
- The decoder only needs an object supporting ``in`` for the word list
- Curly-brace rendering happens in DecodedWord.render(), nowhere else
"""
