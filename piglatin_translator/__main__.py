"""Package entry point for ``python -m piglatin_translator``."""

from piglatin_translator.cli import main

if __name__ == "__main__":
    main()
