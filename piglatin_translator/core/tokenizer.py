"""Split text into separator runs and word runs.

WHY: Both translation directions work one word at a time, but the output
must reproduce every separator character in its original position. The
tokenizer is the only place that knows where words start and stop.

HOW: A single left-to-right scan groups consecutive characters by whether
they belong to the separator set. Each maximal group becomes a
TextSegment. map_words() runs a per-word function over the word segments
and joins everything back together in order.

RULES:
- Concatenating all segments reproduces the input exactly
- Separator runs are never passed to the word function
- Empty input yields no segments (and an empty string from map_words)
- Separators are single characters; membership is exact (case-sensitive)
"""

from __future__ import annotations

from typing import Callable, Collection, Iterator

from piglatin_translator.core.ir import TextSegment


def split_segments(text: str, separators: Collection[str]) -> Iterator[TextSegment]:
    """Yield maximal separator / word runs covering text exactly.

    Args:
        text: The text to split.
        separators: Single-character separator strings.

    Yields:
        TextSegment objects in input order.
    """
    if not text:
        return

    start = 0
    in_separator = text[0] in separators
    for i in range(1, len(text)):
        is_separator = text[i] in separators
        if is_separator != in_separator:
            yield TextSegment(text=text[start:i], is_separator=in_separator)
            start = i
            in_separator = is_separator
    yield TextSegment(text=text[start:], is_separator=in_separator)


def map_words(
    text: str,
    separators: Collection[str],
    transform: Callable[[str], str],
) -> str:
    """Apply transform to every word run and rebuild the text.

    Args:
        text: The text to translate.
        separators: Single-character separator strings.
        transform: Function called once per word run, in order.

    Returns:
        The text with each word replaced by transform(word).
    """
    parts: list[str] = []
    for segment in split_segments(text, separators):
        if segment.is_separator:
            parts.append(segment.text)
        else:
            parts.append(transform(segment.text))
    return "".join(parts)
