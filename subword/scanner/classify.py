"""Character classification and the sub-word boundary grammar.

A sub-word is one of:

- an uppercase letter followed by lowercase letters (``Camel``),
- an uppercase run (``AND``); the last capital of the run starts a new
  sub-word when a lowercase letter follows it (``WITHOUTExtension``),
- a digit run (``31337``),
- a lowercase run that does not follow a capital (``script``, ``roblem``
  in ``MapP1roblem``).

Underscores and non-identifier characters separate sub-words and are never
part of one. Every boundary is decided from the categories at ``i - 1``,
``i`` and ``i + 1``, so the start set does not depend on scan direction.
"""

from __future__ import annotations

from .types import CharCategory


def classify(ch: str) -> CharCategory:
    """Classify a single character."""
    if ch == "_":
        return CharCategory.UNDERSCORE
    if ch.isupper():
        return CharCategory.UPPER
    if ch.islower():
        return CharCategory.LOWER
    if ch.isdigit():
        return CharCategory.DIGIT
    # Letters without case continue a lowercase run
    if ch.isalpha():
        return CharCategory.LOWER
    return CharCategory.OTHER


def _category_at(stream: str, offset: int) -> CharCategory:
    if 0 <= offset < len(stream):
        return classify(stream[offset])
    return CharCategory.OTHER


def is_subword_start(stream: str, offset: int) -> bool:
    """Check if a sub-word begins at offset."""
    current = _category_at(stream, offset)
    if current.is_separator:
        return False

    previous = _category_at(stream, offset - 1)
    if previous.is_separator:
        return True

    if current is CharCategory.DIGIT:
        return previous is not CharCategory.DIGIT
    if previous is CharCategory.DIGIT:
        return True

    if current is CharCategory.UPPER:
        if previous is CharCategory.LOWER:
            return True
        # Inside an uppercase run: only the capital before a lowercase letter
        return _category_at(stream, offset + 1) is CharCategory.LOWER

    return False


def is_subword_end(stream: str, offset: int) -> bool:
    """Check if offset is the last character (inclusive end) of a sub-word."""
    if _category_at(stream, offset).is_separator:
        return False
    if _category_at(stream, offset + 1).is_separator:
        return True
    return is_subword_start(stream, offset + 1)
