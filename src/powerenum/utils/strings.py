"""String helpers for turning identifiers into display labels."""

import re

# Separators between words in snake_case, kebab-case or spaced identifiers
_SEPARATOR_RE = re.compile(r"[\s_\-]+")

# Words inside a CamelCase chunk: acronym before a capitalized word,
# capitalized/lowercase word, trailing acronym, digit run
_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|\d+")


def split_words(value: str) -> list[str]:
    """Split an identifier into its words."""
    words: list[str] = []
    for chunk in _SEPARATOR_RE.split(value):
        if not chunk:
            continue
        found = _WORD_RE.findall(chunk)
        words.extend(found if "".join(found) == chunk else [chunk])
    return words


def headline(value: str) -> str:
    """
    Convert an identifier into a human-readable headline.

    Examples:
        "Blog" -> "Blog"
        "PendingReview" -> "Pending Review"
        "in_progress" -> "In Progress"
        "PAID_OUT" -> "Paid Out"

    All-uppercase words are treated as shouting and capitalized, so
    "ADMIN" becomes "Admin".
    """
    words = []
    for word in split_words(value):
        if len(word) > 1 and word.isupper():
            words.append(word.capitalize())
        else:
            words.append(word[:1].upper() + word[1:])
    return " ".join(words)
