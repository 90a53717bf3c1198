"""Text normalization and approximate string matching."""

import re
import unicodedata

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")


def normalize(text: str) -> str:
    """Strip Latin diacritics and lower-case a name for comparison."""
    decomposed = unicodedata.normalize("NFD", text.lower())
    return _COMBINING_MARKS.sub("", decomposed)


def edit_distance(source: str, target: str) -> int:
    """Return the Levenshtein distance between two strings.

    Uses a single rolling row of ``len(target) + 1`` cells.
    """
    row = list(range(len(target) + 1))
    for i, source_char in enumerate(source, start=1):
        diagonal = row[0]
        row[0] = i
        for j, target_char in enumerate(target, start=1):
            above = row[j]
            if source_char == target_char:
                row[j] = diagonal
            else:
                row[j] = min(diagonal, above, row[j - 1]) + 1
            diagonal = above
    return row[len(target)]


def similarity(first: str, second: str) -> float:
    """Return the normalized edit-distance similarity in ``[0, 1]``."""
    if len(second) > len(first):
        longer, shorter = second, first
    else:
        longer, shorter = first, second
    longest = len(longer)
    if longest == 0:
        return 1.0
    return (longest - edit_distance(longer, shorter)) / float(longest)
