from dataclasses import dataclass
from typing import Iterator, List, Optional


@dataclass(frozen=True)
class Split:
    """One way of splitting a string around a single character."""

    before: str
    char: str  # as it appears in the text, case preserved
    after: str


def case_insensitive_positions(
    text: str, char: str, start: int = 0, stop: Optional[int] = None
) -> Iterator[int]:
    """Indices in text[start:stop] where char occurs, ignoring case, left to right."""
    target = char.lower()
    stop = len(text) if stop is None else min(stop, len(text))
    for i in range(start, stop):
        if text[i].lower() == target:
            yield i


def all_case_insensitive_splits(text: str, char: str) -> List[Split]:
    """
    Split text around every case-insensitive occurrence of char.

    Returns the splits in order of occurrence; an empty list when char
    does not appear in text.
    """
    return [
        Split(before=text[:i], char=text[i], after=text[i + 1:])
        for i in case_insensitive_positions(text, char)
    ]
