"""
Abbreviation scoring for autocomplete.

Matches a short, user-typed abbreviation against a canonical string as a
case-insensitive subsequence and scores how likely it is that the user meant
that string. Every way of placing each abbreviation character is tried and
the best-scoring placement wins.

The scores are arranged so that a continuous match of characters results
in a total score of 1, and a missing character results in a total of 0.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .splits import Split, case_insensitive_positions

# The best case: this character is a match, and either this is the start
# of the string or the previous character was also a match.
SCORE_CONTINUE_MATCH = 1

# A new match at the start of a word scores better than a new match
# elsewhere, users tend to type the starts of fragments.
# (Words include CamelCase and hyphen-separated, etc.)
SCORE_START_WORD = 0.9

# Any other match isn't ideal, but it's probably ok.
SCORE_OK = 0.8

# Decay for each character skipped before a match.
# "bad" is more likely than "bard" when "bd" is typed.
# Does not change the order set by SCORE_* until 100 characters are skipped.
PENALTY_SKIPPED = 0.999

# An exact-case match beats a case-insensitive one by a small amount.
# "HTML" is more likely than "haml" when "HM" is typed.
# Does not change the order set by SCORE_* until 1000 mismatches.
PENALTY_CASE_MISMATCH = 0.9999

# Decay for each trailing character after the last match.
# "quirk" is more likely than "quirkier" when "qu" is typed.
# Does not change the order set by SCORE_* until 10000 characters are appended.
PENALTY_TRAILING = 0.99999

DEFAULT_DELIMITERS = frozenset('\\/-_+.# \t"@[({&')

Piece = Tuple[str, str]


def _unmarked(text: str) -> Tuple[Piece, ...]:
    return ((text, ""),) if text else ()


@dataclass(frozen=True)
class MatchResult:
    """
    Outcome of matching an abbreviation against a string.

    score:  0 <= score <= 1. 0 when the abbreviation characters do not all
            appear in order in the string, 1 when the user typed the exact
            string. Scores are comparable across strings matched against the
            same abbreviation.
    pieces: (plain segment, matched character) pairs covering the string
            once, in order. A trailing remainder is a final (segment, "") pair.
    """

    score: float
    pieces: Tuple[Piece, ...] = ()

    @property
    def matched(self) -> bool:
        return self.score > 0

    @property
    def text(self) -> str:
        return "".join(plain + char for plain, char in self.pieces)

    @property
    def matched_indices(self) -> List[int]:
        indices = []
        position = 0
        for plain, char in self.pieces:
            position += len(plain)
            if char:
                indices.append(position)
                position += len(char)
        return indices

    @property
    def html(self) -> str:
        from .render import render_html
        return render_html(self)


class Scorer:
    """
    Scores abbreviations against strings.

    Args:
        delimiters: Characters after which a match counts as the start of
            a word (default: DEFAULT_DELIMITERS)
    """

    def __init__(self, delimiters: Optional[Iterable[str]] = None):
        self.delimiters = frozenset(DEFAULT_DELIMITERS if delimiters is None else delimiters)

    def boundary_weight(self, split: Split) -> float:
        """Weight of a match given what precedes it."""
        return self._weight(split.before[-1:], split.char)

    def _weight(self, preceding: str, char: str) -> float:
        if not preceding:
            return SCORE_CONTINUE_MATCH
        if preceding in self.delimiters:
            return SCORE_START_WORD
        # camelCase: uppercase match after a lowercase (or caseless) character
        if char.lower() != char and preceding.lower() == preceding:
            return SCORE_START_WORD
        return SCORE_OK

    def match(self, text: str, abbreviation: str) -> MatchResult:
        """
        Match abbreviation against text.

        Scores are filled in bottom-up, one row per abbreviation offset from
        the last character back to the first. A row holds the best score for
        every text position the remaining abbreviation can still fit after,
        plus the index chosen for that score. Any other position scores 0.
        """
        if not isinstance(text, str) or not isinstance(abbreviation, str):
            raise TypeError("text and abbreviation must be strings")

        n, m = len(text), len(abbreviation)
        width = n - m + 1
        if width <= 0:
            return MatchResult(0.0, self._pieces(text, abbreviation, []))

        # scores[offset][start - offset] and choices[offset][start - offset]
        scores: List[List[float]] = [[] for _ in range(m + 1)]
        choices: List[List[Optional[int]]] = [[] for _ in range(m + 1)]
        scores[m] = [PENALTY_TRAILING ** (n - start) for start in range(m, m + width)]

        for offset in range(m - 1, -1, -1):
            wanted = abbreviation[offset]
            below = scores[offset + 1]
            row, row_choices = [], []
            for start in range(offset, offset + width):
                best_score, best_index = 0.0, None
                for i in case_insensitive_positions(text, wanted, start, offset + width):
                    preceding = text[i - 1] if i > start else ""
                    score = below[i - offset] * self._weight(preceding, text[i])
                    if text[i] != wanted:
                        score *= PENALTY_CASE_MISMATCH
                    score *= PENALTY_SKIPPED ** (i - start)

                    # strict > keeps the leftmost occurrence on ties
                    if best_index is None or score > best_score:
                        best_score, best_index = score, i
                row.append(best_score)
                row_choices.append(best_index)
            scores[offset], choices[offset] = row, row_choices

        return MatchResult(scores[0][0], self._pieces(text, abbreviation, choices))

    @staticmethod
    def _pieces(text: str, abbreviation: str, choices) -> Tuple[Piece, ...]:
        """Follow the chosen indices from the start of text."""
        pieces = []
        start = 0
        for offset, wanted in enumerate(abbreviation):
            index = None
            if offset < len(choices) and start - offset < len(choices[offset]):
                index = choices[offset][start - offset]
            if index is None:
                # Outside the table every score is 0, so the first occurrence wins.
                index = next(case_insensitive_positions(text, wanted, start), None)
            if index is None:
                # No occurrence of the next character. This 0 multiplies up
                # to the top, giving a total of 0.
                break
            pieces.append((text[start:index], text[index]))
            start = index + 1
        return tuple(pieces) + _unmarked(text[start:])


_default_scorer = Scorer()


def fuzzy_match(text: str, abbreviation: str) -> MatchResult:
    """Match abbreviation against text with the default word delimiters."""
    return _default_scorer.match(text, abbreviation)
