"""Rank autocomplete candidates against a typed abbreviation."""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .logger import get_logger
from .scoring import MatchResult, Scorer, fuzzy_match


@dataclass(frozen=True)
class Ranked:
    candidate: str
    result: MatchResult

    @property
    def score(self) -> float:
        return self.result.score


def rank(
    abbreviation: str,
    candidates: Iterable[str],
    limit: Optional[int] = None,
    threshold: float = 0.0,
    scorer: Optional[Scorer] = None,
) -> List[Ranked]:
    """
    Score every candidate and return the matching ones, best first.

    Candidates that do not match (score 0) or score below threshold are
    dropped. Candidates with equal scores keep their input order.

    Args:
        abbreviation: What the user typed
        candidates: Strings to rank
        limit: Maximum number of results (None = no limit)
        threshold: Minimum score to keep
        scorer: Scorer to use (default word delimiters when None)

    Returns:
        List of Ranked, highest score first

    Raises:
        ValueError: If limit is negative
    """
    if limit is not None and limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")

    logger = get_logger()
    match = scorer.match if scorer is not None else fuzzy_match

    ranked: List[Ranked] = []
    total = 0
    for candidate in candidates:
        total += 1
        result = match(candidate, abbreviation)
        logger.record_match(result.score)
        if result.matched and result.score >= threshold:
            ranked.append(Ranked(candidate=candidate, result=result))

    ranked.sort(key=lambda r: r.score, reverse=True)
    if limit is not None:
        ranked = ranked[:limit]

    logger.record_ranking(total)
    logger.debug(
        "Ranked candidates",
        abbreviation=abbreviation,
        candidates=total,
        kept=len(ranked),
    )
    return ranked
