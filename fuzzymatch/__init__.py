"""Abbreviation matching and scoring for autocomplete."""

from .ranking import Ranked, rank
from .render import render_html, render_marked
from .scoring import DEFAULT_DELIMITERS, MatchResult, Scorer, fuzzy_match
from .splits import Split, all_case_insensitive_splits

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_DELIMITERS",
    "MatchResult",
    "Ranked",
    "Scorer",
    "Split",
    "all_case_insensitive_splits",
    "fuzzy_match",
    "rank",
    "render_html",
    "render_marked",
]
