"""
Runtime settings read from FUZZYMATCH_* environment variables.

Call env.load_env() first to pick up a .env file.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Mapping, Optional

from .schema import validate_delimiters
from .scoring import DEFAULT_DELIMITERS

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    log_dir: Optional[Path] = None
    delimiters: FrozenSet[str] = DEFAULT_DELIMITERS
    limit: Optional[int] = None
    threshold: float = 0.0
    highlight_tag: str = "b"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from the environment.

        Raises:
            ValueError: If a variable is set to a malformed value
        """
        env = os.environ if environ is None else environ

        log_level = env.get("FUZZYMATCH_LOG_LEVEL", "WARNING").strip().upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(f"FUZZYMATCH_LOG_LEVEL must be one of {sorted(LOG_LEVELS)}, got {log_level!r}")

        log_dir = env.get("FUZZYMATCH_LOG_DIR", "").strip()

        delimiters = DEFAULT_DELIMITERS
        raw_delimiters = env.get("FUZZYMATCH_DELIMITERS")
        if raw_delimiters is not None:
            errors = validate_delimiters(raw_delimiters)
            if errors:
                raise ValueError(f"FUZZYMATCH_DELIMITERS: {'; '.join(errors)}")
            delimiters = frozenset(raw_delimiters)

        limit = None
        raw_limit = env.get("FUZZYMATCH_LIMIT", "").strip()
        if raw_limit:
            try:
                limit = int(raw_limit)
            except ValueError:
                raise ValueError(f"FUZZYMATCH_LIMIT must be an integer, got {raw_limit!r}")
            if limit < 1:
                raise ValueError("FUZZYMATCH_LIMIT must be at least 1")

        raw_threshold = env.get("FUZZYMATCH_THRESHOLD", "").strip()
        threshold = 0.0
        if raw_threshold:
            try:
                threshold = float(raw_threshold)
            except ValueError:
                raise ValueError(f"FUZZYMATCH_THRESHOLD must be a number, got {raw_threshold!r}")
            if not 0.0 <= threshold <= 1.0:
                raise ValueError("FUZZYMATCH_THRESHOLD must be between 0 and 1")

        highlight_tag = env.get("FUZZYMATCH_HIGHLIGHT_TAG", "b").strip() or "b"
        if not highlight_tag.isalnum():
            raise ValueError(f"FUZZYMATCH_HIGHLIGHT_TAG must be a plain element name, got {highlight_tag!r}")

        return cls(
            log_level=log_level,
            log_dir=Path(log_dir) if log_dir else None,
            delimiters=delimiters,
            limit=limit,
            threshold=threshold,
            highlight_tag=highlight_tag,
        )
