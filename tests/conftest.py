"""
Pytest configuration and shared fixtures.
"""

import pytest
import json
from pathlib import Path
from typing import List

from fuzzymatch.logger import reset_logger

ENV_VARS = [
    "FUZZYMATCH_LOG_LEVEL",
    "FUZZYMATCH_LOG_DIR",
    "FUZZYMATCH_DELIMITERS",
    "FUZZYMATCH_LIMIT",
    "FUZZYMATCH_THRESHOLD",
    "FUZZYMATCH_HIGHLIGHT_TAG",
]


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Fresh logger, no FUZZYMATCH_* variables and no stray .env per test."""
    for var in ENV_VARS:
        # setenv first so teardown also removes values set by load_dotenv
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    monkeypatch.chdir(tmp_path)
    reset_logger()
    yield
    reset_logger()


@pytest.fixture
def language_names() -> List[str]:
    """Typical autocomplete candidates."""
    return [
        "JavaScript",
        "Java",
        "HTML",
        "haml",
        "foo_bar",
        "foobar",
        "SpecialElite",
        "CoffeeScript",
    ]


@pytest.fixture
def candidates_json(tmp_path, language_names) -> Path:
    """Candidate list stored as a JSON array."""
    path = tmp_path / "candidates.json"
    path.write_text(json.dumps(language_names))
    return path


@pytest.fixture
def candidates_text(tmp_path) -> Path:
    """Candidate list stored one per line, with comments and blanks."""
    path = tmp_path / "candidates.txt"
    path.write_text("# languages\nfoobar\n\nfoo_bar\n  xyz  \n")
    return path


@pytest.fixture
def invalid_candidates_json(tmp_path) -> Path:
    """JSON file that is not a list of strings."""
    path = tmp_path / "invalid.json"
    path.write_text(json.dumps({"candidates": ["a", "b"]}))
    return path
