"""
Tests for settings and .env loading.
"""

import os
from pathlib import Path

import pytest

from fuzzymatch.config import Settings
from fuzzymatch.env import load_env
from fuzzymatch.scoring import DEFAULT_DELIMITERS


class TestSettings:
    """Test reading settings from the environment."""

    def test_defaults(self):
        settings = Settings.from_env({})

        assert settings.log_level == "WARNING"
        assert settings.log_dir is None
        assert settings.delimiters == DEFAULT_DELIMITERS
        assert settings.limit is None
        assert settings.threshold == 0.0
        assert settings.highlight_tag == "b"

    def test_all_values(self):
        settings = Settings.from_env({
            "FUZZYMATCH_LOG_LEVEL": "debug",
            "FUZZYMATCH_LOG_DIR": "logs",
            "FUZZYMATCH_DELIMITERS": "/_",
            "FUZZYMATCH_LIMIT": "5",
            "FUZZYMATCH_THRESHOLD": "0.5",
            "FUZZYMATCH_HIGHLIGHT_TAG": "mark",
        })

        assert settings.log_level == "DEBUG"
        assert settings.log_dir == Path("logs")
        assert settings.delimiters == frozenset("/_")
        assert settings.limit == 5
        assert settings.threshold == 0.5
        assert settings.highlight_tag == "mark"

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("FUZZYMATCH_LIMIT", "3")
        assert Settings.from_env().limit == 3

    @pytest.mark.parametrize("name,value", [
        ("FUZZYMATCH_LOG_LEVEL", "LOUD"),
        ("FUZZYMATCH_DELIMITERS", ""),
        ("FUZZYMATCH_DELIMITERS", "ab"),
        ("FUZZYMATCH_LIMIT", "many"),
        ("FUZZYMATCH_LIMIT", "0"),
        ("FUZZYMATCH_THRESHOLD", "high"),
        ("FUZZYMATCH_THRESHOLD", "1.5"),
        ("FUZZYMATCH_HIGHLIGHT_TAG", "<b>"),
    ])
    def test_malformed_values(self, name, value):
        """Malformed values raise ValueError naming the variable."""
        with pytest.raises(ValueError, match=name):
            Settings.from_env({name: value})


class TestLoadEnv:
    """Test .env loading."""

    def test_missing_file(self, tmp_path):
        assert load_env(tmp_path / ".env") is False

    def test_loads_variables(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("FUZZYMATCH_HIGHLIGHT_TAG=em\n")

        assert load_env(env_file) is True
        assert os.environ["FUZZYMATCH_HIGHLIGHT_TAG"] == "em"

    def test_existing_variables_win(self, tmp_path, monkeypatch):
        monkeypatch.setenv("FUZZYMATCH_LIMIT", "7")
        env_file = tmp_path / ".env"
        env_file.write_text("FUZZYMATCH_LIMIT=1\n")

        load_env(env_file)

        assert os.environ["FUZZYMATCH_LIMIT"] == "7"

    def test_defaults_to_working_directory(self, tmp_path):
        """The autouse fixture runs each test inside tmp_path."""
        (tmp_path / ".env").write_text("FUZZYMATCH_LOG_LEVEL=ERROR\n")

        load_env()

        assert Settings.from_env().log_level == "ERROR"
