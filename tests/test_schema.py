"""
Tests for candidate and setting validation.
"""

from fuzzymatch.schema import validate_candidates, validate_delimiters


class TestValidateCandidates:
    """Test candidate list validation."""

    def test_valid_list(self, language_names):
        """A list of strings has no errors."""
        assert validate_candidates(language_names) == []

    def test_empty_list_is_valid(self):
        assert validate_candidates([]) == []

    def test_not_a_list(self):
        """Non-list input should error."""
        errors = validate_candidates({"candidates": []})
        assert len(errors) == 1
        assert "list" in errors[0]

    def test_non_string_item(self):
        """Each item must be a string."""
        errors = validate_candidates(["ok", 3])
        assert errors == ["Candidate 1 must be a string, got int"]

    def test_blank_item(self):
        """Blank strings are rejected."""
        errors = validate_candidates(["ok", "   "])
        assert any("non-empty" in err for err in errors)


class TestValidateDelimiters:
    """Test delimiter setting validation."""

    def test_valid(self):
        assert validate_delimiters("/_-") == []

    def test_empty(self):
        assert validate_delimiters("") != []

    def test_not_a_string(self):
        assert validate_delimiters(["/"]) != []

    def test_alphanumeric_rejected(self):
        """Letters and digits cannot be delimiters."""
        errors = validate_delimiters("_a")
        assert any("letters" in err for err in errors)
