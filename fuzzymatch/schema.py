from typing import Any, List


def _is_non_empty_str(v: Any) -> bool:
    return isinstance(v, str) and v.strip() != ""


def validate_candidates(data: Any) -> List[str]:
    """
    Returns a list of validation error messages. Empty list means valid.
    Candidates must be a list of non-empty strings.
    """
    errors: List[str] = []

    if not isinstance(data, list):
        errors.append(f"Candidates must be a list of strings, got {type(data).__name__}")
        return errors

    for i, item in enumerate(data):
        if not isinstance(item, str):
            errors.append(f"Candidate {i} must be a string, got {type(item).__name__}")
        elif not _is_non_empty_str(item):
            errors.append(f"Candidate {i} must be a non-empty string")

    return errors


def validate_delimiters(value: Any) -> List[str]:
    """
    Returns a list of validation error messages for a delimiter setting.
    Delimiters are given as one string; each character is one delimiter.
    """
    errors: List[str] = []
    if not isinstance(value, str):
        errors.append("Delimiters must be a string of characters")
    elif value == "":
        errors.append("Delimiters must contain at least one character")
    elif any(c.isalnum() for c in value):
        errors.append("Delimiters must not contain letters or digits")
    return errors
