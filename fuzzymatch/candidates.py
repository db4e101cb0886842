import json
from pathlib import Path
from typing import List

from .schema import validate_candidates


def load_candidates(path: Path) -> List[str]:
    """
    Load candidate strings from a file.

    .json files must contain an array of strings. Anything else is read as
    text with one candidate per line; blank lines and lines starting with
    '#' are skipped.

    Raises:
        ValueError: If a JSON file does not hold a valid candidate list
    """
    with path.open("r", encoding="utf-8") as f:
        content = f.read()

    if path.suffix.lower() == ".json":
        try:
            data = json.loads(content) if content.strip() else []
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
        errors = validate_candidates(data)
        if errors:
            raise ValueError("; ".join(errors))
        return data

    candidates = []
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        candidates.append(line)
    return candidates


def parse_candidate_list(value: str) -> List[str]:
    """Split a comma-separated candidate list, dropping empty entries."""
    return [c.strip() for c in value.split(",") if c.strip()]
