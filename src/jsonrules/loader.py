"""Loading rule trees and data documents from JSON files."""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def load_json(path: str | Path) -> Any:
    """Read one JSON document.

    Raises:
        ValueError: If the file is missing or does not hold valid JSON
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            document = json.load(f)
    except FileNotFoundError as e:
        raise ValueError(f"File not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e

    logger.debug(f"Loaded JSON document from {path}")
    return document


def load_rules(path: str | Path) -> dict[str, Any]:
    """Read a rule set, which must be a JSON object at the top level.

    Raises:
        ValueError: If the file cannot be read or is not a JSON object
    """
    rules = load_json(path)
    if not isinstance(rules, dict):
        raise ValueError(f"Rules in {path} must be a JSON object, got: {type(rules).__name__}")
    return rules
