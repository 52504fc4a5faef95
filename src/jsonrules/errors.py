"""Path-keyed collection of data validation errors."""

import logging
from typing import Any

logger = logging.getLogger(__name__)


class ErrorAccumulator:
    """Collects error messages keyed by fully qualified data path.

    Messages for the same path keep their encounter order. Paths keep the
    order in which their first error was recorded.
    """

    def __init__(self):
        self._errors: dict[str, list[str]] = {}

    def add(self, path: str, message: str) -> None:
        """Append ``message`` to the list recorded for ``path``."""
        self._errors.setdefault(path, []).append(message)
        logger.debug(f"Recorded error at {path or '<root>'}: {message}")

    def has_errors(self) -> bool:
        return len(self._errors) > 0

    def all(self) -> dict[str, list[str]]:
        """Return a copy of every recorded error."""
        return {path: list(messages) for path, messages in self._errors.items()}

    def get(self, path: str) -> list[str]:
        """Return the messages recorded for ``path`` (empty if none)."""
        return list(self._errors.get(path, []))

    def reset(self) -> None:
        self._errors.clear()

    def count(self) -> int:
        """Total number of messages across all paths."""
        return sum(len(messages) for messages in self._errors.values())

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "valid": not self.has_errors(),
            "error_count": self.count(),
            "errors": self.all(),
        }

    def __len__(self) -> int:
        return len(self._errors)

    def __contains__(self, path: object) -> bool:
        return path in self._errors
