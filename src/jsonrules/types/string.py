"""Checker for ``string`` rules."""

import re
from collections.abc import Callable
from typing import Any

from ..exceptions import ConstraintViolationError, InvalidRuleError
from .base import TypeChecker, parse_bounds


class StringChecker(TypeChecker):
    """Supports ``length``, ``enum`` and ``pattern`` constraints."""

    @property
    def type_name(self) -> str:
        return "string"

    def check_kind(self, value: Any) -> bool:
        return isinstance(value, str)

    def constraint_handlers(self) -> dict[str, Callable[[Any, Any, str], None]]:
        return {
            "length": self._check_length,
            "enum": self._check_enum,
            "pattern": self._check_pattern,
        }

    def _check_length(self, config: Any, value: str, display_name: str) -> None:
        min_length, max_length = parse_bounds("length", config)

        if min_length is not None and len(value) < min_length:
            raise ConstraintViolationError(
                f"{display_name} must have a length of at least {min_length}"
            )
        if max_length is not None and len(value) > max_length:
            raise ConstraintViolationError(
                f"{display_name} must have a length of no more than {max_length}"
            )

    def _check_enum(self, config: Any, value: str, display_name: str) -> None:
        if not isinstance(config, (list, tuple)):
            raise InvalidRuleError('"enum" must be a list of allowed values')

        if value not in config:
            allowed = ", ".join(str(option) for option in config)
            raise ConstraintViolationError(f"{display_name} must be one of: {allowed}")

    def _check_pattern(self, config: Any, value: str, display_name: str) -> None:
        if not isinstance(config, str):
            raise InvalidRuleError('"pattern" must be a regular expression string')

        try:
            matched = re.search(config, value)
        except re.error as e:
            raise InvalidRuleError(f'"pattern" is not a valid regular expression: {e}') from e

        if matched is None:
            raise ConstraintViolationError(f"{display_name} does not match the pattern {config}")
