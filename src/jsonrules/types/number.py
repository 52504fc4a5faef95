"""Checker for ``number`` rules."""

from collections.abc import Callable
from typing import Any

from ..exceptions import ConstraintViolationError, InvalidRuleError
from .base import TypeChecker, parse_bounds


class NumberChecker(TypeChecker):
    """Supports ``integer`` and ``range`` constraints.

    ``bool`` is a subclass of ``int`` in Python but is never a number here.
    """

    @property
    def type_name(self) -> str:
        return "number"

    def check_kind(self, value: Any) -> bool:
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    def constraint_handlers(self) -> dict[str, Callable[[Any, Any, str], None]]:
        return {
            "integer": self._check_integer,
            "range": self._check_range,
        }

    def _check_integer(self, config: Any, value: int | float, display_name: str) -> None:
        if not isinstance(config, bool):
            raise InvalidRuleError('"integer" must be true or false')

        is_integer = isinstance(value, int) or value.is_integer()
        if config and not is_integer:
            raise ConstraintViolationError(f"{display_name} must be an integer")
        if not config and is_integer:
            raise ConstraintViolationError(f"{display_name} must not be an integer")

    def _check_range(self, config: Any, value: int | float, display_name: str) -> None:
        minimum, maximum = parse_bounds("range", config)

        if minimum is not None and value < minimum:
            raise ConstraintViolationError(f"{display_name} must be at least {minimum}")
        if maximum is not None and value > maximum:
            raise ConstraintViolationError(f"{display_name} must be no more than {maximum}")
