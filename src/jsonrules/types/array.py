"""Checker for ``array`` rules."""

from collections.abc import Callable
from typing import Any

from ..exceptions import ConstraintViolationError
from .base import TypeChecker, parse_bounds


class ArrayChecker(TypeChecker):
    """Supports a ``length`` constraint on the number of elements."""

    @property
    def type_name(self) -> str:
        return "array"

    @property
    def kind_description(self) -> str:
        return "an array"

    def check_kind(self, value: Any) -> bool:
        return isinstance(value, (list, tuple))

    def constraint_handlers(self) -> dict[str, Callable[[Any, Any, str], None]]:
        return {"length": self._check_length}

    def _check_length(self, config: Any, value: list | tuple, display_name: str) -> None:
        min_items, max_items = parse_bounds("length", config)

        if min_items is not None and len(value) < min_items:
            raise ConstraintViolationError(f"{display_name} must have at least {min_items} items")
        if max_items is not None and len(value) > max_items:
            raise ConstraintViolationError(f"{display_name} must have no more than {max_items} items")
