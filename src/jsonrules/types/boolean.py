"""Checker for ``boolean`` rules."""

from typing import Any

from .base import TypeChecker


class BooleanChecker(TypeChecker):

    @property
    def type_name(self) -> str:
        return "boolean"

    def check_kind(self, value: Any) -> bool:
        return isinstance(value, bool)
