"""Checker for ``object`` rules."""

from typing import Any

from ..access import is_structured
from .base import TypeChecker


class ObjectChecker(TypeChecker):
    """Accepts mappings and attribute-style objects.

    Nested properties are not checked here; the validator recurses into them.
    """

    @property
    def type_name(self) -> str:
        return "object"

    @property
    def kind_description(self) -> str:
        return "an object"

    def check_kind(self, value: Any) -> bool:
        return is_structured(value)
