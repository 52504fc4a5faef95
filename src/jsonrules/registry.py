"""Type name registry for constraint checkers."""

import logging
from enum import Enum

from .exceptions import UnknownTypeError
from .types import (
    ArrayChecker,
    BooleanChecker,
    NumberChecker,
    ObjectChecker,
    StringChecker,
    TypeChecker,
)

logger = logging.getLogger(__name__)


class TypeName(str, Enum):
    """Type names a rule may declare."""
    STRING = "string"
    NUMBER = "number"
    OBJECT = "object"
    ARRAY = "array"
    BOOLEAN = "boolean"


DEFAULT_CHECKERS: dict[str, type[TypeChecker]] = {
    TypeName.STRING.value: StringChecker,
    TypeName.NUMBER.value: NumberChecker,
    TypeName.OBJECT.value: ObjectChecker,
    TypeName.ARRAY.value: ArrayChecker,
    TypeName.BOOLEAN.value: BooleanChecker,
}


class CheckerRegistry:
    """Resolves a type name to a cached checker instance.

    Each ``Validator`` owns its own registry unless one is injected, so two
    validators never share the lazily built cache.
    """

    def __init__(self, checkers: dict[str, type[TypeChecker]] | None = None):
        self._classes: dict[str, type[TypeChecker]] = dict(
            DEFAULT_CHECKERS if checkers is None else checkers
        )
        self._instances: dict[str, TypeChecker] = {}

    @property
    def type_names(self) -> list[str]:
        return sorted(self._classes)

    def is_known(self, type_name: object) -> bool:
        return isinstance(type_name, str) and type_name in self._classes

    def register(self, type_name: str, checker_class: type[TypeChecker]) -> None:
        """Add or replace the checker class used for ``type_name``."""
        if isinstance(type_name, TypeName):
            type_name = type_name.value
        self._classes[type_name] = checker_class
        self._instances.pop(type_name, None)
        logger.debug(f"Registered checker {checker_class.__name__} for type '{type_name}'")

    def get(self, type_name: object) -> TypeChecker:
        """Return the checker for ``type_name``.

        Raises:
            UnknownTypeError: If no checker is registered for the type name
        """
        if isinstance(type_name, TypeName):
            type_name = type_name.value
        if not self.is_known(type_name):
            raise UnknownTypeError(type_name)

        checker = self._instances.get(type_name)
        if checker is None:
            checker = self._classes[type_name]()
            self._instances[type_name] = checker
            logger.debug(f"Created checker {type(checker).__name__} for type '{type_name}'")
        return checker
