"""Base class for per-type constraint checkers."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any

from ..exceptions import ConstraintViolationError, InvalidRuleError

logger = logging.getLogger(__name__)

Bounds = tuple[float | None, float | None]


class TypeChecker(ABC):
    """Validates one value against the constraints declared for its type.

    Checkers hold no per-call state, so a single instance can be shared by
    every rule of the same type.
    """

    @property
    @abstractmethod
    def type_name(self) -> str:
        """Type name this checker is registered under."""
        pass

    @abstractmethod
    def check_kind(self, value: Any) -> bool:
        """Return True if the runtime kind of ``value`` matches the type."""
        pass

    @property
    def kind_description(self) -> str:
        """Wording used in the kind-mismatch message."""
        return f"a {self.type_name}"

    def constraint_handlers(self) -> dict[str, Callable[[Any, Any, str], None]]:
        """Map constraint names to ``handler(config, value, display_name)``."""
        return {}

    def validate(self, constraints: Mapping[str, Any], value: Any, display_name: str) -> None:
        """Validate ``value`` against ``constraints``.

        Args:
            constraints: Constraint name to constraint configuration
            value: The data value to validate
            display_name: Human readable name used in error messages

        Raises:
            ConstraintViolationError: On the first violated constraint
            InvalidRuleError: If a constraint is configured incorrectly
        """
        if not self.check_kind(value):
            raise ConstraintViolationError(f"{display_name} must be {self.kind_description}")

        if not isinstance(constraints, Mapping):
            raise InvalidRuleError(f"constraints for {display_name} must be an object")

        handlers = self.constraint_handlers()
        for constraint_name, config in constraints.items():
            handler = handlers.get(constraint_name)
            if handler is None:
                logger.debug(f"Ignoring unknown {self.type_name} constraint: {constraint_name}")
                continue
            handler(config, value, display_name)


def parse_bounds(constraint_name: str, config: Any) -> Bounds:
    """Parse a ``[min|null, max|null]`` pair.

    Raises:
        InvalidRuleError: If the configuration is not a two-element list of numbers/nulls
    """
    if not isinstance(config, (list, tuple)) or len(config) != 2:
        raise InvalidRuleError(f'"{constraint_name}" must be a list of [min, max]')

    for bound in config:
        if bound is not None and (isinstance(bound, bool) or not isinstance(bound, (int, float))):
            raise InvalidRuleError(f'"{constraint_name}" bounds must be numbers or null, got: {bound!r}')

    return config[0], config[1]
