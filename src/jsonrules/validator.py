"""Recursive rule-tree evaluation.

The validator walks a rule set against a data node, descending into nested
``object`` properties and ``array`` items. Data failures are recorded in an
``ErrorAccumulator`` keyed by dot-joined path and the walk carries on, so one
call reports every failure it can find. A malformed rule tree raises
``InvalidRuleError`` (or ``UnknownTypeError``) out of the call instead.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .access import StructuredValue
from .config import ValidatorConfig
from .errors import ErrorAccumulator
from .exceptions import ConstraintViolationError, DataValidationError, InvalidRuleError
from .registry import CheckerRegistry, TypeName
from .rules import (
    WILDCARD,
    Rule,
    RuleSet,
    check_inheritance,
    check_items,
    check_rule_set,
    display_name,
    inherited_properties,
    is_nullable,
    is_required,
    item_rule,
    merge_properties,
)

logger = logging.getLogger(__name__)


class Validator:
    """Validates data against a tree of rules.

    One instance owns one checker registry and one error accumulator and is
    meant for a single thread. Errors accumulate across calls until
    ``reset()`` is called.
    """

    def __init__(self, registry: CheckerRegistry | None = None, config: ValidatorConfig | None = None):
        self.registry = registry or CheckerRegistry()
        self.config = config or ValidatorConfig()
        self._errors = ErrorAccumulator()

    @property
    def errors(self) -> dict[str, list[str]]:
        """All recorded errors keyed by data path."""
        return self._errors.all()

    def get_errors(self) -> dict[str, list[str]]:
        return self._errors.all()

    @property
    def accumulator(self) -> ErrorAccumulator:
        return self._errors

    def add_error(self, path: str, message: str) -> None:
        self._errors.add(path, message)

    def has_errors(self) -> bool:
        return self._errors.has_errors()

    def reset(self) -> None:
        """Forget errors recorded by earlier calls."""
        self._errors.reset()

    def is_valid(self, rules: RuleSet, data: Any, path_prefix: str = "") -> bool:
        """Validate the members of ``data`` against a rule set.

        Every entry of the rule set is checked for well-formedness before any
        data is inspected. Each named rule is then applied to the matching
        member of ``data``; a wildcard rule is applied to every element.

        Args:
            rules: The rule set, keyed by member name or ``*``
            data: The data node whose members are validated
            path_prefix: Path of ``data`` itself, empty at the top level

        Returns:
            True if no errors have been recorded on this validator

        Raises:
            InvalidRuleError: If the rule tree is malformed
            UnknownTypeError: If a rule uses an unregistered type name
        """
        check_rule_set(rules)

        for item_key, rule in rules.items():
            if item_key == WILDCARD:
                path = path_prefix or WILDCARD
            else:
                path = self._join(path_prefix, item_key)

            try:
                if item_key == WILDCARD:
                    self.validate_multiple_items(rule, data, path)
                else:
                    self.validate_data(rule, item_key, data, path)
            except DataValidationError as e:
                self.add_error(path, str(e))

        return not self.has_errors()

    def validate_data(self, rule: Rule, item_key: str, data: Any, path: str) -> None:
        """Apply a named rule to the ``item_key`` member of ``data``.

        Raises:
            DataValidationError: If a required member is absent
        """
        container = StructuredValue.wrap(data)

        if not container.has(item_key):
            if is_required(rule):
                raise DataValidationError(f"{self._display_name(rule)} is required")
            # Optional and absent: nothing to validate
            return

        item = container.get(item_key)
        if item is None and is_nullable(rule):
            return

        self.validate_item(rule, item, path)

    def validate_multiple_items(self, rule: Rule, items: Any, path: str) -> None:
        """Apply a wildcard rule to every element of ``items``.

        Elements share ``path``; each is validated under a copy of ``rule``
        named for its 1-based position.

        Raises:
            DataValidationError: If ``items`` is not a list
        """
        if not isinstance(items, (list, tuple)):
            raise DataValidationError(f"{self._display_name(rule)} must be an array")

        for index, item in enumerate(items, start=1):
            element_rule = item_rule(rule, index)
            if item is None and is_nullable(element_rule):
                continue
            self.validate_item(element_rule, item, path)

    def validate_item(self, rule: Rule, item: Any, path: str) -> None:
        """Validate one value, then any properties or items it declares.

        A constraint violation is recorded at ``path`` and stops descent into
        the value's children.

        Raises:
            InvalidRuleError: If the rule or its inheritance block is malformed
            UnknownTypeError: If the rule's type has no registered checker
        """
        checker = self.registry.get(rule["type"])
        constraints = rule.get("constraints") or {}

        try:
            checker.validate(constraints, item, self._display_name(rule))
        except ConstraintViolationError as e:
            self.add_error(path, str(e))
            return

        rule_type = rule["type"]

        extra_properties = None
        if rule_type == TypeName.OBJECT and rule.get("inheritance") is not None:
            discriminator = check_inheritance(rule, path)
            discriminator_value = StructuredValue.wrap(item).get(discriminator)
            extra_properties = inherited_properties(rule, discriminator, discriminator_value, path)

        if rule_type == TypeName.OBJECT and rule.get("properties") is not None:
            if not isinstance(rule["properties"], Mapping):
                raise InvalidRuleError(f"properties in {path} must be an object")
            properties = merge_properties(rule["properties"], extra_properties)
            self.is_valid(properties, item, path)
        elif rule_type == TypeName.ARRAY and rule.get("items") is not None:
            check_items(rule["items"], path)
            self.is_valid(rule["items"], item, path)

    def _display_name(self, rule: Rule) -> str:
        return display_name(rule, self.config.default_name)

    def _join(self, path_prefix: str, item_key: str) -> str:
        if not path_prefix:
            return str(item_key)
        return f"{path_prefix}{self.config.path_separator}{item_key}"


@dataclass
class ValidationResult:
    """Outcome of a one-shot validation."""
    valid: bool
    errors: dict[str, list[str]] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "valid": self.valid,
            "errors": self.errors,
        }


def validate(rules: RuleSet, data: Any, config: ValidatorConfig | None = None) -> ValidationResult:
    """Validate ``data`` with a fresh validator and return the outcome.

    Raises:
        InvalidRuleError: If the rule tree is malformed
    """
    validator = Validator(config=config)
    valid = validator.is_valid(rules, data)
    logger.info(f"Validation finished: {'valid' if valid else 'invalid'}, {len(validator.errors)} failing paths")
    return ValidationResult(valid=valid, errors=validator.errors)
