"""Well-formedness checks and helpers for rule nodes and rule sets.

Rule nodes are plain mappings supplied by the caller. Nothing in this module
mutates them; helpers that need a variant of a rule return a new mapping.
"""

import logging
from collections.abc import Mapping
from typing import Any

from .exceptions import InvalidRuleError

logger = logging.getLogger(__name__)

WILDCARD = "*"
DEFAULT_NAME = "This value"
DEFAULT_ITEM_NAME = "Value"

Rule = Mapping[str, Any]
RuleSet = Mapping[str, Rule]


def check_rule_set(rules: Any) -> None:
    """Check every entry of a rule set before any data is inspected.

    Raises:
        InvalidRuleError: If the set or one of its rule nodes is malformed
    """
    if not isinstance(rules, Mapping):
        raise InvalidRuleError(f"rules must be an object keyed by item name, got: {type(rules).__name__}")

    for item_key, rule in rules.items():
        if not isinstance(rule, Mapping):
            raise InvalidRuleError(f'{item_key} must be an object describing a rule')

        if not rule.get("type"):
            raise InvalidRuleError(
                f'{item_key} does not have a "type" property. All rules must have a "type" property'
            )

        if item_key == WILDCARD:
            if len(rules) > 1:
                raise InvalidRuleError(
                    f"{item_key} has more than one rule. You cannot have more than one rule if using a wildcard"
                )
        elif rule.get("required") is None:
            raise InvalidRuleError(
                f'{item_key} does not have a "required" property. All named rules must have a "required" property'
            )


def display_name(rule: Rule, default: str = DEFAULT_NAME) -> str:
    return rule.get("name") or default


def is_required(rule: Rule) -> bool:
    return bool(rule.get("required"))


def is_nullable(rule: Rule) -> bool:
    return bool(rule.get("nullable", False))


def item_rule(rule: Rule, index: int) -> dict[str, Any]:
    """Return a copy of a wildcard rule named for the ``index``-th element (1-based)."""
    name = rule.get("name")
    item = dict(rule)
    item["name"] = f"{name} number {index}" if name else f"{DEFAULT_ITEM_NAME} number {index}"
    return item


def merge_properties(base: RuleSet, extra: RuleSet | None) -> RuleSet:
    """Merge discriminator-selected properties over the base properties."""
    if not extra:
        return base
    merged = dict(base)
    merged.update(extra)
    return merged


def inherited_properties(rule: Rule, discriminator: str, value_discriminator: Any, path: str) -> RuleSet | None:
    """Return the extra properties selected by a discriminator value.

    The lookup is case-insensitive on the discriminator value. A value with
    no matching entry selects no extra properties.

    Args:
        rule: An ``object`` rule whose inheritance block already passed ``check_inheritance``
        discriminator: Name of the discriminator property
        value_discriminator: The discriminator value read off the data
        path: Path of the object being validated, for error messages

    Raises:
        InvalidRuleError: If the inheritance properties are not objects
    """
    if value_discriminator is None:
        return None

    extra_by_value = rule["inheritance"].get("properties") or {}
    if not isinstance(extra_by_value, Mapping):
        raise InvalidRuleError(f"inheritance properties in {path} must be an object")

    extra = extra_by_value.get(str(value_discriminator).lower())
    if extra is not None and not isinstance(extra, Mapping):
        raise InvalidRuleError(
            f"inheritance properties for {discriminator}={value_discriminator} in {path} must be an object"
        )
    logger.debug(
        f"Discriminator {discriminator}={value_discriminator!r} at {path or '<root>'} "
        f"selected {len(extra) if extra else 0} extra properties"
    )
    return extra


def check_inheritance(rule: Rule, path: str) -> str:
    """Validate an ``inheritance`` block and return its discriminator name.

    Raises:
        InvalidRuleError: If the block has no discriminator, or the
            discriminator is not a required property of the rule
    """
    inheritance = rule.get("inheritance")
    if not isinstance(inheritance, Mapping):
        raise InvalidRuleError(f"inheritance in {path} must be an object")

    discriminator = inheritance.get("discriminator")
    if not discriminator:
        raise InvalidRuleError(f"inheritance needs a discriminator in {path}")

    properties = rule.get("properties") or {}
    discriminator_rule = properties.get(discriminator) if isinstance(properties, Mapping) else None
    if not isinstance(discriminator_rule, Mapping) or not is_required(discriminator_rule):
        raise InvalidRuleError(f"discriminator {discriminator} in {path} has to be a required value")

    return discriminator


def check_rule_tree(rules: Any, registry, path: str = "") -> None:
    """Check a whole rule tree without any data.

    Applies the rule set checks at every level, resolves each type name
    through ``registry`` and validates inheritance blocks, recursing into
    ``properties``, ``items`` and every inheritance property set.

    Raises:
        InvalidRuleError: On the first malformed node found
        UnknownTypeError: If a rule uses a type name with no checker
    """
    check_rule_set(rules)

    for item_key, rule in rules.items():
        rule_path = f"{path}.{item_key}" if path else item_key
        registry.get(rule["type"])

        if rule["type"] == "object":
            if rule.get("inheritance") is not None:
                check_inheritance(rule, rule_path)
                extra_by_value = rule["inheritance"].get("properties") or {}
                if not isinstance(extra_by_value, Mapping):
                    raise InvalidRuleError(f"inheritance properties in {rule_path} must be an object")
                for discriminator_value, extra in extra_by_value.items():
                    check_rule_tree(extra, registry, f"{rule_path}<{discriminator_value}>")
            if rule.get("properties") is not None:
                if not isinstance(rule["properties"], Mapping):
                    raise InvalidRuleError(f"properties in {rule_path} must be an object")
                check_rule_tree(rule["properties"], registry, rule_path)
        elif rule["type"] == "array" and rule.get("items") is not None:
            check_items(rule["items"], rule_path)
            check_rule_tree(rule["items"], registry, rule_path)


def check_items(items: Any, path: str) -> None:
    """Check that an ``array`` rule's ``items`` is a single wildcard rule.

    Raises:
        InvalidRuleError: If ``items`` holds anything but one ``*`` entry
    """
    if not isinstance(items, Mapping) or list(items) != [WILDCARD]:
        raise InvalidRuleError(f'items in {path} must contain exactly one "{WILDCARD}" rule')
