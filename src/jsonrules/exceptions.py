"""Exception hierarchy for jsonrules.

Two families with different propagation policies:

* ``InvalidRuleError`` (and ``UnknownTypeError``) mean the rule tree itself is
  malformed. They abort the whole validation call.
* ``DataValidationError`` (and ``ConstraintViolationError``) describe a single
  field of data that does not match its rule. The validator records them
  against the failing path and keeps going.
"""


class JsonRulesError(Exception):
    """Base class for all jsonrules errors."""


class InvalidRuleError(JsonRulesError):
    """A rule node or rule set is malformed."""


class UnknownTypeError(InvalidRuleError):
    """A rule references a type name with no registered checker."""

    def __init__(self, type_name: object):
        self.type_name = type_name
        super().__init__(f'The type "{type_name}" is invalid')


class DataValidationError(JsonRulesError):
    """A data value failed validation."""

    @property
    def message(self) -> str:
        return str(self)


class ConstraintViolationError(DataValidationError):
    """A value violated one of the constraints declared on its rule."""
