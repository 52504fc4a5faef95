"""jsonrules - Declarative rule-tree validation for JSON-shaped data.

jsonrules walks a tree of rules alongside the data it describes and collects
human-readable errors keyed by data path instead of failing on the first one.
"""

__version__ = "0.1.0"
__author__ = "jsonrules contributors"
__description__ = "Declarative rule-tree validation for JSON-shaped data"

from jsonrules.errors import ErrorAccumulator
from jsonrules.exceptions import (
    ConstraintViolationError,
    DataValidationError,
    InvalidRuleError,
    JsonRulesError,
    UnknownTypeError,
)
from jsonrules.registry import CheckerRegistry, TypeName
from jsonrules.validator import ValidationResult, Validator, validate

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "CheckerRegistry",
    "ConstraintViolationError",
    "DataValidationError",
    "ErrorAccumulator",
    "InvalidRuleError",
    "JsonRulesError",
    "TypeName",
    "UnknownTypeError",
    "ValidationResult",
    "Validator",
    "validate",
]
