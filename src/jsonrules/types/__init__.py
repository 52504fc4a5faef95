"""Per-type constraint checkers."""

from .array import ArrayChecker
from .base import TypeChecker
from .boolean import BooleanChecker
from .number import NumberChecker
from .object import ObjectChecker
from .string import StringChecker

__all__ = [
    "TypeChecker",
    "ArrayChecker",
    "BooleanChecker",
    "NumberChecker",
    "ObjectChecker",
    "StringChecker",
]
