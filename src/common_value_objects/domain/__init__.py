"""
Value Object Domain Layer
Pure domain contracts with no framework dependencies
"""
from common_value_objects.domain.base_value_object import BaseValueObject
from common_value_objects.domain.result import Failure, Result, Success

__all__ = [
    "BaseValueObject",
    "Result",
    "Success",
    "Failure",
]
