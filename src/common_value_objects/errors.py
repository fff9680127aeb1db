# src/common_value_objects/errors.py
"""Domain exception hierarchy."""

from typing import Any, Optional


class DomainError(Exception):
    """Base class for all value object errors."""

    code: str = "domain_error"

    def __init__(
        self,
        message: str = "",
        *,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message or self.__class__.__name__)
        if code is not None:
            self.code = code
        self.message = message or self.__class__.__name__
        self.details = details or {}


class ValidationError(DomainError, ValueError):
    """Raised when input violates a value object's rules."""

    code = "validation_error"


class InvalidFormatError(ValidationError):
    """Raised when a string cannot be parsed into the requested value object."""

    code = "invalid_format"


class InvalidStateError(DomainError):
    """Raised when an operation is invoked on the wrong variant of a value object."""

    code = "invalid_state"


class ResourceError(DomainError):
    """Raised when a bundled or configured resource cannot be read."""

    code = "resource_error"
