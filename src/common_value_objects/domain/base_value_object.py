"""
Base Value Object Contract for Domain Layer
Immutable objects defined by their attributes, not identity
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class BaseValueObject(ABC):
    """
    Abstract base class for all value objects.

    Value objects are immutable and defined by their attributes.
    Two value objects are equal if they are of the same class and their
    equality components match. They have no identity (no id field).

    Subclasses assign their state in __init__ and then call
    _finalize_init() to freeze the instance.
    """

    @abstractmethod
    def _get_equality_components(self) -> tuple:
        """Values that define equality and hashing."""

    def __eq__(self, other: object) -> bool:
        """Value objects are equal if all components match."""
        if not isinstance(other, self.__class__) or not isinstance(self, other.__class__):
            return False
        return self._get_equality_components() == other._get_equality_components()

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self._get_equality_components()))

    def __repr__(self) -> str:
        components = ", ".join(repr(c) for c in self._get_equality_components())
        return f"{self.__class__.__name__}({components})"

    def __setattr__(self, name: str, value: Any) -> None:
        """
        Prevent modification after initialization.

        Raises:
            AttributeError: If attempting to modify after __init__
        """
        if getattr(self, "_initialized", False):
            raise AttributeError(
                f"Cannot modify immutable value object {self.__class__.__name__}"
            )
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        raise AttributeError(
            f"Cannot modify immutable value object {self.__class__.__name__}"
        )

    def equals(self, other: object) -> bool:
        """Null-safe equality; foreign types are never equal."""
        return self == other

    def _finalize_init(self) -> None:
        """Call this at the end of __init__ in subclasses to freeze object."""
        super().__setattr__("_initialized", True)
