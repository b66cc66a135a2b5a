"""Base class for scalar type implementations."""

from abc import ABC, abstractmethod
from typing import Any


class ScalarType(ABC):
    """Base class for all scalar types of value leaves."""

    name: str

    @abstractmethod
    def to_wire(self, value: Any) -> Any:
        """Convert a value to its wire representation.

        Args:
            value: Value to convert

        Returns:
            JSON compatible wire value

        Raises:
            ValueError: If the value is not valid for this type
        """
        pass

    @abstractmethod
    def from_wire(self, value: Any) -> Any:
        """Convert a wire value back to its Python representation.

        Args:
            value: Wire value to convert

        Returns:
            Converted value

        Raises:
            ValueError: If the wire value is not valid for this type
        """
        pass

    def equals(self, a: Any, b: Any) -> bool:
        """Check two values of this type for equality."""
        return a == b

    @classmethod
    def get_name(cls) -> str:
        """Get the scalar type name this implementation handles."""
        return cls.name
