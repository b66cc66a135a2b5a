"""Registry for scalar type implementations."""

from typing import Dict, Type

from filter_dsl.exceptions import InvalidScalarTypeError
from filter_dsl.scalars.base import ScalarType
from filter_dsl.scalars.types import (
    BigDecimalType,
    BooleanType,
    DateType,
    FloatType,
    IntType,
    LongType,
    StringType,
    TimestampType,
)


class ScalarTypeRegistry:
    """Registry for scalar type implementations."""

    _types: Dict[str, Type[ScalarType]] = {
        type_class.get_name(): type_class
        for type_class in (
            StringType,
            BooleanType,
            IntType,
            LongType,
            FloatType,
            BigDecimalType,
            DateType,
            TimestampType,
        )
    }

    @classmethod
    def register_type(cls, type_class: Type[ScalarType]) -> None:
        """Register a new scalar type implementation.

        Args:
            type_class: Scalar type class to register
        """
        cls._types[type_class.get_name()] = type_class

    @classmethod
    def has_type(cls, name: str) -> bool:
        return name in cls._types

    @classmethod
    def get_type(cls, name: str) -> ScalarType:
        """Get a type instance for a scalar type name.

        Args:
            name: Scalar type name to get instance for

        Returns:
            Type instance

        Raises:
            InvalidScalarTypeError: If no type is registered under that name
        """
        type_class = cls._types.get(name)
        if not type_class:
            raise InvalidScalarTypeError(f"No type registered for scalar type: {name}")
        return type_class()
