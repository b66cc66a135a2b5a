"""Scalar types used to compare and serialize value leaves."""

from filter_dsl.scalars.base import ScalarType
from filter_dsl.scalars.registry import ScalarTypeRegistry
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

__all__ = [
    "BigDecimalType",
    "BooleanType",
    "DateType",
    "FloatType",
    "IntType",
    "LongType",
    "ScalarType",
    "ScalarTypeRegistry",
    "StringType",
    "TimestampType",
]
