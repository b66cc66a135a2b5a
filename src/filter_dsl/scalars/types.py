"""Concrete scalar type implementations."""

import math
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any

from filter_dsl.config import settings
from filter_dsl.scalars.base import ScalarType


class StringType(ScalarType):
    """Scalar type for strings."""

    name = "String"

    def to_wire(self, value: Any) -> str:
        return str(value)

    def from_wire(self, value: Any) -> str:
        return str(value)


class BooleanType(ScalarType):
    """Scalar type for booleans."""

    name = "Boolean"

    def to_wire(self, value: Any) -> bool:
        """Convert to boolean, accepting the usual string spellings."""
        if isinstance(value, str):
            lowered = value.lower()
            if lowered in ("true", "1", "yes"):
                return True
            if lowered in ("false", "0", "no"):
                return False
            raise ValueError(f"Cannot convert string '{value}' to boolean")
        return bool(value)

    def from_wire(self, value: Any) -> bool:
        return self.to_wire(value)


class IntType(ScalarType):
    """Scalar type for 32-bit integers."""

    name = "Int"

    def to_wire(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError("Boolean values cannot be converted to integer")
        return int(value)

    def from_wire(self, value: Any) -> int:
        return self.to_wire(value)

    def equals(self, a: Any, b: Any) -> bool:
        """Compare as integers, a boolean never equals a number."""
        if isinstance(a, bool) != isinstance(b, bool):
            return False
        return a == b


class LongType(IntType):
    """Scalar type for 64-bit integers."""

    name = "Long"


class FloatType(ScalarType):
    """Scalar type for floating point numbers."""

    name = "Float"

    def to_wire(self, value: Any) -> float:
        if isinstance(value, bool):
            raise ValueError("Boolean values cannot be converted to float")
        return float(value)

    def from_wire(self, value: Any) -> float:
        return self.to_wire(value)

    def equals(self, a: Any, b: Any) -> bool:
        """Compare as floats, two NaN values are the same value."""
        if isinstance(a, bool) != isinstance(b, bool):
            return False
        if isinstance(a, float) and isinstance(b, float) and math.isnan(a) and math.isnan(b):
            return True
        return a == b


class BigDecimalType(ScalarType):
    """Scalar type for arbitrary precision decimals, sent as strings on the wire."""

    name = "BigDecimal"

    def _to_decimal(self, value: Any) -> Decimal:
        if isinstance(value, bool):
            raise ValueError("Boolean values cannot be converted to decimal")
        if isinstance(value, float):
            value = repr(value)
        try:
            return Decimal(value)
        except (InvalidOperation, TypeError):
            raise ValueError(f"Cannot convert {value!r} to decimal")

    def to_wire(self, value: Any) -> str:
        return str(self._to_decimal(value))

    def from_wire(self, value: Any) -> Decimal:
        return self._to_decimal(value)

    def equals(self, a: Any, b: Any) -> bool:
        """Compare numerically, so that 1.0 and 1.00 are the same value."""
        if a is None or b is None:
            return a is b
        return self._to_decimal(a) == self._to_decimal(b)


class DateType(ScalarType):
    """Scalar type for calendar dates.

    Accepts:
    - date objects
    - datetime objects (date part only)
    - strings in the configured date format
    """

    name = "Date"

    def _to_date(self, value: Any) -> date:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if isinstance(value, str):
            try:
                return datetime.strptime(value, settings.date_format).date()
            except ValueError:
                raise ValueError(f"Invalid date format. Expected {settings.date_format}, got: {value}")
        raise ValueError(f"Cannot convert {type(value)} to date")

    def to_wire(self, value: Any) -> str:
        return self._to_date(value).strftime(settings.date_format)

    def from_wire(self, value: Any) -> date:
        return self._to_date(value)

    def equals(self, a: Any, b: Any) -> bool:
        if a is None or b is None:
            return a is b
        return self._to_date(a) == self._to_date(b)


class TimestampType(ScalarType):
    """Scalar type for points in time, sent as ISO 8601 strings. Naive values are taken as UTC."""

    name = "Timestamp"

    def _to_datetime(self, value: Any) -> datetime:
        if isinstance(value, str):
            try:
                value = datetime.fromisoformat(value.replace("Z", "+00:00"))
            except ValueError:
                raise ValueError(f"Invalid timestamp format. Expected ISO 8601, got: {value}")
        if not isinstance(value, datetime):
            raise ValueError(f"Cannot convert {type(value)} to timestamp")
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value

    def to_wire(self, value: Any) -> str:
        return self._to_datetime(value).isoformat()

    def from_wire(self, value: Any) -> datetime:
        return self._to_datetime(value)

    def equals(self, a: Any, b: Any) -> bool:
        """Compare instants, regardless of the offset they are expressed in."""
        if a is None or b is None:
            return a is b
        return self._to_datetime(a) == self._to_datetime(b)
