"""Operator definitions and the registry used to validate condition arity."""

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field

from filter_dsl.exceptions import InvalidOperatorError


class LogicalOperator(str, Enum):
    """Logical operators combining other conditions."""

    AND = "and"
    OR = "or"
    NOT = "not"


class ComparisonOperator(str, Enum):
    """Built-in comparison and predicate operators."""

    EQUALS = "eq"
    NOT_EQUALS = "ne"
    LESS_THAN = "lt"
    LESS_THAN_EQUALS = "lte"
    GREATER_THAN = "gt"
    GREATER_THAN_EQUALS = "gte"
    BETWEEN = "between"
    NOT_BETWEEN = "notBetween"
    IN = "in"
    NOT_IN = "notIn"
    IS_NULL = "isNull"
    IS_NOT_NULL = "isNotNull"
    IS_TRUE = "isTrue"
    IS_FALSE = "isFalse"
    CONTAINS = "contains"
    CONTAINS_IGNORE_CASE = "containsIgnoreCase"
    STARTS_WITH = "startsWith"
    STARTS_WITH_IGNORE_CASE = "startsWithIgnoreCase"
    ENDS_WITH = "endsWith"
    ENDS_WITH_IGNORE_CASE = "endsWithIgnoreCase"
    LIKE = "like"
    LIKE_IGNORE_CASE = "likeIgnoreCase"
    NOT_LIKE = "notLike"


class OperatorDefinition(BaseModel):
    """Declares an operator name and the number of operands it takes."""

    name: str = Field(min_length=1, description="Operator name as used in condition nodes")
    arg_count: Optional[int] = Field(default=None, ge=1, description="Fixed operand count, None for variadic logical operators")
    logical: bool = Field(default=False, description="Whether the operator combines other conditions")

    model_config = {"frozen": True}


def _definitions(*definitions: OperatorDefinition) -> Dict[str, OperatorDefinition]:
    return {definition.name: definition for definition in definitions}


_UNARY = (
    ComparisonOperator.IS_NULL,
    ComparisonOperator.IS_NOT_NULL,
    ComparisonOperator.IS_TRUE,
    ComparisonOperator.IS_FALSE,
)
_TERNARY = (ComparisonOperator.BETWEEN, ComparisonOperator.NOT_BETWEEN)


class OperatorRegistry:
    """Registry of known operators."""

    _operators: Dict[str, OperatorDefinition] = _definitions(
        OperatorDefinition(name=LogicalOperator.AND.value, logical=True),
        OperatorDefinition(name=LogicalOperator.OR.value, logical=True),
        OperatorDefinition(name=LogicalOperator.NOT.value, arg_count=1, logical=True),
        *(
            OperatorDefinition(name=op.value, arg_count=1 if op in _UNARY else 3 if op in _TERNARY else 2)
            for op in ComparisonOperator
        ),
    )

    @classmethod
    def register_operator(cls, definition: OperatorDefinition) -> None:
        """Register a new operator.

        Args:
            definition: Operator definition to register
        """
        cls._operators[definition.name] = definition

    @classmethod
    def get_operator(cls, name: str) -> OperatorDefinition:
        """Get the definition of an operator.

        Args:
            name: Operator name

        Returns:
            Operator definition

        Raises:
            InvalidOperatorError: If no operator with that name is registered
        """
        definition = cls._operators.get(name)
        if definition is None:
            raise InvalidOperatorError(f"Unknown condition operator: {name!r}")
        return definition

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name in cls._operators

    @classmethod
    def get_arg_count(cls, name: str) -> int:
        """Get the required operand count of a non-logical operator.

        Raises:
            InvalidOperatorError: If the operator is unknown or variadic
        """
        definition = cls.get_operator(name)
        if definition.arg_count is None:
            raise InvalidOperatorError(f"Operator {name!r} takes a variable number of operands")
        return definition.arg_count

    @classmethod
    def validate_operands(cls, name: str, count: int) -> None:
        """Check an operand count against the operator's declared arity."""
        definition = cls.get_operator(name)
        if definition.arg_count is not None and definition.arg_count != count:
            raise InvalidOperatorError(f"Operator {name!r} takes {definition.arg_count} operand(s), got {count}")
