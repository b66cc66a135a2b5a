"""Expression tree nodes for filter conditions.

Every node is an immutable pydantic model carrying a ``type`` discriminator, so
a whole tree can be validated from plain dicts and matched on by kind. Nodes are
never mutated after construction: two-phase construction goes through
``ConditionNode.with_operands`` and ``ComponentNode.with_condition``, which
return new nodes.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Tuple, Union

from pydantic import BaseModel, Field, model_validator

from filter_dsl.models.operators import ComparisonOperator, OperatorRegistry


class NodeType(str, Enum):
    """Kinds of expression tree nodes."""

    FIELD = "Field"
    VALUE = "Value"
    VALUES = "Values"
    CONDITION = "Condition"
    COMPONENT = "Component"


class BaseNode(BaseModel):
    """Common configuration for all nodes."""

    model_config = {"frozen": True, "arbitrary_types_allowed": True}


class OperandMixin:
    """Fluent comparison helpers for nodes that can be the left side of a condition."""

    def _compare(self, operator: ComparisonOperator, *operands: "Node") -> "ConditionNode":
        return ConditionNode(name=operator.value, operands=(self, *operands))

    def eq(self, other: "Node") -> "ConditionNode":
        return self._compare(ComparisonOperator.EQUALS, other)

    def ne(self, other: "Node") -> "ConditionNode":
        return self._compare(ComparisonOperator.NOT_EQUALS, other)

    def lt(self, other: "Node") -> "ConditionNode":
        return self._compare(ComparisonOperator.LESS_THAN, other)

    def lte(self, other: "Node") -> "ConditionNode":
        return self._compare(ComparisonOperator.LESS_THAN_EQUALS, other)

    def gt(self, other: "Node") -> "ConditionNode":
        return self._compare(ComparisonOperator.GREATER_THAN, other)

    def gte(self, other: "Node") -> "ConditionNode":
        return self._compare(ComparisonOperator.GREATER_THAN_EQUALS, other)

    def between(self, lower: "Node", upper: "Node") -> "ConditionNode":
        return self._compare(ComparisonOperator.BETWEEN, lower, upper)

    def in_(self, other: "ValuesNode") -> "ConditionNode":
        return self._compare(ComparisonOperator.IN, other)

    def not_in(self, other: "ValuesNode") -> "ConditionNode":
        return self._compare(ComparisonOperator.NOT_IN, other)

    def is_null(self) -> "ConditionNode":
        return self._compare(ComparisonOperator.IS_NULL)

    def is_not_null(self) -> "ConditionNode":
        return self._compare(ComparisonOperator.IS_NOT_NULL)

    def contains(self, other: "Node") -> "ConditionNode":
        return self._compare(ComparisonOperator.CONTAINS, other)

    def contains_ignore_case(self, other: "Node") -> "ConditionNode":
        return self._compare(ComparisonOperator.CONTAINS_IGNORE_CASE, other)

    def starts_with(self, other: "Node") -> "ConditionNode":
        return self._compare(ComparisonOperator.STARTS_WITH, other)

    def ends_with(self, other: "Node") -> "ConditionNode":
        return self._compare(ComparisonOperator.ENDS_WITH, other)

    def like(self, other: "Node") -> "ConditionNode":
        return self._compare(ComparisonOperator.LIKE, other)


class FieldNode(OperandMixin, BaseNode):
    """Reference to a (possibly dotted) field path of the queried record."""

    type: Literal["Field"] = NodeType.FIELD.value
    name: str = Field(min_length=1, description="Dotted field path, e.g. 'owner.name'")

    def __str__(self) -> str:
        return f"field({self.name})"


class ValueNode(OperandMixin, BaseNode):
    """Single typed scalar literal."""

    type: Literal["Value"] = NodeType.VALUE.value
    scalar_type: str = Field(min_length=1, description="Name of the scalar type of the value")
    value: Any = Field(default=None, description="Scalar value")
    name: Optional[str] = Field(default=None, description="Originating field name, for diagnostics")

    def __str__(self) -> str:
        return f"value({self.scalar_type}, {self.value!r})"


class ValuesNode(BaseNode):
    """Typed list of scalar literals, used by set membership operators."""

    type: Literal["Values"] = NodeType.VALUES.value
    scalar_type: str = Field(min_length=1, description="Name of the scalar type of the values")
    values: Tuple[Any, ...] = Field(default=(), description="Scalar values, order preserved")

    def __str__(self) -> str:
        return f"values({self.scalar_type}, {', '.join(repr(v) for v in self.values)})"


class ConditionNode(BaseNode):
    """Operator application over operand nodes."""

    type: Literal["Condition"] = NodeType.CONDITION.value
    name: str = Field(min_length=1, description="Operator name")
    operands: Tuple["Node", ...] = Field(default=(), description="Operand nodes, order is significant")

    @model_validator(mode="after")
    def validate_operator(self) -> "ConditionNode":
        """Check the operator exists and, once operands are given, that their count matches."""
        if self.operands:
            OperatorRegistry.validate_operands(self.name, len(self.operands))
        else:
            OperatorRegistry.get_operator(self.name)
        return self

    def with_operands(self, *operands: "Node") -> "ConditionNode":
        """Return a new condition with the same operator and the given operands."""
        return ConditionNode(name=self.name, operands=operands)

    def __str__(self) -> str:
        return f"{self.name}({', '.join(str(operand) for operand in self.operands)})"


class ComponentNode(BaseNode):
    """Marker wrapping the condition contributed by one component."""

    type: Literal["Component"] = NodeType.COMPONENT.value
    id: Optional[str] = Field(default=None, description="Stable component id, None for an anonymous slot")
    condition: Optional["Node"] = Field(default=None, description="Component condition, None for no constraint")

    def with_condition(self, condition: Optional["Node"]) -> "ComponentNode":
        """Return a new marker with the same id and the given condition."""
        return ComponentNode(id=self.id, condition=condition)

    def __str__(self) -> str:
        return f"component({self.id!r}, {self.condition})"


Node = Annotated[
    Union[FieldNode, ValueNode, ValuesNode, ConditionNode, ComponentNode],
    Field(discriminator="type"),
]

ConditionNode.model_rebuild()
ComponentNode.model_rebuild()
