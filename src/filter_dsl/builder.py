"""Builder functions for filter condition trees.

These are the supported way to create nodes::

    field("age").gte(value("Int", 18))
    and_(field("name").starts_with(value("String", "A")), not_(field("deleted").is_null()))
"""

from typing import Any, Optional

from filter_dsl.models.nodes import (
    ComponentNode,
    ConditionNode,
    FieldNode,
    Node,
    ValueNode,
    ValuesNode,
)
from filter_dsl.models.operators import LogicalOperator, OperatorRegistry


def field(name: str) -> FieldNode:
    """Create a reference to a (dotted) field path."""
    return FieldNode(name=name)


def value(scalar_type: str, value: Any, name: Optional[str] = None) -> ValueNode:
    """Create a typed scalar value leaf.

    Args:
        scalar_type: Name of the scalar type, e.g. "String" or "Int"
        value: Scalar value
        name: Optional name of the field the value originates from
    """
    return ValueNode(scalar_type=scalar_type, value=value, name=name)


def values(scalar_type: str, *values: Any) -> ValuesNode:
    """Create a typed list of scalar values. An empty list is allowed."""
    return ValuesNode(scalar_type=scalar_type, values=values)


def condition(name: str, *operands: Node) -> ConditionNode:
    """Create a condition node.

    Without operands this returns a handle whose operands are supplied later
    through ``ConditionNode.with_operands``.

    Raises:
        InvalidOperatorError: If the operator is unknown or the operand count is wrong
    """
    return ConditionNode(name=name, operands=operands)


def component(id: Optional[str] = None, condition: Optional[Node] = None) -> ComponentNode:
    """Create a component marker for the condition of the component with the given id."""
    return ComponentNode(id=id, condition=condition)


def not_(operand: Node) -> ConditionNode:
    return ConditionNode(name=LogicalOperator.NOT.value, operands=(operand,))


def and_(*operands: Node) -> ConditionNode:
    return ConditionNode(name=LogicalOperator.AND.value, operands=operands)


def or_(*operands: Node) -> ConditionNode:
    return ConditionNode(name=LogicalOperator.OR.value, operands=operands)


def get_condition_arg_count(name: str) -> int:
    """Get the number of operands a non-logical operator requires.

    Raises:
        InvalidOperatorError: If the operator is unknown or variadic
    """
    return OperatorRegistry.get_arg_count(name)


def is_logical_condition(node: Optional[Node]) -> bool:
    """Check whether a node is an "and" or "or" condition."""
    return isinstance(node, ConditionNode) and node.name in (LogicalOperator.AND.value, LogicalOperator.OR.value)
