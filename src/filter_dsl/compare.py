"""Structural comparison of condition trees."""

from typing import Any, Optional, Type

from filter_dsl.models.nodes import (
    ComponentNode,
    ConditionNode,
    FieldNode,
    Node,
    ValueNode,
    ValuesNode,
)
from filter_dsl.scalars.registry import ScalarTypeRegistry
from filter_dsl.simplify import simplify_condition


def _scalar_equals(registry: Type[ScalarTypeRegistry], scalar_type: str, a: Any, b: Any) -> bool:
    """Compare two scalars with the equality of their scalar type.

    Unregistered types and values the type cannot interpret are compared with ``==``.
    """
    if not registry.has_type(scalar_type):
        return a == b
    try:
        return registry.get_type(scalar_type).equals(a, b)
    except ValueError:
        return a == b


def compare_conditions(
    a: Optional[Node],
    b: Optional[Node],
    treat_empty_as_equal: bool = False,
    registry: Type[ScalarTypeRegistry] = ScalarTypeRegistry,
) -> bool:
    """Deep structural equality of two condition trees.

    Operand order is significant for conditions and value lists.

    Args:
        a: First tree or None
        b: Second tree or None
        treat_empty_as_equal: If True, None equals any tree that simplifies to None
        registry: Scalar type registry providing value equality

    Returns:
        True if both trees describe the same predicate
    """
    if a is None and b is None:
        return True
    if a is None or b is None:
        other = b if a is None else a
        return treat_empty_as_equal and simplify_condition(other) is None

    if isinstance(a, ConditionNode):
        if not isinstance(b, ConditionNode) or a.name != b.name or len(a.operands) != len(b.operands):
            return False
        return all(compare_conditions(x, y, treat_empty_as_equal, registry) for x, y in zip(a.operands, b.operands))

    if isinstance(a, ComponentNode):
        return isinstance(b, ComponentNode) and a.id == b.id and compare_conditions(a.condition, b.condition, treat_empty_as_equal, registry)

    if isinstance(a, FieldNode):
        return isinstance(b, FieldNode) and a.name == b.name

    if isinstance(a, ValueNode):
        return isinstance(b, ValueNode) and a.scalar_type == b.scalar_type and _scalar_equals(registry, a.scalar_type, a.value, b.value)

    if isinstance(a, ValuesNode):
        if not isinstance(b, ValuesNode) or a.scalar_type != b.scalar_type or len(a.values) != len(b.values):
            return False
        return all(_scalar_equals(registry, a.scalar_type, x, y) for x, y in zip(a.values, b.values))

    raise TypeError(f"Cannot compare unknown node type: {type(a).__name__}")
