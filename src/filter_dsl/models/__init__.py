"""Models package for the filter DSL."""

from filter_dsl.models.nodes import (
    ComponentNode,
    ConditionNode,
    FieldNode,
    Node,
    NodeType,
    ValueNode,
    ValuesNode,
)
from filter_dsl.models.operators import (
    ComparisonOperator,
    LogicalOperator,
    OperatorDefinition,
    OperatorRegistry,
)

__all__ = [
    "ComparisonOperator",
    "ComponentNode",
    "ConditionNode",
    "FieldNode",
    "LogicalOperator",
    "Node",
    "NodeType",
    "OperatorDefinition",
    "OperatorRegistry",
    "ValueNode",
    "ValuesNode",
]
