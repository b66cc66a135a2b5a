"""Filter DSL package.

Builds filter condition trees and merges the conditions of independent
components into one composite condition for a backend query.
"""

from filter_dsl.builder import (
    and_,
    component,
    condition,
    field,
    get_condition_arg_count,
    is_logical_condition,
    not_,
    or_,
    value,
    values,
)
from filter_dsl.compare import compare_conditions
from filter_dsl.composite import find_component_node, update_component_condition
from filter_dsl.exceptions import (
    FilterDSLError,
    InvalidCompositeStructureError,
    InvalidOperatorError,
    InvalidScalarTypeError,
    WireFormatError,
)
from filter_dsl.models import (
    ComponentNode,
    ConditionNode,
    FieldNode,
    Node,
    NodeType,
    OperatorDefinition,
    OperatorRegistry,
    ValueNode,
    ValuesNode,
)
from filter_dsl.query import CompositeFilter, QueryConfig
from filter_dsl.scalars import ScalarType, ScalarTypeRegistry
from filter_dsl.simplify import simplify_condition
from filter_dsl.wire import WireFormat

__all__ = [
    # Builder
    "and_",
    "component",
    "condition",
    "field",
    "get_condition_arg_count",
    "is_logical_condition",
    "not_",
    "or_",
    "value",
    "values",
    # Engine
    "compare_conditions",
    "find_component_node",
    "simplify_condition",
    "update_component_condition",
    # Models
    "ComponentNode",
    "ConditionNode",
    "FieldNode",
    "Node",
    "NodeType",
    "OperatorDefinition",
    "OperatorRegistry",
    "ValueNode",
    "ValuesNode",
    # Query state and wire format
    "CompositeFilter",
    "QueryConfig",
    "ScalarType",
    "ScalarTypeRegistry",
    "WireFormat",
    # Exceptions
    "FilterDSLError",
    "InvalidCompositeStructureError",
    "InvalidOperatorError",
    "InvalidScalarTypeError",
    "WireFormatError",
]
