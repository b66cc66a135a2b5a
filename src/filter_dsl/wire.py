"""Conversion of condition trees and query variables to and from the wire format."""

from typing import Any, Dict, Optional, Type

from pydantic import TypeAdapter, ValidationError

from filter_dsl.exceptions import WireFormatError
from filter_dsl.models.nodes import (
    ComponentNode,
    ConditionNode,
    FieldNode,
    Node,
    ValueNode,
    ValuesNode,
)
from filter_dsl.scalars.registry import ScalarTypeRegistry

# Variable types whose values are condition trees rather than scalars
CONDITION_VARIABLE_TYPES = frozenset({"Condition", "FieldExpr"})

_node_adapter: TypeAdapter = TypeAdapter(Node)


class WireFormat:
    """Converts nodes and variables using a scalar type registry."""

    def __init__(self, registry: Type[ScalarTypeRegistry] = ScalarTypeRegistry) -> None:
        self.registry = registry

    def convert_scalar(self, scalar_type: str, value: Any, from_wire: bool = False) -> Any:
        """Convert a single scalar to (or from) its wire representation.

        Raises:
            InvalidScalarTypeError: If the scalar type is not registered
            WireFormatError: If the value is not valid for the scalar type
        """
        type_impl = self.registry.get_type(scalar_type)
        if value is None:
            return None
        try:
            return type_impl.from_wire(value) if from_wire else type_impl.to_wire(value)
        except ValueError as e:
            raise WireFormatError(f"Invalid {scalar_type} value {value!r}: {str(e)}") from e

    def node_to_wire(self, node: Optional[Node]) -> Optional[Dict[str, Any]]:
        """Recursively convert a condition tree to JSON compatible dicts."""
        if node is None:
            return None
        if isinstance(node, ConditionNode):
            return {"type": node.type, "name": node.name, "operands": [self.node_to_wire(operand) for operand in node.operands]}
        if isinstance(node, ComponentNode):
            return {"type": node.type, "id": node.id, "condition": self.node_to_wire(node.condition)}
        if isinstance(node, FieldNode):
            return {"type": node.type, "name": node.name}
        if isinstance(node, ValueNode):
            return {
                "type": node.type,
                "scalarType": node.scalar_type,
                "value": self.convert_scalar(node.scalar_type, node.value),
                "name": node.name,
            }
        if isinstance(node, ValuesNode):
            return {
                "type": node.type,
                "scalarType": node.scalar_type,
                "values": [self.convert_scalar(node.scalar_type, v) for v in node.values],
            }
        raise WireFormatError(f"Cannot convert unknown node type: {type(node).__name__}")

    def node_from_wire(self, data: Optional[Dict[str, Any]]) -> Optional[Node]:
        """Build a condition tree from its wire representation.

        Raises:
            WireFormatError: If the data does not describe a valid tree
            InvalidOperatorError: If a condition names an unknown operator or has the wrong operand count
        """
        if data is None:
            return None
        try:
            return _node_adapter.validate_python(self._prepare(data))
        except ValidationError as e:
            raise WireFormatError(f"Invalid condition structure: {str(e)}") from e

    def _prepare(self, data: Any) -> Any:
        """Convert scalar leaves from wire values and map wire keys to node fields."""
        if not isinstance(data, dict):
            raise WireFormatError(f"Expected a node object, got: {data!r}")
        node_type = data.get("type")
        if node_type == "Condition":
            return {**data, "operands": [self._prepare(operand) for operand in data.get("operands") or []]}
        if node_type == "Component":
            condition = data.get("condition")
            return {**data, "condition": None if condition is None else self._prepare(condition)}
        if node_type == "Value":
            scalar_type = data.get("scalarType")
            return {
                "type": node_type,
                "scalar_type": scalar_type,
                "value": self.convert_scalar(scalar_type, data.get("value"), from_wire=True),
                "name": data.get("name"),
            }
        if node_type == "Values":
            scalar_type = data.get("scalarType")
            return {
                "type": node_type,
                "scalar_type": scalar_type,
                "values": [self.convert_scalar(scalar_type, v, from_wire=True) for v in data.get("values") or []],
            }
        return data

    def convert_variables(self, var_types: Dict[str, str], variables: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        """Convert query variables to the wire format according to their declared types.

        Args:
            var_types: Declared type name per variable
            variables: Variable values

        Returns:
            Converted variables, or None if there are none

        Raises:
            WireFormatError: If a variable has no declared type or an invalid value
        """
        if variables is None:
            return None

        out: Dict[str, Any] = {}
        for name, value in variables.items():
            var_type = var_types.get(name)
            if not var_type:
                raise WireFormatError(f"Cannot convert invalid variable '{name}'")

            if var_type in CONDITION_VARIABLE_TYPES:
                out[name] = self.node_to_wire(value)
            else:
                out[name] = self.convert_scalar(var_type, value)
        return out
