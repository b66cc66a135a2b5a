"""Merging of component conditions into a composite condition."""

from typing import List, Optional

from filter_dsl.builder import component, condition, is_logical_condition
from filter_dsl.compare import compare_conditions
from filter_dsl.exceptions import InvalidCompositeStructureError
from filter_dsl.models.nodes import ComponentNode, ConditionNode, Node
from filter_dsl.models.operators import LogicalOperator
from filter_dsl.simplify import simplify_condition
from filter_dsl.utils.logging import logger


def update_component_condition(
    composite_condition: Optional[ConditionNode],
    component_condition: Optional[Node],
    component_id: Optional[str] = None,
    compare_update: bool = True,
) -> ConditionNode:
    """Update a logical condition composed of component conditions with a new condition for one component.

    Existing components keep their position, a component id not yet present is
    appended at the end. Neither input is modified.

    Args:
        composite_condition: Logical condition over component nodes, or None
        component_condition: New condition of the component, None for no constraint
        component_id: Id of the component to update
        compare_update: If True and the component condition did not change, return
            ``composite_condition`` itself

    Returns:
        Merged condition, the very same composite condition object if nothing changed

    Raises:
        InvalidCompositeStructureError: If the composite is not a logical condition over component nodes
    """
    new_component_node = component(component_id).with_condition(component_condition)

    if composite_condition is None:
        return condition(LogicalOperator.AND.value, new_component_node)

    if not is_logical_condition(composite_condition):
        raise InvalidCompositeStructureError(
            "Invalid composite condition, root node must be a logical condition combining component conditions: "
            f"{composite_condition}"
        )

    component_conditions: List[ComponentNode] = []
    found = False
    for component_node in composite_condition.operands:
        if not isinstance(component_node, ComponentNode):
            raise InvalidCompositeStructureError(f"Invalid component condition structure: {composite_condition}")

        if component_node.id != component_id:
            component_conditions.append(component_node)
            continue

        if compare_update and compare_conditions(
            simplify_condition(component_node.condition),
            simplify_condition(new_component_node.condition),
            True,
        ):
            logger.debug(f"Skipping unchanged condition of component {component_id!r}")
            return composite_condition

        component_conditions.append(new_component_node)
        found = True

    if not found:
        logger.debug(f"Adding component {component_id!r} to composite condition")
        component_conditions.append(new_component_node)

    return condition(composite_condition.name, *component_conditions)


def find_component_node(root: Optional[Node], component_id: Optional[str]) -> Optional[ComponentNode]:
    """Find the component node with the given id among the direct operands of a composite condition.

    Returns:
        The component node, or None if the root is empty or contains no such component
    """
    if not isinstance(root, ConditionNode):
        return None
    for operand in root.operands:
        if isinstance(operand, ComponentNode) and operand.id == component_id:
            return operand
    return None
