"""Canonicalization of vacuous conditions."""

from typing import Optional

from filter_dsl.models.nodes import ComponentNode, ConditionNode, Node
from filter_dsl.models.operators import LogicalOperator


def simplify_condition(node: Optional[Node]) -> Optional[Node]:
    """Simplify ``and(component(None, ...), ...)`` to None.

    An "and" condition made up only of anonymous component markers imposes no
    constraint. Only the top level is inspected; nested operands are not
    simplified.

    Args:
        node: Condition tree or None

    Returns:
        None if the node is an "and" of anonymous components, the node itself otherwise
    """
    if isinstance(node, ConditionNode) and node.name == LogicalOperator.AND.value:
        for operand in node.operands:
            if not isinstance(operand, ComponentNode) or operand.id is not None:
                return node

        # "and" over anonymous component nodes only
        return None
    return node
