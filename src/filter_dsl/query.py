"""Query state holding the composite condition shared by several components."""

import threading
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, Field

from filter_dsl.composite import find_component_node, update_component_condition
from filter_dsl.config import settings
from filter_dsl.models.nodes import ComponentNode, Node
from filter_dsl.utils.logging import logger
from filter_dsl.wire import WireFormat

Listener = Callable[["QueryConfig"], None]


class QueryConfig(BaseModel):
    """Condition and paging state of a query."""

    condition: Optional[Node] = Field(default=None, description="Composite condition, None for no constraint")
    offset: int = Field(default=0, ge=0, description="Offset of the first row to fetch")
    page_size: int = Field(default_factory=lambda: settings.default_page_size, ge=0, description="Rows per page, 0 for unlimited")
    sort_fields: List[str] = Field(default_factory=list, description="Field paths to sort by, prefixed with '!' for descending")

    model_config = {"frozen": True}


class CompositeFilter:
    """Single-writer container for the composite condition of one query.

    Component updates are merged one at a time against the latest condition, so
    concurrent updates from several components never work on a stale snapshot.
    Listeners run while the lock is held, in the order the changes were merged.
    """

    def __init__(self, query_config: Optional[QueryConfig] = None, wire_format: Optional[WireFormat] = None) -> None:
        self._query_config = query_config or QueryConfig()
        self._wire_format = wire_format or WireFormat()
        self._listeners: List[Listener] = []
        self._lock = threading.RLock()

    @property
    def query_config(self) -> QueryConfig:
        return self._query_config

    @property
    def condition(self) -> Optional[Node]:
        return self._query_config.condition

    def update(self, component_id: Optional[str], condition: Optional[Node], compare_update: Optional[bool] = None) -> bool:
        """Merge the condition of one component into the composite condition.

        Args:
            component_id: Id of the updated component
            condition: New condition of the component, None for no constraint
            compare_update: Skip unchanged conditions, defaults to the configured setting

        Returns:
            True if the composite condition changed and listeners were notified
        """
        if compare_update is None:
            compare_update = settings.compare_updates

        with self._lock:
            current = self._query_config
            merged = update_component_condition(current.condition, condition, component_id, compare_update)
            if merged is current.condition:
                return False

            # a changed condition changes the result set, start at the first page again
            self._query_config = current.model_copy(update={"condition": merged, "offset": 0})
            logger.debug(f"Composite condition changed by component {component_id!r}: {merged}")

            # notify while holding the lock so listeners see changes in merge order
            self._notify(self._query_config)
        return True

    def reset(self) -> None:
        """Remove all component conditions."""
        with self._lock:
            if self._query_config.condition is None:
                return
            self._query_config = self._query_config.model_copy(update={"condition": None, "offset": 0})
            self._notify(self._query_config)

    def get_component_node(self, component_id: Optional[str]) -> Optional[ComponentNode]:
        return find_component_node(self._query_config.condition, component_id)

    def get_component_condition(self, component_id: Optional[str]) -> Optional[Node]:
        """Read back the current condition of one component."""
        component_node = self.get_component_node(component_id)
        return component_node.condition if component_node is not None else None

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with the new query config on every change.

        Returns:
            Function removing the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def to_wire(self) -> Dict[str, Any]:
        """Render the query config with the condition in wire format."""
        config = self._query_config
        return {
            "condition": self._wire_format.node_to_wire(config.condition),
            "offset": config.offset,
            "pageSize": config.page_size,
            "sortFields": list(config.sort_fields),
        }

    def _notify(self, query_config: QueryConfig) -> None:
        for listener in list(self._listeners):
            listener(query_config)
