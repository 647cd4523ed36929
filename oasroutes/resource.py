"""Documented resources: several routes sharing one path."""

from __future__ import annotations

import copy
from typing import Any, Callable, Dict, Iterable, List, Optional

from .models import Components, PathItem
from .route import METHODS, Route, RouteWrapper


class Resource:
    """A path with the routes that answer on it."""

    def __init__(self, path: str, tags: Optional[Iterable[str]] = None) -> None:
        self.path = path
        self.item_definition: Optional[PathItem] = None
        self.components: List[Components] = []
        self.tags: List[str] = [str(tag) for tag in (tags or [])]
        self.routes: List[Route] = []
        self.resource_name: Optional[str] = None
        self.guards: List[Callable[..., bool]] = []
        self.data: List[Any] = []
        self.middleware: List[Any] = []
        self.default: Optional[Any] = None

    def name(self, name: str) -> Resource:
        """Name the resource. It does not affect the generated document."""
        self.resource_name = name
        return self

    def guard(self, guard: Callable[..., bool]) -> Resource:
        """Add a guard. It does not affect the generated document."""
        self.guards.append(guard)
        return self

    def route(self, route: Route) -> Resource:
        """Add a route; its operations are tagged with the resource's tags."""
        wrapper = RouteWrapper(self.path, route)
        operations = wrapper.item.operations
        for operation in operations.values():
            operation.tags.extend(self.tags)
        item = self.item_definition or PathItem()
        item.operations.update(operations)
        self.item_definition = item
        self.components.extend(wrapper.components)
        self.routes.append(route)
        return self

    def app_data(self, data: Any) -> Resource:
        """Attach data. It does not affect the generated document."""
        self.data.append(data)
        return self

    def to(self, handler: Callable[..., Any]) -> Resource:
        """Answer every method with ``handler``, documented for all methods."""
        route = Route().to(handler)
        if route.operation is not None:
            operation = route.operation
            operation.tags.extend(self.tags)
            item = self.item_definition or PathItem()
            for op_type in METHODS:
                item.operations[op_type] = copy.deepcopy(operation)
            self.item_definition = item
            self.components.extend(route.components)
        self.routes.append(route)
        return self

    def wrap(self, mw: Any) -> Resource:
        """Add middleware. It does not affect the generated document."""
        self.middleware.append(mw)
        return self

    def default_service(self, f: Any) -> Resource:
        """Set the fallback service. It does not affect the generated document."""
        self.default = f
        return self

    def update_path_items(self, path_op_map: Dict[str, PathItem]) -> None:
        """Move this resource's operations into ``path_op_map`` under its path."""
        item, self.item_definition = self.item_definition, None
        if item is not None and item.operations:
            path_op_map.setdefault(self.path, PathItem()).operations.update(item.operations)


def resource(path: str) -> Resource:
    """Create a resource at ``path``."""
    return Resource(path)


def tagged_resource(path: str, tags: Iterable[str]) -> Resource:
    """Create a resource whose operations all carry ``tags``."""
    return Resource(path, tags)