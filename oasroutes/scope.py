"""Documented scopes: services grouped under a common path prefix."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from .models import Components, PathItem
from .route import Route, RouteWrapper
from .service_config import ServiceConfig
from .utils import update_path_parameter_name_from_path


def _take_components(holder: Any) -> List[Components]:
    taken = list(holder.components)
    holder.components.clear()
    return taken


class Scope:
    """A path prefix grouping resources, routes and nested scopes."""

    def __init__(self, path: str, tags: Optional[Iterable[str]] = None) -> None:
        self.path = path
        self.item_map: Dict[str, PathItem] = {}
        self.components: List[Components] = []
        self.tags: List[str] = [str(tag) for tag in (tags or [])]
        self.services: List[Any] = []
        self.routes: List[Tuple[str, Route]] = []
        self.guards: List[Callable[..., bool]] = []
        self.data: List[Any] = []
        self.middleware: List[Any] = []
        self.default: Optional[Any] = None

    def guard(self, guard: Callable[..., bool]) -> Scope:
        """Add a guard. It does not affect the generated document."""
        self.guards.append(guard)
        return self

    def app_data(self, data: Any) -> Scope:
        """Attach data. It does not affect the generated document."""
        self.data.append(data)
        return self

    def configure(self, f: Callable[[ServiceConfig], Any]) -> Scope:
        """Run a configuration function whose services live under this scope."""
        cfg = ServiceConfig()
        f(cfg)
        self._update_from_def_holder(cfg)
        self.services.append(cfg)
        return self

    def service(self, factory: Any) -> Scope:
        """Register a resource, scope or redirect under this scope."""
        self._update_from_def_holder(factory)
        self.services.append(factory)
        return self

    def route(self, path: str, route: Route) -> Scope:
        """Register a route at ``path`` under this scope."""
        self._update_from_def_holder(RouteWrapper(path, route))
        self.routes.append((path, route))
        return self

    def default_service(self, f: Any) -> Scope:
        """Set the fallback service. It does not affect the generated document."""
        self.default = f
        return self

    def wrap(self, mw: Any) -> Scope:
        """Add middleware. It does not affect the generated document."""
        self.middleware.append(mw)
        return self

    def update_path_items(self, path_op_map: Dict[str, PathItem]) -> None:
        """Move the collected operations into ``path_op_map``."""
        item_map, self.item_map = self.item_map, {}
        for path, item in item_map.items():
            path_op_map.setdefault(path, PathItem()).operations.update(item.operations)

    def _update_from_def_holder(self, holder: Any) -> None:
        item_map: Dict[str, PathItem] = {}
        holder.update_path_items(item_map)
        self.components.extend(_take_components(holder))

        for path, path_item in item_map.items():
            full_path = "/".join(part.lstrip("/") for part in (self.path, path) if part)
            for operation in path_item.operations.values():
                update_path_parameter_name_from_path(operation, full_path)
                operation.tags.extend(self.tags)
            self.item_map.setdefault(full_path, PathItem()).operations.update(path_item.operations)


def scope(path: str) -> Scope:
    """Create a scope with the path prefix ``path``."""
    return Scope(path)


def tagged_scope(path: str, tags: Iterable[str]) -> Scope:
    """Create a scope whose operations all carry ``tags``."""
    return Scope(path, tags)