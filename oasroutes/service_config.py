"""A configuration target that collects routes and services with their documentation."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Tuple

from .models import Components, PathItem
from .route import Route, RouteWrapper


def _take_components(holder: Any) -> List[Components]:
    """Remove and return the components a definition holder has gathered."""
    taken = list(holder.components)
    holder.components.clear()
    return taken


class ServiceConfig:
    """Routes and services registered by a configuration function."""

    def __init__(self) -> None:
        self.item_map: Dict[str, PathItem] = {}
        self.components: List[Components] = []
        self.routes: List[Tuple[str, Route]] = []
        self.services: List[Any] = []
        self.external_resources: Dict[str, str] = {}
        self.data: List[Any] = []

    def route(self, path: str, route: Route) -> ServiceConfig:
        """Register a route at ``path`` and record its documentation."""
        wrapper = RouteWrapper(path, route)
        wrapper.update_path_items(self.item_map)
        self.components.extend(_take_components(wrapper))
        self.routes.append((path, route))
        return self

    def configure(self, f: Callable[[ServiceConfig], Any]) -> ServiceConfig:
        """Run a configuration function against this configuration."""
        f(self)
        return self

    def service(self, factory: Any) -> ServiceConfig:
        """Register a resource, scope or redirect and record its documentation."""
        factory.update_path_items(self.item_map)
        self.components.extend(_take_components(factory))
        self.services.append(factory)
        return self

    def external_resource(self, name: str, url: str) -> ServiceConfig:
        """Register an external resource. It does not affect the generated document."""
        self.external_resources[name] = url
        return self

    def app_data(self, data: Any) -> ServiceConfig:
        """Attach application data. It does not affect the generated document."""
        self.data.append(data)
        return self

    def update_path_items(self, path_op_map: Dict[str, PathItem]) -> None:
        """Move the collected operations into ``path_op_map``."""
        item_map, self.item_map = self.item_map, {}
        for path, item in item_map.items():
            path_op_map.setdefault(path, PathItem()).operations.update(item.operations)