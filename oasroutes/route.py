"""Documented routes: HTTP method selection and handler binding."""

from __future__ import annotations

import copy
import logging
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

from .models import Components, Operation, OperationType, PathItem
from .utils import update_path_parameter_name_from_path

log = logging.getLogger(__name__)

METHODS: Tuple[OperationType, ...] = (
    OperationType.GET,
    OperationType.PUT,
    OperationType.POST,
    OperationType.DELETE,
    OperationType.OPTIONS,
    OperationType.HEAD,
    OperationType.PATCH,
)

_METHOD_TYPES: Dict[str, OperationType] = {op.value.upper(): op for op in OperationType}

_DOC_ATTR = "_oas_documentation"


class OperationTypeDoc(Enum):
    """How a route without a single documented method is described."""

    ALL_METHODS = "all_methods"
    UNDOCUMENTED = "undocumented"


def api_operation(
    operation: Operation, components: Optional[Iterable[Components]] = None
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Attach an OpenAPI operation, and the components it needs, to a handler."""
    documentation = (operation, list(components or []))

    def decorate(handler: Callable[..., Any]) -> Callable[..., Any]:
        setattr(handler, _DOC_ATTR, documentation)
        return handler

    return decorate


def _handler_documentation(handler: Any) -> Optional[Tuple[Operation, List[Components]]]:
    """Return a fresh copy of a handler's documentation, or None if it has none."""
    documentation = getattr(handler, _DOC_ATTR, None)
    if documentation is None:
        return None
    return copy.deepcopy(documentation)


class Route:
    """A route: the HTTP methods it answers, its guards and its handler."""

    def __init__(self) -> None:
        self.operation: Optional[Operation] = None
        self.path_item_type: Union[OperationType, OperationTypeDoc] = OperationTypeDoc.ALL_METHODS
        self.components: List[Components] = []
        self.methods: List[str] = []
        self.guards: List[Callable[..., bool]] = []
        self.handler: Optional[Callable[..., Any]] = None

    def method(self, method: str) -> Route:
        """Restrict the route to an HTTP method; unknown methods stay undocumented."""
        op_type = _METHOD_TYPES.get(method)
        if op_type is None:
            log.warning("Unsupported method found: %s, operation will not be documented", method)
            self.path_item_type = OperationTypeDoc.UNDOCUMENTED
        else:
            self.path_item_type = op_type
        self.methods.append(method)
        return self

    def guard(self, guard: Callable[..., bool]) -> Route:
        """Add a guard. It does not affect the generated document."""
        self.guards.append(guard)
        return self

    def to(self, handler: Callable[..., Any]) -> Route:
        """Bind a handler; its documentation, if any, describes the route."""
        documentation = _handler_documentation(handler)
        if documentation is not None:
            self.operation, self.components = documentation
        self.handler = handler
        return self


def method(method: str) -> Route:
    """Create a route for the given HTTP method."""
    return Route().method(method)


def get() -> Route:
    return method("GET")


def put() -> Route:
    return method("PUT")


def post() -> Route:
    return method("POST")


def patch() -> Route:
    return method("PATCH")


def delete() -> Route:
    return method("DELETE")


def options() -> Route:
    return method("OPTIONS")


def head() -> Route:
    return method("HEAD")


class RouteWrapper:
    """A route bound to a path, with the path item it documents."""

    def __init__(self, path: str, route: Route) -> None:
        self.path = path
        self.route = route
        self.components: List[Components] = list(route.components)
        self.item = PathItem()
        if route.operation is None:
            return
        operation = copy.deepcopy(route.operation)
        update_path_parameter_name_from_path(operation, path)
        kind = route.path_item_type
        if isinstance(kind, OperationType):
            self.item.operations[kind] = operation
        elif kind is OperationTypeDoc.ALL_METHODS:
            for op_type in METHODS:
                self.item.operations[op_type] = copy.deepcopy(operation)

    def update_path_items(self, path_op_map: Dict[str, PathItem]) -> None:
        """Move this route's operations into ``path_op_map`` under its path."""
        operations, self.item.operations = self.item.operations, {}
        if operations:
            path_op_map.setdefault(self.path, PathItem()).operations.update(operations)