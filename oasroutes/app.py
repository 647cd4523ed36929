"""Application wrapper that gathers an OpenAPI document from its services and serves it."""

from __future__ import annotations

import copy
import hashlib
import json
import re
from http import HTTPStatus
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from .models import Components, OpenApi, OperationType, Reference
from .redirect import Redirect
from .route import Route, RouteWrapper
from .service_config import ServiceConfig
from .spec import Spec

_PATH_NAME = re.compile(r"\{(?P<name>\S+):(.*)\}")
_PATH_RESOURCE = re.compile(r"/(.*?)/\{(.*?)\}")

StartResponse = Callable[[str, List[Tuple[str, str]]], Any]


def sanitize_patterned_path_parameter(path: str) -> str:
    """Turn ``{name:pattern}`` templates into plain ``{name}`` templates."""
    return "/".join(_PATH_NAME.sub(r"{\g<name>}", part, count=1) for part in path.split("/"))


def build_operation_id(path: str, operation_type: OperationType) -> str:
    """Derive a stable operation id from the method, the path's resource and its md5."""
    match = _PATH_RESOURCE.search(path)
    resource = (match.group(1) if match else path).strip("/")
    digest = hashlib.md5(path.encode("utf-8"), usedforsecurity=False).hexdigest()
    return f"{operation_type.value}_{resource.replace('/', '-')}-{digest}".lower()


def _merge_components(parts: Iterable[Components]) -> Optional[Components]:
    merged: Optional[Components] = None
    for part in parts:
        if merged is None:
            merged = part
            continue
        merged.schemas.update(part.schemas)
        merged.responses.update(part.responses)
        merged.security_schemes.update(part.security_schemes)
    return merged


def _status_line(code: int) -> str:
    try:
        return f"{code} {HTTPStatus(code).phrase}"
    except ValueError:
        return str(code)


class OpenApiApplication:
    """WSGI application serving the OpenAPI document and the registered redirects."""

    def __init__(
        self,
        openapi: OpenApi,
        openapi_path: str,
        redirects: Optional[Dict[str, Tuple[str, int]]] = None,
        fallback: Optional[Callable[..., Any]] = None,
    ) -> None:
        self.openapi = openapi
        self.openapi_path = openapi_path
        self.redirects = dict(redirects or {})
        self.fallback = fallback
        self._body = json.dumps(openapi.to_dict()).encode("utf-8")

    def __call__(self, environ: Dict[str, Any], start_response: StartResponse) -> Iterable[bytes]:
        path = environ.get("PATH_INFO") or "/"
        method = str(environ.get("REQUEST_METHOD", "GET")).upper()
        if path == self.openapi_path:
            if method != "GET":
                return self._respond(start_response, 405, b"", [("Allow", "GET")])
            return self._respond(start_response, 200, self._body, [("Content-Type", "application/json")])
        target = self.redirects.get(path)
        if target is not None:
            location, code = target
            return self._respond(start_response, code, b"", [("Location", location)])
        if self.fallback is not None:
            return self.fallback(environ, start_response)
        return self._respond(start_response, 404, b"", [])

    @staticmethod
    def _respond(
        start_response: StartResponse, code: int, body: bytes, headers: List[Tuple[str, str]]
    ) -> List[bytes]:
        start_response(_status_line(code), [*headers, ("Content-Length", str(len(body)))])
        return [body]


class App:
    """An application whose routes and services document themselves."""

    def __init__(self, spec: Optional[Spec] = None) -> None:
        spec = spec if spec is not None else Spec()
        self._spec = OpenApi(info=copy.deepcopy(spec.info))
        if spec.tags:
            self._spec.tags = copy.deepcopy(spec.tags)
        self._spec.external_docs = copy.deepcopy(spec.external_docs)
        if spec.servers:
            self._spec.servers = copy.deepcopy(spec.servers)
        self.default_tags: List[str] = list(spec.default_tags)
        self.default_parameters = copy.deepcopy(spec.default_parameters)
        self.routes: List[Tuple[str, Route]] = []
        self.services: List[Any] = []
        self.data: List[Any] = []
        self.middleware: List[Any] = []
        self.external_resources: Dict[str, str] = {}
        self.default: Optional[Any] = None
        self._redirects: Dict[str, Tuple[str, int]] = {}

    def app_data(self, data: Any) -> App:
        """Attach application data. It does not affect the generated document."""
        self.data.append(data)
        return self

    def configure(self, f: Callable[[ServiceConfig], Any]) -> App:
        """Run a configuration function and document what it registers."""
        cfg = ServiceConfig()
        f(cfg)
        self._update_from_def_holder(cfg)
        for service in cfg.services:
            self._register_redirect(service)
        self.services.append(cfg)
        return self

    def route(self, path: str, route: Route) -> App:
        """Register a route at ``path``."""
        self._update_from_def_holder(RouteWrapper(path, route))
        self.routes.append((path, route))
        return self

    def service(self, factory: Any) -> App:
        """Register a resource, scope or redirect."""
        self._update_from_def_holder(factory)
        self._register_redirect(factory)
        self.services.append(factory)
        return self

    def default_service(self, svc: Any) -> App:
        """Set the fallback service, used for requests nothing else answers."""
        self.default = svc
        return self

    def external_resource(self, name: str, url: str) -> App:
        """Register an external resource. It does not affect the generated document."""
        self.external_resources[name] = url
        return self

    def wrap(self, mw: Any) -> App:
        """Add middleware. It does not affect the generated document."""
        self.middleware.append(mw)
        return self

    def openapi(self) -> OpenApi:
        """A copy of the document gathered so far."""
        return copy.deepcopy(self._spec)

    def build(self, openapi_path: str) -> OpenApiApplication:
        """Return a WSGI application exposing the document at ``openapi_path``."""
        fallback = self.default if callable(self.default) else None
        return OpenApiApplication(self.openapi(), openapi_path, self._redirects, fallback)

    def _register_redirect(self, service: Any) -> None:
        if isinstance(service, Redirect):
            self._redirects[service.path] = (service.target, service.code)

    def _update_from_def_holder(self, holder: Any) -> None:
        spec = self._spec
        existing, spec.components = spec.components, None
        gathered = list(holder.components)
        holder.components.clear()
        components = _merge_components([*gathered, *([existing] if existing is not None else [])])

        holder.update_path_items(spec.paths)
        paths = {}
        for path, item in spec.paths.items():
            if not path.startswith("/"):
                path = "/" + path
            for op_type, operation in item.operations.items():
                if operation.operation_id is None:
                    operation.operation_id = build_operation_id(path, op_type)
            paths[sanitize_patterned_path_parameter(path)] = item

        operations = [op for item in paths.values() for op in item.operations.values()]

        if self.default_parameters:
            parameters = [p for dp in self.default_parameters for p in dp.parameters]
            if operations:
                # The references are handed out once: only the first operation receives them.
                operations[0].parameters.extend(
                    Reference(f"#/components/parameters/{p.name}") for p in parameters
                )
            if components is not None:
                components.parameters.update({p.name: copy.deepcopy(p) for p in parameters})
                components.schemas.update(
                    {name: copy.deepcopy(schema) for dp in self.default_parameters for name, schema in dp.components}
                )

        if self.default_tags:
            for operation in operations:
                operation.tags.extend(self.default_tags)

        spec.paths = paths
        spec.components = components


def document(spec: Spec) -> App:
    """Create an application documented by ``spec``."""
    return App(spec)