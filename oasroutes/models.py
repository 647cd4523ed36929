"""OpenAPI 3.0 document model with JSON serialisation."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Union

OPENAPI_VERSION = "3.0.3"


class OperationType(Enum):
    """HTTP operations that an OpenAPI path item can describe."""

    GET = "get"
    PUT = "put"
    POST = "post"
    DELETE = "delete"
    OPTIONS = "options"
    HEAD = "head"
    PATCH = "patch"
    TRACE = "trace"


class ParameterIn(Enum):
    """Location of an operation parameter."""

    QUERY = "query"
    HEADER = "header"
    PATH = "path"
    COOKIE = "cookie"


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _encode(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, _Model):
        return value._encode()
    if isinstance(value, dict):
        return {_encode(key): _encode(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    return value


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, (list, dict)) and not value)


class _Model:
    """Base for model classes: fields become camelCase JSON members."""

    _ALWAYS: ClassVar[frozenset] = frozenset()
    _RENAME: ClassVar[Dict[str, str]] = {}

    def _encode(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for f in fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            if f.name not in self._ALWAYS and _is_empty(value):
                continue
            out[self._RENAME.get(f.name, _camel(f.name))] = _encode(value)
        return out


@dataclass
class Reference(_Model):
    """A JSON reference to a component, such as ``#/components/schemas/Pet``."""

    ref: str

    def _encode(self) -> Dict[str, Any]:
        return {"$ref": self.ref}


Schema = Union[Dict[str, Any], Reference]


@dataclass
class ExternalDocumentation(_Model):
    url: str = ""
    description: Optional[str] = None

    _ALWAYS: ClassVar[frozenset] = frozenset({"url"})


@dataclass
class MediaType(_Model):
    schema: Optional[Schema] = None
    example: Any = None
    examples: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Parameter(_Model):
    """An operation parameter described either by a schema or by content."""

    name: str = ""
    location: ParameterIn = ParameterIn.QUERY
    description: Optional[str] = None
    required: Optional[bool] = None
    deprecated: Optional[bool] = None
    style: Optional[str] = None
    explode: Optional[bool] = None
    schema: Optional[Schema] = None
    content: Dict[str, MediaType] = field(default_factory=dict)

    _ALWAYS: ClassVar[frozenset] = frozenset({"name", "location"})
    _RENAME: ClassVar[Dict[str, str]] = {"location": "in"}


@dataclass
class Header(_Model):
    description: Optional[str] = None
    required: Optional[bool] = None
    deprecated: Optional[bool] = None
    schema: Optional[Schema] = None
    content: Dict[str, MediaType] = field(default_factory=dict)


@dataclass
class Response(_Model):
    description: str = ""
    headers: Dict[str, Union[Header, Reference]] = field(default_factory=dict)
    content: Dict[str, MediaType] = field(default_factory=dict)

    _ALWAYS: ClassVar[frozenset] = frozenset({"description"})


@dataclass
class Responses(_Model):
    """Responses of an operation keyed by status code, plus an optional default."""

    default: Optional[Union[Response, Reference]] = None
    responses: Dict[str, Union[Response, Reference]] = field(default_factory=dict)

    def _encode(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.default is not None:
            out["default"] = _encode(self.default)
        for code in sorted(self.responses):
            out[code] = _encode(self.responses[code])
        return out


@dataclass
class RequestBody(_Model):
    description: Optional[str] = None
    content: Dict[str, MediaType] = field(default_factory=dict)
    required: Optional[bool] = None

    _ALWAYS: ClassVar[frozenset] = frozenset({"content"})


@dataclass
class Operation(_Model):
    tags: List[str] = field(default_factory=list)
    summary: Optional[str] = None
    description: Optional[str] = None
    external_docs: Optional[ExternalDocumentation] = None
    operation_id: Optional[str] = None
    parameters: List[Union[Parameter, Reference]] = field(default_factory=list)
    request_body: Optional[Union[RequestBody, Reference]] = None
    responses: Responses = field(default_factory=Responses)
    deprecated: Optional[bool] = None
    security: List[Dict[str, List[str]]] = field(default_factory=list)

    _ALWAYS: ClassVar[frozenset] = frozenset({"responses"})


@dataclass
class PathItem(_Model):
    """Operations available on one path, kept in insertion order."""

    summary: Optional[str] = None
    description: Optional[str] = None
    operations: Dict[OperationType, Operation] = field(default_factory=dict)
    parameters: List[Union[Parameter, Reference]] = field(default_factory=list)

    def _encode(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.summary is not None:
            out["summary"] = self.summary
        if self.description is not None:
            out["description"] = self.description
        for op_type, operation in self.operations.items():
            out[op_type.value] = _encode(operation)
        if self.parameters:
            out["parameters"] = _encode(self.parameters)
        return out


@dataclass
class Components(_Model):
    schemas: Dict[str, Schema] = field(default_factory=dict)
    responses: Dict[str, Union[Response, Reference]] = field(default_factory=dict)
    parameters: Dict[str, Union[Parameter, Reference]] = field(default_factory=dict)
    request_bodies: Dict[str, Union[RequestBody, Reference]] = field(default_factory=dict)
    headers: Dict[str, Union[Header, Reference]] = field(default_factory=dict)
    security_schemes: Dict[str, Any] = field(default_factory=dict)

    def _encode(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for f in fields(self):
            mapping = getattr(self, f.name)
            if mapping:
                out[_camel(f.name)] = {key: _encode(mapping[key]) for key in sorted(mapping)}
        return out


@dataclass
class Info(_Model):
    title: str = ""
    version: str = ""
    description: Optional[str] = None
    terms_of_service: Optional[str] = None
    contact: Optional[Dict[str, str]] = None
    license: Optional[Dict[str, str]] = None

    _ALWAYS: ClassVar[frozenset] = frozenset({"title", "version"})


@dataclass
class Tag(_Model):
    name: str = ""
    description: Optional[str] = None
    external_docs: Optional[ExternalDocumentation] = None

    _ALWAYS: ClassVar[frozenset] = frozenset({"name"})


@dataclass
class Server(_Model):
    url: str = ""
    description: Optional[str] = None
    variables: Dict[str, Any] = field(default_factory=dict)

    _ALWAYS: ClassVar[frozenset] = frozenset({"url"})


@dataclass
class OpenApi(_Model):
    """A complete OpenAPI document."""

    openapi: str = OPENAPI_VERSION
    info: Info = field(default_factory=Info)
    servers: List[Server] = field(default_factory=list)
    paths: Dict[str, PathItem] = field(default_factory=dict)
    components: Optional[Components] = None
    security: List[Dict[str, List[str]]] = field(default_factory=list)
    tags: List[Tag] = field(default_factory=list)
    external_docs: Optional[ExternalDocumentation] = None

    _ALWAYS: ClassVar[frozenset] = frozenset({"openapi", "info", "servers", "paths"})

    def to_dict(self) -> Dict[str, Any]:
        """Return the document as JSON-compatible data."""
        return self._encode()