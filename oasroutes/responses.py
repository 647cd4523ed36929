"""Typed JSON responses that also document themselves."""

from __future__ import annotations

import json
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, ClassVar, Optional, Tuple

from .models import MediaType, Reference, Response, Responses, Schema

_JSON = "application/json"


def response_from_schema(status: int, schema: Optional[Tuple[str, Schema]]) -> Optional[Responses]:
    """Document a JSON response for ``status`` from a named schema."""
    if schema is None:
        return None
    _name, body_schema = schema
    return _response_from_raw_schema(status, body_schema)


def _response_from_raw_schema(status: int, schema: Optional[Schema]) -> Optional[Responses]:
    if schema is None:
        return None
    key = str(int(status))
    if isinstance(schema, Reference):
        return Responses(responses={key: schema})
    response = Response(content={_JSON: MediaType(schema=schema)})
    return Responses(responses={key: response})


@dataclass(frozen=True)
class NoContent:
    """An empty 204 response."""

    status_code: ClassVar[HTTPStatus] = HTTPStatus.NO_CONTENT
    content_type: ClassVar[str] = _JSON

    @property
    def body(self) -> bytes:
        return b""

    def responses(self, content_type: Optional[str] = None) -> Responses:
        return Responses(responses={str(int(self.status_code)): Response()})


@dataclass(frozen=True)
class _JsonResponse:
    value: Any
    schema: Optional[Tuple[str, Schema]] = None
    raw_schema: Optional[Schema] = None

    status_code: ClassVar[HTTPStatus]
    content_type: ClassVar[str] = _JSON

    @property
    def body(self) -> bytes:
        """The value serialised as JSON."""
        return json.dumps(self.value).encode("utf-8")

    def _documented(self) -> Optional[Responses]:
        return response_from_schema(self.status_code, self.schema) or _response_from_raw_schema(
            self.status_code, self.raw_schema
        )


@dataclass(frozen=True)
class AcceptedJson(_JsonResponse):
    """A 202 response with a JSON body."""

    status_code: ClassVar[HTTPStatus] = HTTPStatus.ACCEPTED

    def responses(self, content_type: Optional[str] = None) -> Optional[Responses]:
        """Document the response from its named schema, else from its raw schema."""
        return self._documented()


@dataclass(frozen=True)
class CreatedJson(_JsonResponse):
    """A 201 response with a JSON body."""

    status_code: ClassVar[HTTPStatus] = HTTPStatus.CREATED

    def responses(self, content_type: Optional[str] = None) -> Optional[Responses]:
        """Document the response from its named schema, else from its raw schema."""
        return self._documented()