"""Redirect services and the operations that document them."""

from __future__ import annotations

import copy
from dataclasses import dataclass, replace
from http import HTTPStatus
from typing import Dict, List

from .models import Components, Header, MediaType, Operation, OperationType, PathItem, Response, Responses
from .route import METHODS


@dataclass(frozen=True)
class Redirect:
    """Redirect requests for ``path`` to ``target`` with an HTTP status code."""

    path: str
    target: str
    code: int = int(HTTPStatus.TEMPORARY_REDIRECT)

    @classmethod
    def to(cls, target: str) -> Redirect:
        """Redirect the root path to ``target``."""
        return cls("/", target)

    def permanent(self) -> Redirect:
        return replace(self, code=int(HTTPStatus.PERMANENT_REDIRECT))

    def temporary(self) -> Redirect:
        return replace(self, code=int(HTTPStatus.TEMPORARY_REDIRECT))

    def see_other(self) -> Redirect:
        return replace(self, code=int(HTTPStatus.SEE_OTHER))

    def using_status_code(self, status: int) -> Redirect:
        return replace(self, code=int(status))

    @property
    def components(self) -> List[Components]:
        """Redirects need no components."""
        return []

    def open_api_response(self) -> Response:
        """The documented response: a Location header naming the target."""
        location = Header(
            description="Redirection URL",
            content={"text/plain": MediaType(schema={"enum": [self.target]})},
        )
        return Response(headers={"Location": location})

    def operations(self) -> Dict[OperationType, Operation]:
        """Operations documenting this redirect, keyed by HTTP method."""
        if self.code in (HTTPStatus.TEMPORARY_REDIRECT, HTTPStatus.PERMANENT_REDIRECT):
            methods = METHODS
        elif self.code == HTTPStatus.SEE_OTHER:
            methods = (OperationType.GET,)
        else:
            return {}
        response = self.open_api_response()
        return {
            op_type: Operation(
                responses=Responses(
                    default=copy.deepcopy(response),
                    responses={str(self.code): copy.deepcopy(response)},
                )
            )
            for op_type in methods
        }

    def update_path_items(self, path_op_map: Dict[str, PathItem]) -> None:
        """Add this redirect's operations to ``path_op_map`` under its path."""
        operations = self.operations()
        if operations:
            path_op_map.setdefault(self.path, PathItem()).operations.update(operations)


def redirect(source: str, target: str) -> Redirect:
    """Create a temporary redirect from ``source`` to ``target``."""
    return Redirect(source, target)