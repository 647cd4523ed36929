"""Helpers that align operation parameters with a templated path."""

from __future__ import annotations

import re

from .models import Operation, Parameter, ParameterIn

_PATH_TEMPLATE = re.compile(r"\{(.*?)\}")


def update_path_parameter_name_from_path(operation: Operation, path: str) -> None:
    """Name the operation's path parameters after the templates in ``path``.

    Templates are assigned in order; a ``{name:pattern}`` template also sets a
    string schema with that pattern.
    """
    names = iter(_PATH_TEMPLATE.findall(path))
    path_params = (
        p for p in operation.parameters if isinstance(p, Parameter) and p.location is ParameterIn.PATH
    )
    for param, template in zip(path_params, names):
        name, sep, pattern = template.partition(":")
        if sep:
            param.name = name
            param.schema = {"pattern": pattern}
            param.content = {}
        else:
            param.name = template