"""User-facing description of the documented API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .models import ExternalDocumentation, Info, Parameter, Schema, Server, Tag


@dataclass
class DefaultParameters:
    """Parameters added to every operation, with the schemas they need."""

    parameters: List[Parameter] = field(default_factory=list)
    components: List[Tuple[str, Schema]] = field(default_factory=list)


@dataclass
class Spec:
    """Top-level information used to build an OpenAPI document."""

    info: Info = field(default_factory=Info)
    default_tags: List[str] = field(default_factory=list)
    tags: List[Tag] = field(default_factory=list)
    external_docs: Optional[ExternalDocumentation] = None
    servers: List[Server] = field(default_factory=list)
    default_parameters: List[DefaultParameters] = field(default_factory=list)