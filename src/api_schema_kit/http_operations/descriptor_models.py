"""HTTP operation descriptor entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from api_schema_kit.schema_model.schema_nodes import ResponseBody, SchemaNode


class ParameterKind(str, Enum):
    """Where a request parameter is carried."""

    QUERY = "query"
    PATH = "path"
    BODY = "body"


class HttpMethod(str, Enum):
    """Supported HTTP methods, lower-cased as in OpenAPI path items."""

    GET = "get"
    POST = "post"
    PUT = "put"
    PATCH = "patch"
    DELETE = "delete"


@dataclass(frozen=True, eq=False)
class ParameterDescriptor:
    """A schema tagged with its parameter kind."""

    kind: ParameterKind
    schema: SchemaNode

    @property
    def is_required(self) -> bool:
        """Path parameters are always required; others follow the schema's optional flag."""
        if self.kind == ParameterKind.PATH:
            return True
        return not self.schema.options.optional


@dataclass(frozen=True, eq=False)
class OperationDescriptor:
    """Declared shape of one HTTP endpoint."""

    method: HttpMethod
    operation_id: str
    path: str
    parameters: Mapping[str, ParameterDescriptor]
    response: ResponseBody

    def parameters_of_kind(self, *kinds: ParameterKind) -> dict[str, ParameterDescriptor]:
        """Return declared parameters of the given kinds, in declaration order."""
        return {
            name: parameter
            for name, parameter in self.parameters.items()
            if parameter.kind in kinds
        }
