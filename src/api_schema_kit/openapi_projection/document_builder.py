"""OpenAPI 3.0 document projection from operation descriptors."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from api_schema_kit.http_operations.descriptor_models import OperationDescriptor, ParameterKind
from api_schema_kit.schema_model.schema_builders import Schema, as_schema_node
from api_schema_kit.schema_model.schema_nodes import ResponseBody

from .schema_rendering import render_schema

OPENAPI_VERSION = "3.0.1"
JSON_CONTENT_TYPE = "application/json"
SUCCESS_STATUS = "200"

_LOGGER = logging.getLogger(__name__)

NamedResponses = Mapping[str, ResponseBody] | Iterable[tuple[str, ResponseBody]]


class OASBuilder:
    """Build an OpenAPI document from declared operations and named responses.

    An operation whose response is the very same object as a named response
    refers to it with `$ref`; any other response is rendered inline.
    """

    def __init__(
        self,
        info: Mapping[str, Any],
        operations: Sequence[OperationDescriptor],
        responses: NamedResponses | None = None,
    ) -> None:
        self._info = dict(info)
        self._operations = tuple(operations)
        items = responses.items() if isinstance(responses, Mapping) else (responses or ())
        self._named_responses: tuple[tuple[str, ResponseBody], ...] = tuple(items)

    def build(self) -> dict[str, Any]:
        """Return a fresh OpenAPI document; repeated calls give equal results."""
        return {
            "openapi": OPENAPI_VERSION,
            "info": dict(self._info),
            "paths": self._create_paths(),
            "components": self._create_components(),
        }

    def _create_paths(self) -> dict[str, dict[str, Any]]:
        paths: dict[str, dict[str, Any]] = {}
        for operation in self._operations:
            path_item = paths.setdefault(operation.path, {})
            method = operation.method.value
            if method in path_item:
                _LOGGER.warning(
                    "Operation %s replaces %s for %s %s",
                    operation.operation_id,
                    path_item[method]["operationId"],
                    method.upper(),
                    operation.path,
                )
            _LOGGER.debug("Projecting %s %s", method.upper(), operation.path)
            path_item[method] = self._create_operation(operation)
        return paths

    def _create_components(self) -> dict[str, Any]:
        schemas = {
            name: render_schema(as_schema_node(response))
            for name, response in self._named_responses
        }
        return {"schemas": schemas}

    def _create_operation(self, operation: OperationDescriptor) -> dict[str, Any]:
        result: dict[str, Any] = {"operationId": operation.operation_id}

        parameters = [
            {
                "required": parameter.is_required,
                "name": name,
                "in": parameter.kind.value,
                "schema": render_schema(parameter.schema),
            }
            for name, parameter in operation.parameters_of_kind(
                ParameterKind.QUERY, ParameterKind.PATH
            ).items()
        ]
        if parameters:
            result["parameters"] = parameters

        body_parameters = operation.parameters_of_kind(ParameterKind.BODY)
        if body_parameters:
            body_schema = Schema.Object(
                {name: parameter.schema for name, parameter in body_parameters.items()}
            )
            result["requestBody"] = {
                "required": True,
                "content": {JSON_CONTENT_TYPE: {"schema": render_schema(body_schema)}},
            }

        result["responses"] = {
            SUCCESS_STATUS: {
                "description": "success",
                "content": {JSON_CONTENT_TYPE: {"schema": self._response_schema(operation)}},
            }
        }
        return result

    def _response_schema(self, operation: OperationDescriptor) -> dict[str, Any]:
        name = self._response_schema_name(operation.response)
        if name is not None:
            return {"$ref": f"#/components/schemas/{name}"}
        return render_schema(as_schema_node(operation.response))

    def _response_schema_name(self, response: ResponseBody) -> str | None:
        for name, named_response in self._named_responses:
            if named_response is response:
                return name
        return None
