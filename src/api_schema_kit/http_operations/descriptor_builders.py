"""Helpers that stamp parameter kinds and HTTP methods onto schemas."""

# pylint: disable=invalid-name

from __future__ import annotations

from collections.abc import Mapping

from api_schema_kit.schema_model.schema_nodes import ResponseBody, SchemaNode

from .descriptor_models import HttpMethod, OperationDescriptor, ParameterDescriptor, ParameterKind


class Parameter:
    """Constructor namespace for request parameters."""

    @staticmethod
    def Query(schema: SchemaNode) -> ParameterDescriptor:
        return ParameterDescriptor(kind=ParameterKind.QUERY, schema=schema)

    @staticmethod
    def Path(schema: SchemaNode) -> ParameterDescriptor:
        return ParameterDescriptor(kind=ParameterKind.PATH, schema=schema)

    @staticmethod
    def Body(schema: SchemaNode) -> ParameterDescriptor:
        return ParameterDescriptor(kind=ParameterKind.BODY, schema=schema)


class HTTP:
    """Constructor namespace for operation descriptors, one per HTTP method."""

    @staticmethod
    def GET(
        operation_id: str,
        path: str,
        parameters: Mapping[str, ParameterDescriptor],
        response: ResponseBody,
    ) -> OperationDescriptor:
        return _operation(HttpMethod.GET, operation_id, path, parameters, response)

    @staticmethod
    def POST(
        operation_id: str,
        path: str,
        parameters: Mapping[str, ParameterDescriptor],
        response: ResponseBody,
    ) -> OperationDescriptor:
        return _operation(HttpMethod.POST, operation_id, path, parameters, response)

    @staticmethod
    def PUT(
        operation_id: str,
        path: str,
        parameters: Mapping[str, ParameterDescriptor],
        response: ResponseBody,
    ) -> OperationDescriptor:
        return _operation(HttpMethod.PUT, operation_id, path, parameters, response)

    @staticmethod
    def PATCH(
        operation_id: str,
        path: str,
        parameters: Mapping[str, ParameterDescriptor],
        response: ResponseBody,
    ) -> OperationDescriptor:
        return _operation(HttpMethod.PATCH, operation_id, path, parameters, response)

    @staticmethod
    def DELETE(
        operation_id: str,
        path: str,
        parameters: Mapping[str, ParameterDescriptor],
        response: ResponseBody,
    ) -> OperationDescriptor:
        return _operation(HttpMethod.DELETE, operation_id, path, parameters, response)


def _operation(
    method: HttpMethod,
    operation_id: str,
    path: str,
    parameters: Mapping[str, ParameterDescriptor],
    response: ResponseBody,
) -> OperationDescriptor:
    # The response object is stored as given; named-response lookup compares identity.
    return OperationDescriptor(
        method=method,
        operation_id=operation_id,
        path=path,
        parameters=dict(parameters),
        response=response,
    )
