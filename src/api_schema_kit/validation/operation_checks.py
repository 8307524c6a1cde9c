"""Request and response checks for declared HTTP operations."""

from __future__ import annotations

from collections.abc import Mapping

from api_schema_kit.http_operations.descriptor_models import OperationDescriptor, ParameterKind
from api_schema_kit.schema_model.schema_builders import as_schema_node

from .schema_validator import validate
from .validation_outcomes import MISSING, ValidationResult


def validate_request(
    operation: OperationDescriptor,
    *,
    query: object = None,
    path: object = None,
    body: object = None,
    detailed_errors: bool = False,
) -> ValidationResult:
    """Validate request inputs against every declared parameter of `operation`.

    Each parameter is looked up in the mapping matching its kind. Path
    parameters are required even when their schema is marked optional.
    Failures are reported as `parameter [name]: description`, in declaration
    order. A source that is not a mapping fails as `<kind>: should be object`
    and its parameters are not checked further.
    """
    sources: dict[ParameterKind, object] = {
        ParameterKind.QUERY: query if query is not None else {},
        ParameterKind.PATH: path if path is not None else {},
        ParameterKind.BODY: body if body is not None else {},
    }
    failures = [
        f"{kind.value}: should be object"
        for kind in ParameterKind
        if not isinstance(sources[kind], Mapping) and operation.parameters_of_kind(kind)
    ]
    for name, parameter in operation.parameters.items():
        source = sources[parameter.kind]
        if not isinstance(source, Mapping):
            continue
        value = source.get(name, MISSING)
        if value is MISSING and parameter.is_required:
            failures.append(f"parameter [{name}]: should be provided")
            continue
        result = validate(parameter.schema, value, detailed_errors=detailed_errors)
        if not result.success:
            failures.append(f"parameter [{name}]: {result.description}")
    if failures:
        return ValidationResult.failed(", ".join(failures))
    return ValidationResult.ok()


def validate_response(
    operation: OperationDescriptor, value: object, *, detailed_errors: bool = False
) -> ValidationResult:
    """Validate a response payload against the response declared on `operation`."""
    return validate(as_schema_node(operation.response), value, detailed_errors=detailed_errors)
