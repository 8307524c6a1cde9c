"""Structural validation of runtime values against schema nodes."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from api_schema_kit.schema_model.schema_nodes import (
    ArraySchema,
    BooleanSchema,
    DictSchema,
    EnumSchema,
    EnumValue,
    NumberSchema,
    ObjectSchema,
    SchemaNode,
    StringSchema,
    UnionSchema,
)

from .validation_outcomes import MISSING, ValidationResult


def validate(
    schema: SchemaNode, value: object = MISSING, *, detailed_errors: bool = False
) -> ValidationResult:
    """Validate `value` against `schema`.

    Args:
      schema: Root node of the schema tree.
      value: Value to check. `MISSING` means no value was provided; `None` is
        an ordinary value.
      detailed_errors: Report each failing array item or dict entry instead of
        the summary `should be <definition>` message.

    Returns:
      A successful result, or a failed one carrying the error description.

    Raises:
      TypeError: If `schema` is not one of the known node types.
    """
    if value is MISSING:
        if schema.options.optional:
            return ValidationResult.ok()
        return ValidationResult.failed("should be provided")

    if isinstance(schema, NumberSchema):
        return _kind_result(schema, _is_number(value))
    if isinstance(schema, StringSchema):
        return _kind_result(schema, isinstance(value, str))
    if isinstance(schema, BooleanSchema):
        return _kind_result(schema, isinstance(value, bool))
    if isinstance(schema, EnumSchema):
        if any(_strictly_equal(member, value) for member in schema.values):
            return ValidationResult.ok()
        return ValidationResult.failed(f"should be one of {schema.definition}")
    if isinstance(schema, ArraySchema):
        return _validate_array(schema, value, detailed_errors)
    if isinstance(schema, UnionSchema):
        if any(validate(member, value).success for member in schema.item_schemas):
            return ValidationResult.ok()
        return ValidationResult.failed(f"should be {schema.definition}")
    if isinstance(schema, ObjectSchema):
        return _validate_object(schema, value, detailed_errors)
    if isinstance(schema, DictSchema):
        return _validate_dict(schema, value, detailed_errors)
    raise TypeError(f"Unsupported schema node: {type(schema).__name__}")


def _validate_array(schema: ArraySchema, value: object, detailed: bool) -> ValidationResult:
    if not isinstance(value, Sequence) or isinstance(value, str | bytes | bytearray):
        return ValidationResult.failed("should be array")
    entries = ((f"item [{index}]", item) for index, item in enumerate(value))
    return _collection_result(schema, schema.item_schema, entries, detailed)


def _validate_object(schema: ObjectSchema, value: object, detailed: bool) -> ValidationResult:
    if not isinstance(value, Mapping):
        return ValidationResult.failed("should be object")
    failures = []
    for name, property_schema in schema.properties.items():
        result = validate(property_schema, value.get(name, MISSING), detailed_errors=detailed)
        if not result.success:
            failures.append(f"property [{name}]: {result.description}")
    if failures:
        return ValidationResult.failed(", ".join(failures))
    return ValidationResult.ok()


def _validate_dict(schema: DictSchema, value: object, detailed: bool) -> ValidationResult:
    if not isinstance(value, Mapping):
        return ValidationResult.failed("should be object")
    entries = ((f"key [{key}]", item) for key, item in value.items())
    return _collection_result(schema, schema.value_schema, entries, detailed)


def _collection_result(
    schema: SchemaNode,
    member_schema: SchemaNode,
    entries: Iterable[tuple[str, object]],
    detailed: bool,
) -> ValidationResult:
    if not detailed:
        if all(validate(member_schema, item).success for _, item in entries):
            return ValidationResult.ok()
        return ValidationResult.failed(f"should be {schema.definition}")

    failures = []
    for label, item in entries:
        result = validate(member_schema, item, detailed_errors=True)
        if not result.success:
            failures.append(f"{label}: {result.description}")
    if failures:
        return ValidationResult.failed(", ".join(failures))
    return ValidationResult.ok()


def _kind_result(schema: SchemaNode, matches: bool) -> ValidationResult:
    if matches:
        return ValidationResult.ok()
    return ValidationResult.failed(f"should be {schema.definition}")


def _is_number(value: object) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _strictly_equal(member: EnumValue, value: object) -> bool:
    # bool is an int subclass; True must not match an enum member 1.
    if isinstance(member, str):
        return isinstance(value, str) and member == value
    return _is_number(value) and member == value
