"""Rendering of schema nodes as OpenAPI 3.0 schema objects."""

from __future__ import annotations

from typing import Any

from api_schema_kit.schema_model.schema_nodes import (
    ArraySchema,
    BooleanSchema,
    DictSchema,
    EnumSchema,
    NumberSchema,
    ObjectSchema,
    SchemaNode,
    StringSchema,
    UnionSchema,
)


def render_schema(schema: SchemaNode) -> dict[str, Any]:
    """Return the OpenAPI schema object for `schema` and all of its children."""
    rendered = _render_shape(schema)
    if schema.options.nullable:
        rendered["nullable"] = True
    return rendered


def _render_shape(schema: SchemaNode) -> dict[str, Any]:
    if isinstance(schema, NumberSchema | StringSchema | BooleanSchema):
        return {"type": schema.kind.value}
    if isinstance(schema, EnumSchema):
        return {"type": _enum_type(schema), "enum": list(schema.values)}
    if isinstance(schema, ArraySchema):
        return {"type": "array", "items": render_schema(schema.item_schema)}
    if isinstance(schema, ObjectSchema):
        rendered: dict[str, Any] = {
            "type": "object",
            "properties": {
                name: render_schema(node) for name, node in schema.properties.items()
            },
        }
        # OpenAPI 3.0 rejects an empty `required` array.
        required = schema.required
        if required:
            rendered["required"] = required
        return rendered
    if isinstance(schema, UnionSchema):
        return {"anyOf": [render_schema(member) for member in schema.item_schemas]}
    if isinstance(schema, DictSchema):
        return {"type": "object", "additionalProperties": render_schema(schema.value_schema)}
    raise TypeError(f"Unsupported schema node: {type(schema).__name__}")


def _enum_type(schema: EnumSchema) -> str:
    if schema.values and all(not isinstance(value, str) for value in schema.values):
        return "number"
    return "string"
