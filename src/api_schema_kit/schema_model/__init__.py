"""Schema model exports."""

from .schema_builders import Schema, as_schema_node
from .schema_nodes import (
    ArraySchema,
    BooleanSchema,
    DictSchema,
    EnumSchema,
    NumberSchema,
    ObjectSchema,
    ResponseBody,
    SchemaKind,
    SchemaNode,
    SchemaOptions,
    StringSchema,
    UnionSchema,
)

__all__ = [
    "Schema",
    "as_schema_node",
    "SchemaKind",
    "SchemaOptions",
    "SchemaNode",
    "NumberSchema",
    "StringSchema",
    "BooleanSchema",
    "EnumSchema",
    "ArraySchema",
    "ObjectSchema",
    "UnionSchema",
    "DictSchema",
    "ResponseBody",
]
