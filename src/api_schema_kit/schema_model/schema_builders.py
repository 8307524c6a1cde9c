"""Schema node constructors and modifiers."""

# pylint: disable=invalid-name

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TypeVar

from .schema_nodes import (
    ArraySchema,
    BooleanSchema,
    DictSchema,
    EnumSchema,
    EnumValue,
    NumberSchema,
    ObjectSchema,
    ResponseBody,
    SchemaNode,
    StringSchema,
    UnionSchema,
)

NodeT = TypeVar("NodeT", bound=SchemaNode)


class Schema:
    """Constructor namespace for schema nodes.

    Every constructor returns a fresh node with empty options and a computed
    definition. Malformed input is accepted as given.
    """

    @staticmethod
    def Number() -> NumberSchema:
        return NumberSchema(definition="number")

    @staticmethod
    def String() -> StringSchema:
        return StringSchema(definition="string")

    @staticmethod
    def Boolean() -> BooleanSchema:
        return BooleanSchema(definition="boolean")

    @staticmethod
    def Enum(values: Iterable[EnumValue]) -> EnumSchema:
        members = tuple(values)
        return EnumSchema(
            definition=" | ".join(_enum_literal(value) for value in members),
            values=members,
        )

    @staticmethod
    def Array(item_schema: SchemaNode) -> ArraySchema:
        return ArraySchema(definition=f"Array<{item_schema.definition}>", item_schema=item_schema)

    @staticmethod
    def Object(properties: Mapping[str, SchemaNode]) -> ObjectSchema:
        members = dict(properties)
        return ObjectSchema(definition=_object_definition(members), properties=members)

    @staticmethod
    def Dict(value_schema: SchemaNode) -> DictSchema:
        return DictSchema(
            definition=f"{{ [key: string]: {value_schema.definition} }}",
            value_schema=value_schema,
        )

    @staticmethod
    def Union(schemas: Iterable[SchemaNode]) -> UnionSchema:
        members = _deduplicate_by_definition(_flatten_union_members(schemas))
        return UnionSchema(
            definition=" | ".join(member.definition for member in members),
            item_schemas=members,
        )

    @staticmethod
    def Optional(schema: NodeT) -> NodeT:
        """Mark `schema` optional in place and return the same node."""
        schema.options.optional = True
        return schema

    @staticmethod
    def Nullable(schema: NodeT) -> NodeT:
        """Mark `schema` nullable in place and return the same node.

        The `" | null"` suffix is appended on every call, so a node shared by
        several parents is changed for all of them.
        """
        schema.options.nullable = True
        schema.definition = f"{schema.definition} | null"
        return schema


def as_schema_node(response: ResponseBody) -> SchemaNode:
    """Return `response` as a node, wrapping a field mapping into an object schema."""
    if isinstance(response, SchemaNode):
        return response
    return Schema.Object(response)


def _enum_literal(value: EnumValue) -> str:
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _object_definition(properties: Mapping[str, SchemaNode]) -> str:
    if not properties:
        return "{}"
    rendered = ", ".join(
        f"{name}?: {node.definition}" if node.options.optional else f"{name}: {node.definition}"
        for name, node in properties.items()
    )
    return f"{{ {rendered} }}"


def _flatten_union_members(schemas: Iterable[SchemaNode]) -> list[SchemaNode]:
    flattened: list[SchemaNode] = []
    for schema in schemas:
        if isinstance(schema, UnionSchema):
            flattened.extend(schema.item_schemas)
        else:
            flattened.append(schema)
    return flattened


def _deduplicate_by_definition(schemas: Iterable[SchemaNode]) -> tuple[SchemaNode, ...]:
    unique: dict[str, SchemaNode] = {}
    for schema in schemas:
        unique.setdefault(schema.definition, schema)
    return tuple(unique.values())
