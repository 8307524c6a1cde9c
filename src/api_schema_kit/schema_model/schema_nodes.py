"""Schema model entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, TypeAlias

EnumValue: TypeAlias = str | int | float


class SchemaKind(str, Enum):
    """Supported schema node kinds."""

    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    ENUM = "enum"
    ARRAY = "array"
    OBJECT = "object"
    UNION = "union"
    DICT = "dict"


@dataclass
class SchemaOptions:
    """Modifiers applied to a schema node."""

    optional: bool = False
    nullable: bool = False


@dataclass(eq=False)
class SchemaNode:
    """Base node of a schema tree.

    Nodes compare and hash by identity. `definition` is fixed at construction
    and only changes when the node is marked nullable.
    """

    kind: ClassVar[SchemaKind]

    definition: str
    options: SchemaOptions = field(default_factory=SchemaOptions, kw_only=True)


@dataclass(eq=False)
class NumberSchema(SchemaNode):
    """Any int or float value."""

    kind: ClassVar[SchemaKind] = SchemaKind.NUMBER


@dataclass(eq=False)
class StringSchema(SchemaNode):
    """Any str value."""

    kind: ClassVar[SchemaKind] = SchemaKind.STRING


@dataclass(eq=False)
class BooleanSchema(SchemaNode):
    """Any bool value."""

    kind: ClassVar[SchemaKind] = SchemaKind.BOOLEAN


@dataclass(eq=False)
class EnumSchema(SchemaNode):
    """One of a fixed, ordered set of literal values."""

    kind: ClassVar[SchemaKind] = SchemaKind.ENUM

    values: tuple[EnumValue, ...]


@dataclass(eq=False)
class ArraySchema(SchemaNode):
    """Ordered sequence of uniformly typed items."""

    kind: ClassVar[SchemaKind] = SchemaKind.ARRAY

    item_schema: SchemaNode


@dataclass(eq=False)
class ObjectSchema(SchemaNode):
    """Keyed structure with declared properties in insertion order."""

    kind: ClassVar[SchemaKind] = SchemaKind.OBJECT

    properties: dict[str, SchemaNode]

    @property
    def required(self) -> list[str]:
        """Return names of properties not marked optional, in declaration order."""
        return [name for name, node in self.properties.items() if not node.options.optional]


@dataclass(eq=False)
class UnionSchema(SchemaNode):
    """Any of the flattened, deduplicated member schemas."""

    kind: ClassVar[SchemaKind] = SchemaKind.UNION

    item_schemas: tuple[SchemaNode, ...]


@dataclass(eq=False)
class DictSchema(SchemaNode):
    """Open string-keyed map with uniformly typed values."""

    kind: ClassVar[SchemaKind] = SchemaKind.DICT

    value_schema: SchemaNode


ResponseFields: TypeAlias = Mapping[str, SchemaNode]
ResponseBody: TypeAlias = SchemaNode | ResponseFields
