"""Closed enumerations for model elements and decorator commands."""

from __future__ import annotations

from enum import StrEnum


class CommandType(StrEnum):
    """How a command attaches its decorator to a matched element."""

    UPSERT = "UPSERT"
    APPEND = "APPEND"


class DeclarationKind(StrEnum):
    """Kinds of named type definitions within a namespace."""

    CONCEPT = "concept"
    ASSET = "asset"
    PARTICIPANT = "participant"
    TRANSACTION = "transaction"
    EVENT = "event"
    ENUM = "enum"
    SCALAR = "scalar"
    MAP = "map"


# Declarations that never own properties.
PROPERTYLESS_KINDS: frozenset[DeclarationKind] = frozenset(
    {DeclarationKind.SCALAR, DeclarationKind.MAP}
)


class PropertyKind(StrEnum):
    """Kinds of members owned by a declaration."""

    FIELD = "field"
    RELATIONSHIP = "relationship"
    ENUM_VALUE = "enum_value"


PRIMITIVE_TYPES: frozenset[str] = frozenset(
    {"String", "Boolean", "DateTime", "Integer", "Long", "Double"}
)
