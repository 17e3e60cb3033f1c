"""Structural model tree — namespaces, declarations, properties, decorators.

The tree is an owned pydantic structure with a plain-dict export
(:meth:`ModelAst.to_tree`) and import (:meth:`ModelAst.from_tree`).
Decoration relies only on that round trip: export, re-import into fresh
objects, mutate decorator collections, rebuild a registry.

Only ``decorators`` collections are ever mutated, and only on a private
working copy. Everything else is treated as read-only after construction.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, ValidationError, model_validator

from modeldeco.domain.errors import IllegalModelError
from modeldeco.domain.types import PROPERTYLESS_KINDS, DeclarationKind, PropertyKind

# --- Decorator arguments ---


class StringArgument(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["string"] = "string"
    value: str


class NumberArgument(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["number"] = "number"
    value: int | FiniteFloat


class BooleanArgument(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["boolean"] = "boolean"
    value: bool


class TypeReferenceArgument(BaseModel):
    """Argument naming a model type, e.g. ``@Ref(ns1.Baz)``."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal["type_reference"] = "type_reference"
    type_name: str = Field(min_length=1)
    is_array: bool = False


DecoratorArgument = Annotated[
    StringArgument | NumberArgument | BooleanArgument | TypeReferenceArgument,
    Field(discriminator="kind"),
]


class Decorator(BaseModel):
    """A named metadata tag with an opaque argument payload."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    arguments: list[DecoratorArgument] | None = None


# --- Model elements ---


class MapEntryType(BaseModel):
    """Key or value slot of a map declaration."""

    model_config = ConfigDict(extra="forbid")

    type_name: str
    decorators: list[Decorator] | None = None


class Property(BaseModel):
    """A named member of a declaration.

    ``type_name`` is a primitive name (``String``) or a fully-qualified
    declaration name (``ns1.Baz``). Enum values carry no type.
    """

    model_config = ConfigDict(extra="forbid")

    kind: PropertyKind = PropertyKind.FIELD
    name: str = Field(min_length=1)
    type_name: str | None = None
    is_array: bool = False
    is_optional: bool = False
    decorators: list[Decorator] | None = None

    @model_validator(mode="after")
    def check_type(self) -> Property:
        if self.kind is PropertyKind.ENUM_VALUE:
            if self.type_name is not None:
                raise ValueError(f"enum value '{self.name}' cannot declare a type")
        elif not self.type_name:
            raise ValueError(f"property '{self.name}' must declare a type")
        return self


class Declaration(BaseModel):
    """A named type definition within a namespace."""

    model_config = ConfigDict(extra="forbid")

    kind: DeclarationKind
    name: str = Field(min_length=1)
    super_type: str | None = None
    properties: list[Property] | None = None
    scalar_type: str | None = None
    map_key: MapEntryType | None = None
    map_value: MapEntryType | None = None
    decorators: list[Decorator] | None = None

    @model_validator(mode="after")
    def check_kind(self) -> Declaration:
        if self.kind in PROPERTYLESS_KINDS and self.properties is not None:
            raise ValueError(f"{self.kind} declaration '{self.name}' cannot own properties")
        if (self.kind is DeclarationKind.SCALAR) != (self.scalar_type is not None):
            raise ValueError(f"scalar_type is required for, and only for, scalar '{self.name}'")
        is_map = self.kind is DeclarationKind.MAP
        if is_map != (self.map_key is not None and self.map_value is not None):
            raise ValueError(f"map_key/map_value are required for, and only for, map '{self.name}'")
        if self.kind is DeclarationKind.ENUM:
            for prop in self.properties or []:
                if prop.kind is not PropertyKind.ENUM_VALUE:
                    raise ValueError(f"enum '{self.name}' may only own enum values")
        return self

    def get_property(self, name: str) -> Property | None:
        """Return the directly-owned property called *name*.

        Inherited properties are not consulted.
        """
        for prop in self.properties or []:
            if prop.name == name:
                return prop
        return None


class ModelFile(BaseModel):
    """All declarations of one namespace."""

    model_config = ConfigDict(extra="forbid")

    namespace: str = Field(min_length=1)
    imports: list[str] = Field(default_factory=list)
    declarations: list[Declaration] = Field(default_factory=list)

    def get_declaration(self, name: str) -> Declaration | None:
        for decl in self.declarations:
            if decl.name == name:
                return decl
        return None


class ModelAst(BaseModel):
    """Ordered collection of model files — the plain-tree root."""

    model_config = ConfigDict(extra="forbid")

    models: list[ModelFile] = Field(default_factory=list)

    def to_tree(self) -> dict[str, Any]:
        """Export as a fresh plain-dict tree sharing nothing with ``self``."""
        return self.model_dump(mode="json", exclude_none=True)

    @classmethod
    def from_tree(cls, tree: dict[str, Any]) -> ModelAst:
        """Import a plain-dict tree into newly-allocated model objects."""
        try:
            return cls.model_validate(tree)
        except ValidationError as exc:
            raise IllegalModelError(f"Invalid model tree: {exc}") from exc
