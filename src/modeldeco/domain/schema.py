"""Built-in namespaces describing decorators and decorator command sets.

These are added to a throwaway validation registry next to the caller's
model so that command set documents, and the type references inside
their decorators, can be checked against one registry.
"""

from __future__ import annotations

from modeldeco.domain.ast import Declaration, ModelFile, Property
from modeldeco.domain.types import DeclarationKind, PropertyKind

METAMODEL_NAMESPACE = "modeldeco.metamodel@1.0.0"
COMMANDS_NAMESPACE = "modeldeco.decoratorcommands@0.2.0"


def _field(name: str, type_name: str, *, array: bool = False, optional: bool = False) -> Property:
    return Property(name=name, type_name=type_name, is_array=array, is_optional=optional)


def _enum_value(name: str) -> Property:
    return Property(kind=PropertyKind.ENUM_VALUE, name=name)


def metamodel_file() -> ModelFile:
    """The metamodel namespace: decorators and their arguments."""
    ns = METAMODEL_NAMESPACE
    return ModelFile(
        namespace=ns,
        declarations=[
            Declaration(kind=DeclarationKind.CONCEPT, name="DecoratorArgument", properties=[]),
            Declaration(
                kind=DeclarationKind.CONCEPT,
                name="DecoratorString",
                super_type=f"{ns}.DecoratorArgument",
                properties=[_field("value", "String")],
            ),
            Declaration(
                kind=DeclarationKind.CONCEPT,
                name="DecoratorNumber",
                super_type=f"{ns}.DecoratorArgument",
                properties=[_field("value", "Double")],
            ),
            Declaration(
                kind=DeclarationKind.CONCEPT,
                name="DecoratorBoolean",
                super_type=f"{ns}.DecoratorArgument",
                properties=[_field("value", "Boolean")],
            ),
            Declaration(
                kind=DeclarationKind.CONCEPT,
                name="DecoratorTypeReference",
                super_type=f"{ns}.DecoratorArgument",
                properties=[_field("type_name", "String"), _field("is_array", "Boolean")],
            ),
            Declaration(
                kind=DeclarationKind.CONCEPT,
                name="Decorator",
                properties=[
                    _field("name", "String"),
                    _field("arguments", f"{ns}.DecoratorArgument", array=True, optional=True),
                ],
            ),
        ],
    )


def command_set_file() -> ModelFile:
    """The decorator command set namespace."""
    ns = COMMANDS_NAMESPACE
    return ModelFile(
        namespace=ns,
        imports=[f"{METAMODEL_NAMESPACE}.Decorator"],
        declarations=[
            Declaration(
                kind=DeclarationKind.CONCEPT,
                name="DecoratorCommandSetReference",
                properties=[_field("name", "String"), _field("version", "String")],
            ),
            Declaration(
                kind=DeclarationKind.ENUM,
                name="CommandType",
                properties=[_enum_value("UPSERT"), _enum_value("APPEND")],
            ),
            Declaration(
                kind=DeclarationKind.CONCEPT,
                name="CommandTarget",
                properties=[
                    _field("namespace", "String", optional=True),
                    _field("declaration", "String", optional=True),
                    _field("property", "String", optional=True),
                    _field("type", "String", optional=True),
                ],
            ),
            Declaration(
                kind=DeclarationKind.CONCEPT,
                name="Command",
                properties=[
                    _field("target", f"{ns}.CommandTarget"),
                    _field("decorator", f"{METAMODEL_NAMESPACE}.Decorator"),
                    _field("type", f"{ns}.CommandType"),
                ],
            ),
            Declaration(
                kind=DeclarationKind.CONCEPT,
                name="DecoratorCommandSet",
                properties=[
                    _field("name", "String"),
                    _field("version", "String"),
                    _field(
                        "includes",
                        f"{ns}.DecoratorCommandSetReference",
                        array=True,
                        optional=True,
                    ),
                    _field("commands", f"{ns}.Command", array=True),
                ],
            ),
        ],
    )
