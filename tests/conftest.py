"""Shared pytest fixtures and test helpers for modeldeco tests."""

from __future__ import annotations

from typing import Any

import pytest

from modeldeco.domain.ast import (
    Declaration,
    MapEntryType,
    ModelFile,
    Property,
)
from modeldeco.domain.registry import ModelRegistry
from modeldeco.domain.types import DeclarationKind, PropertyKind


@pytest.fixture
def foo_registry() -> ModelRegistry:
    """Namespace ``ns1`` with concept ``Foo { o String bar }`` and nothing else."""
    return ModelRegistry(
        [
            ModelFile(
                namespace="ns1",
                declarations=[
                    Declaration(
                        kind=DeclarationKind.CONCEPT,
                        name="Foo",
                        properties=[Property(name="bar", type_name="String")],
                    ),
                ],
            )
        ]
    )


@pytest.fixture
def registry() -> ModelRegistry:
    """Two namespaces covering every declaration kind.

    ``ns1.Baz`` is declared but no property has type ``ns1.Baz``.
    """
    ns1 = ModelFile(
        namespace="ns1",
        declarations=[
            Declaration(
                kind=DeclarationKind.CONCEPT,
                name="Foo",
                properties=[
                    Property(name="bar", type_name="String"),
                    Property(name="count", type_name="Integer", is_optional=True),
                ],
            ),
            Declaration(
                kind=DeclarationKind.CONCEPT,
                name="Child",
                super_type="ns1.Foo",
                properties=[Property(name="extra", type_name="String")],
            ),
            Declaration(kind=DeclarationKind.CONCEPT, name="Baz", properties=[]),
            Declaration(
                kind=DeclarationKind.ENUM,
                name="Color",
                properties=[
                    Property(kind=PropertyKind.ENUM_VALUE, name="RED"),
                    Property(kind=PropertyKind.ENUM_VALUE, name="GREEN"),
                ],
            ),
            Declaration(kind=DeclarationKind.SCALAR, name="SSN", scalar_type="String"),
            Declaration(
                kind=DeclarationKind.MAP,
                name="Labels",
                map_key=MapEntryType(type_name="String"),
                map_value=MapEntryType(type_name="String"),
            ),
        ],
    )
    ns2 = ModelFile(
        namespace="org.acme@1.0.0",
        imports=["ns1.Foo"],
        declarations=[
            Declaration(
                kind=DeclarationKind.PARTICIPANT,
                name="Person",
                properties=[
                    Property(name="name", type_name="String"),
                    Property(name="bar", type_name="ns1.Foo"),
                    Property(
                        kind=PropertyKind.RELATIONSHIP,
                        name="friends",
                        type_name="org.acme@1.0.0.Person",
                        is_array=True,
                    ),
                ],
            ),
        ],
    )
    return ModelRegistry([ns1, ns2])


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_command(
    name: str,
    *,
    mode: str = "UPSERT",
    arguments: list[dict[str, Any]] | None = None,
    **target: str,
) -> dict[str, Any]:
    """Build a command mapping; keyword arguments become the target."""
    decorator: dict[str, Any] = {"name": name}
    if arguments is not None:
        decorator["arguments"] = arguments
    return {"target": target, "decorator": decorator, "type": mode}


def make_command_set(*commands: dict[str, Any], **extra: Any) -> dict[str, Any]:
    """Wrap *commands* in a command set mapping."""
    return {"name": "test", "version": "1.0.0", "commands": list(commands), **extra}


def get_decl(registry: ModelRegistry, namespace: str, name: str) -> Declaration:
    return registry.get_type(f"{namespace}.{name}")


def decorator_names(element: Any) -> list[str]:
    return [d.name for d in element.decorators or []]
