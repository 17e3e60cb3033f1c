"""Rule-set validation — document shape and target existence.

Both checks run against a throwaway registry holding the caller's model
plus the built-in metamodel and command set namespaces, so the caller's
registry is never touched. Target checks assume the shape check passed.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from modeldeco.domain.ast import TypeReferenceArgument
from modeldeco.domain.commands import Command, DecoratorCommandSet, parse_command_set
from modeldeco.domain.errors import MalformedRuleSet, TypeNotFoundError, UnknownTargetReference
from modeldeco.domain.registry import ModelRegistry
from modeldeco.domain.schema import command_set_file, metamodel_file

logger = logging.getLogger(__name__)


def build_validation_registry(registry: ModelRegistry) -> ModelRegistry:
    """Copy *registry* and add the metamodel and command set namespaces."""
    return registry.with_model_files(metamodel_file(), command_set_file())


def validate_shape(
    validation_registry: ModelRegistry,
    document: DecoratorCommandSet | Mapping[str, Any],
) -> DecoratorCommandSet:
    """Decode *document* and resolve every type referenced by its decorators.

    Raises:
        MalformedRuleSet: the document does not decode, or a decorator
            argument references a type the registry does not define.
    """
    command_set = parse_command_set(document)
    for index, command in enumerate(command_set.commands):
        for arg in command.decorator.arguments or []:
            if not isinstance(arg, TypeReferenceArgument):
                continue
            context = f"commands[{index}].decorator.{command.decorator.name}"
            try:
                validation_registry.resolve_type(context, arg.type_name)
            except TypeNotFoundError as exc:
                raise MalformedRuleSet(f"Invalid decorator command set: {exc}") from exc
    logger.debug(
        "Command set %s@%s is well-formed (%d commands)",
        command_set.name,
        command_set.version,
        len(command_set.commands),
    )
    return command_set


def validate_command(validation_registry: ModelRegistry, command: Command) -> None:
    """Check that every element named by *command*'s target exists.

    Checked in order: type, namespace, declaration, property.

    Raises:
        UnknownTargetReference: with the unresolved qualified name.
    """
    target = command.target
    if target.type is not None:
        try:
            validation_registry.resolve_type("DecoratorCommand.type", target.type)
        except TypeNotFoundError as exc:
            raise UnknownTargetReference(target.type, "type") from exc

    if target.namespace is None:
        return
    if validation_registry.get_model_file(target.namespace) is None:
        raise UnknownTargetReference(target.namespace, "namespace")

    if target.declaration is None:
        return
    qualified = f"{target.namespace}.{target.declaration}"
    try:
        decl = validation_registry.get_type(qualified)
    except TypeNotFoundError as exc:
        raise UnknownTargetReference(qualified, "declaration") from exc

    if target.property is not None and decl.get_property(target.property) is None:
        raise UnknownTargetReference(f"{qualified}.{target.property}", "property")


def validate_targets(validation_registry: ModelRegistry, command_set: DecoratorCommandSet) -> None:
    """Run :func:`validate_command` over every command in document order."""
    for command in command_set.commands:
        validate_command(validation_registry, command)
