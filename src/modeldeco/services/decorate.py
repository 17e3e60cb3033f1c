"""Decoration orchestrator — apply a command set to a whole registry.

Pipeline: (optional) validate -> clone -> apply -> rebuild.

INVARIANT: The input registry is never mutated. Commands run against a
private clone, and a registry is returned only when every command has
been applied; on error nothing is returned.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from modeldeco.config.models import DecorateOptions
from modeldeco.domain.ast import ModelAst
from modeldeco.domain.commands import DecoratorCommandSet, parse_command_set
from modeldeco.domain.registry import ModelRegistry
from modeldeco.services.executor import execute_command
from modeldeco.services.telemetry import trace_span, traced
from modeldeco.services.validation import (
    build_validation_registry,
    validate_shape,
    validate_targets,
)

logger = logging.getLogger(__name__)


def _prepare_command_set(
    registry: ModelRegistry,
    document: DecoratorCommandSet | Mapping[str, Any],
    options: DecorateOptions,
) -> DecoratorCommandSet:
    if not options.validate_shape:
        if options.validate_targets:
            logger.debug("validate_targets ignored: validate_shape is off")
        return parse_command_set(document)

    validation_registry = build_validation_registry(registry)
    command_set = validate_shape(validation_registry, document)
    if options.checks_targets:
        validate_targets(validation_registry, command_set)
    return command_set


@traced
def decorate_models(
    registry: ModelRegistry,
    document: DecoratorCommandSet | Mapping[str, Any],
    options: DecorateOptions | None = None,
) -> ModelRegistry:
    """Apply every command in *document* to every declaration in *registry*.

    Within one declaration, commands apply in document order, so a later
    UPSERT of the same decorator name wins.

    Args:
        registry: Source model. Left untouched and reusable.
        document: A command set mapping or an already-decoded command set.
        options: Validation switches; defaults to no validation.

    Returns:
        A new, independent registry carrying the decorations.

    Raises:
        MalformedRuleSet: *document* fails to decode or validate.
        UnknownCommandMode: a command's ``type`` is not UPSERT/APPEND.
        UnknownTargetReference: a target names a missing element
            (only with ``validate_shape`` and ``validate_targets``).
    """
    opts = options or DecorateOptions()

    with trace_span("validate"):
        command_set = _prepare_command_set(registry, document, opts)

    with trace_span("clone"):
        working = ModelAst.from_tree(registry.get_ast())

    declarations = 0
    decorated = 0
    with trace_span("apply") as span:
        for model_file in working.models:
            for declaration in model_file.declarations:
                declarations += 1
                for command in command_set.commands:
                    decorated += execute_command(model_file.namespace, declaration, command)
        if span is not None:
            span.annotate("decorated", decorated)

    with trace_span("rebuild"):
        result = ModelRegistry(working.models)

    logger.debug(
        "Applied %s@%s: %d commands over %d declarations in %d namespaces, %d decorations",
        command_set.name,
        command_set.version,
        len(command_set.commands),
        declarations,
        len(working.models),
        decorated,
    )
    return result
