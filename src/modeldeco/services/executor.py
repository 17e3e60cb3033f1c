"""Command executor — apply one command to one declaration.

A target without ``property`` and ``type`` decorates the declaration
itself; otherwise it decorates each matching property. There is no
explicit level field in the command format.
"""

from __future__ import annotations

from modeldeco.domain.ast import Declaration
from modeldeco.domain.commands import Command
from modeldeco.domain.matching import matches
from modeldeco.domain.merge import decorate_element


def execute_command(namespace: str, declaration: Declaration, command: Command) -> int:
    """Apply *command* to *declaration* or its properties, in place.

    Only call this on a working copy of the model.

    Returns:
        Number of elements decorated.
    """
    target = command.target
    if not matches(target, namespace, declaration.name):
        return 0

    if not target.targets_properties():
        decorate_element(declaration, command.type, command.decorator)
        return 1

    # scalars and maps are declarations without properties
    if declaration.properties is None:
        return 0

    applied = 0
    for prop in declaration.properties:
        if matches(target, namespace, declaration.name, prop.name, prop.type_name):
            decorate_element(prop, command.type, command.decorator)
            applied += 1
    return applied
