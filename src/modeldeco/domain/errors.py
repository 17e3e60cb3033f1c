"""Exception taxonomy for decoration failures.

INVARIANT: Every failure is fatal for the whole decorate call. No error
is swallowed or downgraded to a warning, and the same inputs always
raise the same error.
"""

from __future__ import annotations

from typing import Any


class DecorationError(Exception):
    """Base class for all modeldeco errors."""


class MalformedRuleSet(DecorationError):
    """The command set document does not match the command set shape."""

    def __init__(self, message: str, *, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class UnknownCommandMode(MalformedRuleSet):
    """A command's ``type`` is neither UPSERT nor APPEND."""

    def __init__(self, mode: object, *, command_index: int | None = None) -> None:
        where = f" (command {command_index})" if command_index is not None else ""
        super().__init__(f"Unknown command type {mode!r}{where}")
        self.mode = mode
        self.command_index = command_index


class UnknownTargetReference(DecorationError):
    """A command target names a model element that does not exist."""

    def __init__(self, reference: str, kind: str) -> None:
        super().__init__(
            f'Decorator command references {kind} "{reference}" which does not exist.'
        )
        self.reference = reference
        self.kind = kind


class IllegalModelError(DecorationError):
    """The structural model tree is inconsistent."""


class TypeNotFoundError(IllegalModelError):
    """A type name could not be resolved against the registry."""

    def __init__(self, type_name: str, *, context: str | None = None) -> None:
        prefix = f"{context}: " if context else ""
        super().__init__(f'{prefix}type "{type_name}" is not defined')
        self.type_name = type_name
        self.context = context
