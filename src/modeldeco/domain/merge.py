"""Decorator merge policy — UPSERT vs APPEND.

INVARIANT: After an UPSERT of tag ``X`` an element carries exactly one
``X``, at the position of the first pre-existing ``X`` (or at the end).
APPEND never removes or replaces anything.
"""

from __future__ import annotations

from typing import Protocol

from modeldeco.domain.ast import Decorator
from modeldeco.domain.errors import UnknownCommandMode
from modeldeco.domain.types import CommandType


class Decorated(Protocol):
    """Any model element owning an optional decorator collection."""

    decorators: list[Decorator] | None


def apply_decorator(
    decorators: list[Decorator] | None,
    mode: CommandType,
    new_decorator: Decorator,
) -> list[Decorator]:
    """Return a new decorator collection with *new_decorator* merged in.

    The input collection is never modified. A ``None`` collection is
    treated as empty.

    Raises:
        UnknownCommandMode: *mode* is not a :class:`CommandType`.
    """
    current = list(decorators or [])
    match mode:
        case CommandType.UPSERT:
            merged: list[Decorator] = []
            replaced = False
            for existing in current:
                if existing.name != new_decorator.name:
                    merged.append(existing)
                elif not replaced:
                    merged.append(new_decorator)
                    replaced = True
            if not replaced:
                merged.append(new_decorator)
            return merged
        case CommandType.APPEND:
            current.append(new_decorator)
            return current
        case _:
            raise UnknownCommandMode(mode)


def decorate_element(element: Decorated, mode: CommandType, new_decorator: Decorator) -> None:
    """Merge a private copy of *new_decorator* into *element*'s decorators."""
    element.decorators = apply_decorator(
        element.decorators, mode, new_decorator.model_copy(deep=True)
    )
