"""Decorator command set documents and their boundary decoder.

A command set is a named, versioned list of commands. Each command pairs
a wildcard-capable target with a decorator and a merge mode::

    {
        "name": "pii",
        "version": "1.0.0",
        "commands": [
            {
                "target": {"namespace": "ns1", "declaration": "Person"},
                "decorator": {"name": "PII"},
                "type": "UPSERT",
            }
        ],
    }

``includes`` references other command sets; resolving them is the
loader's job, so the engine only ever sees the flattened ``commands``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from modeldeco.domain.ast import Decorator
from modeldeco.domain.errors import MalformedRuleSet, UnknownCommandMode
from modeldeco.domain.types import CommandType


class DecoratorCommandSetReference(BaseModel):
    """A reference to another named & versioned command set."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    version: str = Field(min_length=1)


class CommandTarget(BaseModel):
    """Which model elements a command applies to.

    Each field is either ``None`` (wildcard) or an exact string.
    Empty strings are rejected rather than treated as wildcards.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    namespace: str | None = Field(default=None, min_length=1)
    declaration: str | None = Field(default=None, min_length=1)
    property: str | None = Field(default=None, min_length=1)
    type: str | None = Field(default=None, min_length=1)

    def targets_properties(self) -> bool:
        """True when the command decorates properties rather than declarations."""
        return self.property is not None or self.type is not None


class Command(BaseModel):
    """Applies one decorator to every element matched by ``target``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    target: CommandTarget = Field(default_factory=CommandTarget)
    decorator: Decorator
    type: CommandType


class DecoratorCommandSet(BaseModel):
    """A named and versioned set of commands, applied in document order."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    version: str = Field(min_length=1)
    includes: list[DecoratorCommandSetReference] | None = None
    commands: list[Command]


def parse_command_set(document: DecoratorCommandSet | Mapping[str, Any]) -> DecoratorCommandSet:
    """Decode *document* into a :class:`DecoratorCommandSet`.

    Raises:
        UnknownCommandMode: a command's ``type`` is not UPSERT or APPEND.
        MalformedRuleSet: any other shape error.
    """
    if isinstance(document, DecoratorCommandSet):
        return document
    if not isinstance(document, Mapping):
        raise MalformedRuleSet(
            f"Decorator command set must be a mapping, got {type(document).__name__}"
        )
    try:
        return DecoratorCommandSet.model_validate(dict(document))
    except ValidationError as exc:
        errors = exc.errors(include_url=False)
        for err in errors:
            loc = err["loc"]
            if len(loc) == 3 and loc[0] == "commands" and loc[2] == "type" and err["type"] == "enum":
                raise UnknownCommandMode(err["input"], command_index=int(loc[1])) from exc
        raise MalformedRuleSet(f"Invalid decorator command set: {exc}", errors=errors) from exc
