"""modeldeco — apply versioned decorator command sets to structural type models."""

from modeldeco.config.models import DecorateOptions
from modeldeco.domain.commands import DecoratorCommandSet, parse_command_set
from modeldeco.domain.errors import (
    DecorationError,
    IllegalModelError,
    MalformedRuleSet,
    TypeNotFoundError,
    UnknownCommandMode,
    UnknownTargetReference,
)
from modeldeco.domain.registry import ModelRegistry
from modeldeco.services.decorate import decorate_models
from modeldeco.services.runtime import apply_settings

__version__ = "0.2.0"

__all__ = [
    "DecorateOptions",
    "DecorationError",
    "DecoratorCommandSet",
    "IllegalModelError",
    "MalformedRuleSet",
    "ModelRegistry",
    "TypeNotFoundError",
    "UnknownCommandMode",
    "UnknownTargetReference",
    "apply_settings",
    "decorate_models",
    "parse_command_set",
]
