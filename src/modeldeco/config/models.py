"""Pydantic option models with code-baked defaults."""

from __future__ import annotations

from pydantic import BaseModel


class DecorateOptions(BaseModel):
    """Options for a single decorate call, frozen after construction.

    Attributes:
        validate_shape: Check the command set document against the command
            set shape, including types referenced by decorator arguments.
        validate_targets: Also check that every target names existing
            model elements. Ignored unless ``validate_shape`` is set.
    """

    model_config = {"frozen": True}

    validate_shape: bool = False
    validate_targets: bool = False

    @property
    def checks_targets(self) -> bool:
        return self.validate_shape and self.validate_targets
