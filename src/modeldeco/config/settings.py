"""Unified settings — init kwargs and environment variables in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — values passed by the embedding application
  2. Env vars     — ``MODELDECO_*`` prefix
  3. Code defaults
"""

from __future__ import annotations

from pydantic_settings import BaseSettings

from modeldeco.config.models import DecorateOptions


class DecoSettings(BaseSettings):
    """Process-wide defaults for decoration, logging and telemetry.

    Attributes:
        validate_shape: Default for :attr:`DecorateOptions.validate_shape`.
        validate_targets: Default for :attr:`DecorateOptions.validate_targets`.
        verbose: DEBUG logging for ``modeldeco`` plus span telemetry.
        log_json: Emit JSON log lines instead of console output.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "MODELDECO_",
    }

    validate_shape: bool = False
    validate_targets: bool = False
    verbose: bool = False
    log_json: bool = False

    def options(self) -> DecorateOptions:
        """Build per-call options from these defaults."""
        return DecorateOptions(
            validate_shape=self.validate_shape,
            validate_targets=self.validate_targets,
        )
