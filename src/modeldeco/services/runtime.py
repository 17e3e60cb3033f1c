"""Wire settings into logging output and span telemetry."""

from __future__ import annotations

from modeldeco.config.logging import configure_logging
from modeldeco.config.settings import DecoSettings
from modeldeco.services.telemetry import disable_telemetry, enable_telemetry


def apply_settings(settings: DecoSettings | None = None) -> DecoSettings:
    """Configure the ``modeldeco`` logger and telemetry for this context.

    Telemetry follows ``verbose``. Returns the settings that were applied,
    loading them from the environment when none are given.
    """
    settings = settings or DecoSettings()
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
    if settings.verbose:
        enable_telemetry()
    else:
        disable_telemetry()
    return settings
