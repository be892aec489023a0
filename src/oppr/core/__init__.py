"""Core configuration and errors for the OPPR engine."""

from oppr.core.config import DEFAULT_CONFIG, OPPRConfig, load_config, resolve_config
from oppr.core.errors import (
    ConfigurationError,
    DuplicateRatingSystemError,
    OPPRError,
    RatingSystemNotFoundError,
    RegistryFrozenError,
    ValidationError,
)
from oppr.core.logging import configure_logging

__all__ = [
    "DEFAULT_CONFIG",
    "OPPRConfig",
    "configure_logging",
    "load_config",
    "resolve_config",
    "ConfigurationError",
    "DuplicateRatingSystemError",
    "OPPRError",
    "RatingSystemNotFoundError",
    "RegistryFrozenError",
    "ValidationError",
]
