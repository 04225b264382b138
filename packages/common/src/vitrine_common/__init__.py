"""Vitrine common - errors, configuration and logging shared by all packages."""

from vitrine_common.config import Settings, get_settings
from vitrine_common.errors import (
    ExternalManifestError,
    HierarchyNotLoadedError,
    ManifestValidationError,
    NotFoundError,
    VitrineError,
)
from vitrine_common.logging_config import configure_logging, get_logger

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Logging
    "configure_logging",
    "get_logger",
    # Errors
    "VitrineError",
    "ManifestValidationError",
    "ExternalManifestError",
    "NotFoundError",
    "HierarchyNotLoadedError",
]
