"""Adapters for manifest and configuration files."""

from packcheck.infrastructure.adapters.config_loader import (
    CONFIG_FILENAME,
    load_configuration,
)
from packcheck.infrastructure.adapters.manifest_reader import read_manifest
from packcheck.infrastructure.adapters.manifest_schema import (
    KNOWN_KEYS,
    ManifestValidation,
    PackageManifest,
    validate_manifest,
)

__all__ = [
    "CONFIG_FILENAME",
    "KNOWN_KEYS",
    "ManifestValidation",
    "PackageManifest",
    "load_configuration",
    "read_manifest",
    "validate_manifest",
]
