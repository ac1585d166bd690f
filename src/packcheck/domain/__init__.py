"""packcheck domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, enum, pathlib, collections.abc
"""

from packcheck.domain.exceptions import (
    ConfigurationError,
    ManifestReadError,
    ManifestSyntaxError,
    PackCheckError,
    StructuralError,
)
from packcheck.domain.model import (
    ROOT_PACKAGE_NAME,
    Configuration,
    ConstantLocation,
    DiGraph,
    ErrorKind,
    Package,
    Result,
)
from packcheck.domain.ports import ConstantResolverProtocol, ResolverFactory

__all__ = [
    # Exceptions
    "PackCheckError",
    "ManifestReadError",
    "ManifestSyntaxError",
    "StructuralError",
    "ConfigurationError",
    # Enums
    "ErrorKind",
    # Value objects
    "Result",
    "ConstantLocation",
    "Configuration",
    # Entities
    "ROOT_PACKAGE_NAME",
    "Package",
    "DiGraph",
    # Ports
    "ConstantResolverProtocol",
    "ResolverFactory",
]
