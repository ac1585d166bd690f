"""Structural checks over package manifests.

Checks run against a shared ValidationContext:
- PrivacyCheck: Private constants are defined in their package
- ManifestSyntaxCheck: Manifests match the schema
- ApplicationStructureCheck: Load paths can be indexed
- AcyclicGraphCheck: No dependency cycles
- ManifestPathsCheck: Package paths cover every manifest
- ValidDependenciesCheck: Dependencies point to packages
- RootPackageCheck: Root manifest exists
"""

from packcheck.application.validators._base import BaseCheck
from packcheck.application.validators._registry import default_checks
from packcheck.application.validators.acyclic_check import AcyclicGraphCheck
from packcheck.application.validators.application_structure_check import (
    ApplicationStructureCheck,
)
from packcheck.application.validators.context import ValidationContext
from packcheck.application.validators.dependencies_check import ValidDependenciesCheck
from packcheck.application.validators.manifest_paths_check import ManifestPathsCheck
from packcheck.application.validators.manifest_syntax_check import ManifestSyntaxCheck
from packcheck.application.validators.privacy_check import PrivacyCheck
from packcheck.application.validators.root_package_check import RootPackageCheck

__all__ = [
    # Base
    "BaseCheck",
    "ValidationContext",
    # Checks
    "PrivacyCheck",
    "ManifestSyntaxCheck",
    "ApplicationStructureCheck",
    "AcyclicGraphCheck",
    "ManifestPathsCheck",
    "ValidDependenciesCheck",
    "RootPackageCheck",
    # Factory functions
    "default_checks",
]
