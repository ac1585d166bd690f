"""Check registry.

Central, ordered registry of structural checks.
"""

from __future__ import annotations

from packcheck.application.validators._base import BaseCheck
from packcheck.application.validators.acyclic_check import AcyclicGraphCheck
from packcheck.application.validators.application_structure_check import (
    ApplicationStructureCheck,
)
from packcheck.application.validators.dependencies_check import ValidDependenciesCheck
from packcheck.application.validators.manifest_paths_check import ManifestPathsCheck
from packcheck.application.validators.manifest_syntax_check import ManifestSyntaxCheck
from packcheck.application.validators.privacy_check import PrivacyCheck
from packcheck.application.validators.root_package_check import RootPackageCheck

# Order matters: reports join check errors in this order
_ALL_CHECKS: tuple[type[BaseCheck], ...] = (
    PrivacyCheck,
    ManifestSyntaxCheck,
    ApplicationStructureCheck,
    AcyclicGraphCheck,
    ManifestPathsCheck,
    ValidDependenciesCheck,
    RootPackageCheck,
)


def default_checks() -> tuple[BaseCheck, ...]:
    """Instantiate all checks in report order."""
    return tuple(check_cls() for check_cls in _ALL_CHECKS)
