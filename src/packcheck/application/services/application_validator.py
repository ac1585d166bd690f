"""Main facade for package structure validation.

ApplicationValidator is the primary entry point: it loads the package set
once and runs every structural check against it.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import TYPE_CHECKING

from packcheck.application.discovery.packages import PackageSet
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
from packcheck.domain.model.report import CheckOutcome, ValidationReport
from packcheck.infrastructure.resolver.file_map_resolver import FileMapResolver

if TYPE_CHECKING:
    from collections.abc import Sequence

    from packcheck.application.validators._base import BaseCheck
    from packcheck.domain.model.configuration import Configuration
    from packcheck.domain.model.result import Result
    from packcheck.domain.ports.constant_resolver import ResolverFactory

logger = logging.getLogger(__name__)


class ApplicationValidator:
    """Checks package structure before deeper reference checks are trusted.

    Every check runs on every call: one failure never hides another.
    Reading a manifest that exists but cannot be opened is the only error
    that escapes (ManifestReadError).

    Example:
        configuration = load_configuration(Path("."))
        validator = ApplicationValidator(configuration)
        result = validator.check_all()
        if not result.ok:
            print(result.error)
    """

    def __init__(
        self,
        configuration: Configuration,
        *,
        resolver_factory: ResolverFactory | None = None,
        checks: Sequence[BaseCheck] | None = None,
    ) -> None:
        """Initialize validator and load the package set.

        Args:
            configuration: Run configuration
            resolver_factory: Builds the constant resolver from
                (root_path, load_paths). Default: FileMapResolver.
            checks: Checks to run, in report order. Default: all seven.

        Raises:
            ManifestReadError: If a manifest cannot be read
        """
        self._configuration = configuration
        self._checks = tuple(checks) if checks is not None else default_checks()

        if resolver_factory is None:
            resolver_factory = partial(FileMapResolver, extension=configuration.source_extension)

        package_set = PackageSet.load_all_from(
            configuration.root_path,
            configuration.package_glob,
            configuration.exclude,
            configuration.manifest_filename,
        )
        self._context = ValidationContext(
            configuration=configuration,
            package_set=package_set,
            resolver_factory=resolver_factory,
        )

    @property
    def package_set(self) -> PackageSet:
        """Packages loaded at construction."""
        return self._context.package_set

    @property
    def checks(self) -> tuple[BaseCheck, ...]:
        return self._checks

    def run(self) -> ValidationReport:
        """Run every check and collect their outcomes in check order.

        With configuration.parallel the checks run on a thread pool;
        outcomes keep check order either way.

        Returns:
            ValidationReport with one outcome per check
        """
        start_time = time.perf_counter()

        if self._configuration.parallel and len(self._checks) > 1:
            with ThreadPoolExecutor(max_workers=len(self._checks)) as executor:
                results = tuple(executor.map(self._run_check, self._checks))
        else:
            results = tuple(self._run_check(check) for check in self._checks)

        report = ValidationReport(
            outcomes=tuple(
                CheckOutcome(name=check.name, title=check.title, kinds=check.kinds, result=result)
                for check, result in zip(self._checks, results, strict=True)
            )
        )

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"Validation of {len(self.package_set)} packages completed in {elapsed_ms:.1f}ms: "
            f"{len(report.failures)} of {len(report.outcomes)} checks failed"
        )
        return report

    def check_all(self) -> Result:
        """Run every check and merge their results into one."""
        return self.run().result

    def check_package_manifests_for_privacy(self) -> Result:
        return PrivacyCheck().check(self._context)

    def check_package_manifest_syntax(self) -> Result:
        return ManifestSyntaxCheck().check(self._context)

    def check_application_structure(self) -> Result:
        return ApplicationStructureCheck().check(self._context)

    def check_acyclic_graph(self) -> Result:
        return AcyclicGraphCheck().check(self._context)

    def check_package_manifest_paths(self) -> Result:
        return ManifestPathsCheck().check(self._context)

    def check_valid_package_dependencies(self) -> Result:
        return ValidDependenciesCheck().check(self._context)

    def check_root_package_exists(self) -> Result:
        return RootPackageCheck().check(self._context)

    def _run_check(self, check: BaseCheck) -> Result:
        logger.debug(f"Running check: {check.name}")
        result = check.check(self._context)
        if not result.ok:
            logger.debug(f"Check {check.name} failed")
        return result
