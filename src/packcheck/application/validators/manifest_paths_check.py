"""Manifest path coverage check."""

from __future__ import annotations

from typing import TYPE_CHECKING

from packcheck.application.validators._base import BaseCheck
from packcheck.domain.model.configuration import DEFAULT_PACKAGE_GLOB
from packcheck.domain.model.enums import ErrorKind
from packcheck.domain.model.result import Result, fail, ok

if TYPE_CHECKING:
    from packcheck.application.validators.context import ValidationContext


class ManifestPathsCheck(BaseCheck):
    """Every manifest in the tree must be matched by the package paths."""

    name = "manifest_paths"
    title = "Package path coverage"
    kinds = frozenset({ErrorKind.PATH_COVERAGE})

    def check(self, context: ValidationContext) -> Result:
        all_manifests = set(context.package_manifests(DEFAULT_PACKAGE_GLOB))
        covered = set(context.package_manifests())

        missing = sorted(all_manifests - covered)
        if not missing:
            return ok()

        lines = "\n".join(str(context.relative_path(path)) for path in missing)
        return fail(
            "Expected package paths for all package.ymls to be specified, "
            f"but paths were missing for the following manifests:\n\n{lines}\n"
        )
