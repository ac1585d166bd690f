"""Dependency validity check."""

from __future__ import annotations

from typing import TYPE_CHECKING

from packcheck.application.validators._base import BaseCheck
from packcheck.domain.model.enums import ErrorKind
from packcheck.domain.model.package import ROOT_PACKAGE_NAME
from packcheck.domain.model.result import Result, fail, ok

if TYPE_CHECKING:
    from packcheck.application.validators.context import ValidationContext


class ValidDependenciesCheck(BaseCheck):
    """Declared dependencies must point to directories holding a manifest."""

    name = "valid_dependencies"
    title = "Dependency targets"
    kinds = frozenset({ErrorKind.INVALID_DEPENDENCY})

    def check(self, context: ValidationContext) -> Result:
        blocks: list[str] = []

        for package in context.package_set:
            invalid = [
                dependency
                for dependency in package.dependencies
                if not is_valid_dependency(context, dependency)
            ]
            # Non-string entries never name a package
            invalid.extend(package.rejected_dependencies)
            if not invalid:
                continue

            listed = "\n".join(f"  - {dependency}" for dependency in invalid)
            blocks.append(f"{context.relative_path(package.config_path)}:\n{listed}\n")

        if not blocks:
            return ok()

        joined = "\n".join(blocks)
        return fail(f"These dependencies do not point to valid packages:\n\n{joined}")


def is_valid_dependency(context: ValidationContext, dependency: str) -> bool:
    """Check a declared dependency path.

    "." (the root package) is always valid. Anything else must be a
    directory under the root with a manifest directly in it.
    """
    if dependency == ROOT_PACKAGE_NAME:
        return True
    manifest = context.root_path / dependency / context.configuration.manifest_filename
    return manifest.is_file()
