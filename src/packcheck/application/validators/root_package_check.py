"""Root package existence check."""

from __future__ import annotations

from typing import TYPE_CHECKING

from packcheck.application.validators._base import BaseCheck
from packcheck.domain.model.enums import ErrorKind
from packcheck.domain.model.result import Result, fail, ok

if TYPE_CHECKING:
    from packcheck.application.validators.context import ValidationContext


class RootPackageCheck(BaseCheck):
    """The root manifest must be one of the configured package manifests."""

    name = "root_package"
    title = "Root package"
    kinds = frozenset({ErrorKind.ROOT_PACKAGE_MISSING})

    def check(self, context: ValidationContext) -> Result:
        root_manifest = context.configuration.root_manifest.resolve()

        if root_manifest in context.package_manifests():
            return ok()

        filename = context.configuration.manifest_filename
        return fail(f"A root package does not exist. Create an empty `{filename}` at the root directory.\n")
