"""Manifest syntax check: every package.yml must match the schema."""

from __future__ import annotations

from typing import TYPE_CHECKING

from packcheck.application.validators._base import BaseCheck
from packcheck.domain.exceptions import ManifestSyntaxError
from packcheck.domain.model.enums import ErrorKind
from packcheck.domain.model.result import Result, fail, ok
from packcheck.infrastructure.adapters.manifest_reader import read_manifest
from packcheck.infrastructure.adapters.manifest_schema import validate_manifest

if TYPE_CHECKING:
    from packcheck.application.validators.context import ValidationContext


class ManifestSyntaxCheck(BaseCheck):
    """Report malformed YAML, unknown keys and mistyped options.

    Every manifest is checked; problems of all files are reported together.
    """

    name = "manifest_syntax"
    title = "Manifest syntax"
    kinds = frozenset({ErrorKind.MANIFEST_SYNTAX})

    def check(self, context: ValidationContext) -> Result:
        errors: list[str] = []

        for path in context.package_manifests():
            relative = context.relative_path(path)
            try:
                document = read_manifest(path)
            except ManifestSyntaxError as e:
                errors.append(f"Invalid YAML in {relative}: {e.reason}")
                continue

            errors.extend(validate_manifest(relative, document).problems)

        if not errors:
            return ok()
        return fail("\n---\n".join(errors))
