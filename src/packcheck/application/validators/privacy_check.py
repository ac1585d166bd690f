"""Private constant check.

Constants listed in a package's `enforce_privacy` must be defined inside
that package. Ownership of the declaring manifest and of the constant's
defining file are both decided by longest-prefix match.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from packcheck.application.validators._base import BaseCheck
from packcheck.domain.model.constant import ROOT_NAMESPACE
from packcheck.domain.model.enums import ErrorKind
from packcheck.domain.model.result import Result, fail, merge, ok
from packcheck.infrastructure.resolver.inflector import underscore

if TYPE_CHECKING:
    from pathlib import Path

    from packcheck.application.validators.context import ValidationContext
    from packcheck.domain.model.constant import ConstantLocation
    from packcheck.domain.model.package import Package

logger = logging.getLogger(__name__)

PRIVACY_SEPARATOR = "\n---\n"


class PrivacyCheck(BaseCheck):
    """Cross-check declared private constants against their definitions.

    Only explicit lists are checked; boolean `enforce_privacy` settings are
    enforced by reference checking, not here.
    """

    name = "privacy"
    title = "Private constants"
    kinds = frozenset(
        {
            ErrorKind.CONSTANT_FORMAT,
            ErrorKind.CONSTANT_UNRESOLVABLE,
            ErrorKind.PRIVACY_VIOLATION,
            ErrorKind.STRUCTURAL,
        }
    )

    def check(self, context: ValidationContext) -> Result:
        declaring = [package for package in context.package_set if package.privacy_constants]
        if not declaring:
            return ok()

        # The resolver is an external collaborator: any failure of it
        # becomes part of the report.
        try:
            resolver = context.build_resolver()
        except Exception as e:
            logger.debug(f"Resolver construction failed: {e!r}")
            return _resolver_failure(e)

        results: list[Result] = []

        for package in declaring:
            config_file = context.relative_path(package.config_path)

            for name in package.privacy_constants:
                if not name.startswith(ROOT_NAMESPACE):
                    results.append(_unprefixed_constant(name, config_file))
                    continue

                try:
                    constant = resolver.resolve(name)
                except Exception as e:
                    logger.debug(f"Resolver failed on {name}: {e!r}")
                    results.append(_resolver_failure(e))
                    return merge(results, separator=PRIVACY_SEPARATOR)

                if constant is None:
                    results.append(
                        _unresolvable_constant(name, config_file, context.configuration.source_extension)
                    )
                else:
                    results.append(_check_location(context, package, name, constant))

        return merge(results, separator=PRIVACY_SEPARATOR)


def _resolver_failure(error: Exception) -> Result:
    return fail(f"Could not resolve private constants: {error}")


def _unprefixed_constant(name: str, config_file: Path) -> Result:
    return fail(
        f"'{name}', listed in the 'enforce_privacy' option in {config_file}, is invalid.\n"
        "Private constants need to be prefixed with the top-level namespace operator `::`."
    )


def _unresolvable_constant(name: str, config_file: Path, extension: str) -> Result:
    expected_file = f"{underscore(name)}{extension}"
    return fail(
        f"'{name}', listed in {config_file}, could not be resolved.\n"
        "This is probably because it is an autovivified namespace - a namespace module that doesn't have a\n"
        "file explicitly defining it. packcheck currently doesn't support declaring autovivified namespaces as\n"
        f"private. Add a {expected_file} file to explicitly define the constant."
    )


def _check_location(
    context: ValidationContext,
    package: Package,
    name: str,
    constant: ConstantLocation,
) -> Result:
    declared_package = context.package_set.package_from_path(context.relative_path(package.config_path))
    constant_package = context.package_set.package_from_path(constant.location)

    if constant_package == declared_package:
        return ok()

    return fail(
        f"'{name}' is declared as private in the '{declared_package}' package but appears to be defined\n"
        f"in the '{constant_package}' package. packcheck resolved it to {constant.location}."
    )
