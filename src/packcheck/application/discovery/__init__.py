"""Package discovery from the application tree."""

from packcheck.application.discovery.packages import (
    PackageSet,
    expand_braces,
    package_paths,
)

__all__ = [
    "PackageSet",
    "expand_braces",
    "package_paths",
]
