"""Domain enumerations."""

from enum import Enum


class ErrorKind(Enum):
    """Failure taxonomy of structural checks.

    Each check declares the kinds it can emit. Value is the display label.
    """

    MANIFEST_SYNTAX = "manifest syntax"  # unknown or mistyped manifest keys
    STRUCTURAL = "structural"  # resolver cannot index load paths
    CYCLE = "cycle"
    PATH_COVERAGE = "path coverage"  # manifest outside configured package paths
    INVALID_DEPENDENCY = "invalid dependency"
    CONSTANT_FORMAT = "constant format"  # private constant lacks `::`
    CONSTANT_UNRESOLVABLE = "constant unresolvable"  # autovivified namespace
    PRIVACY_VIOLATION = "privacy violation"
    ROOT_PACKAGE_MISSING = "root package missing"
