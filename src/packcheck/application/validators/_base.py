"""Base check class for structural checks.

Concrete checks inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from packcheck.application.validators.context import ValidationContext
    from packcheck.domain.model.enums import ErrorKind
    from packcheck.domain.model.result import Result


class BaseCheck(ABC):
    """Base class for structural checks.

    Concrete checks must:
    1. Set `name`, `title` and `kinds` class attributes
    2. Implement `check()` without letting local failures escape

    Example:
        class NoEmptyManifestsCheck(BaseCheck):
            name = "no_empty_manifests"
            title = "Empty manifests"
            kinds = frozenset({ErrorKind.MANIFEST_SYNTAX})

            def check(self, context: ValidationContext) -> Result:
                empty = [p for p in context.package_manifests() if not p.read_text()]
                if not empty:
                    return ok()
                return fail(f"Empty manifests: {empty}")
    """

    name: ClassVar[str]
    """Check identifier."""

    title: ClassVar[str]
    """Human-readable title for reports."""

    kinds: ClassVar[frozenset[ErrorKind]]
    """Failure kinds this check can emit."""

    @abstractmethod
    def check(self, context: ValidationContext) -> Result:
        """Run the check.

        Args:
            context: Shared, read-only run state

        Returns:
            ok() or a failed Result describing every problem found
        """
