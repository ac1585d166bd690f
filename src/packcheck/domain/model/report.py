"""Validation report aggregate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from packcheck.domain.model.result import DEFAULT_SEPARATOR, Result, merge

if TYPE_CHECKING:
    from packcheck.domain.model.enums import ErrorKind


@dataclass(frozen=True, slots=True)
class CheckOutcome:
    """Result of one named check.

    Attributes:
        name: Check identifier
        title: Human-readable check title
        kinds: Failure kinds the check can emit
        result: What the check returned
    """

    name: str
    title: str
    kinds: frozenset[ErrorKind]
    result: Result

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if not self.title:
            raise ValueError("title must not be empty")


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Outcomes of a full validation run, in execution order.

    Attributes:
        outcomes: One outcome per check, in the fixed check order
    """

    outcomes: tuple[CheckOutcome, ...]

    @property
    def result(self) -> Result:
        """All outcomes merged with the default separator."""
        return merge((outcome.result for outcome in self.outcomes), separator=DEFAULT_SEPARATOR)

    @property
    def passed(self) -> bool:
        """Check if every check passed."""
        return all(outcome.result.ok for outcome in self.outcomes)

    @property
    def failures(self) -> tuple[CheckOutcome, ...]:
        """Outcomes of failing checks, in execution order."""
        return tuple(outcome for outcome in self.outcomes if not outcome.result.ok)
