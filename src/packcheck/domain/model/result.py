"""Composable pass/fail value for structural checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

DEFAULT_SEPARATOR = "\n===\n"


@dataclass(frozen=True, slots=True)
class Result:
    """Outcome of a check.

    Invariants:
        - error is None iff ok (FAIL-FIRST in __post_init__)
        - failed results carry a non-empty error

    Attributes:
        ok: True if the check passed
        error: Human-readable failure text (None on success)
    """

    ok: bool
    error: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.ok and self.error is not None:
            raise ValueError("successful result must not carry an error")
        if not self.ok and not self.error:
            raise ValueError("failed result must carry a non-empty error")

    def __bool__(self) -> bool:
        return self.ok


_OK = Result(ok=True)


def ok() -> Result:
    """Successful result with no error."""
    return _OK


def fail(message: str) -> Result:
    """Failed result carrying message."""
    return Result(ok=False, error=message)


def merge(
    results: Iterable[Result],
    separator: str = DEFAULT_SEPARATOR,
    headline: str = "",
) -> Result:
    """Merge results into one.

    Successful results are dropped. Errors of the remaining ones are
    joined with separator in input order and prefixed with headline.

    Args:
        results: Results to merge (order is kept in the joined error)
        separator: Text placed between failure messages
        headline: Text placed before the joined failures

    Returns:
        ok() if nothing failed, otherwise a single failed Result
    """
    errors = [result.error for result in results if not result.ok]
    if not errors:
        return ok()
    return fail(headline + separator.join(errors))  # type: ignore[arg-type]
