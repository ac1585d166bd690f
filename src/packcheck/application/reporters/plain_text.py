"""Plain text reporter using print().

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from packcheck.domain.model.report import ValidationReport


class PlainTextReporter:
    """Plain text reporter using print().

    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    def report(self, report: ValidationReport) -> None:
        """Report validation outcomes as plain text.

        Args:
            report: Complete validation report
        """
        self._write("=" * 70)
        self._write("Package Validation Results")
        self._write("=" * 70)
        self._write()

        for outcome in report.outcomes:
            status = "PASS" if outcome.result.ok else "FAIL"
            self._write(f"  [{status}] {outcome.title}")

        result = report.result
        if not result.ok:
            self._write()
            self._write("-" * 70)
            self._write(result.error or "")
            self._write("-" * 70)

        self._write()
        self._write("=" * 70)
        self._write(f"Result: {'PASSED' if report.passed else 'FAILED'}")
        self._write("=" * 70)

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)
