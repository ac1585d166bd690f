"""Tests for ConsoleReporter.

Tests:
- ConsoleConfig default values and validation
- ConsoleReporter report() output format
- Failure sections and passed-check filtering
"""

import pytest

from packcheck.application.reporters.console import ConsoleConfig, ConsoleReporter
from packcheck.domain.model.enums import ErrorKind
from packcheck.domain.model.report import CheckOutcome, ValidationReport
from packcheck.domain.model.result import fail, ok


def _outcome(title: str, result, kinds=frozenset({ErrorKind.CYCLE})) -> CheckOutcome:
    return CheckOutcome(name=title.lower().replace(" ", "_"), title=title, kinds=kinds, result=result)


def _plain_reporter(**kwargs) -> ConsoleReporter:
    return ConsoleReporter(ConsoleConfig(force_terminal=False, **kwargs))


class TestConsoleConfig:
    """Tests for ConsoleConfig."""

    def test_default_values(self) -> None:
        """Default values are set correctly."""
        config = ConsoleConfig()
        assert config.show_passed is True
        assert config.width == 120
        assert config.force_terminal is True

    def test_narrow_width_rejected(self) -> None:
        with pytest.raises(ValueError, match="width must be >= 40"):
            ConsoleConfig(width=39)


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_report_contains_header(self) -> None:
        text = _plain_reporter().report(ValidationReport(outcomes=(_outcome("Root package", ok()),)))

        assert "PACKAGE VALIDATION" in text
        assert "Root package" in text
        assert "PASS" in text
        assert "Result: PASSED" in text

    def test_failure_section_shows_error(self) -> None:
        report = ValidationReport(
            outcomes=(
                _outcome("Root package", ok()),
                _outcome("Acyclic dependency graph", fail("cycle: a → b → a")),
            )
        )

        text = _plain_reporter().report(report)

        assert "FAIL" in text
        assert "cycle: a → b → a" in text
        assert "Result: FAILED" in text

    def test_error_text_not_interpreted_as_markup(self) -> None:
        report = ValidationReport(outcomes=(_outcome("Manifest syntax", fail("Unknown keys: [bold]x[/bold]")),))

        assert "[bold]x[/bold]" in _plain_reporter().report(report)

    def test_kinds_listed(self) -> None:
        kinds = frozenset({ErrorKind.PRIVACY_VIOLATION, ErrorKind.CONSTANT_FORMAT})
        report = ValidationReport(outcomes=(_outcome("Private constants", ok(), kinds),))

        text = _plain_reporter().report(report)

        assert ErrorKind.PRIVACY_VIOLATION.value in text
        assert ErrorKind.CONSTANT_FORMAT.value in text

    def test_hide_passed_checks(self) -> None:
        report = ValidationReport(
            outcomes=(
                _outcome("Root package", ok()),
                _outcome("Manifest syntax", fail("broken")),
            )
        )

        text = _plain_reporter(show_passed=False).report(report)

        assert "Root package" not in text
        assert "Manifest syntax" in text

    def test_returns_string_without_printing(self, capsys) -> None:
        text = _plain_reporter().report(ValidationReport(outcomes=()))

        assert isinstance(text, str)
        assert capsys.readouterr().out == ""
