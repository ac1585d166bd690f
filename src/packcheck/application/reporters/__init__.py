"""Reporters for validation reports.

PlainTextReporter writes stdlib text to a stream.
ConsoleReporter renders a rich table and returns it as a string.
"""

from packcheck.application.reporters.console import ConsoleConfig, ConsoleReporter
from packcheck.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "PlainTextReporter",
]
