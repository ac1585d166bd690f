"""Application services."""

from packcheck.application.services.application_validator import ApplicationValidator
from packcheck.domain.model.report import ValidationReport

__all__ = [
    "ApplicationValidator",
    "ValidationReport",
]
