"""packcheck - package structure validation for modular codebases."""

__version__ = "0.1.0"

from packcheck.application.services.application_validator import ApplicationValidator
from packcheck.domain.model.configuration import Configuration
from packcheck.domain.model.report import ValidationReport
from packcheck.domain.model.result import Result, fail, merge, ok
from packcheck.infrastructure.adapters.config_loader import load_configuration

__all__ = [
    "ApplicationValidator",
    "Configuration",
    "Result",
    "ValidationReport",
    "__version__",
    "fail",
    "load_configuration",
    "merge",
    "ok",
]
