"""Domain model: value objects and entities."""

from packcheck.domain.model.configuration import Configuration
from packcheck.domain.model.constant import ROOT_NAMESPACE, ConstantLocation
from packcheck.domain.model.enums import ErrorKind
from packcheck.domain.model.graph import DiGraph, find_cycles, is_acyclic
from packcheck.domain.model.package import ROOT_PACKAGE_NAME, Package
from packcheck.domain.model.report import CheckOutcome, ValidationReport
from packcheck.domain.model.result import Result, fail, merge, ok

__all__ = [
    "ROOT_NAMESPACE",
    "ROOT_PACKAGE_NAME",
    "Configuration",
    "CheckOutcome",
    "ConstantLocation",
    "DiGraph",
    "ErrorKind",
    "Package",
    "Result",
    "ValidationReport",
    "fail",
    "find_cycles",
    "is_acyclic",
    "merge",
    "ok",
]
