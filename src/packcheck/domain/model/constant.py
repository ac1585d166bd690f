"""Resolved constant value object."""

from dataclasses import dataclass
from pathlib import Path

ROOT_NAMESPACE = "::"


@dataclass(frozen=True, slots=True)
class ConstantLocation:
    """Where a fully-qualified constant is defined.

    Attributes:
        name: Fully-qualified name, starting with `::`
        location: Defining file, relative to the application root
    """

    name: str
    location: Path

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name.startswith(ROOT_NAMESPACE):
            raise ValueError(f"name must start with '{ROOT_NAMESPACE}', got {self.name!r}")
        if self.location.is_absolute():
            raise ValueError(f"location must be relative to the root, got {self.location}")

    def __str__(self) -> str:
        return f"{self.name} ({self.location})"
