"""Typed package manifest schema using Pydantic models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from packcheck.domain.model.package import DEFAULT_PUBLIC_PATH

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path


class PackageManifest(BaseModel):
    """Contents of a package.yml.

    Strict: no coercion between YAML scalars (a string is never a bool).
    """

    enforce_privacy: bool | list[str] = False
    enforce_dependencies: bool = False
    public_path: str = DEFAULT_PUBLIC_PATH
    dependencies: list[str] = Field(default_factory=list)
    metadata: Any = None

    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)


KNOWN_KEYS: tuple[str, ...] = tuple(PackageManifest.model_fields)

# Options holding a list of names: their string entries survive lenient loading
_NAME_LIST_KEYS: tuple[str, ...] = ("enforce_privacy", "dependencies")

_INVALID_OPTION_MESSAGES: dict[str, str] = {
    "enforce_privacy": "Invalid 'enforce_privacy' option in '{path}': {value!r}",
    "enforce_dependencies": "Invalid 'enforce_dependencies' option in '{path}': {value!r}",
    "public_path": "'public_path' option must be a string in '{path}': {value!r}",
    "dependencies": "Invalid 'dependencies' option in '{path}': {value!r}",
}


@dataclass(frozen=True, slots=True)
class ManifestValidation:
    """Outcome of validating one manifest document.

    Attributes:
        manifest: Manifest built from the valid keys only
        problems: One message per violation, in key order
        rejected: Non-string entries dropped from name lists, by option
    """

    manifest: PackageManifest
    problems: tuple[str, ...]
    rejected: Mapping[str, tuple[object, ...]] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        return not self.problems


def validate_manifest(path: Path, document: Mapping[object, object] | None) -> ManifestValidation:
    """Validate a raw manifest document against the schema.

    Unknown keys and mistyped values are reported, never raised. The
    returned manifest keeps every valid key and falls back to defaults
    for the rest, so a broken manifest still yields a usable package.
    A name list with some non-string entries keeps its string entries;
    the others are returned in `rejected`.

    Args:
        path: Manifest file (used in messages only)
        document: Raw YAML mapping, None for an empty file

    Returns:
        ManifestValidation with lenient manifest and problem messages
    """
    if not document:
        return ManifestValidation(manifest=PackageManifest(), problems=())

    problems: list[str] = []

    unknown = [key for key in document if key not in KNOWN_KEYS]
    if unknown:
        problems.append(
            f"Unknown keys in {path}: {unknown!r}\n"
            f"Supported keys are: {', '.join(KNOWN_KEYS)}"
        )

    known = {key: value for key, value in document.items() if key in KNOWN_KEYS}
    try:
        manifest = PackageManifest.model_validate(known)
    except ValidationError as exc:
        invalid = {error["loc"][0] for error in exc.errors()}
        for key in KNOWN_KEYS:
            if key in invalid:
                problems.append(_INVALID_OPTION_MESSAGES[key].format(path=path, value=known[key]))
        valid = {key: value for key, value in known.items() if key not in invalid}

        rejected: dict[str, tuple[object, ...]] = {}
        for key in _NAME_LIST_KEYS:
            value = known.get(key)
            if key in invalid and isinstance(value, list):
                valid[key] = [entry for entry in value if isinstance(entry, str)]
                rejected[key] = tuple(entry for entry in value if not isinstance(entry, str))

        manifest = PackageManifest.model_validate(valid)
        return ManifestValidation(manifest=manifest, problems=tuple(problems), rejected=rejected)

    return ManifestValidation(manifest=manifest, problems=tuple(problems))
