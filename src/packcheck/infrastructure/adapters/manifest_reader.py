"""Manifest reader: package.yml → raw mapping."""

from __future__ import annotations

from typing import TYPE_CHECKING

import yaml

from packcheck.domain.exceptions import ManifestReadError, ManifestSyntaxError

if TYPE_CHECKING:
    from pathlib import Path


def read_manifest(path: Path) -> dict[object, object] | None:
    """Read a manifest file as a YAML document.

    Args:
        path: Manifest file

    Returns:
        Top-level mapping, or None for an empty document

    Raises:
        ManifestReadError: If the file cannot be read (fatal)
        ManifestSyntaxError: If the YAML is malformed or not a mapping
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestReadError(path=path, reason=str(e)) from e

    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ManifestSyntaxError(path=path, reason=str(e)) from e

    if document is None:
        return None
    if not isinstance(document, dict):
        raise ManifestSyntaxError(
            path=path,
            reason=f"expected a mapping at the top level, got {type(document).__name__}",
        )
    return document
