"""Configuration file loading using Pydantic models."""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from packcheck.domain.exceptions import ConfigurationError
from packcheck.domain.model.configuration import (
    DEFAULT_EXCLUDE,
    TOP_LEVEL_NAMESPACE,
    Configuration,
)

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "packcheck.yml"


class ConfigFile(BaseModel):
    """Contents of packcheck.yml."""

    package_paths: list[str] | None = None
    exclude: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE))
    load_paths: dict[str, str] = Field(default_factory=dict)
    source_extension: str = ".rb"
    parallel: bool = False

    model_config = ConfigDict(extra="forbid")

    @field_validator("package_paths", "exclude", mode="before")
    @classmethod
    def wrap_single_glob(cls, v):
        if isinstance(v, str):
            return [v]
        return v

    @field_validator("load_paths", mode="before")
    @classmethod
    def default_namespaces(cls, v):
        if isinstance(v, list):
            return dict.fromkeys(v, TOP_LEVEL_NAMESPACE)
        return v

    @field_validator("load_paths")
    @classmethod
    def validate_load_paths(cls, v):
        for load_path in v:
            if Path(load_path).is_absolute():
                raise ValueError(f"load path must be relative, got {load_path}")
        return v


def load_configuration(root_path: Path, filename: str = CONFIG_FILENAME) -> Configuration:
    """Build the configuration for an application root.

    Args:
        root_path: Application root directory
        filename: Configuration file name inside root_path

    Returns:
        Configuration from the file, or defaults if the file is absent

    Raises:
        ValueError: If root_path is not a directory
        ConfigurationError: If the file is malformed
    """
    if not root_path.is_dir():
        raise ValueError(f"root_path must be a directory: {root_path}")

    root = root_path.resolve()
    config_path = root / filename

    if not config_path.is_file():
        logger.debug(f"No {filename} in {root}, using defaults")
        return Configuration(root_path=root)

    try:
        document = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigurationError(path=config_path, reason=str(e)) from e

    if document is None:
        document = {}
    if not isinstance(document, dict):
        raise ConfigurationError(
            path=config_path,
            reason=f"expected a mapping at the top level, got {type(document).__name__}",
        )

    try:
        config_file = ConfigFile.model_validate(document)
    except ValidationError as e:
        raise ConfigurationError(path=config_path, reason=str(e)) from e

    try:
        configuration = Configuration(
            root_path=root,
            package_paths=tuple(config_file.package_paths) if config_file.package_paths else None,
            exclude=tuple(config_file.exclude),
            load_paths=MappingProxyType(dict(config_file.load_paths)),
            source_extension=config_file.source_extension,
            parallel=config_file.parallel,
        )
    except ValueError as e:
        raise ConfigurationError(path=config_path, reason=str(e)) from e

    logger.debug(f"Loaded configuration from {config_path}")
    return configuration
