"""Default constant resolver and naming inflections."""

from packcheck.infrastructure.resolver.file_map_resolver import FileMapResolver
from packcheck.infrastructure.resolver.inflector import camelize, underscore

__all__ = [
    "FileMapResolver",
    "camelize",
    "underscore",
]
