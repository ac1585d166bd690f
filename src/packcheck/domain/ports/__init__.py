"""Domain ports (interfaces/protocols)."""

from packcheck.domain.ports.constant_resolver import (
    ConstantResolverProtocol,
    ResolverFactory,
)

__all__ = [
    "ConstantResolverProtocol",
    "ResolverFactory",
]
