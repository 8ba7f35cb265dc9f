"""Exceções utilitárias compartilhadas."""

from .exceptions import InfrastructureError, UpstreamQueryError

__all__ = [
    "InfrastructureError",
    "UpstreamQueryError",
]
