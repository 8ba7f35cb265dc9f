"""Exceções de domínio para falhas de infraestrutura."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura externa."""


class UpstreamQueryError(InfrastructureError):
    """Falha ao consultar o store externo (rede, status HTTP ou página malformada).

    Attributes:
        status_code: Status HTTP retornado pelo store, quando houver.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
