"""Modelo de domínio do item espelhado do database externo.

Cada consulta produz um snapshot novo; itens nunca são alterados
nem persistidos por este serviço.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Item(BaseModel):
    """Uma unidade de trabalho rastreada no database."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(..., min_length=1, description="Identificador estável no store externo.")
    name: str = Field(..., min_length=1, description="Nome de exibição (já aparado).")
    level: int | float | None = Field(default=None, description="Nível/tier para ordenação.")
    upper: str | None = Field(default=None, description="Item superior (texto livre).")
    dependency: str | None = Field(default=None, description="Dependência (texto livre).")
    early_start: str | None = Field(default=None, description="Início mais cedo (ISO 8601).")
    late_start: str | None = Field(default=None, description="Início mais tarde (ISO 8601).")
    early_finish: str | None = Field(default=None, description="Término mais cedo (ISO 8601).")
    late_finish: str | None = Field(default=None, description="Término mais tarde (ISO 8601).")
    done: bool = Field(default=False, description="Concluído.")


__all__ = ["Item"]
