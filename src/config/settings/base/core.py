"""Settings base do Notion Live Board.

Configurações comuns ao processo HTTP (ambiente, porta, CORS, estáticos).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

DEFAULT_PORT = 3000


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do sistema.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço para logs
        debug: Modo debug ativo
        port: Porta HTTP de escuta
        allowed_origin: Única origem de browser liberada no CORS
        static_dir: Diretório do dashboard estático (servido em /)
    """

    # Ambiente
    environment: Environment = "development"
    service_name: str = "notion-live-board"
    debug: bool = False

    # HTTP
    port: int = DEFAULT_PORT
    allowed_origin: str = f"http://localhost:{DEFAULT_PORT}"
    static_dir: str = "public"

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Retorna True se ambiente é desenvolvimento."""
        return self.environment == "development"

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        valid_envs = {"development", "staging", "production"}
        if self.environment not in valid_envs:
            errors.append(f"ENVIRONMENT inválido: {self.environment}")

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if not 0 < self.port < 65536:
            errors.append(f"PORT fora do intervalo: {self.port}")

        if not self.allowed_origin:
            errors.append("ALLOWED_ORIGIN não pode ser vazio")

        return errors


def _parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para tipo Environment."""
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return "development"


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    port = int(os.getenv("PORT", str(DEFAULT_PORT)))
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "notion-live-board"),
        debug=os.getenv("DEBUG", "").lower() in ("true", "1", "yes"),
        port=port,
        # Sem ALLOWED_ORIGIN, libera apenas o próprio dashboard local
        allowed_origin=os.getenv("ALLOWED_ORIGIN", f"http://localhost:{port}"),
        static_dir=os.getenv("STATIC_DIR", "public"),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
