"""Entrypoint da aplicação Notion Live Board.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 3000

Uso (desenvolvimento):
    uvicorn app.app:app --reload --port 3000

Endpoints: / (dashboard estático) | /events (SSE) | /items | /webhook
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from api.routes import create_api_router
from app.bootstrap import get_notification_hub, initialize_app, validate_runtime_settings
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Inicia keepalive SSE do hub

    Shutdown:
    - Cancela reload pendente e keepalive
    - Encerra streams abertos
    """
    logger.info("app_starting", extra={"service": "notion-live-board"})
    validate_runtime_settings()

    hub = get_notification_hub()
    app.state.notification_hub = hub
    hub.start()

    yield

    logger.info("app_shutting_down", extra={"service": "notion-live-board"})
    await hub.stop()


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    settings = get_base_settings()

    fastapi_app = FastAPI(
        title="Notion Live Board",
        description="Espelho em tempo real de um database do Notion",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url=None,
    )

    # Apenas o dashboard configurado pode chamar a API pelo browser
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.allowed_origin],
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # Registra todas as rotas
    fastapi_app.include_router(create_api_router())

    # Dashboard estático por último: o mount em "/" não deve sombrear a API
    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        fastapi_app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.info("static_dir_missing", extra={"static_dir": str(static_dir)})

    logger.info(
        "app_configured",
        extra={"service": "notion-live-board", "allowed_origin": settings.allowed_origin},
    )

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    settings = get_base_settings()
    logger.info("Starting Notion Live Board", extra={"port": settings.port})
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    main()
