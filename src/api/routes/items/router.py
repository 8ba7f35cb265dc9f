"""Endpoint de leitura do snapshot atual do database."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from app.bootstrap import get_record_fetcher
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from utils.errors import UpstreamQueryError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/items")
async def list_items(request: Request) -> JSONResponse:
    """Consulta todas as páginas do database e devolve a lista normalizada.

    Sem cache: cada chamada é um snapshot novo. Falha em qualquer página
    devolve 500 sem resultado parcial.
    """
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        try:
            fetcher = get_record_fetcher()
        except ValueError as exc:
            logger.error(
                "items_store_not_configured",
                extra={"correlation_id": get_correlation_id(), "error": str(exc)},
            )
            return JSONResponse(
                content={"error": "store_not_configured", "detail": str(exc)},
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        try:
            items = await fetcher.fetch_all()
        except UpstreamQueryError as exc:
            logger.error(
                "items_query_failed",
                extra={
                    "correlation_id": get_correlation_id(),
                    "error": str(exc),
                    "status_code": exc.status_code,
                },
            )
            return JSONResponse(
                content={"error": "upstream_query_failed", "detail": str(exc)},
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return JSONResponse(content={"items": [item.model_dump() for item in items]})
    finally:
        reset_correlation_id(token)
