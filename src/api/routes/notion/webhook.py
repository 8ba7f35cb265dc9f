"""Endpoint de webhook do Notion.

Endpoints:
- POST /webhook: challenge de verificação e eventos de mudança

Fluxo:
1. Primeira entrega da assinatura traz verification_token; sem secret
   configurado, logamos o token para o operador colar na UI do Notion.
2. Eventos seguintes: validamos HMAC sobre o corpo bruto e agendamos
   um `reload` coalescido para os viewers.

Segurança:
- Assinatura inválida responde 202 (recebido, ignorado): o Notion só
  re-tenta (até 8 vezes) em respostas não-2xx.
- Sem secret e sem token: modo permissivo, aceito com warning.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from api.connectors.notion.webhook import InvalidJsonError, authenticate_webhook
from app.bootstrap import get_notification_hub
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from config.settings import get_notion_settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _json(payload: dict[str, Any], status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return JSONResponse(content=payload, status_code=status_code)


@router.post("/webhook")
async def receive_webhook(request: Request) -> JSONResponse:
    """Recebimento de webhooks do Notion.

    Returns:
        200 verificação/aceito, 202 assinatura inválida,
        400 JSON inválido, 500 erro interno.
    """
    token = set_correlation_id(request.headers.get("x-correlation-id"))

    try:
        settings = get_notion_settings()

        # Corpo bruto: a assinatura é sobre os bytes recebidos, não sobre o JSON re-serializado
        raw_body = await request.body()

        try:
            result = authenticate_webhook(
                raw_body,
                dict(request.headers),
                settings.webhook_secret or None,
                signature_mode=settings.webhook_signature_mode,
            )
        except InvalidJsonError as exc:
            logger.warning(
                "webhook_json_invalid",
                extra={"correlation_id": get_correlation_id(), "error": str(exc)},
            )
            return _json(
                {"ok": False, "reason": "invalid_json"},
                status.HTTP_400_BAD_REQUEST,
            )

        if result.outcome == "challenge":
            # Único log com valor sensível: o operador precisa copiar o token
            logger.warning(
                "webhook_verification_token_received",
                extra={
                    "correlation_id": get_correlation_id(),
                    "verification_token": result.token,
                    "action": "cole o token na janela Verify dos Webhooks do Notion",
                },
            )
            return _json({"ok": True, "step": "verification"})

        if not result.trusted:
            logger.warning(
                "webhook_signature_invalid",
                extra={"correlation_id": get_correlation_id(), "reason": result.reason},
            )
            return _json(
                {"ok": False, "reason": "signature_mismatch"},
                status.HTTP_202_ACCEPTED,
            )

        get_notification_hub().notify_change()
        logger.info(
            "webhook_received",
            extra={
                "correlation_id": get_correlation_id(),
                "event_type": result.event_type,
                "signature_skipped": result.skipped,
                "payload_size": len(raw_body),
            },
        )
        return _json({"ok": True})

    except Exception:
        logger.exception(
            "webhook_processing_failed",
            extra={"correlation_id": get_correlation_id()},
        )
        return _json({"ok": False}, status.HTTP_500_INTERNAL_SERVER_ERROR)

    finally:
        reset_correlation_id(token)
