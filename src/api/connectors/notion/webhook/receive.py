"""Autenticação de webhooks do Notion (sem PII nos logs).

Três desfechos:
- challenge: primeiro POST da assinatura, traz verification_token e
  ainda não há secret configurado; o token deve ser colado na UI do Notion.
- trusted: assinatura válida, ou modo permissivo (sem secret, sem token).
- untrusted: secret configurado e assinatura ausente/inválida.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal

from ..signature import verify_notion_signature

if TYPE_CHECKING:
    from collections.abc import Mapping

    from config.settings.notion import SignatureMode

logger = logging.getLogger(__name__)

VERIFICATION_TOKEN_FIELD = "verification_token"

WebhookOutcome = Literal["challenge", "trusted", "untrusted"]


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidJsonError(WebhookRequestError):
    """JSON inválido no payload do webhook."""


@dataclass(frozen=True, slots=True)
class WebhookAuthResult:
    """Desfecho da autenticação de um webhook."""

    outcome: WebhookOutcome
    token: str | None = None
    reason: str | None = None
    skipped: bool = False
    payload: dict[str, Any] = field(default_factory=dict)
    event_type: str | None = None

    @property
    def trusted(self) -> bool:
        return self.outcome == "trusted"


def _parse_body(raw_body: bytes) -> Any:
    try:
        return json.loads(raw_body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc


def _as_object(parsed: Any) -> dict[str, Any]:
    # JSON válido mas não-objeto (array, número...) ainda é uma entrega
    return parsed if isinstance(parsed, dict) else {}


def _event_type(parsed: Any) -> str | None:
    candidate = parsed
    if isinstance(parsed, list) and parsed:
        candidate = parsed[0]
    if isinstance(candidate, dict):
        value = candidate.get("type")
        if isinstance(value, str):
            return value
    return None


def _extract_verification_token(payload: dict[str, Any]) -> str | None:
    token = payload.get(VERIFICATION_TOKEN_FIELD)
    if isinstance(token, str) and token:
        return token
    return None


def _trusted(parsed: Any, *, skipped: bool = False) -> WebhookAuthResult:
    return WebhookAuthResult(
        outcome="trusted",
        skipped=skipped,
        payload=_as_object(parsed),
        event_type=_event_type(parsed),
    )


def authenticate_webhook(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
    *,
    signature_mode: SignatureMode = "raw",
) -> WebhookAuthResult:
    """Classifica o webhook recebido.

    No modo `raw` a assinatura é checada antes de qualquer parse, sobre
    os bytes exatamente como recebidos. Corpo JSON que não é objeto
    (ex.: array) é aceito com payload vazio.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos
        secret: Secret do webhook (None/vazio = não registrado ainda)
        signature_mode: Bytes assinados (ver verify_notion_signature)

    Raises:
        InvalidJsonError: Se o corpo (já autenticado, quando aplicável)
            não for JSON.

    Returns:
        WebhookAuthResult
    """
    if not secret:
        parsed = _parse_body(raw_body)
        payload = _as_object(parsed)
        token = _extract_verification_token(payload)
        if token is not None:
            return WebhookAuthResult(outcome="challenge", token=token, payload=payload)
        logger.warning(
            "webhook_signature_skipped",
            extra={"reason": "secret_not_configured", "insecure": True},
        )
        return _trusted(parsed, skipped=True)

    if signature_mode == "minified":
        # Parse vem antes: a assinatura é recalculada sobre o JSON re-serializado
        try:
            parsed = _parse_body(raw_body)
        except InvalidJsonError:
            return WebhookAuthResult(outcome="untrusted", reason="signature_mismatch")
        result = verify_notion_signature(
            raw_body, headers, secret, mode="minified", payload=parsed
        )
        if not result.valid:
            return WebhookAuthResult(
                outcome="untrusted", reason=result.error or "signature_mismatch"
            )
        return _trusted(parsed)

    result = verify_notion_signature(raw_body, headers, secret, mode="raw")
    if not result.valid:
        return WebhookAuthResult(
            outcome="untrusted", reason=result.error or "signature_mismatch"
        )
    return _trusted(_parse_body(raw_body))
