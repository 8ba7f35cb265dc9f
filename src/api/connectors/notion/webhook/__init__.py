"""Webhook Notion: challenge de verificação, assinatura e parsing seguro."""

from ..signature import SignatureResult, compute_signature, verify_notion_signature
from .receive import (
    InvalidJsonError,
    WebhookAuthResult,
    WebhookRequestError,
    authenticate_webhook,
)

__all__ = [
    "InvalidJsonError",
    "SignatureResult",
    "WebhookAuthResult",
    "WebhookRequestError",
    "authenticate_webhook",
    "compute_signature",
    "verify_notion_signature",
]
