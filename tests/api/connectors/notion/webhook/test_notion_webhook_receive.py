import hashlib
import hmac
import json

import pytest

from api.connectors.notion.webhook.receive import (
    InvalidJsonError,
    authenticate_webhook,
)


def _sign(payload: bytes, secret: str) -> str:
    digest = hmac.new(secret.encode("utf-8"), payload, hashlib.sha256).hexdigest()
    return f"sha256={digest}"


def test_verification_token_without_secret_is_challenge() -> None:
    body = json.dumps({"verification_token": "secret_tok"}).encode("utf-8")

    result = authenticate_webhook(body, {}, None)

    assert result.outcome == "challenge"
    assert result.token == "secret_tok"
    assert result.trusted is False


def test_verification_token_with_secret_requires_signature() -> None:
    body = json.dumps({"verification_token": "secret_tok"}).encode("utf-8")

    result = authenticate_webhook(body, {}, "secret")

    assert result.outcome == "untrusted"
    assert result.reason == "missing_signature"


def test_signed_event_is_trusted() -> None:
    secret = "secret"
    # Espaços e ordem de chaves preservados: assinatura é sobre os bytes
    body = b'{"type":  "page.created", "entity": {"id": "p1"}}'
    headers = {"x-notion-signature": _sign(body, secret)}

    result = authenticate_webhook(body, headers, secret)

    assert result.trusted is True
    assert result.payload["type"] == "page.created"


def test_invalid_signature_is_untrusted() -> None:
    body = json.dumps({"type": "page.created"}).encode("utf-8")
    headers = {"x-notion-signature": "sha256=deadbeef"}

    result = authenticate_webhook(body, headers, "secret")

    assert result.outcome == "untrusted"
    assert result.reason == "signature_mismatch"


def test_permissive_mode_logs_warning(caplog: pytest.LogCaptureFixture) -> None:
    body = json.dumps({"type": "page.created"}).encode("utf-8")

    with caplog.at_level("WARNING"):
        result = authenticate_webhook(body, {}, None)

    assert result.trusted is True
    assert result.skipped is True
    assert any(record.getMessage() == "webhook_signature_skipped" for record in caplog.records)


def test_invalid_json_without_secret() -> None:
    with pytest.raises(InvalidJsonError, match="invalid_json"):
        authenticate_webhook(b"{invalid}", {}, None)


def test_signed_but_invalid_json() -> None:
    secret = "secret"
    body = b"{invalid}"

    with pytest.raises(InvalidJsonError):
        authenticate_webhook(body, {"x-notion-signature": _sign(body, secret)}, secret)


def test_unsigned_invalid_json_with_secret_is_untrusted_not_error() -> None:
    result = authenticate_webhook(b"{invalid}", {"x-notion-signature": "sha256=00"}, "secret")

    assert result.outcome == "untrusted"


def test_signed_json_array_is_trusted_with_empty_payload() -> None:
    secret = "secret"
    body = b'[{"type": "page.created"}]'
    headers = {"x-notion-signature": _sign(body, secret)}

    result = authenticate_webhook(body, headers, secret)

    assert result.trusted is True
    assert result.payload == {}
    assert result.event_type == "page.created"


def test_permissive_json_array_is_trusted() -> None:
    result = authenticate_webhook(b"[1, 2]", {}, None)

    assert result.trusted is True
    assert result.skipped is True
    assert result.payload == {}
    assert result.event_type is None


def test_minified_mode_accepts_legacy_signature() -> None:
    secret = "secret"
    body = b'{"type": "page.created", "entity": {"id": "p1"}}'
    legacy = json.dumps(json.loads(body), separators=(",", ":")).encode("utf-8")
    headers = {"x-notion-signature": _sign(legacy, secret)}

    assert authenticate_webhook(body, headers, secret, signature_mode="minified").trusted
    assert not authenticate_webhook(body, headers, secret, signature_mode="raw").trusted


def test_minified_mode_rejects_raw_signature_when_bytes_differ() -> None:
    secret = "secret"
    body = b'{"type": "page.created"}'
    headers = {"x-notion-signature": _sign(body, secret)}

    result = authenticate_webhook(body, headers, secret, signature_mode="minified")

    assert result.outcome == "untrusted"
