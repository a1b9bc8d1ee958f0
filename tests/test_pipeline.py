# Gate de bearer token como pipeline de handlers
from datetime import datetime, timedelta, timezone

from blog_api.auth.pipeline import (
    Continue,
    RequestContext,
    Terminate,
    bearer_gate,
    extract_bearer_token,
    run_pipeline,
)
from blog_api.auth.tokens import TokenIssuer, TokenSettings, TokenVerifier

SECRET = "s3cret-key-long-enough-for-hs256-signing"
SETTINGS = TokenSettings(secret_key=SECRET)
VERIFIER = TokenVerifier(SETTINGS)


def _gate(headers):
    return run_pipeline(bearer_gate(VERIFIER), RequestContext(headers=headers))


def test_extract_bearer_token():
    assert extract_bearer_token("Bearer abc") == "abc"
    assert extract_bearer_token("Bearer   abc  ") == "abc"
    assert extract_bearer_token("Bearer") is None
    assert extract_bearer_token("Bearer ") is None
    assert extract_bearer_token("Basic abc") is None
    assert extract_bearer_token("") is None
    assert extract_bearer_token(None) is None


def test_no_header_is_401():
    result = _gate({})
    assert isinstance(result, Terminate)
    assert result.status == 401


def test_header_without_token_is_401():
    result = _gate({"Authorization": "Bearer"})
    assert isinstance(result, Terminate)
    assert result.status == 401


def test_corrupted_token_is_403():
    result = _gate({"Authorization": "Bearer xxx.yyy.zzz"})
    assert isinstance(result, Terminate)
    assert result.status == 403


def test_expired_token_is_403():
    token = TokenIssuer(SETTINGS).issue(3, now=datetime.now(timezone.utc) - timedelta(hours=2))
    result = _gate({"Authorization": f"Bearer {token}"})
    assert isinstance(result, Terminate)
    assert result.status == 403
    assert result.body == {"error": "Token expirado"}


def test_valid_token_continues_with_subject():
    token = TokenIssuer(SETTINGS).issue(3)
    result = _gate({"Authorization": f"Bearer {token}"})
    assert isinstance(result, Continue)
    assert result.context.user_id == "3"
    assert result.context.token == token


def test_pipeline_stops_at_first_terminate():
    calls = []

    def stop(context):
        calls.append("stop")
        return Terminate(body={"error": "no"}, status=418)

    def never(context):
        calls.append("never")
        return Continue(context)

    result = run_pipeline([stop, never], RequestContext())
    assert result.status == 418
    assert calls == ["stop"]
