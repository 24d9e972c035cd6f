"""
Tests for access token checks, the auth handlers and secret loading
"""
import asyncio
import time
from unittest.mock import MagicMock, patch

import jwt
from botocore.exceptions import ClientError

from foodhub import aws_secrets, config
from foodhub.auth import bearer_token, resolve_user, verify_access_token
from foodhub.handlers.auth import refresh_session, sign_in, sign_out, sign_up

SECRET = "super-secret-jwt-token-with-at-least-32-characters"


def make_token(secret=SECRET, **claims):
    payload = {
        "sub": "user-1",
        "email": "amina@example.com",
        "aud": "authenticated",
        "exp": int(time.time()) + 3600,
        **claims,
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def test_bearer_token():
    assert bearer_token("Bearer abc") == "abc"
    assert bearer_token("bearer  abc ") == "abc"
    assert bearer_token("Basic abc") is None
    assert bearer_token(None) is None


def test_verify_access_token():
    valid, claims = verify_access_token(make_token(), SECRET)
    assert valid and claims["sub"] == "user-1"

    assert verify_access_token(make_token(secret="another-secret-another-secret-123"), SECRET)[0] is False
    assert verify_access_token(make_token(aud="anon"), SECRET)[0] is False
    assert verify_access_token(make_token(exp=int(time.time()) - 10), SECRET)[0] is False


def test_resolve_user_with_secret(monkeypatch):
    monkeypatch.setattr(config, "SUPABASE_JWT_SECRET", SECRET)
    token = make_token()

    assert resolve_user(f"Bearer {token}") == {"id": "user-1", "email": "amina@example.com", "access_token": token}
    assert resolve_user("Bearer not-a-jwt") is None


def test_resolve_user_asks_backend_without_secret(monkeypatch, backend):
    monkeypatch.setattr(config, "SUPABASE_JWT_SECRET", "")
    session = backend.sign_up("amina@example.com", "secret1")

    user = resolve_user(f"Bearer {session['access_token']}")

    assert user["email"] == "amina@example.com"
    assert resolve_user("Bearer token-unknown") is None


def test_sign_up_and_sign_in(backend):
    assert "at least 6" in asyncio.run(sign_up({"email": "a@example.com", "password": "123"}))["error"]

    created = asyncio.run(sign_up({"email": "a@example.com", "password": "secret1", "full_name": "Amina"}))
    assert created["access_token"].startswith("token-")
    assert backend.users["a@example.com"][1]["user_metadata"] == {"full_name": "Amina"}

    duplicate = asyncio.run(sign_up({"email": "a@example.com", "password": "secret1"}))
    assert duplicate["title"] == "Sign up failed"

    signed_in = asyncio.run(sign_in({"email": "a@example.com", "password": "secret1"}))
    assert signed_in["user"]["email"] == "a@example.com"

    rejected = asyncio.run(sign_in({"email": "a@example.com", "password": "wrong"}))
    assert rejected == {"error": "Invalid email or password", "title": "Sign in failed", "code": "unauthorized"}


def test_refresh_session(backend):
    created = asyncio.run(sign_up({"email": "a@example.com", "password": "secret1"}))

    refreshed = asyncio.run(refresh_session({"refresh_token": created["refresh_token"]}))
    assert refreshed["access_token"] == created["access_token"]
    assert refreshed["user"]["email"] == "a@example.com"

    expired = asyncio.run(refresh_session({"refresh_token": "refresh-unknown"}))
    assert expired["code"] == "unauthorized"
    assert "Refresh token is required" in asyncio.run(refresh_session({}))["error"]


def test_sign_out(backend, user):
    assert asyncio.run(sign_out({"user": user})) == {"success": True}
    assert backend.tokens == ["token-user-1"]
    assert asyncio.run(sign_out({}))["code"] == "unauthorized"


def test_setup_credentials_fills_missing_settings(monkeypatch):
    monkeypatch.setattr(config, "SUPABASE_URL", "")
    monkeypatch.setattr(config, "SUPABASE_ANON_KEY", "already-set")
    monkeypatch.setattr(config, "SUPABASE_JWT_SECRET", "")
    monkeypatch.setenv("SUPABASE_URL", "")
    monkeypatch.setenv("SUPABASE_JWT_SECRET", "")

    secrets = {"foodhub/supabase-url": "https://demo.supabase.co/"}

    def get_secret_value(SecretId):
        if SecretId not in secrets:
            raise ClientError({"Error": {"Code": "ResourceNotFoundException", "Message": "missing"}}, "GetSecretValue")
        return {"SecretString": secrets[SecretId]}

    client = MagicMock()
    client.get_secret_value.side_effect = get_secret_value

    with patch.object(aws_secrets.boto3, "client", return_value=client):
        loaded = aws_secrets.setup_credentials()

    assert loaded == ["SUPABASE_URL"]
    assert config.SUPABASE_URL == "https://demo.supabase.co"
    assert config.SUPABASE_ANON_KEY == "already-set"
    asked = [c.kwargs["SecretId"] for c in client.get_secret_value.call_args_list]
    assert asked == ["foodhub/supabase-url", "foodhub/supabase-jwt-secret"]
