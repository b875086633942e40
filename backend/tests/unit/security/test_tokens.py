"""Tests for JWT issuing/verification and header extraction."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from chirpy.infra.security import (
    TokenKind,
    extract_api_key,
    extract_bearer_token,
    extract_user_id,
    issue_token,
)
from chirpy.services._shared.errors import (
    AuthorizationHeaderError,
    InvalidTokenError,
    MalformedTokenError,
    MissingTokenError,
)

SECRET = "unit-test-secret-that-is-long-enough-for-hs256"


@pytest.mark.parametrize("kind", list(TokenKind))
def test_issue_then_extract_returns_user_id(kind):
    token = issue_token(kind, SECRET, 42)

    assert extract_user_id(kind, SECRET, token) == 42


def test_kinds_carry_issuer_and_lifetime():
    assert TokenKind.ACCESS.issuer == "chirpy-access"
    assert TokenKind.ACCESS.lifetime == timedelta(hours=1)
    assert TokenKind.REFRESH.issuer == "chirpy-refresh"
    assert TokenKind.REFRESH.lifetime == timedelta(days=60)


def test_claims_are_complete():
    now = datetime(2024, 1, 1, tzinfo=UTC)
    token = issue_token(TokenKind.ACCESS, SECRET, 7, now=now)

    claims = jwt.decode(token, options={"verify_signature": False})

    assert claims["iss"] == "chirpy-access"
    assert claims["sub"] == "7"
    assert claims["iat"] == int(now.timestamp())
    assert claims["exp"] == int((now + timedelta(hours=1)).timestamp())
    assert claims["jti"]


def test_tokens_issued_in_same_second_differ():
    now = datetime.now(UTC)

    assert issue_token(TokenKind.REFRESH, SECRET, 1, now=now) != issue_token(
        TokenKind.REFRESH, SECRET, 1, now=now
    )


def test_refresh_token_is_rejected_as_access_token():
    token = issue_token(TokenKind.REFRESH, SECRET, 1)

    with pytest.raises(InvalidTokenError):
        extract_user_id(TokenKind.ACCESS, SECRET, token)


def test_access_token_is_rejected_as_refresh_token():
    token = issue_token(TokenKind.ACCESS, SECRET, 1)

    with pytest.raises(InvalidTokenError):
        extract_user_id(TokenKind.REFRESH, SECRET, token)


def test_expired_token_is_invalid():
    issued = datetime.now(UTC) - timedelta(hours=2)
    token = issue_token(TokenKind.ACCESS, SECRET, 1, now=issued)

    with pytest.raises(InvalidTokenError):
        extract_user_id(TokenKind.ACCESS, SECRET, token)


def test_token_expires_after_lifetime(freeze_time):
    with freeze_time("2024-01-01T00:00:00Z"):
        token = issue_token(TokenKind.ACCESS, SECRET, 1)
    with freeze_time("2024-01-01T00:30:00Z"):
        assert extract_user_id(TokenKind.ACCESS, SECRET, token) == 1
    with freeze_time("2024-01-01T01:00:01Z"):
        with pytest.raises(InvalidTokenError):
            extract_user_id(TokenKind.ACCESS, SECRET, token)


def test_wrong_secret_is_invalid():
    token = issue_token(TokenKind.ACCESS, SECRET, 1)

    with pytest.raises(InvalidTokenError):
        extract_user_id(TokenKind.ACCESS, SECRET + "x", token)


def test_tampered_payload_is_invalid():
    token = issue_token(TokenKind.ACCESS, SECRET, 1)
    forged = issue_token(TokenKind.ACCESS, SECRET, 2)
    header, _, signature = token.split(".")
    _, payload, _ = forged.split(".")

    with pytest.raises(InvalidTokenError):
        extract_user_id(TokenKind.ACCESS, SECRET, f"{header}.{payload}.{signature}")


@pytest.mark.parametrize("sub", ["abc", "-1", "", "\u00b2", "\u0661"])
def test_non_numeric_subject_is_invalid(sub):
    now = datetime.now(UTC)
    token = jwt.encode(
        {
            "iss": "chirpy-access",
            "sub": sub,
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(minutes=5)).timestamp()),
        },
        SECRET,
        algorithm="HS256",
    )

    with pytest.raises(InvalidTokenError):
        extract_user_id(TokenKind.ACCESS, SECRET, token)


def test_missing_expiry_is_invalid():
    token = jwt.encode({"iss": "chirpy-access", "sub": "1", "iat": 0}, SECRET, algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        extract_user_id(TokenKind.ACCESS, SECRET, token)


def test_garbage_is_invalid():
    with pytest.raises(InvalidTokenError):
        extract_user_id(TokenKind.ACCESS, SECRET, "not-a-jwt")


class TestBearerExtraction:
    def test_returns_token(self):
        assert extract_bearer_token({"Authorization": "Bearer abc.def.ghi"}) == "abc.def.ghi"

    def test_missing_header(self):
        with pytest.raises(MissingTokenError):
            extract_bearer_token({})

    @pytest.mark.parametrize(
        "value", ["abc.def.ghi", "Bearer", "Bearer a b", "Token abc", "ApiKey abc"]
    )
    def test_malformed_header(self, value):
        with pytest.raises(MalformedTokenError):
            extract_bearer_token({"Authorization": value})

    def test_header_errors_are_not_token_errors(self):
        assert not issubclass(MissingTokenError, InvalidTokenError)
        assert issubclass(MalformedTokenError, AuthorizationHeaderError)


def test_extract_api_key():
    assert extract_api_key({"Authorization": "ApiKey secret"}) == "secret"
    with pytest.raises(MalformedTokenError):
        extract_api_key({"Authorization": "Bearer secret"})
