# chirpy/infra/security/tokens.py
from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import UTC, datetime, timedelta
from enum import Enum
from uuid import uuid4

import jwt

from chirpy.services._shared.errors import (
    InvalidTokenError,
    MalformedTokenError,
    MissingTokenError,
)

log = logging.getLogger(__name__)

ALGORITHM = "HS256"
AUTHORIZATION_HEADER = "Authorization"
REQUIRED_CLAIMS = ["exp", "iat", "iss", "sub"]


class TokenKind(Enum):
    """
    Closed set of token kinds.

    Each kind carries the issuer label embedded in the token and its lifetime.
    Verifying with one kind rejects tokens issued for the other.
    """

    ACCESS = ("chirpy-access", timedelta(hours=1))
    REFRESH = ("chirpy-refresh", timedelta(days=60))

    def __init__(self, issuer: str, lifetime: timedelta) -> None:
        self.issuer = issuer
        self.lifetime = lifetime


def issue_token(
    kind: TokenKind, secret: str, user_id: int, *, now: datetime | None = None
) -> str:
    """
    Sign a token asserting ``user_id`` for ``kind``.

    :param kind: Token kind; selects issuer and lifetime.
    :type kind: TokenKind
    :param secret: HMAC key. Never embedded in the token.
    :type secret: str
    :param user_id: Subject of the token.
    :type user_id: int
    :param now: Issue time (UTC). Defaults to the current time.
    :type now: datetime | None
    :returns: Encoded JWT.
    :rtype: str
    """
    issued_at = now or datetime.now(UTC)
    claims = {
        "iss": kind.issuer,
        "sub": str(user_id),
        "iat": int(issued_at.timestamp()),
        "exp": int((issued_at + kind.lifetime).timestamp()),
        # Two tokens issued in the same second must still differ.
        "jti": uuid4().hex,
    }
    return jwt.encode(claims, secret, algorithm=ALGORITHM)


def extract_user_id(kind: TokenKind, secret: str, raw_token: str) -> int:
    """
    Verify ``raw_token`` as a ``kind`` token and return its subject.

    Signature, issuer, expiry, required claims and a numeric subject are all
    checked.

    :raises InvalidTokenError: On any failure, without saying which check failed.
    """
    try:
        claims = jwt.decode(
            raw_token,
            secret,
            algorithms=[ALGORITHM],
            issuer=kind.issuer,
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.InvalidTokenError as exc:
        log.debug("token.rejected kind=%s reason=%s", kind.name, type(exc).__name__)
        raise InvalidTokenError() from exc

    subject = claims.get("sub")
    if not isinstance(subject, str) or not (subject.isascii() and subject.isdigit()):
        log.debug("token.rejected kind=%s reason=subject", kind.name)
        raise InvalidTokenError()
    return int(subject)


def _extract_credential(headers: Mapping[str, str], scheme: str) -> str:
    value = headers.get(AUTHORIZATION_HEADER)
    if not value:
        raise MissingTokenError()
    parts = value.split()
    if len(parts) != 2 or parts[0] != scheme:
        raise MalformedTokenError()
    return parts[1]


def extract_bearer_token(headers: Mapping[str, str]) -> str:
    """
    Return the token from ``Authorization: Bearer <token>``.

    :raises MissingTokenError: If the header is absent or empty.
    :raises MalformedTokenError: If the value is not exactly ``Bearer <token>``.
    """
    return _extract_credential(headers, "Bearer")


def extract_api_key(headers: Mapping[str, str]) -> str:
    """Return the key from ``Authorization: ApiKey <key>`` (webhook callers)."""
    return _extract_credential(headers, "ApiKey")
