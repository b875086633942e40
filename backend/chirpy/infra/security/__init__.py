"""Token signing and password hashing helpers."""

from __future__ import annotations

from .passwords import hash_password, verify_password
from .tokens import (
    TokenKind,
    extract_api_key,
    extract_bearer_token,
    extract_user_id,
    issue_token,
)

__all__ = [
    "TokenKind",
    "extract_api_key",
    "extract_bearer_token",
    "extract_user_id",
    "hash_password",
    "issue_token",
    "verify_password",
]
