"""Revoked refresh token repository."""

from __future__ import annotations

from datetime import datetime

from chirpy.models import RevokedToken
from chirpy.repositories.base import BaseRepository


class RevokedTokenRepository(BaseRepository):
    """Set of revoked raw tokens keyed by the token string."""

    def is_revoked(self, token: str) -> bool:
        return token in self.document.revoked_tokens

    def add(self, token: str, *, revoked_at: datetime) -> RevokedToken:
        """Record ``token`` as revoked; idempotent, the first timestamp wins."""
        existing = self.document.revoked_tokens.get(token)
        if existing is not None:
            return existing
        revoked = RevokedToken(token=token, revoked_at=revoked_at)
        self.document.revoked_tokens[token] = revoked
        return revoked
