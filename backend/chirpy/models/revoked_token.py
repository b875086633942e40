"""Revoked refresh token entity."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class RevokedToken:
    """
    A refresh token that must no longer be honoured.

    Entries are never pruned, so the set only grows.
    """

    token: str
    revoked_at: datetime
