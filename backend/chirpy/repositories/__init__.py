"""Repository package exposing persistence-layer access for all entities."""

from __future__ import annotations

from chirpy.repositories.base import BaseRepository
from chirpy.repositories.chirp import ChirpRepository
from chirpy.repositories.revoked_token import RevokedTokenRepository
from chirpy.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "ChirpRepository",
    "RevokedTokenRepository",
    "UserRepository",
]
