"""Domain entities persisted in the JSON document."""

from __future__ import annotations

from .chirp import Chirp
from .document import Document
from .revoked_token import RevokedToken
from .user import User, normalize_email

__all__ = ["Chirp", "Document", "RevokedToken", "User", "normalize_email"]
