"""Convenience exports for application schemas."""

from __future__ import annotations

from .auth import AccessTokenSchema, CredentialsSchema, LoginResponseSchema
from .chirp import ChirpCreateSchema, ChirpFilterSchema, ChirpSchema
from .document import DocumentSchema, document_schema
from .user import UserSchema
from .webhook import PolkaEventSchema

__all__ = [
    "AccessTokenSchema",
    "CredentialsSchema",
    "LoginResponseSchema",
    "ChirpCreateSchema",
    "ChirpFilterSchema",
    "ChirpSchema",
    "DocumentSchema",
    "document_schema",
    "UserSchema",
    "PolkaEventSchema",
]
