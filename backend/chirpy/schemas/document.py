"""Marshmallow schemas for the on-disk JSON document.

Layout::

    {
      "chirps": {"<id>": {"id": int, "author_id": int, "body": str}},
      "chirp_last_id": int,
      "users": {"<id>": {"id": int, "email": str, "password": str, "is_chirpy_red": bool}},
      "revoked_tokens": {"<token>": {"token": str, "revoked_at": RFC 3339}}
    }
"""

from __future__ import annotations

from typing import Any

from marshmallow import Schema, ValidationError, fields, post_load, pre_dump, validates_schema

from chirpy.models import Chirp, Document, RevokedToken, User, normalize_email


class UserRecordSchema(Schema):
    """One entry of ``users``."""

    id = fields.Integer(required=True, strict=True)
    email = fields.String(required=True)
    password = fields.String(required=True, attribute="hashed_password")
    is_chirpy_red = fields.Boolean(load_default=False, attribute="is_upgraded")

    @post_load
    def make_user(self, data: dict[str, Any], **_: Any) -> User:
        # Older files kept emails as typed; lookups compare normalised values.
        data["email"] = normalize_email(data["email"])
        return User(**data)


class ChirpRecordSchema(Schema):
    """One entry of ``chirps``."""

    id = fields.Integer(required=True, strict=True)
    author_id = fields.Integer(required=True, strict=True)
    body = fields.String(required=True)

    @post_load
    def make_chirp(self, data: dict[str, Any], **_: Any) -> Chirp:
        return Chirp(**data)


class RevokedTokenRecordSchema(Schema):
    """One entry of ``revoked_tokens``."""

    token = fields.String(required=True)
    revoked_at = fields.AwareDateTime(required=True, format="iso", default_timezone=None)

    @post_load
    def make_revoked_token(self, data: dict[str, Any], **_: Any) -> RevokedToken:
        return RevokedToken(**data)


class DocumentSchema(Schema):
    """Whole-document codec between JSON-compatible dicts and :class:`Document`."""

    chirps = fields.Dict(
        keys=fields.String(), values=fields.Nested(ChirpRecordSchema), load_default=dict
    )
    chirp_last_id = fields.Integer(load_default=0, strict=True)
    users = fields.Dict(
        keys=fields.String(), values=fields.Nested(UserRecordSchema), load_default=dict
    )
    revoked_tokens = fields.Dict(
        keys=fields.String(), values=fields.Nested(RevokedTokenRecordSchema), load_default=dict
    )

    @pre_dump
    def stringify_keys(self, doc: Document, **_: Any) -> dict[str, Any]:
        """Map keys use the decimal string form of the integer id."""
        return {
            "chirps": {str(k): v for k, v in doc.chirps.items()},
            "chirp_last_id": doc.chirp_last_id,
            "users": {str(k): v for k, v in doc.users.items()},
            "revoked_tokens": dict(doc.revoked_tokens),
        }

    @validates_schema
    def check_keys(self, data: dict[str, Any], **_: Any) -> None:
        """Reject documents whose map keys disagree with the embedded ids."""
        for name in ("users", "chirps"):
            for key, entity in data.get(name, {}).items():
                if key != str(entity.id):
                    raise ValidationError(f"key {key!r} does not match id {entity.id}", name)
        for key, revoked in data.get("revoked_tokens", {}).items():
            if key != revoked.token:
                raise ValidationError("key does not match token", "revoked_tokens")
        highest = max((c.id for c in data.get("chirps", {}).values()), default=0)
        if data.get("chirp_last_id", 0) < highest:
            raise ValidationError("chirp_last_id is behind the stored chirps", "chirp_last_id")

    @post_load
    def make_document(self, data: dict[str, Any], **_: Any) -> Document:
        return Document(
            users={u.id: u for u in data["users"].values()},
            chirps={c.id: c for c in data["chirps"].values()},
            chirp_last_id=data["chirp_last_id"],
            revoked_tokens=dict(data["revoked_tokens"]),
        )


document_schema = DocumentSchema()
