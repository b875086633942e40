"""User resource schemas."""

from __future__ import annotations

from marshmallow import Schema, fields


class UserSchema(Schema):
    """Public representation of a user; never includes the password hash."""

    id = fields.Integer(required=True)
    email = fields.String(required=True)
    is_chirpy_red = fields.Boolean(attribute="is_upgraded")
