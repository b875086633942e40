"""Authentication-related Marshmallow schemas."""

from __future__ import annotations

from marshmallow import Schema, fields, validate


class CredentialsSchema(Schema):
    """Input payload carrying an email/password pair (register, login, update)."""

    email = fields.Email(required=True, validate=validate.Length(max=254))
    password = fields.String(required=True, validate=validate.Length(min=1, max=128))


class LoginResponseSchema(Schema):
    """Response payload of a successful login."""

    id = fields.Integer(required=True)
    email = fields.String(required=True)
    is_chirpy_red = fields.Boolean(attribute="is_upgraded")
    token = fields.String(attribute="access_token")
    refresh_token = fields.String()


class AccessTokenSchema(Schema):
    """Response payload of a refresh exchange."""

    token = fields.String(required=True)
