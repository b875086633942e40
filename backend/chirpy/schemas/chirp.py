"""Chirp resource schemas."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, validate


class ChirpCreateSchema(Schema):
    """Payload for posting a chirp.

    Length is enforced by the service so that the rule holds for every caller.
    """

    body = fields.String(required=True)


class ChirpFilterSchema(Schema):
    """Supported query parameters for listing chirps."""

    class Meta:
        unknown = EXCLUDE

    author_id = fields.Integer(load_default=None, validate=validate.Range(min=1))
    sort = fields.String(load_default="asc", validate=validate.OneOf(["asc", "desc"]))


class ChirpSchema(Schema):
    """Public representation of a chirp."""

    id = fields.Integer(required=True)
    author_id = fields.Integer(required=True)
    body = fields.String(required=True)
