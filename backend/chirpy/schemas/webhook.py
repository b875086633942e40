"""Payment provider webhook schemas."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields


class PolkaEventDataSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    user_id = fields.Integer(required=True)


class PolkaEventSchema(Schema):
    """Event envelope sent by Polka."""

    class Meta:
        unknown = EXCLUDE

    event = fields.String(required=True)
    data = fields.Nested(PolkaEventDataSchema, load_default=None)
