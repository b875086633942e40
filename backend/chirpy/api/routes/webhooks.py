"""Payment provider webhook endpoint."""

from __future__ import annotations

from flask import Blueprint, request

from chirpy.api.deps import empty_response, load_json, timing, webhook_service
from chirpy.schemas import PolkaEventSchema
from chirpy.services.webhooks import PolkaEventIn

bp = Blueprint("webhooks", __name__)

polka_event_schema = PolkaEventSchema()


@bp.post("/webhooks")
@timing
def polka_webhook():
    """Apply a Polka event; unknown events are acknowledged with 204."""

    service = webhook_service()
    # Reject unauthenticated callers before looking at the payload.
    service.verify_api_key(request.headers)
    data = load_json(polka_event_schema)
    user_id = data["data"]["user_id"] if data.get("data") else None
    service.handle_polka_event(request.headers, PolkaEventIn(event=data["event"], user_id=user_id))
    return empty_response()
