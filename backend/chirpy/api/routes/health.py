"""Health check endpoint."""

from __future__ import annotations

from flask import Blueprint, current_app

from chirpy.api.deps import json_response, timing
from chirpy.core.extensions import get_datastore
from chirpy.services._shared.errors import StorageError

bp = Blueprint("health", __name__)


@bp.get("/healthz")
@timing
def healthcheck():
    """Return application and datastore health information."""

    store_status = "ok"
    try:
        get_datastore().stats()
    except StorageError:
        current_app.logger.exception("healthcheck.store_error")
        store_status = "fail"
    payload = {
        "status": "ok" if store_status == "ok" else "degraded",
        "store": store_status,
        "version": current_app.config.get("APP_VERSION", "dev"),
    }
    return json_response(payload, status=200 if store_status == "ok" else 503)
