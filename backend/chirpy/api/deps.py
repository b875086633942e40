"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Response, current_app, g, jsonify, request
from marshmallow import Schema

from chirpy.core.extensions import get_datastore
from chirpy.core.logger import ensure_request_id
from chirpy.services._shared.base import ServiceContext
from chirpy.services.accounts import AccountService
from chirpy.services.auth import AuthService, AuthTokenConfig
from chirpy.services.chirps import ChirpService
from chirpy.services.webhooks import WebhookService

F = TypeVar("F", bound=Callable[..., Any])


# ------------------------------ Responses ----------------------------------


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def empty_response(status: int = 204) -> Response:
    """Return a body-less response (``204 No Content`` by default)."""

    return current_app.response_class(status=status)


def load_json(schema: Schema) -> dict[str, Any]:
    """Validate the JSON body with ``schema``; invalid input raises ``ValidationError``."""

    return schema.load(request.get_json(silent=True) or {})


# ------------------------------ Services -----------------------------------


def _context() -> ServiceContext:
    return ServiceContext(actor_id=g.get("user_id"), request_id=ensure_request_id())


def account_service() -> AccountService:
    return AccountService(datastore=get_datastore(), ctx=_context())


def chirp_service() -> ChirpService:
    return ChirpService(datastore=get_datastore(), ctx=_context())


def auth_service() -> AuthService:
    return AuthService(
        datastore=get_datastore(),
        token_cfg=AuthTokenConfig(secret=current_app.config["JWT_SECRET_KEY"]),
        ctx=_context(),
    )


def webhook_service() -> WebhookService:
    return WebhookService(
        datastore=get_datastore(),
        api_key=current_app.config.get("POLKA_KEY", ""),
        ctx=_context(),
    )


# ------------------------------ Decorators ---------------------------------


def require_auth(func: F) -> F:
    """Ensure the request carries a valid access token; sets ``g.user_id``."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        g.user_id = auth_service().identify(request.headers)
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request.endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
