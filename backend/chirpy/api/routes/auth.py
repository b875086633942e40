"""Authentication endpoints: login and the refresh token lifecycle."""

from __future__ import annotations

from flask import Blueprint, request

from chirpy.api.deps import auth_service, empty_response, json_response, load_json, timing
from chirpy.infra.security import extract_bearer_token
from chirpy.schemas import AccessTokenSchema, CredentialsSchema, LoginResponseSchema
from chirpy.services.auth import LoginIn

bp = Blueprint("auth", __name__)

credentials_schema = CredentialsSchema()
login_response_schema = LoginResponseSchema()
access_token_schema = AccessTokenSchema()


@bp.post("/login")
@timing
def login():
    """Authenticate credentials and issue an access/refresh token pair."""

    data = load_json(credentials_schema)
    result = auth_service().login(LoginIn(**data))
    return json_response(login_response_schema.dump(result))


@bp.post("/refresh")
@timing
def refresh():
    """Exchange the bearer refresh token for a new access token."""

    raw = extract_bearer_token(request.headers)
    token = auth_service().refresh(raw)
    return json_response(access_token_schema.dump({"token": token}))


@bp.post("/revoke")
@timing
def revoke():
    """Revoke the bearer refresh token."""

    raw = extract_bearer_token(request.headers)
    auth_service().revoke(raw)
    return empty_response()
