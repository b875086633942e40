"""User endpoints."""

from __future__ import annotations

from flask import Blueprint, g

from chirpy.api.deps import account_service, json_response, load_json, require_auth, timing
from chirpy.schemas import CredentialsSchema, UserSchema
from chirpy.services.accounts import UserRegisterIn, UserUpdateIn

bp = Blueprint("users", __name__)

user_schema = UserSchema()
credentials_schema = CredentialsSchema()


@bp.post("")
@timing
def create_user():
    """Register a new account."""

    data = load_json(credentials_schema)
    user = account_service().register(UserRegisterIn(**data))
    return json_response(user_schema.dump(user), status=201)


@bp.put("")
@require_auth
@timing
def update_user():
    """Replace the authenticated user's email and password."""

    data = load_json(credentials_schema)
    user = account_service().update_profile(g.user_id, UserUpdateIn(**data))
    return json_response(user_schema.dump(user))
