"""Chirp endpoints."""

from __future__ import annotations

from flask import Blueprint, g, request

from chirpy.api.deps import (
    chirp_service,
    empty_response,
    json_response,
    load_json,
    require_auth,
    timing,
)
from chirpy.schemas import ChirpCreateSchema, ChirpFilterSchema, ChirpSchema
from chirpy.services.chirps import ChirpCreateIn, ChirpListIn

bp = Blueprint("chirps", __name__)

chirp_schema = ChirpSchema()
chirp_list_schema = ChirpSchema(many=True)
chirp_create_schema = ChirpCreateSchema()
chirp_filter_schema = ChirpFilterSchema()


@bp.post("")
@require_auth
@timing
def create_chirp():
    """Post a chirp as the authenticated user."""

    data = load_json(chirp_create_schema)
    chirp = chirp_service().post(g.user_id, ChirpCreateIn(**data))
    return json_response(chirp_schema.dump(chirp), status=201)


@bp.get("")
@timing
def list_chirps():
    """List chirps, optionally by author, sorted by id."""

    filters = chirp_filter_schema.load(request.args)
    chirps = chirp_service().list(ChirpListIn(**filters))
    return json_response(chirp_list_schema.dump(chirps))


@bp.get("/<int:chirp_id>")
@timing
def get_chirp(chirp_id: int):
    """Return one chirp."""

    return json_response(chirp_schema.dump(chirp_service().get(chirp_id)))


@bp.delete("/<int:chirp_id>")
@require_auth
@timing
def delete_chirp(chirp_id: int):
    """Delete a chirp owned by the authenticated user."""

    chirp_service().delete(g.user_id, chirp_id)
    return empty_response()
