# chirpy/services/chirps/service.py
from __future__ import annotations

import logging

from chirpy.models.chirp import MAX_CHIRP_LENGTH
from chirpy.services._shared.base import BaseService
from chirpy.services._shared.errors import ChirpTooLongError, NotFoundError, ServiceError
from chirpy.services.chirps.dto import ChirpCreateIn, ChirpListIn, ChirpOut

log = logging.getLogger(__name__)

BANNED_WORDS = frozenset({"kerfuffle", "sharbert", "fornax"})
REPLACEMENT = "****"


def filter_profanity(body: str) -> str:
    """
    Replace banned words with ``****``.

    Matching is case-insensitive on whole space-separated words, so
    ``"Sharbert!"`` is left alone. The result is never longer than ``body``.
    """
    words = body.split(" ")
    return " ".join(REPLACEMENT if w.lower() in BANNED_WORDS else w for w in words)


class ChirpService(BaseService):
    """Chirp ledger: post, list, fetch and owner-only delete."""

    def post(self, author_id: int, dto: ChirpCreateIn) -> ChirpOut:
        """
        Validate, filter and store a chirp.

        :param author_id: Authenticated author.
        :param dto: Chirp input.
        :returns: The stored chirp.
        :raises ServiceError: If the body is blank.
        :raises ChirpTooLongError: If the body exceeds the maximum length.
        :raises NotFoundError: If the author does not exist.
        """
        if not dto.body or not dto.body.strip():
            raise ServiceError("Chirp body must not be empty")
        if len(dto.body) > MAX_CHIRP_LENGTH:
            raise ChirpTooLongError(MAX_CHIRP_LENGTH)
        body = filter_profanity(dto.body)

        # Author check and insert share one write cycle.
        with self.rw_uow() as uow:
            if uow.users.get(author_id) is None:
                raise NotFoundError("User", author_id)
            chirp = uow.chirps.add(author_id=author_id, body=body)
        log.info(
            "chirp.created id=%s author_id=%s request_id=%s",
            chirp.id,
            author_id,
            self.ctx.request_id,
        )
        return ChirpOut.from_model(chirp)

    def list(self, dto: ChirpListIn | None = None) -> list[ChirpOut]:
        """Return chirps by id, ascending unless ``sort="desc"``."""
        dto = dto or ChirpListIn()
        chirps = self.datastore.list_chirps()
        if dto.author_id is not None:
            chirps = [c for c in chirps if c.author_id == dto.author_id]
        if dto.sort == "desc":
            chirps.reverse()
        return [ChirpOut.from_model(c) for c in chirps]

    def get(self, chirp_id: int) -> ChirpOut:
        return ChirpOut.from_model(self.datastore.get_chirp(chirp_id))

    def delete(self, actor_id: int, chirp_id: int) -> None:
        """
        Delete a chirp owned by ``actor_id``.

        :raises NotFoundError: If the chirp does not exist.
        :raises AuthorizationError: If the actor is not the author; the chirp stays.
        """
        chirp = self.datastore.get_chirp(chirp_id)
        self.ensure_owner(actor_id, chirp.author_id, msg="You can only delete your own chirps.")
        self.datastore.delete_chirp(chirp_id)
