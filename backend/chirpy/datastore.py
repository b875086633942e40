"""
Datastore facade over the JSON document.

Every public method runs exactly one unit of work: reads take the shared side
of the store lock, writes take the exclusive side and persist on success.
Entities returned are frozen copies; mutating them never touches the store.
"""

from __future__ import annotations

import logging
import os
from datetime import UTC, datetime

from chirpy.models import Chirp, Document, User
from chirpy.services._shared.errors import ConflictError, NotFoundError
from chirpy.storage import JsonFileStore
from chirpy.uow import JsonReadOnlyUnitOfWork, JsonUnitOfWork

log = logging.getLogger(__name__)


class Datastore:
    """
    Typed operations over a single :class:`JsonFileStore`.

    Parameters
    ----------
    store:
        Backing file store. Constructing it already bootstrapped or validated
        the file.

    Notes
    -----
    - Errors are raised, never returned: ``NotFoundError``, ``ConflictError``,
      ``StorageError`` and ``StoreBusyError``.
    - A failed write leaves the file exactly as it was.
    """

    def __init__(self, store: JsonFileStore) -> None:
        self.store = store

    @classmethod
    def open(
        cls, path: str | os.PathLike[str], *, lock_timeout: float | None = None
    ) -> Datastore:
        """Create the store at ``path`` (bootstrapping it if missing)."""
        return cls(JsonFileStore(path, lock_timeout=lock_timeout))

    # -------------------------- UoW helpers ---------------------------------

    def rw_uow(self) -> JsonUnitOfWork:
        """
        Create a read-write Unit of Work.

        :returns: Read-write UoW instance.
        :rtype: JsonUnitOfWork
        """
        return JsonUnitOfWork(self.store)

    def ro_uow(self) -> JsonReadOnlyUnitOfWork:
        """
        Create a read-only Unit of Work.

        :returns: Read-only UoW instance.
        :rtype: JsonReadOnlyUnitOfWork
        """
        return JsonReadOnlyUnitOfWork(self.store)

    # ------------------------------ Users -----------------------------------

    def create_user(self, email: str, hashed_password: str) -> User:
        """
        Insert a new user with the next sequential id.

        :raises ConflictError: If another user already holds ``email``.
        :raises ValueError: If ``email`` is blank.
        """
        with self.rw_uow() as uow:
            if uow.users.exists_by_email(email):
                raise ConflictError("User", "email already in use")
            user = uow.users.add(email=email, hashed_password=hashed_password)
        log.info("user.created id=%s", user.id)
        return user

    def get_user(self, user_id: int) -> User:
        with self.ro_uow() as uow:
            user = uow.users.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    def get_user_by_email(self, email: str) -> User:
        with self.ro_uow() as uow:
            user = uow.users.get_by_email(email)
        if user is None:
            raise NotFoundError("User", email)
        return user

    def update_user(self, user_id: int, email: str, hashed_password: str) -> User:
        """
        Replace a user's email and password hash.

        The uniqueness check against *other* users runs in the same write
        cycle as the update, so two concurrent updates cannot both claim the
        same address.

        :raises NotFoundError: If the user does not exist.
        :raises ConflictError: If a different user already holds ``email``.
        """
        with self.rw_uow() as uow:
            user = uow.users.get(user_id)
            if user is None:
                raise NotFoundError("User", user_id)
            if uow.users.exists_by_email(email, exclude_id=user_id):
                raise ConflictError("User", "email already in use")
            updated = uow.users.update(user, email=email, hashed_password=hashed_password)
        log.info("user.updated id=%s", user_id)
        return updated

    def upgrade_user(self, user_id: int) -> None:
        """Set the upgraded flag; upgrading an upgraded user is a no-op."""
        with self.rw_uow() as uow:
            user = uow.users.get(user_id)
            if user is None:
                raise NotFoundError("User", user_id)
            if not user.is_upgraded:
                uow.users.update(user, is_upgraded=True)
                log.info("user.upgraded id=%s", user_id)

    # ------------------------------ Chirps ----------------------------------

    def create_chirp(self, author_id: int, body: str) -> Chirp:
        """
        Store a chirp under the next id.

        The body is stored as given; validation and author checks belong to
        the caller.
        """
        with self.rw_uow() as uow:
            chirp = uow.chirps.add(author_id=author_id, body=body)
        log.info("chirp.created id=%s author_id=%s", chirp.id, author_id)
        return chirp

    def get_chirp(self, chirp_id: int) -> Chirp:
        with self.ro_uow() as uow:
            chirp = uow.chirps.get(chirp_id)
        if chirp is None:
            raise NotFoundError("Chirp", chirp_id)
        return chirp

    def list_chirps(self) -> list[Chirp]:
        """Return every chirp ordered by ascending id."""
        with self.ro_uow() as uow:
            return uow.chirps.list()

    def delete_chirp(self, chirp_id: int) -> None:
        """Remove a chirp. Its id is never handed out again."""
        with self.rw_uow() as uow:
            if not uow.chirps.delete(chirp_id):
                raise NotFoundError("Chirp", chirp_id)
        log.info("chirp.deleted id=%s", chirp_id)

    # -------------------------- Revoked tokens ------------------------------

    def revoke_token(self, raw_token: str) -> None:
        """Record ``raw_token`` as revoked; revoking twice keeps the first time."""
        with self.rw_uow() as uow:
            uow.revoked_tokens.add(raw_token, revoked_at=datetime.now(UTC))

    def is_token_revoked(self, raw_token: str) -> bool:
        with self.ro_uow() as uow:
            return uow.revoked_tokens.is_revoked(raw_token)

    # ------------------------------ Admin -----------------------------------

    def reset(self) -> None:
        """Replace the whole document with an empty one."""
        with self.store.lock.write_locked(self.store.lock_timeout):
            self.store.persist(Document())
        log.warning("store.reset path=%s", self.store.path)

    def stats(self) -> dict[str, int]:
        """Return entity counts, used by the ``store stats`` command."""
        with self.ro_uow() as uow:
            doc = uow.document
            return {
                "users": len(doc.users),
                "chirps": len(doc.chirps),
                "chirp_last_id": doc.chirp_last_id,
                "revoked_tokens": len(doc.revoked_tokens),
            }
