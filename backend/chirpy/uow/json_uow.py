"""
JSON-file implementation of UnitOfWork.
"""

from __future__ import annotations

from chirpy.models import Document
from chirpy.repositories import ChirpRepository, RevokedTokenRepository, UserRepository
from chirpy.services._shared.errors import StoreBusyError
from chirpy.storage import JsonFileStore
from chirpy.uow.base import UnitOfWork

_UNSET = object()


class JsonRepositoryContainer:
    """Provide repository instances that share one loaded document."""

    def __init__(self, store: JsonFileStore, *, timeout: float | None | object = _UNSET) -> None:
        self.store = store
        self.timeout: float | None = (
            store.lock_timeout if timeout is _UNSET else timeout  # type: ignore[assignment]
        )
        self._held = False
        self._bind(Document())

    def _bind(self, document: Document) -> None:
        self.document = document
        self.users = UserRepository(document=document)
        self.chirps = ChirpRepository(document=document)
        self.revoked_tokens = RevokedTokenRepository(document=document)


class JsonUnitOfWork(JsonRepositoryContainer, UnitOfWork):
    """
    Read-write UoW: exclusive lock, load, mutate in memory, persist on success.

    Leaving the block with an exception discards the in-memory document, so a
    failed operation never reaches disk. The lock is released on every path.

    Parameters
    ----------
    store:
        File store owning the path and the lock.
    timeout:
        Seconds to wait for the lock; defaults to ``store.lock_timeout``.
    """

    def __enter__(self) -> JsonUnitOfWork:
        if not self.store.lock.acquire_write(self.timeout):
            raise StoreBusyError(self.timeout)
        self._held = True
        try:
            self._bind(self.store.load())
        except BaseException:
            self._release()
            raise
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            if exc_type is None:
                self.commit()
            else:
                self.rollback()
        finally:
            self._release()

    def commit(self) -> None:
        try:
            self.store.persist(self.document)
        except Exception:
            self.rollback()
            raise

    def rollback(self) -> None:
        # Nothing was written; drop the mutated copy.
        self._bind(Document())

    def _release(self) -> None:
        if self._held:
            self._held = False
            self.store.lock.release_write()


class JsonReadOnlyUnitOfWork(JsonRepositoryContainer, UnitOfWork):
    """
    Read-only UoW: shared lock, load, read, release.

    Several read-only units run concurrently; none of them overlaps a writer.
    Changes made to the loaded document are never persisted and ``commit()``
    is disallowed.
    """

    def __enter__(self) -> JsonReadOnlyUnitOfWork:
        if not self.store.lock.acquire_read(self.timeout):
            raise StoreBusyError(self.timeout)
        self._held = True
        try:
            self._bind(self.store.load())
        except BaseException:
            self._release()
            raise
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._release()

    def commit(self) -> None:
        """
        Disallow commit in read-only Unit of Work.

        :raises RuntimeError: always, to prevent accidental writes.
        """
        raise RuntimeError("Read-only UnitOfWork does not allow commit().")

    def rollback(self) -> None:
        """Drop whatever was loaded; nothing is ever written."""
        self._bind(Document())

    def _release(self) -> None:
        if self._held:
            self._held = False
            self.store.lock.release_read()
