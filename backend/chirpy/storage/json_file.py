"""Single-file JSON persistence with atomic replacement."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from contextlib import suppress
from pathlib import Path

from marshmallow import ValidationError

from chirpy.models import Document
from chirpy.schemas.document import document_schema
from chirpy.services._shared.errors import StorageError
from chirpy.storage.rwlock import ReadWriteLock

log = logging.getLogger(__name__)


class JsonFileStore:
    """
    Own the backing file and the lock that guards it.

    Nothing else in the process may read or write ``path``. Units of work take
    ``lock`` and then call :meth:`load` / :meth:`persist`; this class never
    acquires the lock itself.

    Parameters
    ----------
    path:
        Location of the JSON document.
    lock_timeout:
        Default number of seconds a unit of work waits for the lock.
        ``None`` waits forever.

    Raises
    ------
    StorageError
        At construction, when the file cannot be created, or exists but is
        unreadable or does not match the document schema.
    """

    def __init__(self, path: str | os.PathLike[str], *, lock_timeout: float | None = None) -> None:
        self.path = Path(path)
        self.lock = ReadWriteLock()
        self.lock_timeout = lock_timeout
        self._bootstrap()

    # ----------------------------- Bootstrap ---------------------------------

    def _bootstrap(self) -> None:
        if not self.path.exists():
            log.info("store.bootstrap path=%s", self.path)
            self.persist(Document())
            return
        # Validate once so a corrupt file stops startup instead of the first request.
        self.load()

    # ----------------------------- Load / persist ----------------------------

    def load(self) -> Document:
        """Read and decode the whole document.

        :raises StorageError: On I/O failure, invalid JSON, or schema mismatch.
        """
        try:
            raw = self.path.read_bytes()
        except OSError as exc:
            log.error("store.load_failed path=%s", self.path, exc_info=True)
            raise StorageError(f"Cannot read datastore file {self.path}") from exc

        try:
            payload = json.loads(raw.decode("utf-8"))
        except UnicodeDecodeError as exc:
            log.error("store.corrupt path=%s reason=encoding", self.path)
            raise StorageError(f"Datastore file {self.path} is not valid UTF-8") from exc
        except json.JSONDecodeError as exc:
            log.error("store.corrupt path=%s reason=invalid_json", self.path)
            raise StorageError(f"Datastore file {self.path} is not valid JSON") from exc

        if not isinstance(payload, dict):
            raise StorageError(f"Datastore file {self.path} must hold a JSON object")

        try:
            return document_schema.load(payload)
        except ValidationError as exc:
            log.error("store.corrupt path=%s errors=%s", self.path, exc.messages)
            raise StorageError(f"Datastore file {self.path} does not match the schema") from exc

    def persist(self, document: Document) -> None:
        """Atomically replace the file with ``document``.

        The payload is written to a temporary file in the same directory,
        flushed to disk, then renamed over the target, so a reader sees either
        the previous document or the new one and never a partial write.

        :raises StorageError: On serialization or I/O failure. The existing file
            is left untouched.
        """
        try:
            data = json.dumps(document_schema.dump(document))
        except (TypeError, ValueError) as exc:
            log.error("store.serialize_failed path=%s", self.path, exc_info=True)
            raise StorageError("Cannot serialize datastore document") from exc

        directory = self.path.parent
        tmp_name: str | None = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=directory
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(data)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as exc:
            log.error("store.persist_failed path=%s", self.path, exc_info=True)
            raise StorageError(f"Cannot write datastore file {self.path}") from exc
        finally:
            if tmp_name is not None:
                with suppress(OSError):
                    os.unlink(tmp_name)
