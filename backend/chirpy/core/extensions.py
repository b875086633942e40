"""Process-wide resources bound to the Flask app."""

from __future__ import annotations

import logging
from pathlib import Path

from flask import Flask, current_app

from chirpy.datastore import Datastore

log = logging.getLogger(__name__)

DATASTORE_KEY = "chirpy.datastore"


def init_app(app: Flask) -> None:
    """Open the datastore and attach it to ``app.extensions``.

    Parameters
    ----------
    app: flask.Flask
        Application providing ``DATABASE_PATH``, ``STORE_LOCK_TIMEOUT`` and
        ``RESET_STORE_ON_START``.

    Raises
    ------
    StorageError
        When an existing document is unreadable or corrupt. Startup stops.
    """
    path = Path(app.config["DATABASE_PATH"])
    if app.config.get("RESET_STORE_ON_START") and path.exists():
        log.warning("store.reset_on_start path=%s", path)
        path.unlink()

    app.extensions[DATASTORE_KEY] = Datastore.open(
        path, lock_timeout=app.config.get("STORE_LOCK_TIMEOUT")
    )


def get_datastore(app: Flask | None = None) -> Datastore:
    """Return the datastore of ``app`` (default: the current app)."""
    target = app or current_app
    try:
        return target.extensions[DATASTORE_KEY]
    except KeyError:
        raise RuntimeError("Datastore is not initialized. Call init_app() first.") from None
