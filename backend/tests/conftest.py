"""Pytest fixtures wiring an isolated JSON datastore per test.

Each test gets its own document under ``tmp_path`` so data never leaks
between cases and no test touches the working directory.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from chirpy.core.config import TestingConfig
from chirpy.datastore import Datastore
from chirpy.factory import create_app
from chirpy.services.accounts import AccountService, UserPublicOut
from chirpy.services.auth import AuthTokenConfig
from tests.factories.user import UserRegisterInFactory


@pytest.fixture(scope="session")
def faker():
    """Provide a :class:`faker.Faker` instance seeded for deterministic tests."""
    from faker import Faker

    fk = Faker()
    Faker.seed(1337)
    return fk


@pytest.fixture()
def store_path(tmp_path: Path) -> Path:
    """Location of a not-yet-created datastore file."""
    return tmp_path / "database.json"


@pytest.fixture()
def datastore(store_path: Path) -> Datastore:
    """Bootstrapped datastore with a short lock timeout."""
    return Datastore.open(store_path, lock_timeout=2.0)


@pytest.fixture()
def token_cfg() -> AuthTokenConfig:
    return AuthTokenConfig(secret=TestingConfig.JWT_SECRET_KEY)


@pytest.fixture()
def register_user(datastore: Datastore) -> Callable[..., tuple[UserPublicOut, str]]:
    """Factory registering a user and returning ``(user, raw_password)``."""

    def _register(**overrides) -> tuple[UserPublicOut, str]:
        dto = UserRegisterInFactory(**overrides)
        return AccountService(datastore=datastore).register(dto), dto.password

    return _register


@pytest.fixture()
def app(tmp_path: Path) -> Flask:
    """Create a Flask application bound to a per-test datastore file.

    Returns
    -------
    flask.Flask
        Application instance with :class:`TestingConfig` applied.
    """

    class _Config(TestingConfig):
        DATABASE_PATH = str(tmp_path / "api-database.json")
        LOG_LEVEL = "WARNING"

    return create_app(_Config)


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Return a Flask test client."""
    return app.test_client()


@pytest.fixture()
def freeze_time() -> Callable[[str | None], object]:
    """Factory returning :func:`freezegun.freeze_time`.

    Examples
    --------
    >>> def test_with_frozen_time(freeze_time):
    ...     with freeze_time("2024-01-01"):
    ...         ...
    """

    from freezegun import freeze_time as _freeze_time

    def _factory(target: str | None = None) -> object:
        return _freeze_time(target or "2024-01-01")

    return _factory
