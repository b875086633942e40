"""Application settings with environment-based simple classes."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any, Final

from dotenv import load_dotenv

# Public selector env var (keep neutral name to avoid collisions)
ENV_VAR: Final[str] = "APP_ENV"  # 'development' | 'testing' | 'production'

PLACEHOLDER_JWT_SECRET: Final[str] = "CHANGE_ME_JWT"

# Loads .env during development (no-op when the file is absent)
load_dotenv()


def env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean flag from an environment variable.

    Parameters
    ----------
    name: str
        Environment variable to inspect.
    default: bool, optional
        Value returned when the variable is unset. Defaults to ``False``.

    Returns
    -------
    bool
        ``True`` if the value resembles ``{"1", "true", "yes", "y", "on"}``
        ignoring case; otherwise ``False`` or ``default`` when missing.
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


def env_float(name: str, default: float | None) -> float | None:
    """Parse an optional float; blank or ``"none"`` means no value."""
    val = os.getenv(name)
    if val is None:
        return default
    val = val.strip()
    if not val or val.lower() == "none":
        return None
    return float(val)


class BaseConfig:
    """Base configuration shared across environments.

    Attributes
    ----------
    API_BASE_PREFIX: str
        Root path for registering API blueprints.
    JWT_SECRET_KEY: str
        HMAC key for access and refresh tokens (env ``JWT_SECRET``).
    POLKA_KEY: str
        API key the payment provider presents on webhooks.
    DATABASE_PATH: str
        Location of the JSON document.
    STORE_LOCK_TIMEOUT: float | None
        Seconds a request waits for the datastore lock; ``None`` waits forever.
    RESET_STORE_ON_START: bool
        Delete the document when the app starts (local debugging only).
    JSON_SORT_KEYS: bool
        Keeps JSON output order stable when ``False``.
    PROPAGATE_EXCEPTIONS: bool
        Controls Flask error propagation.
    LOG_LEVEL: str
        Root logging verbosity (``INFO`` by default).
    CORS_ORIGINS: str
        Comma-separated list of allowed origins for CORS.
    CORS_MAX_AGE: int
        Preflight cache lifetime in seconds.
    DEBUG: bool
        Toggles Flask debug mode.
    TESTING: bool
        Enables Flask testing mode when ``True``.

    Notes
    -----
    Values are primarily sourced from environment variables, enabling
    configuration without code changes.
    """

    API_BASE_PREFIX = "/api"

    # Secrets
    JWT_SECRET_KEY = os.getenv("JWT_SECRET", PLACEHOLDER_JWT_SECRET)
    POLKA_KEY = os.getenv("POLKA_KEY", "")

    # Datastore
    DATABASE_PATH = os.getenv("DATABASE_PATH", "database.json")
    STORE_LOCK_TIMEOUT = env_float("STORE_LOCK_TIMEOUT", 10.0)
    RESET_STORE_ON_START = env_bool("RESET_STORE_ON_START", False)

    # Flask & JSON
    JSON_SORT_KEYS = False
    PROPAGATE_EXCEPTIONS = False

    # Logging & CORS
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
    CORS_MAX_AGE = 600

    # Flask built-ins
    DEBUG = False
    TESTING = False


class DevelopmentConfig(BaseConfig):
    """Configuration tailored for local development.

    Notes
    -----
    Enables debug mode by default; ``RESET_STORE_ON_START`` mirrors the
    ``--debug`` switch of earlier deployments.
    """

    DEBUG = env_bool("FLASK_DEBUG", True)


class TestingConfig(BaseConfig):
    """Configuration for automated test runs.

    Notes
    -----
    - Forces ``TESTING`` mode and disables debug logs.
    - Fixed secrets so tests never depend on the environment.
    - Short lock timeout so a stuck lock fails fast.
    - ``DATABASE_PATH`` is expected to be overridden per test.
    """

    TESTING = True
    DEBUG = False
    JWT_SECRET_KEY = "test-jwt-secret-with-at-least-32-bytes!"
    POLKA_KEY = "test-polka-key"
    DATABASE_PATH = os.getenv("TEST_DATABASE_PATH", "test-database.json")
    STORE_LOCK_TIMEOUT = 2.0
    RESET_STORE_ON_START = False


class ProductionConfig(BaseConfig):
    """Configuration defaults for production deployments.

    Notes
    -----
    Keeps debug disabled and refuses the store reset switch.
    """

    DEBUG = False
    PROPAGATE_EXCEPTIONS = False
    RESET_STORE_ON_START = False


# Map names -> classes (simple, explicit)
CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config() -> type[BaseConfig]:
    """Return the configuration class inferred from ``APP_ENV``.

    Returns
    -------
    type[BaseConfig]
        Class to pass to :meth:`flask.Config.from_object`.

    Notes
    -----
    Falls back to :class:`DevelopmentConfig` when ``APP_ENV`` is unset or
    unknown.
    """
    name = os.getenv(ENV_VAR, "development").strip().lower()
    return CONFIG_MAP.get(name, DevelopmentConfig)


def validate_config(config: Mapping[str, Any]) -> None:
    """Refuse to start with unsafe settings.

    Parameters
    ----------
    config:
        Loaded Flask configuration.

    Raises
    ------
    RuntimeError
        When a non-debug, non-testing app still uses the placeholder JWT
        secret, has no Polka key, or asks for a store reset.
    """
    if config.get("DEBUG") or config.get("TESTING"):
        return
    problems: list[str] = []
    if config.get("JWT_SECRET_KEY", PLACEHOLDER_JWT_SECRET) == PLACEHOLDER_JWT_SECRET:
        problems.append("JWT_SECRET must be set")
    if not config.get("POLKA_KEY"):
        problems.append("POLKA_KEY must be set")
    if config.get("RESET_STORE_ON_START"):
        problems.append("RESET_STORE_ON_START is not allowed")
    if problems:
        raise RuntimeError("Invalid production configuration: " + "; ".join(problems))
