"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and should never import or depend
on Flask or HTTP directly. They serve as stable contracts between the
datastore, repositories, security helpers and application services.

The translation to HTTP responses (RFC 7807) is handled by
``chirpy/core/errors.py`` via ``BaseService.translate_exceptions()``.
"""

from __future__ import annotations

from dataclasses import dataclass

# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - They can be safely raised from the datastore or domain logic.
    - The API layer later translates them to APIError.
    """

    pass


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


@dataclass(slots=True)
class NotFoundError(ServiceError):
    """
    Raised when an entity is not found in the datastore.

    :param entity: Entity name (e.g., "User").
    :type entity: str
    :param key: Identifier or search key.
    :type key: str | int
    """

    entity: str
    key: str | int

    def __str__(self) -> str:
        return f"{self.entity} not found: {self.key}"


@dataclass(slots=True)
class ConflictError(ServiceError):
    """
    Raised when a uniqueness rule is violated (e.g. an email already in use).

    :param entity: Entity name (e.g., "User").
    :type entity: str
    :param detail: Short human-readable explanation.
    :type detail: str
    """

    entity: str
    detail: str

    def __str__(self) -> str:
        return f"Conflict on {self.entity}: {self.detail}"


class AuthorizationError(ServiceError):
    """Raised when an authenticated actor may not touch a resource."""

    def __init__(self, message: str = "Forbidden") -> None:
        super().__init__(message)


class InvalidCredentialsError(ServiceError):
    """Raised when an email/password pair or an API key does not match."""

    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message)


class ChirpTooLongError(ServiceError):
    """Raised when a chirp body exceeds the maximum length."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"Chirp is too long (max {limit} characters)")
        self.limit = limit


# --------------------------------------------------------------------------- #
# Token errors
# --------------------------------------------------------------------------- #


class InvalidTokenError(ServiceError):
    """
    Raised when a bearer token cannot be honoured.

    Bad signature, wrong issuer, expiry, missing claims, non-numeric subject and
    server-side revocation all collapse into this single error so callers
    cannot learn which check failed.
    """

    def __init__(self, message: str = "Invalid token") -> None:
        super().__init__(message)


class AuthorizationHeaderError(ServiceError):
    """Base for problems with the ``Authorization`` header itself."""


class MissingTokenError(AuthorizationHeaderError):
    """Raised when the ``Authorization`` header is absent."""

    def __init__(self, message: str = "Missing authorization header") -> None:
        super().__init__(message)


class MalformedTokenError(AuthorizationHeaderError):
    """Raised when the ``Authorization`` header is not ``<Scheme> <value>``."""

    def __init__(self, message: str = "Malformed authorization header") -> None:
        super().__init__(message)


# --------------------------------------------------------------------------- #
# Storage errors
# --------------------------------------------------------------------------- #


class StorageError(ServiceError):
    """
    Raised when the backing document cannot be read, parsed or written.

    The failed operation is never partially applied.
    """


class StoreBusyError(StorageError):
    """Raised when the store lock could not be acquired within the timeout."""

    def __init__(self, timeout: float | None) -> None:
        super().__init__(f"Datastore lock not acquired within {timeout}s")
        self.timeout = timeout


class PasswordHashingError(ServiceError):
    """Raised when a password hash could not be produced."""
