"""Password hashing backed by :mod:`werkzeug.security`."""

from __future__ import annotations

import logging

from werkzeug.security import check_password_hash, generate_password_hash

from chirpy.services._shared.errors import PasswordHashingError

log = logging.getLogger(__name__)


def hash_password(raw: str) -> str:
    """
    Hash a password with a fresh random salt.

    :param raw: Plain text password.
    :type raw: str
    :returns: Encoded hash (``method$salt$hash``).
    :rtype: str
    :raises ValueError: If ``raw`` is empty or not a string.
    :raises PasswordHashingError: If the hash could not be produced.
    """
    if not isinstance(raw, str) or not raw:
        raise ValueError("Password must be a non-empty string.")
    try:
        return generate_password_hash(raw)
    except (ValueError, MemoryError) as exc:
        log.error("password.hash_failed", exc_info=True)
        raise PasswordHashingError("Could not hash password") from exc


def verify_password(raw: str, hashed: str) -> bool:
    """
    Verify a password against a stored hash.

    The digest comparison is constant-time. A stored hash in an unknown format
    (for instance a bcrypt hash written by another implementation) never
    matches.

    :param raw: Plain text password candidate.
    :type raw: str
    :param hashed: Stored hash.
    :type hashed: str
    :returns: ``True`` if it matches; otherwise ``False``.
    :rtype: bool
    """
    if not raw or not hashed:
        return False
    try:
        return check_password_hash(hashed, raw)
    except ValueError:
        log.warning("password.unsupported_hash")
        return False
