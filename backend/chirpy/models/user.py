"""User entity."""

from __future__ import annotations

from dataclasses import dataclass


def normalize_email(value: str) -> str:
    """
    Normalize an email for storage and lookups.

    :param value: Raw email.
    :type value: str
    :returns: Trimmed, lowercased email.
    :rtype: str
    :raises ValueError: If the email is missing or only whitespace.
    """
    if not isinstance(value, str):
        raise ValueError("Email is required.")
    v = value.strip().lower()
    if not v:
        raise ValueError("Email is required.")
    return v


@dataclass(frozen=True, slots=True)
class User:
    """
    Account identity.

    Fields
    ------
    id : int
        Sequential identifier, the physical key in the document.
    email : str
        Login email, stored normalized (lowercase, trimmed). Unique.
    hashed_password : str
        Salted one-way hash; the plaintext is never stored.
    is_upgraded : bool
        Set by the payment provider webhook ("Chirpy Red").
    """

    id: int
    email: str
    hashed_password: str
    is_upgraded: bool = False
