# chirpy/services/accounts/dto.py
from __future__ import annotations

from dataclasses import dataclass

from chirpy.models import User

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class UserRegisterIn:
    """
    Input DTO for account registration.

    :param email: User email (normalized on write).
    :type email: str
    :param password: Raw password (hashed before storage).
    :type password: str
    """

    email: str
    password: str


@dataclass(frozen=True, slots=True)
class UserAuthIn:
    """
    Input DTO for a credential check.

    :param email: User email as typed by the client.
    :type email: str
    :param password: Raw password candidate.
    :type password: str
    """

    email: str
    password: str


@dataclass(frozen=True, slots=True)
class UserUpdateIn:
    """
    Input DTO for a profile update; both fields are replaced.

    :param email: New email.
    :type email: str
    :param password: New raw password.
    :type password: str
    """

    email: str
    password: str


# --------------------------- Output DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class UserPublicOut:
    """
    Public user view; never carries the password hash.

    :param id: User id.
    :type id: int
    :param email: Normalized email.
    :type email: str
    :param is_upgraded: Whether the account was upgraded by the payment provider.
    :type is_upgraded: bool
    """

    id: int
    email: str
    is_upgraded: bool

    @classmethod
    def from_model(cls, user: User) -> UserPublicOut:
        return cls(id=user.id, email=user.email, is_upgraded=user.is_upgraded)
