# chirpy/services/auth/dto.py
from __future__ import annotations

from dataclasses import dataclass

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class LoginIn:
    """
    Input DTO for login.

    :param email: User email.
    :type email: str
    :param password: Raw password (to be verified).
    :type password: str
    """

    email: str
    password: str


# --------------------------- Output DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class LoginOut:
    """
    Output DTO for a successful login: the user plus a token pair.

    :param id: User id.
    :type id: int
    :param email: Normalized email.
    :type email: str
    :param is_upgraded: Upgrade flag.
    :type is_upgraded: bool
    :param access_token: Encoded access JWT.
    :type access_token: str
    :param refresh_token: Encoded refresh JWT.
    :type refresh_token: str
    """

    id: int
    email: str
    is_upgraded: bool
    access_token: str
    refresh_token: str


# ------------------------------ Config DTO -------------------------------- #


@dataclass(frozen=True, slots=True)
class AuthTokenConfig:
    """
    Token signing configuration.

    :param secret: HMAC key shared by access and refresh tokens.
    :type secret: str
    """

    secret: str
