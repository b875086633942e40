"""In-memory form of the whole JSON document."""

from __future__ import annotations

from dataclasses import dataclass, field

from .chirp import Chirp
from .revoked_token import RevokedToken
from .user import User


@dataclass(slots=True)
class Document:
    """
    The single value owned by the store.

    A fresh instance is loaded for every unit of work and discarded afterwards;
    entities inside are frozen, so mutation means replacing map entries.

    :param users: Users keyed by id.
    :param chirps: Chirps keyed by id.
    :param chirp_last_id: Highest chirp id ever assigned. Survives deletions.
    :param revoked_tokens: Revoked refresh tokens keyed by the raw token.
    """

    users: dict[int, User] = field(default_factory=dict)
    chirps: dict[int, Chirp] = field(default_factory=dict)
    chirp_last_id: int = 0
    revoked_tokens: dict[str, RevokedToken] = field(default_factory=dict)
