# chirpy/services/webhooks/dto.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PolkaEventIn:
    """
    Payment provider event.

    :param event: Event name, e.g. ``"user.upgraded"``.
    :type event: str
    :param user_id: Subject user; only required for ``user.upgraded``.
    :type user_id: int | None
    """

    event: str
    user_id: int | None = None
