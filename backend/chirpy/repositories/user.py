"""User repository for lookup and uniqueness checks."""

from __future__ import annotations

from dataclasses import replace

from chirpy.models import User, normalize_email
from chirpy.repositories.base import BaseRepository


class UserRepository(BaseRepository):
    """Persistence-only repository for :class:`User`.

    Email is a secondary index: lookups normalise it and scan, since the
    document is keyed by numeric id.
    """

    def get(self, user_id: int) -> User | None:
        return self.document.users.get(user_id)

    def get_by_email(self, email: str) -> User | None:
        """Fetch a user by email (case-insensitive).

        :param email: Email address to normalise and search.
        :type email: str
        :returns: User instance or ``None`` when not found.
        :rtype: User | None
        """
        wanted = normalize_email(email)
        for user in self.document.users.values():
            if normalize_email(user.email) == wanted:
                return user
        return None

    def exists_by_email(self, email: str, *, exclude_id: int | None = None) -> bool:
        """Return ``True`` when another user already holds ``email``.

        :param exclude_id: User to ignore, so a profile update may keep its own email.
        """
        user = self.get_by_email(email)
        return user is not None and user.id != exclude_id

    def next_id(self) -> int:
        # Users are never deleted, so max+1 never hands out an old id.
        return max(self.document.users, default=0) + 1

    def add(self, *, email: str, hashed_password: str) -> User:
        user = User(id=self.next_id(), email=normalize_email(email), hashed_password=hashed_password)
        self.document.users[user.id] = user
        return user

    def update(self, user: User, **changes) -> User:
        """Replace ``user`` with a copy carrying ``changes``."""
        if "email" in changes:
            changes["email"] = normalize_email(changes["email"])
        updated = replace(user, **changes)
        self.document.users[updated.id] = updated
        return updated
