"""Chirp repository."""

from __future__ import annotations

from chirpy.models import Chirp
from chirpy.repositories.base import BaseRepository


class ChirpRepository(BaseRepository):
    """Persistence-only repository for :class:`Chirp`."""

    def get(self, chirp_id: int) -> Chirp | None:
        return self.document.chirps.get(chirp_id)

    def list(self, *, author_id: int | None = None) -> list[Chirp]:
        """Return chirps ordered by ascending id, optionally for one author."""
        chirps = sorted(self.document.chirps.values(), key=lambda c: c.id)
        if author_id is not None:
            chirps = [c for c in chirps if c.author_id == author_id]
        return chirps

    def add(self, *, author_id: int, body: str) -> Chirp:
        """Assign the next id and insert.

        The counter and the chirp live in the same document, so both reach disk
        in the same persist.
        """
        self.document.chirp_last_id += 1
        chirp = Chirp(id=self.document.chirp_last_id, author_id=author_id, body=body)
        self.document.chirps[chirp.id] = chirp
        return chirp

    def delete(self, chirp_id: int) -> bool:
        """Remove a chirp; the id counter is left as is."""
        return self.document.chirps.pop(chirp_id, None) is not None
