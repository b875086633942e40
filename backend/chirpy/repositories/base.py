"""Repository base over the in-memory document.

Repositories are persistence-only:

- They read and replace entries of the :class:`~chirpy.models.Document`
  loaded by the current unit of work.
- They never load, persist, or lock; the unit of work owns that cycle.
- They never implement use-case policy (ownership, validation).
"""

from __future__ import annotations

from chirpy.models import Document


class BaseRepository:
    """Bind a repository to the document of one unit of work."""

    def __init__(self, *, document: Document) -> None:
        self.document = document
