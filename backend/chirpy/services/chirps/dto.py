# chirpy/services/chirps/dto.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from chirpy.models import Chirp

SortOrder = Literal["asc", "desc"]


@dataclass(frozen=True, slots=True)
class ChirpCreateIn:
    """
    Input DTO for posting a chirp.

    :param body: Raw message text, before filtering.
    :type body: str
    """

    body: str


@dataclass(frozen=True, slots=True)
class ChirpListIn:
    """
    Listing options.

    :param author_id: Only return chirps by this user when set.
    :type author_id: int | None
    :param sort: ``"asc"`` or ``"desc"`` by id.
    :type sort: str
    """

    author_id: int | None = None
    sort: SortOrder = "asc"


@dataclass(frozen=True, slots=True)
class ChirpOut:
    """
    Public chirp view.

    :param id: Chirp id.
    :param author_id: Id of the posting user.
    :param body: Filtered text as stored.
    """

    id: int
    author_id: int
    body: str

    @classmethod
    def from_model(cls, chirp: Chirp) -> ChirpOut:
        return cls(id=chirp.id, author_id=chirp.author_id, body=chirp.body)
