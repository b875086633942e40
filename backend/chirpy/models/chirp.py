"""Chirp entity."""

from __future__ import annotations

from dataclasses import dataclass

MAX_CHIRP_LENGTH = 140


@dataclass(frozen=True, slots=True)
class Chirp:
    """A short message posted by a user."""

    id: int
    author_id: int
    body: str
