"""File persistence primitives for the JSON document."""

from __future__ import annotations

from .json_file import JsonFileStore
from .rwlock import ReadWriteLock

__all__ = ["JsonFileStore", "ReadWriteLock"]
