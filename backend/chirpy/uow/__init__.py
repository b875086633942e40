"""Unit of Work abstractions and concrete implementations.

This package re-exports the JSON-file unit of work used by the datastore,
alongside the abstract contracts it implements.
"""

from .base import SupportsCommit, UnitOfWork
from .json_uow import JsonReadOnlyUnitOfWork, JsonUnitOfWork

__all__ = [
    "SupportsCommit",
    "UnitOfWork",
    "JsonUnitOfWork",
    "JsonReadOnlyUnitOfWork",
]
