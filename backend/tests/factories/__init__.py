"""Factory Boy definitions for service input DTOs."""

from __future__ import annotations

import factory


class DTOFactory(factory.Factory):
    """Base class for frozen dataclass DTOs (plain construction, no session)."""

    class Meta:
        abstract = True
