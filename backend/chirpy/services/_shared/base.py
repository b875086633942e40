# chirpy/services/_shared/base.py
from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import TYPE_CHECKING

from chirpy.core import errors as api_errors
from chirpy.services._shared.errors import (
    AuthorizationError,
    AuthorizationHeaderError,
    ConflictError,
    InvalidCredentialsError,
    InvalidTokenError,
    NotFoundError,
    PasswordHashingError,
    ServiceError,
    StorageError,
    StoreBusyError,
)
from chirpy.services._shared.policies.common import is_owner

if TYPE_CHECKING:
    from chirpy.datastore import Datastore
    from chirpy.uow import JsonUnitOfWork


@dataclass(slots=True)
class ServiceContext:
    """
    Carry cross-cutting request-scoped data.

    :param actor_id: Authenticated user identifier.
    :param request_id: Correlation id for logging/tracing.
    """

    actor_id: int | None = None
    request_id: str | None = None


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Hold the datastore every operation funnels through.
    * Centralize error translation to API errors.
    * Offer the shared ownership check.

    Notes
    -----
    - Services never read or write the backing file; they go through
      :class:`~chirpy.datastore.Datastore` or one of its units of work.
    - Services stay free of Flask request objects; headers arrive as mappings.
    """

    def __init__(self, *, datastore: Datastore, ctx: ServiceContext | None = None) -> None:
        """
        Initialize the base service.

        :param datastore: Datastore shared by the whole process.
        :type datastore: Datastore
        :param ctx: Optional request-scoped context.
        :type ctx: ServiceContext | None
        """
        self.datastore = datastore
        self.ctx = ctx or ServiceContext()

    # -------------------------- UoW helpers ---------------------------------

    def rw_uow(self) -> JsonUnitOfWork:
        """Open a read-write unit of work for multi-step commands."""
        return self.datastore.rw_uow()

    # -------------------------- Error handling ------------------------------

    @staticmethod
    def translate_exceptions(exc: Exception) -> Exception:
        """
        Map domain/service-level errors to API-level (HTTP) errors.

        :param exc: Exception raised within the service.
        :type exc: Exception
        :returns: Translated exception ready to be re-raised.
        :rtype: Exception
        """
        if isinstance(exc, NotFoundError):
            # → 404 Not Found
            return api_errors.NotFound(str(exc))

        if isinstance(exc, ConflictError):
            # → 409 Conflict
            return api_errors.Conflict(str(exc))

        if isinstance(exc, (InvalidTokenError, AuthorizationHeaderError, InvalidCredentialsError)):
            # → 401 Unauthorized
            return api_errors.Unauthorized(str(exc))

        if isinstance(exc, AuthorizationError):
            # → 403 Forbidden
            return api_errors.Forbidden(str(exc))

        if isinstance(exc, StoreBusyError):
            return api_errors.APIError(
                message="Datastore is busy, retry later",
                status_code=HTTPStatus.SERVICE_UNAVAILABLE,
                code="service_unavailable",
            )

        if isinstance(exc, (StorageError, PasswordHashingError)):
            # Internal detail (paths, causes) stays in the logs.
            return api_errors.APIError(
                message="Internal storage failure",
                status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
                code="internal_server_error",
            )

        # Any other ServiceError subclass → 400 Bad Request
        if isinstance(exc, ServiceError):
            return api_errors.APIError(
                message=str(exc),
                status_code=400,
                code="bad_request",
            )

        # Fallback: return untouched (will bubble up to Flask handler)
        return exc

    # --------------------------- AuthZ --------------------------------

    def ensure_owner(self, actor_id: int | None, owner_id: int, *, msg: str | None = None) -> None:
        """
        Ensure the current actor is the resource owner.

        :param actor_id: Authenticated user id.
        :param owner_id: Expected owner id.
        :type owner_id: int
        :param msg: Optional custom error message.
        :type msg: str | None
        :raises AuthorizationError: If actor is not the owner.
        """
        if not is_owner(actor_id=actor_id, owner_id=owner_id):
            raise AuthorizationError(msg or "You can only modify your own resources.")
