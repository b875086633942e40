# chirpy/services/webhooks/service.py
from __future__ import annotations

import hmac
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from chirpy.infra.security import extract_api_key
from chirpy.services._shared.base import BaseService, ServiceContext
from chirpy.services._shared.errors import InvalidCredentialsError, ServiceError
from chirpy.services.webhooks.dto import PolkaEventIn

if TYPE_CHECKING:
    from chirpy.datastore import Datastore

log = logging.getLogger(__name__)

USER_UPGRADED = "user.upgraded"


class WebhookService(BaseService):
    """Handle callbacks from the Polka payment provider."""

    def __init__(
        self, *, datastore: Datastore, api_key: str, ctx: ServiceContext | None = None
    ) -> None:
        super().__init__(datastore=datastore, ctx=ctx)
        self.api_key = api_key

    def verify_api_key(self, headers: Mapping[str, str]) -> None:
        """
        Check the ``ApiKey`` credential against the configured key.

        :raises MissingTokenError: If the ``Authorization`` header is absent.
        :raises MalformedTokenError: If it is not ``ApiKey <key>``.
        :raises InvalidCredentialsError: If the key does not match.
        """
        provided = extract_api_key(headers)
        if not self.api_key or not hmac.compare_digest(
            provided.encode("utf-8"), self.api_key.encode("utf-8")
        ):
            log.warning("webhook.polka_rejected reason=api_key request_id=%s", self.ctx.request_id)
            raise InvalidCredentialsError("Invalid API key")

    def handle_polka_event(self, headers: Mapping[str, str], dto: PolkaEventIn) -> None:
        """
        Apply a Polka event.

        ``user.upgraded`` upgrades the user; every other event is acknowledged
        and ignored.

        :raises InvalidCredentialsError: See :meth:`verify_api_key`.
        :raises NotFoundError: If the upgraded user does not exist.
        """
        self.verify_api_key(headers)
        if dto.event != USER_UPGRADED:
            log.info("webhook.polka_ignored event=%s request_id=%s", dto.event, self.ctx.request_id)
            return
        if dto.user_id is None:
            raise ServiceError("user.upgraded event requires data.user_id")
        self.datastore.upgrade_user(dto.user_id)
