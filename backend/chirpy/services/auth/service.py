# chirpy/services/auth/service.py
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from chirpy.infra.security import (
    TokenKind,
    extract_bearer_token,
    extract_user_id,
    issue_token,
)
from chirpy.services._shared.base import BaseService, ServiceContext
from chirpy.services._shared.errors import InvalidTokenError, NotFoundError
from chirpy.services.accounts import AccountService, UserAuthIn
from chirpy.services.auth.dto import AuthTokenConfig, LoginIn, LoginOut

if TYPE_CHECKING:
    from chirpy.datastore import Datastore

log = logging.getLogger(__name__)


class AuthService(BaseService):
    """
    Authentication lifecycle service (login / refresh / revoke / identify).

    Access tokens are short-lived and never revoked. Refresh tokens are
    honoured only while they verify *and* are absent from the datastore's
    revoked set.
    """

    def __init__(
        self,
        *,
        datastore: Datastore,
        token_cfg: AuthTokenConfig,
        ctx: ServiceContext | None = None,
    ) -> None:
        """
        Initialize the service with its dependencies.

        :param datastore: Shared datastore (users, revoked tokens).
        :param token_cfg: Signing configuration.
        :param ctx: Optional request-scoped context.
        """
        super().__init__(datastore=datastore, ctx=ctx)
        self.cfg = token_cfg
        self.accounts = AccountService(datastore=datastore, ctx=self.ctx)

    # ------------------------------------------------------------------ #
    # Login
    # ------------------------------------------------------------------ #

    def login(self, dto: LoginIn) -> LoginOut:
        """
        Authenticate credentials and issue a fresh token pair.

        :param dto: Login input.
        :returns: User view with access and refresh tokens.
        :raises InvalidCredentialsError: If credentials are invalid.
        """
        user = self.accounts.authenticate(UserAuthIn(email=dto.email, password=dto.password))
        return LoginOut(
            id=user.id,
            email=user.email,
            is_upgraded=user.is_upgraded,
            access_token=issue_token(TokenKind.ACCESS, self.cfg.secret, user.id),
            refresh_token=issue_token(TokenKind.REFRESH, self.cfg.secret, user.id),
        )

    # ------------------------------------------------------------------ #
    # Refresh
    # ------------------------------------------------------------------ #

    def refresh(self, raw_refresh: str) -> str:
        """
        Exchange a refresh token for a new access token.

        The refresh token itself is not rotated; it stays usable until it
        expires or is revoked.

        :raises InvalidTokenError: If the token does not verify, was revoked,
            or its user no longer exists.
        """
        user_id = extract_user_id(TokenKind.REFRESH, self.cfg.secret, raw_refresh)
        if self.datastore.is_token_revoked(raw_refresh):
            log.info(
                "auth.refresh_rejected user_id=%s reason=revoked request_id=%s",
                user_id,
                self.ctx.request_id,
            )
            raise InvalidTokenError()
        try:
            self.datastore.get_user(user_id)
        except NotFoundError:
            log.info(
                "auth.refresh_rejected user_id=%s reason=unknown_user request_id=%s",
                user_id,
                self.ctx.request_id,
            )
            raise InvalidTokenError() from None
        return issue_token(TokenKind.ACCESS, self.cfg.secret, user_id)

    # ------------------------------------------------------------------ #
    # Revoke
    # ------------------------------------------------------------------ #

    def revoke(self, raw_refresh: str) -> None:
        """
        Revoke a refresh token. Revoking it again is a no-op.

        :raises InvalidTokenError: If the token is not a verifiable refresh token.
        """
        user_id = extract_user_id(TokenKind.REFRESH, self.cfg.secret, raw_refresh)
        self.datastore.revoke_token(raw_refresh)
        log.info("auth.refresh_revoked user_id=%s request_id=%s", user_id, self.ctx.request_id)

    # ------------------------------------------------------------------ #
    # Request identification
    # ------------------------------------------------------------------ #

    def identify(self, headers: Mapping[str, str]) -> int:
        """
        Return the user id asserted by the request's access token.

        :raises MissingTokenError: If there is no ``Authorization`` header.
        :raises MalformedTokenError: If it is not ``Bearer <token>``.
        :raises InvalidTokenError: If the token does not verify as an access token.
        """
        raw = extract_bearer_token(headers)
        return extract_user_id(TokenKind.ACCESS, self.cfg.secret, raw)
