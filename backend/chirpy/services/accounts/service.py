# chirpy/services/accounts/service.py
from __future__ import annotations

import logging

from chirpy.infra.security import hash_password, verify_password
from chirpy.services._shared.base import BaseService
from chirpy.services._shared.errors import InvalidCredentialsError, NotFoundError
from chirpy.services.accounts.dto import (
    UserAuthIn,
    UserPublicOut,
    UserRegisterIn,
    UserUpdateIn,
)

log = logging.getLogger(__name__)


class AccountService(BaseService):
    """
    Account directory: registration, credential checks, profile changes.

    Passwords are hashed here, before anything reaches the datastore.
    """

    def register(self, dto: UserRegisterIn) -> UserPublicOut:
        """
        Create an account.

        :param dto: Registration input.
        :returns: Public view of the created user.
        :raises ConflictError: If the email is already registered.
        """
        hashed = hash_password(dto.password)
        user = self.datastore.create_user(dto.email, hashed)
        return UserPublicOut.from_model(user)

    def authenticate(self, dto: UserAuthIn) -> UserPublicOut:
        """
        Check an email/password pair.

        Unknown email and wrong password raise the same error so callers
        cannot probe which accounts exist.

        :raises InvalidCredentialsError: If the pair does not match.
        """
        try:
            user = self.datastore.get_user_by_email(dto.email)
        except NotFoundError:
            log.info("auth.login_rejected reason=unknown_email request_id=%s", self.ctx.request_id)
            raise InvalidCredentialsError() from None
        if not verify_password(dto.password, user.hashed_password):
            log.info(
                "auth.login_rejected user_id=%s reason=password request_id=%s",
                user.id,
                self.ctx.request_id,
            )
            raise InvalidCredentialsError()
        return UserPublicOut.from_model(user)

    def update_profile(self, user_id: int, dto: UserUpdateIn) -> UserPublicOut:
        """
        Replace email and password of ``user_id``.

        :raises NotFoundError: If the user no longer exists.
        :raises ConflictError: If another account holds the new email.
        """
        hashed = hash_password(dto.password)
        user = self.datastore.update_user(user_id, dto.email, hashed)
        return UserPublicOut.from_model(user)

    def upgrade(self, user_id: int) -> None:
        self.datastore.upgrade_user(user_id)
