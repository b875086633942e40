"""Tests for :class:`chirpy.services.auth.AuthService`."""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta

import pytest

from chirpy.infra.security import TokenKind, extract_user_id, issue_token
from chirpy.services._shared.errors import (
    InvalidCredentialsError,
    InvalidTokenError,
    MalformedTokenError,
    MissingTokenError,
)
from chirpy.services._shared.base import ServiceContext
from chirpy.services.auth import AuthService, LoginIn, LoginOut


# ------------------------------ Fixtures ---------------------------------- #
@pytest.fixture()
def service(datastore, token_cfg) -> AuthService:
    return AuthService(datastore=datastore, token_cfg=token_cfg)


@pytest.fixture()
def login(service, register_user) -> LoginOut:
    user, password = register_user()
    return service.login(LoginIn(email=user.email, password=password))


# -------------------------------- Tests ----------------------------------- #
def test_login_issues_token_pair(login, token_cfg):
    assert extract_user_id(TokenKind.ACCESS, token_cfg.secret, login.access_token) == login.id
    assert extract_user_id(TokenKind.REFRESH, token_cfg.secret, login.refresh_token) == login.id


def test_login_invalid_credentials(service, register_user):
    user, _ = register_user()

    with pytest.raises(InvalidCredentialsError):
        service.login(LoginIn(email=user.email, password="nope"))
    with pytest.raises(InvalidCredentialsError):
        service.login(LoginIn(email="missing@example.com", password="x"))


def test_refresh_returns_new_access_token(service, login, token_cfg):
    token = service.refresh(login.refresh_token)

    assert extract_user_id(TokenKind.ACCESS, token_cfg.secret, token) == login.id


def test_refresh_can_be_repeated(service, login):
    service.refresh(login.refresh_token)

    assert service.refresh(login.refresh_token)


def test_refresh_rejects_access_token(service, login):
    with pytest.raises(InvalidTokenError):
        service.refresh(login.access_token)


def test_revoked_refresh_token_is_rejected(service, login, datastore, token_cfg):
    service.revoke(login.refresh_token)

    # Revocation lives in the datastore; the signature itself stays valid.
    assert extract_user_id(TokenKind.REFRESH, token_cfg.secret, login.refresh_token) == login.id
    assert datastore.is_token_revoked(login.refresh_token)
    with pytest.raises(InvalidTokenError):
        service.refresh(login.refresh_token)


def test_revoke_is_idempotent(service, login):
    service.revoke(login.refresh_token)
    service.revoke(login.refresh_token)


def test_revoking_one_session_keeps_the_other(service, register_user):
    user, password = register_user()
    first = service.login(LoginIn(email=user.email, password=password))
    second = service.login(LoginIn(email=user.email, password=password))

    service.revoke(first.refresh_token)

    assert service.refresh(second.refresh_token)


def test_revoke_requires_verifiable_refresh_token(service, login, datastore):
    with pytest.raises(InvalidTokenError):
        service.revoke(login.access_token)
    assert datastore.is_token_revoked(login.access_token) is False


def test_expired_refresh_token_is_rejected(service, login, token_cfg):
    issued = datetime.now(UTC) - timedelta(days=61)
    stale = issue_token(TokenKind.REFRESH, token_cfg.secret, login.id, now=issued)

    with pytest.raises(InvalidTokenError):
        service.refresh(stale)


def test_refresh_for_unknown_user_is_rejected(service, token_cfg):
    orphan = issue_token(TokenKind.REFRESH, token_cfg.secret, 999)

    with pytest.raises(InvalidTokenError):
        service.refresh(orphan)


class TestIdentify:
    def test_returns_user_id(self, service, login):
        headers = {"Authorization": f"Bearer {login.access_token}"}

        assert service.identify(headers) == login.id

    def test_missing_header(self, service):
        with pytest.raises(MissingTokenError):
            service.identify({})

    def test_malformed_header(self, service, login):
        with pytest.raises(MalformedTokenError):
            service.identify({"Authorization": login.access_token})

    def test_refresh_token_cannot_authorize_requests(self, service, login):
        with pytest.raises(InvalidTokenError):
            service.identify({"Authorization": f"Bearer {login.refresh_token}"})


def test_log_lines_carry_request_id(datastore, token_cfg, register_user, caplog):
    caplog.set_level(logging.INFO, logger="chirpy.services")
    user, password = register_user()
    service = AuthService(
        datastore=datastore, token_cfg=token_cfg, ctx=ServiceContext(request_id="req-42")
    )

    with pytest.raises(InvalidCredentialsError):
        service.login(LoginIn(email=user.email, password=password + "x"))
    login = service.login(LoginIn(email=user.email, password=password))
    service.revoke(login.refresh_token)

    messages = [r.getMessage() for r in caplog.records if r.name.startswith("chirpy.services")]
    assert any(m.startswith("auth.login_rejected") and "request_id=req-42" in m for m in messages)
    assert any(m.startswith("auth.refresh_revoked") and "request_id=req-42" in m for m in messages)
