"""Tests for :class:`chirpy.services.webhooks.WebhookService`."""

from __future__ import annotations

import pytest

from chirpy.services._shared.errors import (
    InvalidCredentialsError,
    MissingTokenError,
    NotFoundError,
    ServiceError,
)
from chirpy.services.webhooks import USER_UPGRADED, PolkaEventIn, WebhookService

API_KEY = "polka-secret"
AUTH = {"Authorization": f"ApiKey {API_KEY}"}


@pytest.fixture()
def service(datastore) -> WebhookService:
    return WebhookService(datastore=datastore, api_key=API_KEY)


def test_upgrade_event_upgrades_user(service, register_user, datastore):
    user, _ = register_user()

    service.handle_polka_event(AUTH, PolkaEventIn(event=USER_UPGRADED, user_id=user.id))

    assert datastore.get_user(user.id).is_upgraded is True


def test_other_events_are_ignored(service, register_user, datastore):
    user, _ = register_user()

    service.handle_polka_event(AUTH, PolkaEventIn(event="user.payment_failed", user_id=user.id))

    assert datastore.get_user(user.id).is_upgraded is False


def test_unknown_user(service):
    with pytest.raises(NotFoundError):
        service.handle_polka_event(AUTH, PolkaEventIn(event=USER_UPGRADED, user_id=77))


def test_upgrade_without_user_id(service):
    with pytest.raises(ServiceError):
        service.handle_polka_event(AUTH, PolkaEventIn(event=USER_UPGRADED))


def test_wrong_key(service, register_user, datastore):
    user, _ = register_user()

    with pytest.raises(InvalidCredentialsError):
        service.handle_polka_event(
            {"Authorization": "ApiKey nope"}, PolkaEventIn(event=USER_UPGRADED, user_id=user.id)
        )
    assert datastore.get_user(user.id).is_upgraded is False


def test_missing_key(service):
    with pytest.raises(MissingTokenError):
        service.handle_polka_event({}, PolkaEventIn(event="anything"))


def test_unconfigured_key_rejects_everything(datastore):
    service = WebhookService(datastore=datastore, api_key="")

    with pytest.raises(InvalidCredentialsError):
        service.verify_api_key({"Authorization": "ApiKey x"})
