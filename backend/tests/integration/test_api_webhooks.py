"""Integration tests for the Polka webhook."""

from __future__ import annotations

import pytest

from chirpy.core.config import TestingConfig
from tests.helpers.http import assert_problem, login, signup

API_KEY = {"Authorization": f"ApiKey {TestingConfig.POLKA_KEY}"}


@pytest.fixture()
def user(client) -> dict:
    return signup(client, "walt@breakingbad.com")


def test_upgrade(client, user) -> None:
    resp = client.post(
        "/api/polka/webhooks",
        json={"event": "user.upgraded", "data": {"user_id": user["id"]}},
        headers=API_KEY,
    )

    assert resp.status_code == 204
    assert login(client, "walt@breakingbad.com")["is_chirpy_red"] is True


def test_other_event_is_acknowledged(client, user) -> None:
    resp = client.post("/api/polka/webhooks", json={"event": "user.deleted"}, headers=API_KEY)

    assert resp.status_code == 204
    assert login(client, "walt@breakingbad.com")["is_chirpy_red"] is False


def test_unknown_user(client) -> None:
    resp = client.post(
        "/api/polka/webhooks",
        json={"event": "user.upgraded", "data": {"user_id": 404}},
        headers=API_KEY,
    )

    assert_problem(resp, 404)


@pytest.mark.parametrize(
    "headers", [{}, {"Authorization": "ApiKey wrong"}, {"Authorization": "Bearer x"}]
)
def test_bad_api_key(client, user, headers) -> None:
    resp = client.post(
        "/api/polka/webhooks",
        json={"event": "user.upgraded", "data": {"user_id": user["id"]}},
        headers=headers,
    )

    assert_problem(resp, 401)
