"""Tests for the ``flask store`` command group."""

from __future__ import annotations

from chirpy.core.extensions import get_datastore
from tests.helpers.http import signup


def test_stats(app, client) -> None:
    signup(client, "walt@breakingbad.com")

    result = app.test_cli_runner().invoke(args=["store", "stats"])

    assert result.exit_code == 0
    assert "users" in result.output
    assert "1" in result.output


def test_reset_requires_confirmation(app, client) -> None:
    signup(client, "walt@breakingbad.com")

    result = app.test_cli_runner().invoke(args=["store", "reset"], input="n\n")

    assert result.exit_code != 0
    assert get_datastore(app).stats()["users"] == 1


def test_reset(app, client) -> None:
    signup(client, "walt@breakingbad.com")

    result = app.test_cli_runner().invoke(args=["store", "reset", "--yes"])

    assert result.exit_code == 0
    assert get_datastore(app).stats()["users"] == 0
