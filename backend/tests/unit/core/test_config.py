"""Tests for configuration helpers."""

from __future__ import annotations

import pytest

from chirpy.core.config import (
    CONFIG_MAP,
    PLACEHOLDER_JWT_SECRET,
    DevelopmentConfig,
    ProductionConfig,
    env_float,
    get_config,
    validate_config,
)


def test_get_config_follows_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    assert get_config() is ProductionConfig

    monkeypatch.setenv("APP_ENV", "unknown")
    assert get_config() is DevelopmentConfig


def test_config_map_is_complete():
    assert set(CONFIG_MAP) == {"development", "testing", "production"}


@pytest.mark.parametrize("raw, expected", [("2.5", 2.5), ("", None), ("none", None)])
def test_env_float(monkeypatch, raw, expected):
    monkeypatch.setenv("STORE_LOCK_TIMEOUT", raw)

    assert env_float("STORE_LOCK_TIMEOUT", 10.0) == expected


def test_env_float_default(monkeypatch):
    monkeypatch.delenv("STORE_LOCK_TIMEOUT", raising=False)

    assert env_float("STORE_LOCK_TIMEOUT", 10.0) == 10.0


class TestValidateConfig:
    def test_production_requires_real_secrets(self):
        config = {"DEBUG": False, "TESTING": False, "JWT_SECRET_KEY": PLACEHOLDER_JWT_SECRET}

        with pytest.raises(RuntimeError, match="JWT_SECRET.*POLKA_KEY"):
            validate_config(config)

    def test_production_refuses_store_reset(self):
        config = {"JWT_SECRET_KEY": "s" * 40, "POLKA_KEY": "k", "RESET_STORE_ON_START": True}

        with pytest.raises(RuntimeError, match="RESET_STORE_ON_START"):
            validate_config(config)

    def test_valid_production_config(self):
        validate_config({"JWT_SECRET_KEY": "s" * 40, "POLKA_KEY": "k"})

    def test_debug_and_testing_are_lenient(self):
        validate_config({"DEBUG": True})
        validate_config({"TESTING": True})
