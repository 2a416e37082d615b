import importlib

import pytest

from chronolog.config import get_settings_module


@pytest.mark.parametrize(
    "env, expected",
    [
        ("production", "chronolog.config.production"),
        ("PROD", "chronolog.config.production"),
        ("testing", "chronolog.config.testing"),
        ("test", "chronolog.config.testing"),
        ("anything", "chronolog.config.development"),
    ],
)
def test_settings_module_follows_app_env(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == expected


def test_default_is_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)

    assert get_settings_module() == "chronolog.config.development"


def test_testing_settings_flags():
    settings = importlib.import_module("chronolog.config.testing")

    assert settings.TESTING is True
    assert settings.DB_CONFIG["database"] == "chronolog_test"
