"""Tests for infrastructure settings."""

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import AppSettings


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    for name in (
        "FINANCE_BACKEND",
        "APP_ENV",
        "DASHBOARD_USER_ID",
        "CURRENCY_CODE",
    ):
        monkeypatch.delenv(name, raising=False)


def test_from_env_defaults() -> None:
    settings = AppSettings.from_env()

    assert settings.backend == "sqlalchemy"
    assert settings.environment == "production"
    assert settings.default_user_id is None
    assert settings.currency_code == "USD"
    assert settings.strict_account_types is False


def test_from_env_reads_values(monkeypatch) -> None:
    monkeypatch.setenv("FINANCE_BACKEND", " Memory ")
    monkeypatch.setenv("APP_ENV", "development")
    monkeypatch.setenv("DASHBOARD_USER_ID", "user-42")
    monkeypatch.setenv("CURRENCY_CODE", "eur")

    settings = AppSettings.from_env()

    assert settings.backend == "memory"
    assert settings.default_user_id == "user-42"
    assert settings.currency_code == "EUR"
    assert settings.strict_account_types is True


def test_from_env_rejects_unknown_backend(monkeypatch) -> None:
    monkeypatch.setenv("FINANCE_BACKEND", "mongo")

    with pytest.raises(ValueError, match="mongo"):
        AppSettings.from_env()
