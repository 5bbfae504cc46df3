from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.main.config import AppSettings, ForecastSettings
from src.shared import EnumEnvironment, EnumLogLevel


def test_defaults(monkeypatch) -> None:
    for name in ("ENVIRONMENT", "DB_MONGO_URI", "FORECAST_MAX_HORIZON", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = AppSettings(_env_file=None)

    assert settings.environment is EnumEnvironment.DEVELOPMENT
    assert settings.database.orders_collection == "orders"
    assert settings.forecast.max_horizon == 365
    assert settings.logging.level is EnumLogLevel.INFO


def test_reads_prefixed_environment(monkeypatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("DB_MONGO_URI", "mongodb://mongo:27017/sales")
    monkeypatch.setenv("DB_ORDERS_COLLECTION", "pos_orders")
    monkeypatch.setenv("FORECAST_MAX_HORIZON", "90")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("GIT_COMMIT", "deadbeef")

    settings = AppSettings(_env_file=None)

    assert settings.environment is EnumEnvironment.PRODUCTION
    assert settings.database.mongo_uri == "mongodb://mongo:27017/sales"
    assert settings.database.orders_collection == "pos_orders"
    assert settings.forecast.max_horizon == 90
    assert settings.logging.level is EnumLogLevel.DEBUG
    assert settings.service.git_commit == "deadbeef"


def test_max_horizon_must_be_positive(monkeypatch) -> None:
    monkeypatch.setenv("FORECAST_MAX_HORIZON", "0")

    with pytest.raises(ValidationError):
        ForecastSettings()
