from __future__ import annotations

import logging
from types import SimpleNamespace

import structlog

from src.shared import EnumEnvironment, EnumLogLevel
from src.shared.logging import (
    _select_renderer,
    configure_logging,
    update_logging_from_settings,
)


def test_production_renders_json() -> None:
    assert isinstance(
        _select_renderer(EnumEnvironment.PRODUCTION.value),
        structlog.processors.JSONRenderer,
    )
    assert isinstance(_select_renderer("development"), structlog.dev.ConsoleRenderer)


def test_configure_logging_adds_file_handler(tmp_path) -> None:
    log_file = tmp_path / "service.log"

    configure_logging(level="WARNING", file_path=str(log_file))

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert any(isinstance(h, logging.FileHandler) for h in root.handlers)
    configure_logging(level="INFO")


def test_update_logging_from_settings_applies_level() -> None:
    settings = SimpleNamespace(
        logging=SimpleNamespace(level=EnumLogLevel.DEBUG, file_path=None),
        environment=EnumEnvironment.TESTING,
    )

    update_logging_from_settings(settings)

    assert logging.getLogger().level == logging.DEBUG
    configure_logging(level="INFO")


def test_update_logging_from_settings_survives_bad_settings() -> None:
    update_logging_from_settings(object())
