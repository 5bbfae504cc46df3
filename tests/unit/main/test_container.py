from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from dependency_injector import providers

from src.application.use_cases.sales_forecast_use_case import (
    GenerateSalesForecastUseCase,
)
from src.main import container as container_module
from src.main.config import AppSettings, ForecastSettings


@pytest.fixture()
def app_container():
    settings = AppSettings(_env_file=None, forecast=ForecastSettings(max_horizon=90))
    app_container = container_module.init_container(settings)
    yield app_container
    app_container.unwire()


def test_init_container_registers_global(app_container) -> None:
    assert container_module.get_container() is app_container


def test_use_case_receives_configured_horizon(app_container) -> None:
    app_container.order_repository.override(providers.Object(MagicMock()))

    use_case = app_container.generate_sales_forecast_use_case()

    assert isinstance(use_case, GenerateSalesForecastUseCase)
    assert use_case.max_horizon == 90
    app_container.order_repository.reset_override()


@pytest.mark.asyncio
async def test_app_lifespan_creates_indexes_and_closes(app_container) -> None:
    database = MagicMock()

    async def create_indexes():
        database.indexes_created = True

    database.create_indexes = create_indexes
    app_container.mongo_database.override(providers.Object(database))

    async with container_module.app_lifespan() as yielded:
        assert yielded is app_container
        assert database.indexes_created is True

    database.close.assert_called_once()
    app_container.mongo_database.reset_override()
