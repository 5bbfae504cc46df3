"""
Dependency container injection module - Main Layer

Composition root wiring settings, the MongoDB record store, repositories
and use cases together with dependency-injector.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from src.application.models import SystemInfo
from src.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from src.application.use_cases.sales_forecast_use_case import (
    GenerateSalesForecastUseCase,
)
from src.infrastructure.database import MongoDatabase
from src.infrastructure.repositories.order_repository import OrderRepository
from src.infrastructure.services.health_check_service import HealthCheckService
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    # Infrastructure
    mongo_database = providers.Singleton(
        MongoDatabase,
        mongo_uri=config.database.mongo_uri,
        db_name=config.database.database_name,
        orders_collection=config.database.orders_collection,
    )

    order_repository = providers.Singleton(
        OrderRepository,
        mongo_database=mongo_database,
        collection_name=config.database.orders_collection,
    )

    health_check_service = providers.Singleton(
        HealthCheckService,
        mongo_database=mongo_database,
    )

    system_info = providers.Singleton(
        SystemInfo,
        title=config.service.title,
        description=config.service.description,
        version=config.service.version,
        environment=providers.Callable(
            lambda env: env.value if hasattr(env, "value") else str(env),
            config.environment,
        ),
        git_commit=config.service.git_commit,
        build_time=config.service.build_time,
        mongo_uri=config.database.mongo_uri,
        database_name=config.database.database_name,
        orders_collection=config.database.orders_collection,
        max_horizon=config.forecast.max_horizon,
    )

    # Application (use cases)
    generate_sales_forecast_use_case = providers.Factory(
        GenerateSalesForecastUseCase,
        order_repository=order_repository,
        max_horizon=config.forecast.max_horizon,
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
    )

    get_application_info_use_case = providers.Factory(
        GetApplicationInfoUseCase,
        health_check_service=health_check_service,
        system_info=system_info,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Open the record store on startup and close it on shutdown.

    Used from the FastAPI lifespan handler.
    """
    container = get_container()
    mongo_database = container.mongo_database()

    try:
        await mongo_database.create_indexes()
        logger.info("container.resources.initialized")
        yield container
    finally:
        mongo_database.close()
        logger.info("container.resources.shutdown")
