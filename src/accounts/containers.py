"""Dependency injection container using dependency-injector library."""
from dependency_injector import containers, providers

from src.accounts.config import Settings
from src.shared.database.database import Database, DatabaseSettings

from src.accounts.infrastructure.mappers.customer_mapper import CustomerMapper
from src.accounts.infrastructure.customer_repository import SqlCustomerRepository
from src.accounts.core.services.customer_service import CustomerService

API_MODULES = [
    "src.accounts.api.customers",
]


class Container(containers.DeclarativeContainer):
    """Main application dependency injection container."""

    wiring_config = containers.WiringConfiguration(modules=API_MODULES)

    # =========================================================================
    # CONFIGURATION - Singleton (loaded once, cached)
    # =========================================================================
    config = providers.Singleton(Settings)

    # =========================================================================
    # SINGLETON - Database (shared connection pool)
    # =========================================================================
    database_settings = providers.Singleton(
        DatabaseSettings,
        db_url=config.provided.database_url,
        echo=config.provided.database_echo,
    )

    database = providers.Singleton(
        Database,
        db_settings=database_settings,
    )

    # =========================================================================
    # SINGLETON - Stateless Mapper
    # =========================================================================
    customer_mapper = providers.Singleton(CustomerMapper)

    # =========================================================================
    # FACTORIES - Repository and Service (per-request, share database singleton)
    # =========================================================================
    customer_repository = providers.Factory(
        SqlCustomerRepository,
        db=database,
        mapper=customer_mapper,
    )

    customer_service = providers.Factory(
        CustomerService,
        repository=customer_repository,
    )
