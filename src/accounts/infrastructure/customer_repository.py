import logging
from typing import Optional

from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError

from src.accounts.core.domain.errors import CustomerNotFound, EmailAlreadyExists
from src.accounts.core.domain.models import Customer, CustomerUpdate
from src.accounts.core.repositories import CustomerRepository
from src.shared.database.base_repo import BaseRepository
from src.shared.database.database import Database

from src.accounts.infrastructure.entities.customer_entity import CustomerEntity
from src.accounts.infrastructure.mappers.customer_mapper import CustomerMapper

logger = logging.getLogger(__name__)


class SqlCustomerRepository(BaseRepository[CustomerEntity, Customer], CustomerRepository):
    """Repository for Customer operations backed by the customers table."""

    def __init__(self, db: Database, mapper: CustomerMapper):
        super().__init__(db, mapper)

    async def get_all(self) -> list[Customer]:
        """Get all customers, newest first."""
        return await self.find_all(
            select(CustomerEntity).order_by(CustomerEntity.date_created.desc())
        )

    async def get_by_id(self, account_id: str) -> Optional[Customer]:
        """Get a customer by account ID."""
        return await self.find_one(
            select(CustomerEntity).where(CustomerEntity.account_id == account_id)
        )

    async def get_by_email(self, email: str) -> Optional[Customer]:
        """Get a customer by email."""
        return await self.find_one(
            select(CustomerEntity).where(CustomerEntity.email == email)
        )

    async def get_by_country(self, country: str) -> list[Customer]:
        """Get the customers of a country, newest first."""
        return await self.find_all(
            select(CustomerEntity)
            .where(CustomerEntity.country == country)
            .order_by(CustomerEntity.date_created.desc())
        )

    async def create(self, customer: Customer) -> Customer:
        """
        Insert a new customer row.

        The unique constraint on email is the final guard against two
        concurrent creates that both passed the service's email check.
        """
        try:
            return await self.add(customer)
        except IntegrityError as e:
            logger.warning("Insert rejected for customer %s: %s", customer.account_id, e.orig)
            raise EmailAlreadyExists(customer.email) from e

    async def update(self, account_id: str, changes: CustomerUpdate) -> Customer:
        """Apply only the fields set on the partial update and persist them."""
        async with self.db.session_maker() as session:
            entity = await session.get(CustomerEntity, account_id)
            if entity is None:
                raise CustomerNotFound(account_id)

            for field_name, value in changes.changes().items():
                setattr(entity, field_name, value)

            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                if changes.has("email") and changes.email is not None:
                    raise EmailAlreadyExists(changes.email) from e
                raise

            return self.mapper.to_model(entity)

    async def delete(self, account_id: str) -> None:
        """Delete a customer by account ID."""
        async with self.db.session_maker() as session:
            result = await session.execute(
                delete(CustomerEntity).where(CustomerEntity.account_id == account_id)
            )
            deleted = result.rowcount
            await session.commit()

        if deleted == 0:
            raise CustomerNotFound(account_id)
