"""Persistence contract for customers, implemented in the infrastructure layer."""
import abc
from typing import Optional

from src.accounts.core.domain.models import Customer, CustomerUpdate


class CustomerRepository(abc.ABC):
    """
    Store of customer accounts.

    Lookups return None (or an empty list) when nothing matches; only
    update and delete raise CustomerNotFound for a missing account.
    """

    @abc.abstractmethod
    async def get_all(self) -> list[Customer]:
        """All customers, newest first."""

    @abc.abstractmethod
    async def get_by_id(self, account_id: str) -> Optional[Customer]:
        ...

    @abc.abstractmethod
    async def get_by_email(self, email: str) -> Optional[Customer]:
        ...

    @abc.abstractmethod
    async def get_by_country(self, country: str) -> list[Customer]:
        """Customers whose country equals the argument exactly, newest first."""

    @abc.abstractmethod
    async def create(self, customer: Customer) -> Customer:
        """
        Persist a new customer.

        Raises:
            EmailAlreadyExists: If the email is already stored
        """

    @abc.abstractmethod
    async def update(self, account_id: str, changes: CustomerUpdate) -> Customer:
        """
        Apply the set fields of a partial update.

        Raises:
            CustomerNotFound: If no customer has this account ID
            EmailAlreadyExists: If the new email is already stored
        """

    @abc.abstractmethod
    async def delete(self, account_id: str) -> None:
        """
        Remove a customer.

        Raises:
            CustomerNotFound: If no row was deleted
        """
