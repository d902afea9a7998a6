"""Customer service holding the account CRUD business rules."""
import logging
from datetime import datetime, UTC
from uuid import uuid4

from src.accounts.core.domain.errors import CustomerNotFound, EmailAlreadyExists, InvalidCustomer
from src.accounts.core.domain.models import Customer, CustomerDetails, CustomerUpdate, is_valid_email
from src.accounts.core.repositories import CustomerRepository

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "First name, last name, and email are required"
INVALID_EMAIL_MESSAGE = "Invalid email format"


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class CustomerService:
    """Service for handling Customer business logic."""

    def __init__(self, repository: CustomerRepository):
        self.repository = repository

    async def create_customer(self, details: CustomerDetails) -> Customer:
        """
        Create a new customer account.

        Validates the required fields and the email format before touching the
        store, then rejects an email that is already taken.

        Args:
            details: Customer data supplied by the caller

        Returns:
            The stored Customer with its generated account ID and creation time

        Raises:
            InvalidCustomer: If a required field is missing or the email is malformed
            EmailAlreadyExists: If another customer already uses the email
        """
        if _is_blank(details.first_name) or _is_blank(details.last_name) or _is_blank(details.email):
            raise InvalidCustomer(REQUIRED_FIELDS_MESSAGE)

        if not is_valid_email(details.email):
            raise InvalidCustomer(INVALID_EMAIL_MESSAGE)

        if await self.repository.get_by_email(details.email) is not None:
            raise EmailAlreadyExists(details.email)

        customer = Customer(
            account_id=str(uuid4()),
            first_name=details.first_name,
            last_name=details.last_name,
            email=details.email,
            phone_number=details.phone_number,
            address=details.address,
            city=details.city,
            state=details.state,
            country=details.country,
            date_created=datetime.now(UTC),
        )

        created = await self.repository.create(customer)
        logger.info("Created customer %s", created.account_id)
        return created

    async def get_all_customers(self) -> list[Customer]:
        """Get every customer, newest first."""
        return await self.repository.get_all()

    async def get_customer(self, account_id: str) -> Customer:
        """Get a customer by account ID."""
        customer = await self.repository.get_by_id(account_id)
        if not customer:
            raise CustomerNotFound(account_id)
        return customer

    async def get_customer_by_email(self, email: str) -> Customer:
        """Get a customer by email."""
        customer = await self.repository.get_by_email(email)
        if not customer:
            raise CustomerNotFound(email, kind="email")
        return customer

    async def get_customers_by_country(self, country: str) -> list[Customer]:
        """Get the customers of a country, newest first. No match is an empty list."""
        return await self.repository.get_by_country(country)

    async def update_customer(self, account_id: str, changes: CustomerUpdate) -> Customer:
        """
        Apply a partial update to an existing customer.

        Only the fields set on ``changes`` are passed to the store. Keeping
        one's own email is not a conflict.

        Raises:
            CustomerNotFound: If the account does not exist
            InvalidCustomer: If a name or the email is set to an empty value, or the email is malformed
            EmailAlreadyExists: If a different customer already uses the new email
        """
        existing = await self.repository.get_by_id(account_id)
        if not existing:
            raise CustomerNotFound(account_id)

        for field_name in ("first_name", "last_name", "email"):
            if changes.has(field_name) and _is_blank(getattr(changes, field_name)):
                raise InvalidCustomer(REQUIRED_FIELDS_MESSAGE)

        if changes.has("email"):
            if not is_valid_email(changes.email):
                raise InvalidCustomer(INVALID_EMAIL_MESSAGE)

            owner = await self.repository.get_by_email(changes.email)
            if owner and owner.account_id != account_id:
                raise EmailAlreadyExists(changes.email)

        updated = await self.repository.update(account_id, changes)
        logger.info("Updated customer %s fields=%s", account_id, sorted(changes.changes()))
        return updated

    async def delete_customer(self, account_id: str) -> None:
        """
        Delete a customer.

        Raises:
            CustomerNotFound: If the account does not exist
        """
        customer = await self.repository.get_by_id(account_id)
        if not customer:
            raise CustomerNotFound(account_id)

        await self.repository.delete(account_id)
        logger.info("Deleted customer %s", account_id)
