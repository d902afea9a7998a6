from datetime import datetime, timedelta, UTC
from uuid import uuid4

import pytest

from src.accounts.core.domain.errors import CustomerNotFound, EmailAlreadyExists
from src.accounts.core.domain.models import Customer, CustomerUpdate

BASE_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)


def new_customer(email: str, country: str | None = None, minutes: int = 0, **overrides) -> Customer:
    values = dict(
        account_id=str(uuid4()),
        first_name="John",
        last_name="Doe",
        email=email,
        country=country,
        date_created=BASE_TIME + timedelta(minutes=minutes),
    )
    values.update(overrides)
    return Customer(**values)


@pytest.mark.asyncio
async def test_create_and_get_by_id(sql_customer_repository):
    """Test persisting a customer and retrieving it by account ID."""
    # Arrange
    customer = new_customer(
        "john.doe@example.com",
        country="USA",
        phone_number="1234567890",
        address="123 Main St",
        city="New York",
        state="NY",
    )

    # Act
    created = await sql_customer_repository.create(customer)
    retrieved = await sql_customer_repository.get_by_id(customer.account_id)

    # Assert
    assert created.account_id == customer.account_id
    assert retrieved is not None
    assert retrieved.account_id == customer.account_id
    assert retrieved.first_name == "John"
    assert retrieved.email == "john.doe@example.com"
    assert retrieved.phone_number == "1234567890"
    assert retrieved.address == "123 Main St"
    assert retrieved.city == "New York"
    assert retrieved.state == "NY"
    assert retrieved.country == "USA"
    assert retrieved.date_created is not None


@pytest.mark.asyncio
async def test_get_by_id_not_found(sql_customer_repository):
    """Test retrieving a non-existent customer returns None."""
    assert await sql_customer_repository.get_by_id(str(uuid4())) is None


@pytest.mark.asyncio
async def test_get_by_email(sql_customer_repository):
    customer = await sql_customer_repository.create(new_customer("jane.smith@example.com"))

    retrieved = await sql_customer_repository.get_by_email("jane.smith@example.com")

    assert retrieved is not None
    assert retrieved.account_id == customer.account_id
    assert await sql_customer_repository.get_by_email("other@example.com") is None


@pytest.mark.asyncio
async def test_get_all_newest_first(sql_customer_repository):
    oldest = await sql_customer_repository.create(new_customer("a@example.com", minutes=0))
    newest = await sql_customer_repository.create(new_customer("b@example.com", minutes=10))
    middle = await sql_customer_repository.create(new_customer("c@example.com", minutes=5))

    customers = await sql_customer_repository.get_all()

    assert [c.account_id for c in customers] == [newest.account_id, middle.account_id, oldest.account_id]


@pytest.mark.asyncio
async def test_get_all_empty(sql_customer_repository):
    assert await sql_customer_repository.get_all() == []


@pytest.mark.asyncio
async def test_get_by_country_exact_match_newest_first(sql_customer_repository):
    first = await sql_customer_repository.create(new_customer("a@example.com", country="USA", minutes=0))
    second = await sql_customer_repository.create(new_customer("b@example.com", country="USA", minutes=1))
    await sql_customer_repository.create(new_customer("c@example.com", country="Canada", minutes=2))
    await sql_customer_repository.create(new_customer("d@example.com", country="USA East", minutes=3))
    await sql_customer_repository.create(new_customer("e@example.com", minutes=4))

    customers = await sql_customer_repository.get_by_country("USA")

    assert [c.account_id for c in customers] == [second.account_id, first.account_id]
    assert await sql_customer_repository.get_by_country("Mexico") == []


@pytest.mark.asyncio
async def test_create_duplicate_email_is_rejected_by_constraint(sql_customer_repository):
    """The unique constraint rejects a second row even without the service check."""
    await sql_customer_repository.create(new_customer("dup@example.com"))

    with pytest.raises(EmailAlreadyExists):
        await sql_customer_repository.create(new_customer("dup@example.com", first_name="Other"))

    assert len(await sql_customer_repository.get_all()) == 1


@pytest.mark.asyncio
async def test_update_applies_only_set_fields(sql_customer_repository):
    customer = await sql_customer_repository.create(
        new_customer("john@example.com", country="USA", city="Boston")
    )

    updated = await sql_customer_repository.update(
        customer.account_id, CustomerUpdate(last_name="Updated", city=None)
    )

    assert updated.last_name == "Updated"
    assert updated.city is None
    assert updated.first_name == "John"
    assert updated.email == "john@example.com"
    assert updated.country == "USA"

    reloaded = await sql_customer_repository.get_by_id(customer.account_id)
    assert reloaded.last_name == "Updated"
    assert reloaded.city is None
    assert reloaded.country == "USA"


@pytest.mark.asyncio
async def test_update_missing_customer_raises(sql_customer_repository):
    with pytest.raises(CustomerNotFound):
        await sql_customer_repository.update(str(uuid4()), CustomerUpdate(first_name="X"))


@pytest.mark.asyncio
async def test_update_to_taken_email_raises(sql_customer_repository):
    await sql_customer_repository.create(new_customer("taken@example.com"))
    customer = await sql_customer_repository.create(new_customer("mine@example.com"))

    with pytest.raises(EmailAlreadyExists):
        await sql_customer_repository.update(customer.account_id, CustomerUpdate(email="taken@example.com"))

    reloaded = await sql_customer_repository.get_by_id(customer.account_id)
    assert reloaded.email == "mine@example.com"


@pytest.mark.asyncio
async def test_delete(sql_customer_repository):
    customer = await sql_customer_repository.create(new_customer("john@example.com"))

    await sql_customer_repository.delete(customer.account_id)

    assert await sql_customer_repository.get_by_id(customer.account_id) is None


@pytest.mark.asyncio
async def test_delete_missing_customer_raises(sql_customer_repository):
    with pytest.raises(CustomerNotFound):
        await sql_customer_repository.delete(str(uuid4()))
