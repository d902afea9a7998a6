"""Mappers for converting between domain models and API schemas."""
from src.accounts.core.domain.models import Customer, CustomerDetails, CustomerUpdate
from src.client.schemas import CreateCustomerRequest, CustomerResponse, UpdateCustomerRequest


def to_customer_response(customer: Customer) -> CustomerResponse:
    """
    Convert a Customer domain model to CustomerResponse API schema.

    Args:
        customer: Domain model

    Returns:
        API response schema
    """
    return CustomerResponse(
        account_id=customer.account_id,
        first_name=customer.first_name,
        last_name=customer.last_name,
        email=customer.email,
        phone_number=customer.phone_number,
        address=customer.address,
        city=customer.city,
        state=customer.state,
        country=customer.country,
        date_created=customer.date_created,
    )


def to_customer_details(request: CreateCustomerRequest) -> CustomerDetails:
    return CustomerDetails(**request.model_dump())


def to_customer_update(request: UpdateCustomerRequest) -> CustomerUpdate:
    """Carry over only the fields present in the request body, so absence survives the mapping."""
    return CustomerUpdate(**request.changes())
