"""Customer account endpoints.

Domain errors raised by the service are not caught here; the handlers in
src.accounts.api.errors turn them into 400/404/409/500 responses.
"""
from fastapi import APIRouter, Depends, Response, status
from dependency_injector.wiring import Provide, inject

from src.accounts.containers import Container
from src.accounts.core.services.customer_service import CustomerService
from src.client.schemas import CreateCustomerRequest, UpdateCustomerRequest, CustomerResponse, ErrorResponse
from src.accounts.api.mappers import to_customer_response, to_customer_details, to_customer_update

router = APIRouter(
    prefix="/customers",
    tags=["customers"],
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


@router.get("", response_model=list[CustomerResponse], response_model_exclude_none=True)
@inject
async def list_customers(
    service: CustomerService = Depends(Provide[Container.customer_service]),
) -> list[CustomerResponse]:
    """List all customers, newest first."""
    customers = await service.get_all_customers()
    return [to_customer_response(customer) for customer in customers]


@router.get("/country/{country:path}", response_model=list[CustomerResponse], response_model_exclude_none=True)
@inject
async def list_customers_by_country(
    country: str,
    service: CustomerService = Depends(Provide[Container.customer_service]),
) -> list[CustomerResponse]:
    """List the customers of a country (exact match), newest first."""
    customers = await service.get_customers_by_country(country)
    return [to_customer_response(customer) for customer in customers]


@router.get(
    "/email/{email:path}",
    response_model=CustomerResponse,
    response_model_exclude_none=True,
    responses=NOT_FOUND,
)
@inject
async def get_customer_by_email(
    email: str,
    service: CustomerService = Depends(Provide[Container.customer_service]),
) -> CustomerResponse:
    """Get a customer by email address."""
    customer = await service.get_customer_by_email(email)
    return to_customer_response(customer)


@router.get(
    "/{account_id}",
    response_model=CustomerResponse,
    response_model_exclude_none=True,
    responses=NOT_FOUND,
)
@inject
async def get_customer(
    account_id: str,
    service: CustomerService = Depends(Provide[Container.customer_service]),
) -> CustomerResponse:
    """Get a customer by account ID."""
    customer = await service.get_customer(account_id)
    return to_customer_response(customer)


@router.post(
    "",
    response_model=CustomerResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    },
)
@inject
async def create_customer(
    request: CreateCustomerRequest,
    service: CustomerService = Depends(Provide[Container.customer_service]),
) -> CustomerResponse:
    """
    Create a new customer account.

    The account ID and creation timestamp are generated by the service.
    The email must not belong to another customer.
    """
    customer = await service.create_customer(to_customer_details(request))
    return to_customer_response(customer)


@router.put(
    "/{account_id}",
    response_model=CustomerResponse,
    response_model_exclude_none=True,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse},
        **NOT_FOUND,
    },
)
@inject
async def update_customer(
    account_id: str,
    request: UpdateCustomerRequest,
    service: CustomerService = Depends(Provide[Container.customer_service]),
) -> CustomerResponse:
    """
    Update some fields of a customer.

    Only fields present in the body change; everything else is left as is.
    """
    customer = await service.update_customer(account_id, to_customer_update(request))
    return to_customer_response(customer)


@router.delete(
    "/{account_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
)
@inject
async def delete_customer(
    account_id: str,
    service: CustomerService = Depends(Provide[Container.customer_service]),
) -> Response:
    """Delete a customer account."""
    await service.delete_customer(account_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
