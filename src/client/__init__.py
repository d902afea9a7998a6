"""Python client for the Customer Accounts API."""
from src.client.accounts_client import AccountsClient
from src.client.schemas import (
    CreateCustomerRequest,
    UpdateCustomerRequest,
    CustomerResponse,
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    "AccountsClient",
    "CreateCustomerRequest",
    "UpdateCustomerRequest",
    "CustomerResponse",
    "ErrorResponse",
    "HealthResponse",
]
