"""Accounts HTTP Client for consuming the Customer Accounts API."""
from typing import Optional
from urllib.parse import quote

from httpx import AsyncClient, Response

from src.client.schemas import (
    CreateCustomerRequest,
    UpdateCustomerRequest,
    CustomerResponse,
    HealthResponse,
)

CUSTOMERS_PATH = "/api/customers"


class AccountsClient:
    """HTTP client for interacting with the Customer Accounts API."""

    def __init__(self, base_url: str, client: Optional[AsyncClient] = None):
        """
        Initialize the accounts client.

        Args:
            base_url: Base URL of the API (e.g., "http://localhost:8000")
            client: Optional httpx.AsyncClient instance. If not provided, a new one will be created.
        """
        self.base_url = base_url.rstrip("/")
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self):
        """Async context manager entry."""
        if self._owns_client:
            self._client = AsyncClient(base_url=self.base_url)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._owns_client and self._client:
            await self._client.aclose()

    @property
    def client(self) -> AsyncClient:
        """Get the underlying httpx client."""
        if self._client is None:
            raise RuntimeError("Client not initialized. Use async context manager.")
        return self._client

    async def health(self) -> HealthResponse:
        response: Response = await self.client.get("/health")
        response.raise_for_status()
        return HealthResponse(**response.json())

    async def list_customers(self) -> list[CustomerResponse]:
        """
        List every customer, newest first.

        Raises:
            httpx.HTTPStatusError: If the request fails
        """
        response: Response = await self.client.get(CUSTOMERS_PATH)
        response.raise_for_status()
        return [CustomerResponse(**customer) for customer in response.json()]

    async def list_customers_by_country(self, country: str) -> list[CustomerResponse]:
        """
        List the customers of a country, newest first.

        Raises:
            httpx.HTTPStatusError: If the request fails
        """
        response: Response = await self.client.get(
            f"{CUSTOMERS_PATH}/country/{quote(country, safe='')}"
        )
        response.raise_for_status()
        return [CustomerResponse(**customer) for customer in response.json()]

    async def get_customer(self, account_id: str) -> CustomerResponse:
        """
        Get a customer by account ID.

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 404 if not found)
        """
        response: Response = await self.client.get(f"{CUSTOMERS_PATH}/{quote(account_id, safe='')}")
        response.raise_for_status()
        return CustomerResponse(**response.json())

    async def get_customer_by_email(self, email: str) -> CustomerResponse:
        """
        Get a customer by email address.

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 404 if not found)
        """
        response: Response = await self.client.get(
            f"{CUSTOMERS_PATH}/email/{quote(email, safe='@')}"
        )
        response.raise_for_status()
        return CustomerResponse(**response.json())

    async def create_customer(self, request: CreateCustomerRequest) -> CustomerResponse:
        """
        Create a new customer.

        Args:
            request: Customer creation request

        Returns:
            Created customer response

        Raises:
            httpx.HTTPStatusError: If the request fails (400, 409)
        """
        response: Response = await self.client.post(
            CUSTOMERS_PATH,
            json=request.model_dump(mode="json", by_alias=True, exclude_unset=True),
        )
        response.raise_for_status()
        return CustomerResponse(**response.json())

    async def update_customer(self, account_id: str, request: UpdateCustomerRequest) -> CustomerResponse:
        """
        Update some fields of a customer. Only fields set on the request are sent.

        Raises:
            httpx.HTTPStatusError: If the request fails (400, 404, 409)
        """
        response: Response = await self.client.put(
            f"{CUSTOMERS_PATH}/{quote(account_id, safe='')}",
            json=request.model_dump(mode="json", by_alias=True, exclude_unset=True),
        )
        response.raise_for_status()
        return CustomerResponse(**response.json())

    async def delete_customer(self, account_id: str) -> None:
        """
        Delete a customer.

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 404 if not found)
        """
        response: Response = await self.client.delete(f"{CUSTOMERS_PATH}/{quote(account_id, safe='')}")
        response.raise_for_status()
