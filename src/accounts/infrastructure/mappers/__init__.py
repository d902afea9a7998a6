"""Infrastructure mappers for converting between domain models and database entities."""
from src.accounts.infrastructure.mappers.customer_mapper import CustomerMapper

__all__ = [
    "CustomerMapper",
]
