"""Database entities for the infrastructure layer."""
from src.accounts.infrastructure.entities.customer_entity import CustomerEntity

__all__ = [
    "CustomerEntity",
]
