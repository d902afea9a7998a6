"""Domain models used in business logic."""
import re
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

# local-part@domain.tld, no whitespace and a single "@"
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email))


class Customer(BaseModel):
    """Domain model for a stored customer account."""
    account_id: str = Field(..., description="Unique account ID (UUID string)")
    first_name: str
    last_name: str
    email: str
    phone_number: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    date_created: datetime = Field(..., description="Creation timestamp, never mutated")

    model_config = {"from_attributes": True}


class CustomerDetails(BaseModel):
    """
    Customer data supplied on creation.

    Deliberately unconstrained: the required-field and email-format rules are
    business rules enforced by CustomerService, not by this model.
    """
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None


class CustomerUpdate(BaseModel):
    """
    Partial update of a customer.

    Only the fields explicitly set when the model was built are changes;
    a field that was never set is left untouched, while a field set to None
    clears the stored value.
    """
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None

    def changes(self) -> dict[str, Any]:
        """Return the set fields and their new values."""
        return self.model_dump(exclude_unset=True)

    def has(self, field_name: str) -> bool:
        return field_name in self.model_fields_set
