"""API schemas for customer requests and responses.

JSON field names are camelCase (``firstName``); Python attributes are
snake_case. Both are accepted when building a model.
"""
import re
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

# Same pattern as src.accounts.core.domain.models.EMAIL_PATTERN; the SDK does not import the server package
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

CAMEL_CASE_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="ignore",
)


def _validate_not_blank(v: str | None) -> str | None:
    if v is None:
        return v
    if not v.strip():
        raise ValueError("Field cannot be blank or only whitespace")
    return v.strip()


def _validate_email(v: str | None) -> str | None:
    if v is not None and not EMAIL_PATTERN.match(v):
        raise ValueError("Invalid email format")
    return v


class CreateCustomerRequest(BaseModel):
    """Request schema for creating a new customer."""
    first_name: str = Field(..., min_length=1, max_length=255, description="First name cannot be blank")
    last_name: str = Field(..., min_length=1, max_length=255, description="Last name cannot be blank")
    email: str = Field(..., max_length=255, description="Email address is required")
    phone_number: str | None = Field(default=None, max_length=20)
    address: str | None = None
    city: str | None = Field(default=None, max_length=100)
    state: str | None = Field(default=None, max_length=100)
    country: str | None = Field(default=None, max_length=100)

    model_config = CAMEL_CASE_CONFIG

    @field_validator("first_name", "last_name")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Ensure name fields are not just whitespace."""
        return _validate_not_blank(v)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _validate_email(v)


class UpdateCustomerRequest(BaseModel):
    """
    Request schema for a partial customer update.

    Omitted fields are left unchanged. Optional contact fields may be sent
    as null to clear them; names and email may be omitted but not nulled.
    """
    first_name: str | None = Field(default=None, min_length=1, max_length=255)
    last_name: str | None = Field(default=None, min_length=1, max_length=255)
    email: str | None = Field(default=None, max_length=255)
    phone_number: str | None = Field(default=None, max_length=20)
    address: str | None = None
    city: str | None = Field(default=None, max_length=100)
    state: str | None = Field(default=None, max_length=100)
    country: str | None = Field(default=None, max_length=100)

    model_config = CAMEL_CASE_CONFIG

    @field_validator("first_name", "last_name")
    @classmethod
    def validate_not_blank(cls, v: str | None) -> str | None:
        return _validate_not_blank(v)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str | None) -> str | None:
        return _validate_email(v)

    @model_validator(mode="after")
    def validate_required_not_null(self) -> "UpdateCustomerRequest":
        for field_name in ("first_name", "last_name", "email"):
            if field_name in self.model_fields_set and getattr(self, field_name) is None:
                raise ValueError(f"{to_camel(field_name)} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        """Fields that were present in the request body."""
        return self.model_dump(exclude_unset=True)


class CustomerResponse(BaseModel):
    """Response schema for customer data returned by the API."""
    account_id: str
    first_name: str
    last_name: str
    email: str
    phone_number: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    date_created: datetime

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorResponse(BaseModel):
    """Error envelope returned for every failed request."""
    error: str
    message: str | None = None
    details: list[dict[str, Any]] | None = None


class HealthResponse(BaseModel):
    status: str
