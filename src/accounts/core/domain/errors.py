"""Customer domain errors, raised by services and repositories."""
from typing import Literal

from src.shared.exceptions import ConflictingEntityFound, EntityNotFound, InvalidEntity

LookupKind = Literal["id", "email"]


class CustomerNotFound(EntityNotFound):
    """No customer exists for the given account ID or email."""

    def __init__(self, identifier: str, kind: LookupKind = "id"):
        super().__init__("Customer", identifier, field_name=kind)
        self.identifier = identifier
        self.kind = kind


class EmailAlreadyExists(ConflictingEntityFound):
    """Another customer already owns the email address."""

    def __init__(self, email: str):
        super().__init__("Customer", "email", email)
        self.email = email


class InvalidCustomer(InvalidEntity):
    """Customer data breaks a required-field or format rule."""
