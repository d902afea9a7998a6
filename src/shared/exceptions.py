"""Custom exceptions for the application."""
from typing import Any


class EntityNotFound(Exception):
    """Raised when an entity is not found in the database."""

    def __init__(self, entity_name: str, entity_id: Any, field_name: str = "id"):
        """
        Initialize the exception.

        Args:
            entity_name: Name of the entity that was not found
            entity_id: Value that was looked up
            field_name: Name of the field the lookup was done on
        """
        super().__init__(f"{entity_name} with {field_name} {entity_id} not found")
        self.entity_name = entity_name
        self.entity_id = entity_id
        self.field_name = field_name


class ConflictingEntityFound(Exception):
    """Raised when an entity with a conflicting field already exists."""

    def __init__(self, entity_name: str, field_name: str, field_value: Any):
        """
        Initialize the exception.

        Args:
            entity_name: Name of the entity
            field_name: Name of the conflicting field
            field_value: Value of the conflicting field
        """
        super().__init__(f"{entity_name} with {field_name} {field_value} already exists")
        self.entity_name = entity_name
        self.field_name = field_name
        self.field_value = field_value


class InvalidEntity(Exception):
    """Raised when an entity violates a business validation rule."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
