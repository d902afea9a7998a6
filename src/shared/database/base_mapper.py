import abc
from typing import Generic, TypeVar


TModel = TypeVar("TModel")
TEntity = TypeVar("TEntity")


class BaseEntityMapper(abc.ABC, Generic[TModel, TEntity]):
    """Two-way translation between a domain model and its SQLAlchemy entity."""

    @staticmethod
    @abc.abstractmethod
    def to_entity(model_instance: TModel) -> TEntity:
        """Build a (transient) database entity from a domain model."""

    @staticmethod
    @abc.abstractmethod
    def to_model(entity: TEntity) -> TModel:
        """Build a domain model from a loaded database entity."""
