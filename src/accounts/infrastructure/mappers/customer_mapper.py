from src.shared.database.base_mapper import BaseEntityMapper
from src.accounts.core.domain.models import Customer
from src.accounts.infrastructure.entities.customer_entity import CustomerEntity


class CustomerMapper(BaseEntityMapper[Customer, CustomerEntity]):
    """Mapper for converting between Customer domain model and CustomerEntity."""

    @staticmethod
    def to_entity(model_instance: Customer) -> CustomerEntity:
        """Convert a Customer (domain model) to CustomerEntity (database entity)."""
        return CustomerEntity(
            account_id=model_instance.account_id,
            first_name=model_instance.first_name,
            last_name=model_instance.last_name,
            email=model_instance.email,
            phone_number=model_instance.phone_number,
            address=model_instance.address,
            city=model_instance.city,
            state=model_instance.state,
            country=model_instance.country,
            date_created=model_instance.date_created,
        )

    @staticmethod
    def to_model(entity: CustomerEntity) -> Customer:
        """Convert a CustomerEntity (database entity) to Customer (domain model)."""
        return Customer(
            account_id=entity.account_id,
            first_name=entity.first_name,
            last_name=entity.last_name,
            email=entity.email,
            phone_number=entity.phone_number,
            address=entity.address,
            city=entity.city,
            state=entity.state,
            country=entity.country,
            date_created=entity.date_created,
        )
