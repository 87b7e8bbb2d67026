"""CreateCustomer Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.customer import Customer
from .dtos import CustomerCommandDTO, CustomerResponseDTO

logger = logging.getLogger(__name__)


class CreateCustomer:
    """
    Use Case: Create a customer

    Name is trimmed and required; phone and address are optional.
    """

    def __init__(self, uow: UnitOfWork, customer_repo: CustomerRepository):
        self.uow = uow
        self.customer_repo = customer_repo

    async def execute(self, command: CustomerCommandDTO) -> Result[CustomerResponseDTO]:
        try:
            name = command.name.strip()
            if not name:
                return Return.err(
                    Error(code="VALIDATION_ERROR", message="Customer name is required", reason="name is empty")
                )

            customer = await self.customer_repo.create(
                Customer(name=name, phone=command.phone, address=command.address)
            )
            await self.uow.commit()

            logger.info(f"Customer {customer.id} created")
            return Return.ok(CustomerResponseDTO.from_entity(customer))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to create customer: {e}")
            return Return.err(
                Error(code="CREATE_CUSTOMER_FAILED", message="Failed to create customer", reason=str(e))
            )
