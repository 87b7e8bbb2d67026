"""UpdateCustomer Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from .dtos import CustomerCommandDTO, CustomerResponseDTO

logger = logging.getLogger(__name__)


class UpdateCustomer:
    """
    Use Case: Update a customer

    Business Rules:
    1. Missing customer -> CUSTOMER_NOT_FOUND
    2. Past bills keep the name and phone they were issued with
    """

    def __init__(self, uow: UnitOfWork, customer_repo: CustomerRepository):
        self.uow = uow
        self.customer_repo = customer_repo

    async def execute(self, customer_id: int, command: CustomerCommandDTO) -> Result[CustomerResponseDTO]:
        try:
            name = command.name.strip()
            if not name:
                return Return.err(
                    Error(code="VALIDATION_ERROR", message="Customer name is required", reason="name is empty")
                )

            customer = await self.customer_repo.get_by_id(customer_id)
            if not customer:
                return Return.err(
                    Error(
                        code="CUSTOMER_NOT_FOUND",
                        message=f"Customer with ID {customer_id} not found",
                        reason=f"customer_id={customer_id}",
                    )
                )

            customer.name = name
            customer.phone = command.phone
            customer.address = command.address
            updated = await self.customer_repo.update(customer)
            await self.uow.commit()

            logger.info(f"Customer {customer_id} updated")
            return Return.ok(CustomerResponseDTO.from_entity(updated))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to update customer {customer_id}: {e}")
            return Return.err(
                Error(code="UPDATE_CUSTOMER_FAILED", message="Failed to update customer", reason=str(e))
            )
