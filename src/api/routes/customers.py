"""Customer API Routes"""

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.schemas.customer_request import CustomerRequestSchema
from src.app.use_cases.pagination import PageDTO
from src.app.use_cases.customers import (
    SearchCustomers,
    ListCustomers,
    CreateCustomer,
    UpdateCustomer,
    CustomerCommandDTO,
    CustomerResponseDTO,
)
from src.adapter.repositories import SqlAlchemyCustomerRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import raise_for_error

router = APIRouter(prefix="/customers", tags=["Customers"])


@router.get("", response_model=PageDTO[CustomerResponseDTO])
async def list_customers(
    page: int = Query(1, ge=1),
    limit: int = Query(ApplicationConfig.DEFAULT_PAGE_SIZE, ge=1, le=100),
    session: AsyncSession = Depends(get_session),
):
    result = await ListCustomers(SqlAlchemyCustomerRepository(session)).execute(page=page, limit=limit)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/search", response_model=PageDTO[CustomerResponseDTO])
async def search_customers(
    q: str = Query("", description="Case-insensitive name substring"),
    session: AsyncSession = Depends(get_session),
):
    """
    Autocomplete customers by name.

    Returns at most 10 matches ordered by name; a blank query returns none.
    """
    result = await SearchCustomers(SqlAlchemyCustomerRepository(session)).execute(q)

    if result.is_err():
        raise_for_error(result.error)

    return PageDTO[CustomerResponseDTO].single(result.value)


@router.post("", response_model=CustomerResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_customer(
    request: CustomerRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    uow = SqlAlchemyUnitOfWork(session)
    use_case = CreateCustomer(uow, SqlAlchemyCustomerRepository(session))
    result = await use_case.execute(CustomerCommandDTO(**request.model_dump()))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{customer_id}", response_model=CustomerResponseDTO)
async def update_customer(
    customer_id: int,
    request: CustomerRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    uow = SqlAlchemyUnitOfWork(session)
    use_case = UpdateCustomer(uow, SqlAlchemyCustomerRepository(session))
    result = await use_case.execute(customer_id, CustomerCommandDTO(**request.model_dump()))

    if result.is_err():
        raise_for_error(result.error)

    return result.value
