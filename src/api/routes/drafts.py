"""Draft API Routes

Unfinished bills that can be resumed later and finalized into a bill.
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.schemas.bill_request import DraftRequestSchema
from src.app.use_cases.pagination import PageDTO
from src.app.use_cases.billing import CreateBill
from src.app.use_cases.billing.dtos import DraftCommandDTO, DraftResponseDTO, BillResponseDTO
from src.app.use_cases.drafts import SaveDraft, GetDraft, ListDrafts, DeleteDraft, FinalizeDraft
from src.adapter.repositories import (
    SqlAlchemyBillRepository,
    SqlAlchemyBillLineRepository,
    SqlAlchemyDraftRepository,
    SqlAlchemyDraftLineRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import raise_for_error

router = APIRouter(prefix="/drafts", tags=["Drafts"])


@router.get("", response_model=PageDTO[DraftResponseDTO])
async def list_drafts(
    page: int = Query(1, ge=1),
    limit: int = Query(ApplicationConfig.DEFAULT_PAGE_SIZE, ge=1, le=100),
    session: AsyncSession = Depends(get_session),
):
    use_case = ListDrafts(SqlAlchemyDraftRepository(session), SqlAlchemyDraftLineRepository(session))
    result = await use_case.execute(page=page, limit=limit)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("", response_model=DraftResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_draft(
    request: DraftRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Save a new draft.

    No field is required; totals are computed the same way as for bills.
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = SaveDraft(uow, SqlAlchemyDraftRepository(session), SqlAlchemyDraftLineRepository(session))
    result = await use_case.execute(DraftCommandDTO(**request.model_dump()))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{draft_id}", response_model=DraftResponseDTO)
async def get_draft(draft_id: int, session: AsyncSession = Depends(get_session)):
    use_case = GetDraft(SqlAlchemyDraftRepository(session), SqlAlchemyDraftLineRepository(session))
    result = await use_case.execute(draft_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{draft_id}", response_model=DraftResponseDTO)
async def update_draft(
    draft_id: int,
    request: DraftRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    uow = SqlAlchemyUnitOfWork(session)
    use_case = SaveDraft(uow, SqlAlchemyDraftRepository(session), SqlAlchemyDraftLineRepository(session))
    result = await use_case.execute(DraftCommandDTO(**request.model_dump()), draft_id=draft_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/{draft_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_draft(draft_id: int, session: AsyncSession = Depends(get_session)):
    uow = SqlAlchemyUnitOfWork(session)
    result = await DeleteDraft(uow, SqlAlchemyDraftRepository(session)).execute(draft_id)

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{draft_id}/finalize",
    response_model=BillResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def finalize_draft(draft_id: int, session: AsyncSession = Depends(get_session)):
    """
    Turn a draft into a bill.

    The draft must carry an invoice number and a customer name. On success
    the draft is deleted; on any failure it is left untouched.

    **Returns:**
    - 201: Bill created from the draft
    - 400: Draft incomplete
    - 404: Draft not found
    - 409: Invoice number already in use
    """
    uow = SqlAlchemyUnitOfWork(session)
    draft_repo = SqlAlchemyDraftRepository(session)
    create_bill = CreateBill(
        uow,
        SqlAlchemyBillRepository(session),
        SqlAlchemyBillLineRepository(session),
        draft_repo,
    )
    use_case = FinalizeDraft(draft_repo, SqlAlchemyDraftLineRepository(session), create_bill)
    result = await use_case.execute(draft_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
