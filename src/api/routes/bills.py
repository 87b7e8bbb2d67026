"""Bill API Routes

FastAPI routes for estimate bills: totals preview, CRUD, price history and PDF.
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.schemas.bill_request import BillRequestSchema, ComputeBillRequestSchema
from src.app.use_cases.pagination import PageDTO
from src.app.use_cases.billing.dtos import (
    BillCommandDTO,
    ComputeBillCommandDTO,
    BillComputationDTO,
    BillResponseDTO,
    NextInvoiceNumberDTO,
    DeleteBillResponseDTO,
    PriceHistoryResponseDTO,
)
from src.app.use_cases.billing import (
    ComputeBill,
    GetNextInvoiceNumber,
    CreateBill,
    UpdateBill,
    GetBill,
    ListBills,
    DeleteBill,
    LookupPriceHistory,
    GenerateBillPdf,
)
from src.adapter.repositories import (
    SqlAlchemyBillRepository,
    SqlAlchemyBillLineRepository,
    SqlAlchemyDraftRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.adapter.services.pdf_service import ReportLabPdfService
from src.depends import get_session
from src.api.error import raise_for_error

router = APIRouter(prefix="/bills", tags=["Bills"])

DUPLICATE_INVOICE_RESPONSE = {
    409: {
        "description": "Invoice number already used by a non-deleted bill",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "DUPLICATE_INVOICE_NUMBER",
                        "message": "Invoice number 101 is already in use"
                    }
                }
            }
        }
    }
}


@router.get("", response_model=PageDTO[BillResponseDTO])
async def list_bills(
    page: int = Query(1, ge=1),
    limit: int = Query(ApplicationConfig.DEFAULT_PAGE_SIZE, ge=1, le=100),
    session: AsyncSession = Depends(get_session),
):
    """List non-deleted bills, newest first"""
    use_case = ListBills(SqlAlchemyBillRepository(session), SqlAlchemyBillLineRepository(session))
    result = await use_case.execute(page=page, limit=limit)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/next-invoice-number", response_model=NextInvoiceNumberDTO)
async def next_invoice_number(session: AsyncSession = Depends(get_session)):
    """
    Suggest the next invoice number.

    Returns max(invoice_number) + 1 over non-deleted bills, or 1 when there
    are none. The suggestion is not reserved.
    """
    result = await GetNextInvoiceNumber(SqlAlchemyBillRepository(session)).execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/compute", response_model=BillComputationDTO)
async def compute_bill(request: ComputeBillRequestSchema):
    """
    Compute totals for an unsaved bill.

    Nothing is persisted. Used by the billing screen to refresh totals while
    the user edits rows.

    **Example request:**
    ```json
    {
      "items": [
        {"product_name": "Hinge", "quantity": "2", "unit_price": "100"},
        {"product_name": "Handle", "quantity": "1", "unit_price": "50", "item_percent": "10"}
      ],
      "discount_amount": "25",
      "received_amount": "200"
    }
    ```

    **Returns:**
    - 200: Subtotal, discount, total, balance, payment status and
      amount in words
    - 422: Invalid request body
    """
    command = ComputeBillCommandDTO(**request.model_dump())
    result = await ComputeBill().execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/price-history", response_model=PriceHistoryResponseDTO)
async def price_history(
    product_name: str = Query(..., min_length=1),
    session: AsyncSession = Depends(get_session),
):
    """
    Recent distinct prices for a product.

    Scans the most recent bills containing the product and returns up to
    five distinct unit prices, most recent first.
    """
    use_case = LookupPriceHistory(
        SqlAlchemyBillRepository(session),
        SqlAlchemyBillLineRepository(session),
        bill_window=ApplicationConfig.PRICE_HISTORY_BILL_WINDOW,
        cap=ApplicationConfig.PRICE_HISTORY_LIMIT,
    )
    result = await use_case.execute(product_name)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "",
    response_model=BillResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses=DUPLICATE_INVOICE_RESPONSE,
)
async def create_bill(
    request: BillRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Save a bill.

    Totals are recomputed on the server from the submitted rows and
    discount. When `draft_id` is given the draft is deleted in the same
    transaction.

    **Returns:**
    - 201: Bill saved
    - 400: Customer name or line items missing
    - 404: Referenced draft not found
    - 409: Invoice number already in use
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = CreateBill(
        uow,
        SqlAlchemyBillRepository(session),
        SqlAlchemyBillLineRepository(session),
        SqlAlchemyDraftRepository(session),
    )
    result = await use_case.execute(BillCommandDTO(**request.model_dump()))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{bill_id}", response_model=BillResponseDTO)
async def get_bill(bill_id: int, session: AsyncSession = Depends(get_session)):
    use_case = GetBill(SqlAlchemyBillRepository(session), SqlAlchemyBillLineRepository(session))
    result = await use_case.execute(bill_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{bill_id}", response_model=BillResponseDTO, responses=DUPLICATE_INVOICE_RESPONSE)
async def update_bill(
    bill_id: int,
    request: BillRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Replace a bill's header and rows.

    **Returns:**
    - 200: Bill updated
    - 404: Bill not found or deleted
    - 409: Invoice number already used by another bill
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = UpdateBill(uow, SqlAlchemyBillRepository(session), SqlAlchemyBillLineRepository(session))
    result = await use_case.execute(bill_id, BillCommandDTO(**request.model_dump()))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/{bill_id}", response_model=DeleteBillResponseDTO)
async def delete_bill(bill_id: int, session: AsyncSession = Depends(get_session)):
    """
    Soft-delete a bill.

    The bill disappears from lists and reports and its invoice number
    becomes available again.

    **Returns:**
    - 200: Bill deleted
    - 400: Bill already deleted
    - 404: Bill not found
    """
    uow = SqlAlchemyUnitOfWork(session)
    result = await DeleteBill(uow, SqlAlchemyBillRepository(session)).execute(bill_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{bill_id}/pdf",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}},
)
async def download_bill_pdf(bill_id: int, session: AsyncSession = Depends(get_session)):
    """Render the bill as an estimate PDF"""
    use_case = GenerateBillPdf(
        SqlAlchemyBillRepository(session),
        SqlAlchemyBillLineRepository(session),
        ReportLabPdfService(),
        company_name=ApplicationConfig.COMPANY_NAME,
        company_phone=ApplicationConfig.COMPANY_PHONE,
        currency_label=ApplicationConfig.CURRENCY_LABEL,
    )
    result = await use_case.execute(bill_id)

    if result.is_err():
        raise_for_error(result.error)

    pdf = result.value
    return Response(
        content=pdf.content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{pdf.filename}"'},
    )
