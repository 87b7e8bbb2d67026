"""Data Transfer Objects for Billing Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime, date as Date
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Sequence
from pydantic import BaseModel, Field, ValidationInfo, field_validator

from src.domain.bill import Bill, Draft
from src.domain.bill_computer import ZERO, detect_ply_pattern
from src.domain.bill_state import BillState
from src.domain.line_item import (
    LineItem,
    Unit,
    ITEM_PERCENT_MIN,
    ITEM_PERCENT_MAX,
    QUANTITY_SCALE,
    UNIT_PRICE_SCALE,
    ITEM_PERCENT_SCALE,
    LINE_VALUE_LIMIT,
)
from src.domain.payment_status import classify_payment_status

_STORED_SCALES = {
    "quantity": QUANTITY_SCALE,
    "unit_price": UNIT_PRICE_SCALE,
    "item_percent": ITEM_PERCENT_SCALE,
}


class LineItemDTO(BaseModel):
    """
    Line item as submitted by a client

    Numbers are rounded to the scale they are stored with, so the amount
    computed now is the amount a stored line rebuilds later. The submitted
    quantity is kept as is; ply metadata is re-derived from the product
    name for Sq-Ft rows only.
    """

    product_name: str = Field(default="", max_length=255)
    quantity: Decimal = Field(default=Decimal("1"), ge=0, lt=LINE_VALUE_LIMIT)
    unit: Unit = Field(default=Unit.PCS)
    unit_price: Decimal = Field(default=ZERO, ge=0, lt=LINE_VALUE_LIMIT)
    item_percent: Decimal = Field(
        default=ZERO,
        ge=ITEM_PERCENT_MIN,
        le=ITEM_PERCENT_MAX,
        description="Row-level percentage adjustment in [-100, 1000]"
    )

    @field_validator("quantity", "unit_price", "item_percent")
    @classmethod
    def round_to_stored_scale(cls, v: Decimal, info: ValidationInfo) -> Decimal:
        return v.quantize(_STORED_SCALES[info.field_name], rounding=ROUND_HALF_UP)

    def to_line_item(self) -> LineItem:
        dimensions = detect_ply_pattern(self.product_name) if self.unit == Unit.SQ_FT else None
        return LineItem(
            product_name=self.product_name.strip(),
            quantity=self.quantity,
            unit=self.unit,
            unit_price=self.unit_price,
            item_percent=self.item_percent,
            is_ply=dimensions is not None,
            height=dimensions.height if dimensions else None,
            width=dimensions.width if dimensions else None,
            piece_count=dimensions.piece_count if dimensions else None,
        )


class ComputeBillCommandDTO(BaseModel):
    """
    Command DTO for a totals preview

    When both discount fields are given the amount wins.
    """

    items: List[LineItemDTO] = Field(default_factory=list)
    discount_amount: Optional[Decimal] = Field(default=None, ge=0)
    discount_percent: Optional[Decimal] = Field(default=None, ge=0)
    received_amount: Decimal = Field(default=ZERO, ge=0)

    def line_items(self) -> List[LineItem]:
        return [item.to_line_item() for item in self.items]


class BillCommandDTO(ComputeBillCommandDTO):
    """
    Command DTO for creating or updating a bill

    Used as input to CreateBill and UpdateBill.
    """

    invoice_number: int = Field(..., gt=0, description="Invoice number (positive)")
    date: Date = Field(..., description="Bill date")
    customer_name: str = Field(default="", max_length=200)
    customer_phone: Optional[str] = Field(default=None, max_length=30)
    draft_id: Optional[int] = Field(
        default=None,
        description="Draft superseded by this bill (deleted on success)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "invoice_number": 101,
                "date": "2024-03-15",
                "customer_name": "Ramesh Traders",
                "customer_phone": "9800000000",
                "items": [
                    {"product_name": "Plywood (8x4) 5", "quantity": "160", "unit": "Sq-Ft", "unit_price": "1.5"},
                ],
                "discount_amount": "25",
                "received_amount": "200",
            }
        }


class DraftCommandDTO(ComputeBillCommandDTO):
    """Command DTO for saving a draft; every header field is optional"""

    invoice_number: Optional[int] = Field(default=None, gt=0)
    date: Optional[Date] = None
    customer_name: str = Field(default="", max_length=200)
    customer_phone: Optional[str] = Field(default=None, max_length=30)


class PriceHistoryQueryDTO(BaseModel):
    product_name: str = Field(..., min_length=1)


class LineItemResponseDTO(BaseModel):
    product_name: str
    quantity: Decimal
    unit: str
    unit_price: Decimal
    item_percent: Decimal
    amount: Decimal
    is_ply: bool = False
    height: Optional[Decimal] = None
    width: Optional[Decimal] = None
    piece_count: Optional[int] = None

    @classmethod
    def from_line_item(cls, item: LineItem) -> "LineItemResponseDTO":
        return cls(
            product_name=item.product_name,
            quantity=item.quantity,
            unit=item.unit.value,
            unit_price=item.unit_price,
            item_percent=item.item_percent,
            amount=item.amount,
            is_ply=item.is_ply,
            height=item.height,
            width=item.width,
            piece_count=item.piece_count,
        )


class BillTotalsDTO(BaseModel):
    sub_total: Decimal
    discount_percent: Decimal
    discount_amount: Decimal
    total: Decimal
    received_amount: Decimal
    balance: Decimal
    payment_status: str


class BillComputationDTO(BillTotalsDTO):
    """Response DTO for ComputeBill"""

    items: List[LineItemResponseDTO]
    amount_in_words: str

    @classmethod
    def from_state(cls, state: BillState, amount_in_words: str) -> "BillComputationDTO":
        return cls(
            items=[LineItemResponseDTO.from_line_item(item) for item in state.items],
            sub_total=state.sub_total,
            discount_percent=state.discount_percent,
            discount_amount=state.discount_amount,
            total=state.total,
            received_amount=state.received_amount,
            balance=state.balance,
            payment_status=classify_payment_status(state.total, state.balance).value,
            amount_in_words=amount_in_words,
        )


class BillResponseDTO(BillTotalsDTO):
    """
    Response DTO for a stored bill

    Returned by CreateBill, UpdateBill, GetBill and inside list pages.
    """

    id: int
    invoice_number: int
    date: Date
    customer_name: str
    customer_phone: Optional[str] = None
    status: str
    items: List[LineItemResponseDTO]
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, bill: Bill, items: Sequence[LineItem]) -> "BillResponseDTO":
        return cls(
            id=bill.id,
            invoice_number=bill.invoice_number,
            date=bill.date,
            customer_name=bill.customer_name,
            customer_phone=bill.customer_phone,
            status=bill.status.value,
            items=[LineItemResponseDTO.from_line_item(item) for item in items],
            sub_total=bill.sub_total,
            discount_percent=bill.discount_percent,
            discount_amount=bill.discount_amount,
            total=bill.total,
            received_amount=bill.received_amount,
            balance=bill.balance,
            payment_status=classify_payment_status(bill.total, bill.balance).value,
            created_at=bill.created_at,
            updated_at=bill.updated_at,
            deleted_at=bill.deleted_at,
        )


class DraftResponseDTO(BillTotalsDTO):
    id: int
    invoice_number: Optional[int] = None
    date: Optional[Date] = None
    customer_name: str
    customer_phone: Optional[str] = None
    status: str
    items: List[LineItemResponseDTO]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, draft: Draft, items: Sequence[LineItem]) -> "DraftResponseDTO":
        return cls(
            id=draft.id,
            invoice_number=draft.invoice_number,
            date=draft.date,
            customer_name=draft.customer_name,
            customer_phone=draft.customer_phone,
            status=draft.status.value,
            items=[LineItemResponseDTO.from_line_item(item) for item in items],
            sub_total=draft.sub_total,
            discount_percent=draft.discount_percent,
            discount_amount=draft.discount_amount,
            total=draft.total,
            received_amount=draft.received_amount,
            balance=draft.balance,
            payment_status=classify_payment_status(draft.total, draft.balance).value,
            created_at=draft.created_at,
            updated_at=draft.updated_at,
        )


class NextInvoiceNumberDTO(BaseModel):
    invoice_number: int


class DeleteBillResponseDTO(BaseModel):
    id: int
    invoice_number: int
    deleted: bool
    deleted_at: datetime


class PriceSuggestionDTO(BaseModel):
    price: Decimal
    unit: str
    date: Date


class PriceHistoryResponseDTO(BaseModel):
    product_name: str
    suggestions: List[PriceSuggestionDTO]


class BillPdfDTO(BaseModel):
    """Rendered estimate PDF"""

    bill_id: int
    invoice_number: int
    filename: str
    content: bytes
