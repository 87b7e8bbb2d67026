"""Request schemas for Bill and Draft APIs

Pydantic models for validating incoming HTTP requests.
"""

from datetime import date as Date
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from src.domain.line_item import Unit, ITEM_PERCENT_MIN, ITEM_PERCENT_MAX, LINE_VALUE_LIMIT


class LineItemSchema(BaseModel):
    """
    One bill row as entered in the billing screen

    item_percent outside [-100, 1000] is rejected here; the computation
    itself never clamps.
    """

    product_name: str = Field(
        default="",
        max_length=255,
        description="Product name (free text or built from the catalog)"
    )

    quantity: Decimal = Field(
        default=Decimal("1"),
        ge=0,
        lt=LINE_VALUE_LIMIT,
        description="Quantity (square feet for ply items)"
    )

    unit: Unit = Field(
        default=Unit.PCS,
        description="Unit of sale"
    )

    unit_price: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        lt=LINE_VALUE_LIMIT,
        description="Price per unit"
    )

    item_percent: Decimal = Field(
        default=Decimal("0"),
        ge=ITEM_PERCENT_MIN,
        le=ITEM_PERCENT_MAX,
        description="Row markup (+) or discount (-) in percent"
    )

    @field_validator('product_name')
    @classmethod
    def strip_product_name(cls, v):
        return v.strip()


class ComputeBillRequestSchema(BaseModel):
    """
    Request schema for a totals preview

    Used for POST /bills/compute endpoint.
    """

    items: List[LineItemSchema] = Field(default_factory=list)

    discount_amount: Optional[Decimal] = Field(
        default=None,
        ge=0,
        description="Bill discount amount (wins over discount_percent)"
    )

    discount_percent: Optional[Decimal] = Field(
        default=None,
        ge=0,
        description="Bill discount percent, used when no amount is given"
    )

    received_amount: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Amount received from the customer"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "items": [
                    {"product_name": "Hinge", "quantity": "2", "unit_price": "100"},
                    {"product_name": "Handle", "quantity": "1", "unit_price": "50", "item_percent": "10"},
                ],
                "discount_amount": "25",
                "received_amount": "200",
            }
        }


class BillRequestSchema(ComputeBillRequestSchema):
    """
    Request schema for creating or updating a bill

    Used for POST /bills and PUT /bills/{bill_id}.
    """

    invoice_number: int = Field(
        ...,
        gt=0,
        description="Invoice number (unique among non-deleted bills)"
    )

    date: Date = Field(
        ...,
        description="Bill date"
    )

    customer_name: str = Field(
        default="",
        max_length=200,
        description="Customer name (required to finalize)"
    )

    customer_phone: Optional[str] = Field(
        default=None,
        max_length=30,
    )

    draft_id: Optional[int] = Field(
        default=None,
        description="Draft to delete once the bill is saved"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "invoice_number": 101,
                "date": "2024-03-15",
                "customer_name": "Ramesh Traders",
                "items": [
                    {"product_name": "Hinge", "quantity": "2", "unit_price": "100"},
                    {"product_name": "Handle", "quantity": "1", "unit_price": "50", "item_percent": "10"},
                ],
                "discount_amount": "25",
                "received_amount": "200",
            }
        }


class DraftRequestSchema(ComputeBillRequestSchema):
    """Request schema for POST /drafts and PUT /drafts/{draft_id}"""

    invoice_number: Optional[int] = Field(default=None, gt=0)
    date: Optional[Date] = None
    customer_name: str = Field(default="", max_length=200)
    customer_phone: Optional[str] = Field(default=None, max_length=30)
