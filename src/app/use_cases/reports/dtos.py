"""Data Transfer Objects for Report Use Cases

Money values are rounded to 2 decimal places.
"""

from datetime import date as Date
from decimal import Decimal
from typing import Any, List, Optional
from pydantic import BaseModel, model_validator

from src.domain.bill_computer import ZERO, to_money


def money(value: Any) -> Decimal:
    """Coerce an aggregate (Decimal, float, int or None) to a 2 dp Decimal"""
    if value is None:
        return ZERO
    return to_money(Decimal(str(value)))


class ReportQueryDTO(BaseModel):
    """Inclusive bill-date range; either bound may be omitted"""

    date_from: Optional[Date] = None
    date_to: Optional[Date] = None

    @model_validator(mode="after")
    def check_range(self):
        if self.date_from and self.date_to and self.date_from > self.date_to:
            raise ValueError("date_from must not be after date_to")
        return self


class ReportSummaryDTO(BaseModel):
    total_bills: int
    total_revenue: Decimal
    total_discount: Decimal
    total_balance: Decimal
    avg_bill: Decimal
    unique_customers: int


class RevenuePointDTO(BaseModel):
    date: Date
    revenue: Decimal
    bill_count: int


class CustomerStatDTO(BaseModel):
    customer_name: str
    total_revenue: Decimal
    bill_count: int
    pending_balance: Decimal
    avg_bill: Decimal


class ProductStatDTO(BaseModel):
    product_name: str
    total_quantity: Decimal
    total_amount: Decimal
    occurrences: int


class PaymentBucketDTO(BaseModel):
    bill_count: int = 0
    total: Decimal = ZERO


class PaymentStatusReportDTO(BaseModel):
    fully_paid: PaymentBucketDTO
    partially_paid: PaymentBucketDTO
    unpaid: PaymentBucketDTO


class RecentBillDTO(BaseModel):
    id: int
    invoice_number: int
    date: Date
    customer_name: str
    total: Decimal
    balance: Decimal
    payment_status: str
    item_count: int
