"""Bill and Draft Domain Entities

A Bill is a finalized estimate with a unique invoice number. A Draft has
the same shape but none of the finalize constraints.
"""

from datetime import datetime, date as Date
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index, SQLModel
from sqlalchemy import Boolean, String, Integer, text
from src.domain.base import BaseModel, BigIntPrimaryKey, UtcDateTime, utc_now
from src.domain.bill_computer import ZERO
from src.domain.bill_state import BillState


class BillStatus(str, Enum):
    """Bill lifecycle: draft -> finalized -> deleted (terminal)"""
    DRAFT = "draft"
    FINALIZED = "finalized"
    DELETED = "deleted"


class BillTotalsFields(SQLModel):
    """Stored derived totals, always written from a BillState"""

    sub_total: Decimal = Field(default=ZERO, max_digits=18, decimal_places=2)
    discount_percent: Decimal = Field(default=ZERO, max_digits=10, decimal_places=4)
    discount_amount: Decimal = Field(default=ZERO, max_digits=18, decimal_places=2)
    total: Decimal = Field(default=ZERO, max_digits=18, decimal_places=2)
    received_amount: Decimal = Field(default=ZERO, max_digits=18, decimal_places=2)
    balance: Decimal = Field(default=ZERO, max_digits=18, decimal_places=2)

    def apply_totals(self, state: BillState) -> None:
        """Copy derived totals from a freshly computed state"""
        self.sub_total = state.sub_total
        self.discount_percent = state.discount_percent
        self.discount_amount = state.discount_amount
        self.total = state.total
        self.received_amount = state.received_amount
        self.balance = state.balance


class Bill(BillTotalsFields, BaseModel, table=True):
    """
    Bill - Finalized estimate issued to a customer

    Domain Rules:
    - invoice_number is unique among non-deleted bills (partial unique index)
    - At least one line and a non-empty customer name (enforced at use case layer)
    - Totals are pure functions of lines, discount_amount and received_amount
    - Soft delete only; a deleted bill is terminal and keeps its row
    """

    __tablename__ = "bills"
    __table_args__ = (
        Index(
            'ux_bills_invoice_number_live',
            'invoice_number',
            unique=True,
            sqlite_where=text('deleted = 0'),
            postgresql_where=text('deleted = false'),
        ),
        Index('ix_bills_date', 'date'),
        Index('ix_bills_created_at', 'created_at'),
        Index('ix_bills_customer_name', 'customer_name'),
        Index('ix_bills_deleted', 'deleted'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(BigIntPrimaryKey, primary_key=True, autoincrement=True),
        description="Unique bill identifier (auto-increment)"
    )

    invoice_number: int = Field(
        sa_column=Column(Integer, nullable=False),
        description="Invoice number (positive, unique among live bills)"
    )

    date: Date = Field(
        description="Bill date"
    )

    customer_name: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Customer name (required)"
    )

    customer_phone: Optional[str] = Field(
        default=None,
        sa_column=Column(String(30), nullable=True),
        description="Customer phone"
    )

    deleted: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False, default=False),
        description="Soft-delete marker"
    )

    deleted_at: Optional[datetime] = Field(
        default=None,
        sa_type=UtcDateTime,
        description="Timestamp of soft delete"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_type=UtcDateTime,
        description="Bill creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_type=UtcDateTime,
        description="Last update timestamp"
    )

    @property
    def status(self) -> BillStatus:
        return BillStatus.DELETED if self.deleted else BillStatus.FINALIZED

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 1,
                "invoice_number": 101,
                "date": "2024-03-15",
                "customer_name": "Ramesh Traders",
                "customer_phone": "9800000000",
                "sub_total": "255.00",
                "discount_percent": "10",
                "discount_amount": "25.00",
                "total": "230.00",
                "received_amount": "200.00",
                "balance": "30.00",
                "deleted": False,
            }
        }


class Draft(BillTotalsFields, BaseModel, table=True):
    """
    Draft - Bill in progress

    Domain Rules:
    - No uniqueness on invoice_number, no required header fields
    - May have zero lines
    - Updated in place; removed when promoted to a Bill or deleted
    """

    __tablename__ = "drafts"
    __table_args__ = (
        Index('ix_drafts_created_at', 'created_at'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(BigIntPrimaryKey, primary_key=True, autoincrement=True),
        description="Unique draft identifier (auto-increment)"
    )

    invoice_number: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, nullable=True),
        description="Proposed invoice number"
    )

    date: Optional[Date] = Field(
        default=None,
        description="Proposed bill date"
    )

    customer_name: str = Field(
        default="",
        sa_column=Column(String(200), nullable=False, default=""),
        description="Customer name (may be empty)"
    )

    customer_phone: Optional[str] = Field(
        default=None,
        sa_column=Column(String(30), nullable=True),
        description="Customer phone"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_type=UtcDateTime,
        description="Draft creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_type=UtcDateTime,
        description="Last update timestamp"
    )

    @property
    def status(self) -> BillStatus:
        return BillStatus.DRAFT
