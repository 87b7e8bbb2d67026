"""Bill Line Domain Entities

Persisted form of LineItem for bills and drafts. The stored amount is
written from LineItem.amount at save time and is only read back for
reporting; the computation always starts from LineItem.
"""

from decimal import Decimal
from typing import Any, Dict, Optional
from sqlmodel import Field, Column, Index, SQLModel
from sqlalchemy import ForeignKey
from src.domain.base import BaseModel, BigIntPrimaryKey
from src.domain.bill_computer import ZERO
from src.domain.line_item import LineItem, Unit


class LineFields(SQLModel):
    """Columns shared by bill_lines and draft_lines"""

    position: int = Field(
        default=0,
        description="Display order within the bill (entry order)"
    )

    product_name: str = Field(
        default="",
        max_length=255,
        description="Product name as entered or built from the catalog"
    )

    quantity: Decimal = Field(
        default=Decimal("1"),
        max_digits=18,
        decimal_places=6,
        description="Quantity"
    )

    unit: str = Field(
        default=Unit.PCS.value,
        max_length=20,
        description="Unit of sale"
    )

    unit_price: Decimal = Field(
        default=ZERO,
        max_digits=18,
        decimal_places=6,
        description="Price per unit"
    )

    item_percent: Decimal = Field(
        default=ZERO,
        max_digits=10,
        decimal_places=4,
        description="Row-level percentage adjustment"
    )

    amount: Decimal = Field(
        default=ZERO,
        max_digits=18,
        decimal_places=2,
        description="Derived row amount at save time"
    )

    is_ply: bool = Field(default=False)
    height: Optional[Decimal] = Field(default=None, max_digits=12, decimal_places=4)
    width: Optional[Decimal] = Field(default=None, max_digits=12, decimal_places=4)
    piece_count: Optional[int] = Field(default=None)

    def to_line_item(self) -> LineItem:
        return LineItem(
            product_name=self.product_name,
            quantity=self.quantity,
            unit=Unit(self.unit),
            unit_price=self.unit_price,
            item_percent=self.item_percent,
            is_ply=self.is_ply,
            height=self.height,
            width=self.width,
            piece_count=self.piece_count,
        )

    @staticmethod
    def values_from_line_item(item: LineItem, position: int) -> Dict[str, Any]:
        return {
            "position": position,
            "product_name": item.product_name,
            "quantity": item.quantity,
            "unit": item.unit.value,
            "unit_price": item.unit_price,
            "item_percent": item.item_percent,
            "amount": item.amount,
            "is_ply": item.is_ply,
            "height": item.height,
            "width": item.width,
            "piece_count": item.piece_count,
        }


class BillLine(LineFields, BaseModel, table=True):
    """
    Bill Line - one row of a finalized bill

    Domain Rules:
    - Each line belongs to exactly one bill
    - amount = quantity * unit_price * (1 + item_percent / 100)
    - Lines are replaced wholesale when the bill is updated
    """

    __tablename__ = "bill_lines"
    __table_args__ = (
        Index('ix_bill_lines_bill_id', 'bill_id'),
        Index('ix_bill_lines_product_name', 'product_name'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(BigIntPrimaryKey, primary_key=True, autoincrement=True),
        description="Unique bill line identifier (auto-increment)"
    )

    bill_id: int = Field(
        sa_column=Column(BigIntPrimaryKey, ForeignKey("bills.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Bill"
    )


class DraftLine(LineFields, BaseModel, table=True):
    """Draft Line - one row of a draft"""

    __tablename__ = "draft_lines"
    __table_args__ = (
        Index('ix_draft_lines_draft_id', 'draft_id'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(BigIntPrimaryKey, primary_key=True, autoincrement=True),
        description="Unique draft line identifier (auto-increment)"
    )

    draft_id: int = Field(
        sa_column=Column(BigIntPrimaryKey, ForeignKey("drafts.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Draft"
    )
