"""Customer Domain Entity

Customers known to the shop, used for autocomplete when billing.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import String
from src.domain.base import BaseModel, BigIntPrimaryKey, UtcDateTime, utc_now


class Customer(BaseModel, table=True):
    """
    Customer - billing counterparty

    Domain Rules:
    - Name is required
    - Bills snapshot name/phone; editing a customer never rewrites past bills
    """

    __tablename__ = "customers"
    __table_args__ = (
        Index('ix_customers_name', 'name'),
        Index('ix_customers_phone', 'phone'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(BigIntPrimaryKey, primary_key=True, autoincrement=True),
        description="Unique customer identifier (auto-increment)"
    )

    name: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Customer name"
    )

    phone: Optional[str] = Field(
        default=None,
        sa_column=Column(String(30), nullable=True),
        description="Phone number"
    )

    address: Optional[str] = Field(
        default=None,
        sa_column=Column(String(500), nullable=True),
        description="Postal address"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_type=UtcDateTime,
        description="Customer creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_type=UtcDateTime,
        description="Last update timestamp"
    )
