"""Line Item Value Object

One row of a bill or draft. The row amount is always derived from its
inputs and is never stored independently of them.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, computed_field

from src.domain.bill_computer import ZERO, derive_line_amount, detect_ply_pattern

ITEM_PERCENT_MIN = Decimal("-100")
ITEM_PERCENT_MAX = Decimal("1000")

# Scales of the stored line columns
QUANTITY_SCALE = Decimal("0.000001")
UNIT_PRICE_SCALE = Decimal("0.000001")
ITEM_PERCENT_SCALE = Decimal("0.0001")

# quantity and unit_price columns hold 12 integer digits
LINE_VALUE_LIMIT = Decimal("1e12")


class Unit(str, Enum):
    """Units a line item can be sold in"""
    PCS = "Pcs"
    KG = "Kg"
    SQ_FT = "Sq-Ft"
    MTR = "Mtr"
    BUNDLE = "Bundle"
    FT = "ft"


class LineItem(BaseModel):
    """
    Line Item - a single priced row

    Domain Rules:
    - amount = quantity * unit_price * (1 + item_percent / 100), recomputed on read
    - item_percent is a markup (positive) or discount (negative) for this row only
    - Ply metadata is descriptive; quantity already encodes it
    """

    model_config = ConfigDict(frozen=True)

    product_name: str = Field(
        default="",
        description="Free text or catalog-derived product name"
    )

    quantity: Decimal = Field(
        default=Decimal("1"),
        ge=0,
        description="Quantity (auto-derived for ply patterns)"
    )

    unit: Unit = Field(
        default=Unit.PCS,
        description="Unit of sale (forced to Sq-Ft for ply patterns)"
    )

    unit_price: Decimal = Field(
        default=ZERO,
        ge=0,
        description="Price per unit"
    )

    item_percent: Decimal = Field(
        default=ZERO,
        ge=ITEM_PERCENT_MIN,
        le=ITEM_PERCENT_MAX,
        description="Row-level percentage adjustment in [-100, 1000]"
    )

    is_ply: bool = False
    height: Optional[Decimal] = None
    width: Optional[Decimal] = None
    piece_count: Optional[int] = None

    @computed_field
    @property
    def amount(self) -> Decimal:
        return derive_line_amount(self.quantity, self.unit_price, self.item_percent)

    def with_product_name(self, product_name: str) -> "LineItem":
        """
        Return a copy carrying a new product name

        When the name contains a ply pattern the quantity becomes
        height * width * pieces and the unit is forced to Sq-Ft.
        """
        dimensions = detect_ply_pattern(product_name)
        if dimensions is None:
            return self.model_copy(
                update={
                    "product_name": product_name,
                    "is_ply": False,
                    "height": None,
                    "width": None,
                    "piece_count": None,
                }
            )

        return self.model_copy(
            update={
                "product_name": product_name,
                "quantity": dimensions.square_feet,
                "unit": Unit.SQ_FT,
                "is_ply": True,
                "height": dimensions.height,
                "width": dimensions.width,
                "piece_count": dimensions.piece_count,
            }
        )
