"""Bill Computer

Canonical bill arithmetic: line amounts, ply-pattern quantity derivation,
bill-level discount linkage and the subtotal/total/balance roll-up.

All functions are pure and total over Decimal inputs. Malformed input is
rejected at the validation boundary before it reaches this module.

Rounding Rules:
- Money results (line amount, discount amount, adjusted unit price) are
  rounded half-up to 2 decimal places
- Quantities are never rounded
- Discount percent derived from an amount is rounded to a whole percent
"""

import re
from decimal import Decimal, ROUND_HALF_UP
from typing import TYPE_CHECKING, Iterable, List, Optional
from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from src.domain.line_item import LineItem

ZERO = Decimal("0")
HUNDRED = Decimal("100")
CENT = Decimal("0.01")

# "(H x W) N" e.g. "Plywood (8x4) 5", "Laminate (7.5 × 3) 2"
PLY_PATTERN = re.compile(r"\((\d+(?:\.\d+)?)\s*[xX×]\s*(\d+(?:\.\d+)?)\)\s*(\d+)")


def to_money(value: Decimal) -> Decimal:
    """Round a money value half-up to 2 decimal places"""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


class PlyDimensions(BaseModel):
    """Height, width and piece count parsed from a ply product name"""

    model_config = ConfigDict(frozen=True)

    height: Decimal
    width: Decimal
    piece_count: int

    @property
    def square_feet(self) -> Decimal:
        return self.height * self.width * self.piece_count


class BillTotals(BaseModel):
    """Derived bill totals"""

    model_config = ConfigDict(frozen=True)

    sub_total: Decimal
    total: Decimal
    balance: Decimal


def derive_line_amount(quantity: Decimal, unit_price: Decimal, item_percent: Decimal) -> Decimal:
    """
    Compute a row amount

    amount = quantity * unit_price, then item_percent is applied as a
    markup (positive) or discount (negative) on that product.

    Args:
        quantity: Row quantity
        unit_price: Price per unit
        item_percent: Row-level percentage adjustment

    Returns:
        Row amount rounded to 2 decimal places
    """
    amount = quantity * unit_price
    amount = amount + amount * item_percent / HUNDRED
    return to_money(amount)


def detect_ply_pattern(product_name: str) -> Optional[PlyDimensions]:
    """
    Scan a product name for a "(H x W) N" ply pattern

    The separator may be "x", "X" or "×". H and W may be fractional,
    N is an integer piece count. Re-scanning the same text always yields
    the same dimensions.

    Args:
        product_name: Product name text

    Returns:
        PlyDimensions if the pattern is present, None otherwise
    """
    match = PLY_PATTERN.search((product_name or "").strip())
    if not match:
        return None

    return PlyDimensions(
        height=Decimal(match.group(1)),
        width=Decimal(match.group(2)),
        piece_count=int(match.group(3)),
    )


def apply_bill_discount_from_percent(sub_total: Decimal, percent: Decimal) -> Decimal:
    """Discount amount for a bill-level discount percent"""
    return to_money(sub_total * percent / HUNDRED)


def apply_bill_discount_from_amount(sub_total: Decimal, discount_amount: Decimal) -> Decimal:
    """
    Whole discount percent for a bill-level discount amount

    The percent is a display approximation only; the discount amount stays
    exact and is the value used for totals.
    """
    if sub_total <= ZERO:
        return ZERO
    percent = discount_amount / sub_total * HUNDRED
    return percent.quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def compute_bill_totals(
    items: Iterable["LineItem"],
    discount_amount: Decimal,
    received_amount: Decimal,
) -> BillTotals:
    """
    Roll up bill totals

    sub_total = sum of item amounts
    total = max(sub_total - discount_amount, 0)
    balance = max(total - received_amount, 0)
    """
    sub_total = sum((item.amount for item in items), ZERO)
    total = max(sub_total - discount_amount, ZERO)
    balance = max(total - received_amount, ZERO)
    return BillTotals(sub_total=sub_total, total=total, balance=balance)


def apply_uniform_percent_to_all_items(
    items: Iterable["LineItem"], percent: Decimal
) -> List["LineItem"]:
    """
    Bake a percentage into the unit price of every priced item

    Items with a zero unit price are left untouched. Adjusted items get
    their item_percent reset to 0, so the adjustment is applied exactly once
    and never compounds on later recomputation.

    Args:
        items: Line items in display order
        percent: Markup (positive) or discount (negative)

    Returns:
        New list of line items, same order
    """
    updated = []
    for item in items:
        if item.unit_price > ZERO:
            new_price = to_money(item.unit_price + item.unit_price * percent / HUNDRED)
            item = item.model_copy(update={"unit_price": new_price, "item_percent": ZERO})
        updated.append(item)
    return updated
