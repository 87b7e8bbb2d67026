"""Bill State Container

Immutable snapshot of a bill being edited. Every update function returns a
new snapshot with derived totals recomputed, so sub_total, total and
balance can never drift from items, discount and received amount.
"""

from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, Optional, Tuple
from pydantic import BaseModel, ConfigDict, computed_field

from src.domain.bill_computer import (
    ZERO,
    BillTotals,
    apply_bill_discount_from_amount,
    apply_bill_discount_from_percent,
    apply_uniform_percent_to_all_items,
    compute_bill_totals,
)
from src.domain.line_item import LineItem


class DiscountMode(str, Enum):
    """Which half of the discount pair the user entered last"""
    PERCENT = "percent"
    AMOUNT = "amount"


class BillState(BaseModel):
    """
    Bill State - items plus discount/payment inputs

    Domain Rules:
    - Derived fields are computed, never assigned
    - In PERCENT mode the discount amount follows the sub total
    - In AMOUNT mode the discount amount is kept and the percent follows
    """

    model_config = ConfigDict(frozen=True)

    items: Tuple[LineItem, ...] = ()
    discount_mode: DiscountMode = DiscountMode.AMOUNT
    discount_percent: Decimal = ZERO
    discount_amount: Decimal = ZERO
    received_amount: Decimal = ZERO

    @property
    def totals(self) -> BillTotals:
        return compute_bill_totals(self.items, self.discount_amount, self.received_amount)

    @computed_field
    @property
    def sub_total(self) -> Decimal:
        return self.totals.sub_total

    @computed_field
    @property
    def total(self) -> Decimal:
        return self.totals.total

    @computed_field
    @property
    def balance(self) -> Decimal:
        return self.totals.balance


def _recompute(state: BillState, **changes: Any) -> BillState:
    new_state = state.model_copy(update=changes)
    sub_total = new_state.sub_total

    if new_state.discount_mode == DiscountMode.PERCENT:
        discount_amount = apply_bill_discount_from_percent(sub_total, new_state.discount_percent)
        return new_state.model_copy(update={"discount_amount": discount_amount})

    discount_percent = apply_bill_discount_from_amount(sub_total, new_state.discount_amount)
    return new_state.model_copy(update={"discount_percent": discount_percent})


def _check_index(state: BillState, index: int) -> None:
    if not 0 <= index < len(state.items):
        raise IndexError(f"No item at position {index} (bill has {len(state.items)} items)")


def build_bill_state(
    items: Iterable[LineItem],
    discount_amount: Optional[Decimal] = None,
    discount_percent: Optional[Decimal] = None,
    received_amount: Decimal = ZERO,
) -> BillState:
    """
    Build a state from persisted or submitted values

    An explicit discount amount wins over a percent, since the amount is
    the value that participates in the total.
    """
    if discount_amount is None and discount_percent is not None:
        state = BillState(
            items=tuple(items),
            discount_mode=DiscountMode.PERCENT,
            discount_percent=discount_percent,
            received_amount=received_amount,
        )
    else:
        state = BillState(
            items=tuple(items),
            discount_mode=DiscountMode.AMOUNT,
            discount_amount=discount_amount or ZERO,
            received_amount=received_amount,
        )
    return _recompute(state)


def add_item(state: BillState, item: LineItem) -> BillState:
    return _recompute(state, items=state.items + (item,))


def update_item(state: BillState, index: int, **changes: Any) -> BillState:
    """
    Replace fields of the item at ``index``

    A changed product name re-runs ply detection after the other changes
    are applied, so a detected ply quantity wins over a submitted one.
    """
    _check_index(state, index)
    current = state.items[index]

    new_name = changes.pop("product_name", None)
    values = current.model_dump(exclude={"amount"})
    values.update(changes)
    item = LineItem.model_validate(values)

    if new_name is not None and new_name != current.product_name:
        item = item.with_product_name(new_name)

    items = state.items[:index] + (item,) + state.items[index + 1:]
    return _recompute(state, items=items)


def remove_item(state: BillState, index: int) -> BillState:
    _check_index(state, index)
    return _recompute(state, items=state.items[:index] + state.items[index + 1:])


def set_discount_percent(state: BillState, percent: Decimal) -> BillState:
    return _recompute(state, discount_mode=DiscountMode.PERCENT, discount_percent=percent)


def set_discount_amount(state: BillState, amount: Decimal) -> BillState:
    return _recompute(state, discount_mode=DiscountMode.AMOUNT, discount_amount=amount)


def set_received_amount(state: BillState, amount: Decimal) -> BillState:
    return _recompute(state, received_amount=amount)


def apply_percent_to_all(state: BillState, percent: Decimal) -> BillState:
    """Bulk one-shot markup/discount baked into every priced item's unit price"""
    items = apply_uniform_percent_to_all_items(state.items, percent)
    return _recompute(state, items=tuple(items))
