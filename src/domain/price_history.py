"""Price History Lookup

Suggests recently charged prices for a product name.
"""

import datetime
from decimal import Decimal
from typing import Iterable, List
from pydantic import BaseModel, ConfigDict

from src.domain.line_item import LineItem

DEFAULT_PRICE_HISTORY_LIMIT = 5


class PricedBill(BaseModel):
    """A past bill reduced to what the lookup needs"""

    model_config = ConfigDict(frozen=True)

    date: datetime.date
    items: List[LineItem]


class PriceSuggestion(BaseModel):
    """A distinct past price for a product"""

    model_config = ConfigDict(frozen=True)

    price: Decimal
    unit: str
    date: datetime.date


def lookup_price_history(
    product_name: str,
    bills: Iterable[PricedBill],
    cap: int = DEFAULT_PRICE_HISTORY_LIMIT,
) -> List[PriceSuggestion]:
    """
    Most recent distinct prices charged for an exact product name

    Args:
        product_name: Exact, case-sensitive product name
        bills: Past non-deleted bills, newest first
        cap: Maximum number of suggestions

    Returns:
        Suggestions ordered by recency of first occurrence, no repeated price
    """
    suggestions: List[PriceSuggestion] = []
    if cap <= 0:
        return suggestions

    seen_prices = set()
    for bill in bills:
        for item in bill.items:
            if item.product_name != product_name or item.unit_price in seen_prices:
                continue
            seen_prices.add(item.unit_price)
            suggestions.append(
                PriceSuggestion(price=item.unit_price, unit=item.unit.value, date=bill.date)
            )
            if len(suggestions) >= cap:
                return suggestions

    return suggestions
