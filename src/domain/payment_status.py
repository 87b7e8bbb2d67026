"""Payment status buckets used by reporting"""

from decimal import Decimal
from enum import Enum


class PaymentStatus(str, Enum):
    FULLY_PAID = "fully_paid"
    PARTIALLY_PAID = "partially_paid"
    UNPAID = "unpaid"


def classify_payment_status(total: Decimal, balance: Decimal) -> PaymentStatus:
    """
    Bucket a bill by comparing its balance to its total

    A zero-total bill has a zero balance and counts as fully paid.
    """
    if balance == 0:
        return PaymentStatus.FULLY_PAID
    if balance < total:
        return PaymentStatus.PARTIALLY_PAID
    return PaymentStatus.UNPAID
