"""Checks shared by the bill write use cases"""

from typing import List, Optional
from libs.result import Error
from src.domain.line_item import LineItem


def validate_bill_header(customer_name: str, items: List[LineItem]) -> Optional[Error]:
    """Return a VALIDATION_ERROR when a bill cannot be finalized, None otherwise"""
    if not customer_name.strip():
        return Error(
            code="VALIDATION_ERROR",
            message="Customer name is required",
            reason="customer_name is empty",
        )
    if not items:
        return Error(
            code="VALIDATION_ERROR",
            message="At least one item is required",
            reason="items is empty",
        )
    return None


def duplicate_invoice_error(invoice_number: int, reason: str = "") -> Error:
    return Error(
        code="DUPLICATE_INVOICE_NUMBER",
        message=f"Invoice number {invoice_number} already exists",
        reason=reason or f"invoice_number={invoice_number} is used by a live bill",
    )
