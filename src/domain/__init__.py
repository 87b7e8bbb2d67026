from .base import BaseModel
from .line_item import LineItem, Unit
from .bill_state import BillState, DiscountMode
from .bill import Bill, Draft, BillStatus
from .bill_line import BillLine, DraftLine
from .catalog import Category, Material, Size, Fitting
from .customer import Customer
from .payment_status import PaymentStatus

__all__ = [
    "BaseModel",
    "LineItem",
    "Unit",
    "BillState",
    "DiscountMode",
    "Bill",
    "Draft",
    "BillStatus",
    "BillLine",
    "DraftLine",
    "Category",
    "Material",
    "Size",
    "Fitting",
    "Customer",
    "PaymentStatus",
]
