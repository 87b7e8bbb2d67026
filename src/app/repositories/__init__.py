from .bill_repository import BillRepository
from .line_repository import BillLineRepository, DraftLineRepository
from .draft_repository import DraftRepository
from .catalog_repository import (
    CategoryRepository,
    MaterialRepository,
    SizeRepository,
    FittingRepository,
)
from .customer_repository import CustomerRepository
from .report_repository import ReportRepository

__all__ = [
    "BillRepository",
    "BillLineRepository",
    "DraftLineRepository",
    "DraftRepository",
    "CategoryRepository",
    "MaterialRepository",
    "SizeRepository",
    "FittingRepository",
    "CustomerRepository",
    "ReportRepository",
]
