from .bill_repository import SqlAlchemyBillRepository
from .line_repository import SqlAlchemyBillLineRepository, SqlAlchemyDraftLineRepository
from .draft_repository import SqlAlchemyDraftRepository
from .catalog_repository import (
    SqlAlchemyCategoryRepository,
    SqlAlchemyMaterialRepository,
    SqlAlchemySizeRepository,
    SqlAlchemyFittingRepository,
)
from .customer_repository import SqlAlchemyCustomerRepository
from .report_repository import SqlAlchemyReportRepository

__all__ = [
    "SqlAlchemyBillRepository",
    "SqlAlchemyBillLineRepository",
    "SqlAlchemyDraftLineRepository",
    "SqlAlchemyDraftRepository",
    "SqlAlchemyCategoryRepository",
    "SqlAlchemyMaterialRepository",
    "SqlAlchemySizeRepository",
    "SqlAlchemyFittingRepository",
    "SqlAlchemyCustomerRepository",
    "SqlAlchemyReportRepository",
]
