from .unit_of_work import UnitOfWork
from .pdf_service import PdfService
from .cache_service import CacheService

__all__ = [
    "UnitOfWork",
    "PdfService",
    "CacheService",
]
