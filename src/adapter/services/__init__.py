from .unit_of_work import SqlAlchemyUnitOfWork
from .pdf_service import ReportLabPdfService
from .cache_service import (
    InMemoryCacheService,
    RedisCacheService,
    create_cache_service,
)

__all__ = [
    "SqlAlchemyUnitOfWork",
    "ReportLabPdfService",
    "InMemoryCacheService",
    "RedisCacheService",
    "create_cache_service",
]
