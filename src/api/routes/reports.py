"""Report API Routes

Sales reports over non-deleted bills. Every endpoint accepts an optional
inclusive `date_from` / `date_to` range on the bill date.
"""

from datetime import date as Date
from typing import Optional
from fastapi import APIRouter, Depends, Query
from pydantic import ValidationError
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Error
from src.app.use_cases.pagination import PageDTO
from src.app.use_cases.reports import (
    GetReportSummary,
    GetRevenueTrend,
    GetTopCustomers,
    GetTopProducts,
    GetPaymentStatus,
    GetRecentBills,
    ReportQueryDTO,
)
from src.app.use_cases.reports.dtos import (
    ReportSummaryDTO,
    RevenuePointDTO,
    CustomerStatDTO,
    ProductStatDTO,
    PaymentStatusReportDTO,
    RecentBillDTO,
)
from src.adapter.repositories import SqlAlchemyReportRepository
from src.depends import get_session
from src.api.error import raise_for_error

router = APIRouter(prefix="/reports", tags=["Reports"])


def report_query(
    date_from: Optional[Date] = Query(None),
    date_to: Optional[Date] = Query(None),
) -> ReportQueryDTO:
    try:
        return ReportQueryDTO(date_from=date_from, date_to=date_to)
    except ValidationError:
        raise_for_error(
            Error(
                code="VALIDATION_ERROR",
                message="date_from must not be after date_to",
                reason=f"date_from={date_from}, date_to={date_to}",
            )
        )


def _unwrap(result):
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/summary", response_model=ReportSummaryDTO)
async def summary(
    query: ReportQueryDTO = Depends(report_query),
    session: AsyncSession = Depends(get_session),
):
    """Bill count, revenue, discount, outstanding balance and unique customers"""
    return _unwrap(await GetReportSummary(SqlAlchemyReportRepository(session)).execute(query))


@router.get("/revenue-trend", response_model=PageDTO[RevenuePointDTO])
async def revenue_trend(
    query: ReportQueryDTO = Depends(report_query),
    session: AsyncSession = Depends(get_session),
):
    """Revenue and bill count per day, oldest first"""
    use_case = GetRevenueTrend(SqlAlchemyReportRepository(session))
    return PageDTO[RevenuePointDTO].single(_unwrap(await use_case.execute(query)))


@router.get("/top-customers", response_model=PageDTO[CustomerStatDTO])
async def top_customers(
    limit: int = Query(10, ge=1, le=100),
    query: ReportQueryDTO = Depends(report_query),
    session: AsyncSession = Depends(get_session),
):
    use_case = GetTopCustomers(SqlAlchemyReportRepository(session))
    return PageDTO[CustomerStatDTO].single(_unwrap(await use_case.execute(query, limit=limit)))


@router.get("/top-products", response_model=PageDTO[ProductStatDTO])
async def top_products(
    limit: int = Query(10, ge=1, le=100),
    query: ReportQueryDTO = Depends(report_query),
    session: AsyncSession = Depends(get_session),
):
    use_case = GetTopProducts(SqlAlchemyReportRepository(session))
    return PageDTO[ProductStatDTO].single(_unwrap(await use_case.execute(query, limit=limit)))


@router.get("/payment-status", response_model=PaymentStatusReportDTO)
async def payment_status(
    query: ReportQueryDTO = Depends(report_query),
    session: AsyncSession = Depends(get_session),
):
    """Bills grouped into fully paid, partially paid and unpaid"""
    return _unwrap(await GetPaymentStatus(SqlAlchemyReportRepository(session)).execute(query))


@router.get("/recent-bills", response_model=PageDTO[RecentBillDTO])
async def recent_bills(
    page: int = Query(1, ge=1),
    limit: int = Query(ApplicationConfig.DEFAULT_PAGE_SIZE, ge=1, le=100),
    query: ReportQueryDTO = Depends(report_query),
    session: AsyncSession = Depends(get_session),
):
    use_case = GetRecentBills(SqlAlchemyReportRepository(session))
    return _unwrap(await use_case.execute(query, page=page, limit=limit))
