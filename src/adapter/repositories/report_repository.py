"""SQLAlchemy Report Repository Implementation

Aggregate queries for the reports screen. All queries skip deleted bills and
filter on the bill date when a range is given.
"""

from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.report_repository import ReportRepository
from src.domain.bill import Bill
from src.domain.bill_line import BillLine


def _live_in_range(statement, date_from: Optional[date], date_to: Optional[date]):
    statement = statement.where(Bill.deleted == False)  # noqa: E712
    if date_from is not None:
        statement = statement.where(Bill.date >= date_from)
    if date_to is not None:
        statement = statement.where(Bill.date <= date_to)
    return statement


class SqlAlchemyReportRepository(ReportRepository):
    """
    SQLAlchemy implementation of ReportRepository

    Uses GROUP BY queries; nothing is cached.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def summary(
        self, date_from: Optional[date] = None, date_to: Optional[date] = None
    ) -> Dict[str, Any]:
        statement = _live_in_range(
            select(
                func.count(Bill.id),
                func.coalesce(func.sum(Bill.total), 0),
                func.coalesce(func.sum(Bill.discount_amount), 0),
                func.coalesce(func.sum(Bill.balance), 0),
                func.count(func.distinct(Bill.customer_name)),
            ),
            date_from,
            date_to,
        )
        row = (await self.session.execute(statement)).one()
        return {
            "total_bills": row[0],
            "total_revenue": row[1],
            "total_discount": row[2],
            "total_balance": row[3],
            "unique_customers": row[4],
        }

    async def revenue_by_date(
        self, date_from: Optional[date] = None, date_to: Optional[date] = None
    ) -> List[Dict[str, Any]]:
        statement = _live_in_range(
            select(Bill.date, func.sum(Bill.total), func.count(Bill.id)),
            date_from,
            date_to,
        ).group_by(Bill.date).order_by(Bill.date)

        result = await self.session.execute(statement)
        return [
            {"date": bill_date, "revenue": revenue, "bill_count": bill_count}
            for bill_date, revenue, bill_count in result.all()
        ]

    async def top_customers(
        self,
        limit: int = 10,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
    ) -> List[Dict[str, Any]]:
        revenue = func.sum(Bill.total)
        statement = (
            _live_in_range(
                select(
                    Bill.customer_name,
                    revenue,
                    func.count(Bill.id),
                    func.sum(Bill.balance),
                ),
                date_from,
                date_to,
            )
            .group_by(Bill.customer_name)
            .order_by(revenue.desc(), Bill.customer_name)
            .limit(limit)
        )

        result = await self.session.execute(statement)
        return [
            {
                "customer_name": name,
                "total_revenue": total_revenue,
                "bill_count": bill_count,
                "pending_balance": pending,
            }
            for name, total_revenue, bill_count, pending in result.all()
        ]

    async def top_products(
        self,
        limit: int = 10,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
    ) -> List[Dict[str, Any]]:
        amount = func.sum(BillLine.amount)
        statement = (
            _live_in_range(
                select(
                    BillLine.product_name,
                    func.sum(BillLine.quantity),
                    amount,
                    func.count(BillLine.id),
                ).join(Bill, Bill.id == BillLine.bill_id),
                date_from,
                date_to,
            )
            .where(BillLine.product_name != "")
            .group_by(BillLine.product_name)
            .order_by(amount.desc(), BillLine.product_name)
            .limit(limit)
        )

        result = await self.session.execute(statement)
        return [
            {
                "product_name": name,
                "total_quantity": quantity,
                "total_amount": total_amount,
                "occurrences": occurrences,
            }
            for name, quantity, total_amount, occurrences in result.all()
        ]

    async def bill_totals(
        self, date_from: Optional[date] = None, date_to: Optional[date] = None
    ) -> List[Tuple[Decimal, Decimal]]:
        statement = _live_in_range(select(Bill.total, Bill.balance), date_from, date_to)
        result = await self.session.execute(statement)
        return [(total, balance) for total, balance in result.all()]

    async def recent_bills(
        self,
        limit: int = 20,
        offset: int = 0,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
    ) -> Tuple[List[Tuple[Bill, int]], int]:
        count_stmt = _live_in_range(select(func.count(Bill.id)), date_from, date_to)
        total = (await self.session.execute(count_stmt)).scalar_one()

        item_count = (
            select(func.count(BillLine.id))
            .where(BillLine.bill_id == Bill.id)
            .correlate(Bill)
            .scalar_subquery()
        )
        statement = (
            _live_in_range(select(Bill, item_count.label("item_count")), date_from, date_to)
            .order_by(Bill.date.desc(), Bill.created_at.desc(), Bill.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(statement)
        return [(bill, count) for bill, count in result.all()], total
