"""GetPaymentStatus Use Case"""

from libs.result import Result, Return, Error
from src.app.repositories.report_repository import ReportRepository
from src.domain.bill_computer import ZERO
from src.domain.payment_status import PaymentStatus, classify_payment_status
from .dtos import ReportQueryDTO, PaymentBucketDTO, PaymentStatusReportDTO, money


class GetPaymentStatus:
    """
    Use Case: Bills bucketed by payment status

    Bucketing uses classify_payment_status so it matches what a single bill
    reports. Each bucket carries the bill count and the sum of totals.
    """

    def __init__(self, report_repo: ReportRepository):
        self.report_repo = report_repo

    async def execute(self, query: ReportQueryDTO) -> Result[PaymentStatusReportDTO]:
        try:
            totals = await self.report_repo.bill_totals(query.date_from, query.date_to)

            counts = {status: 0 for status in PaymentStatus}
            sums = {status: ZERO for status in PaymentStatus}
            for total, balance in totals:
                total, balance = money(total), money(balance)
                status = classify_payment_status(total, balance)
                counts[status] += 1
                sums[status] += total

            def bucket(status: PaymentStatus) -> PaymentBucketDTO:
                return PaymentBucketDTO(bill_count=counts[status], total=money(sums[status]))

            return Return.ok(
                PaymentStatusReportDTO(
                    fully_paid=bucket(PaymentStatus.FULLY_PAID),
                    partially_paid=bucket(PaymentStatus.PARTIALLY_PAID),
                    unpaid=bucket(PaymentStatus.UNPAID),
                )
            )

        except Exception as e:
            return Return.err(
                Error(code="GET_PAYMENT_STATUS_FAILED", message="Failed to build payment status report", reason=str(e))
            )
