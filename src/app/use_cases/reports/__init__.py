"""Report use cases"""
from .get_report_summary import GetReportSummary
from .get_revenue_trend import GetRevenueTrend
from .get_top_customers import GetTopCustomers
from .get_top_products import GetTopProducts
from .get_payment_status import GetPaymentStatus
from .get_recent_bills import GetRecentBills
from .dtos import ReportQueryDTO

__all__ = [
    "GetReportSummary",
    "GetRevenueTrend",
    "GetTopCustomers",
    "GetTopProducts",
    "GetPaymentStatus",
    "GetRecentBills",
    "ReportQueryDTO",
]
