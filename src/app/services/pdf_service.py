"""PDF Generation Service Interface

Defines the contract for PDF generation operations.
"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.bill import Bill
from src.domain.line_item import LineItem


class PdfService(ABC):
    """
    Service interface for PDF generation

    Provides PDF generation capabilities for estimate bills.
    """

    @abstractmethod
    def generate_bill_estimate(
        self,
        bill: Bill,
        items: List[LineItem],
        company_name: str,
        company_phone: str = "",
        currency_label: str = "Rs.",
    ) -> bytes:
        """
        Generate an estimate PDF for a bill

        Args:
            bill: Bill entity with header and stored totals
            items: Line items in display order
            company_name: Company name to display in the header
            company_phone: Company phone to display in the header
            currency_label: Prefix used for money values

        Returns:
            PDF document as bytes
        """
        pass
