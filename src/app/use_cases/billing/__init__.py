"""Billing domain use cases"""
from .compute_bill import ComputeBill
from .get_next_invoice_number import GetNextInvoiceNumber
from .create_bill import CreateBill
from .update_bill import UpdateBill
from .get_bill import GetBill
from .list_bills import ListBills
from .delete_bill import DeleteBill
from .lookup_price_history import LookupPriceHistory
from .generate_bill_pdf import GenerateBillPdf
from .dtos import (
    LineItemDTO,
    ComputeBillCommandDTO,
    BillCommandDTO,
    DraftCommandDTO,
    LineItemResponseDTO,
    BillComputationDTO,
    BillResponseDTO,
    DraftResponseDTO,
    NextInvoiceNumberDTO,
    DeleteBillResponseDTO,
    PriceSuggestionDTO,
    PriceHistoryResponseDTO,
    BillPdfDTO,
)

__all__ = [
    "ComputeBill",
    "GetNextInvoiceNumber",
    "CreateBill",
    "UpdateBill",
    "GetBill",
    "ListBills",
    "DeleteBill",
    "LookupPriceHistory",
    "GenerateBillPdf",
    "LineItemDTO",
    "ComputeBillCommandDTO",
    "BillCommandDTO",
    "DraftCommandDTO",
    "LineItemResponseDTO",
    "BillComputationDTO",
    "BillResponseDTO",
    "DraftResponseDTO",
    "NextInvoiceNumberDTO",
    "DeleteBillResponseDTO",
    "PriceSuggestionDTO",
    "PriceHistoryResponseDTO",
    "BillPdfDTO",
]
