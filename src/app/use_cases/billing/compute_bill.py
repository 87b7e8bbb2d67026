"""ComputeBill Use Case

Previews derived totals for a candidate bill without persisting anything.
"""

from libs.result import Result, Return, Error
from src.domain.amount_words import amount_in_words
from src.domain.bill_state import build_bill_state
from .dtos import ComputeBillCommandDTO, BillComputationDTO


class ComputeBill:
    """
    Use Case: Compute bill totals

    Business Rules:
    1. Line amounts are recomputed from quantity, unit price and item percent
    2. An explicit discount amount wins over a discount percent
    3. Total and balance never go below zero
    """

    async def execute(self, command: ComputeBillCommandDTO) -> Result[BillComputationDTO]:
        try:
            state = build_bill_state(
                command.line_items(),
                discount_amount=command.discount_amount,
                discount_percent=command.discount_percent,
                received_amount=command.received_amount,
            )
            return Return.ok(BillComputationDTO.from_state(state, amount_in_words(state.total)))

        except Exception as e:
            return Return.err(
                Error(
                    code="COMPUTE_BILL_FAILED",
                    message="Failed to compute bill totals",
                    reason=str(e),
                )
            )
