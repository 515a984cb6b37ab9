"""Request and response contracts for the 0x Swap API.

Pydantic models define the quote request and the decoded response;
the transaction contract describes an unsigned transaction draft.
"""

from zeroex.contracts.quotes import (
    Fees,
    FillData,
    Order,
    QuoteRequest,
    QuoteResponse,
    Source,
    ZeroExFee,
)
from zeroex.contracts.transactions import TransactionRequest

__all__ = [
    # Quote contracts
    "QuoteRequest",
    "QuoteResponse",
    "Source",
    "Order",
    "FillData",
    "Fees",
    "ZeroExFee",
    # Transaction contracts
    "TransactionRequest",
]
