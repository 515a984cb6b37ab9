"""Client for the 0x Swap API.

Fetches indicative prices and firm swap quotes from 0x and turns a
firm quote into an unsigned transaction request.
"""

from zeroex.chains import ENDPOINTS, ChainEndpoint, get_supported_chain_ids, resolve_base_url
from zeroex.client import ZeroExClient, create_client
from zeroex.contracts import (
    Fees,
    FillData,
    Order,
    QuoteRequest,
    QuoteResponse,
    Source,
    TransactionRequest,
    ZeroExFee,
)
from zeroex.errors import (
    FieldParseError,
    InvalidChainIdError,
    MalformedResponseError,
    MissingFieldError,
    TransactionBuildError,
    TransportError,
    UnexpectedStatusError,
    ZeroExClientError,
)
from zeroex.params import encode_quote_params
from zeroex.transaction_builder import to_transaction_request

__all__ = [
    # Client
    "ZeroExClient",
    "create_client",
    # Endpoints
    "ENDPOINTS",
    "ChainEndpoint",
    "resolve_base_url",
    "get_supported_chain_ids",
    # Contracts
    "QuoteRequest",
    "QuoteResponse",
    "Source",
    "Order",
    "FillData",
    "Fees",
    "ZeroExFee",
    "TransactionRequest",
    # Encoding and building
    "encode_quote_params",
    "to_transaction_request",
    # Errors
    "ZeroExClientError",
    "InvalidChainIdError",
    "TransportError",
    "UnexpectedStatusError",
    "MalformedResponseError",
    "TransactionBuildError",
    "MissingFieldError",
    "FieldParseError",
]
