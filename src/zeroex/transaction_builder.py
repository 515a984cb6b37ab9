"""Transaction builder for turning a firm 0x quote into an unsigned transaction.

This module builds unsigned transactions for client-side signing.
NO signing or broadcasting happens here.
"""

import logging
from typing import Optional

from eth_utils import decode_hex, is_hex, is_hex_address, to_checksum_address

from zeroex.contracts.quotes import QuoteResponse
from zeroex.contracts.transactions import TransactionRequest
from zeroex.errors import FieldParseError, MissingFieldError

logger = logging.getLogger(__name__)

UINT256_MAX = 2**256 - 1

# Quote fields the transaction needs, as (attribute, API field name)
REQUIRED_FIELDS = (
    ("to", "to"),
    ("data", "data"),
    ("value", "value"),
    ("gas_price", "gasPrice"),
)


def parse_address(text: str) -> str:
    """Parse a 20-byte hex address into checksum form."""
    if not is_hex_address(text):
        raise ValueError(f"not a 20-byte hex address: {text!r}")
    return to_checksum_address(text)


def parse_bytes(text: str) -> bytes:
    """Parse hex encoded calldata ("0x" is empty calldata)."""
    return decode_hex(text)


def parse_uint256(text: str) -> int:
    """Parse an unsigned 256-bit integer from decimal (or 0x hex) text."""
    if text.startswith(("0x", "0X")):
        if len(text) == 2 or not is_hex(text):
            raise ValueError(f"not a hex integer: {text!r}")
        value = int(text, 16)
    elif text.isascii() and text.isdigit():
        value = int(text, 10)
    else:
        raise ValueError(f"not an unsigned integer: {text!r}")

    if value > UINT256_MAX:
        raise ValueError(f"value exceeds uint256: {text}")
    return value


PARSERS = {
    "to": parse_address,
    "data": parse_bytes,
    "value": parse_uint256,
    "gas_price": parse_uint256,
}


def to_transaction_request(quote: QuoteResponse) -> TransactionRequest:
    """Build a minimal unsigned transaction from a quote.

    Fields are checked and parsed one at a time in to, data, value,
    gasPrice order; the first failure is raised. from, gas, nonce and
    chain id are left unset for the caller.

    Args:
        quote: Firm quote (requested with a takerAddress)

    Returns:
        TransactionRequest with to, data, value and gas_price set

    Raises:
        MissingFieldError: If to, data, value or gasPrice is absent
        FieldParseError: If a present field cannot be parsed
    """
    parsed = {}
    for attr, field_name in REQUIRED_FIELDS:
        text: Optional[str] = getattr(quote, attr)
        if text is None:
            raise MissingFieldError(field_name)

        try:
            parsed[attr] = PARSERS[attr](text)
        except (ValueError, TypeError) as e:
            logger.debug(f"Failed to parse quote field {field_name}={text!r}: {e}")
            raise FieldParseError(field_name, e) from e

    return TransactionRequest(
        to=parsed["to"],
        data=parsed["data"],
        value=parsed["value"],
        gas_price=parsed["gas_price"],
    )
