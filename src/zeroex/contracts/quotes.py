"""Quote request and response contracts for the 0x Swap API (v1).

Response models mirror the JSON returned by /swap/v1/quote and
/swap/v1/price. The API omits fields depending on the request (for
example, gas and transaction data need a takerAddress), so every
response field is Optional and stays None when absent.
"""

from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from zeroex.contracts.transactions import TransactionRequest


class QuoteRequest(BaseModel):
    """Request for a 0x swap quote.

    Amounts and percentages are passed through as strings; the API
    rejects malformed values, not this client.
    """

    model_config = ConfigDict(frozen=True)

    sell_token: str = Field(..., description="Token to sell (symbol or address)")
    buy_token: str = Field(..., description="Token to buy (symbol or address)")
    sell_amount: str = Field(..., description="Sell amount in base units")
    fee_recipient: Optional[str] = Field(None, description="Address receiving the affiliate fee")
    buy_token_percentage_fee: Optional[str] = Field(
        None, description="Affiliate fee taken from the buy token (0.01 = 1%)"
    )
    taker_address: Optional[str] = Field(None, description="Address that will fill the quote")
    slippage_percentage: Optional[str] = Field(
        None, description="Maximum acceptable slippage (0.01 = 1%)"
    )
    # Upstream treats excluded and included sources as mutually exclusive
    excluded_sources: Optional[list[str]] = Field(None, description="Liquidity sources to skip")
    included_sources: Optional[list[str]] = Field(None, description="Liquidity sources to use")
    skip_validation: Optional[bool] = Field(None, description="Skip fillability simulation")


class _ResponseModel(BaseModel):
    """Base for models decoded from 0x API JSON.

    Keys are matched by their camelCase API names only.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        extra="ignore",
    )


class FillData(_ResponseModel):
    """Routing metadata for a single order leg."""

    token_address_path: Optional[list[StrictStr]] = None
    router: Optional[StrictStr] = None


class Order(_ResponseModel):
    """A single order used to fill the quote."""

    maker_token: Optional[StrictStr] = None
    taker_token: Optional[StrictStr] = None
    maker_amount: Optional[StrictStr] = None
    taker_amount: Optional[StrictStr] = None
    fill_data: Optional[FillData] = None
    source: Optional[StrictStr] = None
    source_path_id: Optional[StrictStr] = None
    order_type: Optional[StrictInt] = Field(default=None, alias="type")


class Source(_ResponseModel):
    """Liquidity source and its share of the fill."""

    name: Optional[StrictStr] = None
    proportion: Optional[StrictStr] = None


class ZeroExFee(_ResponseModel):
    """Fee charged by 0x on the trade."""

    billing_type: Optional[StrictStr] = None
    fee_amount: Optional[StrictStr] = None
    fee_token: Optional[StrictStr] = None
    fee_type: Optional[StrictStr] = None


class Fees(_ResponseModel):
    """Fee breakdown attached to a quote."""

    zero_ex_fee: Optional[ZeroExFee] = None


class QuoteResponse(_ResponseModel):
    """Quote returned by the 0x Swap API."""

    chain_id: Optional[StrictInt] = None
    price: Optional[StrictStr] = None
    guaranteed_price: Optional[StrictStr] = None
    estimated_price_impact: Optional[StrictStr] = None
    to: Optional[StrictStr] = None
    data: Optional[StrictStr] = None
    value: Optional[StrictStr] = None
    gas: Optional[StrictStr] = None
    estimated_gas: Optional[StrictStr] = None
    gas_price: Optional[StrictStr] = None
    protocol_fee: Optional[StrictStr] = None
    minimum_protocol_fee: Optional[StrictStr] = None
    buy_token_address: Optional[StrictStr] = None
    sell_token_address: Optional[StrictStr] = None
    buy_amount: Optional[StrictStr] = None
    sell_amount: Optional[StrictStr] = None
    sources: Optional[list[Source]] = None
    orders: Optional[list[Order]] = None
    allowance_target: Optional[StrictStr] = None
    sell_token_to_eth_rate: Optional[StrictStr] = None
    buy_token_to_eth_rate: Optional[StrictStr] = None
    fees: Optional[Fees] = None
    gross_price: Optional[StrictStr] = None
    gross_buy_amount: Optional[StrictStr] = None
    gross_sell_amount: Optional[StrictStr] = None

    def to_transaction_request(self) -> "TransactionRequest":
        """Build an unsigned transaction request from this quote."""
        from zeroex.transaction_builder import to_transaction_request

        return to_transaction_request(self)
