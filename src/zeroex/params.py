"""Query parameter encoding for 0x quote requests."""

from zeroex.contracts.quotes import QuoteRequest

# Optional request fields and their 0x query parameter names
OPTIONAL_PARAMS = {
    "fee_recipient": "feeRecipient",
    "buy_token_percentage_fee": "buyTokenPercentageFee",
    "taker_address": "takerAddress",
    "slippage_percentage": "slippagePercentage",
    "excluded_sources": "excludedSources",
    "included_sources": "includedSources",
    "skip_validation": "skipValidation",
}

SOURCE_SEPARATOR = ","


def encode_quote_params(request: QuoteRequest) -> dict[str, str]:
    """Encode a quote request as 0x query parameters.

    Optional fields that are None are left out entirely, since the API
    treats a missing parameter differently from an empty one. Source
    lists are joined with commas in their original order.

    Args:
        request: Quote request to encode

    Returns:
        Mapping of query parameter name to string value
    """
    params = {
        "sellToken": request.sell_token,
        "buyToken": request.buy_token,
        "sellAmount": request.sell_amount,
    }

    for field_name, param_name in OPTIONAL_PARAMS.items():
        value = getattr(request, field_name)
        if value is None:
            continue

        if isinstance(value, bool):
            params[param_name] = "true" if value else "false"
        elif isinstance(value, list):
            params[param_name] = SOURCE_SEPARATOR.join(value)
        else:
            params[param_name] = value

    return params
