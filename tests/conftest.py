"""Pytest configuration and fixtures."""

import os

import pytest

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["ZEROEX_API_KEY"] = "test-key"
os.environ["ZEROEX_CHAIN_ID"] = "1"
os.environ["DEBUG"] = "true"

from zeroex.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset cached settings around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def quote_payload() -> dict:
    """A firm quote body as returned by /swap/v1/quote with a takerAddress."""
    return {
        "chainId": 1,
        "price": "1876.953",
        "guaranteedPrice": "1858.183",
        "estimatedPriceImpact": "0.0123",
        "to": "0xdef1c0ded9bec7f1a1670819833240f027b25eff",
        "data": "0xd9627aa40000000000000000000000000000000000000000000000000000000000000080",
        "value": "1000000000000000000",
        "gas": "136000",
        "estimatedGas": "136000",
        "gasPrice": "20000000000",
        "protocolFee": "0",
        "minimumProtocolFee": "0",
        "buyTokenAddress": "0x6b175474e89094c44da98b954eedeac495271d0f",
        "sellTokenAddress": "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2",
        "buyAmount": "1876953000000000000000",
        "sellAmount": "1000000000000000000",
        "sources": [
            {"name": "Uniswap_V3", "proportion": "1"},
            {"name": "Curve", "proportion": "0"},
        ],
        "orders": [
            {
                "makerToken": "0x6b175474e89094c44da98b954eedeac495271d0f",
                "takerToken": "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2",
                "makerAmount": "1876953000000000000000",
                "takerAmount": "1000000000000000000",
                "fillData": {
                    "tokenAddressPath": [
                        "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2",
                        "0x6b175474e89094c44da98b954eedeac495271d0f",
                    ],
                    "router": "0xe592427a0aece92de3edee1f18e0157c05861564",
                },
                "source": "Uniswap_V3",
                "sourcePathId": "0x4b1f0a5b2d7d2f5e",
                "type": 0,
            }
        ],
        "allowanceTarget": "0x0000000000000000000000000000000000000000",
        "sellTokenToEthRate": "1",
        "buyTokenToEthRate": "1876.12",
        "fees": {
            "zeroExFee": {
                "billingType": "on-chain",
                "feeAmount": "0",
                "feeToken": "0x6b175474e89094c44da98b954eedeac495271d0f",
                "feeType": "volume",
            }
        },
        "grossPrice": "1876.953",
        "grossBuyAmount": "1876953000000000000000",
        "grossSellAmount": "1000000000000000000",
    }


@pytest.fixture
def price_payload() -> dict:
    """An indicative price body as returned by /swap/v1/price."""
    return {
        "chainId": 1,
        "price": "1876.953",
        "estimatedPriceImpact": "0.0123",
        "value": "1000000000000000000",
        "gasPrice": "20000000000",
        "buyAmount": "1876953000000000000000",
        "sellAmount": "1000000000000000000",
        "sources": [{"name": "Uniswap_V3", "proportion": "1"}],
    }
