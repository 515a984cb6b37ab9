"""0x Swap API client.

Requests indicative prices and firm quotes from the 0x Swap API (v1).
API docs: https://0x.org/docs/0x-swap-api/api-references/get-swap-v1-quote

Each call is a single GET with no retries. Besides immutable configuration
the client holds one httpx connection pool, which stays open until
aclose(), so one instance can serve concurrent tasks.
"""

import logging
from typing import Any, Callable, Optional

import httpx
from pydantic import ValidationError

from zeroex.chains import resolve_base_url
from zeroex.config import Settings, get_settings
from zeroex.contracts.quotes import QuoteRequest, QuoteResponse
from zeroex.errors import MalformedResponseError, TransportError, UnexpectedStatusError
from zeroex.params import encode_quote_params

logger = logging.getLogger(__name__)

QUOTE_PATH = "/swap/v1/quote"
PRICE_PATH = "/swap/v1/price"

DEFAULT_API_KEY_HEADER = "0x-api-key"


class ZeroExClient:
    """Client for the 0x Swap API on a single network.

    Example:
        async with ZeroExClient(chain_id=1, api_key="...") as client:
            quote = await client.get_quote(
                QuoteRequest(sell_token="ETH", buy_token="DAI", sell_amount="1000000000000000000")
            )
    """

    def __init__(
        self,
        chain_id: int,
        api_key: str,
        *,
        timeout: float = 30.0,
        api_key_header: str = DEFAULT_API_KEY_HEADER,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        on_raw_response: Optional[Callable[[Any], None]] = None,
    ):
        """Initialize the client.

        Args:
            chain_id: EVM chain id, resolved to a 0x API host once here
            api_key: 0x API key
            timeout: HTTP timeout in seconds
            api_key_header: Header name carrying the API key
            transport: Optional httpx transport for the client's own pool
            http_client: Optional shared httpx client; it is never closed here
            on_raw_response: Called with the decoded JSON body of every 200
                response before it is validated into a QuoteResponse

        Raises:
            InvalidChainIdError: If the chain has no 0x API endpoint
        """
        self.chain_id = chain_id
        self.base_url = resolve_base_url(chain_id)
        self.timeout = timeout
        self._api_key = api_key
        self._api_key_header = api_key_header
        self._on_raw_response = on_raw_response
        self._client = http_client or httpx.AsyncClient(timeout=timeout, transport=transport)
        self._owns_client = http_client is None

    async def aclose(self) -> None:
        """Close the connection pool if this client created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "ZeroExClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
        return False

    def _get_headers(self) -> dict:
        """Get API headers with the API key."""
        return {
            self._api_key_header: self._api_key,
            "Content-Type": "application/json",
        }

    async def get_quote(self, request: QuoteRequest) -> QuoteResponse:
        """Get a firm quote.

        With a takerAddress the quote includes the transaction data
        (to, data, value, gasPrice) needed by to_transaction_request.

        Args:
            request: Quote parameters

        Returns:
            Decoded quote

        Raises:
            TransportError: If the request could not be sent or answered
            UnexpectedStatusError: If the API returns a non-200 status
            MalformedResponseError: If the body is not a valid quote
        """
        return await self._request(QUOTE_PATH, request)

    async def get_price(self, request: QuoteRequest) -> QuoteResponse:
        """Get an indicative price.

        Takes the same parameters as get_quote. The response carries no
        transaction data, so fields like to and data stay None.
        """
        return await self._request(PRICE_PATH, request)

    async def _request(self, path: str, request: QuoteRequest) -> QuoteResponse:
        """Send a quote request and decode the response."""
        params = encode_quote_params(request)
        url = f"{self.base_url}{path}"

        logger.debug(
            f"Requesting 0x {path} on chain {self.chain_id}: "
            f"{request.sell_amount} {request.sell_token} -> {request.buy_token}"
        )

        try:
            response = await self._client.get(url, params=params, headers=self._get_headers())
        except httpx.RequestError as e:
            logger.error(f"0x request to {url} failed: {type(e).__name__}: {e}")
            raise TransportError(e) from e

        if response.status_code != 200:
            logger.warning(f"0x API error: {response.status_code} - {response.text[:500]}")
            raise UnexpectedStatusError(response.status_code)

        return self._decode(response)

    def _decode(self, response: httpx.Response) -> QuoteResponse:
        """Decode a 200 response: generic JSON first, then the strict model."""
        try:
            payload = response.json()
        except ValueError as e:
            logger.error(f"0x response is not valid JSON: {e}")
            raise MalformedResponseError(e) from e

        if self._on_raw_response is not None:
            self._on_raw_response(payload)

        try:
            quote = QuoteResponse.model_validate(payload)
        except ValidationError as e:
            logger.error(f"0x response does not match quote schema: {e.error_count()} error(s)")
            logger.debug(f"Raw 0x payload: {payload}")
            raise MalformedResponseError(e) from e

        logger.debug(
            f"0x quote on chain {self.chain_id}: price={quote.price} "
            f"buy_amount={quote.buy_amount} sources={len(quote.sources or [])}"
        )
        return quote


def create_client(settings: Optional[Settings] = None, **kwargs) -> ZeroExClient:
    """Create a 0x client from settings.

    Args:
        settings: Settings to use (defaults to environment settings)
        **kwargs: Extra keyword arguments for ZeroExClient (transport, http_client, hook)
    """
    settings = settings or get_settings()

    if not settings.has_api_key:
        logger.warning("ZEROEX_API_KEY not set - requests will likely be rejected")

    return ZeroExClient(
        chain_id=settings.zeroex_chain_id,
        api_key=settings.zeroex_api_key,
        timeout=settings.http_timeout,
        api_key_header=settings.zeroex_api_key_header,
        **kwargs,
    )
