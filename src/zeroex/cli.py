"""Command line interface for fetching 0x quotes.

Usage:
    python -m zeroex chains
    python -m zeroex price --sell-token ETH --buy-token DAI --sell-amount 1000000000000000000
    python -m zeroex quote --sell-token ETH --buy-token DAI --sell-amount 1000000000000000000 \\
        --taker-address 0x... --tx
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Optional

from zeroex.chains import ENDPOINTS, get_supported_chain_ids
from zeroex.client import create_client
from zeroex.config import get_settings
from zeroex.contracts.quotes import QuoteRequest
from zeroex.errors import ZeroExClientError

logger = logging.getLogger(__name__)


def _split_sources(value: Optional[str]) -> Optional[list[str]]:
    """Split a comma-separated source list from the command line."""
    if value is None:
        return None
    return [source.strip() for source in value.split(",") if source.strip()]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(prog="zeroex", description="0x Swap API quotes")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("chains", help="List supported networks")

    for name, help_text in (("quote", "Get a firm quote"), ("price", "Get an indicative price")):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--chain-id", type=int, default=None, help="Chain id (default from settings)")
        sub.add_argument("--sell-token", required=True)
        sub.add_argument("--buy-token", required=True)
        sub.add_argument("--sell-amount", required=True, help="Amount in base units")
        sub.add_argument("--taker-address")
        sub.add_argument("--slippage-percentage")
        sub.add_argument("--fee-recipient")
        sub.add_argument("--buy-token-percentage-fee")
        sub.add_argument("--excluded-sources", help="Comma-separated source names")
        sub.add_argument("--included-sources", help="Comma-separated source names")
        sub.add_argument("--skip-validation", action="store_true", default=None)
        if name == "quote":
            sub.add_argument(
                "--tx", action="store_true", help="Print the unsigned transaction request"
            )

    return parser


def request_from_args(args: argparse.Namespace) -> QuoteRequest:
    """Build a quote request from parsed arguments."""
    return QuoteRequest(
        sell_token=args.sell_token,
        buy_token=args.buy_token,
        sell_amount=args.sell_amount,
        fee_recipient=args.fee_recipient,
        buy_token_percentage_fee=args.buy_token_percentage_fee,
        taker_address=args.taker_address,
        slippage_percentage=args.slippage_percentage,
        excluded_sources=_split_sources(args.excluded_sources),
        included_sources=_split_sources(args.included_sources),
        skip_validation=args.skip_validation,
    )


async def run(args: argparse.Namespace) -> dict:
    """Run a quote or price command and return the JSON output."""
    settings = get_settings()
    if args.chain_id is not None:
        settings = settings.model_copy(update={"zeroex_chain_id": args.chain_id})

    request = request_from_args(args)

    async with create_client(settings) as client:
        if args.command == "price":
            response = await client.get_price(request)
        else:
            response = await client.get_quote(request)

    output = response.model_dump(mode="json", by_alias=True, exclude_none=True)
    if getattr(args, "tx", False):
        output = {"quote": output, "transaction": response.to_transaction_request().to_dict()}
    return output


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command == "chains":
        for chain_id in get_supported_chain_ids():
            endpoint = ENDPOINTS[chain_id]
            print(f"{chain_id:>6}  {endpoint.name:<16} {endpoint.base_url}")
        return 0

    try:
        output = asyncio.run(run(args))
    except ZeroExClientError as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(output, indent=2))
    return 0
