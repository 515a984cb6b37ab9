"""0x API endpoints for every supported network.

Each EVM network is served by its own 0x API host:
- Ethereum (1), Optimism (10), BNB Smart Chain (56), Polygon (137)
- Fantom (250), Arbitrum (42161), Avalanche (43114), Celo (42220)
"""

from dataclasses import dataclass
from typing import Optional

from zeroex.errors import InvalidChainIdError


@dataclass(frozen=True)
class ChainEndpoint:
    """0x API endpoint for a network."""

    chain_id: int
    name: str
    base_url: str


# ======================
# Endpoint Table
# ======================

ENDPOINTS: dict[int, ChainEndpoint] = {
    1: ChainEndpoint(chain_id=1, name="Ethereum", base_url="https://api.0x.org"),
    42161: ChainEndpoint(
        chain_id=42161, name="Arbitrum", base_url="https://arbitrum.api.0x.org"
    ),
    43114: ChainEndpoint(
        chain_id=43114, name="Avalanche", base_url="https://avalanche.api.0x.org"
    ),
    250: ChainEndpoint(chain_id=250, name="Fantom", base_url="https://fantom.api.0x.org"),
    137: ChainEndpoint(chain_id=137, name="Polygon", base_url="https://polygon.api.0x.org"),
    42220: ChainEndpoint(chain_id=42220, name="Celo", base_url="https://celo.api.0x.org"),
    56: ChainEndpoint(chain_id=56, name="BNB Smart Chain", base_url="https://bsc.api.0x.org"),
    10: ChainEndpoint(chain_id=10, name="Optimism", base_url="https://optimism.api.0x.org"),
}


# ======================
# Helper Functions
# ======================

def get_endpoint(chain_id: int) -> Optional[ChainEndpoint]:
    """Get endpoint configuration by chain id."""
    return ENDPOINTS.get(chain_id)


def get_supported_chain_ids() -> list[int]:
    """Get all chain ids with a 0x API endpoint, sorted ascending."""
    return sorted(ENDPOINTS)


def resolve_base_url(chain_id: int) -> str:
    """Resolve the 0x API base URL for a network.

    Args:
        chain_id: EVM chain id (e.g., 1 for Ethereum mainnet)

    Returns:
        Base URL without a trailing slash

    Raises:
        InvalidChainIdError: If the network is not served by 0x
    """
    endpoint = get_endpoint(chain_id)
    if endpoint is None:
        raise InvalidChainIdError(chain_id)
    return endpoint.base_url
