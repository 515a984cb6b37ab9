"""Transaction contracts for quotes that are ready to be signed.

These contracts define unsigned transactions that callers complete
(sender, nonce, gas limit, chain id) and sign themselves.
NO signing or broadcasting happens in this library.
"""

from dataclasses import dataclass
from typing import Optional

from eth_typing import ChecksumAddress
from eth_utils import encode_hex


@dataclass(frozen=True)
class TransactionRequest:
    """A minimal unsigned transaction built from a 0x quote.

    Only to, data, value and gas_price come from the quote. The
    remaining fields are left as None for the caller to fill in.
    """

    to: ChecksumAddress
    data: bytes
    value: int
    gas_price: int
    from_address: Optional[ChecksumAddress] = None
    gas: Optional[int] = None
    nonce: Optional[int] = None
    chain_id: Optional[int] = None

    def to_dict(self) -> dict:
        """Convert to transaction params, omitting unset fields.

        Keys follow the JSON-RPC / eth_account naming (gasPrice, chainId).
        """
        params = {
            "to": self.to,
            "data": encode_hex(self.data),
            "value": self.value,
            "gasPrice": self.gas_price,
        }
        optional = {
            "from": self.from_address,
            "gas": self.gas,
            "nonce": self.nonce,
            "chainId": self.chain_id,
        }
        params.update({key: value for key, value in optional.items() if value is not None})
        return params
