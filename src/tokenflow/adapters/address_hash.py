from __future__ import annotations

from eth_utils import is_hex_address, to_canonical_address


class EthAddressHashParser:
    """Address hash parser returning the 20 canonical address bytes."""

    def parse(self, address: str) -> bytes | Exception:
        if not is_hex_address(address):
            return ValueError(f"not a hex address: {address!r}")
        return to_canonical_address(address)
