from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from tokenflow.core.models import Token

# Opaque to tokenflow; whatever the storage layer uses to key a contract.
AddressHash = Any
TokenMetadataParams = Mapping[str, Any]


# ---------------------------------------------------------------------------
# IAddressHashParser
# ---------------------------------------------------------------------------

@runtime_checkable
class IAddressHashParser(Protocol):
    """
    Converts a canonical address string into the storage representation.

    Domain expectations:
    - Raise (or return an Exception instance) when the string is not an address.
    """

    def parse(self, address: str) -> AddressHash | Exception:
        """
        Return the parsed address hash, or an Exception describing the failure.

        Implementations:
        - `EthAddressHashParser` (20 canonical bytes via eth_utils)
        - Database-specific value types
        """
        ...


# ---------------------------------------------------------------------------
# IMetadataRetriever
# ---------------------------------------------------------------------------

@runtime_checkable
class IMetadataRetriever(Protocol):
    """
    Reads token properties (name, symbol, decimals, total supply...) from chain.

    Domain expectations:
    - Performs network I/O and may raise.
    """

    def fetch_functions_of(self, address: str) -> TokenMetadataParams:
        """Return token params for the contract at `address`."""
        ...


# ---------------------------------------------------------------------------
# ITokenRepository
# ---------------------------------------------------------------------------

@runtime_checkable
class ITokenRepository(Protocol):
    """
    Persistence layer for token descriptors.

    Domain expectations:
    - `find_by_contract_address` returns None for unknown contracts.
    - `update` raises (or returns an Exception instance) on failure.
    """

    def find_by_contract_address(self, address_hash: AddressHash) -> Token | Any | None:
        ...

    def update(self, token: Any, params: TokenMetadataParams) -> Any | Exception:
        """
        Apply `params` to `token`.

        `params` carries an `updated_at` UTC datetime that the implementation
        stamps on the stored record.
        """
        ...
