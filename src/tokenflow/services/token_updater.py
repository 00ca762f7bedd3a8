"""Token metadata refresh after mints and burns.

A transfer touching the burn address changes a token's total supply, so the
token record is refreshed from chain. Every failure here is fatal to the batch
and surfaces as `TokenUpdateError`.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from tokenflow.core.constants import BURN_ADDRESS
from tokenflow.core.errors import TokenUpdateError
from tokenflow.core.interfaces import IAddressHashParser, IMetadataRetriever, ITokenRepository
from tokenflow.core.models import TokenTransfer

logger = logging.getLogger(__name__)


class TokenStateUpdater:
    """Refresh token metadata for transfers that mint or burn.

    Parameters
    ----------
    address_parser : IAddressHashParser
        Turns the contract address string into the repository's key.
    metadata_retriever : IMetadataRetriever
        Fetches token params from chain.
    repository : ITokenRepository
        Token storage.
    burn_address : str
        Address marking mints and burns; `update` may override it per call.
    """

    def __init__(
        self,
        *,
        address_parser: IAddressHashParser,
        metadata_retriever: IMetadataRetriever,
        repository: ITokenRepository,
        burn_address: str = BURN_ADDRESS,
    ) -> None:
        self.address_parser = address_parser
        self.metadata_retriever = metadata_retriever
        self.repository = repository
        self.burn_address = burn_address.lower()

    def needs_update(self, transfer: TokenTransfer, burn_address: str | None = None) -> bool:
        return transfer.touches((burn_address or self.burn_address).lower())

    def update(self, transfer: TokenTransfer, *, burn_address: str | None = None) -> bool:
        """Refresh the token behind `transfer` if it mints or burns.

        The repository receives the metadata params with an `updated_at` UTC
        timestamp added; stamping the stored record is left to `update`.
        Returns True when the repository was updated.
        """
        if not self.needs_update(transfer, burn_address):
            return False

        contract = transfer.token_contract_address_hash
        logger.debug("refreshing token metadata for %s (log %s)", contract, transfer.log_index)
        try:
            address_hash = self.address_parser.parse(contract)
            if isinstance(address_hash, Exception):
                raise address_hash

            params = dict(self.metadata_retriever.fetch_functions_of(contract))
            token = self.repository.find_by_contract_address(address_hash)
            if token is None:
                return False

            params["updated_at"] = datetime.now(timezone.utc)
            updated = self.repository.update(token, params)
            if isinstance(updated, Exception):
                raise updated
        except Exception as e:
            raise TokenUpdateError(
                f"token update failed for {contract}: {type(e).__name__}: {e}",
                contract_address_hash=contract,
                cause=e,
            ) from e

        return True
