from __future__ import annotations

from .core.config import ParserConfig
from .core.constants import BURN_ADDRESS, DEPOSIT_T0, TRANSFER_T0, WITHDRAWAL_T0
from .core.errors import ClassificationError, TokenUpdateError
from .core.models import EventLog, ParseResult, Token, TokenTransfer
from .decoding.abi import decode_data
from .decoding.addresses import encode_address_hash, truncate_address_hash
from .services.token_updater import TokenStateUpdater
from .transform.token_transfers import TokenTransferParser, parse

__all__ = [
    "parse",
    "TokenTransferParser",
    "TokenStateUpdater",
    "ParserConfig",
    "EventLog",
    "ParseResult",
    "Token",
    "TokenTransfer",
    "ClassificationError",
    "TokenUpdateError",
    "decode_data",
    "encode_address_hash",
    "truncate_address_hash",
    "TRANSFER_T0",
    "DEPOSIT_T0",
    "WITHDRAWAL_T0",
    "BURN_ADDRESS",
]
