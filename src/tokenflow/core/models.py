"""Core data models for token transfer classification.

This module defines:
- `EventLog`: one raw log record as handed over by ingestion.
- `Token`: the contract descriptor inferred from a transfer log.
- `TokenTransfer`: one decoded ERC-20 / ERC-721 movement.
- `ParseResult` / `ParseStats`: output of a batch parse.

Design notes
------------
- All entities are frozen; they are built once per log and never mutated.
- Addresses and hashes are lowercase 0x-hex strings.
- `amount` is a `Decimal` (ERC-20) and `token_id` an `int` (ERC-721); exactly
  one of the two is set, depending on `token_type`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Literal

TokenType = Literal["ERC-20", "ERC-721"]

ERC20: TokenType = "ERC-20"
ERC721: TokenType = "ERC-721"


# === Input record ===


@dataclass(slots=True, frozen=True)
class EventLog:
    """Raw log emitted by a contract, topics split into fixed slots."""

    address_hash: str  # emitting contract, lowercased 0x...
    first_topic: str | None
    second_topic: str | None
    third_topic: str | None
    fourth_topic: str | None
    data: str  # "0x..." or "0x" when empty
    block_number: int
    block_hash: str
    index: int  # log position within the block
    transaction_hash: str

    @property
    def topic_presence(self) -> tuple[bool, bool, bool]:
        """Presence of topic1..topic3 (topic0 is matched by value)."""
        return (
            self.second_topic is not None,
            self.third_topic is not None,
            self.fourth_topic is not None,
        )


# === Output records ===


@dataclass(slots=True, frozen=True)
class Token:
    """Token descriptor; one per decoded transfer, deduplicated downstream."""

    contract_address_hash: str
    type: TokenType


@dataclass(slots=True, frozen=True)
class TokenTransfer:
    """Decoded token movement between two canonical addresses."""

    token_contract_address_hash: str
    from_address_hash: str
    to_address_hash: str
    token_type: TokenType
    block_number: int
    block_hash: str
    log_index: int
    transaction_hash: str
    amount: Decimal | None = None
    token_id: int | None = None

    def __post_init__(self) -> None:
        if self.token_type == ERC20:
            if self.amount is None or self.token_id is not None:
                raise ValueError("ERC-20 transfer must carry an amount and no token_id")
        elif self.token_type == ERC721:
            if self.token_id is None or self.amount is not None:
                raise ValueError("ERC-721 transfer must carry a token_id and no amount")
        else:
            raise ValueError(f"unsupported token type {self.token_type!r}")

    def touches(self, address: str) -> bool:
        """True when `address` is either endpoint of the transfer."""
        return address in (self.from_address_hash, self.to_address_hash)


# === Batch output ===


@dataclass(kw_only=True)
class ParseStats:
    """Counters for one `parse` call."""

    total_logs: int = 0
    filtered_out: int = 0  # topic0 not a recognized signature
    classified: int = 0
    unclassified: int = 0
    token_updates: int = 0


@dataclass(slots=True)
class ParseResult:
    """Tokens and transfers in input order; `tokens[i]` belongs to `transfers[i]`."""

    tokens: list[Token] = field(default_factory=list)
    transfers: list[TokenTransfer] = field(default_factory=list)
    stats: ParseStats = field(default_factory=ParseStats)

    def append(self, token: Token, transfer: TokenTransfer) -> None:
        self.tokens.append(token)
        self.transfers.append(transfer)

    def size(self) -> int:
        """Number of decoded transfers."""
        return len(self.transfers)
