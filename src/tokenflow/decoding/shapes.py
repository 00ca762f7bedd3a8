"""Transfer shape primitives and the default shape table.

Defines:
- `TransferShape`: one rule (topic0, topic1..3 presence, decode strategy)
- `make_shapes(config)`: the ordered table of the five known shapes
- one small decode strategy per shape

A shape matches a log when topic0 equals its signature and the presence of
topic1..topic3 equals its pattern. Patterns never overlap for the same
signature, so at most one shape matches; the table order is kept stable anyway.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal

from tokenflow.core.config import ParserConfig
from tokenflow.core.errors import DecodeError
from tokenflow.core.models import ERC20, ERC721, EventLog, Token, TokenTransfer, TokenType
from tokenflow.decoding.abi import decode_data
from tokenflow.decoding.addresses import encode_address_hash, truncate_address_hash

Decoded = tuple[Token, TokenTransfer]
DecodeStrategy = Callable[[EventLog, ParserConfig], Decoded]

# topic1, topic2, topic3
TopicPattern = tuple[bool, bool, bool]


@dataclass(frozen=True)
class TransferShape:
    """One wire shape of a token transfer log."""

    name: str
    topic0: str
    topics: TopicPattern
    decode: DecodeStrategy

    def matches(self, log: EventLog) -> bool:
        if log.first_topic is None or log.first_topic.lower() != self.topic0:
            return False
        return log.topic_presence == self.topics


# ---------- helpers ----------


def _build(
    log: EventLog,
    token_type: TokenType,
    from_address: str,
    to_address: str,
    *,
    amount: Decimal | None = None,
    token_id: int | None = None,
) -> Decoded:
    transfer = TokenTransfer(
        token_contract_address_hash=log.address_hash,
        from_address_hash=from_address,
        to_address_hash=to_address,
        token_type=token_type,
        block_number=log.block_number,
        block_hash=log.block_hash,
        log_index=log.index,
        transaction_hash=log.transaction_hash,
        amount=amount,
        token_id=token_id,
    )
    token = Token(contract_address_hash=log.address_hash, type=token_type)
    return token, transfer


def _decode_amount(log: EventLog) -> Decimal:
    [amount] = decode_data(log.data, ["uint256"])
    return Decimal(amount or 0)


# ---------- decode strategies ----------


def decode_erc20_transfer(log: EventLog, config: ParserConfig) -> Decoded:
    amount = _decode_amount(log)
    return _build(
        log,
        ERC20,
        truncate_address_hash(log.second_topic),
        truncate_address_hash(log.third_topic),
        amount=amount,
    )


def decode_erc20_deposit(log: EventLog, config: ParserConfig) -> Decoded:
    """Wrapped-asset deposit: tokens minted to topic1."""
    amount = _decode_amount(log)
    return _build(log, ERC20, config.burn_address, truncate_address_hash(log.second_topic), amount=amount)


def decode_erc20_withdrawal(log: EventLog, config: ParserConfig) -> Decoded:
    """Wrapped-asset withdrawal: tokens burnt from topic1."""
    amount = _decode_amount(log)
    return _build(log, ERC20, truncate_address_hash(log.second_topic), config.burn_address, amount=amount)


def decode_erc721_indexed(log: EventLog, config: ParserConfig) -> Decoded:
    """ERC-721 transfer with the token id as topic3."""
    [token_id] = decode_data(log.fourth_topic or "0x", ["uint256"])
    return _build(
        log,
        ERC721,
        truncate_address_hash(log.second_topic),
        truncate_address_hash(log.third_topic),
        token_id=token_id or 0,
    )


def decode_erc721_packed(log: EventLog, config: ParserConfig) -> Decoded:
    """ERC-721 transfer with (from, to, tokenId) all packed in data."""
    from_raw, to_raw, token_id = decode_data(log.data, ["address", "address", "uint256"])
    if from_raw is None or to_raw is None or token_id is None:
        raise DecodeError("ERC-721 transfer without topics needs (address, address, uint256) in data")
    return _build(
        log,
        ERC721,
        encode_address_hash(from_raw),
        encode_address_hash(to_raw),
        token_id=token_id,
    )


# ---------- shape table ----------


def make_shapes(config: ParserConfig) -> tuple[TransferShape, ...]:
    """Return the known transfer shapes in match priority order."""
    return (
        TransferShape("erc20_transfer", config.transfer_topic0, (True, True, False), decode_erc20_transfer),
        TransferShape("erc20_deposit", config.deposit_topic0, (True, False, False), decode_erc20_deposit),
        TransferShape("erc20_withdrawal", config.withdrawal_topic0, (True, False, False), decode_erc20_withdrawal),
        TransferShape("erc721_indexed", config.transfer_topic0, (True, True, True), decode_erc721_indexed),
        TransferShape("erc721_packed", config.transfer_topic0, (False, False, False), decode_erc721_packed),
    )


def find_shape(log: EventLog, shapes: tuple[TransferShape, ...]) -> TransferShape | None:
    """Return the first shape matching `log`, or None."""
    for shape in shapes:
        if shape.matches(log):
            return shape
    return None
