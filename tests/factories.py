from typing import Any

from tokenflow.core.constants import TRANSFER_T0
from tokenflow.core.models import EventLog

ALICE = "0x1111111111111111111111111111111111111111"
BOB = "0x2222222222222222222222222222222222222222"
CAROL = "0x3333333333333333333333333333333333333333"
TOKEN = "0x00000000000000000000000000000000000000aa"


def topic(address: str) -> str:
    """Left-pad an address to a 32-byte topic."""
    return "0x" + "0" * 24 + address[2:]


def word(n: int) -> str:
    return f"{n:064x}"


def make_log(**overrides: Any) -> EventLog:
    fields: dict[str, Any] = {
        "address_hash": TOKEN,
        "first_topic": TRANSFER_T0,
        "second_topic": topic(ALICE),
        "third_topic": topic(BOB),
        "fourth_topic": None,
        "data": "0x" + word(1000),
        "block_number": 17,
        "block_hash": "0x" + "ab" * 32,
        "index": 3,
        "transaction_hash": "0x" + "cd" * 32,
    }
    fields.update(overrides)
    return EventLog(**fields)


def rpc_record(**overrides: Any) -> dict[str, Any]:
    """eth_getLogs record for the default `make_log` transfer."""
    record: dict[str, Any] = {
        "address": "0x00000000000000000000000000000000000000AA",
        "topics": [TRANSFER_T0, topic(ALICE), topic(BOB)],
        "data": "0x" + word(1000),
        "blockNumber": "0x11",
        "blockHash": "0x" + "AB" * 32,
        "logIndex": "0x3",
        "transactionHash": "0x" + "CD" * 32,
    }
    record.update(overrides)
    return record
