"""JSON-RPC `eth_getLogs` records mapped into `EventLog`.

Accepts the node's camelCase payload as-is; quantities may be hex strings or
plain ints. `load_event_logs` reads a JSON array or JSON lines from disk.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from tokenflow.core.constants import EMPTY_DATA
from tokenflow.core.models import EventLog


def _to_int(value: Any) -> int:
    if isinstance(value, int):
        return value
    s = str(value).lower()
    return int(s, 16) if s.startswith("0x") else int(s)


class RpcLog(BaseModel):
    address: str
    topics: list[str] = Field(default_factory=list, max_length=4)
    data: str | None = None
    blockNumber: int
    blockHash: str
    logIndex: int
    transactionHash: str

    @field_validator("blockNumber", "logIndex", mode="before")
    @classmethod
    def quantity(cls, v: Any) -> int:
        return _to_int(v)

    def to_event_log(self) -> EventLog:
        topics = [t.lower() for t in self.topics] + [None] * (4 - len(self.topics))
        return EventLog(
            address_hash=self.address.lower(),
            first_topic=topics[0],
            second_topic=topics[1],
            third_topic=topics[2],
            fourth_topic=topics[3],
            data=(self.data or EMPTY_DATA).lower(),
            block_number=self.blockNumber,
            block_hash=self.blockHash.lower(),
            index=self.logIndex,
            transaction_hash=self.transactionHash.lower(),
        )


def event_logs_from_rpc(records: Iterable[dict[str, Any]]) -> list[EventLog]:
    return [RpcLog.model_validate(r).to_event_log() for r in records]


def load_event_logs(path: Path) -> list[EventLog]:
    """Read logs from a JSON array file or a JSON-lines file."""
    text = path.read_text()
    stripped = text.lstrip()
    if stripped.startswith("["):
        records = json.loads(stripped)
    else:
        records = [json.loads(line) for line in text.splitlines() if line.strip()]
    return event_logs_from_rpc(records)
