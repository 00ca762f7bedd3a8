"""Arrow / Parquet export of parsed tokens and transfers.

uint256 amounts and token ids are stored as strings so values above 2**64
survive the round trip.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from tokenflow.core.models import Token, TokenTransfer

TRANSFER_SCHEMA = pa.schema(
    [
        ("block_number", pa.uint64()),
        ("block_hash", pa.string()),
        ("log_index", pa.uint64()),
        ("transaction_hash", pa.string()),
        ("token_contract_address_hash", pa.string()),
        ("from_address_hash", pa.string()),
        ("to_address_hash", pa.string()),
        ("token_type", pa.string()),
        ("amount", pa.string()),
        ("token_id", pa.string()),
    ]
)

TOKEN_SCHEMA = pa.schema(
    [
        ("contract_address_hash", pa.string()),
        ("type", pa.string()),
    ]
)


def _str_or_none(v: object) -> str | None:
    return None if v is None else str(v)


def transfers_to_arrow_table(transfers: Sequence[TokenTransfer]) -> pa.Table:
    """Build a transfer table sorted by (block_number, log_index)."""
    arrays = {
        "block_number": pa.array([t.block_number for t in transfers], type=pa.uint64()),
        "block_hash": pa.array([t.block_hash for t in transfers], type=pa.string()),
        "log_index": pa.array([t.log_index for t in transfers], type=pa.uint64()),
        "transaction_hash": pa.array([t.transaction_hash for t in transfers], type=pa.string()),
        "token_contract_address_hash": pa.array(
            [t.token_contract_address_hash for t in transfers], type=pa.string()
        ),
        "from_address_hash": pa.array([t.from_address_hash for t in transfers], type=pa.string()),
        "to_address_hash": pa.array([t.to_address_hash for t in transfers], type=pa.string()),
        "token_type": pa.array([t.token_type for t in transfers], type=pa.string()),
        "amount": pa.array([_str_or_none(t.amount) for t in transfers], type=pa.string()),
        "token_id": pa.array([_str_or_none(t.token_id) for t in transfers], type=pa.string()),
    }
    return pa.Table.from_pydict(arrays, schema=TRANSFER_SCHEMA).sort_by(
        [("block_number", "ascending"), ("log_index", "ascending")]
    )


def tokens_to_arrow_table(tokens: Sequence[Token]) -> pa.Table:
    arrays = {
        "contract_address_hash": pa.array([t.contract_address_hash for t in tokens], type=pa.string()),
        "type": pa.array([t.type for t in tokens], type=pa.string()),
    }
    return pa.Table.from_pydict(arrays, schema=TOKEN_SCHEMA)


def write_parquet(table: pa.Table, out_path: Path, *, codec: str = "zstd") -> Path:
    """Write Parquet atomically (tmp + replace)."""
    out_path.parent.mkdir(parents=True, exist_ok=True)
    tmp = out_path.with_suffix(".tmp")
    pq.write_table(table, tmp, compression=codec)
    os.replace(tmp, out_path)
    return out_path
