"""Raw ABI word decoding: tightly packed 32-byte big-endian words."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

from eth_utils import decode_hex

from tokenflow.core.constants import EMPTY_DATA
from tokenflow.core.errors import DecodeError

WORD_SIZE = 32

AbiType = Literal["uint256", "address"]
DecodedValue = int | bytes | None


def word_at(data: bytes, i: int) -> bytes:
    """Return the i-th 32-byte ABI word. Caller guarantees it is in range."""
    start = WORD_SIZE * i
    return data[start : start + WORD_SIZE]


def parse_word(word: bytes, typ: AbiType) -> int | bytes:
    """Parse one ABI word according to the declared type."""
    if typ == "uint256":
        return int.from_bytes(word, "big", signed=False)
    if typ == "address":
        # high 12 bytes are padding
        return word[-20:]
    raise DecodeError(f"unsupported ABI type {typ!r}")


def decode_data(hex_data: str, types: Sequence[AbiType]) -> list[DecodedValue]:
    """Decode `hex_data` into one value per entry of `types`.

    The empty-data sentinel `"0x"` yields `None` for every type. Otherwise the
    payload must hold at least one word per type; trailing bytes are ignored.
    """
    if hex_data == EMPTY_DATA:
        return [None for _ in types]

    if not isinstance(hex_data, str) or not hex_data.startswith("0x"):
        raise DecodeError(f"data is not 0x-prefixed hex: {hex_data!r}")

    try:
        data = decode_hex(hex_data)
    except ValueError as e:  # binascii.Error included
        raise DecodeError(f"data is not valid hex: {e}") from e

    need = WORD_SIZE * len(types)
    if len(data) < need:
        raise DecodeError(f"data holds {len(data)} bytes, {need} needed for {list(types)}")

    return [parse_word(word_at(data, i), typ) for i, typ in enumerate(types)]
