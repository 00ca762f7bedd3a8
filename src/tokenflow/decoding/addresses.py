"""Address normalization for topics and decoded address words."""

from __future__ import annotations

from eth_utils import encode_hex

from tokenflow.core.constants import BURN_ADDRESS
from tokenflow.core.errors import MalformedTopicError

# an address left-padded to a word: 0x + 24 zero nibbles + 40 address nibbles
_TOPIC_PREFIX = "0x" + "0" * 24
_TOPIC_LEN = 2 + 64
_HEX_DIGITS = frozenset("0123456789abcdef")


def truncate_address_hash(topic: str | None) -> str:
    """Strip the 12-byte zero padding from an address topic.

    A missing topic resolves to the zero address.
    """
    if topic is None:
        return BURN_ADDRESS

    t = topic.lower()
    if len(t) != _TOPIC_LEN or not t.startswith("0x") or not set(t[2:]) <= _HEX_DIGITS:
        raise MalformedTopicError(f"topic is not a 32-byte hex word: {topic!r}")
    if not t.startswith(_TOPIC_PREFIX):
        raise MalformedTopicError(f"topic does not hold a zero-padded address: {topic!r}")
    return "0x" + t[len(_TOPIC_PREFIX) :]


def encode_address_hash(raw: bytes) -> str:
    """Format 20 raw address bytes as lowercase 0x-hex."""
    if len(raw) != 20:
        raise ValueError(f"address must be 20 bytes, got {len(raw)}")
    return encode_hex(raw)
