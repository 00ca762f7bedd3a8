from __future__ import annotations

import re
from dataclasses import dataclass

from tokenflow.core.constants import BURN_ADDRESS, DEPOSIT_T0, TRANSFER_T0, WITHDRAWAL_T0

_TOPIC_RE = re.compile(r"^0x[0-9a-f]{64}$")
_ADDRESS_RE = re.compile(r"^0x[0-9a-f]{40}$")


@dataclass(frozen=True)
class ParserConfig:
    """Signatures and burn address used to classify token transfer logs."""

    transfer_topic0: str = TRANSFER_T0
    deposit_topic0: str = DEPOSIT_T0
    withdrawal_topic0: str = WITHDRAWAL_T0
    burn_address: str = BURN_ADDRESS

    def __post_init__(self) -> None:
        for name in ("transfer_topic0", "deposit_topic0", "withdrawal_topic0"):
            value = getattr(self, name).lower()
            if not _TOPIC_RE.match(value):
                raise ValueError(f"{name} must be a 0x-prefixed 32-byte hex word, got {value!r}")
            object.__setattr__(self, name, value)

        burn = self.burn_address.lower()
        if not _ADDRESS_RE.match(burn):
            raise ValueError(f"burn_address must be a 0x-prefixed 20-byte hex address, got {burn!r}")
        object.__setattr__(self, "burn_address", burn)

    @property
    def signatures(self) -> tuple[str, str, str]:
        """Recognized topic0 values: transfer, deposit, withdrawal."""
        return (self.transfer_topic0, self.deposit_topic0, self.withdrawal_topic0)
