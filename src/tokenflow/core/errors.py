"""Error taxonomy.

- `ClassificationError` and its subclasses are recoverable: the offending log
  is reported and dropped, the batch carries on.
- `TokenUpdateError` is fatal: it aborts the batch that triggered it.
"""

from __future__ import annotations

from typing import Any


class TokenFlowError(Exception):
    """Base class for every error raised by tokenflow."""


class ClassificationError(TokenFlowError):
    """A log could not be turned into a token transfer."""


class UnrecognizedLogShape(ClassificationError):
    """Topic pattern matches none of the known transfer shapes."""


class DecodeError(ClassificationError):
    """ABI data could not be decoded against the expected type list."""


class MalformedTopicError(ClassificationError):
    """A topic expected to hold a left-padded address does not."""


class TokenUpdateError(TokenFlowError):
    """Refreshing a token's metadata after a mint or burn failed."""

    def __init__(self, message: str, *, contract_address_hash: str, cause: Any = None) -> None:
        super().__init__(message)
        self.contract_address_hash = contract_address_hash
        self.cause = cause
