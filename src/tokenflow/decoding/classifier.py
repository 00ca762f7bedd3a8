"""Token transfer classifier.

Maps one log to a `Classified` pair (token, transfer) or an `Unclassified`
record carrying the recoverable error. Nothing here performs I/O.
"""

from __future__ import annotations

from dataclasses import dataclass

from tokenflow.core.config import ParserConfig
from tokenflow.core.errors import ClassificationError, UnrecognizedLogShape
from tokenflow.core.models import EventLog, Token, TokenTransfer
from tokenflow.decoding.shapes import TransferShape, find_shape, make_shapes

# ---------- results ----------


@dataclass(slots=True, frozen=True)
class Classified:
    """Successfully decoded log."""

    shape: str
    token: Token
    transfer: TokenTransfer


@dataclass(slots=True, frozen=True)
class Unclassified:
    """Log that matched no shape or failed to decode."""

    log: EventLog
    error: ClassificationError


ClassifyResult = Classified | Unclassified


# ---------- classifier ----------


def classify(
    log: EventLog,
    *,
    config: ParserConfig,
    shapes: tuple[TransferShape, ...] | None = None,
) -> ClassifyResult:
    """Decode `log` with the first matching shape.

    Recoverable failures (no shape, bad data, malformed topic) are returned as
    `Unclassified`, never raised.
    """
    table = shapes if shapes is not None else make_shapes(config)
    shape = find_shape(log, table)
    if shape is None:
        return Unclassified(
            log=log,
            error=UnrecognizedLogShape(f"no transfer shape for topic pattern {log.topic_presence}"),
        )

    try:
        token, transfer = shape.decode(log, config)
    except ClassificationError as e:
        return Unclassified(log=log, error=e)

    return Classified(shape=shape.name, token=token, transfer=transfer)
