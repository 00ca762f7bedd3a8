"""ERC-20 / ERC-721 token transfers from raw logs.

Pipeline for one batch:
1. pre-filter: keep logs whose topic0 is a recognized signature
2. classify each surviving log (pure; failures are logged and dropped)
3. refresh token metadata for transfers touching the burn address

Output order mirrors input order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from tokenflow.core.config import ParserConfig
from tokenflow.core.models import EventLog, ParseResult
from tokenflow.decoding.classifier import Classified, Unclassified, classify
from tokenflow.decoding.shapes import make_shapes
from tokenflow.services.token_updater import TokenStateUpdater

logger = logging.getLogger(__name__)


def filter_transfer_logs(logs: Iterable[EventLog], config: ParserConfig) -> Iterator[EventLog]:
    """Yield logs whose topic0 is the transfer, deposit or withdrawal signature."""
    signatures = frozenset(config.signatures)
    for log in logs:
        if log.first_topic is not None and log.first_topic.lower() in signatures:
            yield log


class TokenTransferParser:
    """Turns batches of logs into tokens and token transfers.

    Parameters
    ----------
    config : ParserConfig
        Signatures and burn address.
    updater : TokenStateUpdater | None
        Optional metadata refresh run after classification, keyed on
        `config.burn_address`. Its errors abort the batch.
    """

    def __init__(self, config: ParserConfig | None = None, *, updater: TokenStateUpdater | None = None) -> None:
        self.config = config or ParserConfig()
        self.shapes = make_shapes(self.config)
        self.updater = updater

    def parse(self, logs: Iterable[EventLog]) -> ParseResult:
        """Return tokens and transfers for every recognized log in `logs`."""
        out = ParseResult()
        stats = out.stats

        def counted(src: Iterable[EventLog]) -> Iterator[EventLog]:
            for lg in src:
                stats.total_logs += 1
                yield lg

        for log in filter_transfer_logs(counted(logs), self.config):
            match classify(log, config=self.config, shapes=self.shapes):
                case Classified(token=token, transfer=transfer):
                    out.append(token, transfer)
                    stats.classified += 1
                case Unclassified(error=error):
                    logger.error("Unknown token transfer format: %r (%s)", log, error)
                    stats.unclassified += 1

        stats.filtered_out = stats.total_logs - stats.classified - stats.unclassified

        if self.updater is not None:
            for transfer in out.transfers:
                if self.updater.update(transfer, burn_address=self.config.burn_address):
                    stats.token_updates += 1

        return out


def parse(
    logs: Iterable[EventLog],
    *,
    config: ParserConfig | None = None,
    updater: TokenStateUpdater | None = None,
) -> ParseResult:
    """Parse one batch of logs with a throwaway `TokenTransferParser`."""
    return TokenTransferParser(config, updater=updater).parse(logs)
