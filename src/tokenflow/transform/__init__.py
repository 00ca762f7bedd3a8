from tokenflow.transform.token_transfers import TokenTransferParser, filter_transfer_logs, parse

__all__ = ["TokenTransferParser", "filter_transfer_logs", "parse"]
