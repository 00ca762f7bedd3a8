from tokenflow.adapters.address_hash import EthAddressHashParser
from tokenflow.adapters.rpc_logs import RpcLog, event_logs_from_rpc, load_event_logs

__all__ = ["EthAddressHashParser", "RpcLog", "event_logs_from_rpc", "load_event_logs"]
