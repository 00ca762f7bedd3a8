import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from tokenflow.adapters.rpc_logs import RpcLog, event_logs_from_rpc, load_event_logs
from tokenflow.core.constants import TRANSFER_T0

from factories import ALICE, BOB, rpc_record, topic


def test_rpc_log_maps_topics_to_slots() -> None:
    log = RpcLog.model_validate(rpc_record()).to_event_log()

    assert log.address_hash == "0x00000000000000000000000000000000000000aa"
    assert log.first_topic == TRANSFER_T0
    assert log.second_topic == topic(ALICE)
    assert log.third_topic == topic(BOB)
    assert log.fourth_topic is None
    assert log.block_number == 17
    assert log.index == 3
    assert log.block_hash == "0x" + "ab" * 32


def test_rpc_log_accepts_int_quantities_and_missing_data() -> None:
    log = RpcLog.model_validate(rpc_record(blockNumber=5, logIndex=0, data=None, topics=[])).to_event_log()

    assert (log.block_number, log.index) == (5, 0)
    assert log.data == "0x"
    assert log.first_topic is None


def test_rpc_log_rejects_too_many_topics() -> None:
    with pytest.raises(ValidationError):
        RpcLog.model_validate(rpc_record(topics=[TRANSFER_T0] * 5))


def test_load_json_array(tmp_path: Path) -> None:
    path = tmp_path / "logs.json"
    path.write_text(json.dumps([rpc_record(), rpc_record(logIndex="0x4")]))

    logs = load_event_logs(path)

    assert [lg.index for lg in logs] == [3, 4]


def test_load_json_lines(tmp_path: Path) -> None:
    path = tmp_path / "logs.jsonl"
    path.write_text("\n".join(json.dumps(r) for r in [rpc_record(), rpc_record(logIndex=9)]) + "\n\n")

    logs = load_event_logs(path)

    assert [lg.index for lg in logs] == [3, 9]
    assert logs == event_logs_from_rpc([rpc_record(), rpc_record(logIndex=9)])
