import pytest
from eth_utils import keccak

from tokenflow.core.config import ParserConfig
from tokenflow.core.constants import BURN_ADDRESS, DEPOSIT_T0, TRANSFER_T0, WITHDRAWAL_T0


@pytest.mark.parametrize(
    ("signature", "topic0"),
    [
        ("Transfer(address,address,uint256)", TRANSFER_T0),
        ("Deposit(address,uint256)", DEPOSIT_T0),
        ("Withdrawal(address,uint256)", WITHDRAWAL_T0),
    ],
)
def test_topic0_constants_match_signatures(signature: str, topic0: str) -> None:
    assert "0x" + keccak(text=signature).hex() == topic0


def test_default_config() -> None:
    config = ParserConfig()
    assert config.signatures == (TRANSFER_T0, DEPOSIT_T0, WITHDRAWAL_T0)
    assert config.burn_address == BURN_ADDRESS


def test_config_lowercases_values() -> None:
    config = ParserConfig(transfer_topic0="0x" + "AB" * 32, burn_address="0x" + "CD" * 20)
    assert config.transfer_topic0 == "0x" + "ab" * 32
    assert config.burn_address == "0x" + "cd" * 20


@pytest.mark.parametrize(
    "overrides",
    [
        {"transfer_topic0": "0x1234"},
        {"deposit_topic0": "ab" * 32},
        {"withdrawal_topic0": "0x" + "zz" * 32},
        {"burn_address": "0x" + "00" * 32},
    ],
)
def test_config_rejects_malformed_values(overrides: dict) -> None:
    with pytest.raises(ValueError):
        ParserConfig(**overrides)
