from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from tokenflow.adapters.address_hash import EthAddressHashParser
from tokenflow.core.constants import BURN_ADDRESS
from tokenflow.core.errors import TokenUpdateError
from tokenflow.core.models import TokenTransfer
from tokenflow.services.token_updater import TokenStateUpdater

from factories import ALICE, BOB, TOKEN


def _transfer(from_address: str = ALICE, to_address: str = BOB) -> TokenTransfer:
    return TokenTransfer(
        token_contract_address_hash=TOKEN,
        from_address_hash=from_address,
        to_address_hash=to_address,
        token_type="ERC-20",
        block_number=1,
        block_hash="0x" + "00" * 32,
        log_index=0,
        transaction_hash="0x" + "01" * 32,
        amount=Decimal(0),
    )


def test_plain_transfer_is_not_refreshed(collaborators: dict[str, MagicMock]) -> None:
    updater = TokenStateUpdater(**collaborators)
    assert updater.update(_transfer()) is False
    collaborators["address_parser"].parse.assert_not_called()
    collaborators["metadata_retriever"].fetch_functions_of.assert_not_called()


def test_mint_refreshes_token(collaborators: dict[str, MagicMock]) -> None:
    updater = TokenStateUpdater(**collaborators)
    assert updater.update(_transfer(from_address=BURN_ADDRESS)) is True

    collaborators["metadata_retriever"].fetch_functions_of.assert_called_once_with(TOKEN)
    repository = collaborators["repository"]
    repository.find_by_contract_address.assert_called_once_with(bytes.fromhex(TOKEN[2:]))
    token, params = repository.update.call_args.args
    assert token is repository.find_by_contract_address.return_value
    assert params["symbol"] == "WETH"
    assert "updated_at" in params


def test_unknown_token_is_skipped(collaborators: dict[str, MagicMock]) -> None:
    collaborators["repository"].find_by_contract_address.return_value = None
    updater = TokenStateUpdater(**collaborators)

    assert updater.update(_transfer(to_address=BURN_ADDRESS)) is False
    collaborators["repository"].update.assert_not_called()


def test_parser_error_value_is_fatal(collaborators: dict[str, MagicMock]) -> None:
    collaborators["address_parser"].parse.side_effect = None
    collaborators["address_parser"].parse.return_value = ValueError("bad address")
    updater = TokenStateUpdater(**collaborators)

    with pytest.raises(TokenUpdateError) as exc_info:
        updater.update(_transfer(to_address=BURN_ADDRESS))
    assert exc_info.value.contract_address_hash == TOKEN


def test_repository_error_value_is_fatal(collaborators: dict[str, MagicMock]) -> None:
    collaborators["repository"].update.return_value = RuntimeError("constraint violated")
    updater = TokenStateUpdater(**collaborators)

    with pytest.raises(TokenUpdateError):
        updater.update(_transfer(from_address=BURN_ADDRESS))


def test_eth_address_hash_parser() -> None:
    parser = EthAddressHashParser()
    assert parser.parse(ALICE) == bytes.fromhex(ALICE[2:])
    assert isinstance(parser.parse("0x1234"), ValueError)


def test_burn_address_can_be_overridden_per_call(collaborators: dict[str, MagicMock]) -> None:
    dead = "0x000000000000000000000000000000000000dead"
    updater = TokenStateUpdater(**collaborators)

    assert updater.update(_transfer(from_address=BURN_ADDRESS), burn_address=dead) is False
    assert updater.update(_transfer(to_address=dead), burn_address=dead) is True


def test_updated_at_is_passed_with_params(collaborators: dict[str, MagicMock]) -> None:
    updater = TokenStateUpdater(**collaborators)
    updater.update(_transfer(from_address=BURN_ADDRESS))

    _, params = collaborators["repository"].update.call_args.args
    assert isinstance(params["updated_at"], datetime)
    assert params["updated_at"].tzinfo == timezone.utc
