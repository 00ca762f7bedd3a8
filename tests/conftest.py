from unittest.mock import MagicMock

import pytest


@pytest.fixture
def collaborators() -> dict[str, MagicMock]:
    parser = MagicMock()
    parser.parse.side_effect = lambda address: bytes.fromhex(address[2:])
    retriever = MagicMock()
    retriever.fetch_functions_of.return_value = {"name": "Wrapped Ether", "symbol": "WETH", "total_supply": 10}
    repository = MagicMock()
    repository.find_by_contract_address.return_value = MagicMock(name="token-record")
    repository.update.return_value = MagicMock(name="updated-token")
    return {"address_parser": parser, "metadata_retriever": retriever, "repository": repository}
