from __future__ import annotations

# topic0 constants (lowercase, 0x-prefixed)
# keccak256("Transfer(address,address,uint256)"), shared by ERC-20 and ERC-721
TRANSFER_T0   = "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"
# keccak256("Deposit(address,uint256)"), wrapped-asset mint
DEPOSIT_T0    = "0xe1fffcc4923d04b559f4d29a8bfc6cda04eb5b0d3c460751c2402c5c5cc9109c"
# keccak256("Withdrawal(address,uint256)"), wrapped-asset burn
WITHDRAWAL_T0 = "0x7fcf532c15f0a6db0bd6d0e038bea71d30d808c7d98cb3bf7268a95bf5081b65"

BURN_ADDRESS = "0x0000000000000000000000000000000000000000"

# hex form of an empty byte string
EMPTY_DATA = "0x"
