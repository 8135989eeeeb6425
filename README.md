# soltrade

Pricing, configuration and lookup-table helpers for trading tokens on
Solana DEX programs (Pump.fun, PumpSwap, Bonk and Raydium CPMM). It works
offline and uses only the Python standard library.

## Installation

```
pip install soltrade
```

Python 3.10 or later is required.

## What is inside

- `soltrade.types`: the frozen `Pubkey` value type (32 bytes). It has
  `Pubkey.from_base58`, which raises `ValueError` on bad input or a wrong
  length, and `to_base58`. The module also holds the `PriorityFee` and
  `TradeConfig` dataclasses and their defaults for compute-unit limits,
  prices and tip fees, and `DEFAULT_SLIPPAGE`.
- `soltrade.constants`: program ids, PDA seeds, instruction discriminators,
  Pump.fun supply and reserve figures, and relay tip accounts. It also has the
  `SwqosProvider` and `SwqosRegion` enums, `swqos_endpoint(provider, region)`,
  which returns a relay URL, and `tip_accounts(provider)`, which returns a
  tuple of `Pubkey`.
- `soltrade.bonding_curve`: `BondingCurveAccount`. It is built directly or
  with `from_dev_trade`, which gives the curve state right after the
  creator's first buy. It has the methods `get_buy_price`, `get_sell_price`,
  `get_market_cap_sol`, `get_final_market_cap_sol`, `get_buy_out_price` and
  `get_token_price`.
- `soltrade.global_account`: `GlobalAccount`. Its defaults are the program's
  known global settings, and `get_initial_buy_price` quotes a buy on a new
  curve.
- `soltrade.address_lookup`: the `AddressLookupTableAccount` dataclass and the
  Pump.fun address lists `get_pumpfun_addresses` and
  `get_pumpfun_filtered_addresses`. `filter_lookup_table` keeps the addresses
  at the given indices and skips any index out of range. `select_addresses`
  keeps the addresses the table contains. It logs each one that is missing and
  raises `LookupError` when none is found.
- `soltrade.address_lookup_cache`: `AddressLookupTableCache` and
  `AddressLookupTableInfo`. It also has `get_address_lookup_table_account`,
  which returns an empty table for an address it does not know.
- `soltrade.nonce_cache`: `NonceCache` and `NonceInfo`. It holds a durable
  nonce account, the current nonce, and the lock and used flags.
- `soltrade.tip_cache`: `TipCache` holds the current tip in SOL. The default
  is 0.001.

Each of the three caches is thread-safe and shared through `get_instance()`.

## Example

```python
from soltrade.bonding_curve import BondingCurveAccount
from soltrade.constants import SwqosProvider, SwqosRegion, swqos_endpoint
from soltrade.types import Pubkey

curve_address = Pubkey.from_base58("4wTV1YmiEkRvAtNtsSGPtUrqRYQMe5SKy2uB4Jjaxnjf")
creator = Pubkey.from_base58("11111111111111111111111111111111")

curve = BondingCurveAccount.from_dev_trade(
    curve_address,
    dev_token_amount=0,
    dev_sol_amount=0,
    creator=creator,
)
tokens = curve.get_buy_price(100_000)
lamports = curve.get_sell_price(tokens, 95)

print(swqos_endpoint(SwqosProvider.JITO, SwqosRegion.FRANKFURT))
```

A buy or sell quote on a completed curve raises `ValueError`.
`get_buy_out_price` also raises `ValueError` when the amount reaches the
virtual token reserves.

## What it does not do

This package computes prices and manages addresses and settings locally. It
does not:

- connect to a Solana RPC node;
- build, sign or send transactions;
- derive program addresses (PDAs);
- submit trades to any relay.

`swqos_endpoint` and `tip_accounts` only return URLs and addresses. No command
line tool is included.

## Running the tests

```
pip install -e ".[test]"
pytest
```