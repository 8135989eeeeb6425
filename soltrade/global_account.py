"""Pump.fun global configuration account."""

from __future__ import annotations

from dataclasses import dataclass

from soltrade.constants import (
    CREATOR_FEE,
    ENABLE_MIGRATE,
    FEE_BASIS_POINTS,
    INITIAL_REAL_TOKEN_RESERVES,
    INITIAL_VIRTUAL_SOL_RESERVES,
    INITIAL_VIRTUAL_TOKEN_RESERVES,
    POOL_MIGRATION_FEE,
    PUMPFUN_AMM_FEE_RECIPIENTS,
    PUMPFUN_AUTHORITY,
    PUMPFUN_FEE_RECIPIENT,
    PUMPFUN_GLOBAL_ACCOUNT,
    PUMPFUN_WITHDRAW_AUTHORITY,
    TOKEN_TOTAL_SUPPLY,
)
from soltrade.types import Pubkey


@dataclass
class GlobalAccount:
    """Program-wide pricing and fee settings, defaulting to the known values."""

    discriminator: int = 0
    account: Pubkey = PUMPFUN_GLOBAL_ACCOUNT
    initialized: bool = True
    authority: Pubkey = PUMPFUN_AUTHORITY
    fee_recipient: Pubkey = PUMPFUN_FEE_RECIPIENT
    initial_virtual_token_reserves: int = INITIAL_VIRTUAL_TOKEN_RESERVES
    initial_virtual_sol_reserves: int = INITIAL_VIRTUAL_SOL_RESERVES
    initial_real_token_reserves: int = INITIAL_REAL_TOKEN_RESERVES
    token_total_supply: int = TOKEN_TOTAL_SUPPLY
    fee_basis_points: int = FEE_BASIS_POINTS
    withdraw_authority: Pubkey = PUMPFUN_WITHDRAW_AUTHORITY
    enable_migrate: bool = ENABLE_MIGRATE
    pool_migration_fee: int = POOL_MIGRATION_FEE
    creator_fee: int = CREATOR_FEE
    fee_recipients: tuple[Pubkey, ...] = PUMPFUN_AMM_FEE_RECIPIENTS

    def get_initial_buy_price(self, amount: int) -> int:
        """Tokens received for ``amount`` lamports on a brand-new curve."""
        if amount == 0:
            return 0
        product = self.initial_virtual_sol_reserves * self.initial_virtual_token_reserves
        new_sol = self.initial_virtual_sol_reserves + amount
        new_tokens = product // new_sol + 1
        tokens = self.initial_virtual_token_reserves - new_tokens
        return min(tokens, self.initial_real_token_reserves)