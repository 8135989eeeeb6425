"""Pump.fun bonding curve account and its pricing formulas."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from soltrade.constants import (
    INITIAL_REAL_TOKEN_RESERVES,
    INITIAL_VIRTUAL_SOL_RESERVES,
    INITIAL_VIRTUAL_TOKEN_RESERVES,
    TOKEN_TOTAL_SUPPLY,
)
from soltrade.types import Pubkey

_U64_MASK = (1 << 64) - 1


def _u64(value: int) -> int:
    """Narrow an integer to 64 bits the way an unsigned cast does."""
    return value & _U64_MASK


@dataclass
class BondingCurveAccount:
    """State of a token's bonding curve, used to price buys and sells."""

    discriminator: int = 0
    account: Pubkey = field(default_factory=Pubkey)
    virtual_token_reserves: int = 0
    virtual_sol_reserves: int = 0
    real_token_reserves: int = 0
    real_sol_reserves: int = 0
    token_total_supply: int = 0
    complete: bool = False
    creator: Pubkey = field(default_factory=Pubkey)

    @classmethod
    def from_dev_trade(
        cls,
        account: Pubkey,
        dev_token_amount: int,
        dev_sol_amount: int,
        creator: Pubkey,
    ) -> BondingCurveAccount:
        """Build the curve state right after the creator's first buy.

        ``account`` is the bonding curve address of the token's mint.
        """
        if dev_token_amount < 0 or dev_sol_amount < 0:
            raise ValueError("amounts must not be negative")
        if dev_token_amount > INITIAL_REAL_TOKEN_RESERVES:
            raise ValueError("creator bought more tokens than the curve holds")
        return cls(
            discriminator=0,
            account=account,
            virtual_token_reserves=INITIAL_VIRTUAL_TOKEN_RESERVES - dev_token_amount,
            virtual_sol_reserves=INITIAL_VIRTUAL_SOL_RESERVES + dev_sol_amount,
            real_token_reserves=INITIAL_REAL_TOKEN_RESERVES - dev_token_amount,
            real_sol_reserves=dev_sol_amount,
            token_total_supply=TOKEN_TOTAL_SUPPLY,
            complete=False,
            creator=creator,
        )

    def _ensure_open(self) -> None:
        if self.complete:
            raise ValueError("Curve is complete")

    def get_buy_price(self, amount: int) -> int:
        """Tokens received for spending ``amount`` lamports.

        Raises ValueError when the curve is complete.
        """
        self._ensure_open()
        if amount == 0:
            return 0
        product = self.virtual_sol_reserves * self.virtual_token_reserves
        new_sol = self.virtual_sol_reserves + amount
        new_tokens = product // new_sol + 1
        tokens = _u64(self.virtual_token_reserves - new_tokens)
        return min(tokens, self.real_token_reserves)

    def get_sell_price(self, amount: int, fee_basis_points: int) -> int:
        """Lamports received for selling ``amount`` tokens, after the fee.

        Raises ValueError when the curve is complete.
        """
        self._ensure_open()
        if amount == 0:
            return 0
        gross = (amount * self.virtual_sol_reserves) // (
            self.virtual_token_reserves + amount
        )
        fee = (gross * fee_basis_points) // 10000
        return _u64(gross - fee)

    def get_market_cap_sol(self) -> int:
        """Current market cap in lamports."""
        if self.virtual_token_reserves == 0:
            return 0
        return _u64(
            self.token_total_supply
            * self.virtual_sol_reserves
            // self.virtual_token_reserves
        )

    def get_final_market_cap_sol(self, fee_basis_points: int) -> int:
        """Market cap in lamports once every remaining real token is bought."""
        total_sell_value = self.get_buy_out_price(
            self.real_token_reserves, fee_basis_points
        )
        total_virtual_value = self.virtual_sol_reserves + total_sell_value
        total_virtual_tokens = self.virtual_token_reserves - self.real_token_reserves
        if total_virtual_tokens < 0:
            raise ValueError("real token reserves exceed virtual token reserves")
        if total_virtual_tokens == 0:
            return 0
        return _u64(
            self.token_total_supply * total_virtual_value // total_virtual_tokens
        )

    def get_buy_out_price(self, amount: int, fee_basis_points: int) -> int:
        """Lamports, fee included, needed to buy ``amount`` tokens.

        Raises ValueError when the amount reaches the virtual token reserves.
        """
        sol_tokens = max(amount, self.real_sol_reserves)
        remaining = self.virtual_token_reserves - sol_tokens
        if remaining <= 0:
            raise ValueError("amount exhausts the virtual token reserves")
        total_sell_value = (sol_tokens * self.virtual_sol_reserves) // remaining + 1
        fee = (total_sell_value * fee_basis_points) // 10000
        return _u64(total_sell_value + fee)

    def get_token_price(self) -> float:
        """Price of one token in SOL, from the virtual reserves."""
        v_sol = self.virtual_sol_reserves / 100_000_000.0
        v_tokens = self.virtual_token_reserves / 100_000.0
        if v_tokens == 0.0:
            return math.nan if v_sol == 0.0 else math.inf
        return v_sol / v_tokens