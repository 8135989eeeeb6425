"""Core value types: public keys, priority fees and trade configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

DEFAULT_SLIPPAGE = 1000  # basis points, 10%
DEFAULT_COMPUTE_UNIT_LIMIT = 78000
DEFAULT_COMPUTE_UNIT_PRICE = 500000
DEFAULT_BUY_TIP_FEE = 0.0006
DEFAULT_SELL_TIP_FEE = 0.0001
DEFAULT_RPC_UNIT_LIMIT = 1000000
DEFAULT_RPC_UNIT_PRICE = 500000

PUBKEY_LENGTH = 32

_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {char: value for value, char in enumerate(_ALPHABET)}


def _b58encode(data: bytes) -> str:
    stripped = data.lstrip(b"\0")
    leading = len(data) - len(stripped)
    number = int.from_bytes(stripped, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(_ALPHABET[remainder])
    return "1" * leading + "".join(reversed(digits))


def _b58decode(text: str) -> bytes:
    stripped = text.lstrip("1")
    leading = len(text) - len(stripped)
    number = 0
    for char in stripped:
        try:
            number = number * 58 + _INDEX[char]
        except KeyError:
            raise ValueError(f"invalid base58 character {char!r}") from None
    body = number.to_bytes((number.bit_length() + 7) // 8, "big") if number else b""
    return b"\0" * leading + body


@dataclass(frozen=True)
class Pubkey:
    """A 32-byte account address, shown in base58."""

    raw: bytes = bytes(PUBKEY_LENGTH)

    def __post_init__(self) -> None:
        if len(self.raw) != PUBKEY_LENGTH:
            raise ValueError(
                f"public key must be {PUBKEY_LENGTH} bytes, got {len(self.raw)}"
            )

    @classmethod
    def from_base58(cls, text: str) -> Pubkey:
        """Parse a base58 address; raises ValueError when it is not one."""
        return cls(_b58decode(text))

    def to_base58(self) -> str:
        return _b58encode(self.raw)

    def __str__(self) -> str:
        return self.to_base58()

    def __repr__(self) -> str:
        return f"Pubkey({self.to_base58()!r})"


@dataclass
class PriorityFee:
    """Compute-unit and tip settings applied to trade transactions."""

    unit_limit: int = DEFAULT_COMPUTE_UNIT_LIMIT
    unit_price: int = DEFAULT_COMPUTE_UNIT_PRICE
    rpc_unit_limit: int = DEFAULT_RPC_UNIT_LIMIT
    rpc_unit_price: int = DEFAULT_RPC_UNIT_PRICE
    buy_tip_fee: float = DEFAULT_BUY_TIP_FEE
    buy_tip_fees: list[float] = field(default_factory=list)
    smart_buy_tip_fee: float = 0.0
    sell_tip_fee: float = DEFAULT_SELL_TIP_FEE


@dataclass
class TradeConfig:
    """Connection and fee settings for a trading client."""

    rpc_url: str
    swqos_configs: list[Any] = field(default_factory=list)
    priority_fee: PriorityFee = field(default_factory=PriorityFee)
    commitment: str = "confirmed"
    lookup_table_key: Pubkey | None = None