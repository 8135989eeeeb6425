"""Address lookup tables: the Pump.fun address sets and table filtering."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from soltrade.constants import (
    ASSOCIATED_TOKEN_PROGRAM,
    PUMPFUN,
    PUMPFUN_AMM_FEE_RECIPIENTS,
    PUMPFUN_EVENT_AUTHORITY,
    PUMPFUN_FEE_RECIPIENT,
    PUMPFUN_GLOBAL_ACCOUNT,
    RENT,
    SYSTEM_PROGRAM,
    TOKEN_PROGRAM,
)
from soltrade.types import Pubkey

logger = logging.getLogger(__name__)


@dataclass
class AddressLookupTableAccount:
    """A lookup table's address together with the addresses it holds."""

    key: Pubkey
    addresses: list[Pubkey] = field(default_factory=list)

    def copy(self) -> AddressLookupTableAccount:
        return AddressLookupTableAccount(self.key, list(self.addresses))


def _pumpfun_base(payer: Pubkey) -> list[Pubkey]:
    return [
        payer,
        PUMPFUN,
        SYSTEM_PROGRAM,
        TOKEN_PROGRAM,
        RENT,
        PUMPFUN_EVENT_AUTHORITY,
        ASSOCIATED_TOKEN_PROGRAM,
        PUMPFUN_GLOBAL_ACCOUNT,
        PUMPFUN_FEE_RECIPIENT,
    ]


def get_pumpfun_addresses(
    payer: Pubkey, include_addresses: Iterable[Pubkey] = ()
) -> list[Pubkey]:
    """Addresses a Pump.fun trade touches, followed by ``include_addresses``."""
    return [*_pumpfun_base(payer), *include_addresses]


def get_pumpfun_filtered_addresses(
    payer: Pubkey, include_addresses: Iterable[Pubkey] = ()
) -> list[Pubkey]:
    """Pump.fun trade addresses plus the AMM fee recipients and extras."""
    return [*_pumpfun_base(payer), *PUMPFUN_AMM_FEE_RECIPIENTS, *include_addresses]


def filter_lookup_table(
    lookup_table: AddressLookupTableAccount, indices: Iterable[int]
) -> AddressLookupTableAccount:
    """Keep only the addresses at ``indices``; indices out of range are skipped."""
    size = len(lookup_table.addresses)
    selected = [lookup_table.addresses[i] for i in indices if 0 <= i < size]
    logger.debug("selected %d addresses from lookup table", len(selected))
    return AddressLookupTableAccount(lookup_table.key, selected)


def select_addresses(
    lookup_table: AddressLookupTableAccount, addresses: Iterable[Pubkey]
) -> AddressLookupTableAccount:
    """Narrow a table to the given addresses that it contains.

    Addresses absent from the table are logged and skipped; raises LookupError
    when none of them is in the table.
    """
    positions = {address: index for index, address in enumerate(lookup_table.addresses)}
    indices: list[int] = []
    missing: list[Pubkey] = []
    for address in addresses:
        if address in positions:
            indices.append(positions[address])
        else:
            missing.append(address)

    if missing:
        logger.warning("%d addresses not found in lookup table", len(missing))
        for address in missing:
            logger.warning("address not found: %s", address)

    if not indices:
        raise LookupError("none of the given addresses is in the lookup table")

    return filter_lookup_table(lookup_table, indices)