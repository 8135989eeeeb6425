"""Process-wide cache of address lookup tables."""

from __future__ import annotations

import threading
from dataclasses import dataclass

from soltrade.address_lookup import AddressLookupTableAccount
from soltrade.types import Pubkey


@dataclass
class AddressLookupTableInfo:
    """A cached lookup table entry and its lock flag."""

    lookup_table_address: Pubkey | None = None
    address_lookup_table: AddressLookupTableAccount | None = None
    lock: bool = False

    def copy(self) -> AddressLookupTableInfo:
        table = self.address_lookup_table
        return AddressLookupTableInfo(
            self.lookup_table_address,
            table.copy() if table is not None else None,
            self.lock,
        )


class AddressLookupTableCache:
    """Thread-safe store of lookup tables keyed by table address."""

    _instance: AddressLookupTableCache | None = None
    _instance_guard = threading.Lock()

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._tables: dict[Pubkey, AddressLookupTableInfo] = {}

    @classmethod
    def get_instance(cls) -> AddressLookupTableCache:
        """Return the shared cache, creating it on first use."""
        with cls._instance_guard:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def add_or_update_table(
        self,
        lookup_table_address: Pubkey,
        address_lookup_table: AddressLookupTableAccount | None = None,
        lock: bool | None = None,
    ) -> None:
        """Insert a table, or update the given fields of an existing one."""
        with self._guard:
            info = self._tables.get(lookup_table_address)
            if info is not None:
                if address_lookup_table is not None:
                    info.address_lookup_table = address_lookup_table
                if lock is not None:
                    info.lock = lock
            else:
                self._tables[lookup_table_address] = AddressLookupTableInfo(
                    lookup_table_address,
                    address_lookup_table,
                    bool(lock) if lock is not None else False,
                )

    def remove_table(self, lookup_table_address: Pubkey) -> bool:
        with self._guard:
            return self._tables.pop(lookup_table_address, None) is not None

    def get_table(self, lookup_table_address: Pubkey) -> AddressLookupTableInfo | None:
        """Return a copy of the entry, or None when it is not cached."""
        with self._guard:
            info = self._tables.get(lookup_table_address)
            return info.copy() if info is not None else None

    def get_all_table_addresses(self) -> list[Pubkey]:
        with self._guard:
            return list(self._tables)

    def table_exists(self, lookup_table_address: Pubkey) -> bool:
        with self._guard:
            return lookup_table_address in self._tables

    def _set_lock(self, lookup_table_address: Pubkey, value: bool) -> bool:
        with self._guard:
            info = self._tables.get(lookup_table_address)
            if info is None:
                return False
            info.lock = value
            return True

    def lock_table(self, lookup_table_address: Pubkey) -> bool:
        return self._set_lock(lookup_table_address, True)

    def unlock_table(self, lookup_table_address: Pubkey) -> bool:
        return self._set_lock(lookup_table_address, False)

    def update_table_content(
        self,
        lookup_table_address: Pubkey,
        address_lookup_table: AddressLookupTableAccount,
    ) -> bool:
        """Replace a cached table's contents; False when it is not cached."""
        with self._guard:
            info = self._tables.get(lookup_table_address)
            if info is None:
                return False
            info.address_lookup_table = address_lookup_table
            return True

    def get_table_content(self, lookup_table_address: Pubkey) -> AddressLookupTableAccount:
        """Return a copy of the table's contents, or an empty table if unknown."""
        with self._guard:
            info = self._tables.get(lookup_table_address)
            if info is not None and info.address_lookup_table is not None:
                return info.address_lookup_table.copy()
        return AddressLookupTableAccount(lookup_table_address, [])


def get_address_lookup_table_account(
    lookup_table_address: Pubkey,
) -> AddressLookupTableAccount:
    """Look a table up in the shared cache."""
    return AddressLookupTableCache.get_instance().get_table_content(lookup_table_address)