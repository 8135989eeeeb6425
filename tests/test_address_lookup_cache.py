import pytest

from soltrade.address_lookup import AddressLookupTableAccount
from soltrade.address_lookup_cache import (
    AddressLookupTableCache,
    get_address_lookup_table_account,
)
from soltrade.types import Pubkey


def key(n: int) -> Pubkey:
    return Pubkey(bytes([n]) * 32)


@pytest.fixture
def cache():
    return AddressLookupTableCache()


def test_get_instance_is_shared():
    address = key(201)
    AddressLookupTableCache.get_instance().add_or_update_table(address, None, True)
    try:
        info = AddressLookupTableCache.get_instance().get_table(address)
        assert info.lookup_table_address == address
        assert info.lock is True
    finally:
        AddressLookupTableCache.get_instance().remove_table(address)
    assert AddressLookupTableCache.get_instance().table_exists(address) is False


def test_add_new_table_defaults_unlocked(cache):
    cache.add_or_update_table(key(1))
    info = cache.get_table(key(1))
    assert info.lookup_table_address == key(1)
    assert info.address_lookup_table is None
    assert info.lock is False
    assert cache.table_exists(key(1)) is True


def test_update_keeps_fields_not_given(cache):
    table = AddressLookupTableAccount(key(1), [key(2)])
    cache.add_or_update_table(key(1), table, True)
    cache.add_or_update_table(key(1))
    info = cache.get_table(key(1))
    assert info.lock is True
    assert info.address_lookup_table.addresses == [key(2)]
    cache.add_or_update_table(key(1), None, False)
    assert cache.get_table(key(1)).lock is False


def test_get_table_returns_copy(cache):
    cache.add_or_update_table(key(1), AddressLookupTableAccount(key(1), [key(2)]))
    info = cache.get_table(key(1))
    info.address_lookup_table.addresses.append(key(3))
    info.lock = True
    again = cache.get_table(key(1))
    assert again.address_lookup_table.addresses == [key(2)]
    assert again.lock is False


def test_missing_table(cache):
    assert cache.get_table(key(5)) is None
    assert cache.table_exists(key(5)) is False
    assert cache.remove_table(key(5)) is False
    assert cache.lock_table(key(5)) is False
    assert cache.unlock_table(key(5)) is False
    assert cache.update_table_content(key(5), AddressLookupTableAccount(key(5))) is False


def test_lock_unlock(cache):
    cache.add_or_update_table(key(1))
    assert cache.lock_table(key(1)) is True
    assert cache.get_table(key(1)).lock is True
    assert cache.unlock_table(key(1)) is True
    assert cache.get_table(key(1)).lock is False


def test_remove_and_list(cache):
    cache.add_or_update_table(key(1))
    cache.add_or_update_table(key(2))
    assert sorted(cache.get_all_table_addresses(), key=lambda k: k.raw) == [key(1), key(2)]
    assert cache.remove_table(key(1)) is True
    assert cache.get_all_table_addresses() == [key(2)]


def test_table_content(cache):
    empty = cache.get_table_content(key(1))
    assert empty.key == key(1)
    assert empty.addresses == []
    cache.add_or_update_table(key(1))
    assert cache.update_table_content(
        key(1), AddressLookupTableAccount(key(1), [key(4), key(5)])
    ) is True
    assert cache.get_table_content(key(1)).addresses == [key(4), key(5)]


def test_module_lookup_uses_shared_cache():
    shared = AddressLookupTableCache.get_instance()
    address = key(200)
    shared.add_or_update_table(address, AddressLookupTableAccount(address, [key(6)]))
    try:
        assert get_address_lookup_table_account(address).addresses == [key(6)]
    finally:
        shared.remove_table(address)
    assert get_address_lookup_table_account(address).addresses == []