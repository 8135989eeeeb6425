"""Process-wide store of durable nonce state."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field, replace

from soltrade.types import Pubkey

HASH_LENGTH = 32


@dataclass
class NonceInfo:
    """Durable nonce account, its current value and usage flags."""

    nonce_account: Pubkey | None = None
    current_nonce: bytes = field(default=bytes(HASH_LENGTH))
    next_buy_time: int = 0
    lock: bool = False
    used: bool = False


class NonceCache:
    """Thread-safe holder of a single NonceInfo."""

    _instance: NonceCache | None = None
    _instance_guard = threading.Lock()

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._info = NonceInfo()

    @classmethod
    def get_instance(cls) -> NonceCache:
        """Return the shared cache, creating it on first use."""
        with cls._instance_guard:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def init(self, nonce_account: str | None = None) -> None:
        """Set the nonce account from base58 text and clear the flags.

        Text that is not a valid address leaves the account unchanged.
        """
        account = None
        if nonce_account is not None:
            try:
                account = Pubkey.from_base58(nonce_account)
            except ValueError:
                account = None
        self.update_nonce_info_partial(nonce_account=account, lock=False, used=False)

    def get_nonce_info(self) -> NonceInfo:
        """Return a copy of the current state."""
        with self._guard:
            return replace(self._info)

    def update_nonce_info_partial(
        self,
        nonce_account: Pubkey | None = None,
        current_nonce: bytes | None = None,
        next_buy_time: int | None = None,
        lock: bool | None = None,
        used: bool | None = None,
    ) -> None:
        """Update only the fields that are given."""
        with self._guard:
            if nonce_account is not None:
                self._info.nonce_account = nonce_account
            if current_nonce is not None:
                self._info.current_nonce = current_nonce
            if next_buy_time is not None:
                self._info.next_buy_time = next_buy_time
            if lock is not None:
                self._info.lock = lock
            if used is not None:
                self._info.used = used

    def mark_used(self) -> None:
        self.update_nonce_info_partial(used=True)

    def lock(self) -> None:
        self.update_nonce_info_partial(lock=True)

    def unlock(self) -> None:
        self.update_nonce_info_partial(lock=False)