"""Offline pricing, constants, lookup-table helpers and shared caches for Solana DEX trading."""

__version__ = "0.2.3"