"""Program addresses, seeds, discriminators and relay endpoints."""

from __future__ import annotations

from enum import Enum

from soltrade.types import Pubkey

_pk = Pubkey.from_base58


def _keys(block: str) -> tuple[Pubkey, ...]:
    """Parse a whitespace-separated block of base58 addresses, keeping order."""
    return tuple(_pk(text) for text in block.split())


# Trade platforms
TRADE_PLATFORM_PUMPFUN = "pumpfun"
TRADE_PLATFORM_PUMPFUN_SWAP = "pumpswap"
TRADE_PLATFORM_BONK = "bonk"
TRADE_PLATFORM_RAYDIUM_CPMM = "raydium_cpmm"

# Well-known programs and sysvars
SYSTEM_PROGRAM = Pubkey()
TOKEN_PROGRAM = _pk("TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA")
ASSOCIATED_TOKEN_PROGRAM = _pk("ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL")
RENT = _pk("SysvarRent111111111111111111111111111111111")
WSOL_TOKEN_ACCOUNT = _pk("So11111111111111111111111111111111111111112")

# Amounts
SCALE = 10**6  # token decimals
LAMPORTS_PER_SOL = 10**9
TOTAL_SUPPLY = 1_000_000_000 * SCALE
BONDING_CURVE_SUPPLY = 793_100_000 * SCALE
COMPLETION_LAMPORTS = 85 * LAMPORTS_PER_SOL

TOKEN_TOTAL_SUPPLY = TOTAL_SUPPLY
INITIAL_REAL_TOKEN_RESERVES = BONDING_CURVE_SUPPLY
INITIAL_VIRTUAL_TOKEN_RESERVES = 1_073_000_000 * SCALE
INITIAL_VIRTUAL_SOL_RESERVES = 30 * LAMPORTS_PER_SOL
FEE_BASIS_POINTS = 95
ENABLE_MIGRATE = False
POOL_MIGRATION_FEE = 15_000_001
CREATOR_FEE = 5

# Pump.fun
PUMPFUN_GLOBAL_SEED = b"global"
PUMPFUN_MINT_AUTHORITY_SEED = b"mint-authority"
PUMPFUN_BONDING_CURVE_SEED = b"bonding-curve"
PUMPFUN_CREATOR_VAULT_SEED = b"creator-vault"
PUMPFUN_METADATA_SEED = b"metadata"

PUMPFUN = _pk("6EF8rrecthR5Dkzon8Nwu78hRvfCKubJ14M5uBEwF6P")
PUMPFUN_FEE_RECIPIENT = _pk("62qc2CNXwrYqQScmEdiZFFAnJR262PxWEuNQtxfafNgV")
PUMPFUN_GLOBAL_ACCOUNT = _pk("4wTV1YmiEkRvAtNtsSGPtUrqRYQMe5SKy2uB4Jjaxnjf")
PUMPFUN_AUTHORITY = _pk("FFWtrEQ4B4PKQoVuHYzZq8FabGkVatYzDpEVHsK5rrhF")
PUMPFUN_WITHDRAW_AUTHORITY = _pk("39azUYFWPz3VHgKCf3VChUwbpURdCHRxjWVowf5jUJjg")
PUMPFUN_EVENT_AUTHORITY = _pk("Ce6TQqeHC9p8KetsN6JsjHK7UTZk7nasjjnr7XxXp9F1")
PUMPFUN_AMM_PROGRAM = _pk("675kPX9MHTjS2zt1qfr1NYHuzeLXfQM9H24wFSUt1Mp8")
MPL_TOKEN_METADATA = _pk("metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s")
SYMBOL_SOLANA = "solana"

# Protocol fee recipients 1 to 7, in order.
PUMPFUN_AMM_FEE_RECIPIENTS = _keys(
    """
    7VtfL8fvgNfhz17qKRMjzQEXgbdpnHHHQRh54R9jP2RJ 7hTckgnGnLQR6sdH7YkqFTAA7VwTfYFaZ6EhEsU3saCX
    9rPYyANsfQZw3DnDmKE3YCQF5E8oD89UXoHn9JFEhJUz AVmoTthdrX6tKt4nDjco2D775W2YK3sDhxPcMmzUAmTY
    CebN5WGQ4jvEPvsVU4EoHEpgzq1VV7AbicfhtW4xC9iM FWsW1xNtWscwNmKv6wVsU1iTzRN6wmmk3MjxRP5tT7hz
    G5UZAVbAf46s7cKWoyKu8kYTip9DGTpbLZ2qa9Aq69dP
    """
)

# PumpSwap shares its seeds and fee recipient with Pump.fun.
PUMPSWAP_GLOBAL_SEED = PUMPFUN_GLOBAL_SEED
PUMPSWAP_MINT_AUTHORITY_SEED = PUMPFUN_MINT_AUTHORITY_SEED
PUMPSWAP_BONDING_CURVE_SEED = PUMPFUN_BONDING_CURVE_SEED
PUMPSWAP_METADATA_SEED = PUMPFUN_METADATA_SEED
PUMPSWAP_FEE_RECIPIENT = PUMPFUN_FEE_RECIPIENT
PUMPSWAP_PROTOCOL_FEE_RECIPIENT = PUMPFUN_FEE_RECIPIENT
PUMPSWAP_FEE_RECIPIENT_ATA = _pk("94qWNrtmfn42h3ZjUZwWvK1MEo9uVmmrBPd2hpNjYDjb")
PUMPSWAP_GLOBAL_ACCOUNT = _pk("ADyA8hdefvWN2dbGGWFotbzWxrAvLW83WG6QCVXvJKqw")
PUMPSWAP_EVENT_AUTHORITY = _pk("GS4CU59F31iL7aR2Q8zVS8DRrcRnXX1yjQ66TqNVQnaR")
PUMPSWAP_AMM_PROGRAM = _pk("pAMMBay6oceH9fJKBRHGP5D4bD4sWpmSwMn52FMfXEA")
PUMPSWAP_BUY_DISCRIMINATOR = bytes.fromhex("66063d1201daebea")
PUMPSWAP_SELL_DISCRIMINATOR = bytes.fromhex("33e685a4017f83ad")

# Bonk
BONK = _pk("LanMV9sAd7wArD4vJFi2qDdfnVhFxYSUg6eADduJ3uj")
BONK_POOL_SEED = b"pool"
BONK_POOL_VAULT_SEED = b"pool_vault"
BONK_AUTHORITY = _pk("WLHv2UAZm6z4KyaaELi5pjdbJh6RESMva1Rnn8pJVVh")
BONK_GLOBAL_CONFIG = _pk("6s1xP3hpbAfFoNtUNF8mfHsjr2Bd97JxFJRWLbL6aHuX")
BONK_PLATFORM_CONFIG = _pk("FfYek5vEz23cMkWsdJwG2oa6EphsvXSHrGpdALN4g6W1")
BONK_EVENT_AUTHORITY = _pk("2DPAtwB8L12vrMRExbLuyGnC7n2J5LNoZQSejeQGpwkr")
BONK_TOKEN_PROGRAM = TOKEN_PROGRAM
BONK_WSOL_TOKEN_ACCOUNT = WSOL_TOKEN_ACCOUNT
BONK_PLATFORM_FEE_RATE = 100  # 1%
BONK_PROTOCOL_FEE_RATE = 25  # 0.25%
BONK_SHARE_FEE_RATE = 0
BONK_BUY_EXACT_IN_DISCRIMINATOR = bytes.fromhex("faea0d7bd59c13ec")
BONK_SELL_EXACT_IN_DISCRIMINATOR = bytes.fromhex("9527de9bd37c981a")

# Raydium CPMM
RAYDIUM_CPMM = _pk("CPMMoo8L3F4NbTegBCKVNunggL7H1ZpdTHKxQB5qKP1C")
RAYDIUM_CPMM_POOL_SEED = b"pool"
RAYDIUM_CPMM_POOL_VAULT_SEED = b"pool_vault"
RAYDIUM_CPMM_OBSERVATION_STATE_SEED = b"observation"
RAYDIUM_CPMM_AUTHORITY = _pk("GpMZbSM2GgvTKHJirzeGfMFoaZ8UR2X7F4v8vHTvxFbL")
RAYDIUM_CPMM_AMM_CONFIG = _pk("D4FPEruKEHrG5TenZ2mpDGEfu1iUvTiqBxvpU8HLBvC2")
RAYDIUM_CPMM_SWAP_BASE_IN_DISCRIMINATOR = bytes.fromhex("8fbe5adac41e33de")
RAYDIUM_CPMM_SWAP_BASE_OUT_DISCRIMINATOR = bytes.fromhex("37d96256a34ab4ad")

# Relay tip accounts
JITO_TIP_ACCOUNTS = _keys(
    """
    96gYZGLnJYVFmbjzopPSU6QiEV5fGqZNyN9nmNhvrZU5 HFqU5x63VTqvQss8hp11i4wVV8bD44PvwucfZ2bU7gRe
    Cw8CFyM9FkoMi7K7Crf6HNQqf4uEMzpKw6QNghXLvLkY ADaUMid9yfUytqMBgopwjb2DTLSokTSzL1zt6iGPaS49
    DfXygSm4jCyNCybVYYK6DwvWqjKee8pbDmJGcLWNDXjh ADuUkR4vqLUMWXxW9gh6D6L8pMSawimctcNZ5pGwDcEt
    DttWaMuVvTiduZRnguLF7jNxTgiMBZ1hyAumKUiL2KRL 3AVi9Tg9Uo68tJfuvoKvqKNWKkC5wPdSSdeBnizKZ6jT
    """
)

NEXTBLOCK_TIP_ACCOUNTS = _keys(
    """
    NextbLoCkVtMGcV47JzewQdvBpLqT9TxQFozQkN98pE NexTbLoCkWykbLuB1NkjXgFWkX9oAtcoagQegygXXA2
    NeXTBLoCKs9F1y5PJS9CKrFNNLU1keHW71rfh7KgA1X NexTBLockJYZ7QD7p2byrUa6df8ndV2WSd8GkbWqfbb
    neXtBLock1LeC67jYd1QdAa32kbVeubsfPNTJC1V5At nEXTBLockYgngeRmRrjDV31mGSekVPqZoMGhQEZtPVG
    NEXTbLoCkB51HpLBLojQfpyVAMorm3zzKg7w9NFdqid nextBLoCkPMgmG8ZgJtABeScP35qLa2AMCNKntAP7Xc
    """
)

ZEROSLOT_TIP_ACCOUNTS = _keys(
    """
    Eb2KpSC8uMt9GmzyAEm5Eb1AAAgTjRaXWFjKyFXHZxF3 FCjUJZ1qozm1e8romw216qyfQMaaWKxWsuySnumVCCNe
    ENxTEjSQ1YabmUpXAdCgevnHQ9MHdLv8tzFiuiYJqa13 6rYLG55Q9RpsPGvqdPNJs4z5WTxJVatMB8zV3WJhs5EK
    Cix2bHfqPcKcM233mzxbLk14kSggUUiz2A87fJtGivXr
    """
)

NOZOMI_TIP_ACCOUNTS = _keys(
    """
    TEMPaMeCRFAS9EKF53Jd6KpHxgL47uWLcpFArU1Fanq noz3jAjPiHuBPqiSPkkugaJDkJscPuRhYnSpbi8UvC4
    noz3str9KXfpKknefHji8L1mPgimezaiUyCHYMDv1GE noz6uoYCDijhu1V7cutCpwxNiSovEwLdRHPwmgCGDNo
    noz9EPNcT7WH6Sou3sr3GGjHQYVkN3DNirpbvDkv9YJ nozc5yT15LazbLTFVZzoNZCwjh3yUtW86LoUyqsBu4L
    nozFrhfnNGoyqwVuwPAW4aaGqempx4PU6g6D9CJMv7Z nozievPk7HyK1Rqy1MPJwVQ7qQg2QoJGyP71oeDwbsu
    noznbgwYnBLDHu8wcQVCEw6kDrXkPdKkydGJGNXGvL7 nozNVWs5N8mgzuD3qigrCG2UoKxZttxzZ85pvAQVrbP
    nozpEGbwx4BcGp6pvEdAh1JoC2CQGZdU6HbNP1v2p6P nozrhjhkCr3zXT3BiT4WCodYCUFeQvcdUkM7MqhKqge
    nozrwQtWhEdrA6W8dkbt9gnUaMs52PdAv5byipnadq3 nozUacTVWub3cL4mJmGCYjKZTnE9RbdY5AP46iQgbPJ
    nozWCyTPppJjRuw2fpzDhhWbW355fzosWSzrrMYB1Qk nozWNju6dY353eMkMqURqwQEoM3SFgEKC6psLCSfUne
    nozxNBgWohjR75vdspfxR5H9ceC7XXH99xpxhVGt3Bb
    """
)

BLOX_TIP_ACCOUNTS = _keys(
    """
    HWEoBxYs7ssKuudEjzjmpfJVX7Dvi7wescFsVx2L5yoY 95cfoy472fcQHaw4tPGBTKpn6ZQnfEPfBgDQx6gcRmRg
    3UQUKjhMKaY2S6bjcQD6yHB7utcZt5bfarRCmctpRtUd FogxVNs6Mm2w9rnGL1vkARSwJxvLE8mujTv3LK8RnUhF
    """
)


class SwqosRegion(Enum):
    """Relay regions; the value is the position in each endpoint table."""

    NEW_YORK = 0
    FRANKFURT = 1
    AMSTERDAM = 2
    SLC = 3
    TOKYO = 4
    LONDON = 5
    LOS_ANGELES = 6
    DEFAULT = 7


class SwqosProvider(Enum):
    """Transaction relay services with regional endpoints."""

    JITO = "jito"
    NEXTBLOCK = "nextblock"
    ZERO_SLOT = "zeroslot"
    TEMPORAL = "temporal"
    BLOXROUTE = "bloxroute"


def _endpoints(template: str, hosts: str) -> tuple[str, ...]:
    """Fill a URL template with one host label per region, in region order."""
    labels = hosts.split()
    if len(labels) != len(SwqosRegion):
        raise ValueError("one host label is needed per region")
    return tuple(template.format(label) for label in labels)


SWQOS_ENDPOINTS_JITO = _endpoints(
    "https://{}.block-engine.jito.wtf",
    "ny.mainnet frankfurt.mainnet ams slc.mainnet tokyo.mainnet london.mainnet ny.mainnet mainnet",
)
SWQOS_ENDPOINTS_NEXTBLOCK = _endpoints(
    "http://{}.nextblock.io", "ny fra slc slc tokyo london ny fra"
)
SWQOS_ENDPOINTS_ZERO_SLOT = _endpoints(
    "http://{}.0slot.trade", "ny de ams ams jp jp la de"
)
SWQOS_ENDPOINTS_TEMPORAL = _endpoints(
    "http://{}.nozomi.temporal.xyz", "ewr1 fra2 ams1 ams1 tyo1 sgp1 pit1 fra2"
)
SWQOS_ENDPOINTS_BLOX = _endpoints(
    "https://{}.solana.dex.blxrbdn.com",
    "ny germany amsterdam amsterdam tokyo uk la germany",
)

_ENDPOINTS = {
    SwqosProvider.JITO: SWQOS_ENDPOINTS_JITO,
    SwqosProvider.NEXTBLOCK: SWQOS_ENDPOINTS_NEXTBLOCK,
    SwqosProvider.ZERO_SLOT: SWQOS_ENDPOINTS_ZERO_SLOT,
    SwqosProvider.TEMPORAL: SWQOS_ENDPOINTS_TEMPORAL,
    SwqosProvider.BLOXROUTE: SWQOS_ENDPOINTS_BLOX,
}

_TIP_ACCOUNTS = {
    SwqosProvider.JITO: JITO_TIP_ACCOUNTS,
    SwqosProvider.NEXTBLOCK: NEXTBLOCK_TIP_ACCOUNTS,
    SwqosProvider.ZERO_SLOT: ZEROSLOT_TIP_ACCOUNTS,
    SwqosProvider.TEMPORAL: NOZOMI_TIP_ACCOUNTS,
    SwqosProvider.BLOXROUTE: BLOX_TIP_ACCOUNTS,
}


def swqos_endpoint(provider: SwqosProvider, region: SwqosRegion) -> str:
    """Return the relay URL of a provider in a region."""
    return _ENDPOINTS[SwqosProvider(provider)][SwqosRegion(region).value]


def tip_accounts(provider: SwqosProvider) -> tuple[Pubkey, ...]:
    """Return the accounts a provider accepts tips on."""
    return _TIP_ACCOUNTS[SwqosProvider(provider)]