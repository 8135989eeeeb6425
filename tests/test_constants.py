import pytest

from soltrade import constants
from soltrade.constants import (
    JITO_TIP_ACCOUNTS,
    NOZOMI_TIP_ACCOUNTS,
    SwqosProvider,
    SwqosRegion,
    swqos_endpoint,
    tip_accounts,
)
from soltrade.types import Pubkey


def test_jito_frankfurt_endpoint():
    assert (
        swqos_endpoint(SwqosProvider.JITO, SwqosRegion.FRANKFURT)
        == "https://frankfurt.mainnet.block-engine.jito.wtf"
    )


def test_jito_amsterdam_endpoint():
    assert (
        swqos_endpoint(SwqosProvider.JITO, SwqosRegion.AMSTERDAM)
        == "https://ams.block-engine.jito.wtf"
    )


def test_default_region_endpoints():
    assert (
        swqos_endpoint(SwqosProvider.JITO, SwqosRegion.DEFAULT)
        == "https://mainnet.block-engine.jito.wtf"
    )
    assert (
        swqos_endpoint(SwqosProvider.TEMPORAL, SwqosRegion.DEFAULT)
        == "http://fra2.nozomi.temporal.xyz"
    )


def test_bloxroute_london_endpoint():
    assert (
        swqos_endpoint(SwqosProvider.BLOXROUTE, SwqosRegion.LONDON)
        == "https://uk.solana.dex.blxrbdn.com"
    )


def test_zero_slot_tokyo_endpoint():
    assert swqos_endpoint(SwqosProvider.ZERO_SLOT, SwqosRegion.TOKYO) == "http://jp.0slot.trade"


def test_temporal_london_endpoint():
    assert (
        swqos_endpoint(SwqosProvider.TEMPORAL, SwqosRegion.LONDON)
        == "http://sgp1.nozomi.temporal.xyz"
    )


def test_nextblock_endpoints_in_region_order():
    assert [swqos_endpoint(SwqosProvider.NEXTBLOCK, region) for region in SwqosRegion] == [
        "http://ny.nextblock.io",
        "http://fra.nextblock.io",
        "http://slc.nextblock.io",
        "http://slc.nextblock.io",
        "http://tokyo.nextblock.io",
        "http://london.nextblock.io",
        "http://ny.nextblock.io",
        "http://fra.nextblock.io",
    ]


@pytest.mark.parametrize("provider", list(SwqosProvider))
@pytest.mark.parametrize("region", list(SwqosRegion))
def test_every_endpoint_is_a_url(provider, region):
    assert swqos_endpoint(provider, region).startswith(("http://", "https://"))


def test_endpoint_accepts_raw_values():
    assert swqos_endpoint("nextblock", 1) == swqos_endpoint(
        SwqosProvider.NEXTBLOCK, SwqosRegion.FRANKFURT
    )


def test_unknown_provider_rejected():
    with pytest.raises(ValueError):
        swqos_endpoint("nobody", SwqosRegion.TOKYO)


def test_unknown_region_rejected():
    with pytest.raises(ValueError):
        swqos_endpoint(SwqosProvider.JITO, 8)


def test_tip_accounts_per_provider():
    assert tip_accounts(SwqosProvider.JITO) == JITO_TIP_ACCOUNTS
    assert tip_accounts(SwqosProvider.TEMPORAL) == NOZOMI_TIP_ACCOUNTS
    assert tip_accounts(SwqosProvider.JITO)[0].to_base58() == (
        "96gYZGLnJYVFmbjzopPSU6QiEV5fGqZNyN9nmNhvrZU5"
    )


@pytest.mark.parametrize(
    ("provider", "count"),
    [
        (SwqosProvider.JITO, 8),
        (SwqosProvider.NEXTBLOCK, 8),
        (SwqosProvider.ZERO_SLOT, 5),
        (SwqosProvider.TEMPORAL, 17),
        (SwqosProvider.BLOXROUTE, 4),
    ],
)
def test_tip_account_counts(provider, count):
    assert len(tip_accounts(provider)) == count


def test_tip_accounts_keep_order():
    assert tip_accounts(SwqosProvider.BLOXROUTE)[-1].to_base58() == (
        "FogxVNs6Mm2w9rnGL1vkARSwJxvLE8mujTv3LK8RnUhF"
    )
    assert tip_accounts("zeroslot")[2].to_base58() == (
        "ENxTEjSQ1YabmUpXAdCgevnHQ9MHdLv8tzFiuiYJqa13"
    )


@pytest.mark.parametrize("provider", list(SwqosProvider))
def test_tip_accounts_unique_and_nonempty(provider):
    accounts = tip_accounts(provider)
    assert accounts
    assert len(set(accounts)) == len(accounts)
    for account in accounts:
        assert Pubkey.from_base58(account.to_base58()) == account


def test_documented_addresses():
    assert constants.PUMPFUN.to_base58() == "6EF8rrecthR5Dkzon8Nwu78hRvfCKubJ14M5uBEwF6P"
    assert constants.SYSTEM_PROGRAM == Pubkey()
    assert constants.SYSTEM_PROGRAM.to_base58() == "11111111111111111111111111111111"
    assert constants.BONK_WSOL_TOKEN_ACCOUNT == constants.WSOL_TOKEN_ACCOUNT
    assert constants.PUMPSWAP_PROTOCOL_FEE_RECIPIENT == constants.PUMPFUN_FEE_RECIPIENT


def test_pumpfun_fee_recipients_distinct():
    recipients = constants.PUMPFUN_AMM_FEE_RECIPIENTS
    assert len(set(recipients)) == len(recipients)
    assert recipients[-1].to_base58() == "G5UZAVbAf46s7cKWoyKu8kYTip9DGTpbLZ2qa9Aq69dP"