from soltrade.tip_cache import DEFAULT_TIP, TipCache


def test_get_instance_is_shared():
    previous = TipCache.get_instance().get_tip()
    TipCache.get_instance().update_tip(0.125)
    try:
        assert TipCache.get_instance().get_tip() == 0.125
    finally:
        TipCache.get_instance().update_tip(previous)
    assert TipCache.get_instance().get_tip() == previous


def test_default_tip():
    assert TipCache().get_tip() == 0.001


def test_update_tip():
    cache = TipCache()
    cache.update_tip(0.25)
    assert cache.get_tip() == 0.25


def test_init_with_value_and_default():
    cache = TipCache()
    cache.init(0.5)
    assert cache.get_tip() == 0.5
    cache.init()
    assert cache.get_tip() == DEFAULT_TIP


def test_instances_are_independent():
    first = TipCache()
    second = TipCache()
    first.update_tip(0.75)
    assert second.get_tip() == DEFAULT_TIP