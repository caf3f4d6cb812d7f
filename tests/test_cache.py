from src.utils.cache import ProjectionCache


def test_get_or_compute_calls_once():
    cache = ProjectionCache(max_items=4)
    calls = {"n": 0}

    def compute():
        calls["n"] += 1
        return ("result",)

    assert cache.get_or_compute((1.0, 2.0, 3.0), compute) == ("result",)
    assert cache.get_or_compute((1.0, 2.0, 3.0), compute) == ("result",)
    assert calls["n"] == 1
    assert cache.stats() == {"hits": 1, "misses": 1, "size": 1}


def test_eviction_drops_oldest():
    cache = ProjectionCache(max_items=10)
    for i in range(10):
        cache.set(i, i)
    cache.set("new", 1)
    assert len(cache) == 10
    assert cache.get(0) is None
    assert cache.get(1) == 1
    assert cache.get("new") == 1


def test_overwrite_does_not_evict():
    cache = ProjectionCache(max_items=2)
    cache.set("a", 1)
    cache.set("b", 2)
    cache.set("a", 3)
    assert len(cache) == 2
    assert cache.get("a") == 3
    assert cache.get("b") == 2


def test_delete_and_clear():
    cache = ProjectionCache(max_items=4)
    cache.set("a", 1)
    cache.set("b", 2)
    cache.delete("a")
    assert cache.get("a") is None
    cache.clear()
    assert cache.stats() == {"hits": 0, "misses": 0, "size": 0}
