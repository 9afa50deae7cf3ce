from concurrent.futures import ThreadPoolExecutor

from concurrencylab.safemap import ConcurrentSafeMap


def _letter(i):
    return chr(ord("A") + i % 26)


def test_concurrent_access_keeps_map_usable():
    m = ConcurrentSafeMap()
    n = 1000

    with ThreadPoolExecutor(max_workers=32) as pool:
        list(pool.map(lambda i: m.set(_letter(i), i), range(n)))
    with ThreadPoolExecutor(max_workers=32) as pool:
        reads = list(pool.map(lambda i: m.get(_letter(i)), range(n)))
    with ThreadPoolExecutor(max_workers=32) as pool:
        checks = list(pool.map(lambda i: m.exists(_letter(i)), range(n)))

    assert all(value is not None for value in reads)
    assert all(checks)

    m.set("Z", 999)
    assert m.get("Z") == 999
    assert m.exists("Z")


def test_concurrent_writes_store_consistent_values():
    m = ConcurrentSafeMap()
    with ThreadPoolExecutor(max_workers=32) as pool:
        list(pool.map(lambda i: m.set(_letter(i), i), range(1000)))
    assert len(m) == 26
    for key in m.keys():
        assert _letter(m.get(key)) == key


def test_get_missing_returns_default():
    m = ConcurrentSafeMap()
    assert m.get("missing") is None
    assert m.get("missing", 7) == 7
    assert not m.exists("missing")


def test_delete_removes_key_and_ignores_missing():
    m = ConcurrentSafeMap()
    m.set("a", 1)
    m.set("b", 2)
    m.delete("a")
    m.delete("never-there")
    assert sorted(m.keys()) == ["b"]
    assert "a" not in m
    assert "b" in m
    assert len(m) == 1


def test_set_overwrites():
    m = ConcurrentSafeMap()
    m.set("k", 1)
    m.set("k", 2)
    assert m.get("k") == 2
    assert len(m) == 1


def test_keys_is_a_snapshot():
    m = ConcurrentSafeMap()
    m.set("x", 1)
    keys = m.keys()
    m.set("y", 2)
    assert keys == ["x"]
    assert sorted(m.keys()) == ["x", "y"]