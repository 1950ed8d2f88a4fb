"""View Cache — TTL expiry, size bound and path invalidation with an injected timer."""

from dashboard.infrastructure.view_cache import ViewCache


class _Clock:
    def __init__(self):
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def test_put_then_get_within_ttl():
    cache = ViewCache(ttl_seconds=30, timer=_Clock())
    cache.put("/dashboard/invoices", "|1", "page-one")
    assert cache.get("/dashboard/invoices", "|1") == "page-one"


def test_entry_expires_after_ttl():
    clock = _Clock()
    cache = ViewCache(ttl_seconds=30, timer=clock)
    cache.put("/dashboard/invoices", "|1", "page-one")
    clock.now += 30
    assert cache.get("/dashboard/invoices", "|1") is None


def test_invalidate_drops_every_key_for_path_only():
    cache = ViewCache(ttl_seconds=30, timer=_Clock())
    cache.put("/dashboard/invoices", "|1", "a")
    cache.put("/dashboard/invoices", "x|2", "b")
    cache.put("/dashboard/customers", "", "c")
    cache.invalidate("/dashboard/invoices")
    assert cache.get("/dashboard/invoices", "|1") is None
    assert cache.get("/dashboard/invoices", "x|2") is None
    assert cache.get("/dashboard/customers", "") == "c"


def test_invalidate_unknown_path_is_noop():
    ViewCache().invalidate("/nowhere")


def test_zero_ttl_disables_caching():
    cache = ViewCache(ttl_seconds=0)
    cache.put("/dashboard/invoices", "|1", "a")
    assert cache.get("/dashboard/invoices", "|1") is None


def test_expired_entries_are_evicted_on_next_write():
    clock = _Clock()
    cache = ViewCache(ttl_seconds=30, maxsize=20_000, timer=clock)
    for i in range(10_000):
        cache.put("/dashboard/invoices", f"query-{i}|1", i)
    clock.now += 31
    cache.put("/dashboard/invoices", "fresh|1", "new")
    assert len(cache._entries["/dashboard/invoices"]) == 1
    assert cache.get("/dashboard/invoices", "fresh|1") == "new"


def test_each_path_is_bounded_by_maxsize():
    cache = ViewCache(ttl_seconds=30, maxsize=3, timer=_Clock())
    for i in range(10):
        cache.put("/dashboard/invoices", f"query-{i}|1", i)
    assert len(cache._entries["/dashboard/invoices"]) == 3
    assert cache.get("/dashboard/invoices", "query-9|1") == 9
