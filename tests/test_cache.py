from scm_dashboard.core.cache import QueryCache, key_matches, make_key


class TestQueryKeys:

    def test_make_key(self):
        assert make_key("inventory") == ("inventory",)
        assert make_key("inventory", "inv1") == ("inventory", "inv1")

    def test_prefix_matching(self):
        assert key_matches(("inventory",), ("inventory", "inv1"))
        assert key_matches(("inventory", "inv1"), ("inventory", "inv1"))
        assert not key_matches(("inventory", "inv1"), ("inventory",))
        assert not key_matches(("orders",), ("inventory", "inv1"))


class TestQueryCache:

    def test_missing_key_is_stale(self):
        assert QueryCache().is_stale(("inventory",))

    def test_set_and_get(self):
        cache = QueryCache()
        cache.set(("inventory",), [1, 2])
        assert cache.get(("inventory",)).value == [1, 2]
        assert not cache.is_stale(("inventory",))

    def test_invalidate_keeps_value_and_marks_stale(self):
        cache = QueryCache()
        cache.set(("inventory",), ["a"])
        cache.set(("inventory", "inv1"), "a")
        cache.set(("orders",), ["o"])

        affected = cache.invalidate(("inventory",))

        assert sorted(affected) == [("inventory",), ("inventory", "inv1")]
        assert cache.get(("inventory",)).value == ["a"]
        assert cache.is_stale(("inventory", "inv1"))
        assert not cache.is_stale(("orders",))

    def test_listeners(self):
        cache = QueryCache()
        seen = []
        unsubscribe = cache.subscribe(("inventory", "inv1"), seen.append)
        cache.subscribe(("orders",), seen.append)

        cache.invalidate(("inventory",))
        assert seen == [("inventory", "inv1")]

        unsubscribe()
        cache.invalidate(("inventory",))
        assert seen == [("inventory", "inv1")]

    def test_generation_tracks_covering_invalidations(self):
        cache = QueryCache()
        assert cache.generation(("inventory", "inv1")) == 0
        cache.invalidate(("inventory",))
        first = cache.generation(("inventory", "inv1"))
        cache.invalidate(("orders",))
        assert cache.generation(("inventory", "inv1")) == first
        cache.invalidate(("inventory", "inv1"))
        assert cache.generation(("inventory", "inv1")) > first
        assert cache.generation(("inventory",)) == first
