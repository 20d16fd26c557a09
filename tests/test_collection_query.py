import asyncio

from scm_dashboard.core.cache import QueryCache
from scm_dashboard.core.exceptions import ApiError, NotFoundError
from scm_dashboard.core.notifications import NotificationCenter
from scm_dashboard.services.collection_query import CollectionQuery, QueryClient, QueryStatus


class CountingFetcher:
    def __init__(self, *results):
        self.results = list(results)
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        await asyncio.sleep(0)
        result = self.results[min(self.calls, len(self.results)) - 1]
        if isinstance(result, Exception):
            raise result
        return result


def make_query(fetcher, cache=None, notifier=None):
    return CollectionQuery(
        ("inventory",),
        fetcher,
        cache if cache is not None else QueryCache(),
        notifier if notifier is not None else NotificationCenter(),
        error_message="Failed to load inventory data. Please try again.",
    )


class TestCollectionQuery:

    def test_loading_then_success(self):
        query = make_query(CountingFetcher(["a", "b"]))
        assert query.status is QueryStatus.LOADING
        assert query.data is None

        assert asyncio.run(query.fetch()) == ["a", "b"]
        assert query.status is QueryStatus.SUCCESS
        assert query.data == ["a", "b"]

    def test_fresh_cache_is_not_refetched(self):
        fetcher = CountingFetcher(["a"])
        query = make_query(fetcher)

        async def scenario():
            await query.fetch()
            await query.fetch()

        asyncio.run(scenario())
        assert fetcher.calls == 1

    def test_concurrent_fetches_share_one_request(self):
        fetcher = CountingFetcher(["a"])
        query = make_query(fetcher)

        async def scenario():
            return await asyncio.gather(query.fetch(), query.fetch())

        assert asyncio.run(scenario()) == [["a"], ["a"]]
        assert fetcher.calls == 1

    def test_failure_keeps_last_data_and_notifies_once(self):
        notifier = NotificationCenter()
        query = make_query(CountingFetcher(["a"], ApiError(500, "boom")), notifier=notifier)

        async def scenario():
            await query.fetch()
            return await query.refetch()

        assert asyncio.run(scenario()) == ["a"]
        assert query.status is QueryStatus.ERROR
        assert query.data == ["a"]
        assert [n.description for n in notifier.errors()] == ["Failed to load inventory data. Please try again."]

    def test_not_found_is_silent(self):
        notifier = NotificationCenter()
        query = make_query(CountingFetcher(NotFoundError("Order not found")), notifier=notifier)

        asyncio.run(query.fetch())
        assert query.is_not_found
        assert notifier.errors() == []

    def test_invalidation_refetches(self):
        cache = QueryCache()
        fetcher = CountingFetcher(["a"], ["a", "b"])
        query = make_query(fetcher, cache=cache)

        async def scenario():
            await query.fetch()
            cache.invalidate(("inventory",))
            assert query.data == ["a"]
            await query.wait_idle()

        asyncio.run(scenario())
        assert fetcher.calls == 2
        assert query.data == ["a", "b"]
        assert not query.is_stale

    def test_disposed_query_ignores_invalidation(self):
        cache = QueryCache()
        fetcher = CountingFetcher(["a"])
        query = make_query(fetcher, cache=cache)

        async def scenario():
            await query.fetch()
            query.dispose()
            cache.invalidate(("inventory",))
            await query.wait_idle()

        asyncio.run(scenario())
        assert fetcher.calls == 1
        assert query.is_stale

    def test_invalidation_during_fetch_is_not_lost(self):
        cache = QueryCache()
        store = ["old"]
        calls = []

        async def scenario():
            started = asyncio.Event()
            release = asyncio.Event()

            async def fetcher():
                snapshot = list(store)
                calls.append(snapshot)
                started.set()
                if len(calls) == 1:
                    await release.wait()
                return snapshot

            query = make_query(fetcher, cache=cache)
            pending = asyncio.ensure_future(query.fetch())
            await started.wait()
            store.append("new")
            cache.invalidate(("inventory",))
            release.set()
            result = await pending
            await query.wait_idle()
            return query, result

        query, result = asyncio.run(scenario())
        assert result == ["old", "new"]
        assert query.data == ["old", "new"]
        assert not query.is_stale
        assert calls == [["old"], ["old", "new"]]

    def test_queries_on_one_key_share_a_refetch(self):
        cache = QueryCache()
        fetcher = CountingFetcher(["a"], ["a", "b"])
        first = make_query(fetcher, cache=cache)
        second = make_query(fetcher, cache=cache)

        async def scenario():
            await first.fetch()
            await second.fetch()
            cache.invalidate(("inventory",))
            await first.wait_idle()
            await second.wait_idle()

        asyncio.run(scenario())
        assert fetcher.calls == 2
        assert first.data == second.data == ["a", "b"]
        assert second.status is QueryStatus.SUCCESS

    def test_shared_failure_notifies_once(self):
        cache = QueryCache()
        notifier = NotificationCenter()
        fetcher = CountingFetcher(ApiError(500, "boom"))
        first = make_query(fetcher, cache=cache, notifier=notifier)
        second = make_query(fetcher, cache=cache, notifier=notifier)

        async def scenario():
            await asyncio.gather(first.fetch(), second.fetch())

        asyncio.run(scenario())
        assert fetcher.calls == 1
        assert first.status is second.status is QueryStatus.ERROR
        assert len(notifier.errors()) == 1


class TestQueryClient:

    def test_collection_and_record(self, source):
        client = QueryClient(source, notifier=NotificationCenter())

        async def scenario():
            items = await client.collection("inventory").fetch()
            item = await client.record("inventory", "inv1").fetch()
            return items, item

        items, item = asyncio.run(scenario())
        assert len(items) == 5
        assert item.id == "inv1"
        assert client.cache.get(("inventory", "inv1")).value == item

    def test_queries_share_the_cache(self, source):
        client = QueryClient(source)

        async def scenario():
            await client.collection("suppliers").fetch()
            second = client.collection("suppliers")
            assert second.status is QueryStatus.SUCCESS
            return await second.fetch()

        assert len(asyncio.run(scenario())) == 3
