"""
Cached reads of a module's collection or of a single record.

A query is `loading` until data first arrives, `success` while it holds
data (possibly stale), and `error` after a failed fetch. A failed fetch
keeps the last good data and raises a single error notification.
"""
import asyncio
import enum
import logging
from typing import Any, Awaitable, Callable, Optional

from scm_dashboard.core.cache import QueryCache, QueryKey, make_key
from scm_dashboard.core.exceptions import NotFoundError
from scm_dashboard.core.notifications import NotificationCenter
from scm_dashboard.services.data_source import DataSource

logger = logging.getLogger(__name__)

Fetcher = Callable[[], Awaitable[Any]]

LOAD_LABELS = {
    "inventory": "inventory data",
    "orders": "orders",
    "suppliers": "suppliers",
    "products": "products",
    "warehouses": "warehouses",
}


class QueryStatus(str, enum.Enum):
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class CollectionQuery:
    def __init__(
        self,
        key: QueryKey,
        fetcher: Fetcher,
        cache: QueryCache,
        notifier: Optional[NotificationCenter] = None,
        error_message: str = "Failed to load data. Please try again.",
    ):
        self.key = key
        self.fetcher = fetcher
        self.cache = cache
        self.notifier = notifier
        self.error_message = error_message
        self.error: Optional[Exception] = None
        self.status = QueryStatus.SUCCESS if cache.get(key) is not None else QueryStatus.LOADING
        self.disposed = False
        self._inflight: Optional[asyncio.Task] = None
        self._unsubscribe = cache.subscribe(key, self._on_invalidate)

    @property
    def data(self) -> Any:
        entry = self.cache.get(self.key)
        return entry.value if entry is not None else None

    @property
    def is_stale(self) -> bool:
        return self.cache.is_stale(self.key)

    @property
    def is_loading(self) -> bool:
        return self.status is QueryStatus.LOADING

    @property
    def is_fetching(self) -> bool:
        return self.cache.inflight(self.key) is not None

    @property
    def is_not_found(self) -> bool:
        return isinstance(self.error, NotFoundError)

    async def fetch(self, force: bool = False) -> Any:
        """Return cached data when fresh, otherwise fetch it"""
        if not force and not self.cache.is_stale(self.key):
            self.status = QueryStatus.SUCCESS
            return self.data
        self._inflight = asyncio.ensure_future(self._settle(self._shared_load()))
        return await self._inflight

    async def refetch(self) -> Any:
        return await self.fetch(force=True)

    def _shared_load(self) -> asyncio.Future:
        # every query on this key joins the request already running
        future = self.cache.inflight(self.key)
        if future is None:
            future = self.cache.track(self.key, asyncio.ensure_future(self._load()))
        return future

    async def _load(self) -> Any:
        try:
            while True:
                generation = self.cache.generation(self.key)
                value = await self.fetcher()
                if self.cache.generation(self.key) == generation:
                    self.cache.set(self.key, value)
                    return value
                # invalidated while the request was running: the answer may predate the change
                logger.info(f"Query {self.key} invalidated mid-fetch, fetching again")
                self.cache.set(self.key, value, stale=True)
        except Exception as e:
            if isinstance(e, NotFoundError):
                logger.info(f"Query {self.key} found nothing: {e}")
            else:
                logger.error(f"❌ Query {self.key} failed: {e}")
                if self.notifier is not None and not self.disposed:
                    self.notifier.error(self.error_message)
            raise

    async def _settle(self, future: asyncio.Future) -> Any:
        try:
            value = await future
        except Exception as e:
            self.error = e
            self.status = QueryStatus.ERROR
            return self.data

        self.error = None
        self.status = QueryStatus.SUCCESS
        return value

    async def wait_idle(self):
        if self._inflight is not None:
            await self._inflight

    def _on_invalidate(self, key: QueryKey):
        if self.disposed:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # no loop: the stale entry is refetched on the next read
            return
        self._inflight = loop.create_task(self._settle(self._shared_load()))

    def dispose(self):
        self.disposed = True
        self._unsubscribe()


class QueryClient:
    """Builds queries against one data source and one shared cache"""

    def __init__(
        self,
        source: DataSource,
        cache: Optional[QueryCache] = None,
        notifier: Optional[NotificationCenter] = None,
    ):
        self.source = source
        self.cache = cache if cache is not None else QueryCache()
        self.notifier = notifier

    def collection(self, module: str) -> CollectionQuery:
        label = LOAD_LABELS.get(module, module)
        return CollectionQuery(
            make_key(module),
            lambda: self.source.list(module),
            self.cache,
            self.notifier,
            error_message=f"Failed to load {label}. Please try again.",
        )

    def record(self, module: str, identity: str) -> CollectionQuery:
        return CollectionQuery(
            make_key(module, identity),
            lambda: self.source.get(module, identity),
            self.cache,
            self.notifier,
            error_message=f"Failed to load {module} record {identity}. Please try again.",
        )

    def invalidate(self, key: QueryKey):
        return self.cache.invalidate(key)
