"""
Page-level view models: what each dashboard page holds and does, minus the
rendering. Errors from section boundaries (fetch, mutation, not found) are
turned into state here and never escape to the caller.
"""
import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel

from scm_dashboard.core.cache import make_key
from scm_dashboard.core.notifications import NotificationCenter
from scm_dashboard.core.routing import Router, list_path, detail_path
from scm_dashboard.services.collection_query import CollectionQuery, QueryClient, QueryStatus
from scm_dashboard.services.data_source import DataSource, default_data_source
from scm_dashboard.services.filter_store import FilterStore
from scm_dashboard.services.forms import FormController
from scm_dashboard.services.mutations import MutationWorkflow

logger = logging.getLogger(__name__)

RecordType = TypeVar("RecordType", bound=BaseModel)
CriteriaType = TypeVar("CriteriaType", bound=BaseModel)


@dataclass
class DashboardContext:
    """Everything a view needs, passed in explicitly"""
    query_client: QueryClient
    notifier: NotificationCenter = field(default_factory=NotificationCenter)
    router: Router = field(default_factory=Router)

    @property
    def source(self) -> DataSource:
        return self.query_client.source

    @classmethod
    def create(cls, source: Optional[DataSource] = None) -> "DashboardContext":
        notifier = NotificationCenter()
        return cls(
            query_client=QueryClient(source or default_data_source(), notifier=notifier),
            notifier=notifier,
            router=Router(),
        )


class ViewState(str, enum.Enum):
    LOADING = "loading"
    READY = "ready"
    NOT_FOUND = "not_found"
    ERROR = "error"


# ==========================================
# LIST PAGES
# ==========================================

class ListView(Generic[RecordType, CriteriaType]):
    module: str = ""
    criteria_model: Type[CriteriaType]

    def __init__(self, ctx: DashboardContext):
        self.ctx = ctx
        self.filters: FilterStore[CriteriaType] = FilterStore(self.criteria_model)
        self.query: Optional[CollectionQuery] = None

    def apply_filters(self, records: Sequence[RecordType], criteria: CriteriaType) -> List[RecordType]:
        raise NotImplementedError

    async def mount(self) -> List[RecordType]:
        self.filters.reset()
        self.query = self.ctx.query_client.collection(self.module)
        await self.query.fetch()
        return self.visible

    def unmount(self):
        if self.query is not None:
            self.query.dispose()

    async def refresh(self) -> List[RecordType]:
        if self.query is not None:
            await self.query.refetch()
        return self.visible

    @property
    def status(self) -> QueryStatus:
        return self.query.status if self.query is not None else QueryStatus.LOADING

    @property
    def records(self) -> List[RecordType]:
        if self.query is None or self.query.data is None:
            return []
        return list(self.query.data)

    @property
    def visible(self) -> List[RecordType]:
        return self.apply_filters(self.records, self.filters.filters)

    @property
    def is_empty(self) -> bool:
        return self.status is not QueryStatus.LOADING and not self.visible

    def set_filters(self, **partial: str) -> List[RecordType]:
        self.filters.set_filters(**partial)
        return self.visible

    def detail_link(self, record: RecordType) -> str:
        return detail_path(self.module, record.id)


# ==========================================
# DETAIL PAGES
# ==========================================

class DetailView(Generic[RecordType]):
    module: str = ""
    update_schema: Type[BaseModel]
    success_message = "Updated successfully"
    error_message = "Failed to update. Please try again."

    def __init__(self, ctx: DashboardContext, identity: str):
        self.ctx = ctx
        self.identity = identity
        self.query: Optional[CollectionQuery] = None
        self.form: Optional[FormController] = None

    def form_values(self, record: RecordType) -> Dict[str, Any]:
        raise NotImplementedError

    async def mount(self) -> ViewState:
        self.query = self.ctx.query_client.record(self.module, self.identity)
        await self.query.fetch()
        if self.record is not None:
            self.form = self.build_form(self.record)
        return self.state

    def unmount(self):
        if self.query is not None:
            self.query.dispose()
        if self.form is not None:
            self.form.unmount()

    def build_form(self, record: RecordType) -> FormController:
        workflow = MutationWorkflow(
            lambda payload: self.ctx.source.update(self.module, self.identity, payload),
            query_client=self.ctx.query_client,
            notifier=self.ctx.notifier,
            invalidates=[make_key(self.module), make_key(self.module, self.identity)],
            success_message=self.success_message,
            error_message=self.error_message,
        )
        return FormController(
            self.update_schema,
            workflow,
            initial=self.form_values(record),
            on_success=self._reseed,
        )

    def _reseed(self, record: RecordType):
        if self.form is not None and record is not None:
            self.form.initial = self.form_values(record)
            self.form.values = dict(self.form.initial)

    @property
    def record(self) -> Optional[RecordType]:
        return self.query.data if self.query is not None else None

    @property
    def state(self) -> ViewState:
        if self.query is None or (self.query.is_loading and self.query.error is None):
            return ViewState.LOADING
        if self.query.is_not_found and self.record is None:
            return ViewState.NOT_FOUND
        if self.record is None:
            return ViewState.ERROR
        return ViewState.READY

    @property
    def back_link(self) -> str:
        return list_path(self.module)

    def start_editing(self) -> bool:
        if self.state is not ViewState.READY or self.form is None:
            logger.warning(f"Cannot edit {self.module} {self.identity} while {self.state.value}")
            return False
        self.form.start_editing(self.form_values(self.record))
        return True

    async def save(self) -> bool:
        if self.form is None:
            return False
        return await self.form.submit()


# ==========================================
# CREATE PAGES
# ==========================================

class CreateView:
    module: str = ""
    create_schema: Type[BaseModel]
    success_message = "Created successfully"
    error_message = "Failed to create. Please try again."
    option_modules: Sequence[str] = ()

    def __init__(self, ctx: DashboardContext):
        self.ctx = ctx
        self.form = FormController(
            self.create_schema,
            MutationWorkflow(
                lambda payload: self.ctx.source.create(self.module, payload),
                query_client=ctx.query_client,
                notifier=ctx.notifier,
                invalidates=[make_key(self.module)],
                success_message=self.success_message,
                error_message=self.error_message,
                router=ctx.router,
                redirect_to=list_path(self.module),
            ),
            initial=self.defaults(),
            create=True,
        )
        self.option_queries: Dict[str, CollectionQuery] = {}

    def defaults(self) -> Dict[str, Any]:
        return {}

    async def mount(self):
        """Load the select options of the form"""
        for module in self.option_modules:
            query = self.ctx.query_client.collection(module)
            self.option_queries[module] = query
            await query.fetch()

    def unmount(self):
        self.form.unmount()
        for query in self.option_queries.values():
            query.dispose()

    def options(self, module: str) -> List[BaseModel]:
        query = self.option_queries.get(module)
        if query is None or query.data is None:
            return []
        return list(query.data)

    async def submit(self) -> bool:
        return await self.form.submit()

    def cancel(self):
        self.ctx.router.push(list_path(self.module))


# ==========================================
# LAST-RESORT FALLBACK
# ==========================================

@dataclass
class FallbackView:
    title: str
    message: str


class ErrorBoundary:
    """Turns unexpected faults of a view action into a retryable fallback"""

    default_message = "An error occurred while loading the dashboard."

    def __init__(self):
        self.error: Optional[Exception] = None
        self._last_action: Optional[Callable[[], Awaitable[Any]]] = None

    async def run(self, action: Callable[[], Awaitable[Any]]) -> Any:
        self._last_action = action
        try:
            result = await action()
        except Exception as e:
            logger.exception(f"Unexpected view fault: {e}")
            self.error = e
            return None
        self.error = None
        return result

    @property
    def fallback(self) -> Optional[FallbackView]:
        if self.error is None:
            return None
        return FallbackView(title="Something went wrong!", message=str(self.error) or self.default_message)

    async def retry(self) -> Any:
        if self._last_action is None:
            return None
        return await self.run(self._last_action)
