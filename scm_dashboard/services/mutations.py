"""
Create/update workflow shared by every form.

On success the affected cache keys are invalidated, a success notification
is shown and create flows navigate back to the list. On failure nothing is
invalidated and a single error notification is shown. There is no retry.
"""
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Sequence

from pydantic import BaseModel

from scm_dashboard.core.cache import QueryKey
from scm_dashboard.core.notifications import NotificationCenter
from scm_dashboard.core.routing import Router
from scm_dashboard.services.collection_query import QueryClient

logger = logging.getLogger(__name__)

MutationFn = Callable[[BaseModel], Awaitable[Any]]


@dataclass
class MutationResult:
    success: bool
    data: Any = None
    error: Optional[Exception] = None


class MutationWorkflow:
    def __init__(
        self,
        mutation_fn: MutationFn,
        *,
        query_client: QueryClient,
        notifier: NotificationCenter,
        invalidates: Sequence[QueryKey] = (),
        success_message: str = "Saved successfully",
        error_message: str = "Failed to save. Please try again.",
        router: Optional[Router] = None,
        redirect_to: Optional[str] = None,
    ):
        self.mutation_fn = mutation_fn
        self.query_client = query_client
        self.notifier = notifier
        self.invalidates = list(invalidates)
        self.success_message = success_message
        self.error_message = error_message
        self.router = router
        self.redirect_to = redirect_to

    async def execute(
        self,
        payload: BaseModel,
        *,
        is_active: Callable[[], bool] = lambda: True,
    ) -> MutationResult:
        """Run the mutation; `is_active` False means the owning view is gone."""
        try:
            data = await self.mutation_fn(payload)
        except Exception as e:
            logger.error(f"❌ Mutation failed: {e}")
            if is_active():
                self.notifier.error(self.error_message)
            return MutationResult(success=False, error=e)

        # the cache is shared, so this happens even for an unmounted view
        for key in self.invalidates:
            self.query_client.invalidate(key)

        if is_active():
            self.notifier.success(self.success_message)
            if self.router is not None and self.redirect_to:
                self.router.push(self.redirect_to)
        return MutationResult(success=True, data=data)
