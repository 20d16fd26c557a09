"""Create/update workflow: notifications, invalidation and navigation."""
import asyncio

from scm_dashboard.core.cache import make_key
from scm_dashboard.core.exceptions import ApiError
from scm_dashboard.core.notifications import NotificationCenter, NotificationSeverity
from scm_dashboard.core.routing import Router
from scm_dashboard.services.collection_query import QueryClient
from scm_dashboard.services.data_source import MockDataSource
from scm_dashboard.services.mutations import MutationWorkflow


async def succeed(payload):
    return {"saved": payload}


async def fail(payload):
    raise ApiError(500, "Internal server error")


def make_workflow(fn, client, notifier, router=None):
    return MutationWorkflow(
        fn,
        query_client=client,
        notifier=notifier,
        invalidates=[make_key("inventory")],
        success_message="Inventory item created successfully",
        error_message="Failed to create inventory item. Please try again.",
        router=router,
        redirect_to="/dashboard/inventory",
    )


class TestMutationWorkflow:

    def setup_method(self):
        self.notifier = NotificationCenter()
        self.router = Router()
        self.client = QueryClient(MockDataSource(), notifier=self.notifier)
        self.client.cache.set(make_key("inventory"), ["before"])

    def test_success(self):
        workflow = make_workflow(succeed, self.client, self.notifier, self.router)

        result = asyncio.run(workflow.execute("payload"))

        assert result.success
        assert result.data == {"saved": "payload"}
        assert self.client.cache.is_stale(make_key("inventory"))
        assert [n.description for n in self.notifier.notifications] == ["Inventory item created successfully"]
        assert self.notifier.notifications[0].severity is NotificationSeverity.SUCCESS
        assert self.router.current_path == "/dashboard/inventory"

    def test_failure_notifies_once_and_keeps_cache(self):
        workflow = make_workflow(fail, self.client, self.notifier, self.router)

        result = asyncio.run(workflow.execute("payload"))

        assert not result.success
        assert isinstance(result.error, ApiError)
        assert not self.client.cache.is_stale(make_key("inventory"))
        assert self.client.cache.get(make_key("inventory")).value == ["before"]
        assert [n.description for n in self.notifier.errors()] == ["Failed to create inventory item. Please try again."]
        assert self.router.current_path == "/dashboard"

    def test_inactive_view_gets_no_feedback(self):
        workflow = make_workflow(succeed, self.client, self.notifier, self.router)

        result = asyncio.run(workflow.execute("payload", is_active=lambda: False))

        assert result.success
        assert self.client.cache.is_stale(make_key("inventory"))
        assert self.notifier.notifications == []
        assert self.router.history == ["/dashboard"]

    def test_inactive_view_failure_is_silent(self):
        workflow = make_workflow(fail, self.client, self.notifier)
        result = asyncio.run(workflow.execute("payload", is_active=lambda: False))
        assert not result.success
        assert self.notifier.notifications == []
