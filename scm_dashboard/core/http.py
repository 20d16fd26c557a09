"""
HTTP transport used by the dashboard client.

`ApiClient.request(path, method, body)` returns the decoded JSON payload or
raises on a non-2xx answer. A 401 triggers exactly one token refresh and one
retry of the original request.
"""
import logging
from typing import Any, Optional

import httpx

from scm_dashboard.core.config import settings
from scm_dashboard.core.exceptions import ApiError, AuthenticationError, ConflictError, NotFoundError

logger = logging.getLogger(__name__)

REFRESH_PATH = "/auth/refresh"

ENDPOINTS = {
    "inventory": {
        "list": "/inventory",
        "item": "/inventory/{id}",
        "create": "/inventory",
        "update": "/inventory/{id}",
        "update_method": "PUT",
    },
    "orders": {
        "list": "/orders",
        "item": "/orders/{id}",
        "create": "/orders",
        "update": "/orders/{id}",
        "update_method": "PUT",
    },
    "suppliers": {
        "list": "/suppliers",
        "item": "/suppliers/{id}",
        "create": "/suppliers",
        "update": "/suppliers/{id}",
        "update_method": "PATCH",
    },
    "products": {"list": "/products"},
    "warehouses": {"list": "/warehouses"},
}


def error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(payload, dict):
        message = payload.get("message") or payload.get("detail")
        if isinstance(message, str):
            return message
        if message:
            return str(message)
    return response.reason_phrase or f"HTTP {response.status_code}"


def raise_for_status(response: httpx.Response):
    if response.is_success:
        return
    message = error_message(response)
    try:
        payload = response.json()
    except ValueError:
        payload = None
    payload = payload if isinstance(payload, dict) else None

    if response.status_code == 404:
        raise NotFoundError(message, payload)
    if response.status_code == 409:
        raise ConflictError(message, payload)
    raise ApiError(response.status_code, message, payload)


class ApiClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url or settings.API_BASE_URL
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Content-Type": "application/json"},
            timeout=httpx.Timeout(timeout if timeout is not None else settings.HTTP_TIMEOUT),
            transport=transport,
        )
        if token:
            self.set_token(token)

    def set_token(self, token: str):
        self._client.headers["Authorization"] = f"Bearer {token}"

    async def _send(self, path: str, method: str, body: Optional[Any]) -> httpx.Response:
        try:
            return await self._client.request(method, path, json=body)
        except httpx.TransportError as e:
            logger.error(f"❌ {method} {path} - network error: {e}")
            raise ApiError(0, f"Network error: {e}") from e

    async def refresh(self):
        logger.info("🔄 Access token rejected, refreshing...")
        try:
            response = await self._client.post(REFRESH_PATH)
        except httpx.TransportError as e:
            raise AuthenticationError(f"Token refresh failed: {e}") from e

        if not response.is_success:
            logger.warning(f"Token refresh failed with status {response.status_code}")
            raise AuthenticationError(error_message(response))

        try:
            payload = response.json()
        except ValueError as e:
            raise AuthenticationError("Token refresh returned an unreadable body") from e
        if not isinstance(payload, dict):
            raise AuthenticationError("Token refresh returned an unexpected body")

        token = payload.get("access_token")
        if token:
            self.set_token(token)

    async def request(self, path: str, method: str = "GET", body: Optional[Any] = None) -> Any:
        method = method.upper()
        response = await self._send(path, method, body)

        if response.status_code == 401:
            await self.refresh()
            response = await self._send(path, method, body)

        raise_for_status(response)
        logger.debug(f"✅ {method} {path} - {response.status_code}")

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    async def close(self):
        await self._client.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.close()


def endpoint(module: str, name: str, **params: str) -> str:
    template = ENDPOINTS[module][name]
    return template.format(**params)


def update_method(module: str) -> str:
    return ENDPOINTS[module].get("update_method", "PUT")

