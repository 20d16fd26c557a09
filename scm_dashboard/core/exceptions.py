"""Error types shared by the client, the data sources and the mock API."""
from typing import Optional


class SupplyChainError(Exception):
    """Base class for errors raised by the dashboard core."""


class ApiError(SupplyChainError):
    """A request came back with a non-2xx status."""

    def __init__(self, status_code: int, message: str, payload: Optional[dict] = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.payload = payload or {}

    def __repr__(self) -> str:
        return f"ApiError(status_code={self.status_code}, message={self.message!r})"


class NotFoundError(ApiError):
    """The requested record does not exist."""

    def __init__(self, message: str = "Not found", payload: Optional[dict] = None):
        super().__init__(404, message, payload)


class ConflictError(ApiError):
    def __init__(self, message: str, payload: Optional[dict] = None):
        super().__init__(409, message, payload)


class AuthenticationError(ApiError):
    """Token refresh failed after a 401."""

    def __init__(self, message: str = "Authentication required", payload: Optional[dict] = None):
        super().__init__(401, message, payload)
