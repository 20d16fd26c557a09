from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from scm_dashboard.core.config import settings
from scm_dashboard.core.security import decode_token
from scm_dashboard.db.database import get_db  # noqa: F401

security = HTTPBearer(auto_error=False)


def credentials_exception() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_subject(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[str]:
    """Subject of the bearer token; only enforced when REQUIRE_AUTH is on"""
    if not settings.REQUIRE_AUTH:
        return None
    if credentials is None:
        raise credentials_exception()

    payload = decode_token(credentials.credentials)
    if payload is None or payload.get("sub") is None:
        raise credentials_exception()
    return payload["sub"]
