from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials

from scm_dashboard.core.config import settings
from scm_dashboard.core.deps import credentials_exception, security
from scm_dashboard.core.security import create_access_token, decode_token
from scm_dashboard.schemas.auth import Token

router = APIRouter()

ANONYMOUS_SUBJECT = "dashboard"


@router.post("/refresh", response_model=Token)
async def refresh_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
):
    """
    Issue a fresh access token. An expired token is accepted as long as its
    signature checks out.
    """
    subject = ANONYMOUS_SUBJECT
    if credentials is not None:
        payload = decode_token(credentials.credentials, verify_exp=False)
        if payload is None:
            raise credentials_exception()
        subject = payload.get("sub") or ANONYMOUS_SUBJECT
    elif settings.REQUIRE_AUTH:
        raise credentials_exception()

    return {
        "access_token": create_access_token(subject),
        "token_type": "bearer",
        "expires_in": settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    }
