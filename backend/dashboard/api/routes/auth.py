"""Auth Routes — login page descriptor, credential check, logout.

Invariants:
    - Successful login sets an HttpOnly signed session cookie and 303s to
      callbackUrl (local paths only) or the home path
    - Failed login is 401 AUTHENTICATION_FAILED; unknown email and wrong password
      look the same
    - Logout always clears the cookie and 303s to the login path

Design Decisions:
    - callbackUrl restricted to "/..." (not "//..."): no open redirect to other hosts
"""

import logging

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import RedirectResponse

from dashboard.config import Settings, get_settings
from dashboard.core.credentials import issue_session_token
from dashboard.core.errors import AuthenticationError
from dashboard.infrastructure.database import (
    DatabaseSessionManager, get_db_manager, with_store_timeout,
)
from dashboard.schemas.auth import LoginRequest
from dashboard.services.authenticate import authenticate
from dashboard.services.fetch_customers import CustomerQueries

logger = logging.getLogger(__name__)
router = APIRouter(tags=["auth"])


def _safe_callback(callback_url: str | None, fallback: str) -> str:
    if callback_url and callback_url.startswith("/") and not callback_url.startswith("//"):
        return callback_url
    return fallback


@router.get("/login")
async def login_page(callbackUrl: str | None = Query(None)):  # noqa: N803
    """Public login page descriptor for the presentation layer."""
    return {"page": "login", "callbackUrl": callbackUrl}


@router.post("/login")
async def login(
    body: LoginRequest,
    callbackUrl: str | None = Query(None),  # noqa: N803
    db: DatabaseSessionManager = Depends(get_db_manager),
    settings: Settings = Depends(get_settings),
):
    """Check credentials and start a session."""
    user = await with_store_timeout(
        authenticate(CustomerQueries(db), body.email, body.password),
        settings.store_timeout_seconds, "authenticate",
    )
    if user is None:
        raise AuthenticationError()
    response = RedirectResponse(
        _safe_callback(callbackUrl, settings.home_path),
        status_code=status.HTTP_303_SEE_OTHER,
    )
    response.set_cookie(
        settings.session_cookie_name,
        issue_session_token(str(user.id), settings.session_secret),
        httponly=True,
        samesite="lax",
    )
    logger.info(f"User {user.id} signed in")
    return response


@router.post("/logout")
async def logout(settings: Settings = Depends(get_settings)):
    response = RedirectResponse(
        settings.login_path, status_code=status.HTTP_303_SEE_OTHER,
    )
    response.delete_cookie(settings.session_cookie_name)
    return response
