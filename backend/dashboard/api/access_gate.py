"""Access Gate Middleware — applies the authorization decision before any handler runs.

Invariants:
    - Runs for every HTTP request, before routing; a denied request never reaches
      a protected handler
    - Session presence = a session cookie carrying a validly signed token
    - DenyRedirect appends callbackUrl=<requested path and query> to the login path
    - All gate redirects are 303 so form POSTs are retried as GETs

Design Decisions:
    - Decision logic lives in core/enforce_access.py (pure); this module only
      adapts request -> decision -> response
"""

import logging
from urllib.parse import urlencode

from fastapi import FastAPI, Request, status
from fastapi.responses import RedirectResponse

from dashboard.config import get_settings
from dashboard.core.credentials import read_session_token
from dashboard.core.domain_types import AccessOutcome
from dashboard.core.enforce_access import decide_access

logger = logging.getLogger(__name__)


def session_user_id(request: Request) -> str | None:
    """User id from the signed session cookie, or None."""
    settings = get_settings()
    return read_session_token(
        request.cookies.get(settings.session_cookie_name), settings.session_secret,
    )


def register_access_gate(app: FastAPI) -> None:
    """Install the gate as HTTP middleware."""

    @app.middleware("http")
    async def access_gate(request: Request, call_next):
        settings = get_settings()
        path = request.url.path
        decision = decide_access(
            session_user_id(request) is not None,
            path,
            protected_prefix=settings.protected_prefix,
            public_paths=settings.public_paths,
            login_path=settings.login_path,
            home_path=settings.home_path,
        )
        if decision.allowed:
            return await call_next(request)

        location = decision.location
        if decision.outcome == AccessOutcome.DENY_REDIRECT:
            target = path + (f"?{request.url.query}" if request.url.query else "")
            location = f"{location}?{urlencode({'callbackUrl': target})}"
        logger.info(
            f"Access gate {decision.outcome.value}: {path} -> {location}",
            extra={"path": path, "outcome": decision.outcome.value},
        )
        return RedirectResponse(location, status_code=status.HTTP_303_SEE_OTHER)
