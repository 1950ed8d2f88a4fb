"""API test fixtures — FastAPI app wired to the per-test store.

Invariants:
    - app.state carries the test db_manager and a fresh ViewCache per test
    - anon_client sends no cookie; client carries a validly signed session cookie
    - Redirects are never followed: tests assert status and Location directly

Design Decisions:
    - ASGITransport does not run the lifespan, so app.state is set here instead
"""

import pytest
from httpx import ASGITransport, AsyncClient

from dashboard.config import get_settings
from dashboard.core.credentials import issue_session_token
from dashboard.infrastructure.view_cache import ViewCache
from dashboard.main import app


@pytest.fixture
def wired_app(db_manager):
    app.state.db_manager = db_manager
    app.state.view_cache = ViewCache(ttl_seconds=30.0)
    yield app
    del app.state.db_manager
    del app.state.view_cache


@pytest.fixture
async def anon_client(wired_app):
    async with AsyncClient(
        transport=ASGITransport(app=wired_app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def client(wired_app, seeded):
    settings = get_settings()
    token = issue_session_token(str(seeded["user_id"]), settings.session_secret)
    async with AsyncClient(
        transport=ASGITransport(app=wired_app),
        base_url="http://test",
        cookies={settings.session_cookie_name: token},
    ) as c:
        yield c
