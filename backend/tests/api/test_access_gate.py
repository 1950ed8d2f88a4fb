"""Access Gate — middleware redirects for protected and public paths.

Tests cover:
    - No session on a protected path -> 303 to login with callbackUrl
    - callbackUrl keeps the requested query string
    - Forged cookies count as no session
    - Session on the login page -> 303 to the dashboard home
    - Health probes and unrelated paths pass through without a session
"""

from urllib.parse import parse_qs, urlparse

from dashboard.config import get_settings


async def test_protected_path_redirects_to_login(anon_client):
    res = await anon_client.get("/dashboard")
    assert res.status_code == 303
    location = urlparse(res.headers["location"])
    assert location.path == "/login"
    assert parse_qs(location.query)["callbackUrl"] == ["/dashboard"]


async def test_callback_url_keeps_query(anon_client):
    res = await anon_client.get("/dashboard/invoices?query=lee&page=2")
    assert res.status_code == 303
    location = urlparse(res.headers["location"])
    assert parse_qs(location.query)["callbackUrl"] == ["/dashboard/invoices?query=lee&page=2"]


async def test_mutations_are_gated_too(anon_client):
    res = await anon_client.delete("/dashboard/invoices/anything")
    assert res.status_code == 303
    assert res.headers["location"].startswith("/login")


async def test_forged_cookie_is_no_session(anon_client):
    settings = get_settings()
    anon_client.cookies.set(settings.session_cookie_name, "user-1.forged-signature")
    res = await anon_client.get("/dashboard")
    assert res.status_code == 303
    assert res.headers["location"].startswith("/login")


async def test_signed_in_user_is_sent_away_from_login(client):
    res = await client.get("/login")
    assert res.status_code == 303
    assert res.headers["location"] == "/dashboard"


async def test_login_page_is_public(anon_client):
    res = await anon_client.get("/login")
    assert res.status_code == 200
    assert res.json()["page"] == "login"


async def test_health_needs_no_session(anon_client):
    res = await anon_client.get("/api/v1/health/")
    assert res.status_code == 200


async def test_sibling_path_is_not_protected(anon_client):
    res = await anon_client.get("/dashboards")
    assert res.status_code == 404
