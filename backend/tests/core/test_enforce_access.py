"""Authorization Gate — pure admission decisions.

Tests cover:
    - Protected paths without a session -> DenyRedirect to the login path
    - Protected paths with a session -> Allow
    - Public paths with a session -> RedirectAway to home
    - Unrelated paths always allowed
    - Prefix matching respects path segments
"""

from dashboard.core.domain_types import AccessOutcome
from dashboard.core.enforce_access import (
    decide_access,
    is_public_path,
    is_under_prefix,
)


def test_protected_path_without_session_redirects_to_login():
    decision = decide_access(False, "/dashboard/invoices")
    assert decision.outcome == AccessOutcome.DENY_REDIRECT
    assert decision.location == "/login"
    assert not decision.allowed


def test_protected_root_without_session_redirects_to_login():
    assert decide_access(False, "/dashboard").outcome == AccessOutcome.DENY_REDIRECT


def test_protected_path_with_session_is_allowed():
    decision = decide_access(True, "/dashboard/customers")
    assert decision.allowed
    assert decision.location is None


def test_login_with_session_redirects_home():
    decision = decide_access(True, "/login")
    assert decision.outcome == AccessOutcome.REDIRECT_AWAY
    assert decision.location == "/dashboard"


def test_login_without_session_is_allowed():
    assert decide_access(False, "/login").allowed


def test_unrelated_path_allowed_either_way():
    assert decide_access(False, "/api/v1/health/").allowed
    assert decide_access(True, "/api/v1/health/").allowed


def test_sibling_of_prefix_is_not_protected():
    assert decide_access(False, "/dashboards").allowed


def test_custom_paths_are_honoured():
    decision = decide_access(
        False, "/admin/users",
        protected_prefix="/admin", login_path="/signin",
    )
    assert decision.outcome == AccessOutcome.DENY_REDIRECT
    assert decision.location == "/signin"


def test_is_under_prefix_segments():
    assert is_under_prefix("/dashboard", "/dashboard")
    assert is_under_prefix("/dashboard/invoices/1/edit", "/dashboard/")
    assert not is_under_prefix("/dashboardx", "/dashboard")


def test_is_public_path_ignores_trailing_slash():
    assert is_public_path("/login/", ["/login"])
    assert not is_public_path("/login/extra", ["/login"])
