"""Authorization Gate — pure admission decision for an incoming request path.

Invariants:
    - All functions are PURE: no IO, no async, no request objects
    - Protected paths require a session; without one -> DenyRedirect(login)
    - Public paths (login) with a session -> RedirectAway(home)
    - Every other path is allowed regardless of session

Design Decisions:
    - Segment-aware prefix match: "/dashboard" protects "/dashboard" and
      "/dashboard/..." but not "/dashboards"
    - Returns a value (AccessDecision), never raises: the middleware decides how
      to turn it into a response
"""

from dataclasses import dataclass
from typing import Iterable

from dashboard.core.domain_types import AccessOutcome


@dataclass(frozen=True)
class AccessDecision:
    outcome: AccessOutcome
    location: str | None = None

    @property
    def allowed(self) -> bool:
        return self.outcome == AccessOutcome.ALLOW


ALLOW = AccessDecision(AccessOutcome.ALLOW)


def is_under_prefix(path: str, prefix: str) -> bool:
    """True when path equals prefix or continues it with a '/' segment."""
    prefix = prefix.rstrip("/")
    return path == prefix or path.startswith(prefix + "/")


def is_public_path(path: str, public_paths: Iterable[str]) -> bool:
    normalized = path.rstrip("/") or "/"
    return any(normalized == (p.rstrip("/") or "/") for p in public_paths)


def decide_access(
    session_present: bool,
    requested_path: str,
    *,
    protected_prefix: str = "/dashboard",
    public_paths: Iterable[str] = ("/login",),
    login_path: str = "/login",
    home_path: str = "/dashboard",
) -> AccessDecision:
    """Decide Allow / DenyRedirect(login) / RedirectAway(home) for one request."""
    if is_under_prefix(requested_path, protected_prefix):
        if session_present:
            return ALLOW
        return AccessDecision(AccessOutcome.DENY_REDIRECT, login_path)
    if session_present and is_public_path(requested_path, public_paths):
        return AccessDecision(AccessOutcome.REDIRECT_AWAY, home_path)
    return ALLOW
