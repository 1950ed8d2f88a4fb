"""Credential Check — email + password -> user, for establishing a session.

Invariants:
    - Unknown email and wrong password are indistinguishable to the caller (None)
    - Routes read only the user id from the result; the hash is never serialized
"""

import logging

from dashboard.core.credentials import verify_password
from dashboard.schemas.auth import UserRecord
from dashboard.services.fetch_customers import CustomerQueries

logger = logging.getLogger(__name__)


async def authenticate(
    queries: CustomerQueries, email: str, password: str,
) -> UserRecord | None:
    user = await queries.fetch_user_by_email(email)
    if user is None or not verify_password(password, user.password):
        logger.warning("Rejected sign-in attempt")
        return None
    return user
