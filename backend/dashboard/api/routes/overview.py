"""Dashboard Overview Route — revenue chart, latest invoices and summary cards."""

import logging

from fastapi import APIRouter, Depends

from dashboard.config import Settings, get_settings
from dashboard.infrastructure.database import (
    DatabaseSessionManager, get_db_manager, with_store_timeout,
)
from dashboard.schemas.dashboard import DashboardOverview
from dashboard.services.fetch_dashboard import DashboardQueries

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardOverview)
async def get_overview(
    db: DatabaseSessionManager = Depends(get_db_manager),
    settings: Settings = Depends(get_settings),
):
    """All overview data, fetched concurrently; any failing read fails the page."""
    queries = DashboardQueries(db, latest_limit=settings.latest_invoices_limit)
    return await with_store_timeout(
        queries.fetch_dashboard_overview(),
        settings.store_timeout_seconds, "fetch_dashboard_overview",
    )
