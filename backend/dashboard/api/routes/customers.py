"""Customers Route — customers table with per-customer invoice totals."""

from fastapi import APIRouter, Depends, Query

from dashboard.config import Settings, get_settings
from dashboard.infrastructure.database import (
    DatabaseSessionManager, get_db_manager, with_store_timeout,
)
from dashboard.schemas.customer import CustomerTableRow
from dashboard.services.fetch_customers import CustomerQueries

router = APIRouter(prefix="/dashboard/customers", tags=["customers"])


@router.get("", response_model=list[CustomerTableRow])
async def list_customers(
    query: str = Query(""),
    db: DatabaseSessionManager = Depends(get_db_manager),
    settings: Settings = Depends(get_settings),
):
    return await with_store_timeout(
        CustomerQueries(db).fetch_customers_with_invoice_totals(query),
        settings.store_timeout_seconds, "fetch_customers_with_invoice_totals",
    )
