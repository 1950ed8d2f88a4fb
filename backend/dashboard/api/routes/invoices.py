"""Invoice Routes — list/search/paginate, create/edit views, and form mutations.

Invariants:
    - Reads are bounded by settings.store_timeout_seconds
    - The list view is served from the ViewCache when fresh; every mutation
      invalidates it before responding
    - Successful create/update answer 303 to the invoices list; delete answers 204
    - Form rejection answers 400 with per-field messages and the submitted values

Design Decisions:
    - Mutation bodies are flat JSON maps of field -> string value; validation
      happens in the service (parse_invoice_form), not in FastAPI's body model,
      so the error shape is the form's, not FastAPI's
    - page parsed leniently: missing/non-numeric/below-one is page 1
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Response, status
from fastapi.responses import RedirectResponse

from dashboard.config import Settings, get_settings
from dashboard.core.pagination import parse_page
from dashboard.infrastructure.database import (
    DatabaseSessionManager, get_db_manager, with_store_timeout,
)
from dashboard.infrastructure.view_cache import ViewCache, get_view_cache
from dashboard.schemas.dashboard import InvoiceCreateView, InvoiceEditView
from dashboard.schemas.invoice import InvoiceListView
from dashboard.services.fetch_customers import CustomerQueries
from dashboard.services.fetch_invoices import InvoiceQueries
from dashboard.services.invoice_mutations import InvoiceMutations

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/dashboard/invoices", tags=["invoices"])


def get_invoice_queries(
    db: DatabaseSessionManager = Depends(get_db_manager),
    settings: Settings = Depends(get_settings),
) -> InvoiceQueries:
    return InvoiceQueries(db, page_size=settings.invoices_page_size)


def get_invoice_mutations(
    db: DatabaseSessionManager = Depends(get_db_manager),
    cache: ViewCache = Depends(get_view_cache),
    settings: Settings = Depends(get_settings),
) -> InvoiceMutations:
    return InvoiceMutations(db, cache, invoices_path=settings.invoices_path)


@router.get("", response_model=InvoiceListView)
async def list_invoices(
    query: str = Query(""),
    page: str | None = Query(None),
    queries: InvoiceQueries = Depends(get_invoice_queries),
    cache: ViewCache = Depends(get_view_cache),
    settings: Settings = Depends(get_settings),
):
    """Invoices matching query, one page at a time (cached until a mutation)."""
    current_page = parse_page(page)
    key = f"{query}\x00{current_page}"
    cached = cache.get(settings.invoices_path, key)
    if cached is not None:
        return cached
    view = await with_store_timeout(
        queries.fetch_invoice_list_view(query, current_page),
        settings.store_timeout_seconds, "fetch_invoice_list_view",
    )
    cache.put(settings.invoices_path, key, view)
    return view


@router.get("/pages")
async def count_invoice_pages(
    query: str = Query(""),
    queries: InvoiceQueries = Depends(get_invoice_queries),
    settings: Settings = Depends(get_settings),
):
    """Number of pages for query at the configured page size."""
    total_pages = await with_store_timeout(
        queries.fetch_invoice_page_count(query),
        settings.store_timeout_seconds, "fetch_invoice_page_count",
    )
    return {"query": query, "total_pages": total_pages}


@router.get("/create", response_model=InvoiceCreateView)
async def create_invoice_view(
    db: DatabaseSessionManager = Depends(get_db_manager),
    settings: Settings = Depends(get_settings),
):
    """Customer options for the create form."""
    customers = await with_store_timeout(
        CustomerQueries(db).fetch_customers(),
        settings.store_timeout_seconds, "fetch_customers",
    )
    return InvoiceCreateView(customers=customers)


@router.post("")
async def create_invoice(
    fields: dict[str, Any] = Body(...),
    mutations: InvoiceMutations = Depends(get_invoice_mutations),
):
    """Create an invoice from form fields, then redirect to the list."""
    outcome = await mutations.create_invoice(fields)
    return RedirectResponse(
        outcome.redirect_to, status_code=status.HTTP_303_SEE_OTHER,
    )


@router.get("/{invoice_id}/edit", response_model=InvoiceEditView)
async def edit_invoice_view(
    invoice_id: str,
    queries: InvoiceQueries = Depends(get_invoice_queries),
    settings: Settings = Depends(get_settings),
):
    """Invoice (amount in dollars) and customer options; 404 when absent."""
    return await with_store_timeout(
        queries.fetch_invoice_edit_view(invoice_id),
        settings.store_timeout_seconds, "fetch_invoice_edit_view",
    )


@router.put("/{invoice_id}")
async def update_invoice(
    invoice_id: str,
    fields: dict[str, Any] = Body(...),
    mutations: InvoiceMutations = Depends(get_invoice_mutations),
):
    """Replace customer, amount and status, then redirect to the list."""
    outcome = await mutations.update_invoice(invoice_id, fields)
    return RedirectResponse(
        outcome.redirect_to, status_code=status.HTTP_303_SEE_OTHER,
    )


@router.delete("/{invoice_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_invoice(
    invoice_id: str,
    mutations: InvoiceMutations = Depends(get_invoice_mutations),
):
    """Delete by id. Idempotent: a missing id is still 204."""
    await mutations.delete_invoice(invoice_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
