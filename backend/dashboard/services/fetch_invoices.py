"""Invoice Queries — filtered/paginated list, page count, lookup by id, edit view.

Invariants:
    - Search matches customer name, customer email, amount-as-text, date-as-text
      or status, case-insensitively, as a literal substring ('%' and '_' are not
      wildcards); the empty query matches every invoice
    - List and count share one predicate (_matching), so page_count * page_size
      always covers the rows the list can return
    - Ordering is date DESC then id: repeated calls on unchanged data are identical
    - fetch_invoice_by_id returns None for absence (including malformed ids);
      only store failures raise

Design Decisions:
    - icontains(autoescape=True) over hand-built ILIKE patterns: bound parameter,
      escaping handled by SQLAlchemy, portable to SQLite (lower() LIKE lower())
    - List view and edit view issue their two reads concurrently
"""

from sqlalchemy import String, cast, func, or_, select

from dashboard.core.errors import ResourceNotFoundError
from dashboard.core.domain_types import parse_invoice_id
from dashboard.core.format_display import generate_pagination
from dashboard.core.money import cents_to_dollars
from dashboard.core.pagination import page_count, page_offset
from dashboard.core.repository_protocols import SessionProvider
from dashboard.models.customer import Customer
from dashboard.models.invoice import Invoice
from dashboard.schemas.dashboard import InvoiceEditView
from dashboard.schemas.invoice import (
    InvoiceEditForm, InvoiceListView, InvoiceRow, PaginationInfo,
)
from dashboard.services.fetch_customers import CustomerQueries
from dashboard.services.read_helpers import gather_reads


def _matching(query: str):
    """WHERE clause shared by the invoice list and its page count."""
    return or_(
        Customer.name.icontains(query, autoescape=True),
        Customer.email.icontains(query, autoescape=True),
        cast(Invoice.amount, String).icontains(query, autoescape=True),
        cast(Invoice.date, String).icontains(query, autoescape=True),
        Invoice.status.icontains(query, autoescape=True),
    )


class InvoiceQueries:
    """Read queries behind the invoices pages."""

    def __init__(self, db: SessionProvider, page_size: int = 6):
        self.db = db
        self.page_size = page_size

    async def fetch_invoices_page(
        self, query: str, page: int, page_size: int | None = None,
    ) -> list[InvoiceRow]:
        """One page of invoices matching query, newest first."""
        size = self.page_size if page_size is None else page_size
        stmt = (
            select(
                Invoice.id, Invoice.customer_id, Invoice.amount,
                Invoice.date, Invoice.status,
                Customer.name, Customer.email, Customer.image_url,
            )
            .join(Customer, Invoice.customer_id == Customer.id)
            .where(_matching(query))
            .order_by(Invoice.date.desc(), Invoice.id)
            .limit(size)
            .offset(page_offset(page, size))
        )
        async with self.db.session("fetch_invoices_page") as session:
            rows = (await session.execute(stmt)).all()
        return [InvoiceRow.model_validate(dict(r._mapping)) for r in rows]

    async def fetch_invoice_page_count(
        self, query: str, page_size: int | None = None,
    ) -> int:
        """Pages needed for every invoice matching query."""
        size = self.page_size if page_size is None else page_size
        stmt = (
            select(func.count())
            .select_from(Invoice)
            .join(Customer, Invoice.customer_id == Customer.id)
            .where(_matching(query))
        )
        async with self.db.session("fetch_invoice_page_count") as session:
            total = (await session.execute(stmt)).scalar_one() or 0
        return page_count(total, size)

    async def fetch_invoice_by_id(self, invoice_id) -> InvoiceEditForm | None:
        """Edit-form projection (amount in dollars), or None when absent."""
        parsed = parse_invoice_id(invoice_id)
        if parsed is None:
            return None
        stmt = select(
            Invoice.id, Invoice.customer_id, Invoice.amount, Invoice.status,
        ).where(Invoice.id == parsed)
        async with self.db.session("fetch_invoice_by_id") as session:
            row = (await session.execute(stmt)).one_or_none()
        if row is None:
            return None
        return InvoiceEditForm(
            id=row.id,
            customer_id=row.customer_id,
            amount=cents_to_dollars(row.amount),
            status=row.status,
        )

    async def fetch_invoice_list_view(self, query: str, page: int) -> InvoiceListView:
        """Rows for one page plus pagination, both reads issued together."""
        invoices, total_pages = await gather_reads(
            self.fetch_invoices_page(query, page),
            self.fetch_invoice_page_count(query),
        )
        return InvoiceListView(
            query=query,
            invoices=invoices,
            pagination=PaginationInfo(
                current_page=page,
                total_pages=total_pages,
                labels=generate_pagination(page, total_pages),
            ),
        )

    async def fetch_invoice_edit_view(self, invoice_id) -> InvoiceEditView:
        """Invoice plus customer options; ResourceNotFoundError when absent."""
        invoice, customers = await gather_reads(
            self.fetch_invoice_by_id(invoice_id),
            CustomerQueries(self.db).fetch_customers(),
        )
        if invoice is None:
            raise ResourceNotFoundError("Invoice", str(invoice_id))
        return InvoiceEditView(invoice=invoice, customers=customers)
