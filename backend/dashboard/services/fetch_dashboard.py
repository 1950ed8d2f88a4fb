"""Dashboard Queries — revenue series, latest invoices, summary cards, overview.

Invariants:
    - Every statement is a SQLAlchemy expression with bound parameters
    - Each read opens its own session via SessionProvider.session(operation)
    - Null aggregates coalesce to zero before formatting; callers never see None
    - Store failures surface as DataAccessError from the session boundary

Design Decisions:
    - Summary counts are three independent statements run concurrently rather
      than one combined query: each is a trivially cheap aggregate and they do
      not block each other
    - Revenue rows are sorted by calendar month in Python: the table stores
      month labels ("Jan".."Dec"), which do not sort lexically
"""

from sqlalchemy import case, func, select

from dashboard.core.format_display import format_currency, generate_y_axis
from dashboard.core.repository_protocols import SessionProvider
from dashboard.models.customer import Customer
from dashboard.models.invoice import Invoice
from dashboard.models.revenue import Revenue
from dashboard.schemas.dashboard import (
    DashboardOverview, RevenueChart, RevenuePoint, SummaryCards,
)
from dashboard.schemas.invoice import LatestInvoice
from dashboard.services.read_helpers import gather_reads


MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _month_rank(month: str) -> int:
    try:
        return MONTHS.index(month[:3].title())
    except ValueError:
        return len(MONTHS)


class DashboardQueries:
    """Read queries behind the dashboard overview page."""

    def __init__(self, db: SessionProvider, latest_limit: int = 5):
        self.db = db
        self.latest_limit = latest_limit

    async def fetch_revenue_series(self) -> list[RevenuePoint]:
        """Full revenue table ordered by calendar month."""
        async with self.db.session("fetch_revenue_series") as session:
            result = await session.execute(select(Revenue.month, Revenue.revenue))
            rows = result.all()
        points = [RevenuePoint(month=r.month, revenue=r.revenue) for r in rows]
        return sorted(points, key=lambda p: _month_rank(p.month))

    async def fetch_latest_invoices(self, limit: int | None = None) -> list[LatestInvoice]:
        """Most recent invoices with customer identity, amounts formatted."""
        limit = self.latest_limit if limit is None else limit
        stmt = (
            select(
                Invoice.id, Invoice.amount,
                Customer.name, Customer.email, Customer.image_url,
            )
            .join(Customer, Invoice.customer_id == Customer.id)
            .order_by(Invoice.date.desc(), Invoice.id)
            .limit(limit)
        )
        async with self.db.session("fetch_latest_invoices") as session:
            rows = (await session.execute(stmt)).all()
        return [
            LatestInvoice(
                id=r.id, name=r.name, email=r.email,
                image_url=r.image_url, amount=format_currency(r.amount),
            )
            for r in rows
        ]

    async def _count_invoices(self) -> int:
        async with self.db.session("count_invoices") as session:
            result = await session.execute(
                select(func.count()).select_from(Invoice),
            )
            return result.scalar_one() or 0

    async def _count_customers(self) -> int:
        async with self.db.session("count_customers") as session:
            result = await session.execute(
                select(func.count()).select_from(Customer),
            )
            return result.scalar_one() or 0

    async def _sum_by_status(self) -> tuple[int, int]:
        stmt = select(
            func.coalesce(func.sum(case(
                (Invoice.status == "paid", Invoice.amount), else_=0,
            )), 0).label("paid"),
            func.coalesce(func.sum(case(
                (Invoice.status == "pending", Invoice.amount), else_=0,
            )), 0).label("pending"),
        )
        async with self.db.session("sum_invoices_by_status") as session:
            row = (await session.execute(stmt)).one()
        return int(row.paid or 0), int(row.pending or 0)

    async def fetch_summary_counts(self) -> SummaryCards:
        """Invoice/customer counts and paid/pending totals, read concurrently."""
        invoice_count, customer_count, (paid, pending) = await gather_reads(
            self._count_invoices(),
            self._count_customers(),
            self._sum_by_status(),
        )
        return SummaryCards(
            invoice_count=invoice_count,
            customer_count=customer_count,
            total_paid=format_currency(paid),
            total_pending=format_currency(pending),
        )

    async def fetch_dashboard_overview(self) -> DashboardOverview:
        """Revenue chart, latest invoices and cards in one concurrent fetch."""
        series, latest, cards = await gather_reads(
            self.fetch_revenue_series(),
            self.fetch_latest_invoices(),
            self.fetch_summary_counts(),
        )
        labels, top_label = generate_y_axis(p.revenue for p in series)
        return DashboardOverview(
            revenue=RevenueChart(
                series=series, y_axis_labels=labels, top_label=top_label,
            ),
            latest_invoices=latest,
            cards=cards,
        )
