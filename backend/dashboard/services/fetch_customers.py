"""Customer Queries — selection list, customers table with invoice totals, user lookup.

Invariants:
    - fetch_customers orders by name ascending
    - Customers with no invoices still appear (LEFT JOIN) with zero totals
    - fetch_user_by_email is for the credential check only; its result carries
      the password hash and must never be serialized to a client
"""

import logging

from sqlalchemy import case, func, or_, select

from dashboard.core.format_display import format_currency
from dashboard.core.repository_protocols import SessionProvider
from dashboard.models.customer import Customer
from dashboard.models.invoice import Invoice
from dashboard.models.user import User
from dashboard.schemas.auth import UserRecord
from dashboard.schemas.customer import CustomerField, CustomerTableRow

logger = logging.getLogger(__name__)


class CustomerQueries:
    """Read queries over customers (and users, for sign-in)."""

    def __init__(self, db: SessionProvider):
        self.db = db

    async def fetch_customers(self) -> list[CustomerField]:
        stmt = select(Customer.id, Customer.name).order_by(Customer.name.asc())
        async with self.db.session("fetch_customers") as session:
            rows = (await session.execute(stmt)).all()
        return [CustomerField(id=r.id, name=r.name) for r in rows]

    async def fetch_customers_with_invoice_totals(
        self, query: str,
    ) -> list[CustomerTableRow]:
        """Customers matching query by name or email, with per-customer totals."""
        total_pending = func.coalesce(func.sum(case(
            (Invoice.status == "pending", Invoice.amount), else_=0,
        )), 0)
        total_paid = func.coalesce(func.sum(case(
            (Invoice.status == "paid", Invoice.amount), else_=0,
        )), 0)
        stmt = (
            select(
                Customer.id, Customer.name, Customer.email, Customer.image_url,
                func.count(Invoice.id).label("total_invoices"),
                total_pending.label("total_pending"),
                total_paid.label("total_paid"),
            )
            .outerjoin(Invoice, Customer.id == Invoice.customer_id)
            .where(or_(
                Customer.name.icontains(query, autoescape=True),
                Customer.email.icontains(query, autoescape=True),
            ))
            .group_by(
                Customer.id, Customer.name, Customer.email, Customer.image_url,
            )
            .order_by(Customer.name.asc())
        )
        async with self.db.session("fetch_customers_with_invoice_totals") as session:
            rows = (await session.execute(stmt)).all()
        return [
            CustomerTableRow(
                id=r.id,
                name=r.name,
                email=r.email,
                image_url=r.image_url,
                total_invoices=r.total_invoices or 0,
                total_pending=format_currency(r.total_pending),
                total_paid=format_currency(r.total_paid),
            )
            for r in rows
        ]

    async def fetch_user_by_email(self, email: str) -> UserRecord | None:
        stmt = select(User).where(User.email == email)
        async with self.db.session("fetch_user_by_email") as session:
            user = (await session.execute(stmt)).scalar_one_or_none()
        if user is None:
            logger.info("No user for sign-in attempt")
            return None
        return UserRecord(
            id=user.id, name=user.name, email=user.email, password=user.password,
        )
