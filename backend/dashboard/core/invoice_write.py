"""Invoice Write Preparation — the Transformed step of the mutation pipeline.

Invariants:
    - Output amount is int cents: dollars_to_cents(validated amount)
    - Create captures the invoice date once, in ISO form; update never touches date
    - Pure: the caller supplies "today", no clock reads here
"""

from dataclasses import dataclass
import datetime
from decimal import Decimal

from dashboard.core.domain_types import Cents, CustomerId, InvoiceStatus
from dashboard.core.money import dollars_to_cents


@dataclass(frozen=True)
class InvoiceWrite:
    """Column values for one INSERT or UPDATE of the invoices table."""
    customer_id: CustomerId
    amount: Cents
    status: InvoiceStatus
    invoice_date: datetime.date | None = None

    def update_values(self) -> dict:
        return {
            "customer_id": self.customer_id,
            "amount": self.amount,
            "status": self.status.value,
        }

    def insert_values(self) -> dict:
        if self.invoice_date is None:
            raise ValueError("insert requires an invoice date")
        return {**self.update_values(), "date": self.invoice_date}


def prepare_create(
    customer_id: CustomerId, amount: Decimal, status: InvoiceStatus, today: datetime.date,
) -> InvoiceWrite:
    return InvoiceWrite(customer_id, dollars_to_cents(amount), status, today)


def prepare_update(
    customer_id: CustomerId, amount: Decimal, status: InvoiceStatus,
) -> InvoiceWrite:
    return InvoiceWrite(customer_id, dollars_to_cents(amount), status)
