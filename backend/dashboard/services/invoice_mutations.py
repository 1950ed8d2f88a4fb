"""Invoice Mutations — validate -> transform -> persist -> invalidate -> redirect.

Invariants:
    - Validation failure raises InvoiceValidationError before any store call
    - Each mutation is exactly one statement (INSERT / UPDATE by id / DELETE by id)
      committed in its own session; no application-level locking
    - UPDATE and DELETE on a missing (or malformed) id are store no-ops; the
      pipeline still invalidates and, for update, redirects
    - A store failure raises DataAccessError and skips invalidation and redirect
    - Delete is idempotent: repeating it is never an error

Design Decisions:
    - Concurrent update/delete of the same id: last committed statement wins
    - Clock injected (today callable): tests pin the invoice date
    - Outcome returned as a value (MutationOutcome); the route turns it into
      an HTTP redirect or 204
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Callable, Mapping

from sqlalchemy import delete, insert, update

from dashboard.core.domain_types import InvoiceId, parse_invoice_id
from dashboard.core.invoice_write import prepare_create, prepare_update
from dashboard.core.repository_protocols import SessionProvider, ViewCacheLike
from dashboard.models.invoice import Invoice
from dashboard.schemas.invoice import parse_invoice_form

logger = logging.getLogger(__name__)


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


@dataclass(frozen=True)
class MutationOutcome:
    """Terminal state of a mutation: what was invalidated, where to navigate."""
    invalidated: tuple[str, ...]
    redirect_to: str | None = None
    invoice_id: InvoiceId | None = None
    rows_affected: int = 0


class InvoiceMutations:
    """Create/update/delete entry points for invoice form submissions."""

    def __init__(
        self,
        db: SessionProvider,
        view_cache: ViewCacheLike,
        invoices_path: str = "/dashboard/invoices",
        today: Callable[[], date] = utc_today,
    ):
        self.db = db
        self.view_cache = view_cache
        self.invoices_path = invoices_path
        self.today = today

    def _invalidate(self) -> tuple[str, ...]:
        self.view_cache.invalidate(self.invoices_path)
        return (self.invoices_path,)

    async def create_invoice(self, fields: Mapping[str, Any]) -> MutationOutcome:
        form = parse_invoice_form(
            fields, "Missing Fields. Failed to Create Invoice.",
        )
        write = prepare_create(
            form.customer_id, form.amount, form.status, self.today(),
        )
        invoice_id = InvoiceId(uuid.uuid4())
        async with self.db.session("create_invoice") as session:
            await session.execute(
                insert(Invoice).values(id=invoice_id, **write.insert_values()),
            )
            await session.commit()
        logger.info(
            f"Created invoice {invoice_id} ({write.amount} cents, {write.status.value})",
            extra={"invoice_id": str(invoice_id), "operation": "create_invoice"},
        )
        return MutationOutcome(
            invalidated=self._invalidate(),
            redirect_to=self.invoices_path,
            invoice_id=invoice_id,
            rows_affected=1,
        )

    async def update_invoice(
        self, invoice_id, fields: Mapping[str, Any],
    ) -> MutationOutcome:
        form = parse_invoice_form(
            fields, "Missing Fields. Failed to Update Invoice.",
        )
        write = prepare_update(form.customer_id, form.amount, form.status)
        parsed = parse_invoice_id(invoice_id)
        affected = 0
        if parsed is not None:
            async with self.db.session("update_invoice") as session:
                result = await session.execute(
                    update(Invoice)
                    .where(Invoice.id == parsed)
                    .values(**write.update_values()),
                )
                affected = result.rowcount
                await session.commit()
        if not affected:
            logger.warning(
                f"Update matched no invoice {invoice_id}",
                extra={"invoice_id": str(invoice_id), "operation": "update_invoice"},
            )
        return MutationOutcome(
            invalidated=self._invalidate(),
            redirect_to=self.invoices_path,
            invoice_id=parsed,
            rows_affected=affected,
        )

    async def delete_invoice(self, invoice_id) -> MutationOutcome:
        parsed = parse_invoice_id(invoice_id)
        affected = 0
        if parsed is not None:
            async with self.db.session("delete_invoice") as session:
                result = await session.execute(
                    delete(Invoice).where(Invoice.id == parsed),
                )
                affected = result.rowcount
                await session.commit()
        logger.info(
            f"Deleted invoice {invoice_id} ({affected} rows)",
            extra={"invoice_id": str(invoice_id), "operation": "delete_invoice"},
        )
        return MutationOutcome(
            invalidated=self._invalidate(),
            invoice_id=parsed,
            rows_affected=affected,
        )
