"""Invoice Schemas — form validation for mutations and projections for reads.

Invariants:
    - InvoiceForm: customerId is a customer UUID, amount is a Decimal > 0,
      status is exactly 'pending' or 'paid'; amount is capped at MAX_DOLLARS so its
      cents always fit the INTEGER column
    - parse_invoice_form never returns a partially valid form: any failing field
      raises InvoiceValidationError with one message per invalid field
    - Submitted values are echoed back on rejection so the form can be corrected

Design Decisions:
    - Decimal for amount: "19.99" must become exactly 1999 cents
    - Field-level messages come from a fixed table, not pydantic's defaults:
      users see the same text whichever rule (missing, unparseable, <= 0) failed
"""

from datetime import date
from decimal import Decimal
from typing import Any, Mapping
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from dashboard.core.domain_types import InvoiceStatus
from dashboard.core.errors import InvoiceValidationError
from dashboard.core.money import MAX_DOLLARS

FORM_FIELDS = ("customerId", "amount", "status")

FIELD_MESSAGES = {
    "customerId": "Please select a customer.",
    "amount": "Please enter an amount greater than $0.",
    "status": "Please select an invoice status.",
}


class InvoiceForm(BaseModel):
    """Validated invoice form. Built only through parse_invoice_form."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    customer_id: UUID = Field(alias="customerId")
    amount: Decimal = Field(gt=0, le=MAX_DOLLARS, allow_inf_nan=False)
    status: InvoiceStatus


def parse_invoice_form(
    fields: Mapping[str, Any],
    failure_message: str = "Missing Fields. Failed to save invoice.",
) -> InvoiceForm:
    """Validate a flat field map into an InvoiceForm or raise InvoiceValidationError."""
    values = {name: fields.get(name) for name in FORM_FIELDS}
    try:
        return InvoiceForm.model_validate(values)
    except ValidationError as e:
        errors: dict[str, list[str]] = {}
        for err in e.errors():
            field = str(err["loc"][0]) if err["loc"] else "form"
            message = FIELD_MESSAGES.get(field, err["msg"])
            messages = errors.setdefault(field, [])
            if message not in messages:
                messages.append(message)
        raise InvoiceValidationError(errors, values, failure_message) from e


# --- Read projections ---------------------------------------------------------

class LatestInvoice(BaseModel):
    """Latest-invoices card row; amount already formatted."""
    id: UUID
    name: str
    email: str
    image_url: str
    amount: str


class InvoiceRow(BaseModel):
    """Invoices table row; amount in cents, date as stored."""
    id: UUID
    customer_id: UUID
    name: str
    email: str
    image_url: str
    date: date
    amount: int
    status: InvoiceStatus


class InvoiceEditForm(BaseModel):
    """Edit-form pre-population; amount in dollars."""
    id: UUID
    customer_id: UUID
    amount: float
    status: InvoiceStatus


class PaginationInfo(BaseModel):
    current_page: int
    total_pages: int
    labels: list[int | str]


class InvoiceListView(BaseModel):
    query: str
    invoices: list[InvoiceRow]
    pagination: PaginationInfo
