"""Customer Schemas — projections for selection controls and the customers table."""

from uuid import UUID

from pydantic import BaseModel


class CustomerField(BaseModel):
    """Customer option for the invoice form's customer select."""
    id: UUID
    name: str


class CustomerTableRow(BaseModel):
    """Customer with invoice aggregates; totals already formatted."""
    id: UUID
    name: str
    email: str
    image_url: str
    total_invoices: int
    total_pending: str
    total_paid: str
