"""Dashboard Schemas — overview cards, revenue chart and edit/create views.

Invariants:
    - SummaryCards totals are formatted strings, never null
    - RevenueChart labels are top-down ($NK ... $0K)
"""

from pydantic import BaseModel

from dashboard.schemas.customer import CustomerField
from dashboard.schemas.invoice import InvoiceEditForm, LatestInvoice


class RevenuePoint(BaseModel):
    month: str
    revenue: int


class SummaryCards(BaseModel):
    invoice_count: int
    customer_count: int
    total_paid: str
    total_pending: str


class RevenueChart(BaseModel):
    series: list[RevenuePoint]
    y_axis_labels: list[str]
    top_label: int


class DashboardOverview(BaseModel):
    revenue: RevenueChart
    latest_invoices: list[LatestInvoice]
    cards: SummaryCards


class InvoiceEditView(BaseModel):
    invoice: InvoiceEditForm
    customers: list[CustomerField]


class InvoiceCreateView(BaseModel):
    customers: list[CustomerField]
