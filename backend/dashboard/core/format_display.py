"""Display Formatting — pure converters from stored values to presentation strings.

Invariants:
    - All functions are PURE: no IO, no async, no DB
    - format_currency takes int cents and renders en-US dollars ("$1,234.56")
    - generate_pagination never returns more than 7 labels; "..." marks a gap
    - generate_y_axis steps by $1K from the rounded-up maximum down to $0K

Design Decisions:
    - Formatting lives here, not in SQL: the store returns raw integers and dates
    - Decimal for currency: cents / 100 must never show float artifacts
"""

from datetime import date
from decimal import Decimal
from typing import Iterable

ELLIPSIS = "..."


def format_currency(cents: int | None) -> str:
    """Render integer cents as a US-dollar display string."""
    value = Decimal(cents or 0) / 100
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_date_to_local(value: date | str) -> str:
    """Render an ISO date as 'Mon D, YYYY' (en-US medium style)."""
    d = date.fromisoformat(value) if isinstance(value, str) else value
    return f"{d:%b} {d.day}, {d.year}"


def generate_pagination(current_page: int, total_pages: int) -> list[int | str]:
    """Page button labels around current_page, eliding distant pages."""
    if total_pages <= 7:
        return list(range(1, total_pages + 1))
    if current_page <= 3:
        return [1, 2, 3, ELLIPSIS, total_pages - 1, total_pages]
    if current_page >= total_pages - 2:
        return [1, 2, ELLIPSIS, total_pages - 2, total_pages - 1, total_pages]
    return [
        1, ELLIPSIS,
        current_page - 1, current_page, current_page + 1,
        ELLIPSIS, total_pages,
    ]


def generate_y_axis(revenues: Iterable[int]) -> tuple[list[str], int]:
    """Chart y-axis labels in $1K steps. Returns (labels top-down, top value)."""
    highest = max(revenues, default=0)
    top_label = -(-highest // 1000) * 1000
    labels = [f"${i // 1000}K" for i in range(top_label, -1, -1000)]
    return labels, top_label
